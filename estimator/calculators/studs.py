"""
Stud calculator.

studs along the run = floor(LF*12 / spacing) + 1 (end stud), times the
per-location multiplier. The multiplier applies uniformly to the whole run.
"""

import math

from .base import BaseCalculator


class StudsCalculator(BaseCalculator):

    DEFAULT_SPACING_IN = 16.0

    def calculate(self, fields: dict) -> dict:
        length_lf = self.parse_number(fields.get("length_lf"))
        spacing_in = self.parse_number(fields.get("spacing_in")) or self.DEFAULT_SPACING_IN
        multiplier = self.parse_number(fields.get("multiplier")) or 1.0

        studs_along = math.floor(length_lf * 12 / max(1.0, spacing_in)) + 1
        qty_raw = studs_along * max(1.0, multiplier)
        return self.make_row(qty_raw, fields)
