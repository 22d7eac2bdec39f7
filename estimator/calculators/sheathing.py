"""
Sheathing calculator, 4x8 sheets.

qty_raw (sheets) = length_lf * height_ft / 32
"""

from .base import BaseCalculator, SHEET_SQ_FT


class SheathingCalculator(BaseCalculator):

    DEFAULT_UNIT = "sheet"

    def calculate(self, fields: dict) -> dict:
        length_lf = self.parse_number(fields.get("length_lf"))
        height_ft = self.parse_number(fields.get("height_ft"))
        return self.make_row(length_lf * height_ft / SHEET_SQ_FT, fields)
