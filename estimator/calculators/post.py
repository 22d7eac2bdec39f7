"""
Post calculator.

  - LVL / Versa column: qty_raw (lf)  = pieces * height_ft
  - Lumber:             qty_raw (pcs) = pieces_per_post * num_posts
"""

from .base import BaseCalculator
from .families import is_lvl, is_versa_column


class PostCalculator(BaseCalculator):

    DEFAULT_WASTE_PCT = 5.0

    def calculate(self, fields: dict) -> dict:
        linear = self.parse_flag(fields.get("is_linear_lf"))
        if linear is None:
            family = self.family_of(fields)
            linear = is_lvl(family) or is_versa_column(family)

        if linear:
            qty_raw = self.parse_number(fields.get("pieces")) * self.parse_number(fields.get("height_ft"))
            return self.make_row(qty_raw, fields, unit="lf")

        qty_raw = self.parse_number(fields.get("pieces_per_post")) * self.parse_number(fields.get("num_posts"))
        return self.make_row(qty_raw, fields, unit="pcs")
