"""
Header calculator.

  - LVL (engineered): qty_raw (lf)  = lvl_pieces * lvl_length
  - Lumber:           qty_raw (pcs) = header_lf / board_len_ft

The lumber divisor is clamped to 1 like every other board-length division;
a header with no parsed board length reads as 1 ft boards.
"""

from .base import BaseCalculator
from .families import is_lvl


class HeaderCalculator(BaseCalculator):

    DEFAULT_WASTE_PCT = 5.0

    def calculate(self, fields: dict) -> dict:
        lvl = self.parse_flag(fields.get("is_lvl"))
        if lvl is None:
            lvl = is_lvl(self.family_of(fields))

        if lvl:
            qty_raw = self.parse_number(fields.get("lvl_pieces")) * self.parse_number(fields.get("lvl_length"))
            return self.make_row(qty_raw, fields, unit="lf")

        header_lf = self.parse_number(fields.get("header_lf"))
        board_len_ft = self.board_length_ft(fields)
        row = self.make_row(header_lf / self.safe_divisor(board_len_ft), fields, unit="pcs")
        row["board_len_ft"] = board_len_ft
        return row
