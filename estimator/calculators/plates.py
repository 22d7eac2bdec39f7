"""
Bottom / top plate calculator.

qty_raw (pcs) = length_lf / board_len_ft
"""

from .base import BaseCalculator


class PlatesCalculator(BaseCalculator):

    DEFAULT_BOARD_LEN_FT = 0.0

    def calculate(self, fields: dict) -> dict:
        length_lf = self.parse_number(fields.get("length_lf"))
        board_len_ft = self.board_length_ft(fields, self.DEFAULT_BOARD_LEN_FT)
        qty_raw = length_lf / self.safe_divisor(board_len_ft)
        row = self.make_row(qty_raw, fields)
        row["board_len_ft"] = board_len_ft
        return row
