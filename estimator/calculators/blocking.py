"""
Blocking calculator.

One row every 4 ft of wall height minus the plate line; walls 4 ft and
under get no rows.
"""

import math

from .base import BaseCalculator

BLOCKING_ROW_SPACING_FT = 4.0


class BlockingCalculator(BaseCalculator):

    def calculate(self, fields: dict) -> dict:
        length_lf = self.parse_number(fields.get("length_lf"))
        height_ft = self.parse_number(fields.get("height_ft"))
        board_len_ft = self.board_length_ft(fields)

        rows = max(0, math.ceil(height_ft / BLOCKING_ROW_SPACING_FT - 1))
        per_row = length_lf / self.safe_divisor(board_len_ft)
        row = self.make_row(per_row * rows, fields)
        row["board_len_ft"] = board_len_ft
        return row
