"""
Tape calculator.

Rolls are rounded up BEFORE waste is applied, then waste rounds up again.
151 LF on 75 ft rolls at 10% -> ceil(151/75)=3 -> ceil(3*1.1)=4.
"""

import math

from .base import BaseCalculator


class TapeCalculator(BaseCalculator):

    DEFAULT_WASTE_PCT = 5.0
    DEFAULT_UNIT = "roll"

    def calculate(self, fields: dict) -> dict:
        seam_lf = self.parse_number(fields.get("seam_lf"))
        qty_raw = seam_lf / self.safe_divisor(fields.get("roll_len_ft"))
        rolls_base = math.ceil(qty_raw)
        qty_final = self.apply_waste(rolls_base, self.waste_pct(fields))
        return self.make_row(qty_raw, fields, qty_final=qty_final)
