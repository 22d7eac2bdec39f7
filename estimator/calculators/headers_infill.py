"""
Headers infill calculator.

Pooled header LF from qualifying lumber families becomes infill sheets:
3 ft nominal infill height, 32 sq ft per sheet, both wall faces.
"""

from .base import BaseCalculator, SHEET_SQ_FT

INFILL_HEIGHT_FT = 3.0
INFILL_FACES = 2


class HeadersInfillCalculator(BaseCalculator):

    DEFAULT_WASTE_PCT = 5.0
    DEFAULT_UNIT = "sheet"

    def calculate(self, fields: dict) -> dict:
        pool = self.parse_number(fields.get("header_lf_pool"))
        qty_raw = (pool / INFILL_HEIGHT_FT / SHEET_SQ_FT) * INFILL_FACES
        return self.make_row(qty_raw, fields)
