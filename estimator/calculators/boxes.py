"""
Box-counted fasteners: converts an item COUNT into BOXES.
"""

from .base import BaseCalculator


class BoxesCalculator(BaseCalculator):

    DEFAULT_UNIT = "box"

    def calculate(self, fields: dict) -> dict:
        count = self.parse_number(fields.get("count"))
        return self.make_row(count / self.safe_divisor(fields.get("per_box")), fields)
