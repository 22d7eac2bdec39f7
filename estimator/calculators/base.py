"""
Abstract base class for all material calculators.

Input: a fields dict (geometry, waste %, catalog item)
Output: Row dict (qty_raw, qty_final, unit, unit_price, subtotal)
"""

import logging
import math
from abc import ABC, abstractmethod

from .parsing import apply_waste, as_catalog_item, parse_board_length_ft, to_flag, to_number, unit_price_from

logger = logging.getLogger(__name__)

SHEET_SQ_FT = 32.0  # one 4x8 sheet


class BaseCalculator(ABC):
    """All material calculators inherit from this."""

    DEFAULT_WASTE_PCT = 0.0
    DEFAULT_UNIT = "pcs"

    @abstractmethod
    def calculate(self, fields: dict) -> dict:
        """
        Takes the raw row inputs.
        Returns a Row dict.
        """
        pass

    # --- Helper methods for all calculators ---

    def apply_waste(self, quantity: float, waste_pct: float) -> int:
        """Apply waste percentage. Always round UP to next whole unit."""
        return apply_waste(quantity, waste_pct)

    def parse_number(self, value, default: float = 0.0) -> float:
        """Parse a numeric value from user input."""
        return to_number(value, default)

    def parse_flag(self, value, default=None):
        """Parse a yes/no flag from user input. None when not given."""
        return to_flag(value, default)

    def safe_divisor(self, value, default: float = 1.0) -> float:
        """Divisors never drop below 1."""
        return max(1.0, self.parse_number(value, default))

    def waste_pct(self, fields: dict) -> float:
        """Row waste %, falling back to the calculator's default when not given."""
        value = fields.get("waste_pct")
        if value is None:
            return self.DEFAULT_WASTE_PCT
        return self.parse_number(value)

    def unit_for(self, fields: dict) -> str:
        """Explicit unit, else the catalog item's unit, else the calculator default."""
        if fields.get("unit"):
            return str(fields["unit"])
        item = as_catalog_item(fields.get("item"))
        if item is not None and item.unit:
            return item.unit
        return self.DEFAULT_UNIT

    def board_length_ft(self, fields: dict, default: float = 0.0) -> float:
        """board_len_ft from fields, else parsed from the item size label, else default."""
        if fields.get("board_len_ft") is not None:
            return self.parse_number(fields.get("board_len_ft"), default)
        item = as_catalog_item(fields.get("item"))
        parsed = parse_board_length_ft(item.size_label) if item is not None else None
        return parsed if parsed is not None else default

    def family_of(self, fields: dict) -> str:
        """Family label of the row, from an explicit 'family' field or the catalog item."""
        if fields.get("family"):
            return str(fields["family"])
        item = as_catalog_item(fields.get("item"))
        return item.family_label if item is not None else ""

    def make_row(self, qty_raw: float, fields: dict, unit: str = None,
                 qty_final: int = None) -> dict:
        """Finalize a row: waste rounding + pricing. Matches the Row contract."""
        if qty_final is None:
            qty_final = self.apply_waste(qty_raw, self.waste_pct(fields))
        unit_price = unit_price_from(fields.get("item"))
        subtotal = qty_final * unit_price
        if math.isnan(subtotal):
            subtotal = 0.0
        return {
            "qty_raw": qty_raw,
            "qty_final": qty_final,
            "unit": unit or self.unit_for(fields),
            "unit_price": unit_price,
            "subtotal": subtotal,
        }
