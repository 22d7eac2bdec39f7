"""
Loose (non-panelized) material calculators.

Thin specializations of the base calculators: each one renames its
inputs onto the base fields, carries a category default waste % and
board length, and echoes the waste % used on the row.
"""

from ..config import settings
from .plates import PlatesCalculator
from .sheathing import SheathingCalculator


class LooseRowMixin:
    """Maps category inputs onto base calculator fields and reports waste_pct."""

    FIELD_MAP: dict = {}

    def calculate(self, fields: dict) -> dict:
        mapped = dict(fields)
        for source, target in self.FIELD_MAP.items():
            if source in fields:
                mapped[target] = fields[source]
        row = super().calculate(mapped)
        row["waste_pct"] = self.waste_pct(mapped)
        return row


# --- Exterior ---

class LooseExtBottomPlatesCalculator(LooseRowMixin, PlatesCalculator):
    """Loose PT bottom plates."""
    DEFAULT_WASTE_PCT = 10.0
    DEFAULT_BOARD_LEN_FT = 16.0


class LooseExtTopPlatesCalculator(LooseRowMixin, PlatesCalculator):
    DEFAULT_WASTE_PCT = 10.0
    DEFAULT_BOARD_LEN_FT = 16.0


class PanelBandSheathingCalculator(LooseRowMixin, SheathingCalculator):
    """Sheathing strip over the panel band: band LF x 4 ft."""
    DEFAULT_WASTE_PCT = 20.0
    FIELD_MAP = {"panel_band_lf": "length_lf", "band_height_ft": "height_ft"}

    def calculate(self, fields: dict) -> dict:
        fields = dict(fields)
        fields.setdefault("band_height_ft", settings.BAND_HEIGHT_FT)
        return super().calculate(fields)


class ExtraSheathingCalculator(PanelBandSheathingCalculator):
    """Optional extra sheathing: exterior LF x band height."""
    DEFAULT_WASTE_PCT = 10.0
    FIELD_MAP = {"ext_length_lf": "length_lf", "band_height_ft": "height_ft"}


class OpeningsBlockingCalculator(LooseRowMixin, PlatesCalculator):
    DEFAULT_WASTE_PCT = 10.0
    DEFAULT_BOARD_LEN_FT = 10.0
    FIELD_MAP = {"openings_lf": "length_lf"}


class SecondBottomPlateCalculator(LooseRowMixin, PlatesCalculator):
    DEFAULT_WASTE_PCT = 10.0
    DEFAULT_BOARD_LEN_FT = 16.0


# --- Interior ---

class LooseInteriorPlatesCalculator(LooseRowMixin, PlatesCalculator):
    """Interior 2x6 / 2x4 plates, PT or not."""
    DEFAULT_WASTE_PCT = 5.0
    DEFAULT_BOARD_LEN_FT = 16.0


class CabinetBlockingCalculator(LooseRowMixin, PlatesCalculator):
    """Blocking for bathroom & kitchen cabinets."""
    DEFAULT_WASTE_PCT = 10.0
    DEFAULT_BOARD_LEN_FT = 8.0
    FIELD_MAP = {"blocking_lf": "length_lf"}
