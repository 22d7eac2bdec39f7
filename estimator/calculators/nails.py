"""
Nail box and bracing calculators.

Fixed ratios from the framing crew's rules of thumb:
  concrete nails    25 per PT plate piece,    boxes of 100
  sheathing nails   80 per sheet,             boxes of 2700
  framing nails     25 per plate piece,       boxes of 2500
  8d ring (panels)  25 per PT panel board,    boxes of 2700
  12d common        80 per panel bottom plate, boxes of 2500
Nail boxes default to 40% waste.
"""

from ..config import settings
from .base import BaseCalculator
from .boxes import BoxesCalculator
from .tape import TapeCalculator


class NailBoxCalculator(BoxesCalculator):
    """count = <COUNT_FIELD> * NAILS_PER_UNIT, packed PER_BOX to a box."""

    DEFAULT_WASTE_PCT = 40.0
    COUNT_FIELD = "count"
    NAILS_PER_UNIT = 1.0
    PER_BOX = 1.0

    def calculate(self, fields: dict) -> dict:
        units = self.parse_number(fields.get(self.COUNT_FIELD))
        nails_per_unit = self.parse_number(fields.get("nails_per_unit"), self.NAILS_PER_UNIT)
        row = super().calculate({
            **fields,
            "count": units * nails_per_unit,
            "per_box": fields.get("per_box", self.PER_BOX),
        })
        row["waste_pct"] = self.waste_pct(fields)
        return row


class ConcreteNailsCalculator(NailBoxCalculator):
    COUNT_FIELD = "pt_pieces"
    NAILS_PER_UNIT = 25.0
    PER_BOX = 100.0


class SheathingNailsCalculator(NailBoxCalculator):
    COUNT_FIELD = "sheets"
    NAILS_PER_UNIT = 80.0
    PER_BOX = 2700.0


class FramingNailsCalculator(NailBoxCalculator):
    COUNT_FIELD = "plate_pieces"
    NAILS_PER_UNIT = 25.0
    PER_BOX = 2500.0


class PanelRingNailsCalculator(NailBoxCalculator):
    """8d galvanized ring coil on PT plate boards used on panels."""
    COUNT_FIELD = "pt_boards"
    NAILS_PER_UNIT = 25.0
    PER_BOX = 2700.0


class PanelCommonNailsCalculator(NailBoxCalculator):
    """12d bright common coil on panel bottom plates."""
    COUNT_FIELD = "bottom_plate_pieces"
    NAILS_PER_UNIT = 80.0
    PER_BOX = 2500.0


class TempBracingCalculator(BaseCalculator):
    """
    Temporary bracing, 2x4x16 pieces.

    The project needs panels_all * 3 pieces; one level carries an even
    share of that: panels_all * 3 / levels_count.
    """

    DEFAULT_WASTE_PCT = 0.0

    def calculate(self, fields: dict) -> dict:
        panels_all = max(0.0, self.parse_number(fields.get("panels_all")))
        per_panel = self.parse_number(fields.get("pieces_per_panel"), settings.BRACING_PIECES_PER_PANEL)
        levels_count = self.safe_divisor(fields.get("levels_count"))
        row = self.make_row(panels_all * per_panel / levels_count, fields)
        row["waste_pct"] = self.waste_pct(fields)
        return row


class ZipTapeCalculator(TapeCalculator):
    """
    ZIP system flashing tape: one roll per 6 sheets.

    The sheet pool spans the exterior wall groups (zip_sheets) and the
    loose section (band_sheets, extra_sheets).
    """

    DEFAULT_WASTE_PCT = 0.0

    def calculate(self, fields: dict) -> dict:
        total_sheets = (
            self.parse_number(fields.get("zip_sheets"))
            + self.parse_number(fields.get("band_sheets"))
            + self.parse_number(fields.get("extra_sheets"))
        )
        row = super().calculate({
            **fields,
            "seam_lf": total_sheets,
            "roll_len_ft": fields.get("sheets_per_roll", settings.SHEETS_PER_TAPE_ROLL),
        })
        row["total_sheets"] = total_sheets
        row["waste_pct"] = self.waste_pct(fields)
        return row
