"""
Calculator registry. Maps material category strings to calculator classes.

Base categories cover the wall-group rows; loose / nails categories cover
the per-level loose section and the all-levels nails & bracing section.
"""

from .base import BaseCalculator
from .blocking import BlockingCalculator
from .boxes import BoxesCalculator
from .header import HeaderCalculator
from .headers_infill import HeadersInfillCalculator
from .loose import (
    CabinetBlockingCalculator,
    ExtraSheathingCalculator,
    LooseExtBottomPlatesCalculator,
    LooseExtTopPlatesCalculator,
    LooseInteriorPlatesCalculator,
    OpeningsBlockingCalculator,
    PanelBandSheathingCalculator,
    SecondBottomPlateCalculator,
)
from .nails import (
    ConcreteNailsCalculator,
    FramingNailsCalculator,
    PanelCommonNailsCalculator,
    PanelRingNailsCalculator,
    SheathingNailsCalculator,
    TempBracingCalculator,
    ZipTapeCalculator,
)
from .plates import PlatesCalculator
from .post import PostCalculator
from .sheathing import SheathingCalculator
from .studs import StudsCalculator
from .tape import TapeCalculator

CALCULATOR_REGISTRY: dict[str, type] = {
    # Base
    "plates": PlatesCalculator,
    "studs": StudsCalculator,
    "blocking": BlockingCalculator,
    "sheathing": SheathingCalculator,
    "header": HeaderCalculator,
    "post": PostCalculator,
    "headers_infill": HeadersInfillCalculator,
    "tape": TapeCalculator,
    "boxes": BoxesCalculator,
    # Loose, exterior
    "ext_bottom_pt": LooseExtBottomPlatesCalculator,
    "ext_top_plate": LooseExtTopPlatesCalculator,
    "panel_band_sheathing": PanelBandSheathingCalculator,
    "extra_sheathing": ExtraSheathingCalculator,
    "zip_tape": ZipTapeCalculator,
    "openings_blocking": OpeningsBlockingCalculator,
    "second_bottom": SecondBottomPlateCalculator,
    # Loose, interior
    "int_2x6_pt": LooseInteriorPlatesCalculator,
    "int_2x6_plate": LooseInteriorPlatesCalculator,
    "int_2x4_pt": LooseInteriorPlatesCalculator,
    "int_2x4_plate": LooseInteriorPlatesCalculator,
    "int_cabinet_blocking": CabinetBlockingCalculator,
    # Panel nails (per level)
    "panel_nails_sheathing": SheathingNailsCalculator,
    "panel_nails_8d": PanelRingNailsCalculator,
    "panel_nails_12d": PanelCommonNailsCalculator,
    # Nails & bracing (all levels)
    "nails_concrete": ConcreteNailsCalculator,
    "nails_sheathing": SheathingNailsCalculator,
    "nails_framing": FramingNailsCalculator,
    "temp_bracing": TempBracingCalculator,
}


def get_calculator(category: str) -> BaseCalculator:
    """Returns an instance of the calculator for a category, or raises ValueError."""
    if category not in CALCULATOR_REGISTRY:
        raise ValueError(
            f"No calculator registered for category: {category}. "
            f"Available: {list(CALCULATOR_REGISTRY.keys())}"
        )
    return CALCULATOR_REGISTRY[category]()


def has_calculator(category: str) -> bool:
    """Check if a calculator exists for a category."""
    return category in CALCULATOR_REGISTRY


def list_calculators() -> list[str]:
    """List all registered calculator categories."""
    return list(CALCULATOR_REGISTRY.keys())
