"""
Loose (non-panelized) materials for one level.

Exterior rows are driven by the summed exterior wall LF and ZIP sheet
count; interior rows by the 2x6 / 2x4 interior LF split. Row keys match
the calculator registry categories, so sel / waste are keyed the same way.
"""

import logging
import math

from .calculators.parsing import to_number
from .calculators.registry import get_calculator

logger = logging.getLogger(__name__)

# PT plate pieces are ordered with a flat 5% allowance
PT_PIECE_ALLOWANCE = 1.05

LABELS = {
    "ext_bottom_pt": "PT Bottom Plates (loose)",
    "ext_top_plate": "Top Plates (loose)",
    "panel_band_sheathing": "Panel Band Sheathing",
    "extra_sheathing": "Extra Sheathing",
    "zip_tape": "ZIP Flashing Tape",
    "openings_blocking": "Blocking for Openings",
    "second_bottom": "2nd Bottom Plate",
    "int_2x6_pt": "Interior 2x6 PT Plates",
    "int_2x6_plate": "Interior 2x6 Plates",
    "int_2x4_pt": "Interior 2x4 PT Plates",
    "int_2x4_plate": "Interior 2x4 Plates",
    "int_cabinet_blocking": "Cabinet Blocking",
}


def _line(data: dict, key: str, **values) -> dict:
    sel = data.get("sel") or {}
    waste = data.get("waste") or {}
    row = get_calculator(key).calculate({
        "item": sel.get(key),
        "waste_pct": waste.get(key),
        **values,
    })
    return {"key": key, "label": LABELS[key], **row}


def _pt_pieces(length_lf: float, board_len_ft) -> int:
    if length_lf <= 0:
        return 0
    return math.ceil(length_lf * PT_PIECE_ALLOWANCE / max(1.0, to_number(board_len_ft)))


def compute_loose_materials(data: dict, *, ext_length_lf: float = 0.0, ext_zip_sheets: float = 0.0,
                            int_2x6_lf: float = 0.0, int_2x4_lf: float = 0.0) -> dict:
    """
    Loose rows, subtotal and the level stats the project rollup needs.

    panel_band_lf falls back to the exterior LF until the user sets it.
    The ZIP tape row only appears when the exterior groups use ZIP sheathing.
    """
    data = data or {}
    include = data.get("include") or {}
    panel_band_lf = data.get("panel_band_lf")
    if panel_band_lf is None:
        panel_band_lf = ext_length_lf

    bottom_pt = _line(data, "ext_bottom_pt", length_lf=ext_length_lf)
    top_plate = _line(data, "ext_top_plate", length_lf=ext_length_lf)
    band = _line(data, "panel_band_sheathing", panel_band_lf=panel_band_lf)
    exterior_rows = [bottom_pt, top_plate, band]

    extra = None
    if include.get("extra_sheathing"):
        extra = _line(data, "extra_sheathing", ext_length_lf=ext_length_lf)
        exterior_rows.append(extra)

    if to_number(ext_zip_sheets) > 0:
        exterior_rows.append(_line(
            data, "zip_tape",
            zip_sheets=ext_zip_sheets,
            band_sheets=band["qty_final"],
            extra_sheets=extra["qty_final"] if extra else 0,
        ))

    exterior_rows.append(_line(data, "openings_blocking", openings_lf=data.get("openings_blocking_lf")))

    second = None
    if include.get("second_bottom"):
        second = _line(data, "second_bottom", length_lf=ext_length_lf)
        exterior_rows.append(second)

    int_2x6_pt = _line(data, "int_2x6_pt", length_lf=int_2x6_lf)
    int_2x6_plate = _line(data, "int_2x6_plate", length_lf=int_2x6_lf)
    int_2x4_pt = _line(data, "int_2x4_pt", length_lf=int_2x4_lf)
    int_2x4_plate = _line(data, "int_2x4_plate", length_lf=int_2x4_lf)
    cabinet = _line(data, "int_cabinet_blocking", blocking_lf=data.get("cabinet_blocking_lf"))
    interior_rows = [int_2x6_pt, int_2x6_plate, int_2x4_pt, int_2x4_plate, cabinet]

    plate_pieces_total = (
        math.ceil(top_plate["qty_final"])
        + (math.ceil(second["qty_final"]) if second else 0)
        + math.ceil(int_2x6_plate["qty_final"])
        + math.ceil(int_2x4_plate["qty_final"])
    )
    pt_pieces = (
        _pt_pieces(to_number(ext_length_lf), bottom_pt["board_len_ft"])
        + _pt_pieces(to_number(int_2x6_lf), int_2x6_pt["board_len_ft"])
        + _pt_pieces(to_number(int_2x4_lf), int_2x4_pt["board_len_ft"])
    )

    subtotal = sum(r["subtotal"] for r in exterior_rows) + sum(r["subtotal"] for r in interior_rows)
    logger.debug("Loose materials: %d rows, subtotal %.2f", len(exterior_rows) + len(interior_rows), subtotal)

    return {
        "exterior_rows": exterior_rows,
        "interior_rows": interior_rows,
        "subtotal": subtotal,
        "stats": {
            "panel_band_lf": to_number(panel_band_lf),
            "sheets_ext": int(to_number(ext_zip_sheets)),
            "sheets_band": band["qty_final"],
            "sheets_extra": extra["qty_final"] if extra else 0,
            "plate_pieces_total": plate_pieces_total,
            "pt_pieces": pt_pieces,
        },
    }
