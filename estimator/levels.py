"""
Level rollup.

A level owns exterior and interior wall groups, a loose-materials section
and a panel-nails section:

    level_total = Σ group subtotals + loose subtotal + panel nails total
"""

import logging

from .loose_materials import compute_loose_materials
from .panel_nails import compute_panel_nails
from .wall_groups import compute_group

logger = logging.getLogger(__name__)


def compute_level(level: dict, default_panel_len_ft: float = None) -> dict:
    exterior = [
        compute_group({**group, "side": "exterior"}, default_panel_len_ft)
        for group in level.get("exterior_sections") or []
    ]
    interior = [
        compute_group({**group, "side": "interior"}, default_panel_len_ft)
        for group in level.get("interior_sections") or []
    ]
    groups = exterior + interior

    ext_length_lf = sum(g["stats"]["length_lf"] for g in exterior)
    ext_zip_sheets = sum(g["stats"]["zip_sheets_final"] for g in exterior)
    int_2x6_lf = sum(g["stats"]["length_lf"] for g in interior if g["stats"]["wall_kind"] == "int-2x6")
    int_2x4_lf = sum(g["stats"]["length_lf"] for g in interior if g["stats"]["wall_kind"] == "int-2x4")

    loose = compute_loose_materials(
        level.get("loose_materials") or {},
        ext_length_lf=ext_length_lf,
        ext_zip_sheets=ext_zip_sheets,
        int_2x6_lf=int_2x6_lf,
        int_2x4_lf=int_2x4_lf,
    )
    panel_nails = compute_panel_nails(
        level.get("panel_nails") or {},
        panel_sheets=sum(g["stats"]["panel_sheets"] for g in groups),
        pt_boards=sum(g["stats"]["panel_pt_boards"] for g in groups),
        bottom_plate_pieces=sum(g["stats"]["bottom_plate_pieces_panel"] for g in groups),
    )

    groups_total = sum(g["subtotal"] for g in groups)
    level_total = groups_total + loose["subtotal"] + panel_nails["total"]
    logger.debug(
        "Level %s: %d exterior / %d interior groups, total %.2f",
        level.get("id"), len(exterior), len(interior), level_total,
    )

    return {
        "id": level.get("id"),
        "name": level.get("name", ""),
        "exterior_sections": exterior,
        "interior_sections": interior,
        "loose_materials": loose,
        "panel_nails": panel_nails,
        "groups_total": groups_total,
        "level_total": level_total,
    }
