"""Nails consumed by panel assembly on one level."""

from .calculators.registry import get_calculator

LABELS = {
    "panel_nails_sheathing": "Sheathing Nails (panels)",
    "panel_nails_8d": "8d Galv Ring Coil (PT boards)",
    "panel_nails_12d": "12d Bright Common Coil (bottom plates)",
}


def compute_panel_nails(data: dict, *, panel_sheets: float = 0.0, pt_boards: float = 0.0,
                        bottom_plate_pieces: float = 0.0) -> dict:
    data = data or {}
    sel = data.get("sel") or {}
    waste = data.get("waste") or {}
    counts = {
        "panel_nails_sheathing": {"sheets": panel_sheets},
        "panel_nails_8d": {"pt_boards": pt_boards},
        "panel_nails_12d": {"bottom_plate_pieces": bottom_plate_pieces},
    }

    rows = []
    for key, values in counts.items():
        row = get_calculator(key).calculate({"item": sel.get(key), "waste_pct": waste.get(key), **values})
        rows.append({"key": key, "label": LABELS[key], **row})

    return {"rows": rows, "total": sum(r["subtotal"] for r in rows)}
