"""
Panel manufacturing labor estimate.

LF-priced lines per wall category plus per-each lines for openings and
2x10 blocking. Panel counts are informational: LF / panel length with
the same 10% over-count the bracing uses.
"""

import math

from .calculators.parsing import to_number
from .config import settings

# rate_per_lf for LF lines, each for quantity lines. rate_per_panel is the
# equivalent per-8ft-panel figure, kept for display.
DEFAULT_RATES = {
    "exterior_walls": {"rate_per_lf": 10.50, "rate_per_panel": 84.00},
    "interior_shear": {"rate_per_lf": 10.25, "rate_per_panel": 82.00},
    "interior_blocking_only": {"rate_per_lf": 6.50, "rate_per_panel": 52.00},
    "interior_non_load": {"rate_per_lf": 6.00, "rate_per_panel": 48.00},
    "knee_wall": {"rate_per_lf": 4.50, "rate_per_panel": 36.00},
    "windows": {"each": 20.05},
    "exterior_doors": {"each": 15.19},
    "blocking_2x10": {"each": 0.60},
}

LF_LINES = [
    ("exterior_walls", "Exterior Walls"),
    ("interior_shear", "Interior Shear Walls"),
    ("interior_blocking_only", "Interior Bearing Walls (blocking only)"),
    ("interior_non_load", "Interior Non-Load Walls"),
    ("knee_wall", "Knee Walls"),
]

QTY_LINES = [
    ("windows", "Windows"),
    ("exterior_doors", "Exterior Doors"),
    ("blocking_2x10", "2x10 Blocking"),
]


def panel_count(length_lf: float, panel_len_ft: float = None) -> int:
    panel_len = to_number(panel_len_ft) or settings.DEFAULT_PANEL_LEN_FT
    return math.ceil(to_number(length_lf) / max(1.0, panel_len) * settings.PANEL_OVERCOUNT)


def compute_manufacture_estimate(lf_by_line: dict, data: dict = None) -> dict:
    """
    lf_by_line: LF per LF line key (exterior_walls, interior_shear, ...).
    data: optional overrides, {rates: {key: rate}, panel_len_ft: {key: ft}, quantities: {key: qty}}.
    """
    data = data or {}
    rates = data.get("rates") or {}
    panel_lens = data.get("panel_len_ft") or {}
    quantities = data.get("quantities") or {}

    lines = []
    for key, label in LF_LINES:
        length_lf = to_number(lf_by_line.get(key))
        rate = to_number(rates.get(key), DEFAULT_RATES[key]["rate_per_lf"])
        lines.append({
            "key": key,
            "label": label,
            "lf": length_lf,
            "panels": panel_count(length_lf, panel_lens.get(key)),
            "rate": rate,
            "total": length_lf * rate,
        })

    for key, label in QTY_LINES:
        qty = to_number(quantities.get(key))
        rate = to_number(rates.get(key), DEFAULT_RATES[key]["each"])
        lines.append({"key": key, "label": label, "qty": qty, "rate": rate, "total": qty * rate})

    totals = {
        "lf": sum(line.get("lf", 0.0) for line in lines),
        "panels": sum(line.get("panels", 0) for line in lines),
        "total": sum(line["total"] for line in lines),
    }
    return {"lines": lines, "totals": totals}
