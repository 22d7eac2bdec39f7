"""
Project estimate.

Combines every level rollup into the project estimate: project stats,
the all-levels nails & bracing section, the panel manufacturing estimate
and the grand total.

Input: project dict (levels, nails_and_bracing selections, manufacture inputs)
Output: estimate dict (see schemas.EstimateOut)
"""

import logging

from .calculators.registry import get_calculator
from .levels import compute_level
from .manufacture import compute_manufacture_estimate

logger = logging.getLogger(__name__)


class EstimateEngine:
    """
    Assembles the full estimate from the levels of a project.
    Pure math: quantity x price, LF x rate.
    """

    NAILS_AND_BRACING_LABELS = {
        "nails_concrete": "Concrete Nails (PT plates)",
        "nails_sheathing": "Sheathing Nails",
        "nails_framing": "Framing Nails",
        "temp_bracing": "Temporary Bracing 2x4x16",
    }

    def build_estimate(self, project: dict) -> dict:
        """
        Args:
            project: {
                "name": str,
                "levels": [Level dict, ...],
                "nails_and_bracing": {"sel": {...}, "waste": {...}},
                "manufacture": {"rates": {...}, "panel_len_ft": {...}, "quantities": {...}},
                "panel_len_ft": float | None,    # project-wide panel length
            }

        Returns:
            estimate dict matching EstimateOut
        """
        default_panel_len_ft = project.get("panel_len_ft")
        levels = [compute_level(level, default_panel_len_ft) for level in project.get("levels") or []]

        # --- Project stats ---
        stats = self._collect_stats(levels)

        # --- Nails & bracing (all levels) ---
        section = project.get("nails_and_bracing") or {}
        shares = self._bracing_shares(section, stats)
        for level, share in zip(levels, shares):
            level["temp_bracing_share"] = share
        nails_and_bracing = self._build_nails_and_bracing(section, stats)

        # --- Manufacture ---
        manufacture = compute_manufacture_estimate({
            "exterior_walls": stats["total_exterior_lf"],
            "interior_shear": stats["total_interior_shear_lf"],
            "interior_blocking_only": stats["total_interior_bearing_lf"],
            "interior_non_load": stats["total_interior_partition_lf"],
            "knee_wall": stats["total_knee_wall_lf"],
        }, project.get("manufacture"))

        # --- Totals ---
        levels_total = self._calculate_levels_total(levels)
        grand_total = levels_total + manufacture["totals"]["total"] + nails_and_bracing["total"]

        logger.debug(
            "Estimate %r: %d levels, levels %.2f, nails & bracing %.2f, manufacture %.2f, grand %.2f",
            project.get("name", ""), len(levels), levels_total,
            nails_and_bracing["total"], manufacture["totals"]["total"], grand_total,
        )

        return {
            "name": project.get("name", ""),
            "levels": levels,
            "stats": stats,
            "nails_and_bracing": nails_and_bracing,
            "manufacture": manufacture,
            "levels_total": levels_total,
            "grand_total": grand_total,
        }

    def _collect_stats(self, levels: list) -> dict:
        """Sums group and loose stats over every level."""
        stats = {
            "total_exterior_lf": 0.0,
            "total_interior_shear_lf": 0.0,
            "total_interior_bearing_lf": 0.0,
            "total_interior_partition_lf": 0.0,
            "total_knee_wall_lf": 0.0,
            "panels_all": 0,
            "plate_pieces_all": 0,
            "pt_pieces_all": 0,
            "sheets_ext_all": 0,
            "sheets_band_all": 0,
            "sheets_extra_all": 0,
            "levels_count": len(levels),
        }
        interior_lf_keys = {
            "shear": "total_interior_shear_lf",
            "bearing": "total_interior_bearing_lf",
            "partition": "total_interior_partition_lf",
            "knee": "total_knee_wall_lf",
        }

        for level in levels:
            for group in level["exterior_sections"]:
                group_stats = group["stats"]
                stats["total_exterior_lf"] += group_stats["length_lf"]
                stats["sheets_ext_all"] += group_stats["zip_sheets_final"]
            for group in level["interior_sections"]:
                group_stats = group["stats"]
                for kind, key in interior_lf_keys.items():
                    if group_stats[f"is_{kind}"]:
                        stats[key] += group_stats["length_lf"]
            for group in level["exterior_sections"] + level["interior_sections"]:
                group_stats = group["stats"]
                stats["panels_all"] += group_stats["panels"]
                stats["plate_pieces_all"] += group_stats["plate_pieces"]
                stats["pt_pieces_all"] += group_stats["panel_pt_boards"]

            loose_stats = level["loose_materials"]["stats"]
            stats["plate_pieces_all"] += loose_stats["plate_pieces_total"]
            stats["pt_pieces_all"] += loose_stats["pt_pieces"]
            stats["sheets_band_all"] += loose_stats["sheets_band"]
            stats["sheets_extra_all"] += loose_stats["sheets_extra"]

        return stats

    def _line(self, section: dict, key: str, **values) -> dict:
        sel = section.get("sel") or {}
        waste = section.get("waste") or {}
        row = get_calculator(key).calculate({"item": sel.get(key), "waste_pct": waste.get(key), **values})
        return {"key": key, "label": self.NAILS_AND_BRACING_LABELS[key], **row}

    def _bracing_shares(self, section: dict, stats: dict) -> list:
        """One temp bracing row per level, each an even share of panels_all * 3."""
        return [
            self._line(section, "temp_bracing", panels_all=stats["panels_all"],
                       levels_count=stats["levels_count"])
            for _ in range(stats["levels_count"])
        ]

    def _build_nails_and_bracing(self, section: dict, stats: dict) -> dict:
        """
        Concrete nails on PT plate pieces, sheathing nails on band + extra
        sheets, framing nails on all plate pieces, bracing on panels_all * 3.
        """
        rows = [
            self._line(section, "nails_concrete", pt_pieces=stats["pt_pieces_all"]),
            self._line(section, "nails_sheathing", sheets=stats["sheets_band_all"] + stats["sheets_extra_all"]),
            self._line(section, "nails_framing", plate_pieces=stats["plate_pieces_all"]),
            # one rounding for the whole project; level shares are informational
            self._line(section, "temp_bracing", panels_all=stats["panels_all"], levels_count=1),
        ]

        return {"rows": rows, "total": sum(r["subtotal"] for r in rows)}

    def _calculate_levels_total(self, levels: list) -> float:
        """Σ level_total."""
        return sum(level["level_total"] for level in levels)
