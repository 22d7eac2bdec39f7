"""
Loose materials + panel nails tests.

Tests:
1-4. Loose rows and ZIP tape pooling
5-6. Loose stats
7-8. Panel nails
"""

import pytest

from estimator.loose_materials import compute_loose_materials
from estimator.panel_nails import compute_panel_nails

EVERYTHING = {"include": {"extra_sheathing": True, "second_bottom": True}}


def _loose(data=None, **totals):
    params = {"ext_length_lf": 96, "ext_zip_sheets": 20, "int_2x6_lf": 32, "int_2x4_lf": 0}
    params.update(totals)
    return compute_loose_materials(data if data is not None else EVERYTHING, **params)


# ============================================================
# 1-4. Rows
# ============================================================

def test_exterior_row_order_with_everything_included():
    result = _loose()
    assert [r["key"] for r in result["exterior_rows"]] == [
        "ext_bottom_pt", "ext_top_plate", "panel_band_sheathing", "extra_sheathing",
        "zip_tape", "openings_blocking", "second_bottom",
    ]
    assert [r["key"] for r in result["interior_rows"]] == [
        "int_2x6_pt", "int_2x6_plate", "int_2x4_pt", "int_2x4_plate", "int_cabinet_blocking",
    ]


def test_band_and_extra_sheathing_quantities():
    """Band 96 LF x 4 ft -> 12 sheets +20% = 15; extra 12 sheets +10% = 14."""
    rows = {r["key"]: r for r in _loose()["exterior_rows"]}
    assert rows["panel_band_sheathing"]["qty_final"] == 15
    assert rows["extra_sheathing"]["qty_final"] == 14
    assert rows["ext_bottom_pt"]["qty_final"] == 7


def test_zip_tape_pools_across_sections():
    """20 ZIP sheets from the walls + 15 band + 14 extra = 49 -> 9 rolls."""
    rows = {r["key"]: r for r in _loose()["exterior_rows"]}
    assert rows["zip_tape"]["total_sheets"] == 49
    assert rows["zip_tape"]["qty_final"] == 9


def test_optional_rows_and_zip_tape_absent():
    """No ZIP sheathing on the walls -> no tape row; optional rows off by default."""
    result = _loose({}, ext_zip_sheets=0)
    keys = [r["key"] for r in result["exterior_rows"]]
    assert "zip_tape" not in keys
    assert "extra_sheathing" not in keys
    assert "second_bottom" not in keys


def test_panel_band_override():
    """An explicit band LF replaces the exterior LF."""
    result = _loose({"panel_band_lf": 40})
    rows = {r["key"]: r for r in result["exterior_rows"]}
    assert rows["panel_band_sheathing"]["qty_final"] == 6
    assert result["stats"]["panel_band_lf"] == 40


# ============================================================
# 5-6. Stats
# ============================================================

def test_loose_stats():
    stats = _loose()["stats"]
    assert stats["sheets_ext"] == 20
    assert stats["sheets_band"] == 15
    assert stats["sheets_extra"] == 14
    # top 7 + second bottom 7 + interior 2x6 plate 3
    assert stats["plate_pieces_total"] == 17
    # ceil(96 * 1.05 / 16) + ceil(32 * 1.05 / 16)
    assert stats["pt_pieces"] == 10


def test_loose_subtotal_sums_priced_rows():
    data = {"sel": {"ext_top_plate": {"price_with_markup": 5}, "int_2x6_plate": {"price_with_markup": 4}}}
    result = _loose(data)
    assert result["subtotal"] == pytest.approx(7 * 5 + 3 * 4)


# ============================================================
# 7-8. Panel nails
# ============================================================

def test_panel_nail_quantities():
    """Sheets x 80 / 2700, PT boards x 25 / 2700, bottom plates x 80 / 2500, 40% waste."""
    result = compute_panel_nails({}, panel_sheets=270, pt_boards=108, bottom_plate_pieces=125)
    rows = {r["key"]: r for r in result["rows"]}
    assert rows["panel_nails_sheathing"]["qty_raw"] == 8
    assert rows["panel_nails_sheathing"]["qty_final"] == 12
    assert rows["panel_nails_8d"]["qty_raw"] == 1
    assert rows["panel_nails_12d"]["qty_raw"] == 4
    assert result["total"] == 0


def test_panel_nails_total():
    data = {"sel": {"panel_nails_12d": {"price_with_markup": 50}}, "waste": {"panel_nails_12d": 0}}
    result = compute_panel_nails(data, bottom_plate_pieces=125)
    assert result["total"] == 200
