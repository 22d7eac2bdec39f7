"""
Wall group tests: base rows, extras, headers infill, stats.

Tests:
1-4.   Base rows per side / kind
5-9.   Headers infill auto-management
10-15. Extras
16-18. Stats
"""

import pytest

from estimator.wall_groups import (
    INFILL_TYPE,
    add_extra,
    compute_group,
    desired_infill_state,
    header_lf_pool,
    infill_signature,
    new_wall_group,
    reconcile_infill,
    remove_extra,
    update_extra,
)

SPF_HEADER = {"family_label": "SPF#2", "size_label": "2x10-12", "price_with_markup": 20.0}
LVL_HEADER = {"family_label": "LVL", "size_label": "1.75x11.875", "price_with_markup": 9.0}


def _infill_rows(group):
    return [e for e in group["extras"] if e["type"] == INFILL_TYPE]


def _group_with_header(header_lf=0, item=SPF_HEADER):
    group = new_wall_group("exterior-1", "exterior", length_lf=20)
    return add_extra(group, "Header", item=item, inputs={"header_lf": header_lf})


# ============================================================
# 1-4. Base rows
# ============================================================

def test_exterior_base_rows(exterior_group):
    """Exterior: plates, studs, blocking, sheathing."""
    result = compute_group(exterior_group)
    keys = [r["key"] for r in result["rows"]]
    assert keys == ["bottom_plate", "top_plate", "studs", "blocking", "sheathing"]
    rows = {r["key"]: r for r in result["rows"]}
    assert rows["bottom_plate"]["qty_final"] == 3
    assert rows["top_plate"]["qty_final"] == 3
    assert rows["studs"]["qty_final"] == 50
    assert rows["blocking"]["qty_final"] == 6
    assert rows["sheathing"]["qty_final"] == 14
    assert result["subtotal"] == pytest.approx(36 + 15 + 250 + 30 + 14 * 44)


def test_interior_rows_depend_on_kind(interior_group):
    """Bearing gets blocking, shear gets sheathing, partition neither."""
    bearing = compute_group(interior_group)
    assert [r["key"] for r in bearing["rows"]] == ["bottom_plate", "top_plate", "studs", "blocking"]

    shear = compute_group({**interior_group, "kind": "shear"})
    assert [r["key"] for r in shear["rows"]] == ["bottom_plate", "top_plate", "studs", "sheathing"]

    partition = compute_group({**interior_group, "kind": "partition"})
    assert [r["key"] for r in partition["rows"]] == ["bottom_plate", "top_plate", "studs"]


def test_plate_board_defaults_to_12(interior_group):
    """No parsable size -> 12 ft plate boards."""
    group = {**interior_group, "sel": {}}
    rows = {r["key"]: r for r in compute_group(group)["rows"]}
    assert rows["bottom_plate"]["board_len_ft"] == 12
    assert rows["bottom_plate"]["qty_final"] == 2


def test_waste_override_per_row(exterior_group):
    """Per-row waste map wins over the defaults."""
    group = {**exterior_group, "waste": {"studs": 0}}
    rows = {r["key"]: r for r in compute_group(group)["rows"]}
    assert rows["studs"]["qty_final"] == 31
    assert rows["bottom_plate"]["waste_pct"] == 10


# ============================================================
# 5-9. Headers infill
# ============================================================

def test_infill_state_transition():
    """header_lf 0 -> 10 adds one infill row; back to 0 removes it."""
    group = _group_with_header(0)
    assert _infill_rows(group) == []
    header_id = group["extras"][0]["id"]

    group = update_extra(group, header_id, {"inputs": {"header_lf": 10}})
    assert len(_infill_rows(group)) == 1
    assert len(group["extras"]) == 2

    group = update_extra(group, header_id, {"inputs": {"header_lf": 10}})
    assert len(_infill_rows(group)) == 1

    group = update_extra(group, header_id, {"inputs": {"header_lf": 0}})
    assert _infill_rows(group) == []
    assert len(group["extras"]) == 1


def test_engineered_headers_never_trigger_infill():
    """LVL header LF does not feed the pool."""
    group = _group_with_header(24, item=LVL_HEADER)
    assert header_lf_pool(group["extras"]) == 0
    assert _infill_rows(group) == []


def test_reconcile_is_idempotent():
    """Running the rule twice changes nothing; duplicates collapse to one."""
    extras = [
        {"id": "x1", "type": "Header", "item": SPF_HEADER, "inputs": {"header_lf": 12}},
        {"id": "infill", "type": INFILL_TYPE, "system": True},
        {"id": "infill-2", "type": INFILL_TYPE, "system": True},
    ]
    once = reconcile_infill(extras)
    assert len([e for e in once if e["type"] == INFILL_TYPE]) == 1
    assert reconcile_infill(once) == once
    assert desired_infill_state(once) == "present"


def test_signature_ignores_infill_row():
    """The infill row is not part of what the rule watches."""
    extras = [{"id": "x1", "type": "Header", "item": SPF_HEADER, "inputs": {"header_lf": 12}}]
    assert infill_signature(extras) == infill_signature(reconcile_infill(extras))


def test_infill_row_cannot_be_removed_or_added():
    """The system row is managed by the rule only."""
    group = _group_with_header(12)
    with pytest.raises(ValueError):
        remove_extra(group, "infill")
    with pytest.raises(ValueError):
        add_extra(group, INFILL_TYPE)


def test_removing_last_header_drops_infill():
    group = _group_with_header(12)
    assert len(_infill_rows(group)) == 1
    group = remove_extra(group, group["extras"][0]["id"])
    assert group["extras"] == []


def test_inputs_not_mutated():
    """Mutations return new groups."""
    group = _group_with_header(0)
    snapshot = [dict(e) for e in group["extras"]]
    update_extra(group, group["extras"][0]["id"], {"inputs": {"header_lf": 30}})
    assert group["extras"] == snapshot


# ============================================================
# 10-15. Extras
# ============================================================

def test_header_and_infill_rows_priced():
    """10 LF on 12 ft boards -> 1 piece; infill 10 LF pool -> 1 sheet."""
    group = _group_with_header(10)
    result = compute_group(group)
    extras = {r["type"]: r for r in result["extras"]}
    assert extras["Header"]["qty_final"] == 1
    assert extras["Header"]["subtotal"] == 20
    assert extras[INFILL_TYPE]["qty_final"] == 1
    assert extras[INFILL_TYPE]["system"] is True
    assert len(result["extras_state"]) == 2


def test_extra_ids_are_sequential():
    group = new_wall_group("interior-1", "interior", length_lf=10)
    group = add_extra(group, "Post", inputs={"pieces_per_post": 3, "num_posts": 2})
    group = add_extra(group, "Extra sheathing")
    assert [e["id"] for e in group["extras"]] == ["x1", "x2"]


def test_stud_extra_defaults_from_group(spf_stud):
    """Stud extras fall back to the group's run and carry 60% waste."""
    group = new_wall_group("interior-1", "interior", length_lf=10, sel={"studs": spf_stud})
    group = add_extra(group, "Stud")
    extra = group["extras"][0]
    assert extra["waste_pct"] == 60
    assert extra["inputs"]["length_lf"] == 10
    assert extra["item"] == spf_stud
    rows = compute_group(group)["extras"]
    assert rows[0]["qty_raw"] == 8
    assert rows[0]["qty_final"] == 13


def test_extra_blocking_rows_multiply_length():
    """Extra blocking prices group LF x rows as plates."""
    group = new_wall_group("interior-1", "interior", length_lf=24)
    group = add_extra(group, "Extra blocking", item={"size_label": "2x4-12"},
                      inputs={"rows": 2}, waste_pct=0)
    row = compute_group(group)["extras"][0]
    assert row["qty_final"] == 4


def test_extra_blocking_fractional_rows():
    """1.5 rows over 24 LF is 36 LF, not truncated to one row."""
    group = new_wall_group("interior-1", "interior", length_lf=24)
    group = add_extra(group, "Extra blocking", item={"size_label": "2x4-12"},
                      inputs={"rows": 1.5}, waste_pct=0)
    row = compute_group(group)["extras"][0]
    assert row["qty_raw"] == 3
    assert row["qty_final"] == 3


def test_post_height_falls_back_to_group():
    group = new_wall_group("exterior-1", "exterior", length_lf=10, height_ft=10)
    group = add_extra(group, "Post", item={"family_label": "Versa Column"},
                      inputs={"pieces": 2}, waste_pct=0)
    row = compute_group(group)["extras"][0]
    assert row["unit"] == "lf"
    assert row["qty_final"] == 20


def test_unknown_extra_id():
    group = new_wall_group()
    with pytest.raises(ValueError):
        update_extra(group, "x9", {"waste_pct": 1})
    with pytest.raises(ValueError):
        remove_extra(group, "x9")


# ============================================================
# 16-18. Stats
# ============================================================

def test_exterior_stats(exterior_group):
    stats = compute_group(exterior_group)["stats"]
    assert stats["wall_kind"] == "exterior"
    assert stats["panel_sheets"] == 14
    assert stats["zip_sheets_final"] == 14
    assert stats["plate_pieces"] == 6
    assert stats["bottom_plate_pieces_panel"] == 3
    assert stats["panel_pt_boards"] == 3
    assert stats["pt_lf"] == 40
    assert stats["bottom_board_len_ft"] == 16
    assert stats["panels"] == 6


def test_interior_stats(interior_group):
    stats = compute_group(interior_group)["stats"]
    assert stats["wall_kind"] == "int-2x6"
    assert stats["is_bearing"] is True
    assert stats["panel_sheets"] == 0
    assert stats["zip_sheets_final"] == 0
    assert stats["panel_pt_boards"] == 0
    assert stats["pt_lf"] == 0
    assert stats["plate_pieces"] == 4
    assert stats["panels"] == 3
    assert stats["group_subtotal"] == pytest.approx(165)


def test_interior_2x4_and_panel_length(spf_stud):
    """2x4 size -> int-2x4; panel length override changes the panel count."""
    stud_2x4 = {**spf_stud, "size_label": "2x4\"-8'"}
    group = new_wall_group("interior-2", "interior", length_lf=20, sel={"studs": stud_2x4}, panel_len_ft=10)
    stats = compute_group(group)["stats"]
    assert stats["wall_kind"] == "int-2x4"
    assert stats["panels"] == 3
