"""
Wall group aggregation.

A wall group is a plain dict (see new_wall_group) describing one exterior
or interior wall section: geometry, per-row waste %, selected catalog
items and a list of ad-hoc extras (headers, posts, studs...).

compute_group() turns it into priced rows, a subtotal and the stats the
level / project rollups consume. Nothing here mutates its input; every
mutation helper returns a new group.

Headers infill
--------------
A "Headers infill" extra exists iff the pooled header LF of infill-eligible
lumber headers is > 0. It is system-managed: added and removed by
reconcile_infill(), never by the user. Mutations only re-run the rule when
the (type, family, header LF) signature of the user extras moves.
"""

import logging
import math
import re

from .calculators.blocking import BlockingCalculator
from .calculators.families import is_infill_family, is_pt_family, is_zip_family
from .calculators.header import HeaderCalculator
from .calculators.headers_infill import HeadersInfillCalculator
from .calculators.parsing import as_catalog_item, normalize_family_token, parse_board_length_ft, to_number
from .calculators.plates import PlatesCalculator
from .calculators.post import PostCalculator
from .calculators.sheathing import SheathingCalculator
from .calculators.studs import StudsCalculator
from .manufacture import panel_count

logger = logging.getLogger(__name__)

plates = PlatesCalculator()
studs = StudsCalculator()
blocking = BlockingCalculator()
sheathing = SheathingCalculator()
header = HeaderCalculator()
post = PostCalculator()
headers_infill = HeadersInfillCalculator()

INFILL_TYPE = "Headers infill"
INFILL_ID = "infill"

EXTRA_TYPES = ("Header", "Post", INFILL_TYPE, "Extra blocking", "Extra sheathing", "Stud")

# Per-row waste defaults (editable per row)
DEFAULT_WASTE = {
    "bottom_plate": 10.0,
    "top_plate": 10.0,
    "studs": 60.0,
    "blocking": 10.0,
    "sheathing": 20.0,
}

EXTRA_DEFAULT_WASTE = {
    "Header": 5.0,
    "Post": 5.0,
    INFILL_TYPE: 5.0,
    "Extra blocking": 10.0,
    "Extra sheathing": 5.0,
    "Stud": 60.0,
}

# Plate / blocking board length when the size label has no trailing feet
DEFAULT_BOARD_LEN_FT = 12.0

_SIZE_2X6 = re.compile(r"(^|\D)2\s*[x×]\s*6(\D|$)", re.IGNORECASE)


def new_wall_group(group_id: str = "exterior-0", side: str = "exterior", **overrides) -> dict:
    """A wall group with the stock defaults: 12 ft walls, studs 16\" o.c., single studs."""
    group = {
        "id": group_id,
        "side": side,
        "kind": "partition",
        "length_lf": 0.0,
        "height_ft": 12.0,
        "stud_spacing_in": 16.0,
        "stud_multiplier": 1.0,
        "waste": dict(DEFAULT_WASTE),
        "sel": {key: None for key in DEFAULT_WASTE},
        "extras": [],
        "panel_len_ft": None,
    }
    group.update(overrides)
    return group


def _item_family(item) -> str:
    item = as_catalog_item(item)
    return item.family_label if item is not None else ""


def _item_size(item) -> str:
    item = as_catalog_item(item)
    return item.size_label if item is not None else ""


def _header_lf(extra: dict) -> float:
    return to_number((extra.get("inputs") or {}).get("header_lf"))


# --- Headers infill rule ---

def header_lf_pool(extras: list) -> float:
    """Σ header LF over Header extras cut from infill-eligible lumber."""
    return sum(
        _header_lf(extra)
        for extra in extras
        if extra.get("type") == "Header" and is_infill_family(_item_family(extra.get("item")))
    )


def desired_infill_state(extras: list) -> str:
    return "present" if header_lf_pool(extras) > 0 else "absent"


def infill_signature(extras: list) -> tuple:
    """What the infill rule depends on. The infill row itself is left out."""
    return tuple(
        (extra.get("type"), normalize_family_token(_item_family(extra.get("item"))), _header_lf(extra))
        for extra in extras
        if extra.get("type") != INFILL_TYPE
    )


def make_infill_extra() -> dict:
    return {
        "id": INFILL_ID,
        "type": INFILL_TYPE,
        "item": None,
        "waste_pct": EXTRA_DEFAULT_WASTE[INFILL_TYPE],
        "inputs": {},
        "system": True,
    }


def reconcile_infill(extras: list) -> list:
    """
    Diff the desired infill state against the extras and apply the minimal patch.

    Idempotent: reconcile_infill(reconcile_infill(x)) == reconcile_infill(x).
    An existing infill row is kept as-is so its item / waste survive.
    """
    extras = list(extras or [])
    infill_rows = [extra for extra in extras if extra.get("type") == INFILL_TYPE]

    if desired_infill_state(extras) == "present":
        if not infill_rows:
            logger.debug("Header LF pool %.2f > 0, adding headers infill row", header_lf_pool(extras))
            return extras + [make_infill_extra()]
        if len(infill_rows) > 1:
            keep = infill_rows[0]
            return [extra for extra in extras if extra.get("type") != INFILL_TYPE or extra is keep]
        return extras

    if infill_rows:
        logger.debug("Header LF pool is empty, removing headers infill row")
        return [extra for extra in extras if extra.get("type") != INFILL_TYPE]
    return extras


def _with_extras(group: dict, extras: list) -> dict:
    previous = group.get("extras") or []
    if infill_signature(extras) != infill_signature(previous):
        extras = reconcile_infill(extras)
    return {**group, "extras": extras}


def _next_extra_id(extras: list) -> str:
    seq = 0
    for extra in extras:
        match = re.fullmatch(r"x(\d+)", str(extra.get("id", "")))
        if match:
            seq = max(seq, int(match.group(1)))
    return f"x{seq + 1}"


# --- Mutations ---

def add_extra(group: dict, extra_type: str, item=None, inputs: dict = None,
              waste_pct: float = None) -> dict:
    """Append a user extra. Stud extras default to the group's own stud run and item."""
    if extra_type == INFILL_TYPE:
        raise ValueError("Headers infill rows are managed automatically")
    if extra_type not in EXTRA_TYPES:
        raise ValueError(f"Unknown extra type: {extra_type}. Available: {list(EXTRA_TYPES)}")

    extras = list(group.get("extras") or [])
    row_inputs = dict(inputs or {})
    if extra_type == "Stud":
        row_inputs.setdefault("length_lf", to_number(group.get("length_lf")))
        row_inputs.setdefault("stud_spacing_in", to_number(group.get("stud_spacing_in"), 16.0))
        row_inputs.setdefault("stud_multiplier", to_number(group.get("stud_multiplier"), 1.0))
        if item is None:
            item = (group.get("sel") or {}).get("studs")

    extras.append({
        "id": _next_extra_id(extras),
        "type": extra_type,
        "item": item,
        "waste_pct": EXTRA_DEFAULT_WASTE[extra_type] if waste_pct is None else waste_pct,
        "inputs": row_inputs,
        "system": False,
    })
    return _with_extras(group, extras)


def update_extra(group: dict, extra_id: str, patch: dict) -> dict:
    """Patch one extra. 'inputs' in the patch are merged into the row's inputs."""
    extras = list(group.get("extras") or [])
    if not any(extra.get("id") == extra_id for extra in extras):
        raise ValueError(f"No extra with id {extra_id} in group {group.get('id')}")
    if patch.get("type") == INFILL_TYPE:
        raise ValueError("Headers infill rows are managed automatically")

    updated = []
    for extra in extras:
        if extra.get("id") == extra_id:
            merged_inputs = {**(extra.get("inputs") or {}), **(patch.get("inputs") or {})}
            extra = {**extra, **patch, "inputs": merged_inputs}
        updated.append(extra)
    return _with_extras(group, updated)


def remove_extra(group: dict, extra_id: str) -> dict:
    extras = list(group.get("extras") or [])
    target = next((extra for extra in extras if extra.get("id") == extra_id), None)
    if target is None:
        raise ValueError(f"No extra with id {extra_id} in group {group.get('id')}")
    if target.get("type") == INFILL_TYPE:
        raise ValueError("Headers infill rows are managed automatically and cannot be removed")
    return _with_extras(group, [extra for extra in extras if extra.get("id") != extra_id])


# --- Rows ---

def _line(key: str, label: str, result: dict, waste_pct: float) -> dict:
    return {"key": key, "label": label, **result, "waste_pct": waste_pct}


def _plate_board_len(item) -> float:
    parsed = parse_board_length_ft(_item_size(item))
    return DEFAULT_BOARD_LEN_FT if parsed is None else parsed


def compute_base_rows(group: dict) -> list:
    """
    Exterior: bottom plate, top plate, studs, blocking, sheathing.
    Interior: bottom plate, top plate, studs; blocking on bearing walls,
    sheathing on shear walls.
    """
    sel = group.get("sel") or {}
    waste = {**DEFAULT_WASTE, **(group.get("waste") or {})}
    length_lf = to_number(group.get("length_lf"))
    height_ft = to_number(group.get("height_ft"))
    exterior = group.get("side", "exterior") == "exterior"
    kind = group.get("kind", "partition")

    rows = []
    for key, label in (("bottom_plate", "Bottom plate"), ("top_plate", "Top plate")):
        result = plates.calculate({
            "length_lf": length_lf,
            "board_len_ft": _plate_board_len(sel.get(key)),
            "waste_pct": waste[key],
            "item": sel.get(key),
        })
        rows.append(_line(key, label, result, waste[key]))

    result = studs.calculate({
        "length_lf": length_lf,
        "spacing_in": group.get("stud_spacing_in"),
        "multiplier": group.get("stud_multiplier"),
        "waste_pct": waste["studs"],
        "item": sel.get("studs"),
    })
    rows.append(_line("studs", "Studs", result, waste["studs"]))

    if exterior or kind == "bearing":
        result = blocking.calculate({
            "length_lf": length_lf,
            "height_ft": height_ft,
            "board_len_ft": _plate_board_len(sel.get("blocking")),
            "waste_pct": waste["blocking"],
            "item": sel.get("blocking"),
        })
        rows.append(_line("blocking", "Blocking", result, waste["blocking"]))

    if exterior or kind == "shear":
        result = sheathing.calculate({
            "length_lf": length_lf,
            "height_ft": height_ft,
            "waste_pct": waste["sheathing"],
            "item": sel.get("sheathing"),
        })
        rows.append(_line("sheathing", "Sheathing" if exterior else "Sheathing (4x8)", result, waste["sheathing"]))

    return rows


def compute_extras(group: dict) -> list:
    """Price every extra from the current extras state (infill rule applied first)."""
    extras = reconcile_infill(group.get("extras") or [])
    pool = header_lf_pool(extras)
    length_lf = to_number(group.get("length_lf"))
    height_ft = to_number(group.get("height_ft"))

    out = []
    for extra in extras:
        extra_type = extra.get("type")
        inputs = extra.get("inputs") or {}
        waste_pct = extra.get("waste_pct")
        if waste_pct is None:
            waste_pct = EXTRA_DEFAULT_WASTE.get(extra_type, 5.0)
        fields = {"item": extra.get("item"), "waste_pct": waste_pct}
        parsed = parse_board_length_ft(_item_size(extra.get("item")))
        board_len_ft = parsed if parsed is not None else 0.0

        if extra_type == "Header":
            result = header.calculate({
                **fields,
                "header_lf": inputs.get("header_lf"),
                "lvl_pieces": inputs.get("lvl_pieces"),
                "lvl_length": inputs.get("lvl_length"),
                "board_len_ft": board_len_ft,
            })
        elif extra_type == "Post":
            result = post.calculate({
                **fields,
                "pieces": inputs.get("pieces"),
                "height_ft": inputs.get("height_ft", height_ft),
                "pieces_per_post": inputs.get("pieces_per_post"),
                "num_posts": inputs.get("num_posts"),
            })
        elif extra_type == INFILL_TYPE:
            result = headers_infill.calculate({**fields, "header_lf_pool": pool})
            board_len_ft = None
        elif extra_type == "Extra blocking":
            rows_count = max(1.0, to_number(inputs.get("rows"), 1.0))
            result = plates.calculate({
                **fields,
                "length_lf": length_lf * rows_count,
                "board_len_ft": board_len_ft,
            })
        elif extra_type == "Extra sheathing":
            result = sheathing.calculate({**fields, "length_lf": length_lf, "height_ft": height_ft})
            board_len_ft = None
        elif extra_type == "Stud":
            result = studs.calculate({
                **fields,
                "length_lf": inputs.get("length_lf", length_lf),
                "spacing_in": inputs.get("stud_spacing_in", group.get("stud_spacing_in")),
                "multiplier": inputs.get("stud_multiplier", group.get("stud_multiplier")),
            })
            board_len_ft = None
        else:
            logger.warning("Skipping extra %s with unknown type %r", extra.get("id"), extra_type)
            continue

        result["board_len_ft"] = board_len_ft
        row = _line(str(extra.get("id")), extra_type, result, waste_pct)
        row["id"] = extra.get("id")
        row["type"] = extra_type
        row["system"] = bool(extra.get("system"))
        out.append(row)
    return out


# --- Group rollup ---


def wall_kind(group: dict) -> str:
    """exterior, or int-2x6 / int-2x4 inferred from the stud (else bottom plate) size."""
    if group.get("side", "exterior") == "exterior":
        return "exterior"
    sel = group.get("sel") or {}
    size = _item_size(sel.get("studs")) or _item_size(sel.get("bottom_plate"))
    return "int-2x6" if _SIZE_2X6.search(size) else "int-2x4"


def compute_group(group: dict, default_panel_len_ft: float = None) -> dict:
    """
    Rows, extras, subtotal and stats for one wall group.

    Subtotal = Σ base row subtotals + Σ extra row subtotals.
    """
    group = {**new_wall_group(group.get("id", "exterior-0"), group.get("side", "exterior")),
             **{k: v for k, v in group.items() if v is not None}}
    exterior = group["side"] == "exterior"
    kind = group.get("kind", "partition")
    length_lf = to_number(group.get("length_lf"))
    sel = group.get("sel") or {}

    rows = compute_base_rows(group)
    extras_state = reconcile_infill(group.get("extras") or [])
    extras = compute_extras({**group, "extras": extras_state})
    subtotal = sum(r["subtotal"] for r in rows) + sum(r["subtotal"] for r in extras)

    by_key = {r["key"]: r for r in rows}
    bottom_qty = by_key["bottom_plate"]["qty_final"]
    top_qty = by_key["top_plate"]["qty_final"]
    sheathing_row = by_key.get("sheathing")

    panel_sheets = math.ceil(sheathing_row["qty_final"]) if sheathing_row else 0
    zip_sheets = panel_sheets if exterior and is_zip_family(_item_family(sel.get("sheathing"))) else 0
    bottom_is_pt = is_pt_family(_item_family(sel.get("bottom_plate")))
    parsed_bottom = parse_board_length_ft(_item_size(sel.get("bottom_plate")))

    if exterior:
        pt_lf = length_lf
    else:
        pt_lf = length_lf if bottom_is_pt else 0.0

    panel_len_ft = group.get("panel_len_ft") or default_panel_len_ft

    stats = {
        "id": group["id"],
        "side": group["side"],
        "wall_kind": wall_kind(group),
        "length_lf": length_lf,
        "is_shear": not exterior and kind == "shear",
        "is_bearing": not exterior and kind == "bearing",
        "is_partition": not exterior and kind == "partition",
        "is_knee": not exterior and kind == "knee",
        "panel_sheets": panel_sheets,
        "zip_sheets_final": zip_sheets,
        "plate_pieces": math.ceil(bottom_qty + top_qty),
        "bottom_plate_pieces_panel": math.ceil(bottom_qty),
        "panel_pt_boards": math.ceil(bottom_qty) if bottom_is_pt else 0,
        "pt_lf": pt_lf,
        "bottom_board_len_ft": parsed_bottom if parsed_bottom is not None else 0.0,
        "panels": panel_count(length_lf, panel_len_ft),
        "group_subtotal": subtotal,
    }

    return {
        "id": group["id"],
        "rows": rows,
        "extras": extras,
        "extras_state": extras_state,
        "subtotal": subtotal,
        "stats": stats,
    }
