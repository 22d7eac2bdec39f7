"""
Parsing and unit helpers shared by every calculator.

Board lengths come from catalog size labels, prices from catalog items,
and every geometry value passes through to_number() so that blank or
garbage input degrades to zero instead of raising.
"""

import logging
import math
import re
from collections.abc import Mapping

from pydantic import ValidationError

from ..schemas import CatalogItem

logger = logging.getLogger(__name__)

_NON_TOKEN = re.compile(r"[^a-z0-9# ]+")


def to_number(value, default: float = 0.0) -> float:
    """Coerce user input to a float. None, blanks, NaN and infinities become default."""
    if value is None or isinstance(value, bool):
        return default
    try:
        number = float(str(value).strip())
    except (ValueError, TypeError):
        return default
    if math.isnan(number) or math.isinf(number):
        return default
    return number


def to_flag(value, default=None):
    """Coerce a boolean-ish input. Only "true" / "1" / "yes" strings count as True."""
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        text = value.strip().lower()
        if not text:
            return default
        return text in ("true", "1", "yes")
    return to_number(value) != 0


def parse_board_length_ft(size_label) -> float | None:
    """
    Trailing digit run of a size label, e.g. 2x6"-16' -> 16.

    Naive on purpose: any trailing run of digits is taken as feet, so the
    label must be a clean lumber size. Returns None when there is no run.
    """
    label = str(size_label or "").strip()
    digits = ""
    for ch in reversed(label):
        if ch.isdigit():
            digits = ch + digits
            continue
        if digits:
            break
    return float(digits) if digits else None


def apply_waste(qty_raw, waste_pct=0) -> int:
    """Inflate by waste % and round UP to the next whole purchasing unit."""
    qty = to_number(qty_raw)
    waste = to_number(waste_pct) / 100.0
    return math.ceil(qty * (1 + waste))


def normalize_family_token(s) -> str:
    """Lowercase, squash punctuation to spaces, trim. Join key for family matching."""
    return _NON_TOKEN.sub(" ", str(s or "").lower()).strip()


def as_catalog_item(value) -> CatalogItem | None:
    """Normalize a catalog record into a CatalogItem (or None when absent/unusable)."""
    if value is None or isinstance(value, CatalogItem):
        return value
    if isinstance(value, Mapping):
        try:
            return CatalogItem.model_validate(dict(value))
        except ValidationError as e:
            logger.warning("Unusable catalog record, treating as unpriced: %s", e)
            return None
    logger.warning("Unsupported catalog record type %s, treating as unpriced", type(value).__name__)
    return None


def unit_price_from(item) -> float:
    """
    Unit price with markup.

    supplier price + markup % wins; a flat price_with_markup is the fallback;
    anything else prices at 0.
    """
    item = as_catalog_item(item)
    if item is None:
        return 0.0
    if item.base_price is not None and item.markup_pct is not None:
        return item.base_price * (1 + item.markup_pct / 100.0)
    if item.price_with_markup is not None:
        return float(item.price_with_markup)
    return 0.0
