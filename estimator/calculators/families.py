"""
Lumber family classifiers.

All predicates take a raw family label and normalize it first.
is_infill_family is kept separate from is_lumber_family: only dimensional
lumber headers feed the headers-infill pool, engineered headers never do.
"""

from .parsing import normalize_family_token

_SPF_PT_SYP = ("spf#2", "spf2", "syp#2", "syp2", "syp#1", "syp1", "treated")

LUMBER_TOKENS = _SPF_PT_SYP + ("frt", "fire rated lumber", "douglas fir", "pt", "hem fir", "hemfir")

INFILL_TOKENS = (
    "spf#2", "spf2",
    "treated",
    "hem fir", "hemfir",
    "syp#2", "syp2",
    "syp#1", "syp1",
    "frt", "fire rated lumber",
    "douglas fir",
)


def is_lvl(family: str = "") -> bool:
    return "lvl" in normalize_family_token(family)


def is_versa_column(family: str = "") -> bool:
    return "versa" in normalize_family_token(family)


def is_lumber_family(family: str = "") -> bool:
    x = normalize_family_token(family)
    return x == "pt" or any(token in x for token in LUMBER_TOKENS)


def is_infill_family(family: str = "") -> bool:
    x = normalize_family_token(family)
    return x == "pt" or any(token in x for token in INFILL_TOKENS)


def is_pt_family(family: str = "") -> bool:
    """Pressure-treated plate stock: a standalone 'pt' word, 'treated' or 'pressure'."""
    x = normalize_family_token(family)
    return "pt" in x.split() or "treated" in x or "pressure" in x


def is_zip_family(family: str = "") -> bool:
    return "zip" in normalize_family_token(family)
