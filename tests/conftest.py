"""
Shared test fixtures: test client, catalog items, wall groups.
"""

import pytest
from fastapi.testclient import TestClient

from estimator.main import app


@pytest.fixture
def client():
    """FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def spf_stud():
    """2x6 SPF#2 stud, $5 supplier price, no markup."""
    return {
        "unit": "pcs",
        "base_price": 5.0,
        "markup_pct": 0.0,
        "family_label": "SPF#2",
        "size_label": "2x6\"-16'",
    }


@pytest.fixture
def pt_plate():
    """2x6 PT plate, 16 ft, $12 flat price."""
    return {
        "unit": "pcs",
        "price_with_markup": 12.0,
        "family_label": "PT",
        "size_label": "2x6\"-16'",
    }


@pytest.fixture
def zip_sheet():
    """ZIP System 4x8 sheet at $40 + 10%."""
    return {
        "unit": "sheet",
        "base_price": 40.0,
        "markup_pct": 10.0,
        "family_label": "ZIP System",
        "size_label": "4x8 7/16",
    }


@pytest.fixture
def exterior_group(pt_plate, spf_stud, zip_sheet):
    """40 LF x 9 ft exterior wall, PT bottom plate, ZIP sheathing."""
    return {
        "id": "exterior-1",
        "side": "exterior",
        "length_lf": 40,
        "height_ft": 9,
        "sel": {
            "bottom_plate": pt_plate,
            "top_plate": spf_stud,
            "studs": spf_stud,
            "blocking": spf_stud,
            "sheathing": zip_sheet,
        },
        "extras": [],
    }


@pytest.fixture
def interior_group(spf_stud):
    """20 LF x 9 ft interior 2x6 bearing wall."""
    return {
        "id": "interior-1",
        "side": "interior",
        "kind": "bearing",
        "length_lf": 20,
        "height_ft": 9,
        "sel": {
            "bottom_plate": spf_stud,
            "top_plate": spf_stud,
            "studs": spf_stud,
            "blocking": spf_stud,
        },
        "extras": [],
    }
