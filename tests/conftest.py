import sys
from pathlib import Path

import pytest


REPO_ROOT = Path(__file__).resolve().parents[1]

# Prefer repo sources over any installed package.
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture
def three_comps():
    return [
        {"listingId": "A1", "listPrice": 300000, "livingArea": 1500, "standardStatus": "Active"},
        {"listingId": "B2", "listPrice": 500000, "livingArea": 2500, "status": "Pending"},
        {"listingId": "C3", "closePrice": 400000, "livingArea": 2000, "standardStatus": "Closed"},
    ]


@pytest.fixture
def subject():
    return {
        "listingId": "SUBJ",
        "address": "100 Main St, Austin, TX 78701",
        "listPrice": 500000,
        "livingArea": 2000,
        "yearBuilt": 1995,
        "bedroomsTotal": 3,
        "bathroomsTotal": 2.5,
        "lotSizeAcres": 0.25,
        "lotSizeSquareFeet": 10890,
        "garageSpaces": 2,
        "poolFeatures": ["In Ground"],
    }
