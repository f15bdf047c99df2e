from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

1. Puts the 'src' directory on sys.path so the package imports without install.
2. Provides sample unit catalogs shared by unit, integration and e2e tests.
"""

import copy
import os
import sys
from typing import Any, Dict, List

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


_SAMPLE_CATALOG: List[Dict[str, Any]] = [
    {
        "name": "1st Army Corps",
        "meta": {"description": "Northern command", "tags": "corps north"},
        "patches": [{"full": "images/1ac.png", "thumb": "images/1ac_t.png"}],
        "subunits": [
            {
                "name": "10th Mechanized Brigade",
                "meta": {"description": "Formed in 2015", "tags": "mech infantry"},
                "subunits": [
                    {"name": "1st Battalion"},
                    {
                        "name": "Recon Company",
                        "meta": {"tags": "scouts drones"},
                        "patches": [{"full": "images/recon.png", "thumb": "images/recon_t.png"}],
                    },
                ],
            },
            {"name": "Artillery Group", "meta": {"description": "Heavy guns"}},
        ],
    },
    {
        "name": "Naval Forces",
        "patches": [{"full": "images/navy.png", "thumb": "images/navy_t.png"}],
        "subunits": [
            {"name": "Marine Brigade", "meta": {"tags": "infantry coastal"}},
        ],
    },
    {
        "subunits": [
            {"name": "Territorial Defense", "meta": {"description": "Volunteer drones unit"}},
        ],
    },
]


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def sample_catalog() -> List[Dict[str, Any]]:
    """Return a fresh copy of a small three-root unit catalog."""
    return copy.deepcopy(_SAMPLE_CATALOG)


@pytest.fixture
def simple_tree() -> List[Dict[str, Any]]:
    """Minimal two-level tree used by end-to-end filter examples."""
    return [{"name": "Alpha", "subunits": [{"name": "Bravo Company"}]}]
