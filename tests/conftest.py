from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared navigation maps used across unit tests.
3. Logging reset so handlers never leak between tests.
"""

import logging
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

from pagenav.infra.logging import shutdown_logging  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def reset_logging() -> Any:
    """Detach pagenav handlers after each test."""
    yield
    shutdown_logging()
    logging.getLogger().setLevel(logging.WARNING)


@pytest.fixture
def basic_nav() -> List[Any]:
    """
    Minimal map with one track between two root pages.

    Structure:
      config.js
      src/
        index.js
        utils.js
      readme.md
    """
    return [
        "config.js",
        {"src": ["index.js", "utils.js"]},
        "readme.md",
    ]


@pytest.fixture
def branching_nav() -> List[Any]:
    """Map whose second element is a branch point with two tracks."""
    return [
        "intro.md",
        {
            "python": ["install.md", "usage.md"],
            "node": ["setup.md"],
        },
        "outro.md",
    ]


@pytest.fixture
def nav_config() -> Dict[str, Any]:
    """Return a validated-looking configuration dictionary for service tests."""
    return {
        "navigation_path": "",
        "current_page": "",
        "id_prefix": "next_page",
        "shared_track": "shared",
        "default_track": "",
        "url_prefix": "",
        "root_path": "",
    }
