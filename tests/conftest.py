"""
Shared fixtures for the sortcatalog tests.

The project `src/` is inserted onto sys.path so tests run without installing the package.
"""

from __future__ import annotations

import pathlib
import sys

import pytest

_REPO_ROOT = pathlib.Path(__file__).resolve().parents[1]
_SRC = _REPO_ROOT / "src"
if str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))

from sortcatalog.algorithms import STRATEGIES  # noqa: E402

ALL_STRATEGIES = list(STRATEGIES.values())
GENERIC_STRATEGIES = [s for s in ALL_STRATEGIES if s.comparator_generic]


@pytest.fixture(params=ALL_STRATEGIES, ids=lambda s: s.name)
def strategy(request):
    return request.param


@pytest.fixture(params=GENERIC_STRATEGIES, ids=lambda s: s.name)
def generic_strategy(request):
    return request.param
