"""
Pytest configuration and fixtures for holidaycalc tests.

Puts src/ and the repository root (for the api package) on sys.path and
provides shared registry, calculator and helper fixtures.
"""
import sys
from pathlib import Path

_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(_ROOT / "src"))
sys.path.insert(0, str(_ROOT))

import pytest

from holidaycalc.calculator import HolidayCalculator
from holidaycalc.config import Settings
from holidaycalc.helper import HolidayHelper
from holidaycalc.registry import default_registry


@pytest.fixture(scope="session")
def registry():
    """Default registry built without reading the environment."""
    return default_registry(Settings())


@pytest.fixture
def calculator(registry):
    return HolidayCalculator(registry)


@pytest.fixture
def helper(calculator):
    return HolidayHelper(calculator)
