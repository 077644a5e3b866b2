from datetime import date
from pathlib import Path

import pytest

from src.adapters.clock import FixedClock
from src.rules.loader import load_rules
from src.rules.models import Rules

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def project_root() -> Path:
    return PROJECT_ROOT


@pytest.fixture
def rules() -> Rules:
    """The real rules.yaml shipped at the project root."""
    return load_rules(PROJECT_ROOT / "rules.yaml")


@pytest.fixture
def today() -> date:
    return date(2026, 6, 15)


@pytest.fixture
def clock(today: date) -> FixedClock:
    return FixedClock(today)


@pytest.fixture
def env() -> dict[str, str]:
    """Environment with a usable credential and sheet id."""
    return {
        "DSCMS_SHEETS_API_KEY": "test-api-key",
        "DSCMS_SHEET_ID": "sheet-123",
    }
