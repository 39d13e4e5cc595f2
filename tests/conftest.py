"""Test configuration utilities and shared fixtures."""

import sys
from datetime import date
from pathlib import Path

# Make ``src`` importable when pytest runs from a plain checkout without an
# editable install.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import pytest  # noqa: E402

from tenanttools.backend.config.calendar_config import (  # noqa: E402
    JudicialCalendar,
    RegulatoryConfiguration,
    load_calendar,
    load_regulations,
)


@pytest.fixture()
def calendar() -> JudicialCalendar:
    """Return the packaged judicial calendar."""

    return load_calendar()


@pytest.fixture()
def regulations() -> RegulatoryConfiguration:
    """Return the packaged regulatory constants."""

    return load_regulations()


@pytest.fixture()
def today() -> date:
    """A fixed reference date so deadline tests never depend on the clock."""

    return date(2025, 12, 1)
