import logging
from typing import Any, Generator

import pytest

from georgian_text.const import GEORGIAN_FIRST, GEORGIAN_LAST, IRREGULAR_TO_LEGACY


@pytest.fixture
def georgian_letters() -> list[int]:
    """Every code point handled by the legacy codepage."""
    return list(range(GEORGIAN_FIRST, GEORGIAN_LAST + 1))


@pytest.fixture
def additional_letters() -> list[int]:
    """Letters stored through the fixed table instead of the bands."""
    return sorted(IRREGULAR_TO_LEGACY)


@pytest.fixture(autouse=True)
def debug_logging(caplog: Any) -> Generator[None, None, None]:
    """Capture package debug logging so every log call formats its message."""
    caplog.set_level(logging.DEBUG, logger="georgian_text")
    yield
