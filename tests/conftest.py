from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import AsyncMock, Mock, patch

import pytest

from tests.helpers import FakeClock

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def mock_sleep() -> Generator[Mock, None, None]:
    """Patch time.sleep to make tests run faster."""
    with patch("time.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def mock_asleep() -> Generator[AsyncMock, None, None]:
    """Patch asyncio.sleep to make tests run faster."""
    with patch("asyncio.sleep", new_callable=AsyncMock, return_value=None) as mock:
        yield mock


@pytest.fixture
def fake_clock() -> Generator[FakeClock, None, None]:
    """Patch time.monotonic and time.sleep with a deterministic clock."""
    clock = FakeClock()
    with (
        patch("time.monotonic", side_effect=clock.monotonic),
        patch("time.sleep", side_effect=clock.sleep),
    ):
        yield clock


@pytest.fixture
def mock_operation() -> Mock:
    """Create an operation returning a value on the first attempt."""
    return Mock(return_value="comic.gif")
