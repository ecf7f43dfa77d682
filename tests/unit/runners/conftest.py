from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest


@pytest.fixture
def mock_subprocess() -> MagicMock:
    """Create a mock subprocess object with common methods and attributes."""
    mock = MagicMock()
    mock.returncode = 0
    mock.communicate = AsyncMock(return_value=(b"stdout output", b""))
    mock.wait = AsyncMock(return_value=0)
    mock.pid = 12345
    return mock
