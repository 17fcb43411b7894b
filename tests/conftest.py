from __future__ import annotations

import pytest


@pytest.fixture
def anyio_backend() -> str:
    # The HTTP tests patch asyncio.sleep
    return "asyncio"
