import pytest

from iconset.main import app


@pytest.fixture
def anyio_backend() -> str:
    """Force anyio-based tests to run with asyncio backend only."""

    return "asyncio"


@pytest.fixture(autouse=True)
def _reset_dependency_overrides():
    """Keep stubbed services from leaking between tests."""

    yield
    app.dependency_overrides.clear()
