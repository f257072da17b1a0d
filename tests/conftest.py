import pytest
import structlog


@pytest.fixture(autouse=True)
def _reset_structlog():
    """CLI tests configure structlog globally; undo that after each test."""
    yield
    structlog.reset_defaults()
