"""Global pytest fixtures for toolshed."""

import pytest

from tests.helpers.records import Endpoint, Settings


@pytest.fixture
def sample_settings() -> Settings:
    """A fully populated `Settings` instance."""
    return Settings(
        name="ingest",
        retries=3,
        primary=Endpoint("db.internal", 5432),
        fallback=None,
        mirrors=[Endpoint("a.mirror", 80), Endpoint("b.mirror", 8080)],
        tags=["blue", "ünïcode"],
    )


@pytest.fixture
def sample_document() -> dict:
    """A nested JSON-compatible value."""
    return {
        "name": "toolshed",
        "versions": ["v1.5.1", "v1.10.1"],
        "limits": {"max": 10, "ratio": 0.5, "enabled": True, "owner": None},
    }
