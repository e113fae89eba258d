"""Pytest configuration for tests."""

import pytest

from markup_profiles.profiles.registry import ProfileRegistry, reset_profile_registry
from markup_profiles.resources import MappingResources


@pytest.fixture(scope="session")
def anyio_backend():
    """Configure anyio to use only asyncio backend."""
    return "asyncio"


@pytest.fixture
def registry():
    """Independent registry with a fixed caret and a couple of syntax overrides."""
    resources = MappingResources({"xsl": {"profile": "xml"}, "haml": {"profile": "HTML"}})
    return ProfileRegistry(resources=resources, caret=lambda: "|")


@pytest.fixture(autouse=True)
def _fresh_global_registry():
    reset_profile_registry()
    yield
    reset_profile_registry()
