"""Shared fixtures for the unitbridge test suite."""

import pytest

from unitbridge.core.world import use_world
from unitbridge.tests.fakes import FakeRegistryPort, FakeReporterPort


@pytest.fixture(autouse=True)
def registry():
    """Register every group a test creates with a fresh fake registry."""
    with use_world(FakeRegistryPort()) as fake:
        yield fake


@pytest.fixture
def reporter() -> FakeReporterPort:
    return FakeReporterPort()
