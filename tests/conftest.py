"""Shared fixtures: every test gets its own tracker and registry."""

import pytest

from rxsuper import DependencyTracker, Registry, use_registry, use_tracker


@pytest.fixture(autouse=True)
def tracker():
    with use_tracker(DependencyTracker()) as t:
        yield t


@pytest.fixture(autouse=True)
def registry():
    with use_registry(Registry()) as r:
        yield r
