"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from chronofield import COPTIC, ResolutionBuilder, ResolverConfig, Strictness, all_chronologies


@pytest.fixture(params=all_chronologies(), ids=lambda chronology: chronology.name)
def chronology(request):
    """Each built-in chronology in turn."""
    return request.param


@pytest.fixture
def strict_config():
    return ResolverConfig(strictness=Strictness.STRICT, chronology="ISO")


@pytest.fixture
def coptic_builder(strict_config):
    """Fresh strict builder resolving into Coptic."""
    return ResolutionBuilder(COPTIC, strict_config)
