"""Shared fixtures — every test gets its own registry."""

import pytest

from formrules.validators import RuleRegistry, ValidationEngine


@pytest.fixture
def registry():
    """Empty registry with no default rules."""
    return RuleRegistry()


@pytest.fixture
def engine():
    """Engine over a fresh registry seeded with the default table."""
    return ValidationEngine(RuleRegistry.with_defaults())


@pytest.fixture
def bare_engine(registry):
    """Engine over the empty registry fixture."""
    return ValidationEngine(registry)
