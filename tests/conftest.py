"""
Centralized pytest fixtures for the quickprop test suite.

This module provides shared fixtures used across all test categories:
- anti_patterns/
- unit/
- properties/
- validation/

Fixture Categories:
1. Seeds - Fixed seeds and seed sweeps for reproducible runs
2. Random States - Root states built from those seeds
3. Statistical Tiers - Sample sizes and significance levels for validation tests
4. Sample Generators - Generators shared by several modules
"""

from dataclasses import dataclass

import pytest

from quickprop.generators import Gen, choose, int32s, list_of
from quickprop.rng import RandomState

# =============================================================================
# SEEDS
# =============================================================================

#: Seed used by single-run tests
DEFAULT_SEED: int = 42

#: Seeds swept by tests that must hold "for all seeds"
SEED_SWEEP: tuple[int, ...] = tuple(range(200))


@pytest.fixture
def seed() -> int:
    """Fixed seed for single-run tests."""
    return DEFAULT_SEED


@pytest.fixture(scope="session")
def seeds() -> tuple[int, ...]:
    """Seed sweep for "for all seeds" tests."""
    return SEED_SWEEP


# =============================================================================
# RANDOM STATES
# =============================================================================

@pytest.fixture
def root_state() -> RandomState:
    """Root state built from DEFAULT_SEED."""
    return RandomState.create(DEFAULT_SEED)


# =============================================================================
# STATISTICAL TIERS
# =============================================================================

@dataclass(frozen=True)
class StatisticalTiers:
    """
    Sample sizes and significance levels for distribution tests.

    Significance is set low to keep false positives rare in CI; sample sizes
    are large enough for chi-squared expected counts well above 5.
    """

    significance: float = 0.001
    n_seeds: int = 1000
    max_abs_correlation: float = 0.1


STATISTICS = StatisticalTiers()


@pytest.fixture(scope="session")
def statistics() -> StatisticalTiers:
    """Provide statistical test settings."""
    return STATISTICS


# =============================================================================
# SAMPLE GENERATORS
# =============================================================================

@pytest.fixture
def int_lists() -> Gen[list[int]]:
    """Size-bounded lists of 32-bit integers."""
    return list_of(int32s())


@pytest.fixture
def die() -> Gen[int]:
    """Six-sided die."""
    return choose(1, 6)
