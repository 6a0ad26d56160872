"""
Frozen configuration settings for generation and checking.

All configuration is immutable (frozen dataclasses) so that a run is fully
described by its settings and seed.
"""

import os
from dataclasses import dataclass


def _env_int(name: str, default: int) -> int:
    """
    Read an integer from the environment, falling back to a default.

    Raises
    ------
    ValueError
        If the variable is set but is not an integer
    """
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"CRITICAL: {name} must be an integer, got {raw!r}") from e


# =============================================================================
# Generation Configuration
# =============================================================================

@dataclass(frozen=True)
class GenerationConfig:
    """
    Immutable generator-driver configuration.

    Attributes
    ----------
    max_size : int
        Upper bound of the size drawn by ``generate`` (inclusive)
    sample_sizes : tuple[int, ...]
        Sizes swept by ``sample``
    """

    max_size: int = 30
    sample_sizes: tuple[int, ...] = tuple(range(0, 21, 2))

    def __post_init__(self) -> None:
        """Validate sizes."""
        if self.max_size < 0:
            raise ValueError(f"CRITICAL: max_size must be >= 0, got {self.max_size}")
        if any(n < 0 for n in self.sample_sizes):
            raise ValueError(f"CRITICAL: sample_sizes must be >= 0, got {self.sample_sizes}")


# =============================================================================
# Check Configuration
# =============================================================================

@dataclass(frozen=True)
class CheckConfig:
    """
    Immutable property-check configuration.

    Attributes
    ----------
    n_tests : int
        Number of non-vacuous results required for a property to pass.
        Override with QUICKPROP_N_TESTS.
    seed : int
        First seed of a check run; test ``i`` uses ``seed + i``.
        Override with QUICKPROP_SEED.
    max_discard_ratio : int
        Give up once discarded results exceed ``n_tests * max_discard_ratio``
    verbose : bool
        Log a summary line per check
    """

    n_tests: int = None  # type: ignore[assignment]  # Set in __post_init__
    seed: int = None  # type: ignore[assignment]  # Set in __post_init__
    max_discard_ratio: int = 10
    verbose: bool = False

    def __post_init__(self) -> None:
        """Resolve environment overrides and validate."""
        # Frozen dataclass workaround: use object.__setattr__
        if self.n_tests is None:
            object.__setattr__(self, "n_tests", _env_int("QUICKPROP_N_TESTS", 100))
        if self.seed is None:
            object.__setattr__(self, "seed", _env_int("QUICKPROP_SEED", 42))

        if self.n_tests <= 0:
            raise ValueError(f"CRITICAL: n_tests must be > 0, got {self.n_tests}")
        if self.max_discard_ratio < 0:
            raise ValueError(
                f"CRITICAL: max_discard_ratio must be >= 0, got {self.max_discard_ratio}"
            )


# =============================================================================
# Master Configuration
# =============================================================================

@dataclass(frozen=True)
class Settings:
    """
    Master frozen configuration combining all sub-configs.

    Usage
    -----
    >>> from quickprop.config.settings import SETTINGS
    >>> SETTINGS.generation.max_size
    30
    """

    generation: GenerationConfig = GenerationConfig()
    check: CheckConfig = CheckConfig()


# Singleton instance - import this
SETTINGS = Settings()
