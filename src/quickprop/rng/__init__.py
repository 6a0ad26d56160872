"""
Splittable random state consumed by the generator engine.

Provides:
- RandomState: immutable token with split / variant / range
- create: root state from an integer seed
"""

from quickprop.rng.state import (
    INT64_MAX,
    INT64_MIN,
    RandomState,
    create,
    zigzag,
)

__all__ = [
    "RandomState",
    "create",
    "zigzag",
    "INT64_MIN",
    "INT64_MAX",
]
