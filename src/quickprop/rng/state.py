"""
Immutable, splittable random state.

Every generator in quickprop is a pure function of ``(size, RandomState)``.
The state is a value: it is never advanced in place. Independent streams are
obtained by *deriving* child states, each identified by the root entropy and
a path of integers (numpy's ``SeedSequence`` spawn key).

Derivation paths:
- ``split()``     -> ``key + (0, 0)`` and ``key + (0, 1)``
- ``variant(t)``  -> ``key + (1, n, w1, ..., wn)``, the 32-bit words of
  ``zigzag(t)`` prefixed by their count
- ``range(...)``  -> ``key + (2,)`` as the successor state

SeedSequence hashes each key entry as one or more 32-bit words. Every entry
here fits in one word and each derivation starts with its own marker, so
a derivation path reads back unambiguously and no two paths share a word
stream.

Each derivation lengthens the key and ``range`` rehashes all of it, so a
loop of n derivations (``shuffle``, ``filter_elements``) costs O(n^2).

See: numpy.random.SeedSequence for the hashing that decorrelates children.
"""

from dataclasses import dataclass

import numpy as np

#: Signed 64-bit bounds accepted by ``RandomState.range``
INT64_MIN: int = -(2**63)
INT64_MAX: int = 2**63 - 1

_SPLIT_MARKER = 0
_VARIANT_MARKER = 1
_NEXT_MARKER = 2

_WORD_BITS = 32
_WORD_MASK = (1 << _WORD_BITS) - 1


def zigzag(value: int) -> int:
    """Map any integer onto a non-negative one (0, -1, 1, -2 -> 0, 1, 2, 3)."""
    return 2 * value if value >= 0 else -2 * value - 1


def _words(value: int) -> tuple[int, ...]:
    """Little-endian 32-bit words of a non-negative integer (empty for 0)."""
    words = []
    while value:
        words.append(value & _WORD_MASK)
        value >>= _WORD_BITS
    return tuple(words)


@dataclass(frozen=True)
class RandomState:
    """
    Opaque splittable random state.

    Attributes
    ----------
    entropy : int
        Root entropy, fixed at creation
    spawn_key : tuple[int, ...]
        Derivation path from the root state

    Examples
    --------
    >>> state = RandomState.create(42)
    >>> left, right = state.split()
    >>> value, _ = left.range(1, 6)
    >>> 1 <= value <= 6
    True
    """

    entropy: int
    spawn_key: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        """Validate state identity."""
        if self.entropy < 0:
            raise ValueError(f"CRITICAL: entropy must be >= 0, got {self.entropy}")

    @classmethod
    def create(cls, seed: int | None = None) -> "RandomState":
        """
        Create a root state from an integer seed.

        Parameters
        ----------
        seed : int, optional
            Any Python integer. Negative seeds are zig-zag encoded.
            If None, fresh entropy is drawn from the operating system.

        Returns
        -------
        RandomState
            Root state
        """
        if seed is None:
            return cls(entropy=int(np.random.SeedSequence().entropy))
        return cls(entropy=zigzag(int(seed)))

    def seed_sequence(self) -> np.random.SeedSequence:
        """numpy SeedSequence identified by this state."""
        return np.random.SeedSequence(self.entropy, spawn_key=self.spawn_key)

    def _child(self, *path: int) -> "RandomState":
        return RandomState(entropy=self.entropy, spawn_key=self.spawn_key + path)

    def split(self) -> tuple["RandomState", "RandomState"]:
        """
        Split into two independent states.

        Pure: calling ``split`` repeatedly on the same state always yields the
        same pair of children.
        """
        return self._child(_SPLIT_MARKER, 0), self._child(_SPLIT_MARKER, 1)

    def variant(self, tag: int) -> "RandomState":
        """Deterministically perturb the state; distinct tags give distinct streams."""
        words = _words(zigzag(int(tag)))
        return self._child(_VARIANT_MARKER, len(words), *words)

    def range(self, lower: int, upper: int) -> tuple[int, "RandomState"]:
        """
        Draw a uniform integer in the closed interval ``[lower, upper]``.

        Parameters
        ----------
        lower : int
            Inclusive lower bound
        upper : int
            Inclusive upper bound

        Returns
        -------
        tuple[int, RandomState]
            The drawn value and the successor state

        Raises
        ------
        ValueError
            If ``lower > upper`` or a bound does not fit in signed 64 bits
        """
        if lower > upper:
            raise ValueError(f"CRITICAL: range requires lower <= upper, got [{lower}, {upper}]")
        if lower < INT64_MIN or upper > INT64_MAX:
            raise ValueError(
                f"CRITICAL: range bounds must fit in signed 64 bits, got [{lower}, {upper}]"
            )

        rng = np.random.Generator(np.random.PCG64(self.seed_sequence()))
        value = int(rng.integers(lower, upper, endpoint=True, dtype=np.int64))
        return value, self._child(_NEXT_MARKER)

    def __repr__(self) -> str:
        return f"RandomState(entropy={self.entropy}, depth={len(self.spawn_key)})"


def create(seed: int | None = None) -> RandomState:
    """Create a root ``RandomState`` from a seed."""
    return RandomState.create(seed)
