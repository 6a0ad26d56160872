"""
Derived generator combinators.

Provides:
- Choice: choose, elements, one_of, frequency, growing_elements
- Collections: vector_of, list_of, non_empty_list_of, infinite_seq_of
- Search: such_that_option, such_that
- Permutations and subsets: shuffle, filter_elements, sublist_of

Precondition violations (empty choices, bad weights, negative lengths) are
programmer errors in generator construction and raise ``ValueError``
immediately.

Loops below thread the state exactly as the equivalent chain of ``bind``
calls would: each step splits the current state, consumes the left branch and
continues on the right one. Each step lengthens the spawn key, so an n-step loop
costs O(n^2) hashing (see ``quickprop.rng.state``).
"""

import itertools
import logging
import numbers
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Sequence, TypeVar

from quickprop.generators.core import Gen, bind, lift, sized, unit
from quickprop.rng.state import RandomState

logger = logging.getLogger(__name__)

T = TypeVar("T")


# =============================================================================
# Choice
# =============================================================================

def choose(lower: int, upper: int) -> Gen[int]:
    """
    Uniform integer in the closed interval ``[lower, upper]``.

    Raises
    ------
    ValueError
        If ``lower > upper``
    """
    if lower > upper:
        raise ValueError(f"CRITICAL: choose requires lower <= upper, got [{lower}, {upper}]")
    return Gen(lambda size, state: state.range(lower, upper)[0])


def elements(xs: Iterable[T]) -> Gen[T]:
    """
    Pick one of the given values uniformly.

    Raises
    ------
    ValueError
        If ``xs`` is empty
    """
    items = tuple(xs)
    if not items:
        raise ValueError("CRITICAL: elements requires a non-empty sequence")
    return lift(items.__getitem__, choose(0, len(items) - 1))


def one_of(gens: Iterable[Gen[T]]) -> Gen[T]:
    """
    Run one of the given generators, chosen uniformly.

    Raises
    ------
    ValueError
        If ``gens`` is empty
    """
    choices = tuple(gens)
    if not choices:
        raise ValueError("CRITICAL: one_of requires a non-empty sequence of generators")
    return bind(elements(choices), lambda gen: gen)


def frequency(weighted: Iterable[tuple[int, Gen[T]]]) -> Gen[T]:
    """
    Choose a generator with probability proportional to its weight.

    Draws ``r`` uniformly from ``[1, total_weight]`` and walks the list,
    subtracting weights until ``r`` falls within an entry.

    Parameters
    ----------
    weighted : Iterable[tuple[int, Gen[T]]]
        ``(weight, generator)`` pairs; weights are positive integers

    Raises
    ------
    ValueError
        If the list is empty or any weight is not a positive integer

    Examples
    --------
    >>> coin = frequency([(1, unit("heads")), (1, unit("tails"))])
    """
    pairs = tuple(weighted)
    if not pairs:
        raise ValueError("CRITICAL: frequency requires a non-empty list of (weight, gen)")
    for weight, _ in pairs:
        # numpy integer scalars are Integral; bools (Python or numpy) are not weights
        if isinstance(weight, bool) or not isinstance(weight, numbers.Integral) or weight <= 0:
            raise ValueError(f"CRITICAL: frequency weights must be positive integers, got {weight!r}")
    pairs = tuple((int(weight), gen) for weight, gen in pairs)

    total = sum(weight for weight, _ in pairs)

    def pick(n: int) -> Gen[T]:
        for weight, gen in pairs:
            if n <= weight:
                return gen
            n -= weight
        raise ValueError(f"CRITICAL: frequency draw exceeded total weight {total}")

    return bind(choose(1, total), pick)


def growing_elements(xs: Sequence[T]) -> Gen[T]:
    """
    Choose among an initial segment of ``xs`` that widens with the size.

    ``xs`` is expected in increasing order of "size"; at size ``s`` only the
    first ``min(len(xs), max(1, s))`` elements are candidates.

    Raises
    ------
    ValueError
        If ``xs`` is empty
    """
    items = tuple(xs)
    if not items:
        raise ValueError("CRITICAL: growing_elements requires a non-empty sequence")
    return sized(lambda s: elements(items[: min(len(items), max(1, s))]))


# =============================================================================
# Collections
# =============================================================================

def vector_of(n: int, gen: Gen[T]) -> Gen[list[T]]:
    """
    List of exactly ``n`` independently generated values.

    Element ``i`` runs on ``state.variant(i)`` at the ambient size, so each
    position has its own stream and a fixed outer state always reproduces
    the same list.

    Raises
    ------
    ValueError
        If ``n`` is negative
    """
    if n < 0:
        raise ValueError(f"CRITICAL: vector length must be >= 0, got {n}")
    return Gen(lambda size, state: [gen.run(size, state.variant(i)) for i in range(n)])


def list_of(gen: Gen[T]) -> Gen[list[T]]:
    """List whose length is uniform in ``[0, size]``."""
    return sized(lambda s: bind(choose(0, s), lambda n: vector_of(n, gen)))


def non_empty_list_of(gen: Gen[T]) -> Gen[list[T]]:
    """List whose length is uniform in ``[1, max(1, size)]``."""
    return sized(lambda s: bind(choose(1, max(1, s)), lambda n: vector_of(n, gen)))


@dataclass(frozen=True)
class InfiniteSequence(Iterable[T]):
    """
    Lazy, restartable, infinite sequence of generated values.

    Position ``i`` is generated from ``state.variant(i)``; iterating twice, or
    indexing, always yields the same values.

    Attributes
    ----------
    gen : Gen[T]
        Element generator
    size : int
        Size used for every element
    state : RandomState
        State captured when the sequence was generated
    """

    gen: Gen[T]
    size: int
    state: RandomState

    def __iter__(self) -> Iterator[T]:
        return (self[i] for i in itertools.count())

    def __getitem__(self, index: int) -> T:
        if index < 0:
            raise IndexError(f"infinite sequence index must be >= 0, got {index}")
        return self.gen.run(self.size, self.state.variant(index))

    def take(self, n: int) -> list[T]:
        """First ``n`` values."""
        return list(itertools.islice(self, n))


def infinite_seq_of(gen: Gen[T]) -> Gen[InfiniteSequence[T]]:
    """Generator of lazy infinite sequences of independent values."""
    return Gen(lambda size, state: InfiniteSequence(gen, size, state))


# =============================================================================
# Search
# =============================================================================

def _search(
    predicate: Callable[[T], bool], gen: Gen[T], size: int, state: RandomState
) -> tuple[bool, Any]:
    """
    Bounded retry loop shared by ``such_that_option`` and ``such_that``.

    Attempt ``k`` (starting at 0) runs ``gen`` at size ``2k + n`` where ``n``
    starts at ``max(1, size)`` and decreases by one per failure; the search
    stops when ``n`` reaches zero.
    """
    k, n = 0, max(1, size)
    while n > 0:
        attempt_state, state = state.split()
        candidate = gen.run(2 * k + n, attempt_state)
        if predicate(candidate):
            return True, candidate
        k, n = k + 1, n - 1
    return False, None


def such_that_option(predicate: Callable[[T], bool], gen: Gen[T]) -> Gen[T | None]:
    """
    Try to generate a value satisfying ``predicate``; None if none was found.

    The number of attempts is bounded by ``max(1, size)`` while the candidate
    size grows with each retry. A generator that can itself produce None
    should use ``such_that`` instead, since None is the "not found" value.
    """
    return Gen(lambda size, state: _search(predicate, gen, size, state)[1])


def such_that(predicate: Callable[[T], bool], gen: Gen[T]) -> Gen[T]:
    """
    Generate a value satisfying ``predicate``, retrying without bound.

    Each failed bounded round restarts one size larger. Does not terminate if
    ``predicate`` is unsatisfiable over ``gen``.
    """
    def run(size: int, state: RandomState) -> T:
        while True:
            round_state, state = state.split()
            found, value = _search(predicate, gen, size, round_state)
            if found:
                return value
            logger.debug(f"such_that: no candidate at size {size}, retrying at size {size + 1}")
            size += 1

    return Gen(run)


# =============================================================================
# Permutations and Subsets
# =============================================================================

def shuffle(xs: Iterable[T]) -> Gen[list[T]]:
    """
    Random permutation of ``xs``.

    Repeatedly picks one of the remaining positions uniformly. Works on
    positions, so duplicate elements are kept (the output is always the same
    multiset as the input).
    """
    items = tuple(xs)

    def run(size: int, state: RandomState) -> list[T]:
        remaining = list(items)
        permutation = []
        while remaining:
            pick_state, state = state.split()
            index, _ = pick_state.range(0, len(remaining) - 1)
            permutation.append(remaining.pop(index))
        return permutation

    return Gen(run)


def filter_elements(predicate: Callable[[T], Gen[bool]], xs: Iterable[T]) -> Gen[list[T]]:
    """
    Subsequence of ``xs`` whose elements pass a generator-valued predicate.

    Equivalent to the right fold

        foldr (\\x acc -> do keep <- predicate x; rest <- acc;
                          return (x : rest if keep else rest)) (unit []) xs

    written as a loop over the states that fold would thread. Relative order
    is preserved.
    """
    items = tuple(xs)

    def run(size: int, state: RandomState) -> list[T]:
        kept = []
        for x in items:
            flag_state, rest_state = state.split()
            if predicate(x).run(size, flag_state):
                kept.append(x)
            state, _ = rest_state.split()
        return kept

    return Gen(run)


def sublist_of(xs: Iterable[T]) -> Gen[list[T]]:
    """Random subsequence: each element kept independently with probability 1/2."""
    coin = one_of([unit(True), unit(False)])
    return filter_elements(lambda _: coin, xs)
