"""
Generator core: the size-parameterized, splittable-seed computation.

A ``Gen[T]`` is a pure function ``(size, RandomState) -> T``. Composition
always splits the incoming state so that sub-generators draw from
independent streams:

    bind(g, f)(n, r0) = let (r1, r2) = split(r0)
                        a = g(n, r1)
                        f(a)(n, r2)

Everything else in this module (``lift``, ``apply``, ``lift2..4``) is built
from ``bind`` and ``unit``. Method chaining on ``Gen`` (``g.bind(f).map(h)``)
is the sequencing sugar.

Gen is only morally a monad: two generators with the same distribution may
still differ as functions of the seed. ``promote`` is the one combinator that
can observe the difference.
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from quickprop.config.settings import SETTINGS
from quickprop.rng.state import RandomState, create

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Gen(Generic[T]):
    """
    A generator for values of type T.

    Attributes
    ----------
    run : Callable[[int, RandomState], T]
        Produce a value at the given size from the given state
    """

    run: Callable[[int, RandomState], T]

    def __call__(self, size: int, state: RandomState) -> T:
        return self.run(size, state)

    def bind(self, f: Callable[[T], "Gen[U]"]) -> "Gen[U]":
        """Sequence with a generator-producing continuation."""
        return bind(self, f)

    def map(self, f: Callable[[T], U]) -> "Gen[U]":
        """Apply a plain function to generated values."""
        return lift(f, self)

    def resize(self, n: int) -> "Gen[T]":
        return resize(n, self)

    def scale(self, f: Callable[[int], int]) -> "Gen[T]":
        return scale(f, self)

    def variant(self, tag: int) -> "Gen[T]":
        return variant(tag, self)

    def such_that(self, predicate: Callable[[T], bool]) -> "Gen[T]":
        """Retry until ``predicate`` holds; see ``combinators.such_that``."""
        from quickprop.generators.combinators import such_that

        return such_that(predicate, self)


# =============================================================================
# Primitives
# =============================================================================

def unit(value: T) -> Gen[T]:
    """Inject a value into a generator; size and state are ignored."""
    return Gen(lambda size, state: value)


def bind(gen: Gen[T], f: Callable[[T], Gen[U]]) -> Gen[U]:
    """
    Sequentially compose two generators.

    The incoming state is split: ``gen`` runs on the left branch and the
    generator returned by ``f`` runs on the right branch, so consuming
    ``gen`` never biases the continuation.

    Parameters
    ----------
    gen : Gen[T]
        Generator whose value is passed to ``f``
    f : Callable[[T], Gen[U]]
        Continuation producing the next generator

    Returns
    -------
    Gen[U]
        Composed generator
    """
    def run(size: int, state: RandomState) -> U:
        left, right = state.split()
        return f(gen.run(size, left)).run(size, right)

    return Gen(run)


def sized(f: Callable[[int], Gen[T]]) -> Gen[T]:
    """Build a generator that depends on the size parameter."""
    return Gen(lambda size, state: f(size).run(size, state))


def resize(n: int, gen: Gen[T]) -> Gen[T]:
    """
    Override the size parameter.

    Raises
    ------
    ValueError
        If ``n`` is negative
    """
    if n < 0:
        raise ValueError(f"CRITICAL: size must be >= 0, got {n}")
    return Gen(lambda size, state: gen.run(n, state))


def variant(tag: int, gen: Gen[T]) -> Gen[T]:
    """Perturb the state with an integer tag before running ``gen``."""
    return Gen(lambda size, state: gen.run(size, state.variant(tag)))


def scale(f: Callable[[int], int], gen: Gen[T]) -> Gen[T]:
    """Run ``gen`` at size ``f(current_size)``."""
    return sized(lambda n: resize(f(n), gen))


def promote(f: Callable[[T], Gen[U]]) -> Gen[Callable[[T], U]]:
    """
    Promote a generator-producing function to a generator of functions.

    Unsafe: every call of the produced function reuses the same state, so
    morally-equal generators can be told apart.
    """
    return Gen(lambda size, state: lambda a: f(a).run(size, state))


# =============================================================================
# Applicative lifting
# =============================================================================

def apply(gen_f: Gen[Callable[[T], U]], gen: Gen[T]) -> Gen[U]:
    """Apply a generated function to a generated value."""
    return bind(gen_f, lambda f: bind(gen, lambda x: unit(f(x))))


def lift(f: Callable[[T], U], gen: Gen[T]) -> Gen[U]:
    """Map ``f`` over generated values."""
    return bind(gen, lambda x: unit(f(x)))


def lift2(f: Callable[..., U], g1: Gen[Any], g2: Gen[Any]) -> Gen[U]:
    return bind(g1, lambda a: bind(g2, lambda b: unit(f(a, b))))


def lift3(f: Callable[..., U], g1: Gen[Any], g2: Gen[Any], g3: Gen[Any]) -> Gen[U]:
    return bind(g1, lambda a: lift2(lambda b, c: f(a, b, c), g2, g3))


def lift4(
    f: Callable[..., U], g1: Gen[Any], g2: Gen[Any], g3: Gen[Any], g4: Gen[Any]
) -> Gen[U]:
    return bind(g1, lambda a: lift3(lambda b, c, d: f(a, b, c, d), g2, g3, g4))


def two(gen: Gen[T]) -> Gen[tuple[T, T]]:
    """Pair of independent draws from ``gen``."""
    return lift2(lambda a, b: (a, b), gen, gen)


def three(gen: Gen[T]) -> Gen[tuple[T, T, T]]:
    return lift3(lambda a, b, c: (a, b, c), gen, gen, gen)


def four(gen: Gen[T]) -> Gen[tuple[T, T, T, T]]:
    return lift4(lambda a, b, c, d: (a, b, c, d), gen, gen, gen, gen)


# =============================================================================
# Drivers
# =============================================================================

def _run_from(root: RandomState, gen: Gen[T]) -> T:
    """Draw the size from ``root`` and run ``gen`` on the successor state."""
    size, state = root.range(0, SETTINGS.generation.max_size)
    return gen.run(size, state)


def generate(seed: int | None, gen: Gen[T]) -> T:
    """
    Run a generator from a seed.

    The size is drawn uniformly from ``[0, SETTINGS.generation.max_size]``
    using the seeded state; use ``resize`` to force a particular size.

    Parameters
    ----------
    seed : int, optional
        Seed for the root state. None draws fresh entropy.
    gen : Gen[T]
        Generator to run

    Returns
    -------
    T
        Generated value

    Examples
    --------
    >>> from quickprop.generators.combinators import choose
    >>> generate(7, choose(1, 6)) == generate(7, choose(1, 6))
    True
    """
    return _run_from(create(seed), gen)


def sample(seed: int | None, gen: Gen[T]) -> list[T]:
    """
    Generate example values at each size in ``SETTINGS.generation.sample_sizes``.

    Every value starts from the same root state, resolved once (so a None
    seed draws entropy once for the whole sweep); only the size changes.
    Intended for inspecting a generator, not for checking properties.
    """
    root = create(seed)
    return [_run_from(root, resize(n, gen)) for n in SETTINGS.generation.sample_sizes]
