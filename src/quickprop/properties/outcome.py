"""
Predicate outcomes and their coercion to Property.

A predicate passed to ``for_all`` or ``implies`` may return a plain boolean,
a deferred boolean, a nested Property, or anything else (for example None
from a predicate that only runs assertions). Each shape is a case of the
closed variant ``PredicateOutcome``:

- Verdict(value)    -> status ``value``
- Deferred(thunk)   -> status ``thunk()``, forced once at coercion time
- Nested(property)  -> the property unchanged
- Unverified()      -> vacuous (status None)

``outcome`` lifts plain Python values into the variant through a
``functools.singledispatch`` overload set; ``to_property`` then converts.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import singledispatch
from typing import Any, Callable

import numpy as np

from quickprop.properties.property import VACUOUS, Property, bool_property


class PredicateOutcome(ABC):
    """Base class of the predicate-outcome variant."""

    @abstractmethod
    def to_property(self) -> Property:
        """Convert to a canonical Property."""
        raise NotImplementedError


@dataclass(frozen=True)
class Verdict(PredicateOutcome):
    """A definite boolean verdict."""

    value: bool

    def __post_init__(self) -> None:
        # Normalizes numpy.bool_ and other bool-likes
        object.__setattr__(self, "value", bool(self.value))

    def to_property(self) -> Property:
        return bool_property(self.value)


@dataclass(frozen=True)
class Deferred(PredicateOutcome):
    """
    A boolean computed on demand.

    Use it when the verdict must only be computed if a precondition holds:

    >>> implies(a != 0, Deferred(lambda: 1 // a == 1 // a))
    """

    thunk: Callable[[], bool]

    def to_property(self) -> Property:
        return bool_property(bool(self.thunk()))


@dataclass(frozen=True)
class Nested(PredicateOutcome):
    """An already-built Property."""

    property: Property

    def to_property(self) -> Property:
        return self.property


@dataclass(frozen=True)
class Unverified(PredicateOutcome):
    """An outcome with no boolean verdict; evaluates as vacuous."""

    def to_property(self) -> Property:
        return VACUOUS


@singledispatch
def outcome(value: Any) -> PredicateOutcome:
    """
    Lift a predicate's return value into ``PredicateOutcome``.

    Values of unregistered types carry no verdict and become ``Unverified``.
    """
    return Unverified()


@outcome.register
def _(value: bool) -> PredicateOutcome:
    return Verdict(value)


@outcome.register(np.bool_)
def _(value: np.bool_) -> PredicateOutcome:
    return Verdict(bool(value))


@outcome.register
def _(value: Property) -> PredicateOutcome:
    return Nested(value)


@outcome.register
def _(value: PredicateOutcome) -> PredicateOutcome:
    return value


def to_property(candidate: Any) -> Property:
    """Coerce any predicate return value into a Property."""
    return outcome(candidate).to_property()
