"""
Property combinators: quantification, implication and labelling.

Every combinator accepts anything ``to_property`` can coerce (bool,
numpy.bool_, Deferred, Property, or a value with no verdict) wherever a
property is expected.
"""

from typing import Any, Callable, TypeVar

from quickprop.generators.core import Gen, bind, lift
from quickprop.properties.outcome import to_property
from quickprop.properties.property import VACUOUS, Property, evaluate
from quickprop.properties.result import Result

T = TypeVar("T")


def for_all(gen: Gen[T], predicate: Callable[[T], Any]) -> Property:
    """
    Property that holds for all values ``gen`` can produce.

    Draws ``arg`` from ``gen``, coerces ``predicate(arg)`` to a Property,
    evaluates it and prepends ``str(arg)`` to the result's args. Nested
    ``for_all`` calls therefore report their arguments outermost-first.

    Parameters
    ----------
    gen : Gen[T]
        Generator of arguments
    predicate : Callable[[T], Any]
        Check applied to each argument

    Returns
    -------
    Property
        Quantified property

    Examples
    --------
    >>> from quickprop.generators import int32s, list_of
    >>> prop = for_all(list_of(int32s()), lambda xs: xs[::-1][::-1] == xs)
    """
    def with_argument(arg: T) -> Gen[Result]:
        inner = evaluate(to_property(predicate(arg)))
        return lift(lambda result: result.with_arg(str(arg)), inner)

    return Property(bind(gen, with_argument))


def implies(condition: bool, candidate: Any) -> Property:
    """
    Conditional property: ``candidate`` only counts when ``condition`` holds.

    When ``condition`` is false the result is the canonical vacuous property
    and ``candidate`` is not coerced, so a ``Deferred`` candidate is never
    forced.
    """
    if condition:
        return to_property(candidate)
    return VACUOUS


def label(tag: str, candidate: Any) -> Property:
    """Prepend ``tag`` to the labels of the result, keeping status and args."""
    return Property(lift(lambda result: result.with_label(tag), evaluate(to_property(candidate))))


def classify(condition: bool, tag: str, candidate: Any) -> Property:
    """
    Label the test case with ``tag`` when ``condition`` holds.

    When ``condition`` is false the property is replaced by the vacuous
    property: the candidate's verdict is discarded, not merely left
    unlabelled.
    """
    if condition:
        return label(tag, candidate)
    return VACUOUS


def trivial(condition: bool, candidate: Any) -> Property:
    """``classify(condition, "trivial", candidate)``."""
    return classify(condition, "trivial", candidate)


def collect(value: Any, candidate: Any) -> Property:
    """Label with ``str(value)``; used to tally the distribution of inputs."""
    return label(str(value), candidate)
