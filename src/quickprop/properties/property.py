"""
Property: a generator of Result.

Wrapping ``Gen[Result]`` gives every check, however it was built, one
uniform type that can be mixed with ordinary generator computations through
``evaluate``.
"""

from dataclasses import dataclass

from quickprop.generators.core import Gen, unit
from quickprop.properties.result import Result


@dataclass(frozen=True)
class Property:
    """
    A checkable claim.

    Attributes
    ----------
    gen : Gen[Result]
        How to produce one Result sample
    """

    gen: Gen[Result]


def evaluate(prop: Property) -> Gen[Result]:
    """Extract the ``Gen[Result]`` of a property."""
    return prop.gen


def bool_property(status: bool) -> Property:
    """Property that always yields a definite ``status``."""
    return Property(unit(Result.of(status)))


#: Canonical vacuous property: status None, empty labels and args
VACUOUS = Property(unit(Result.vacuous()))
