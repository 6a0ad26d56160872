"""
Property / Result algebra.

Provides:
- Result: status + labels + args of one evaluation
- Property: wrapper around Gen[Result]
- Outcome variant: Verdict, Deferred, Nested, Unverified (+ coercion)
- Combinators: for_all, implies, label, classify, trivial, collect
"""

from quickprop.properties.combinators import (
    classify,
    collect,
    for_all,
    implies,
    label,
    trivial,
)
from quickprop.properties.outcome import (
    Deferred,
    Nested,
    PredicateOutcome,
    Unverified,
    Verdict,
    outcome,
    to_property,
)
from quickprop.properties.property import (
    VACUOUS,
    Property,
    bool_property,
    evaluate,
)
from quickprop.properties.result import Result

__all__ = [
    # Result
    "Result",
    # Property
    "Property",
    "evaluate",
    "bool_property",
    "VACUOUS",
    # Outcomes
    "PredicateOutcome",
    "Verdict",
    "Deferred",
    "Nested",
    "Unverified",
    "outcome",
    "to_property",
    # Combinators
    "for_all",
    "implies",
    "label",
    "classify",
    "trivial",
    "collect",
]
