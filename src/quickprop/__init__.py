"""
quickprop: property-based test-case generation.

State a universally quantified property, let quickprop synthesize inputs
from a splittable random seed, and aggregate pass / fail / label statistics.

Quick Start
-----------
>>> from quickprop import for_all, list_of, int32s, check
>>> prop = for_all(list_of(int32s()), lambda xs: list(reversed(list(reversed(xs)))) == xs)
>>> check(prop).passed
True

Version: 0.1.0
"""

__version__ = "0.1.0"

# =============================================================================
# Random State
# =============================================================================
from quickprop.rng import RandomState

# =============================================================================
# Generators - Primary API
# =============================================================================
from quickprop.generators import (
    Gen,
    InfiniteSequence,
    apply,
    bind,
    booleans,
    characters,
    choose,
    elements,
    filter_elements,
    floats,
    four,
    frequency,
    generate,
    growing_elements,
    infinite_seq_of,
    int32s,
    integers,
    lift,
    lift2,
    lift3,
    lift4,
    list_of,
    naturals,
    non_empty_list_of,
    one_of,
    promote,
    resize,
    sample,
    scale,
    shuffle,
    sized,
    sublist_of,
    such_that,
    such_that_option,
    text,
    three,
    two,
    unit,
    variant,
    vector_of,
)

# =============================================================================
# Properties
# =============================================================================
from quickprop.properties import (
    Deferred,
    Nested,
    PredicateOutcome,
    Property,
    Result,
    Unverified,
    Verdict,
    classify,
    collect,
    evaluate,
    for_all,
    implies,
    label,
    to_property,
    trivial,
)

# =============================================================================
# Checking
# =============================================================================
from quickprop.checking import (
    CheckReport,
    PropertyFalsifiedError,
    check,
    ensure_holds,
)

# =============================================================================
# Configuration
# =============================================================================
from quickprop.config.settings import SETTINGS

__all__ = [
    # Version
    "__version__",
    # Random state
    "RandomState",
    # Generator core
    "Gen",
    "unit",
    "bind",
    "apply",
    "lift",
    "lift2",
    "lift3",
    "lift4",
    "two",
    "three",
    "four",
    "sized",
    "resize",
    "scale",
    "variant",
    "promote",
    "generate",
    "sample",
    # Generator combinators
    "choose",
    "elements",
    "one_of",
    "frequency",
    "growing_elements",
    "vector_of",
    "list_of",
    "non_empty_list_of",
    "infinite_seq_of",
    "InfiniteSequence",
    "such_that_option",
    "such_that",
    "shuffle",
    "filter_elements",
    "sublist_of",
    # Primitive generators
    "booleans",
    "int32s",
    "integers",
    "naturals",
    "floats",
    "characters",
    "text",
    # Properties
    "Result",
    "Property",
    "evaluate",
    "PredicateOutcome",
    "Verdict",
    "Deferred",
    "Nested",
    "Unverified",
    "to_property",
    "for_all",
    "implies",
    "label",
    "classify",
    "trivial",
    "collect",
    # Checking
    "CheckReport",
    "PropertyFalsifiedError",
    "check",
    "ensure_holds",
    # Config
    "SETTINGS",
]
