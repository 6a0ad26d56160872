"""
Generator engine: size-parameterized, splittable-seed value generators.

Provides:
- Core algebra (core): Gen, unit, bind, sized, resize, variant, lift*
- Drivers (core): generate, sample
- Derived combinators (combinators): choice, collections, search, subsets
- Primitive values (arbitrary): booleans, integers, floats, text
"""

from quickprop.generators.arbitrary import (
    booleans,
    characters,
    floats,
    int32s,
    integers,
    naturals,
    text,
)
from quickprop.generators.combinators import (
    InfiniteSequence,
    choose,
    elements,
    filter_elements,
    frequency,
    growing_elements,
    infinite_seq_of,
    list_of,
    non_empty_list_of,
    one_of,
    shuffle,
    sublist_of,
    such_that,
    such_that_option,
    vector_of,
)
from quickprop.generators.core import (
    Gen,
    apply,
    bind,
    four,
    generate,
    lift,
    lift2,
    lift3,
    lift4,
    promote,
    resize,
    sample,
    scale,
    sized,
    three,
    two,
    unit,
    variant,
)

__all__ = [
    # Core
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
    # Drivers
    "generate",
    "sample",
    # Combinators
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
    # Arbitrary
    "booleans",
    "int32s",
    "integers",
    "naturals",
    "floats",
    "characters",
    "text",
]
