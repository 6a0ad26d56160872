"""
Property-based testing using Hypothesis.

Hypothesis drives seeds, sizes and bounds into quickprop itself, checking
laws that must hold for every seed rather than a fixed sweep.

Modules:
    test_generator_laws: determinism, range, shape and permutation laws
    test_property_laws: verdict coercion, vacuity, labelling, runner purity
"""
