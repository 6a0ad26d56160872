"""
Tests for primitive value generators.
"""

import pytest

from quickprop.generators.arbitrary import (
    FLOAT_RESOLUTION,
    INT32_MAX,
    INT32_MIN,
    booleans,
    characters,
    floats,
    int32s,
    integers,
    naturals,
    text,
)
from quickprop.generators.core import generate, resize


class TestBooleans:

    def test_both_values(self, seeds):
        assert {generate(s, booleans()) for s in seeds} == {True, False}

    def test_type(self, seed):
        assert type(generate(seed, booleans())) is bool


class TestIntegers:
    """Tests for integer generators."""

    def test_int32_bounds(self, seeds):
        for s in seeds:
            assert INT32_MIN <= generate(s, int32s()) <= INT32_MAX

    def test_int32_ignores_size(self, seeds):
        values = [generate(s, resize(0, int32s())) for s in seeds[:20]]
        assert any(abs(v) > 1000 for v in values)

    @pytest.mark.parametrize("size", [0, 1, 10])
    def test_integers_bounded_by_size(self, seeds, size):
        for s in seeds[:50]:
            assert -size <= generate(s, resize(size, integers())) <= size

    def test_naturals_non_negative(self, seeds):
        for s in seeds[:50]:
            assert 0 <= generate(s, resize(7, naturals())) <= 7


class TestFloats:
    """Tests for floats."""

    def test_bounded_by_size(self, seeds):
        for s in seeds[:50]:
            assert -3.0 <= generate(s, resize(3, floats())) <= 3.0

    def test_on_resolution_grid(self, seeds):
        for s in seeds[:20]:
            value = generate(s, resize(2, floats()))
            assert value * FLOAT_RESOLUTION == pytest.approx(round(value * FLOAT_RESOLUTION))

    def test_size_zero_is_zero(self, seed):
        assert generate(seed, resize(0, floats())) == 0.0


class TestText:
    """Tests for characters and text."""

    def test_characters_printable(self, seeds):
        for s in seeds:
            ch = generate(s, characters())
            assert len(ch) == 1
            assert ch.isprintable()

    def test_text_length_bounded(self, seeds):
        for s in seeds[:50]:
            value = generate(s, resize(6, text()))
            assert isinstance(value, str)
            assert len(value) <= 6
