"""
Tests for the splittable random state.

Tests correctness of:
- Seed handling (including negative seeds)
- Purity of split / variant / range
- Separation of derived streams
"""

import pytest

from quickprop.rng import INT64_MAX, INT64_MIN, RandomState, create, zigzag


class TestZigzag:
    """Tests for the signed-to-unsigned encoding."""

    def test_small_values(self):
        assert [zigzag(v) for v in (0, -1, 1, -2, 2)] == [0, 1, 2, 3, 4]

    def test_injective_on_range(self):
        encoded = {zigzag(v) for v in range(-500, 501)}
        assert len(encoded) == 1001


class TestCreate:
    """Tests for RandomState.create."""

    def test_same_seed_same_state(self):
        assert RandomState.create(7) == RandomState.create(7)

    def test_module_create_matches_classmethod(self):
        assert create(7) == RandomState.create(7)

    def test_negative_seed_accepted(self):
        state = RandomState.create(-3)
        assert state.entropy == 5

    def test_negative_and_positive_seeds_differ(self):
        assert RandomState.create(-1) != RandomState.create(1)

    def test_none_seed_draws_entropy(self):
        state = RandomState.create(None)
        assert state.entropy >= 0

    def test_negative_entropy_rejected(self):
        with pytest.raises(ValueError, match="entropy must be >= 0"):
            RandomState(entropy=-1)


class TestSplit:
    """Tests for RandomState.split."""

    def test_split_is_pure(self, root_state):
        """Splitting the same state twice yields the same children."""
        assert root_state.split() == root_state.split()

    def test_children_differ(self, root_state):
        left, right = root_state.split()
        assert left != right
        assert left != root_state

    def test_children_streams_differ(self, root_state):
        left, right = root_state.split()
        left_values = [left.variant(i).range(0, 2**40)[0] for i in range(5)]
        right_values = [right.variant(i).range(0, 2**40)[0] for i in range(5)]
        assert left_values != right_values

    def test_split_does_not_mutate(self, root_state):
        before = (root_state.entropy, root_state.spawn_key)
        root_state.split()
        assert (root_state.entropy, root_state.spawn_key) == before


class TestVariant:
    """Tests for RandomState.variant."""

    def test_variant_is_deterministic(self, root_state):
        assert root_state.variant(3) == root_state.variant(3)

    def test_distinct_tags_diverge(self, root_state):
        values = {root_state.variant(tag).range(0, 2**62)[0] for tag in range(50)}
        assert len(values) == 50

    def test_negative_tags_supported(self, root_state):
        assert root_state.variant(-1) != root_state.variant(1)

    def test_spawn_key_entries_fit_in_one_word(self, root_state):
        """SeedSequence hashes each entry as 32-bit words; keep entries single-word."""
        for tag in (0, 1, -1, 2**31, 2**32, -(2**63), 2**64 + 5):
            assert all(0 <= entry < 2**32 for entry in root_state.variant(tag).spawn_key)

    @pytest.mark.parametrize("tag", [2**31, 2**32, -(2**40), 2**63 - 1])
    def test_large_tag_diverges_from_short_paths(self, root_state, tag):
        big = root_state.variant(tag)
        shorter = [
            root_state.variant(0).range(0, 1)[1],
            root_state.variant(0).split()[0],
            root_state.variant(1),
            root_state.split()[1],
        ]
        big_draws = [big.variant(i).range(0, 2**62)[0] for i in range(2)]
        for other in shorter:
            assert big != other
            assert big_draws != [other.variant(i).range(0, 2**62)[0] for i in range(2)]

    def test_hash_sized_tags_diverge(self, root_state):
        tags = [hash(("tag", i)) for i in range(20)]
        values = {root_state.variant(tag).range(0, 2**62)[0] for tag in tags}
        assert len(values) == len(set(tags))

    def test_variant_never_aliases_split(self, root_state):
        left, right = root_state.split()
        variants = {root_state.variant(tag) for tag in range(10)}
        assert left not in variants
        assert right not in variants


class TestRange:
    """Tests for RandomState.range."""

    def test_value_within_bounds(self, root_state):
        state = root_state
        for _ in range(200):
            value, state = state.range(-5, 5)
            assert -5 <= value <= 5

    def test_degenerate_interval(self, root_state):
        value, _ = root_state.range(9, 9)
        assert value == 9

    def test_deterministic(self, root_state):
        assert root_state.range(0, 1000) == root_state.range(0, 1000)

    def test_returns_python_int(self, root_state):
        value, _ = root_state.range(0, 10)
        assert type(value) is int

    def test_successor_differs_from_state(self, root_state):
        _, successor = root_state.range(0, 10)
        assert successor != root_state

    def test_full_int64_range(self, root_state):
        value, _ = root_state.range(INT64_MIN, INT64_MAX)
        assert INT64_MIN <= value <= INT64_MAX

    def test_inverted_bounds_rejected(self, root_state):
        with pytest.raises(ValueError, match="lower <= upper"):
            root_state.range(5, 4)

    def test_out_of_int64_rejected(self, root_state):
        with pytest.raises(ValueError, match="signed 64 bits"):
            root_state.range(0, 2**64)
