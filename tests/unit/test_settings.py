"""
Tests for configuration - config/settings.py.

Verifies defaults, validation and environment overrides.
"""

import dataclasses

import pytest

from quickprop.config.settings import (
    SETTINGS,
    CheckConfig,
    GenerationConfig,
    Settings,
)


class TestGenerationConfig:
    """Tests for GenerationConfig."""

    def test_defaults(self):
        config = GenerationConfig()
        assert config.max_size == 30
        assert config.sample_sizes == (0, 2, 4, 6, 8, 10, 12, 14, 16, 18, 20)

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            SETTINGS.generation.max_size = 5  # type: ignore[misc]

    def test_negative_max_size_rejected(self):
        with pytest.raises(ValueError, match="CRITICAL: max_size"):
            GenerationConfig(max_size=-1)

    def test_negative_sample_size_rejected(self):
        with pytest.raises(ValueError, match="CRITICAL: sample_sizes"):
            GenerationConfig(sample_sizes=(0, -2))


class TestCheckConfig:
    """Tests for CheckConfig and its environment overrides."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("QUICKPROP_N_TESTS", raising=False)
        monkeypatch.delenv("QUICKPROP_SEED", raising=False)
        config = CheckConfig()
        assert config.n_tests == 100
        assert config.seed == 42
        assert config.max_discard_ratio == 10
        assert config.verbose is False

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("QUICKPROP_N_TESTS", "250")
        monkeypatch.setenv("QUICKPROP_SEED", "-7")
        config = CheckConfig()
        assert config.n_tests == 250
        assert config.seed == -7

    def test_blank_env_uses_default(self, monkeypatch):
        monkeypatch.setenv("QUICKPROP_SEED", "  ")
        assert CheckConfig().seed == 42

    def test_explicit_values_win_over_env(self, monkeypatch):
        monkeypatch.setenv("QUICKPROP_SEED", "9")
        assert CheckConfig(seed=1).seed == 1

    def test_non_integer_env_rejected(self, monkeypatch):
        monkeypatch.setenv("QUICKPROP_N_TESTS", "many")
        with pytest.raises(ValueError, match="QUICKPROP_N_TESTS must be an integer"):
            CheckConfig()

    def test_non_positive_n_tests_rejected(self):
        with pytest.raises(ValueError, match="n_tests must be > 0"):
            CheckConfig(n_tests=0)

    def test_negative_discard_ratio_rejected(self):
        with pytest.raises(ValueError, match="max_discard_ratio"):
            CheckConfig(max_discard_ratio=-1)


class TestSettings:
    """Tests for the master Settings."""

    def test_singleton_composes_sub_configs(self):
        assert isinstance(SETTINGS, Settings)
        assert isinstance(SETTINGS.generation, GenerationConfig)
        assert isinstance(SETTINGS.check, CheckConfig)

    def test_replace_builds_new_settings(self):
        custom = dataclasses.replace(SETTINGS, generation=GenerationConfig(max_size=5))
        assert custom.generation.max_size == 5
        assert SETTINGS.generation.max_size == 30
