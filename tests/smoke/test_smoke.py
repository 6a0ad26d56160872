"""
Smoke tests for quick CI validation.

These tests verify basic functionality without full coverage.
Run these first to catch obvious breakages before full test suite.

Usage:
    pytest tests/smoke/ -v
"""


# =============================================================================
# Import Smoke Tests
# =============================================================================

class TestImportSmoke:
    """Verify core modules import successfully."""

    def test_import_core_packages(self):
        """Core packages should import without error."""
        import quickprop
        import quickprop.checking
        import quickprop.config
        import quickprop.generators
        import quickprop.properties
        import quickprop.rng

        assert quickprop.__version__

    def test_top_level_reexports(self):
        """The public API is reachable from the package root."""
        from quickprop import (
            SETTINGS,
            Gen,
            Property,
            Result,
            check,
            ensure_holds,
            for_all,
            generate,
            implies,
            list_of,
        )

        assert Gen is not None
        assert Property is not None
        assert Result is not None
        assert SETTINGS.check.n_tests > 0
        assert callable(check) and callable(ensure_holds)
        assert callable(for_all) and callable(implies)
        assert callable(generate) and callable(list_of)


# =============================================================================
# Quick Check Smoke Tests
# =============================================================================

class TestCheckSmoke:
    """End-to-end checks on tiny properties."""

    def test_true_property_passes(self):
        from quickprop import check, for_all, int32s, list_of

        report = check(for_all(list_of(int32s()), lambda xs: list(reversed(xs))[::-1] == xs), n_tests=20)
        assert report.passed

    def test_false_property_found(self):
        from quickprop import check, for_all, int32s, non_empty_list_of

        report = check(for_all(non_empty_list_of(int32s()), lambda xs: xs == xs + [1]), n_tests=5)
        assert not report.passed
        assert report.counterexample is not None

    def test_sample_runs(self):
        from quickprop import choose, sample

        values = sample(0, choose(0, 5))
        assert len(values) == 11
