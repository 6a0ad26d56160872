#!/usr/bin/env python3
"""
setup_check.py - Verify quickprop environment and dependencies.

Usage:
    python scripts/setup_check.py [--verbose]

Checks:
    1. Python version >= 3.10
    2. Runtime dependencies installed
    3. Test / docs extras status
    4. Directory structure
    5. Generator engine sanity (seeded draw is reproducible)

Exit codes:
    0 = All checks passed (warnings allowed)
    1 = Critical issue (blocks development)
"""

import importlib
import sys
from pathlib import Path
from typing import NamedTuple


class CheckResult(NamedTuple):
    """Result of a single check."""
    name: str
    passed: bool
    message: str
    critical: bool = True


def check_python_version() -> CheckResult:
    """Verify Python version >= 3.10."""
    version = sys.version_info
    return CheckResult(
        name="Python Version",
        passed=version >= (3, 10),
        message=f"Python {version.major}.{version.minor}.{version.micro}",
    )


def _check_import(label: str, pkg_name: str, min_version: str, critical: bool) -> CheckResult:
    try:
        module = importlib.import_module(pkg_name)
    except ImportError:
        note = "required" if critical else "optional"
        return CheckResult(label, False, f"NOT INSTALLED ({note}, >= {min_version})", critical)
    return CheckResult(label, True, f"v{getattr(module, '__version__', 'unknown')}", critical)


def check_runtime_dependencies() -> list[CheckResult]:
    """Check that runtime dependencies are installed."""
    runtime_deps = [("numpy", "1.24"), ("pandas", "2.0")]
    return [_check_import(f"Runtime: {name}", name, v, True) for name, v in runtime_deps]


def check_extras() -> list[CheckResult]:
    """Check test and docs extras (non-critical)."""
    extras = {
        "test": [("pytest", "7.4"), ("hypothesis", "6.80"), ("scipy", "1.11")],
        "docs": [("sphinx", "7.0"), ("furo", "2023.9")],
    }
    return [
        _check_import(f"Extra[{group}]: {name}", name, v, False)
        for group, deps in extras.items()
        for name, v in deps
    ]


def check_directory_structure() -> list[CheckResult]:
    """Verify expected directory structure exists."""
    project_root = Path(__file__).parent.parent
    expected = ["src/quickprop", "tests", "docs", "examples", "pyproject.toml"]

    results = []
    for rel_path in expected:
        exists = (project_root / rel_path).exists()
        results.append(CheckResult(
            name=f"Path: {rel_path}",
            passed=exists,
            message="exists" if exists else "MISSING",
            critical=rel_path in ("src/quickprop", "tests", "pyproject.toml"),
        ))
    return results


def check_engine() -> CheckResult:
    """Draw twice from the same seed and compare."""
    sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
    try:
        from quickprop import choose, generate, list_of
    except ImportError as e:
        return CheckResult("Engine: import quickprop", False, str(e))

    gen = list_of(choose(0, 10**6))
    same = generate(42, gen) == generate(42, gen)
    return CheckResult(
        name="Engine: seeded draw reproducible",
        passed=same,
        message="ok" if same else "DIFFERENT VALUES FOR SAME SEED",
    )


def print_results(results: list[CheckResult], verbose: bool = False) -> None:
    """Print results (failures always, passes only when verbose)."""
    reset = "\033[0m"
    for result in results:
        if result.passed:
            symbol, color = "✓", "\033[92m"
        elif result.critical:
            symbol, color = "✗", "\033[91m"
        else:
            symbol, color = "⚠", "\033[93m"

        if verbose or not result.passed:
            print(f"{color}{symbol}{reset} {result.name}: {result.message}")


def main():
    """Run all checks and report results."""
    verbose = "--verbose" in sys.argv or "-v" in sys.argv

    print("=" * 60)
    print("  quickprop Environment Check")
    print("=" * 60)
    print()

    sections = [
        ("Python Version:", [check_python_version()], True),
        ("Runtime Dependencies:", check_runtime_dependencies(), verbose),
        ("Extras:", check_extras(), verbose),
        ("Directory Structure:", check_directory_structure(), verbose),
    ]

    all_results: list[CheckResult] = []
    for title, results, show_all in sections:
        print(title)
        print_results(results, verbose=show_all)
        all_results.extend(results)
        print()

    # Engine check needs numpy; skip it when runtime deps are missing
    if all(r.passed for r in all_results if r.critical):
        print("Engine:")
        result = check_engine()
        print_results([result], verbose=True)
        all_results.append(result)
        print()

    critical_failures = sum(1 for r in all_results if not r.passed and r.critical)
    warnings = sum(1 for r in all_results if not r.passed and not r.critical)

    print("=" * 60)
    if critical_failures > 0:
        print(f"\033[91m✗ {critical_failures} critical issue(s) found\033[0m")
        print("  Run: pip install -e '.[test]'")
        sys.exit(1)
    elif warnings > 0:
        print(f"\033[93m⚠ {warnings} warning(s) (non-blocking)\033[0m")
        print("  Extras can be installed with:")
        print("    pip install -e '.[test,docs]'")
        sys.exit(0)
    else:
        print("\033[92m✓ All checks passed!\033[0m")
        sys.exit(0)


if __name__ == "__main__":
    main()
