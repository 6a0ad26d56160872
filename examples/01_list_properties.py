#!/usr/bin/env python3
"""
List Properties Demo.

Checks a few classic laws about Python lists and shows what a failure looks
like. Each check runs the property over seeds ``seed, seed + 1, ...`` and
stops at the first counterexample.

Key Concepts:
- for_all: quantify a predicate over a generator
- implies: skip test cases whose precondition does not hold
- failing_seed: re-run one case exactly with ``generate(seed, ...)``

Usage:
    python examples/01_list_properties.py
    python examples/01_list_properties.py --seed 7 --n-tests 500
"""

import argparse
import sys

# Add src to path if running as script
sys.path.insert(0, "src")

from quickprop import (
    CheckReport,
    Deferred,
    check,
    evaluate,
    for_all,
    generate,
    implies,
    int32s,
    list_of,
    non_empty_list_of,
    two,
)


def reverse_twice(seed: int, n_tests: int) -> CheckReport:
    """Reversing twice is the identity."""
    prop = for_all(list_of(int32s()), lambda xs: xs[::-1][::-1] == xs)
    return check(prop, n_tests=n_tests, seed=seed)


def reverse_is_identity(seed: int, n_tests: int) -> CheckReport:
    """A false law: reversing once is the identity."""
    prop = for_all(non_empty_list_of(int32s()), lambda xs: xs[::-1] == xs)
    return check(prop, n_tests=n_tests, seed=seed)


def append_then_sort(seed: int, n_tests: int) -> CheckReport:
    """sorted(xs + ys) has the minimum of both lists first."""
    prop = for_all(
        two(list_of(int32s())),
        lambda pair: implies(
            bool(pair[0] or pair[1]),
            Deferred(lambda: sorted(pair[0] + pair[1])[0] == min(pair[0] + pair[1])),
        ),
    )
    return check(prop, n_tests=n_tests, seed=seed)


def print_report(name: str, report: CheckReport) -> None:
    """Print one check report."""
    print(f"\n{name}")
    print("-" * 60)
    if report.passed:
        print(f"  OK, passed {report.n_passed} tests ({report.n_discarded} discarded)")
        return
    if report.gave_up:
        print(f"  Gave up after {report.n_passed} tests")
        return
    print(f"  Falsified after {report.n_passed + 1} tests (seed {report.failing_seed})")
    for arg in report.counterexample.args:
        print(f"    {arg}")


def main() -> None:
    """Run list property demo."""
    parser = argparse.ArgumentParser(description="List Properties Demo")
    parser.add_argument("--seed", type=int, default=42, help="First seed (default: 42)")
    parser.add_argument("--n-tests", type=int, default=100, help="Tests per property")
    args = parser.parse_args()

    print("\n" + "=" * 60)
    print("LIST PROPERTIES DEMO")
    print("=" * 60)

    print_report("reverse(reverse(xs)) == xs", reverse_twice(args.seed, args.n_tests))
    print_report("sorted(xs + ys)[0] == min(xs + ys)", append_then_sort(args.seed, args.n_tests))

    report = reverse_is_identity(args.seed, args.n_tests)
    print_report("reverse(xs) == xs", report)

    if report.failing_seed is not None:
        prop = for_all(non_empty_list_of(int32s()), lambda xs: xs[::-1] == xs)
        replay = generate(report.failing_seed, evaluate(prop))
        print(f"\n  Replayed from seed {report.failing_seed}: status={replay.status}")

    print("\n" + "=" * 60)
    print("DEMO COMPLETE")
    print("=" * 60)


if __name__ == "__main__":
    main()
