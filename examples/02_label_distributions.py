#!/usr/bin/env python3
"""
Label Distribution Demo.

A property that passes on 100 trivial inputs proves little. Labelling test
cases with ``classify`` and ``collect`` shows which inputs were actually
exercised; ``CheckReport.label_distribution`` tallies them as a pandas
Series.

Usage:
    python examples/02_label_distributions.py
    python examples/02_label_distributions.py --n-tests 1000
"""

import argparse
import sys

# Add src to path if running as script
sys.path.insert(0, "src")

import pandas as pd

from quickprop import (
    check,
    classify,
    collect,
    for_all,
    frequency,
    int32s,
    list_of,
    resize,
    unit,
)


def length_buckets(n_tests: int, seed: int) -> pd.Series:
    """Distribution of list lengths seen by a sorting property."""

    def predicate(xs: list[int]) -> object:
        bucket = "empty" if not xs else ("short" if len(xs) < 5 else "long")
        return collect(bucket, sorted(sorted(xs)) == sorted(xs))

    report = check(for_all(list_of(int32s()), predicate), n_tests=n_tests, seed=seed)
    return report.label_distribution()


def weighted_choices(n_tests: int, seed: int) -> pd.Series:
    """frequency with weights 1:3:6, tallied through labels."""
    gen = frequency([(1, unit("rare")), (3, unit("common")), (6, unit("frequent"))])
    report = check(for_all(gen, lambda tag: collect(tag, True)), n_tests=n_tests, seed=seed)
    return report.label_distribution()


def trivial_fraction(n_tests: int, seed: int) -> pd.Series:
    """How often a small-size list property only sees one-element lists."""
    prop = for_all(
        resize(3, list_of(int32s())),
        lambda xs: classify(len(xs) <= 1, "trivial", xs == list(xs)),
    )
    report = check(prop, n_tests=n_tests, seed=seed, max_discard_ratio=100)
    print(f"  kept {report.n_passed} of {len(report.results)} cases")
    return report.label_distribution()


def main() -> None:
    """Run label distribution demo."""
    parser = argparse.ArgumentParser(description="Label Distribution Demo")
    parser.add_argument("--seed", type=int, default=42, help="First seed (default: 42)")
    parser.add_argument("--n-tests", type=int, default=400, help="Tests per property")
    args = parser.parse_args()

    print("\n" + "=" * 60)
    print("LABEL DISTRIBUTION DEMO")
    print("=" * 60)

    print("\nList lengths:")
    print(length_buckets(args.n_tests, args.seed).to_string(float_format="{:.1%}".format))

    print("\nfrequency 1:3:6:")
    print(weighted_choices(args.n_tests, args.seed).to_string(float_format="{:.1%}".format))

    print("\nclassify (unmet condition discards the case):")
    print(trivial_fraction(args.n_tests, args.seed).to_string(float_format="{:.1%}".format))

    print("\n" + "=" * 60)
    print("DEMO COMPLETE")
    print("=" * 60)


if __name__ == "__main__":
    main()
