"""
Check runner: drive a property over many seeds and aggregate the results.

Test ``i`` of a run evaluates the property with ``generate(seed + i, ...)``,
so a failing case is reproduced exactly by re-running with the same seed.
A run stops at the first failure, after ``n_tests`` non-vacuous results, or
when too many results were discarded (the run then "gives up").

Reporting to a human (printing, test-framework hooks) is left to callers.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional

import pandas as pd

from quickprop.config.settings import SETTINGS
from quickprop.generators.core import generate
from quickprop.properties.outcome import to_property
from quickprop.properties.property import evaluate
from quickprop.properties.result import Result

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CheckReport:
    """
    Aggregated outcome of a check run.

    Attributes
    ----------
    results : tuple[Result, ...]
        Every result produced, in seed order (vacuous ones included)
    n_tests : int
        Number of non-vacuous results that was requested
    seed : int
        Seed of the first test
    gave_up : bool
        True if the run stopped because of too many discarded results
    """

    results: tuple[Result, ...]
    n_tests: int
    seed: int
    gave_up: bool = False

    @property
    def n_passed(self) -> int:
        return sum(1 for r in self.results if r.passed)

    @property
    def n_failed(self) -> int:
        return sum(1 for r in self.results if r.failed)

    @property
    def n_discarded(self) -> int:
        return sum(1 for r in self.results if r.discarded)

    @property
    def counterexample(self) -> Optional[Result]:
        """First failing result, if any."""
        return next((r for r in self.results if r.failed), None)

    @property
    def failing_seed(self) -> Optional[int]:
        """Seed that reproduces the counterexample, if any."""
        for offset, result in enumerate(self.results):
            if result.failed:
                return self.seed + offset
        return None

    @property
    def passed(self) -> bool:
        """Check if the property held for all requested tests."""
        return self.n_failed == 0 and not self.gave_up

    def label_distribution(self) -> pd.Series:
        """
        Fraction of non-vacuous results carrying each label.

        Returns
        -------
        pd.Series
            Index: label, values: fraction in [0, 1], most frequent first
        """
        decided = [r for r in self.results if not r.discarded]
        labels = [tag for r in decided for tag in r.labels]
        if not labels:
            return pd.Series(dtype=float, name="fraction")
        counts = pd.Series(labels, dtype=object).value_counts()
        return (counts / len(decided)).rename("fraction")

    def to_dataframe(self) -> pd.DataFrame:
        """One row per result: seed, status, labels, args."""
        rows = [
            {"seed": self.seed + offset, **result.to_dict()}
            for offset, result in enumerate(self.results)
        ]
        return pd.DataFrame(rows, columns=["seed", "status", "labels", "args"])

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        counterexample = self.counterexample
        return {
            "passed": self.passed,
            "gave_up": self.gave_up,
            "n_tests": self.n_tests,
            "n_passed": self.n_passed,
            "n_failed": self.n_failed,
            "n_discarded": self.n_discarded,
            "seed": self.seed,
            "failing_seed": self.failing_seed,
            "counterexample": counterexample.to_dict() if counterexample is not None else None,
        }


class PropertyFalsifiedError(AssertionError):
    """Raised by ``ensure_holds`` when a property fails or the run gives up."""

    def __init__(self, report: CheckReport):
        self.report = report
        super().__init__(_describe_failure(report))


def _describe_failure(report: CheckReport) -> str:
    if report.gave_up:
        return (
            f"CRITICAL: Gave up after {report.n_passed} passed tests "
            f"and {report.n_discarded} discarded (seed {report.seed})"
        )
    counterexample = report.counterexample
    lines = [
        f"CRITICAL: Property falsified after {report.n_passed + 1} tests "
        f"(seed {report.failing_seed})."
    ]
    if counterexample is not None:
        lines += [f"  - {arg}" for arg in counterexample.args]
        if counterexample.labels:
            lines.append(f"  labels: {', '.join(counterexample.labels)}")
    return "\n".join(lines)


def check(
    prop: Any,
    n_tests: Optional[int] = None,
    seed: Optional[int] = None,
    max_discard_ratio: Optional[int] = None,
    verbose: Optional[bool] = None,
) -> CheckReport:
    """
    Evaluate a property repeatedly and aggregate the results.

    Parameters
    ----------
    prop : Property or coercible
        Property to check
    n_tests : int, optional
        Non-vacuous results required. Default: SETTINGS.check.n_tests
    seed : int, optional
        Seed of the first test. Default: SETTINGS.check.seed
    max_discard_ratio : int, optional
        Give up once discards exceed ``n_tests * max_discard_ratio``.
        Default: SETTINGS.check.max_discard_ratio
    verbose : bool, optional
        Log a summary line. Default: SETTINGS.check.verbose

    Returns
    -------
    CheckReport
        Aggregated results

    Raises
    ------
    ValueError
        If ``n_tests`` is not positive or ``max_discard_ratio`` is negative

    Examples
    --------
    >>> from quickprop.generators import int32s, list_of
    >>> from quickprop.properties import for_all
    >>> report = check(for_all(list_of(int32s()), lambda xs: sorted(sorted(xs)) == sorted(xs)))
    >>> report.passed
    True
    """
    config = SETTINGS.check
    n_tests = config.n_tests if n_tests is None else n_tests
    seed = config.seed if seed is None else seed
    max_discard_ratio = config.max_discard_ratio if max_discard_ratio is None else max_discard_ratio
    verbose = config.verbose if verbose is None else verbose

    if n_tests <= 0:
        raise ValueError(f"CRITICAL: n_tests must be > 0, got {n_tests}")
    if max_discard_ratio < 0:
        raise ValueError(f"CRITICAL: max_discard_ratio must be >= 0, got {max_discard_ratio}")

    gen = evaluate(to_property(prop))
    max_discarded = n_tests * max_discard_ratio

    results: list[Result] = []
    n_decided = 0
    n_discarded = 0
    gave_up = False

    while n_decided < n_tests:
        result = generate(seed + len(results), gen)
        results.append(result)

        if result.discarded:
            n_discarded += 1
            if n_discarded > max_discarded:
                gave_up = True
                logger.debug(f"Gave up after {n_discarded} discarded results")
                break
            continue

        n_decided += 1
        if result.failed:
            logger.debug(f"Falsified at seed {seed + len(results) - 1}: {result.args}")
            break

    report = CheckReport(
        results=tuple(results),
        n_tests=n_tests,
        seed=seed,
        gave_up=gave_up,
    )

    if verbose:
        status = "OK" if report.passed else ("GAVE UP" if gave_up else "FAILED")
        logger.info(
            f"{status}: {report.n_passed} passed, {report.n_failed} failed, "
            f"{report.n_discarded} discarded"
        )

    return report


def ensure_holds(prop: Any, **kwargs: Any) -> CheckReport:
    """
    Check a property and raise if it does not hold.

    Parameters
    ----------
    prop : Property or coercible
        Property to check
    **kwargs : Any
        Forwarded to ``check``

    Returns
    -------
    CheckReport
        The report, if the property held

    Raises
    ------
    PropertyFalsifiedError
        If a counterexample was found or the run gave up
    """
    report = check(prop, **kwargs)
    if not report.passed:
        raise PropertyFalsifiedError(report)
    return report
