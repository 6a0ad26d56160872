"""
Failure Example 02: Evaluating the Consequent Before the Precondition
=====================================================================

WHAT GOES WRONG
---------------
Writing ``implies(x != 0, 1 // x * x <= 1)``. Python evaluates both
arguments before ``implies`` runs, so the consequent divides by zero on
exactly the inputs the precondition was meant to exclude.

WHY IT'S WRONG
--------------
``implies`` can only skip what it has not already been handed. A plain
boolean argument has been computed by the time the call happens.

THE FIX
-------
Wrap the consequent in ``Deferred``. ``implies`` forces the thunk only when
the precondition holds; otherwise the case is vacuous and the thunk is
never called.

VALIDATION
----------
With Deferred:
- No ZeroDivisionError
- Cases with x == 0 are counted as discarded, not passed
"""

import sys

# Add src to path if running as script
sys.path.insert(0, "src")

from quickprop import Deferred, check, choose, for_all, implies

# =============================================================================
# THE WRONG WAY
# =============================================================================


def reciprocal_WRONG(x: int):
    """Consequent computed eagerly. THIS IS WRONG for x == 0."""
    return implies(x != 0, abs(1 / x) <= 1)


# =============================================================================
# THE RIGHT WAY
# =============================================================================


def reciprocal_CORRECT(x: int):
    """Consequent deferred until the precondition holds."""
    return implies(x != 0, Deferred(lambda: abs(1 / x) <= 1))


# =============================================================================
# DEMONSTRATION
# =============================================================================


if __name__ == "__main__":
    gen = choose(-3, 3)

    print("=" * 60)
    print("FAILURE 02: EAGER PRECONDITION")
    print("=" * 60)

    try:
        check(for_all(gen, reciprocal_WRONG), n_tests=100, seed=0)
        print("  WRONG:   no error (x == 0 was never drawn)")
    except ZeroDivisionError:
        print("  WRONG:   ZeroDivisionError raised inside the consequent")

    report = check(for_all(gen, reciprocal_CORRECT), n_tests=100, seed=0)
    print(
        f"  CORRECT: passed={report.passed}, "
        f"{report.n_passed} passed, {report.n_discarded} discarded"
    )
