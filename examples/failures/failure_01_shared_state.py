"""
Failure Example 01: Reusing One State for Two Draws
====================================================

WHAT GOES WRONG
---------------
Running two generators on the same RandomState instead of splitting it.

WHY IT'S WRONG
--------------
A RandomState is a pure value: the same state always produces the same
draw. Feeding one state to two generators makes their outputs identical
(for identical generators) or perfectly dependent (for related ones), so a
"pair of random lists" is really one list seen twice. Properties about
pairs then pass for the wrong reason.

THE FIX
-------
Derive one state per consumer with ``split()`` (or ``variant(i)`` for
indexed consumers). ``bind`` and ``lift2`` already do this.

VALIDATION
----------
With split states:
- two(choose(0, 10**6)) components are uncorrelated
- The property "xs != ys" holds for almost every pair of long lists
"""

import sys

# Add src to path if running as script
sys.path.insert(0, "src")

from quickprop import Gen, RandomState, check, choose, for_all, two, vector_of

# =============================================================================
# THE WRONG WAY
# =============================================================================


def pair_WRONG(gen: Gen) -> Gen:
    """
    Run ``gen`` twice on the same state.

    THIS IS WRONG: both components are the same draw.
    """
    return Gen(lambda size, state: (gen.run(size, state), gen.run(size, state)))


# =============================================================================
# THE RIGHT WAY
# =============================================================================


def pair_CORRECT(gen: Gen) -> Gen:
    """Run ``gen`` on the two halves of a split state."""

    def run(size: int, state: RandomState) -> tuple:
        left, right = state.split()
        return gen.run(size, left), gen.run(size, right)

    return Gen(run)


# =============================================================================
# DEMONSTRATION
# =============================================================================


if __name__ == "__main__":
    lists = vector_of(8, choose(0, 10**6))

    def differ(pair):
        return pair[0] != pair[1]

    wrong = check(for_all(pair_WRONG(lists), differ), n_tests=100, seed=0)
    right = check(for_all(pair_CORRECT(lists), differ), n_tests=100, seed=0)
    builtin = check(for_all(two(lists), differ), n_tests=100, seed=0)

    print("=" * 60)
    print("FAILURE 01: SHARED STATE")
    print("=" * 60)
    print(f"  WRONG   (same state):  passed={wrong.passed}  failing seed={wrong.failing_seed}")
    print(f"  CORRECT (split state): passed={right.passed}")
    print(f"  two()                : passed={builtin.passed}")
