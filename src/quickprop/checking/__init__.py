"""
Check runner for properties.

Provides:
- check: evaluate a property over consecutive seeds
- ensure_holds: check and raise PropertyFalsifiedError on failure
- CheckReport: aggregated pass / fail / discard counts and labels
"""

from quickprop.checking.runner import (
    CheckReport,
    PropertyFalsifiedError,
    check,
    ensure_holds,
)

__all__ = [
    "CheckReport",
    "PropertyFalsifiedError",
    "check",
    "ensure_holds",
]
