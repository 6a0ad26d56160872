"""
Result of evaluating a property once.

A Result carries a tri-state status, the labels attached by ``label`` /
``classify`` / ``collect``, and the string rendering of every argument bound
by ``for_all``.

Ordering: both ``labels`` and ``args`` are outermost-first. Every wrapping
layer prepends its entry to what the inner property produced.
"""

from dataclasses import dataclass, replace
from typing import Any, Optional


@dataclass(frozen=True)
class Result:
    """
    Immutable result of one property evaluation.

    Attributes
    ----------
    status : bool, optional
        True (pass), False (fail) or None (vacuous: precondition not met, or
        the predicate carried no verdict)
    labels : tuple[str, ...]
        Diagnostic labels, outermost first
    args : tuple[str, ...]
        Rendered arguments, outermost ``for_all`` first
    """

    status: Optional[bool] = None
    labels: tuple[str, ...] = ()
    args: tuple[str, ...] = ()

    @classmethod
    def vacuous(cls) -> "Result":
        """Canonical vacuous result: no status, no labels, no args."""
        return cls()

    @classmethod
    def of(cls, status: bool) -> "Result":
        """Definite result with the given verdict."""
        return cls(status=bool(status))

    @property
    def passed(self) -> bool:
        return self.status is True

    @property
    def failed(self) -> bool:
        return self.status is False

    @property
    def discarded(self) -> bool:
        """Check if the evaluation was vacuous."""
        return self.status is None

    def with_arg(self, arg: str) -> "Result":
        """Copy with ``arg`` prepended to args."""
        return replace(self, args=(arg,) + self.args)

    def with_label(self, label: str) -> "Result":
        """Copy with ``label`` prepended to labels."""
        return replace(self, labels=(label,) + self.labels)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        return {
            "status": self.status,
            "labels": list(self.labels),
            "args": list(self.args),
        }
