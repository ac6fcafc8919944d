"""Error taxonomy for curve editing and publishing.

Out-of-range values are never errors: they are clamped. Only structural
edits that cannot be satisfied and snapshots that break the curve
invariants raise.
"""

from __future__ import annotations


class CurveError(Exception):
    """Base class for curve errors."""


class InvalidCurveOperation(CurveError, ValueError):
    """A structural edit was rejected; the working curve is unchanged."""


class CurveInvariantError(CurveError, RuntimeError):
    """A snapshot failed the curve invariants and was not published.

    This signals a programming error: editing operations enforce the
    invariants while mutating, so a valid session can never produce one.
    """

    def __init__(self, violations: list[str]) -> None:
        self.violations = violations
        super().__init__("Curve snapshot violates invariants: " + "; ".join(violations))
