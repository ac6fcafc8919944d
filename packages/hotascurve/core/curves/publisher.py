"""Snapshot hand-off between the curve editor and the axis evaluator.

The editor thread publishes whole, immutable CurveParameters snapshots.
The polling thread reads whichever snapshot is current. Publishing swaps a
single ``(version, snapshot)`` tuple reference, so a reader sees either the
old pair or the new pair and never a mixture.
"""

from __future__ import annotations

from collections.abc import Callable
import logging
import threading

from hotascurve.core.curves.errors import CurveInvariantError
from hotascurve.core.curves.gate import evaluate_curve
from hotascurve.core.curves.models import CurveParameters, check_invariants, default_curve

logger = logging.getLogger(__name__)

CurveListener = Callable[[CurveParameters], None]


class CurvePublisher:
    """Holds the curve snapshot the evaluator currently observes.

    Writers are serialized by a lock; readers take no lock.

    Example:
        >>> publisher = CurvePublisher()
        >>> publisher.version
        0
        >>> publisher.publish(CurveParameters(deadzone=0.1))
        1
    """

    def __init__(self, initial: CurveParameters | None = None) -> None:
        snapshot = initial if initial is not None else default_curve()
        self._reject_invalid(snapshot)
        self._current: tuple[int, CurveParameters] = (0, snapshot)
        self._write_lock = threading.Lock()
        self._listeners: list[CurveListener] = []

    @property
    def version(self) -> int:
        """Number of successful publishes so far."""
        return self._current[0]

    def current(self) -> CurveParameters:
        """The snapshot evaluations should use right now."""
        return self._current[1]

    def current_versioned(self) -> tuple[int, CurveParameters]:
        """The current ``(version, snapshot)`` pair, read as one unit."""
        return self._current

    def publish(self, snapshot: CurveParameters) -> int:
        """Make ``snapshot`` visible to all subsequent evaluations.

        Args:
            snapshot: Complete curve to publish.

        Returns:
            The version number assigned to the snapshot.

        Raises:
            CurveInvariantError: If the snapshot breaks a curve invariant. The
                previously published snapshot stays live.
        """
        self._reject_invalid(snapshot)

        with self._write_lock:
            version = self._current[0] + 1
            self._current = (version, snapshot)
            listeners = list(self._listeners)

        logger.debug("Published curve v%d (%s)", version, snapshot.kind.value)
        for listener in listeners:
            try:
                listener(snapshot)
            except Exception:
                logger.exception("Curve listener %r failed for v%d", listener, version)
        return version

    def add_listener(self, listener: CurveListener) -> None:
        """Call ``listener(snapshot)`` after every successful publish.

        A listener that raises is logged; the publish still stands.
        """
        with self._write_lock:
            self._listeners.append(listener)

    def remove_listener(self, listener: CurveListener) -> None:
        with self._write_lock:
            self._listeners.remove(listener)

    @staticmethod
    def _reject_invalid(snapshot: CurveParameters) -> None:
        violations = check_invariants(snapshot)
        if violations:
            logger.error("Rejected curve snapshot: %s", "; ".join(violations))
            raise CurveInvariantError(violations)


class CurveEvaluator:
    """Evaluation entry point for the polling path.

    Each call reads one published snapshot and evaluates entirely against
    it, so a publish that lands mid-call cannot produce a hybrid result.
    """

    def __init__(self, publisher: CurvePublisher) -> None:
        self._publisher = publisher

    @property
    def publisher(self) -> CurvePublisher:
        return self._publisher

    def evaluate(self, raw: float) -> float:
        """Shape one raw axis sample against the current snapshot."""
        return evaluate_curve(self._publisher.current(), raw)

    __call__ = evaluate
