"""Runtime processing for one output axis.

An output axis can be fed by several physical inputs (e.g. toe brakes
merged onto one axis). The channel merges the raw samples, shapes the result
through the published curve and applies inversion.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

from hotascurve.core.curves.publisher import CurveEvaluator
from hotascurve.core.utils.math import clamp


class MergeOperation(str, Enum):
    """How multiple raw inputs combine into one axis value."""

    AVERAGE = "average"
    MINIMUM = "minimum"
    MAXIMUM = "maximum"
    SUM = "sum"


def merge_samples(samples: Sequence[float], operation: MergeOperation) -> float:
    """Combine raw axis samples into one value.

    Args:
        samples: Raw samples, each nominally in [-1, 1].
        operation: Merge rule. SUM is clamped to [-1, 1].

    Returns:
        Merged sample.

    Raises:
        ValueError: If samples is empty.

    Example:
        >>> merge_samples([0.5, 0.75], MergeOperation.SUM)
        1.0
    """
    if not samples:
        raise ValueError("samples cannot be empty")

    if operation is MergeOperation.MINIMUM:
        return min(samples)
    if operation is MergeOperation.MAXIMUM:
        return max(samples)
    if operation is MergeOperation.SUM:
        return clamp(float(sum(samples)), -1.0, 1.0)
    return sum(samples) / len(samples)


class AxisChannel:
    """Merge, shape and optionally invert samples for one output axis.

    Args:
        evaluator: Reads the curve snapshot published for this axis.
        merge: Rule for combining multiple inputs.
        inverted: Negate the shaped output.
    """

    def __init__(
        self,
        evaluator: CurveEvaluator,
        merge: MergeOperation = MergeOperation.AVERAGE,
        inverted: bool = False,
    ) -> None:
        self.evaluator = evaluator
        self.merge = merge
        self.inverted = inverted

    def process(self, samples: Sequence[float]) -> float:
        """Produce the output value for one polling tick."""
        raw = samples[0] if len(samples) == 1 else merge_samples(samples, self.merge)
        value = self.evaluator.evaluate(raw)
        return -value if self.inverted else value
