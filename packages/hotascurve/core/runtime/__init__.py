"""Axis runtime: per-tick processing and the polling loop."""

from hotascurve.core.runtime.channel import AxisChannel, MergeOperation, merge_samples
from hotascurve.core.runtime.poller import AxisPoller

__all__ = [
    "AxisChannel",
    "AxisPoller",
    "MergeOperation",
    "merge_samples",
]
