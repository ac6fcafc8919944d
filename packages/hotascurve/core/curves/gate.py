"""Deadzone/saturation gating and full curve evaluation.

Processing order for one raw axis sample:
1. Clamp to [-1, 1]
2. Gate the magnitude: zero inside the deadzone, full scale at saturation,
   linear renormalization in between
3. Shape the gated magnitude
4. Restore the sign
"""

from __future__ import annotations

import math

from hotascurve.core.curves.models import CurveParameters
from hotascurve.core.utils.math import clamp


def gate_magnitude(magnitude: float, deadzone: float, saturation: float) -> float:
    """Renormalize an input magnitude into the active range.

    Args:
        magnitude: Absolute input value [0, 1].
        deadzone: Magnitudes below this read as 0.
        saturation: Magnitudes at or above this read as 1. Must exceed deadzone.

    Returns:
        Normalized magnitude in [0, 1].

    Example:
        >>> gate_magnitude(0.5, 0.1, 0.9)
        0.5
    """
    if magnitude < deadzone:
        return 0.0
    if magnitude >= saturation:
        return 1.0
    return (magnitude - deadzone) / (saturation - deadzone)


def evaluate_curve(params: CurveParameters, raw: float) -> float:
    """Shape one raw signed axis sample.

    Out-of-range samples are clamped to [-1, 1]; NaN reads as centered.
    A gated magnitude of zero yields exactly 0.0 for every shape, so the
    deadzone always zeroes the output even when a free-form curve's first
    point sits above 0.

    Args:
        params: Curve snapshot to evaluate against.
        raw: Signed axis sample, nominally in [-1, 1].

    Returns:
        Shaped signed output in [-1, 1].
    """
    if math.isnan(raw):
        return 0.0

    value = clamp(raw, -1.0, 1.0)
    sign = -1.0 if value < 0 else 1.0
    n = gate_magnitude(abs(value), params.deadzone, params.saturation)
    if n == 0.0:
        return 0.0

    shaped = clamp(params.shape_value(n), 0.0, 1.0)
    return sign * shaped
