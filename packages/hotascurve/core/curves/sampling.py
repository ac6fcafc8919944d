"""Curve sampling for rendering and inspection.

The editor UI draws the curve from a dense sample of the shaped magnitude;
the evaluator never uses these arrays.
"""

from __future__ import annotations

import numpy as np

from hotascurve.core.curves.gate import evaluate_curve
from hotascurve.core.curves.models import CurveParameters


def sample_grid(n: int) -> np.ndarray:
    """Generate N evenly-spaced inputs covering [0, 1] inclusive.

    Args:
        n: Number of samples. Must be >= 2.

    Returns:
        Array of N inputs from 0.0 to 1.0.

    Raises:
        ValueError: If n < 2.

    Example:
        >>> sample_grid(5).tolist()
        [0.0, 0.25, 0.5, 0.75, 1.0]
    """
    if n < 2:
        raise ValueError("n must be >= 2")
    return np.linspace(0.0, 1.0, n)


def sample_shape(params: CurveParameters, n: int = 101) -> tuple[np.ndarray, np.ndarray]:
    """Sample the shape function alone, ignoring deadzone and saturation.

    Args:
        params: Curve to sample.
        n: Number of samples (default 101, i.e. steps of 0.01).

    Returns:
        Tuple of (inputs, shaped magnitudes).
    """
    xs = sample_grid(n)
    ys = np.fromiter((params.shape_value(float(x)) for x in xs), dtype=float, count=n)
    return xs, np.clip(ys, 0.0, 1.0)


def sample_curve(params: CurveParameters, n: int = 101) -> tuple[np.ndarray, np.ndarray]:
    """Sample the full response (gate + shape) over positive input magnitudes.

    Args:
        params: Curve to sample.
        n: Number of samples (default 101).

    Returns:
        Tuple of (raw inputs, outputs).
    """
    xs = sample_grid(n)
    ys = np.fromiter((evaluate_curve(params, float(x)) for x in xs), dtype=float, count=n)
    return xs, ys
