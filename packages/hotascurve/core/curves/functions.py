"""Shape functions for axis response curves.

Every function maps a normalized input magnitude ``n`` in [0, 1] to a
shaped magnitude in [0, 1]. They are pure and safe to call from any thread.
"""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Sequence
from typing import TYPE_CHECKING

from hotascurve.core.utils.math import lerp

if TYPE_CHECKING:
    from hotascurve.core.curves.models import ControlPoint


def linear(n: float) -> float:
    """Identity response."""
    return n


def exponential(n: float, curvature: float) -> float:
    """Power response ``n ** (1 + 2 * curvature)``.

    Curvature 0 is linear; curvature 1 is a cubic, which keeps output small
    near center for precise aiming while still reaching full scale.

    Args:
        n: Normalized magnitude [0, 1].
        curvature: Curve strength [0, 1].

    Returns:
        Shaped magnitude [0, 1].

    Example:
        >>> exponential(0.5, 0.5)
        0.25
    """
    return n ** (1.0 + 2.0 * curvature)


def smoothstep(n: float) -> float:
    """Cubic Hermite ease ``3n^2 - 2n^3``."""
    return n * n * (3.0 - 2.0 * n)


def s_curve(n: float, curvature: float) -> float:
    """Blend of identity and smoothstep, weighted by curvature.

    ``s(0) = 0``, ``s(0.5) = 0.5`` and ``s(1) = 1`` hold exactly for every
    curvature. The slope is ``(1 - c) + 6c * n * (1 - n)``, positive on the
    open interval, so the response is strictly increasing. Curvature 1
    gives the steepest midpoint (slope 1.5).

    Args:
        n: Normalized magnitude [0, 1].
        curvature: Blend weight [0, 1]; 0 is linear.

    Returns:
        Shaped magnitude [0, 1].
    """
    return n + curvature * (smoothstep(n) - n)


def interpolate_points(points: Sequence[ControlPoint], n: float) -> float:
    """Piecewise-linear interpolation through control points.

    Points must be sorted by strictly increasing x. An input that lands
    exactly on a point returns that point's y without blending the
    neighbouring segments. Inputs outside the first/last x hold the
    endpoint value.

    Args:
        points: Control points sorted by x (at least 2).
        n: Normalized magnitude [0, 1].

    Returns:
        Interpolated magnitude.

    Raises:
        ValueError: If fewer than 2 points are given.

    Example:
        >>> from hotascurve.core.curves.models import ControlPoint
        >>> pts = [ControlPoint(x=0.0, y=0.0), ControlPoint(x=0.5, y=0.2), ControlPoint(x=1.0, y=1.0)]
        >>> round(interpolate_points(pts, 0.25), 6)
        0.1
    """
    if len(points) < 2:
        raise ValueError("interpolation needs at least 2 points")

    if n <= points[0].x:
        return points[0].y
    if n >= points[-1].x:
        return points[-1].y

    xs = [p.x for p in points]
    i = bisect_right(xs, n) - 1
    lo = points[i]
    if lo.x == n:
        return lo.y

    hi = points[i + 1]
    t = (n - lo.x) / (hi.x - lo.x)
    return lerp(lo.y, hi.y, t)
