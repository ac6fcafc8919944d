"""Math utilities for common operations."""

from __future__ import annotations

from typing import TypeVar

import numpy as np

Number = TypeVar("Number", int, float, np.number)


def clamp(value: Number, min_val: Number, max_val: Number) -> Number:
    """Clamp value to range [min_val, max_val].

    Args:
        value: Value to clamp
        min_val: Minimum allowed value
        max_val: Maximum allowed value

    Returns:
        Clamped value
    """
    return max(min_val, min(max_val, value))


def clamp_unit(value: float) -> float:
    """Clamp value to [0, 1]."""
    return clamp(value, 0.0, 1.0)


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation between a and b at factor t."""
    return a + (b - a) * t
