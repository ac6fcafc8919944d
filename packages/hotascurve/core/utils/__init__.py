"""Shared utilities."""

from hotascurve.core.utils.logging import configure_logging, get_logger
from hotascurve.core.utils.math import clamp, clamp_unit, lerp

__all__ = [
    "clamp",
    "clamp_unit",
    "configure_logging",
    "get_logger",
    "lerp",
]
