"""Flat persistence form of a response curve.

Profiles store curves as a shape tag, scalar fields and an ordered point
list. Every shape stores its control points, so a curve switched to
free-form after loading starts from the same points it was saved with.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from hotascurve.core.config.loader import load_config, save_config
from hotascurve.core.curves.models import (
    DEFAULT_CONTROL_POINTS,
    ControlPoint,
    CurveParameters,
    ExponentialShape,
    FreeFormShape,
    LinearShape,
    SCurveShape,
    Shape,
    ShapeKind,
    sample_control_points,
)

logger = logging.getLogger(__name__)


class CurveRecord(BaseModel):
    """Serializable curve record.

    Example:
        >>> record = CurveRecord(shape=ShapeKind.EXPONENTIAL, curvature=0.3)
        >>> record.model_dump(mode="json")["shape"]
        'exponential'
    """

    model_config = ConfigDict(extra="ignore")

    shape: ShapeKind = ShapeKind.LINEAR
    curvature: float = 0.0
    deadzone: float = 0.0
    saturation: float = 1.0
    control_points: list[tuple[float, float]] = Field(default_factory=list)


def to_record(params: CurveParameters) -> CurveRecord:
    """Flatten a curve for storage."""
    return CurveRecord(
        shape=params.kind,
        curvature=params.curvature,
        deadzone=params.deadzone,
        saturation=params.saturation,
        control_points=[(p.x, p.y) for p in params.control_points],
    )


def from_record(record: CurveRecord) -> CurveParameters:
    """Rebuild a curve from its stored form.

    A record without control points gets the sampled points of its
    S-curve or exponential shape, or the two default endpoints otherwise.

    Raises:
        ValidationError: If the stored values break a curve invariant.
    """
    shape: Shape
    if record.shape is ShapeKind.FREE_FORM:
        shape = FreeFormShape()
    elif record.shape is ShapeKind.S_CURVE:
        shape = SCurveShape(curvature=record.curvature)
    elif record.shape is ShapeKind.EXPONENTIAL:
        shape = ExponentialShape(curvature=record.curvature)
    else:
        shape = LinearShape()

    if record.control_points:
        points = tuple(ControlPoint(x=x, y=y) for x, y in record.control_points)
    elif isinstance(shape, SCurveShape | ExponentialShape):
        points = sample_control_points(shape)
    else:
        points = DEFAULT_CONTROL_POINTS

    return CurveParameters(
        shape=shape,
        deadzone=record.deadzone,
        saturation=record.saturation,
        control_points=points,
    )


def load_curve_file(path: str | Path) -> CurveParameters:
    """Load a curve from a JSON or YAML file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file cannot be parsed or holds an invalid curve.
    """
    record = CurveRecord.model_validate(load_config(path))
    curve = from_record(record)
    logger.debug(f"Loaded {curve.kind.value} curve from {path}")
    return curve


def save_curve_file(params: CurveParameters, path: str | Path) -> None:
    """Write a curve to a JSON or YAML file, by extension."""
    save_config(to_record(params).model_dump(mode="json"), path)
    logger.debug(f"Saved {params.kind.value} curve to {path}")
