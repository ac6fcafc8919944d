"""Curve parameter models for axis response shaping.

This module defines the value objects the evaluator consumes:
- ControlPoint: A single (x, y) anchor in [0,1] x [0,1]
- LinearShape / SCurveShape / ExponentialShape / FreeFormShape: the shape
  variants, discriminated on ``kind`` so a shape only carries the fields
  it uses
- CurveParameters: shape, deadzone, saturation and control points

All models are frozen and validate on construction, so a CurveParameters
instance that exists normally satisfies every invariant. ``check_invariants``
re-checks an instance independently for callers that must not trust that
(e.g. instances built with ``model_construct``).
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
import math
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from hotascurve.core.curves import functions

# Minimum x distance between adjacent control points.
MIN_POINT_GAP = 0.02
# Minimum distance between deadzone and saturation.
MIN_ACTIVE_RANGE = 0.1
# Deadzone lives in [0, 0.5), saturation in (0.5, 1].
DEADZONE_MAX = 0.49
SATURATION_MIN = 0.51
# Tolerance for gap/range comparisons on clamped floats.
TOLERANCE = 1e-9
# Inputs at which parametric shapes are sampled into control points.
PRESET_SAMPLE_INPUTS: tuple[float, ...] = (0.0, 0.25, 0.5, 0.75, 1.0)


class ShapeKind(str, Enum):
    """Response shape of an axis curve."""

    LINEAR = "linear"
    S_CURVE = "s_curve"
    EXPONENTIAL = "exponential"
    FREE_FORM = "free_form"


class ControlPoint(BaseModel):
    """A user-placed (input, output) anchor of a free-form curve.

    Attributes:
        x: Normalized input magnitude [0, 1].
        y: Normalized output magnitude [0, 1].

    Example:
        >>> point = ControlPoint(x=0.5, y=0.2)
        >>> point.y
        0.2
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    x: float = Field(..., ge=0.0, le=1.0, description="Normalized input [0,1]")
    y: float = Field(..., ge=0.0, le=1.0, description="Normalized output [0,1]")


# Control points of a newly created curve.
DEFAULT_CONTROL_POINTS: tuple[ControlPoint, ...] = (
    ControlPoint(x=0.0, y=0.0),
    ControlPoint(x=1.0, y=1.0),
)


def point_violations(points: Sequence[Any]) -> list[str]:
    """Describe every way a control point sequence breaks the point invariants.

    Args:
        points: Sequence of objects with ``x`` and ``y`` attributes.

    Returns:
        Human-readable violations; empty when the sequence is valid.
    """
    if len(points) < 2:
        return [f"need at least 2 control points, got {len(points)}"]

    violations: list[str] = []
    if points[0].x != 0.0:
        violations.append(f"first control point must have x=0, got {points[0].x}")
    if points[-1].x != 1.0:
        violations.append(f"last control point must have x=1, got {points[-1].x}")

    for i, p in enumerate(points):
        if not (0.0 <= p.y <= 1.0):
            violations.append(f"control point {i} has y={p.y} outside [0, 1]")
        if i and p.x - points[i - 1].x < MIN_POINT_GAP - TOLERANCE:
            violations.append(
                f"control points {i - 1} and {i} are closer than {MIN_POINT_GAP} in x"
            )
    return violations


class LinearShape(BaseModel):
    """1:1 response."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["linear"] = "linear"

    def value_at(self, n: float) -> float:
        return functions.linear(n)


class SCurveShape(BaseModel):
    """Ease in/out around the midpoint, for fine control near center."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["s_curve"] = "s_curve"
    curvature: float = Field(default=0.5, ge=0.0, le=1.0)

    def value_at(self, n: float) -> float:
        return functions.s_curve(n, self.curvature)


class ExponentialShape(BaseModel):
    """Progressive response, small output for small deflection."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["exponential"] = "exponential"
    curvature: float = Field(default=0.3, ge=0.0, le=1.0)

    def value_at(self, n: float) -> float:
        return functions.exponential(n, self.curvature)


class FreeFormShape(BaseModel):
    """Piecewise-linear response through the curve's control points."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["free_form"] = "free_form"


ParametricShape = LinearShape | SCurveShape | ExponentialShape

Shape = Annotated[
    LinearShape | SCurveShape | ExponentialShape | FreeFormShape,
    Field(discriminator="kind"),
]


class CurveParameters(BaseModel):
    """Complete response curve for one axis.

    Attributes:
        shape: Shape variant (see ShapeKind).
        deadzone: Magnitude below which input reads as zero [0, 0.49].
        saturation: Magnitude at and above which input reads as full scale [0.51, 1].
        control_points: Ordered anchors, pinned to x=0 and x=1, at least
            MIN_POINT_GAP apart. Only a free-form shape evaluates through
            them; for the other shapes they are the starting point of a
            switch to free-form editing.

    Example:
        >>> curve = CurveParameters()
        >>> curve.kind
        <ShapeKind.LINEAR: 'linear'>
        >>> [(p.x, p.y) for p in curve.control_points]
        [(0.0, 0.0), (1.0, 1.0)]
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    shape: Shape = Field(default_factory=LinearShape)
    deadzone: float = Field(default=0.0, ge=0.0, le=DEADZONE_MAX)
    saturation: float = Field(default=1.0, ge=SATURATION_MIN, le=1.0)
    control_points: tuple[ControlPoint, ...] = Field(
        default=DEFAULT_CONTROL_POINTS, min_length=2
    )

    @field_validator("control_points")
    @classmethod
    def _validate_points(cls, points: tuple[ControlPoint, ...]) -> tuple[ControlPoint, ...]:
        violations = point_violations(points)
        if violations:
            raise ValueError("; ".join(violations))
        return points

    @model_validator(mode="after")
    def _validate_active_range(self) -> CurveParameters:
        if self.deadzone + MIN_ACTIVE_RANGE > self.saturation + TOLERANCE:
            raise ValueError(
                f"saturation ({self.saturation}) must be at least {MIN_ACTIVE_RANGE} "
                f"above deadzone ({self.deadzone})"
            )
        return self

    @property
    def kind(self) -> ShapeKind:
        return ShapeKind(self.shape.kind)

    @property
    def curvature(self) -> float:
        """Curvature of a parametric shape; 0.0 where it has no meaning."""
        return getattr(self.shape, "curvature", 0.0)

    def shape_value(self, n: float) -> float:
        """Shaped magnitude for a gated magnitude ``n`` in [0, 1]."""
        if isinstance(self.shape, FreeFormShape):
            return functions.interpolate_points(self.control_points, n)
        return self.shape.value_at(n)


def sample_control_points(shape: ParametricShape) -> tuple[ControlPoint, ...]:
    """Sample a parametric shape into control points at PRESET_SAMPLE_INPUTS."""
    return tuple(
        ControlPoint(x=x, y=min(1.0, max(0.0, shape.value_at(x)))) for x in PRESET_SAMPLE_INPUTS
    )


def default_curve() -> CurveParameters:
    """Curve given to a newly created axis mapping: linear, no deadzone, full range."""
    return CurveParameters()


def check_invariants(params: CurveParameters) -> list[str]:
    """Re-check every curve invariant without trusting construction-time validation.

    Args:
        params: Curve to check.

    Returns:
        Violations found; empty when the curve may be published.
    """
    violations: list[str] = []

    deadzone = params.deadzone
    saturation = params.saturation
    if not (isinstance(deadzone, float | int) and math.isfinite(deadzone)):
        return [f"deadzone is not a finite number: {deadzone!r}"]
    if not (isinstance(saturation, float | int) and math.isfinite(saturation)):
        return [f"saturation is not a finite number: {saturation!r}"]

    if not (0.0 <= deadzone <= DEADZONE_MAX):
        violations.append(f"deadzone {deadzone} outside [0, {DEADZONE_MAX}]")
    if not (SATURATION_MIN <= saturation <= 1.0):
        violations.append(f"saturation {saturation} outside [{SATURATION_MIN}, 1]")
    if deadzone + MIN_ACTIVE_RANGE > saturation + TOLERANCE:
        violations.append(
            f"deadzone {deadzone} and saturation {saturation} closer than {MIN_ACTIVE_RANGE}"
        )

    shape = params.shape
    if isinstance(shape, SCurveShape | ExponentialShape):
        if not (0.0 <= shape.curvature <= 1.0):
            violations.append(f"curvature {shape.curvature} outside [0, 1]")
    elif not isinstance(shape, LinearShape | FreeFormShape):
        violations.append(f"unknown shape {shape!r}")

    violations.extend(point_violations(params.control_points))
    return violations
