"""Interactive curve editing session.

The session owns the working copy of one axis curve and applies editor
gestures to it. Every operation clamps its arguments so the result already
satisfies the curve invariants; the working copy is valid after every
single step, including mid-drag. Each applied change is published, so the
evaluator tracks the edit live.

Operations that cannot be satisfied by clamping (removing an endpoint,
inserting where there is no room) raise InvalidCurveOperation and leave
the working copy untouched.
"""

from __future__ import annotations

from bisect import bisect_left
from enum import Enum
import logging
from typing import NoReturn

from hotascurve.core.config.models import EditorConfig
from hotascurve.core.curves.errors import InvalidCurveOperation
from hotascurve.core.curves.models import (
    DEADZONE_MAX,
    MIN_ACTIVE_RANGE,
    MIN_POINT_GAP,
    SATURATION_MIN,
    TOLERANCE,
    ControlPoint,
    CurveParameters,
    ExponentialShape,
    FreeFormShape,
    LinearShape,
    ParametricShape,
    SCurveShape,
    ShapeKind,
    default_curve,
    sample_control_points,
)
from hotascurve.core.curves.publisher import CurvePublisher
from hotascurve.core.utils.math import clamp, clamp_unit

logger = logging.getLogger(__name__)

# A free-form curve keeps both endpoints plus at least one interior point
# once an interior point has been placed.
MIN_POINTS_FOR_REMOVAL = 4


class EditorState(str, Enum):
    """Pointer interaction state of the curve editor."""

    IDLE = "idle"
    DRAGGING_POINT = "dragging_point"
    DRAGGING_DEADZONE = "dragging_deadzone"
    DRAGGING_SATURATION = "dragging_saturation"


class CurveEditingSession:
    """Authoring state machine for one axis curve.

    Args:
        publisher: Destination for every applied change. The session starts
            from the publisher's current snapshot.
        config: Editor defaults (preset curvatures).

    Example:
        >>> session = CurveEditingSession(CurvePublisher())
        >>> session.insert_point(0.5, 0.2)
        1
        >>> session.curve.kind
        <ShapeKind.FREE_FORM: 'free_form'>
    """

    def __init__(self, publisher: CurvePublisher, config: EditorConfig | None = None) -> None:
        self._publisher = publisher
        self._config = config or EditorConfig()
        self._curve = publisher.current()
        self._state = EditorState.IDLE
        self._drag_index: int | None = None

    # ------------------------------------------------------------------
    # Read-only projection for rendering
    # ------------------------------------------------------------------

    @property
    def curve(self) -> CurveParameters:
        """The working copy. Immutable; safe to hand to a renderer."""
        return self._curve

    @property
    def control_points(self) -> tuple[ControlPoint, ...]:
        return self._curve.control_points

    @property
    def state(self) -> EditorState:
        return self._state

    @property
    def drag_index(self) -> int | None:
        """Index of the point being dragged, if any."""
        return self._drag_index

    # ------------------------------------------------------------------
    # Shape selection
    # ------------------------------------------------------------------

    def select_shape(self, kind: ShapeKind | str) -> CurveParameters:
        """Switch the curve to a preset or to free-form editing.

        Presets reset curvature to the configured default and resample the
        control points from the new shape. Switching to free-form keeps the
        current control points.

        Raises:
            InvalidCurveOperation: If a point is being dragged.
        """
        kind = ShapeKind(kind)
        self._forbid_point_drag(f"select {kind.value}")

        if kind is ShapeKind.FREE_FORM:
            return self._commit(self._rebuild(shape=FreeFormShape()), f"select {kind.value}")

        shape: ParametricShape
        if kind is ShapeKind.LINEAR:
            shape = LinearShape()
        elif kind is ShapeKind.S_CURVE:
            shape = SCurveShape(curvature=self._config.s_curve_curvature)
        else:
            shape = ExponentialShape(curvature=self._config.exponential_curvature)
        return self._commit(self._with_shape(shape), f"select {kind.value}")

    def set_curvature(self, value: float) -> CurveParameters:
        """Set the curvature of an S-curve or exponential shape, clamped to [0, 1].

        The control points are resampled from the adjusted shape.
        """
        self._forbid_point_drag("set curvature")
        shape = self._curve.shape
        if not isinstance(shape, SCurveShape | ExponentialShape):
            self._reject(f"{self._curve.kind.value} curves have no curvature")

        new_shape = type(shape)(curvature=clamp_unit(value))
        return self._commit(self._with_shape(new_shape), "set curvature")

    # ------------------------------------------------------------------
    # Control points
    # ------------------------------------------------------------------

    def move_point(self, index: int, x: float, y: float) -> CurveParameters:
        """Move a control point, clamping it into its legal position.

        Endpoints stay pinned to x=0 and x=1. Interior points stay at least
        MIN_POINT_GAP away from both neighbours. y is clamped to [0, 1].
        The curve becomes free-form.
        """
        points = list(self._curve.control_points)
        self._check_index(index, len(points))

        last = len(points) - 1
        if index == 0:
            x = 0.0
        elif index == last:
            x = 1.0
        else:
            x = clamp(x, points[index - 1].x + MIN_POINT_GAP, points[index + 1].x - MIN_POINT_GAP)
        points[index] = ControlPoint(x=x, y=clamp_unit(y))

        return self._commit(self._with_points(points), f"move point {index}")

    def insert_point(self, x: float, y: float) -> int:
        """Insert a control point in x order and return its index.

        The point never lands outside the endpoints, and its x is snapped to
        keep MIN_POINT_GAP from both neighbours.

        Raises:
            InvalidCurveOperation: If a point is being dragged, or the two
                neighbours around ``x`` are too close to fit another point.
        """
        self._forbid_point_drag("insert a point")

        points = list(self._curve.control_points)
        x = clamp_unit(x)
        index = bisect_left([p.x for p in points], x)
        index = clamp(index, 1, len(points) - 1)

        lo = points[index - 1].x + MIN_POINT_GAP
        hi = points[index].x - MIN_POINT_GAP
        if lo > hi + TOLERANCE:
            self._reject(
                f"no room for a point between x={points[index - 1].x} and x={points[index].x}"
            )

        points.insert(index, ControlPoint(x=clamp(x, lo, hi), y=clamp_unit(y)))
        self._commit(self._with_points(points), f"insert point {index}")
        return index

    def remove_point(self, index: int) -> CurveParameters:
        """Remove an interior control point.

        Raises:
            InvalidCurveOperation: If ``index`` is an endpoint, the curve has
                three points or fewer, or a point is being dragged.
        """
        self._forbid_point_drag("remove a point")

        points = list(self._curve.control_points)
        self._check_index(index, len(points))
        if index == 0 or index == len(points) - 1:
            self._reject("endpoints cannot be removed")
        if len(points) < MIN_POINTS_FOR_REMOVAL:
            self._reject(f"a curve with {len(points)} points cannot lose another")

        del points[index]
        return self._commit(self._with_points(points), f"remove point {index}")

    # ------------------------------------------------------------------
    # Deadzone / saturation
    # ------------------------------------------------------------------

    def set_deadzone(self, value: float) -> CurveParameters:
        """Set the deadzone, clamped to [0, saturation - MIN_ACTIVE_RANGE]."""
        upper = min(DEADZONE_MAX, self._curve.saturation - MIN_ACTIVE_RANGE)
        deadzone = clamp(value, 0.0, upper)
        return self._commit(self._rebuild(deadzone=deadzone), "set deadzone")

    def set_saturation(self, value: float) -> CurveParameters:
        """Set the saturation, clamped to [deadzone + MIN_ACTIVE_RANGE, 1]."""
        lower = max(SATURATION_MIN, self._curve.deadzone + MIN_ACTIVE_RANGE)
        saturation = clamp(value, lower, 1.0)
        return self._commit(self._rebuild(saturation=saturation), "set saturation")

    # ------------------------------------------------------------------
    # Pointer drags
    # ------------------------------------------------------------------

    def begin_point_drag(self, index: int) -> None:
        self._require_idle()
        self._check_index(index, len(self._curve.control_points))
        self._state = EditorState.DRAGGING_POINT
        self._drag_index = index

    def begin_deadzone_drag(self) -> None:
        self._require_idle()
        self._state = EditorState.DRAGGING_DEADZONE

    def begin_saturation_drag(self) -> None:
        self._require_idle()
        self._state = EditorState.DRAGGING_SATURATION

    def drag_to(self, x: float, y: float = 0.0) -> CurveParameters:
        """Apply a pointer move in graph coordinates to whatever is being dragged.

        Point drags use (x, y); deadzone and saturation drags use x only.
        """
        if self._state is EditorState.DRAGGING_POINT:
            assert self._drag_index is not None
            return self.move_point(self._drag_index, x, y)
        if self._state is EditorState.DRAGGING_DEADZONE:
            return self.set_deadzone(x)
        if self._state is EditorState.DRAGGING_SATURATION:
            return self.set_saturation(x)
        self._reject("nothing is being dragged")

    def end_drag(self) -> CurveParameters:
        """Release the pointer. Harmless when nothing is being dragged."""
        self._state = EditorState.IDLE
        self._drag_index = None
        return self._curve

    # ------------------------------------------------------------------
    # Whole-curve operations
    # ------------------------------------------------------------------

    def load(self, params: CurveParameters) -> CurveParameters:
        """Adopt a stored curve as the working copy, cancelling any drag."""
        self.end_drag()
        return self._commit(params, "load")

    def reset(self) -> CurveParameters:
        """Return to the default linear curve."""
        return self.load(default_curve())

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _rebuild(self, **changes) -> CurveParameters:
        fields = {
            "shape": self._curve.shape,
            "deadzone": self._curve.deadzone,
            "saturation": self._curve.saturation,
            "control_points": self._curve.control_points,
        }
        fields.update(changes)
        return CurveParameters(**fields)

    def _with_points(self, points: list[ControlPoint]) -> CurveParameters:
        return self._rebuild(shape=FreeFormShape(), control_points=tuple(points))

    def _with_shape(self, shape: ParametricShape) -> CurveParameters:
        return self._rebuild(shape=shape, control_points=sample_control_points(shape))

    def _commit(self, curve: CurveParameters, action: str) -> CurveParameters:
        self._publisher.publish(curve)
        self._curve = curve
        logger.debug(
            "Curve edit applied: %s -> %s dz=%.3f sat=%.3f points=%d",
            action,
            curve.kind.value,
            curve.deadzone,
            curve.saturation,
            len(curve.control_points),
        )
        return curve

    def _forbid_point_drag(self, action: str) -> None:
        if self._state is EditorState.DRAGGING_POINT:
            self._reject(f"cannot {action} while dragging a point")

    def _require_idle(self) -> None:
        if self._state is not EditorState.IDLE:
            self._reject(f"already {self._state.value}")

    def _check_index(self, index: int, count: int) -> None:
        if not 0 <= index < count:
            self._reject(f"control point index {index} out of range (0..{count - 1})")

    @staticmethod
    def _reject(message: str) -> NoReturn:
        logger.warning("Curve edit rejected: %s", message)
        raise InvalidCurveOperation(message)
