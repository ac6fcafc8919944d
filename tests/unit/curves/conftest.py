"""Shared pytest fixtures for curve tests."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from hotascurve.core.curves.editing import CurveEditingSession
from hotascurve.core.curves.models import (
    ControlPoint,
    CurveParameters,
    ExponentialShape,
    FreeFormShape,
    SCurveShape,
    sample_control_points,
)
from hotascurve.core.curves.publisher import CurvePublisher


def free_form(
    *points: tuple[float, float], deadzone: float = 0.0, saturation: float = 1.0
) -> CurveParameters:
    """Build a free-form curve from (x, y) pairs."""
    return CurveParameters(
        shape=FreeFormShape(),
        deadzone=deadzone,
        saturation=saturation,
        control_points=tuple(ControlPoint(x=x, y=y) for x, y in points),
    )


@pytest.fixture
def make_free_form() -> Callable[..., CurveParameters]:
    """Factory for free-form curves from (x, y) pairs."""
    return free_form


@pytest.fixture
def default_params() -> CurveParameters:
    """Default linear curve with no deadzone and full saturation."""
    return CurveParameters()


@pytest.fixture
def gated_linear_params() -> CurveParameters:
    """Linear curve with deadzone 0.1 and saturation 0.9."""
    return CurveParameters(deadzone=0.1, saturation=0.9)


@pytest.fixture
def three_point_params() -> CurveParameters:
    """Free-form curve through (0,0), (0.5,0.2), (1,1)."""
    return free_form((0.0, 0.0), (0.5, 0.2), (1.0, 1.0))


@pytest.fixture
def s_curve_params() -> CurveParameters:
    """S-curve preset with curvature 0.5 and its sampled points."""
    shape = SCurveShape(curvature=0.5)
    return CurveParameters(shape=shape, control_points=sample_control_points(shape))


@pytest.fixture
def exponential_params() -> CurveParameters:
    """Exponential preset with curvature 0.3 and its sampled points."""
    shape = ExponentialShape(curvature=0.3)
    return CurveParameters(shape=shape, control_points=sample_control_points(shape))


@pytest.fixture
def publisher() -> CurvePublisher:
    """Publisher holding the default curve."""
    return CurvePublisher()


@pytest.fixture
def session(publisher: CurvePublisher) -> CurveEditingSession:
    """Editing session starting from the default curve."""
    return CurveEditingSession(publisher)


@pytest.fixture
def three_point_session(
    publisher: CurvePublisher, three_point_params: CurveParameters
) -> CurveEditingSession:
    """Editing session holding the three-point free-form curve."""
    session = CurveEditingSession(publisher)
    session.load(three_point_params)
    return session
