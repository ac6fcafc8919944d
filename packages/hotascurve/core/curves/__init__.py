"""Axis response curves: model, evaluation, editing and publishing."""

from hotascurve.core.curves.editing import CurveEditingSession, EditorState
from hotascurve.core.curves.errors import CurveError, CurveInvariantError, InvalidCurveOperation
from hotascurve.core.curves.gate import evaluate_curve, gate_magnitude
from hotascurve.core.curves.models import (
    ControlPoint,
    CurveParameters,
    ExponentialShape,
    FreeFormShape,
    LinearShape,
    SCurveShape,
    ShapeKind,
    check_invariants,
    default_curve,
)
from hotascurve.core.curves.publisher import CurveEvaluator, CurvePublisher
from hotascurve.core.curves.records import (
    CurveRecord,
    from_record,
    load_curve_file,
    save_curve_file,
    to_record,
)
from hotascurve.core.curves.sampling import sample_curve, sample_shape

__all__ = [
    "ControlPoint",
    "CurveEditingSession",
    "CurveError",
    "CurveEvaluator",
    "CurveInvariantError",
    "CurveParameters",
    "CurvePublisher",
    "CurveRecord",
    "EditorState",
    "ExponentialShape",
    "FreeFormShape",
    "InvalidCurveOperation",
    "LinearShape",
    "SCurveShape",
    "ShapeKind",
    "check_invariants",
    "default_curve",
    "evaluate_curve",
    "from_record",
    "gate_magnitude",
    "load_curve_file",
    "sample_curve",
    "sample_shape",
    "save_curve_file",
    "to_record",
]
