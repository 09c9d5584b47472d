"""Core domain models, interfaces and errors."""

from .exceptions import (
    DegenerateGeometryError,
    InvalidInputError,
    SearchCancelledError,
    ShapeMeasureError,
)
from .interfaces.assignment_solver import AssignmentSolver
from .models import (
    NormalizedPointSet,
    ProgressEvent,
    ReferenceGeometry,
    SearchMode,
    SearchParameters,
    ShapeMeasureResult,
)

__all__ = [
    "AssignmentSolver",
    "DegenerateGeometryError",
    "InvalidInputError",
    "NormalizedPointSet",
    "ProgressEvent",
    "ReferenceGeometry",
    "SearchCancelledError",
    "SearchMode",
    "SearchParameters",
    "ShapeMeasureError",
    "ShapeMeasureResult",
]
