"""
qshape: continuous shape measures of coordination geometries.

Quantifies how far the ligand arrangement around a metal center deviates
from an ideal reference polyhedron, on a 0 (identical) to 100 scale.
"""

from .core.domain.exceptions import (
    DegenerateGeometryError,
    InvalidInputError,
    SearchCancelledError,
    ShapeMeasureError,
)
from .core.domain.models import (
    FlexibleShapeMeasureResult,
    ProgressEvent,
    ReferenceGeometry,
    SearchMode,
    SearchParameters,
    ShapeMeasureResult,
)
from .core.services import (
    GeometryRanking,
    GeometryRankingService,
    ShapeMeasureService,
    compute_shape_measure,
    interpret_flexible,
    interpret_measure,
)
from .core.utils.cancellation import CancellationToken
from .data import REFERENCE_GEOMETRIES, geometries_for, get_geometry

__version__ = "0.1.0"

__all__ = [
    "CancellationToken",
    "DegenerateGeometryError",
    "FlexibleShapeMeasureResult",
    "GeometryRanking",
    "GeometryRankingService",
    "InvalidInputError",
    "ProgressEvent",
    "REFERENCE_GEOMETRIES",
    "ReferenceGeometry",
    "SearchCancelledError",
    "SearchMode",
    "SearchParameters",
    "ShapeMeasureError",
    "ShapeMeasureResult",
    "ShapeMeasureService",
    "compute_shape_measure",
    "geometries_for",
    "get_geometry",
    "interpret_measure",
]
