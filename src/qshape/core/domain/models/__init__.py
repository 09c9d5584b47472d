"""Domain value types."""

from .flexible_shape_result import AnisotropicScaling, FlexibleShapeMeasureResult
from .point_set import NormalizedPointSet
from .progress_event import ProgressEvent
from .reference_geometry import ReferenceGeometry
from .search_parameters import SearchMode, SearchParameters
from .shape_measure_result import ShapeMeasureResult

__all__ = [
    "AnisotropicScaling",
    "FlexibleShapeMeasureResult",
    "NormalizedPointSet",
    "ProgressEvent",
    "ReferenceGeometry",
    "SearchMode",
    "SearchParameters",
    "ShapeMeasureResult",
]
