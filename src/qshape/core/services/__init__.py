"""Application services."""

from .ranking_service import GeometryRanking, GeometryRankingService
from .shape_measure_service import (
    ShapeMeasureService,
    compute_shape_measure,
    interpret_flexible,
    interpret_measure,
)

__all__ = [
    "GeometryRanking",
    "GeometryRankingService",
    "ShapeMeasureService",
    "compute_shape_measure",
    "interpret_flexible",
    "interpret_measure",
]
