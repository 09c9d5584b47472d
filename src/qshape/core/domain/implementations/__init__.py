"""Concrete solvers, aligners and the rotation search engine."""

from .hungarian_solver import HungarianSolver
from .kabsch_aligner import KabschAligner
from .linear_sum_assignment_solver import LinearSumAssignmentSolver
from .rotation_search_engine import MeasureEvaluator, RotationSearchEngine

__all__ = [
    "HungarianSolver",
    "KabschAligner",
    "LinearSumAssignmentSolver",
    "MeasureEvaluator",
    "RotationSearchEngine",
]
