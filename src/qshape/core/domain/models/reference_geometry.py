"""Ideal reference polyhedron."""

from dataclasses import dataclass
from functools import cached_property
from typing import Tuple

import numpy as np

from ..models.point_set import NormalizedPointSet


@dataclass(frozen=True)
class ReferenceGeometry:
    """A named ideal polyhedron.

    ``coordinates`` may sit in any frame. When
    ``includes_center`` is set, the last point is the central atom itself.
    The normalized form is computed once and shared read-only.
    """

    code: str
    name: str
    coordination_number: int
    point_group: str
    coordinates: Tuple[Tuple[float, float, float], ...]
    includes_center: bool = True

    @property
    def label(self) -> str:
        return f"{self.code} ({self.name})"

    @property
    def num_points(self) -> int:
        return len(self.coordinates)

    def as_array(self) -> np.ndarray:
        return np.array(self.coordinates, dtype=float)

    @cached_property
    def normalized(self) -> NormalizedPointSet:
        from ...utils.normalization import normalize_point_set

        return normalize_point_set(self.coordinates)
