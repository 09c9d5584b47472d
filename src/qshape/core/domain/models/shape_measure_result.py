"""Domain model for shape measure results."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

import numpy as np

from ...utils.vector_math import flatten_matrix4


@dataclass
class ShapeMeasureResult:
    """Contains the best alignment of an actual point set onto a reference.

    Attributes:
        measure: Continuous shape measure, 0 for a perfect match
        assignment: (actual index, reference index) pairs
        rotation: 4x4 homogeneous rotation applied to the normalized actual set
        aligned_coords: Rotated normalized actual points in reference order
        reference_coords: Normalized reference points, same order
        mode: Search mode used
        center_appended: Whether a metal point was appended to the actual set
    """

    measure: float
    assignment: List[Tuple[int, int]]
    rotation: np.ndarray
    aligned_coords: np.ndarray
    reference_coords: Optional[np.ndarray] = None
    mode: str = "default"
    center_appended: bool = False
    stage_timings: Dict[str, float] = field(default_factory=dict)

    @property
    def is_perfect(self) -> bool:
        return self.measure < 0.01

    def to_dict(self) -> Dict[str, Any]:
        """Success response in wire format."""
        return {
            "measure": float(self.measure),
            "alignedCoordinates": np.asarray(self.aligned_coords).tolist(),
            "rotation": flatten_matrix4(self.rotation),
        }
