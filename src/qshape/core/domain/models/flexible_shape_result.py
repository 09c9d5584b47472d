"""Domain model for rigid-versus-flexible shape measure comparisons."""

from dataclasses import dataclass
from typing import Any, Dict

import numpy as np

from .shape_measure_result import ShapeMeasureResult


@dataclass(frozen=True)
class AnisotropicScaling:
    """Scale factors along the three principal axes of the reference."""

    sx: float
    sy: float
    sz: float
    distortion: float
    description: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "sx": self.sx,
            "sy": self.sy,
            "sz": self.sz,
            "distortion": self.distortion,
            "description": self.description,
        }


@dataclass
class FlexibleShapeMeasureResult:
    """Rigid shape measure and its anisotropically scaled counterpart.

    Attributes:
        rigid: Result of the ordinary (rigid) computation
        measure: Flexible shape measure, never above the rigid one
        scaling: Best scale factors and their distortion index
        aligned_coords: Rigidly aligned actual points in the order of the
            scaled reference
        scaled_reference: Normalized reference after scaling
        delta: Rigid measure minus flexible measure
        improvement: ``delta`` as a percentage of the rigid measure
        category: Reading of the comparison, see ``interpret_flexible``
    """

    rigid: ShapeMeasureResult
    measure: float
    scaling: AnisotropicScaling
    aligned_coords: np.ndarray
    scaled_reference: np.ndarray
    delta: float
    improvement: float
    category: str

    def to_dict(self) -> Dict[str, Any]:
        """Success response in wire format, with the flexible block added."""
        response = self.rigid.to_dict()
        response["flexible"] = {
            "measure": float(self.measure),
            "alignedCoordinates": np.asarray(self.aligned_coords).tolist(),
            "scaling": self.scaling.to_dict(),
            "category": self.category,
        }
        response["delta"] = float(self.delta)
        response["improvement"] = float(self.improvement)
        return response
