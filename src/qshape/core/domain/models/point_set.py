"""Point set value types."""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class NormalizedPointSet:
    """Point set centered on its centroid and scaled to unit RMS distance.

    Attributes:
        coordinates: Read-only (N, 3) array of normalized points
        centroid: Centroid of the raw points that was subtracted
        rms: RMS distance of the centered raw points (1.0 when degenerate)
    """

    coordinates: np.ndarray
    centroid: np.ndarray
    rms: float

    def __len__(self) -> int:
        return len(self.coordinates)
