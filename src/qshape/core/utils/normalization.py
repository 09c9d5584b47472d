"""
Scale normalization of point sets.

Points are centered on their centroid and divided by the RMS distance from
that centroid. Scaling the whole set, rather than each vertex to unit
length, keeps the relative radial proportions that distinguish e.g. a
regular trigonal bipyramid from its elongated Johnson variant.
"""

import logging

import numpy as np

from ..domain.exceptions import InvalidInputError
from ..domain.models.point_set import NormalizedPointSet

logger = logging.getLogger(__name__)

# Below this RMS the set is treated as a single point and left unscaled
MIN_RMS = 1e-10


def validate_point_array(points, name: str = "points") -> np.ndarray:
    """
    Convert raw coordinates into an (N, 3) float array.

    Args:
        points: Sequence of [x, y, z] triples or an (N, 3) array
        name: Label used in error messages

    Returns:
        New (N, 3) float64 array

    Raises:
        InvalidInputError: If the input is empty, not (N, 3) or non-finite
    """
    try:
        array = np.array(points, dtype=float)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"{name} could not be read as coordinates: {e}")

    if array.size == 0:
        raise InvalidInputError(f"{name} is empty")
    if array.ndim != 2 or array.shape[1] != 3:
        raise InvalidInputError(
            f"{name} must be a sequence of 3D points, got shape {array.shape}"
        )
    if not np.all(np.isfinite(array)):
        raise InvalidInputError(f"{name} contains NaN or infinite coordinates")
    return array


def normalize_point_set(points) -> NormalizedPointSet:
    """
    Center a point set on its centroid and scale it to unit RMS distance.

    Args:
        points: (N, 3) coordinates

    Returns:
        NormalizedPointSet with read-only coordinates
    """
    coords = validate_point_array(points)

    centroid = coords.mean(axis=0)
    centered = coords - centroid
    rms = float(np.sqrt(np.mean(np.sum(centered**2, axis=1))))

    if rms < MIN_RMS:
        logger.debug("Degenerate point set (rms=%.3e); returning centered points", rms)
        normalized = centered
        rms = 1.0
    else:
        normalized = centered / rms

    normalized.flags.writeable = False
    centroid.flags.writeable = False
    return NormalizedPointSet(coordinates=normalized, centroid=centroid, rms=rms)
