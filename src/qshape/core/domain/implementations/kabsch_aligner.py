# src/qshape/core/domain/implementations/kabsch_aligner.py
"""Optimal proper rotation between corresponding point sets (Kabsch)."""

import logging
from typing import Optional

import numpy as np

from ...utils.vector_math import to_matrix4
from ..exceptions import InvalidInputError

logger = logging.getLogger(__name__)


class KabschAligner:
    """Superimpose centered point sets by minimizing squared deviations."""

    def __init__(self, tolerance: float = 1e-10):
        """
        Args:
            tolerance: Largest singular value below which the covariance is
                treated as singular and the identity is returned
        """
        self.tolerance = tolerance

    def align(
        self,
        actual: np.ndarray,
        reference: np.ndarray,
        assignment: Optional[np.ndarray] = None,
    ) -> np.ndarray:
        """
        Find the rotation R minimizing sum ||R @ actual[i] - reference[assignment[i]]||^2.

        Both sets must already be centered; they are not re-centered here,
        which would discard the metal position of asymmetric references.

        Args:
            actual: (N, 3) actual points
            reference: (N, 3) reference points
            assignment: Reference index for each actual index (identity order
                when omitted)

        Returns:
            4x4 homogeneous proper rotation matrix (det = +1)
        """
        actual = np.asarray(actual, dtype=float)
        reference = np.asarray(reference, dtype=float)
        if actual.shape != reference.shape or actual.ndim != 2:
            raise InvalidInputError(
                f"Point set size mismatch: actual {actual.shape}, reference {reference.shape}"
            )

        if assignment is not None:
            reference = reference[np.asarray(assignment, dtype=int)]

        # Cross-covariance H = sum actual_i^T reference_i
        covariance = actual.T @ reference

        try:
            U, S, Vt = np.linalg.svd(covariance)
        except np.linalg.LinAlgError as e:
            logger.warning("Kabsch SVD failed (%s); using identity rotation", e)
            return np.eye(4)

        if not np.all(np.isfinite(S)) or S[0] < self.tolerance:
            logger.debug("Near-singular covariance; using identity rotation")
            return np.eye(4)

        rotation = Vt.T @ U.T

        # Ensure right-handed coordinate system
        if np.linalg.det(rotation) < 0:
            Vt[-1] *= -1
            rotation = Vt.T @ U.T

        if not np.all(np.isfinite(rotation)):
            return np.eye(4)

        return to_matrix4(rotation)

    @staticmethod
    def rmsd(
        actual: np.ndarray,
        reference: np.ndarray,
        rotation: np.ndarray,
        assignment: Optional[np.ndarray] = None,
    ) -> float:
        """Root mean square deviation after applying ``rotation`` to ``actual``."""
        actual = np.asarray(actual, dtype=float)
        reference = np.asarray(reference, dtype=float)
        if assignment is not None:
            reference = reference[np.asarray(assignment, dtype=int)]
        rotated = actual @ np.asarray(rotation)[:3, :3].T
        return float(np.sqrt(np.mean(np.sum((rotated - reference) ** 2, axis=1))))
