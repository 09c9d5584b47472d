"""
Candidate starting rotations for the shape measure search.

Seeds are cheap guesses evaluated before the global search: a Kabsch
superposition on the assignment found at the identity orientation, and
rotations that map the principal axes of the actual set onto those of the
reference.
"""

import logging
from itertools import permutations
from typing import List, Sequence, Tuple

import numpy as np

from ..domain.implementations.kabsch_aligner import KabschAligner
from ..domain.interfaces.assignment_solver import AssignmentSolver
from .vector_math import compose, cross, normalize, rotation_from_axis_angle

logger = logging.getLogger(__name__)

# Marker point used to tell rotations apart
_MARKER = np.array([1.0, 0.5, 0.3])


def kabsch_seed(
    actual: np.ndarray,
    reference: np.ndarray,
    solver: AssignmentSolver,
    aligner: KabschAligner,
) -> np.ndarray:
    """Kabsch rotation on the optimal assignment at the identity orientation."""
    diff = actual[:, None, :] - reference[None, :, :]
    cost = np.einsum("ijk,ijk->ij", diff, diff)
    assignment = solver.solve(cost)
    return aligner.align(actual, reference, assignment)


def principal_axes(points: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """
    Principal axes of a centered point set.

    Returns:
        Tuple of (eigenvalues in descending order, 3x3 array whose rows are
        the corresponding unit axes)
    """
    points = np.asarray(points, dtype=float)
    covariance = points.T @ points / max(len(points), 1)
    eigenvalues, eigenvectors = np.linalg.eigh(covariance)
    order = np.argsort(eigenvalues)[::-1]
    return eigenvalues[order], eigenvectors[:, order].T


def anisotropy(eigenvalues: np.ndarray) -> float:
    """Spread of the principal moments, 0 for an isotropic set."""
    largest = float(eigenvalues[0])
    if largest <= 0:
        return 0.0
    return (largest - float(eigenvalues[-1])) / largest


def align_vectors(v1: np.ndarray, v2: np.ndarray) -> np.ndarray:
    """Rotation taking direction ``v1`` onto direction ``v2``."""
    v1 = normalize(v1)
    v2 = normalize(v2)
    axis = cross(v1, v2)
    axis_length = np.linalg.norm(axis)

    if axis_length < 1e-6:
        if np.dot(v1, v2) > 0:
            return np.eye(4)
        # Antiparallel: half turn about any perpendicular axis
        helper = np.array([1.0, 0.0, 0.0]) if abs(v1[0]) < 0.9 else np.array([0.0, 1.0, 0.0])
        return rotation_from_axis_angle(cross(v1, helper), np.pi)

    angle = np.arccos(np.clip(np.dot(v1, v2), -1.0, 1.0))
    return rotation_from_axis_angle(axis, angle)


def principal_axis_seeds(
    actual: np.ndarray,
    reference: np.ndarray,
    min_anisotropy: float = 0.1,
) -> List[np.ndarray]:
    """
    Rotations aligning principal axes of ``actual`` with those of ``reference``.

    Every ordered pair of actual axes is mapped onto the reference's primary
    and secondary axes, covering the six axis permutations. Nearly isotropic
    actual sets have no meaningful axes and yield no seeds.
    """
    actual_values, actual_axes = principal_axes(actual)
    _, reference_axes = principal_axes(reference)

    if anisotropy(actual_values) <= min_anisotropy:
        return []

    rotations = []
    for i, j, _ in permutations(range(3)):
        primary = align_vectors(actual_axes[i], reference_axes[0])
        secondary_axis = primary[:3, :3] @ actual_axes[j]
        secondary = align_vectors(secondary_axis, reference_axes[1])
        rotations.append(compose(secondary, primary))
    return rotations


def deduplicate_rotations(rotations: Sequence[np.ndarray], limit: int = 20) -> List[np.ndarray]:
    """Drop rotations that move the marker point within 0.1 of a kept one."""
    unique: List[np.ndarray] = []
    images: List[np.ndarray] = []
    for rotation in rotations:
        image = rotation[:3, :3] @ _MARKER
        if any(np.linalg.norm(image - other) < 0.1 for other in images):
            continue
        unique.append(rotation)
        images.append(image)
        if len(unique) >= limit:
            break
    return unique


def generate_seed_rotations(
    actual: np.ndarray,
    reference: np.ndarray,
    solver: AssignmentSolver,
    aligner: KabschAligner,
    extra: Sequence[np.ndarray] = (),
    limit: int = 20,
) -> List[np.ndarray]:
    """Kabsch and principal-axis seeds followed by caller-supplied rotations."""
    seeds = [kabsch_seed(actual, reference, solver, aligner)]
    seeds.extend(principal_axis_seeds(actual, reference))
    seeds = deduplicate_rotations(seeds, limit=limit)
    logger.debug("Generated %d seed rotations", len(seeds))
    return seeds + [np.asarray(r, dtype=float) for r in extra]
