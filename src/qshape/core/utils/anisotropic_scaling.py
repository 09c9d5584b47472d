"""
Anisotropic scaling of reference polyhedra along their principal axes.

A reference stretched or compressed along its own axes can absorb a
uniform distortion of the actual structure (an elongated octahedron, a
flattened tetrahedron). Comparing the scaled and unscaled measures separates
a distorted instance of the right polyhedron from a wrong polyhedron.
"""

import logging
import math
from typing import Callable, Optional, Sequence, Tuple

import numpy as np

from .cancellation import CancellationToken
from .progress import ProgressReporter
from .seed_alignments import anisotropy, principal_axes

logger = logging.getLogger(__name__)

Scales = Tuple[float, float, float]

# Scales within this of each other (or of 1) read as equal
DESCRIPTION_TOLERANCE = 0.05
MIN_TEMPERATURE = 1e-12

# Below this anisotropy the principal axes are arbitrary; keep the frame axes
ISOTROPIC_ANISOTROPY = 1e-6


def reference_axes(points: np.ndarray) -> np.ndarray:
    """Rows are the principal axes of ``points``; the identity for isotropic sets."""
    points = np.asarray(points, dtype=float)
    try:
        eigenvalues, axes = principal_axes(points)
    except np.linalg.LinAlgError:
        logger.debug("Principal axes failed; scaling along x, y and z")
        return np.eye(3)
    if not np.all(np.isfinite(axes)) or anisotropy(eigenvalues) < ISOTROPIC_ANISOTROPY:
        return np.eye(3)
    return axes


def scaling_matrix(axes: np.ndarray, scales: Sequence[float]) -> np.ndarray:
    """3x3 matrix scaling by ``scales[k]`` along ``axes[k]``."""
    return axes.T @ np.diag(np.asarray(scales, dtype=float)) @ axes


def apply_anisotropic_scaling(
    points: np.ndarray, axes: np.ndarray, scales: Sequence[float]
) -> np.ndarray:
    """Scale ``points`` about the origin along the rows of ``axes``."""
    return np.asarray(points, dtype=float) @ scaling_matrix(axes, scales).T


def distortion_index(sx: float, sy: float, sz: float) -> float:
    """
    How far the scales are from isotropic, in percent.

    Scales are divided by their geometric mean first, so a uniform expansion
    scores 0. The index is the RMS deviation of the relative scales from 1,
    times 100.
    """
    mean_scale = (sx * sy * sz) ** (1.0 / 3.0)
    if mean_scale <= 0:
        return math.inf
    relative = np.array([sx, sy, sz]) / mean_scale
    return float(np.sqrt(np.mean((relative - 1.0) ** 2)) * 100.0)


def describe_scaling(sx: float, sy: float, sz: float) -> str:
    """Short human-readable summary of a scaling."""
    tolerance = DESCRIPTION_TOLERANCE
    if abs(sx - sy) < tolerance and abs(sy - sz) < tolerance:
        if abs(sx - 1.0) < tolerance:
            return "No scaling"
        percent = round((sx - 1.0) * 100)
        if percent > 0:
            return f"Uniformly expanded ({percent}%)"
        return f"Uniformly compressed ({abs(percent)}%)"

    ranked = sorted(zip("XYZ", (sx, sy, sz)), key=lambda item: item[1], reverse=True)
    parts = []
    axis, value = ranked[0]
    if value > 1.0 + tolerance:
        parts.append(f"elongated along {axis} (+{round((value - 1.0) * 100)}%)")
    axis, value = ranked[-1]
    if value < 1.0 - tolerance:
        parts.append(f"compressed along {axis} (-{round((1.0 - value) * 100)}%)")
    return ", ".join(parts) if parts else "Anisotropic scaling"


def optimize_scaling(
    measure: Callable[[Scales], float],
    rng: np.random.Generator,
    min_scale: float = 0.4,
    max_scale: float = 2.5,
    restarts: int = 3,
    iterations: int = 1000,
    initial_temperature: float = 0.5,
    cooling_rate: float = 0.94,
    progress: Optional[ProgressReporter] = None,
    cancellation: Optional[CancellationToken] = None,
    cancel_check_interval: int = 256,
) -> Tuple[Scales, float]:
    """
    Anneal the three scale factors to minimize ``measure``.

    The first restart starts from no scaling, later restarts from random
    scales within the bounds, so the result is never worse than the unscaled
    measure.

    Args:
        measure: Shape measure of the scaled reference for given scales
        rng: Random generator for proposals and restarts
        min_scale: Lower bound of each scale factor
        max_scale: Upper bound of each scale factor
        restarts: Number of annealing runs
        iterations: Proposals per run
        initial_temperature: Starting temperature of each run
        cooling_rate: Geometric cooling per proposal
        progress: Reporter receiving "Flexible Scaling" events
        cancellation: Token polled while annealing

    Returns:
        Tuple of (best scales, best measure)
    """
    best_scales: Scales = (1.0, 1.0, 1.0)
    best_measure = measure(best_scales)
    if best_measure < 0.01:
        return best_scales, best_measure
    total = restarts * iterations
    done = 0

    for restart in range(restarts):
        if restart == 0:
            current = np.ones(3)
        else:
            current = rng.uniform(min_scale, max_scale, size=3)
        current_measure = measure(tuple(current))
        temperature = initial_temperature

        for _ in range(iterations):
            done += 1
            if cancellation is not None and done % cancel_check_interval == 0:
                cancellation.raise_if_cancelled()

            step = temperature * 0.2
            candidate = np.clip(
                current + (rng.random(3) - 0.5) * 2 * step, min_scale, max_scale
            )
            candidate_measure = measure(tuple(candidate))

            delta = candidate_measure - current_measure
            if delta < 0 or rng.random() < math.exp(-delta / temperature):
                current = candidate
                current_measure = candidate_measure
                if current_measure < best_measure:
                    best_measure = current_measure
                    best_scales = tuple(float(s) for s in current)

            temperature = max(temperature * cooling_rate, MIN_TEMPERATURE)
            if progress is not None:
                progress.report("Flexible Scaling", done, total, best_measure)
            if best_measure < 0.01:
                break

        logger.debug(
            "Scaling restart %d/%d: best %.6f at %s",
            restart + 1, restarts, best_measure, best_scales,
        )
        if best_measure < 0.01:
            break

    return best_scales, best_measure
