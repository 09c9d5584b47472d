import numpy as np
import pytest

from qshape.core.domain.implementations.kabsch_aligner import KabschAligner
from qshape.core.domain.implementations.linear_sum_assignment_solver import (
    LinearSumAssignmentSolver,
)
from qshape.core.domain.implementations.rotation_search_engine import (
    is_proper_rotation,
)
from qshape.core.utils.normalization import normalize_point_set
from qshape.core.utils.seed_alignments import (
    align_vectors,
    deduplicate_rotations,
    generate_seed_rotations,
    principal_axis_seeds,
)
from qshape.core.utils.vector_math import rotation_from_axis_angle


@pytest.mark.parametrize(
    "v1, v2",
    [
        ([1, 0, 0], [0, 1, 0]),
        ([1, 2, 3], [-3, 0.5, 1]),
        ([0, 0, 1], [0, 0, 1]),
        ([0, 0, 1], [0, 0, -1]),
    ],
)
def test_align_vectors(v1, v2):
    rotation = align_vectors(np.array(v1, float), np.array(v2, float))
    assert is_proper_rotation(rotation)
    mapped = rotation[:3, :3] @ (np.array(v1) / np.linalg.norm(v1))
    assert np.allclose(mapped, np.array(v2) / np.linalg.norm(v2), atol=1e-9)


def test_isotropic_set_has_no_principal_axis_seeds(octahedron):
    points = normalize_point_set(octahedron).coordinates
    assert principal_axis_seeds(points, points) == []


def test_elongated_set_yields_proper_seeds():
    prism = np.array(
        [[1, 0, 2], [-1, 0, 2], [0, 1, -2], [0, -1, -2], [0.5, 0.5, 0]], dtype=float
    )
    points = normalize_point_set(prism).coordinates
    seeds = principal_axis_seeds(points, points)
    assert len(seeds) == 6
    assert all(is_proper_rotation(s) for s in seeds)


def test_deduplicate_drops_near_copies_and_limits():
    base = rotation_from_axis_angle([0, 0, 1], 0.5)
    near = rotation_from_axis_angle([0, 0, 1], 0.5001)
    far = rotation_from_axis_angle([1, 0, 0], 2.0)
    assert len(deduplicate_rotations([base, near, far])) == 2

    many = [rotation_from_axis_angle([0, 0, 1], 0.3 * k) for k in range(20)]
    assert len(deduplicate_rotations(many, limit=5)) == 5


def test_kabsch_seed_solves_small_rotation(rng):
    points = normalize_point_set(rng.normal(size=(6, 3))).coordinates
    rotation = rotation_from_axis_angle([0.2, 1.0, -0.4], 0.05)
    reference = points @ rotation[:3, :3].T

    seeds = generate_seed_rotations(
        points, reference, LinearSumAssignmentSolver(), KabschAligner()
    )
    assert np.allclose(seeds[0], rotation, atol=1e-9)


def test_extra_seeds_are_appended():
    points = normalize_point_set(np.eye(3)).coordinates
    extra = [np.eye(4)]
    seeds = generate_seed_rotations(
        points, points, LinearSumAssignmentSolver(), KabschAligner(), extra=extra
    )
    assert np.allclose(seeds[-1], np.eye(4))
