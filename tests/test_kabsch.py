import numpy as np
import pytest
from Bio.SVDSuperimposer import SVDSuperimposer

from qshape.core.domain.exceptions import InvalidInputError
from qshape.core.domain.implementations.kabsch_aligner import KabschAligner
from qshape.core.domain.implementations.rotation_search_engine import (
    is_proper_rotation,
)


@pytest.fixture
def aligner():
    return KabschAligner()


@pytest.fixture
def centered_points(rng):
    points = rng.normal(size=(8, 3))
    return points - points.mean(axis=0)


def test_recovers_known_rotation(aligner, centered_points, random_rotation):
    reference = centered_points @ random_rotation.T
    rotation = aligner.align(centered_points, reference)

    assert rotation.shape == (4, 4)
    assert np.allclose(rotation[:3, :3], random_rotation, atol=1e-10)
    assert aligner.rmsd(centered_points, reference, rotation) == pytest.approx(0.0, abs=1e-10)


def test_matches_biopython_superimposer(aligner, centered_points, rng):
    reference = centered_points + rng.normal(scale=0.2, size=centered_points.shape)
    reference -= reference.mean(axis=0)

    rotation = aligner.align(centered_points, reference)

    sup = SVDSuperimposer()
    sup.set(reference, centered_points)
    sup.run()
    rot, tran = sup.get_rotran()

    ours = centered_points @ rotation[:3, :3].T
    theirs = centered_points @ rot + tran
    assert np.allclose(ours, theirs, atol=1e-8)
    assert aligner.rmsd(centered_points, reference, rotation) == pytest.approx(
        sup.get_rms(), abs=1e-8
    )


def test_reflection_is_corrected(aligner, centered_points):
    mirror = centered_points * np.array([1.0, 1.0, -1.0])
    rotation = aligner.align(centered_points, mirror)
    assert is_proper_rotation(rotation)


def test_assignment_reorders_reference(aligner, centered_points, random_rotation):
    perm = np.array([3, 1, 0, 2, 7, 6, 4, 5])
    reference = np.empty_like(centered_points)
    reference[perm] = centered_points @ random_rotation.T

    rotation = aligner.align(centered_points, reference, perm)
    assert np.allclose(rotation[:3, :3], random_rotation, atol=1e-10)


def test_degenerate_input_falls_back_to_identity(aligner):
    zeros = np.zeros((4, 3))
    assert np.allclose(aligner.align(zeros, zeros), np.eye(4))


def test_size_mismatch_raises(aligner):
    with pytest.raises(InvalidInputError):
        aligner.align(np.zeros((3, 3)), np.zeros((4, 3)))
