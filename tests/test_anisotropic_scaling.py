import numpy as np
import pytest

from qshape.core.utils.anisotropic_scaling import (
    apply_anisotropic_scaling,
    describe_scaling,
    distortion_index,
    optimize_scaling,
    reference_axes,
)
from qshape.core.utils.cancellation import CancellationToken
from qshape.core.domain.exceptions import SearchCancelledError
from qshape.data.reference_geometries import get_geometry


@pytest.mark.parametrize("scales", [(1.0, 1.0, 1.0), (2.0, 2.0, 2.0), (0.5, 0.5, 0.5)])
def test_uniform_scaling_has_no_distortion(scales):
    assert distortion_index(*scales) == pytest.approx(0.0, abs=1e-9)


def test_distortion_grows_with_anisotropy():
    mild = distortion_index(1.1, 1.0, 0.9)
    strong = distortion_index(1.6, 1.0, 0.6)
    assert 0.0 < mild < strong


@pytest.mark.parametrize(
    "scales, expected",
    [
        ((1.0, 1.02, 0.99), "No scaling"),
        ((1.2, 1.2, 1.2), "Uniformly expanded (20%)"),
        ((0.7, 0.7, 0.7), "Uniformly compressed (30%)"),
        ((1.0, 1.0, 1.3), "elongated along Z (+30%)"),
        ((0.8, 1.0, 1.0), "compressed along X (-20%)"),
        ((1.25, 1.0, 0.9), "elongated along X (+25%), compressed along Z (-10%)"),
    ],
)
def test_describe_scaling(scales, expected):
    assert describe_scaling(*scales) == expected


def test_isotropic_reference_keeps_frame_axes():
    octahedron = get_geometry("OC-6").normalized.coordinates
    assert np.allclose(reference_axes(octahedron), np.eye(3))


def test_axes_of_elongated_set_are_orthonormal():
    points = np.array(
        [[0, 0, 2.0], [0, 0, -2.0], [1.0, 0, 0], [-1.0, 0, 0], [0, 0.5, 0], [0, -0.5, 0]]
    )
    axes = reference_axes(points)
    assert np.allclose(axes @ axes.T, np.eye(3))
    assert abs(axes[0, 2]) == pytest.approx(1.0)


def test_scaling_along_frame_axes():
    points = np.array([[1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.0]])
    scaled = apply_anisotropic_scaling(points, np.eye(3), (2.0, 1.0, 0.5))
    assert np.allclose(scaled, np.diag([2.0, 1.0, 0.5]))


def test_optimize_scaling_finds_quadratic_minimum():
    target = np.array([1.3, 0.8, 1.0])

    def measure(scales):
        return float(100.0 * np.sum((np.asarray(scales) - target) ** 2))

    scales, best = optimize_scaling(measure, rng=np.random.default_rng(7))
    assert best < 2.0
    assert best <= measure((1.0, 1.0, 1.0))
    assert np.allclose(scales, target, atol=0.15)


def test_optimize_scaling_stays_in_bounds():
    def measure(scales):
        return float(100.0 - sum(scales))

    scales, _ = optimize_scaling(
        measure, rng=np.random.default_rng(1), min_scale=0.5, max_scale=1.5
    )
    assert all(0.5 <= s <= 1.5 for s in scales)
    assert sum(scales) > 3.0


def test_optimize_scaling_observes_cancellation():
    token = CancellationToken()
    token.cancel()
    with pytest.raises(SearchCancelledError):
        optimize_scaling(
            lambda scales: 50.0,
            rng=np.random.default_rng(0),
            cancellation=token,
            cancel_check_interval=1,
        )
