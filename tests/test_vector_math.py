import numpy as np
import pytest

from qshape.core.utils import vector_math as vm


def test_basic_vector_operations():
    a = [1.0, 2.0, 3.0]
    b = [4.0, 5.0, 6.0]
    assert np.allclose(vm.add(a, b), [5, 7, 9])
    assert np.allclose(vm.subtract(b, a), [3, 3, 3])
    assert np.allclose(vm.scale(a, 2), [2, 4, 6])
    assert vm.dot(a, b) == pytest.approx(32.0)
    assert np.allclose(vm.cross([1, 0, 0], [0, 1, 0]), [0, 0, 1])
    assert vm.length([3, 4, 0]) == pytest.approx(5.0)
    assert vm.distance(a, b) == pytest.approx(np.sqrt(27))


def test_normalize_zero_vector_stays_zero():
    assert np.allclose(vm.normalize([0, 0, 0]), [0, 0, 0])
    assert vm.length(vm.normalize([0, 3, 4])) == pytest.approx(1.0)


def test_axis_angle_rotation_quarter_turn():
    rotation = vm.rotation_from_axis_angle([0, 0, 1], np.pi / 2)
    assert rotation.shape == (4, 4)
    rotated = vm.apply_matrix4(rotation, np.array([[1.0, 0.0, 0.0]]))
    assert np.allclose(rotated, [[0, 1, 0]], atol=1e-12)


def test_euler_rotation_is_product_of_axis_rotations():
    x, y, z = 0.3, -1.1, 2.0
    expected = vm.compose(
        vm.rotation_from_axis_angle([1, 0, 0], x),
        vm.rotation_from_axis_angle([0, 1, 0], y),
        vm.rotation_from_axis_angle([0, 0, 1], z),
    )
    assert np.allclose(vm.rotation_from_euler(x, y, z), expected)


@pytest.mark.parametrize("angles", [(0, 0, 0), (np.pi, 0, 0), (0.4, 1.2, -2.5)])
def test_euler_rotation_is_proper(angles):
    r = vm.rotation_part(vm.rotation_from_euler(*angles))
    assert np.allclose(r @ r.T, np.eye(3), atol=1e-12)
    assert np.linalg.det(r) == pytest.approx(1.0)


def test_compose_of_nothing_is_identity():
    assert np.allclose(vm.compose(), vm.identity_matrix4())


def test_random_unit_vector_is_reproducible():
    a = vm.random_unit_vector(np.random.default_rng(7))
    b = vm.random_unit_vector(np.random.default_rng(7))
    assert np.allclose(a, b)
    assert vm.length(a) == pytest.approx(1.0)


def test_flatten_is_row_major():
    matrix = np.arange(16, dtype=float).reshape(4, 4)
    assert vm.flatten_matrix4(matrix) == list(range(16))
    assert np.allclose(vm.unflatten_matrix4(list(range(16))), matrix)


def test_unflatten_accepts_3x3_and_rejects_other_sizes():
    r = vm.unflatten_matrix4(np.eye(3))
    assert np.allclose(r, np.eye(4))
    with pytest.raises(ValueError):
        vm.unflatten_matrix4([1.0, 2.0, 3.0])
