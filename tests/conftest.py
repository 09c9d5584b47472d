import numpy as np
import pytest

from qshape.core.utils.vector_math import rotation_from_axis_angle


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: long-running intensive-mode checks")


@pytest.fixture
def rng():
    """Seeded generator so random rotations are reproducible."""
    return np.random.default_rng(12345)


@pytest.fixture
def octahedron():
    """Six ligands at distance 2 along the coordinate axes."""
    return 2.0 * np.array(
        [
            [1, 0, 0],
            [-1, 0, 0],
            [0, 1, 0],
            [0, -1, 0],
            [0, 0, 1],
            [0, 0, -1],
        ],
        dtype=float,
    )


@pytest.fixture
def random_rotation(rng):
    """3x3 proper rotation about a random axis."""
    axis = rng.normal(size=3)
    angle = rng.uniform(0, 2 * np.pi)
    return rotation_from_axis_angle(axis, angle)[:3, :3]
