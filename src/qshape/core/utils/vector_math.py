# src/qshape/core/utils/vector_math.py
"""
3D vector and 4x4 homogeneous matrix primitives.

Vectors are length-3 numpy arrays, transforms are 4x4 numpy arrays whose
upper-left 3x3 block holds the rotation. Every function returns a new array.
"""

from typing import Sequence

import numpy as np

ArrayLike3 = Sequence[float]


def add(v1: ArrayLike3, v2: ArrayLike3) -> np.ndarray:
    return np.asarray(v1, dtype=float) + np.asarray(v2, dtype=float)


def subtract(v1: ArrayLike3, v2: ArrayLike3) -> np.ndarray:
    return np.asarray(v1, dtype=float) - np.asarray(v2, dtype=float)


def scale(v: ArrayLike3, scalar: float) -> np.ndarray:
    return np.asarray(v, dtype=float) * scalar


def dot(v1: ArrayLike3, v2: ArrayLike3) -> float:
    return float(np.dot(v1, v2))


def cross(v1: ArrayLike3, v2: ArrayLike3) -> np.ndarray:
    return np.cross(np.asarray(v1, dtype=float), np.asarray(v2, dtype=float))


def length(v: ArrayLike3) -> float:
    return float(np.linalg.norm(v))


def normalize(v: ArrayLike3) -> np.ndarray:
    """Return ``v`` scaled to unit length; the zero vector stays zero."""
    v = np.asarray(v, dtype=float)
    norm = np.linalg.norm(v)
    if norm == 0:
        return np.zeros(3)
    return v / norm


def distance(v1: ArrayLike3, v2: ArrayLike3) -> float:
    return length(subtract(v1, v2))


def identity_matrix4() -> np.ndarray:
    return np.eye(4)


def compose(*matrices: np.ndarray) -> np.ndarray:
    """Multiply transforms left to right (``compose(A, B)`` applies B first)."""
    result = np.eye(4)
    for matrix in matrices:
        result = result @ matrix
    return result


def to_matrix4(rotation: np.ndarray) -> np.ndarray:
    """Embed a 3x3 rotation in a homogeneous 4x4 transform."""
    matrix = np.eye(4)
    matrix[:3, :3] = rotation
    return matrix


def rotation_part(matrix: np.ndarray) -> np.ndarray:
    """Return the 3x3 rotation block of a 4x4 transform."""
    return np.asarray(matrix, dtype=float)[:3, :3]


def rotation_from_axis_angle(axis: ArrayLike3, angle: float) -> np.ndarray:
    """
    Rotation of ``angle`` radians about ``axis`` (Rodrigues' formula).

    Args:
        axis: Rotation axis, normalized internally
        angle: Rotation angle in radians (right-hand rule)

    Returns:
        4x4 homogeneous rotation matrix
    """
    x, y, z = normalize(axis)
    c = np.cos(angle)
    s = np.sin(angle)
    t = 1.0 - c
    rotation = np.array(
        [
            [t * x * x + c, t * x * y - s * z, t * x * z + s * y],
            [t * x * y + s * z, t * y * y + c, t * y * z - s * x],
            [t * x * z - s * y, t * y * z + s * x, t * z * z + c],
        ]
    )
    return to_matrix4(rotation)


def rotation_from_euler(x: float, y: float, z: float) -> np.ndarray:
    """
    Rotation from Euler angles in XYZ order.

    The resulting matrix is ``Rx @ Ry @ Rz``, so a point is rotated about z
    first and about x last.
    """
    cx, sx = np.cos(x), np.sin(x)
    cy, sy = np.cos(y), np.sin(y)
    cz, sz = np.cos(z), np.sin(z)

    rx = np.array([[1.0, 0.0, 0.0], [0.0, cx, -sx], [0.0, sx, cx]])
    ry = np.array([[cy, 0.0, sy], [0.0, 1.0, 0.0], [-sy, 0.0, cy]])
    rz = np.array([[cz, -sz, 0.0], [sz, cz, 0.0], [0.0, 0.0, 1.0]])
    return to_matrix4(rx @ ry @ rz)


def apply_matrix4(matrix: np.ndarray, points: np.ndarray) -> np.ndarray:
    """Transform a single point (3,) or an array of points (N, 3)."""
    points = np.asarray(points, dtype=float)
    matrix = np.asarray(matrix, dtype=float)
    return points @ matrix[:3, :3].T + matrix[:3, 3]


def random_unit_vector(rng: np.random.Generator) -> np.ndarray:
    """Random direction drawn from the unit cube and normalized."""
    while True:
        v = rng.random(3) - 0.5
        norm = np.linalg.norm(v)
        if norm > 1e-12:
            return v / norm


def flatten_matrix4(matrix: np.ndarray) -> list:
    """Serialize a 4x4 transform as 16 floats in row-major order."""
    return [float(value) for value in np.asarray(matrix, dtype=float).reshape(16)]


def unflatten_matrix4(values: Sequence[float]) -> np.ndarray:
    """Inverse of :func:`flatten_matrix4`; also accepts a nested 4x4 or 3x3."""
    array = np.asarray(values, dtype=float)
    if array.shape == (3, 3):
        return to_matrix4(array)
    if array.size != 16:
        raise ValueError(f"Expected 16 matrix elements, got {array.size}")
    return array.reshape(4, 4)
