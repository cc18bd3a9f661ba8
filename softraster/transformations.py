"""Homogeneous 4x4 transformation matrices acting on column vectors."""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np


def rotation_matrix(angle: float, axis: Sequence[float]) -> np.ndarray:
    """Return a rotation by ``angle`` radians about ``axis``."""
    x, y, z = (float(c) for c in axis)
    s = math.sin(angle)
    c = math.cos(angle)
    t = 1.0 - c
    return np.array(
        [
            [x * x + (1 - x * x) * c, x * y * t + z * s, x * z * t + y * s, 0.0],
            [x * y * t + z * s, y * y + (1 - y * y) * c, y * z * t - x * s, 0.0],
            [x * z * t - y * s, y * z * t + x * s, z * z + (1 - z * z) * c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def x_rotation_matrix(angle: float) -> np.ndarray:
    """Return a rotation by ``angle`` radians about the X axis."""
    s, c = math.sin(angle), math.cos(angle)
    return np.array(
        [
            [1.0, 0.0, 0.0, 0.0],
            [0.0, c, -s, 0.0],
            [0.0, s, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def y_rotation_matrix(angle: float) -> np.ndarray:
    """Return a rotation by ``angle`` radians about the Y axis."""
    s, c = math.sin(angle), math.cos(angle)
    return np.array(
        [
            [c, 0.0, s, 0.0],
            [0.0, 1.0, 0.0, 0.0],
            [-s, 0.0, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def z_rotation_matrix(angle: float) -> np.ndarray:
    """Return a rotation by ``angle`` radians about the Z axis."""
    s, c = math.sin(angle), math.cos(angle)
    return np.array(
        [
            [c, -s, 0.0, 0.0],
            [s, c, 0.0, 0.0],
            [0.0, 0.0, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def translation_matrix(vector: Sequence[float]) -> np.ndarray:
    """Return a translation by ``vector``."""
    x, y, z = (float(c) for c in vector)
    matrix = np.identity(4)
    matrix[:3, 3] = (x, y, z)
    return matrix


def scaling_matrix(vector: Sequence[float]) -> np.ndarray:
    """Return a non-uniform scaling by ``vector``."""
    x, y, z = (float(c) for c in vector)
    return np.diag([x, y, z, 1.0])