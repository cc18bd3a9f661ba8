"""Object placement: position, Euler angles and scale."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from softraster.scene_data import SceneDataReader, SceneDataWriter
from softraster.transformations import (
    scaling_matrix,
    translation_matrix,
    x_rotation_matrix,
    y_rotation_matrix,
    z_rotation_matrix,
)


def _vec3(value: Sequence[float]) -> np.ndarray:
    vector = np.array(value, dtype=float)
    if vector.shape != (3,):
        raise ValueError(f"expected three components, got shape {vector.shape}")
    return vector


class Transform:
    """Translation, rotation (Y, then X, then Z) and scale of a scene object."""

    def __init__(
        self,
        position: Sequence[float] = (0.0, 0.0, 0.0),
        euler_angles: Sequence[float] = (0.0, 0.0, 0.0),
        scale: Sequence[float] = (1.0, 1.0, 1.0),
    ) -> None:
        self.position = position
        self.euler_angles = euler_angles
        self.scale = scale

    @property
    def position(self) -> np.ndarray:
        return self._position.copy()

    @position.setter
    def position(self, value: Sequence[float]) -> None:
        self._position = _vec3(value)
        self._translation = translation_matrix(self._position)

    @property
    def euler_angles(self) -> np.ndarray:
        return self._euler_angles.copy()

    @euler_angles.setter
    def euler_angles(self, value: Sequence[float]) -> None:
        self._euler_angles = _vec3(value)
        x, y, z = self._euler_angles
        self._rotation_x = x_rotation_matrix(x)
        self._rotation_y = y_rotation_matrix(y)
        self._rotation_z = z_rotation_matrix(z)

    @property
    def scale(self) -> np.ndarray:
        return self._scale.copy()

    @scale.setter
    def scale(self, value: Sequence[float]) -> None:
        self._scale = _vec3(value)
        self._scaling = scaling_matrix(self._scale)

    def world_matrix(self) -> np.ndarray:
        """Return the model-to-world matrix."""
        return (
            self._translation
            @ self._rotation_y
            @ self._rotation_x
            @ self._rotation_z
            @ self._scaling
        )

    def load(self, reader: SceneDataReader) -> None:
        self.position = reader.read_vec3()
        self.euler_angles = reader.read_vec3()
        self.scale = reader.read_vec3()

    def save(self, writer: SceneDataWriter) -> None:
        writer.write_vec3(self._position)
        writer.write_vec3(self._euler_angles)
        writer.write_vec3(self._scale)