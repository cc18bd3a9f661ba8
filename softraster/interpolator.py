"""Barycentric interpolation of per-vertex values across a triangle."""

from __future__ import annotations

from typing import Any, Protocol

import numpy as np


class WeightReceiver(Protocol):
    """Anything that takes barycentric weights per render instance."""

    def set_barycentric_weights(self, w1: float, w2: float, w3: float, instance: int) -> None: ...


class TriangleInterpolator:
    """Interpolates three vertex values with weights kept per instance."""

    def __init__(self, instance_count: int) -> None:
        if instance_count < 1:
            raise ValueError("instance count must be positive")
        self.instance_count = instance_count
        self._weights = np.zeros((instance_count, 3))
        self._values: tuple[Any, Any, Any] | None = None

    def init_triangle_values(self, v1: Any, v2: Any, v3: Any) -> None:
        self._values = (np.asarray(v1, dtype=float),
                        np.asarray(v2, dtype=float),
                        np.asarray(v3, dtype=float))

    def _check_instance(self, instance: int) -> None:
        if not 0 <= instance < self.instance_count:
            raise IndexError(f"instance {instance} out of range")

    def set_barycentric_weights(self, w1: float, w2: float, w3: float, instance: int) -> None:
        self._check_instance(instance)
        self._weights[instance] = (w1, w2, w3)

    def value(self, instance: int) -> np.ndarray:
        self._check_instance(instance)
        if self._values is None:
            raise RuntimeError("triangle values have not been set")
        w1, w2, w3 = self._weights[instance]
        v1, v2, v3 = self._values
        return w1 * v1 + w2 * v2 + w3 * v3


class Interpolators:
    """The interpolators used while shading one triangle."""

    def __init__(self, instance_count: int) -> None:
        self.tbn = TriangleInterpolator(instance_count)
        self.world_pos = TriangleInterpolator(instance_count)
        self.uv = TriangleInterpolator(instance_count)

    def __iter__(self):
        return iter((self.world_pos, self.uv, self.tbn))