"""Clipping of polygons in homogeneous clip space against the view volume."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence

import numpy as np

_Distance = Callable[[np.ndarray], float]

_PLANE_DISTANCES: tuple[_Distance, ...] = (
    lambda p: p[3] - p[0],
    lambda p: p[3] + p[0],
    lambda p: p[3] - p[1],
    lambda p: p[3] + p[1],
    lambda p: p[3] - p[2],
    lambda p: p[3] + p[2],
)


def _clip_against(polygon: list[np.ndarray], distance: _Distance) -> list[np.ndarray]:
    if not polygon:
        return []
    result: list[np.ndarray] = []
    for previous, current in zip(polygon, polygon[1:] + polygon[:1]):
        d_prev = distance(previous)
        d_next = distance(current)
        if d_prev >= 0:
            if d_next >= 0:
                result.append(current)
            else:
                q = d_prev / (d_prev - d_next)
                result.append(previous * (1 - q) + current * q)
        elif d_next >= 0:
            q = d_prev / (d_prev - d_next)
            result.append(previous * (1 - q) + current * q)
            result.append(current)
    return result


def clip_polygon(vertices: Iterable[Sequence[float]]) -> list[np.ndarray]:
    """Clip a polygon of homogeneous points to -w <= x, y, z <= w."""
    polygon = [np.asarray(v, dtype=float) for v in vertices]
    for distance in _PLANE_DISTANCES:
        polygon = _clip_against(polygon, distance)
    return polygon


def is_point_visible(point: Sequence[float]) -> bool:
    """Return whether a homogeneous point lies inside the view volume."""
    p = np.asarray(point, dtype=float)
    return all(distance(p) >= 0 for distance in _PLANE_DISTANCES)