"""Picking scene objects with a ray."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from typing import Protocol

import numpy as np

from softraster.mesh import Mesh
from softraster.transform import Transform

_EPSILON = 1e-6


class Placed(Protocol):
    """A scene object: a mesh placed in the world by a transform."""

    mesh: Mesh
    transform: Transform


def ray_intersects_triangle(
    origin: Sequence[float],
    direction: Sequence[float],
    v0: Sequence[float],
    v1: Sequence[float],
    v2: Sequence[float],
) -> float | None:
    """Return the ray parameter of the hit on a triangle, or None (Möller–Trumbore)."""
    o = np.asarray(origin, dtype=float)
    d = np.asarray(direction, dtype=float)
    p0 = np.asarray(v0, dtype=float)
    edge1 = np.asarray(v1, dtype=float) - p0
    edge2 = np.asarray(v2, dtype=float) - p0
    h = np.cross(d, edge2)
    a = float(np.dot(edge1, h))
    if -_EPSILON < a < _EPSILON:
        return None
    f = 1.0 / a
    s = o - p0
    u = f * float(np.dot(s, h))
    if u < 0.0 or u > 1.0:
        return None
    q = np.cross(s, edge1)
    v = f * float(np.dot(d, q))
    if v < 0.0 or u + v > 1.0:
        return None
    t = f * float(np.dot(edge2, q))
    return t if t > _EPSILON else None


def _world_vertices(obj: Placed) -> np.ndarray:
    vertices = np.asarray(obj.mesh.vertices, dtype=float)
    homogeneous = np.hstack((vertices, np.ones((len(vertices), 1))))
    world = homogeneous @ obj.transform.world_matrix().T
    return world[:, :3] / world[:, 3:4]


def _first_hit(obj: Placed, origin: np.ndarray, direction: np.ndarray) -> float | None:
    vertices = _world_vertices(obj)
    for a, b, c in obj.mesh.triangles:
        t = ray_intersects_triangle(origin, direction, vertices[a], vertices[b], vertices[c])
        if t is not None:
            return t
    return None


class Raycast:
    """Finds the scene object a ray hits first."""

    def __init__(self, scene_objects: Iterable[Placed]) -> None:
        self.scene_objects = scene_objects

    def cast_ray(self, origin: Sequence[float], direction: Sequence[float]) -> Placed | None:
        """Return the nearest object hit by the ray, or None."""
        o = np.asarray(origin, dtype=float)
        d = np.asarray(direction, dtype=float)
        norm = float(np.linalg.norm(d))
        if norm == 0.0:
            raise ValueError("ray direction must be non-zero")
        d = d / norm
        closest: Placed | None = None
        closest_dist = math.inf
        for obj in self.scene_objects:
            dist = _first_hit(obj, o, d)
            if dist is not None and dist < closest_dist:
                closest, closest_dist = obj, dist
        return closest