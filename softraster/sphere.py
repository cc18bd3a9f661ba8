"""UV sphere mesh generator."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from softraster.mesh import MeshGenerator, MeshType, _Geometry

_PI = 3.1415
_SOUTH_POLE = 0
_NORTH_POLE = 1
_PARAMETER_NAMES = ("radius", "vertical lines in net", "horizontal lines in net")


@dataclass(frozen=True)
class _Net:
    horizontal: int
    vertical: int

    def ring_index(self, line: int, column: int) -> int:
        return line * self.vertical + column % self.vertical

    def pole_vertex(self, pole: int) -> int:
        return self.horizontal * self.vertical + pole

    def pole_normal(self, pole: int, touching: int) -> int:
        return self.horizontal * self.vertical + pole * self.vertical + touching

    def ring_triangle(self, line: int, column: int, in_pair: int) -> int:
        return line * self.vertical + column + self.horizontal * self.vertical * in_pair

    def pole_triangle(self, pole: int, touching: int) -> int:
        return (
            (self.horizontal - 1) * self.vertical
            + self.horizontal * self.vertical * pole
            + touching
        )

    def ring_uv(self, line: int, column: int) -> int:
        return line * (self.vertical + 1) + column

    def pole_uv(self, pole: int, touching: int) -> int:
        return self.horizontal * (self.vertical + 1) + self.vertical * pole + touching


class SphereMeshGenerator(MeshGenerator):
    """Sphere centred at the origin, split into rings between two poles."""

    def __init__(
        self,
        radius: float | None = None,
        vertical_lines: int | None = None,
        horizontal_lines: int | None = None,
    ) -> None:
        super().__init__(_PARAMETER_NAMES, "sphere")
        given = (radius, vertical_lines, horizontal_lines)
        if all(value is not None for value in given):
            self.set_parameters(given)
        elif any(value is not None for value in given):
            raise ValueError("give all sphere parameters or none")

    @property
    def mesh_type(self) -> MeshType:
        return MeshType.SPHERE

    def _generate(self) -> _Geometry:
        radius = self.parameters[0]
        horizontal = int(self.parameters[1])
        vertical = int(self.parameters[2])
        if radius <= 0.0:
            raise ValueError("sphere radius should be positive")
        if horizontal <= 0:
            raise ValueError("number of horizontal lines should be positive")
        if vertical <= 2:
            raise ValueError("number of vertical lines should be higher than 2")
        net = _Net(horizontal, vertical)

        ring_count = horizontal * vertical
        vertices = np.zeros((2 + ring_count, 3))
        normals = np.zeros((2 * vertical + ring_count, 3))
        tangents = np.zeros_like(normals)
        uv = np.zeros((ring_count + horizontal + 2 * vertical, 2))
        triangles = np.zeros((2 * ring_count, 3), dtype=np.int64)
        triangles_normals = np.zeros_like(triangles)
        triangles_uv = np.zeros_like(triangles)

        d1 = _PI / (horizontal + 1)
        d2 = 2.0 * _PI / vertical
        for line in range(horizontal):
            alpha = _PI - d1 * (line + 1)
            sin_a, cos_a = math.sin(alpha), math.cos(alpha)
            v_coord = (line + 1) / (horizontal + 1)
            for column in range(vertical):
                beta = d2 * column
                sin_b, cos_b = math.sin(beta), math.cos(beta)
                i = net.ring_index(line, column)
                normals[i] = (sin_a * cos_b, cos_a, -sin_a * sin_b)
                vertices[i] = normals[i] * radius
                tangent = np.array((-sin_a * sin_b, cos_a, -sin_a * cos_b))
                tangents[i] = tangent / np.linalg.norm(tangent)
                uv[net.ring_uv(line, column)] = (column / vertical, v_coord)
            uv[net.ring_uv(line, vertical)] = (1.0, v_coord)

        vertices[net.pole_vertex(_SOUTH_POLE)] = (0.0, -radius, 0.0)
        vertices[net.pole_vertex(_NORTH_POLE)] = (0.0, radius, 0.0)
        for touching in range(vertical):
            alpha = d1 * (touching + 0.5)
            tangent = (math.cos(alpha), 0.0, -math.sin(alpha))
            u_coord = (touching + 0.5) / vertical
            for pole, direction, v_coord in ((_SOUTH_POLE, -1.0, 0.0), (_NORTH_POLE, 1.0, 1.0)):
                i = net.pole_normal(pole, touching)
                normals[i] = (0.0, direction, 0.0)
                tangents[i] = tangent
                uv[net.pole_uv(pole, touching)] = (u_coord, v_coord)

        for line in range(horizontal - 1):
            for column in range(vertical):
                corners = (
                    ((line, column), (line, column + 1), (line + 1, column + 1)),
                    ((line, column), (line + 1, column + 1), (line + 1, column)),
                )
                for in_pair, corner in enumerate(corners):
                    i = net.ring_triangle(line, column, in_pair)
                    triangles[i] = [net.ring_index(*c) for c in corner]
                    triangles_normals[i] = triangles[i]
                    triangles_uv[i] = [net.ring_uv(*c) for c in corner]

        top = horizontal - 1
        for touching in range(vertical):
            i = net.pole_triangle(_SOUTH_POLE, touching)
            ring = ((0, touching + 1), (0, touching))
            triangles[i] = [net.pole_vertex(_SOUTH_POLE)] + [net.ring_index(*c) for c in ring]
            triangles_normals[i] = [net.pole_normal(_SOUTH_POLE, touching)] + [
                net.ring_index(*c) for c in ring
            ]
            triangles_uv[i] = [net.pole_uv(_SOUTH_POLE, touching)] + [
                net.ring_uv(*c) for c in ring
            ]

            i = net.pole_triangle(_NORTH_POLE, touching)
            ring = ((top, touching), (top, touching + 1))
            triangles[i] = [net.pole_vertex(_NORTH_POLE)] + [net.ring_index(*c) for c in ring]
            triangles_normals[i] = [net.pole_normal(_NORTH_POLE, touching)] + [
                net.ring_index(*c) for c in ring
            ]
            triangles_uv[i] = [net.pole_uv(_NORTH_POLE, touching)] + [
                net.ring_uv(*c) for c in ring
            ]

        return _Geometry(
            vertices=vertices,
            normals=normals,
            tangents=tangents,
            triangles=triangles,
            triangles_normals=triangles_normals,
            triangles_uv=triangles_uv,
            uv=uv,
        )