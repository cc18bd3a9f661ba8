"""Triangle meshes and the parametric generators that build them."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from collections.abc import Sequence
from enum import IntEnum
from typing import Any, NamedTuple

import numpy as np

from softraster.scene_data import SceneDataReader, SceneDataWriter


class MeshType(IntEnum):
    """Kind of generator a mesh was built by, as stored in scene files."""

    CUBE = 0
    SPHERE = 1
    CYLINDER = 2
    CONE = 3


def _rows(values: Any, width: int, dtype: type) -> np.ndarray:
    array = np.array(values, dtype=dtype)
    if array.size == 0:
        return np.empty((0, width), dtype=dtype)
    if array.ndim != 2 or array.shape[1] != width:
        raise ValueError(f"expected rows of {width} components, got shape {array.shape}")
    return array


def _indices(values: Any, limit: int, what: str) -> np.ndarray:
    triangles = _rows(values, 3, np.int64)
    if limit == 0:
        raise ValueError(f"set {what} first")
    if triangles.size and (triangles.min() < 0 or triangles.max() >= limit):
        raise ValueError(f"triangle index outside the {limit} {what}")
    return triangles


class Mesh:
    """Vertex, normal and texture data of an indexed triangle mesh."""

    def __init__(self, generator: "MeshGenerator | None" = None) -> None:
        self.generator = generator
        self.vertices = np.empty((0, 3))
        self.normals = np.empty((0, 3))
        self.tbn = np.empty((0, 3, 3))
        self.triangles = np.empty((0, 3), dtype=np.int64)
        self.triangles_normals = np.empty((0, 3), dtype=np.int64)
        self.triangles_uv = np.empty((0, 3), dtype=np.int64)
        self.uv = np.empty((0, 2))

    def set_vertices(self, vertices: Sequence[Sequence[float]]) -> None:
        self.vertices = _rows(vertices, 3, float)

    def set_normals(self, normals: Sequence[Sequence[float]]) -> None:
        self.normals = _rows(normals, 3, float)

    def set_tangents(self, tangents: Sequence[Sequence[float]]) -> None:
        """Build tangent-binormal-normal matrices (as columns) from the normals."""
        tangents = _rows(tangents, 3, float)
        if len(tangents) > len(self.normals):
            raise ValueError("set normals first")
        normals = self.normals[: len(tangents)]
        binormals = np.cross(normals, tangents) if len(tangents) else np.empty((0, 3))
        with np.errstate(invalid="ignore", divide="ignore"):
            binormals = binormals / np.linalg.norm(binormals, axis=1, keepdims=True)
        self.tbn = np.stack((tangents, binormals, normals), axis=2)

    def set_triangles(self, triangles: Sequence[Sequence[int]]) -> None:
        self.triangles = _indices(triangles, len(self.vertices), "vertices")

    def set_triangles_normals(self, triangles_normals: Sequence[Sequence[int]]) -> None:
        self.triangles_normals = _indices(triangles_normals, len(self.normals), "normals")

    def set_triangles_uv(self, triangles_uv: Sequence[Sequence[int]]) -> None:
        self.triangles_uv = _rows(triangles_uv, 3, np.int64)

    def set_uv(self, uv: Sequence[Sequence[float]]) -> None:
        self.uv = _rows(uv, 2, float)

    def save(self, writer: SceneDataWriter) -> None:
        """Write the generator that rebuilds this mesh."""
        if self.generator is None:
            raise ValueError("mesh has no generator to save")
        self.generator.save(writer)


class _Geometry(NamedTuple):
    vertices: Any
    normals: Any
    tangents: Any
    triangles: Any
    triangles_normals: Any
    triangles_uv: Any
    uv: Any


class MeshGenerator(ABC):
    """Builds a mesh from a list of named numeric parameters."""

    def __init__(
        self,
        parameter_names: Sequence[str],
        name: str,
        parameters: Sequence[float] = (),
    ) -> None:
        self.parameter_names = tuple(parameter_names)
        self.name = name
        self.parameters = [float(p) for p in parameters]

    @property
    @abstractmethod
    def mesh_type(self) -> MeshType:
        """The type written to scene files."""

    @abstractmethod
    def _generate(self) -> _Geometry:
        """Validate the parameters and compute the geometry."""

    def build_mesh(self) -> Mesh:
        if len(self.parameters) != len(self.parameter_names):
            raise ValueError(
                f"{self.name} needs {len(self.parameter_names)} parameters, "
                f"got {len(self.parameters)}"
            )
        mesh = Mesh(self.copy())
        geometry = self._generate()
        mesh.set_vertices(geometry.vertices)
        mesh.set_normals(geometry.normals)
        mesh.set_tangents(geometry.tangents)
        mesh.set_triangles(geometry.triangles)
        mesh.set_triangles_normals(geometry.triangles_normals)
        mesh.set_triangles_uv(geometry.triangles_uv)
        mesh.set_uv(geometry.uv)
        return mesh

    def set_parameters(self, parameters: Sequence[float]) -> None:
        self.parameters = [float(p) for p in parameters]

    def copy(self) -> "MeshGenerator":
        clone = copy.copy(self)
        clone.parameters = list(self.parameters)
        return clone

    def load(self, reader: SceneDataReader) -> None:
        self.parameters = [reader.read_float() for _ in self.parameter_names]

    def save(self, writer: SceneDataWriter) -> None:
        writer.write_int(int(self.mesh_type))
        for value in self.parameters:
            writer.write_float(value)