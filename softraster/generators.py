"""Constructing meshes and reading them back from scene files."""

from __future__ import annotations

from softraster.mesh import Mesh, MeshGenerator, MeshType
from softraster.scene_data import SceneDataReader
from softraster.sphere import SphereMeshGenerator

_GENERATORS: dict[MeshType, type[MeshGenerator]] = {
    MeshType.SPHERE: SphereMeshGenerator,
}


def load_generator(reader: SceneDataReader) -> MeshGenerator:
    """Read a generator's type and parameters."""
    mesh_type = MeshType(reader.read_int())
    try:
        generator_class = _GENERATORS[mesh_type]
    except KeyError:
        raise ValueError(f"no generator available for {mesh_type.name.lower()} meshes") from None
    generator = generator_class()
    generator.load(reader)
    return generator


def load_mesh(reader: SceneDataReader) -> Mesh:
    """Read a generator and build the mesh it describes."""
    return load_generator(reader).build_mesh()


def sphere_mesh(radius: float, vertical_lines: int, horizontal_lines: int) -> Mesh:
    return SphereMeshGenerator(radius, vertical_lines, horizontal_lines).build_mesh()