"""Building blocks of a CPU software rasterizer: matrices, clipping, interpolation, meshes and scene files."""

__version__ = "0.1.0"