"""Binary scene serialisation: little-endian 32-bit ints and floats."""

from __future__ import annotations

import struct
from collections.abc import Sequence
from typing import Any, BinaryIO, Protocol, runtime_checkable

import numpy as np

_INT = struct.Struct("<i")
_FLOAT = struct.Struct("<f")


@runtime_checkable
class Saveable(Protocol):
    """Something that can be written to and read back from a scene stream."""

    def load(self, reader: "SceneDataReader") -> None: ...

    def save(self, writer: "SceneDataWriter") -> None: ...


class SceneDataReader:
    """Reads scene values from a binary stream."""

    def __init__(self, stream: BinaryIO, image_storage: Any = None) -> None:
        self.stream = stream
        self.image_storage = image_storage

    def _read_exact(self, size: int) -> bytes:
        data = self.stream.read(size)
        if len(data) != size:
            raise EOFError(f"expected {size} bytes, got {len(data)}")
        return data

    def read_int(self) -> int:
        return _INT.unpack(self._read_exact(_INT.size))[0]

    def read_float(self) -> float:
        return _FLOAT.unpack(self._read_exact(_FLOAT.size))[0]

    def read_vec3(self) -> np.ndarray:
        return np.array([self.read_float() for _ in range(3)])

    def read_mat4(self) -> np.ndarray:
        """Read a 4x4 matrix stored column by column."""
        values = [self.read_float() for _ in range(16)]
        return np.array(values).reshape(4, 4).T

    def read_bytes(self) -> bytes:
        size = self.read_int()
        if size < 0:
            raise ValueError(f"negative byte array size {size}")
        return self._read_exact(size)


class SceneDataWriter:
    """Writes scene values to a binary stream."""

    def __init__(self, stream: BinaryIO) -> None:
        self.stream = stream

    def write_int(self, value: int) -> None:
        try:
            self.stream.write(_INT.pack(int(value)))
        except struct.error as exc:
            raise ValueError(f"{value} does not fit in 32 bits") from exc

    def write_float(self, value: float) -> None:
        self.stream.write(_FLOAT.pack(float(value)))

    def write_vec3(self, value: Sequence[float]) -> None:
        x, y, z = value
        for component in (x, y, z):
            self.write_float(component)

    def write_mat4(self, value: Any) -> None:
        """Write a 4x4 matrix column by column."""
        matrix = np.asarray(value, dtype=float)
        if matrix.shape != (4, 4):
            raise ValueError(f"expected a 4x4 matrix, got shape {matrix.shape}")
        for component in matrix.T.flat:
            self.write_float(component)

    def write_bytes(self, data: bytes) -> None:
        self.write_int(len(data))
        self.stream.write(bytes(data))