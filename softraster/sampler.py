"""Colour samplers that materials read surface values from."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from enum import IntEnum

import numpy as np

from softraster.scene_data import SceneDataReader, SceneDataWriter


class SamplerType(IntEnum):
    """Kind of sampler, as stored in scene files."""

    STATIC_COLOR = 0
    IMAGE = 1


class Sampler(ABC):
    """Maps texture coordinates to a colour or direction."""

    @property
    @abstractmethod
    def sampler_type(self) -> SamplerType:
        """The type written to scene files."""

    @abstractmethod
    def sample(self, uv: Sequence[float]) -> np.ndarray:
        """Return the value at texture coordinates ``uv``."""

    @abstractmethod
    def copy(self) -> "Sampler":
        """Return an independent copy of this sampler."""

    @abstractmethod
    def load(self, reader: SceneDataReader) -> None:
        """Read this sampler's data, the type having been read already."""

    def save(self, writer: SceneDataWriter) -> None:
        writer.write_int(int(self.sampler_type))


class StaticColorSampler(Sampler):
    """Returns the same colour everywhere."""

    def __init__(self, color: Sequence[float] = (0.0, 0.0, 0.0)) -> None:
        self.color = color

    @property
    def color(self) -> np.ndarray:
        return self._color.copy()

    @color.setter
    def color(self, value: Sequence[float]) -> None:
        color = np.array(value, dtype=float)
        if color.shape != (3,):
            raise ValueError(f"expected three colour components, got shape {color.shape}")
        self._color = color

    @property
    def sampler_type(self) -> SamplerType:
        return SamplerType.STATIC_COLOR

    def sample(self, uv: Sequence[float]) -> np.ndarray:
        return self._color.copy()

    def copy(self) -> "StaticColorSampler":
        return StaticColorSampler(self._color)

    def load(self, reader: SceneDataReader) -> None:
        self.color = reader.read_vec3()

    def save(self, writer: SceneDataWriter) -> None:
        super().save(writer)
        writer.write_vec3(self._color)


def load_sampler(reader: SceneDataReader) -> Sampler:
    """Read a sampler's type and data."""
    raw = reader.read_int()
    try:
        kind = SamplerType(raw)
    except ValueError:
        raise ValueError(f"unknown sampler type {raw}") from None
    if kind is SamplerType.STATIC_COLOR:
        sampler = StaticColorSampler()
        sampler.load(reader)
        return sampler
    raise ValueError(f"no sampler available for {kind.name.lower()} data")