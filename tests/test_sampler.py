import io
import struct

import numpy as np
import pytest

from softraster.sampler import (
    Sampler,
    SamplerType,
    StaticColorSampler,
    load_sampler,
)
from softraster.scene_data import SceneDataReader, SceneDataWriter


def _saved(sampler):
    stream = io.BytesIO()
    sampler.save(SceneDataWriter(stream))
    return stream.getvalue()


def test_sample_returns_color_everywhere():
    sampler = StaticColorSampler((0.5, 0.25, 1.0))
    for uv in ((0.0, 0.0), (0.3, 0.9), (1.0, 1.0)):
        assert np.allclose(sampler.sample(uv), (0.5, 0.25, 1.0))


def test_sample_result_does_not_alias_state():
    sampler = StaticColorSampler((0.5, 0.25, 1.0))
    value = sampler.sample((0.0, 0.0))
    value[0] = 9.0
    assert np.allclose(sampler.color, (0.5, 0.25, 1.0))


def test_copy_is_independent():
    sampler = StaticColorSampler((0.5, 0.25, 1.0))
    clone = sampler.copy()
    sampler.color = (1.0, 1.0, 1.0)
    assert np.allclose(clone.color, (0.5, 0.25, 1.0))
    assert clone.sampler_type is SamplerType.STATIC_COLOR


def test_bad_color_shape_rejected():
    with pytest.raises(ValueError):
        StaticColorSampler((1.0, 2.0))


def test_save_starts_with_type_tag():
    data = _saved(StaticColorSampler((0.5, 0.25, 1.0)))
    assert data[:4] == struct.pack("<i", int(SamplerType.STATIC_COLOR))
    assert data[4:] == struct.pack("<3f", 0.5, 0.25, 1.0)


def test_round_trip_through_load_sampler():
    data = _saved(StaticColorSampler((0.5, 0.25, 1.0)))
    loaded = load_sampler(SceneDataReader(io.BytesIO(data)))
    assert isinstance(loaded, StaticColorSampler)
    assert np.allclose(loaded.color, (0.5, 0.25, 1.0))


def test_load_reads_only_color():
    stream = io.BytesIO(struct.pack("<3f", 0.25, 0.5, 0.75))
    sampler = StaticColorSampler()
    sampler.load(SceneDataReader(stream))
    assert np.allclose(sampler.color, (0.25, 0.5, 0.75))


def test_load_sampler_rejects_image_without_storage():
    stream = io.BytesIO(struct.pack("<i", int(SamplerType.IMAGE)))
    with pytest.raises(ValueError):
        load_sampler(SceneDataReader(stream))


def test_load_sampler_rejects_unknown_type():
    stream = io.BytesIO(struct.pack("<i", 7))
    with pytest.raises(ValueError):
        load_sampler(SceneDataReader(stream))


def test_sampler_is_abstract():
    with pytest.raises(TypeError):
        Sampler()