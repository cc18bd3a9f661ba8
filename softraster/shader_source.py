"""Splitting combined shader source files and naming shaders after their files."""

from __future__ import annotations

import re
from enum import IntEnum


class ShaderType(IntEnum):
    """Shader stage, valued as the matching GL enum."""

    FRAGMENT = 0x8B30
    VERTEX = 0x8B31


_TYPE_TOKEN = "#type"
_END_OF_LINE = re.compile(r"[\r\n]")
_NOT_END_OF_LINE = re.compile(r"[^\r\n]")
_TYPE_NAMES = {
    "vertex": ShaderType.VERTEX,
    "fragment": ShaderType.FRAGMENT,
    "pixel": ShaderType.FRAGMENT,
}


def shader_type_from_string(name: str) -> ShaderType:
    """Return the stage named in a ``#type`` line."""
    try:
        return _TYPE_NAMES[name]
    except KeyError:
        raise ValueError(f"unknown shader type {name!r}") from None


def split_shader_sources(source: str) -> dict[ShaderType, str]:
    """Split a source holding several ``#type <stage>`` sections into stages."""
    sources: dict[ShaderType, str] = {}
    pos = source.find(_TYPE_TOKEN)
    while pos != -1:
        end_of_line = _END_OF_LINE.search(source, pos)
        if end_of_line is None:
            raise ValueError("syntax error: shader type line is not terminated")
        eol = end_of_line.start()
        begin = pos + len(_TYPE_TOKEN) + 1
        shader_type = shader_type_from_string(source[begin:eol])
        code_start = _NOT_END_OF_LINE.search(source, eol)
        if code_start is None:
            raise ValueError("syntax error: shader type has no code")
        body = code_start.start()
        pos = source.find(_TYPE_TOKEN, body)
        sources[shader_type] = source[body:] if pos == -1 else source[body:pos]
    return sources


def shader_name(filepath: str) -> str:
    """Return the file name without directory and extension."""
    start = max(filepath.rfind("/"), filepath.rfind("\\")) + 1
    dot = filepath.rfind(".")
    if dot == -1 or dot < start:
        return filepath[start:]
    return filepath[start:dot]