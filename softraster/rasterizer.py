"""Scan-line decomposition of screen-space triangles and back-face tests."""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class ScanLineSpan:
    """One horizontal run of pixels to shade, with depth at both ends."""

    y: int
    start_x: int
    end_x: int
    start_depth: float
    end_depth: float

    def depth_at(self, x: int) -> float:
        """Depth linearly interpolated along the span."""
        width = self.end_x - self.start_x
        q = (x - self.start_x) / width if width else 0.0
        return self.start_depth * (1 - q) + self.end_depth * q


def _point(value: Sequence[float]) -> np.ndarray:
    point = np.asarray(value, dtype=float)
    if point.ndim != 1 or point.shape[0] < 3:
        raise ValueError(f"expected at least three components, got shape {point.shape}")
    return point


def _slope(dx: float, dy: float) -> float:
    return dx / dy if dy != 0.0 else 0.0


def _horizontal_base(
    base_left: np.ndarray, base_right: np.ndarray, peak: np.ndarray
) -> Iterator[ScanLineSpan]:
    base_y = int(base_left[1])
    peak_y = int(peak[1])
    y_diff = peak_y - base_y
    y_inc = (y_diff > 0) - (y_diff < 0)
    if y_inc == 0:
        return
    depth1, depth2, depth3 = float(base_left[2]), float(base_right[2]), float(peak[2])
    min_x = float(base_left[0])
    max_x = float(base_right[0])
    step1 = _slope(peak[0] - base_left[0], peak[1] - base_left[1]) * y_inc
    step2 = _slope(peak[0] - base_right[0], peak[1] - base_right[1]) * y_inc
    for y in range(base_y, peak_y + y_inc, y_inc):
        q = (y - base_y) / y_diff
        if not math.isfinite(min_x) or not math.isfinite(max_x):
            return
        if int(max_x - min_x) == 0:
            return
        yield ScanLineSpan(
            y=y,
            start_x=int(min_x),
            end_x=int(max_x),
            start_depth=depth1 * (1 - q) + depth3 * q,
            end_depth=depth2 * (1 - q) + depth3 * q,
        )
        min_x += step1
        max_x += step2


def horizontal_base_spans(
    base_left: Sequence[float],
    base_right: Sequence[float],
    peak: Sequence[float],
) -> list[ScanLineSpan]:
    """Spans of a triangle with a horizontal base, walked from the base to the peak.

    Stops at the first row whose width truncates to zero.
    """
    return list(_horizontal_base(_point(base_left), _point(base_right), _point(peak)))


def scan_triangle(
    v1: Sequence[float], v2: Sequence[float], v3: Sequence[float]
) -> list[ScanLineSpan]:
    """Split a screen-space triangle into spans, via two horizontal-base halves."""
    low, middle, high = sorted((_point(v1), _point(v2), _point(v3)), key=lambda p: p[1])
    if abs(high[1] - low[1]) < 1.0:
        return []
    q = (middle[1] - low[1]) / (high[1] - low[1])
    size = min(len(low), len(high))
    split = low[:size] * (1 - q) + high[:size] * q
    if middle[0] < split[0]:
        left, right = middle, split
    else:
        left, right = split, middle
    return horizontal_base_spans(left, right, high) + horizontal_base_spans(left, right, low)


def _projected(vertex: Sequence[float]) -> np.ndarray:
    point = _point(vertex)
    if point.shape[0] >= 4:
        with np.errstate(divide="ignore", invalid="ignore"):
            return point[:3] / point[3]
    return point[:3]


def is_front_facing(
    v1: Sequence[float], v2: Sequence[float], v3: Sequence[float]
) -> bool:
    """Whether a clip-space triangle faces the viewer (counter-clockwise on screen)."""
    a, b, c = _projected(v1), _projected(v2), _projected(v3)
    normal = np.cross(b - a, c - a)
    length = float(np.linalg.norm(normal))
    if not length > 0.0:
        return False
    return float(np.dot((0.0, 0.0, -1.0), normal / length)) < 0.0