import itertools

import pytest

from softraster.rasterizer import (
    ScanLineSpan,
    horizontal_base_spans,
    is_front_facing,
    scan_triangle,
)

TRIANGLE = ((0.0, 0.0, 0.1), (20.0, 5.0, 0.2), (5.0, 20.0, 0.3))


def test_upward_triangle_rows_are_consecutive_and_narrowing():
    spans = horizontal_base_spans((0.0, 0.0, 0.5), (10.0, 0.0, 0.5), (5.0, 10.0, 0.5))
    assert len(spans) == 10
    ys = [s.y for s in spans]
    assert ys == list(range(ys[0], ys[0] + len(ys)))
    widths = [s.end_x - s.start_x for s in spans]
    assert widths == sorted(widths, reverse=True)
    assert all(s.start_depth == pytest.approx(0.5) for s in spans)
    assert all(s.end_depth == pytest.approx(0.5) for s in spans)


def test_first_span_starts_at_base():
    spans = horizontal_base_spans((2.0, 3.0, 0.25), (12.0, 3.0, 0.75), (7.0, 13.0, 0.5))
    first = spans[0]
    assert first.y == 3
    assert first.start_x == 2
    assert first.end_x == 12
    assert first.start_depth == pytest.approx(0.25)
    assert first.end_depth == pytest.approx(0.75)


def test_downward_peak_walks_down():
    spans = horizontal_base_spans((0.0, 10.0, 0.0), (10.0, 10.0, 0.0), (5.0, 0.0, 0.0))
    ys = [s.y for s in spans]
    assert ys[0] == 10
    assert ys == sorted(ys, reverse=True)


def test_flat_triangle_has_no_spans():
    assert horizontal_base_spans((0.0, 3.2, 0.0), (10.0, 3.2, 0.0), (5.0, 3.7, 0.0)) == []


def test_zero_width_base_has_no_spans():
    assert horizontal_base_spans((4.0, 0.0, 0.0), (4.5, 0.0, 0.0), (4.0, 10.0, 0.0)) == []


def test_depths_stay_between_base_and_peak():
    spans = horizontal_base_spans((0.0, 0.0, 0.2), (30.0, 0.0, 0.2), (15.0, 30.0, 0.8))
    assert spans
    for span in spans:
        assert 0.2 - 1e-9 <= span.start_depth <= 0.8 + 1e-9
        assert 0.2 - 1e-9 <= span.end_depth <= 0.8 + 1e-9


def test_scan_triangle_is_independent_of_vertex_order():
    expected = scan_triangle(*TRIANGLE)
    assert expected
    for order in itertools.permutations(TRIANGLE):
        assert scan_triangle(*order) == expected


def test_scan_triangle_spans_lie_within_bounds():
    spans = scan_triangle(*TRIANGLE)
    assert spans[0].y == 5
    for span in spans:
        assert 0 <= span.y <= 20
        assert span.start_x <= span.end_x
        assert 0 <= span.start_x and span.end_x <= 20


def test_scan_triangle_accepts_homogeneous_vertices():
    with_w = [(*v, 1.0) for v in TRIANGLE]
    assert scan_triangle(*with_w) == scan_triangle(*TRIANGLE)


def test_thin_triangle_is_skipped():
    assert scan_triangle((0.0, 0.0, 0.0), (10.0, 0.5, 0.0), (5.0, 0.2, 0.0)) == []


def test_short_vertex_rejected():
    with pytest.raises(ValueError):
        scan_triangle((0.0, 0.0), (1.0, 1.0, 0.0), (2.0, 5.0, 0.0))


def test_span_depth_at_ends():
    span = ScanLineSpan(y=1, start_x=2, end_x=6, start_depth=0.25, end_depth=0.75)
    assert span.depth_at(2) == pytest.approx(0.25)
    assert span.depth_at(6) == pytest.approx(0.75)


def test_front_facing_counter_clockwise():
    a, b, c = (0.0, 0.0, 0.0, 1.0), (1.0, 0.0, 0.0, 1.0), (0.0, 1.0, 0.0, 1.0)
    assert is_front_facing(a, b, c) is True
    assert is_front_facing(a, c, b) is False


def test_front_facing_ignores_uniform_w():
    a, b, c = (0.0, 0.0, 0.0, 2.0), (2.0, 0.0, 0.0, 2.0), (0.0, 2.0, 0.0, 2.0)
    assert is_front_facing(a, b, c) is True


def test_degenerate_triangle_is_not_front_facing():
    a, b, c = (0.0, 0.0, 0.0, 1.0), (1.0, 1.0, 0.0, 1.0), (2.0, 2.0, 0.0, 1.0)
    assert is_front_facing(a, b, c) is False