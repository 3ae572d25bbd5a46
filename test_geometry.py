import pytest

from raycast2d.geometry import (
    bounding_box,
    rect_corners,
    rect_edges,
    rects_overlap,
    seg_intersect,
    seg_rect_intersect,
)


def test_bounding_box_ignores_endpoint_order():
    assert bounding_box(((10, 2), (4, 8))) == (4, 2, 6, 6)
    assert bounding_box(((4, 8), (10, 2))) == (4, 2, 6, 6)


def test_rect_corners_clockwise_from_top_left():
    assert rect_corners((10, 20, 5, 3)) == ((10, 20), (15, 20), (15, 23), (10, 23))


def test_rect_edges_close_the_boundary():
    edges = rect_edges((0, 0, 4, 2))
    assert edges == (
        ((0, 0), (4, 0)),
        ((4, 0), (4, 2)),
        ((4, 2), (0, 2)),
        ((0, 2), (0, 0)),
    )
    for (_, end), (start, _) in zip(edges, edges[1:] + edges[:1]):
        assert end == start


def test_rects_overlap_counts_touching_and_flat_boxes():
    assert rects_overlap((0, 0, 10, 10), (10, 10, 5, 5))
    assert rects_overlap((0, 0, 10, 0), (5, -5, 5, 10))
    assert not rects_overlap((0, 0, 10, 10), (10.5, 0, 5, 5))


def test_crossing_segments_hit():
    hit, pt = seg_intersect(((0, 0), (10, 0)), ((5, -5), (5, 5)))
    assert hit
    assert pt == pytest.approx((5, 0))


def test_intersection_is_symmetric_in_hit():
    a = ((0, 0), (10, 10))
    b = ((0, 10), (10, 0))
    hit_ab, pt_ab = seg_intersect(a, b)
    hit_ba, pt_ba = seg_intersect(b, a)
    assert hit_ab and hit_ba
    assert pt_ab == pytest.approx((5, 5))
    assert pt_ba == pytest.approx((5, 5))


def test_disjoint_segments_miss():
    assert seg_intersect(((0, 0), (4, 0)), ((5, -5), (5, 5))) == (False, None)


@pytest.mark.parametrize("a, b", [
    (((0, 0), (10, 10)), ((0, 5), (10, 15))),
    (((0, 0), (10, 0)), ((2, 0), (8, 0))),
    (((0, 0), (0, 10)), ((3, 20), (3, -20))),
    (((1, 2), (4, 8)), ((2, 0), (4, 4))),
])
def test_parallel_segments_never_intersect(a, b):
    assert seg_intersect(a, b) == (False, None)


def test_small_denominator_counts_as_parallel():
    # den = 0.4 rounds to zero even though the segments cross
    assert seg_intersect(((0, 0), (0.2, 0)), ((0.1, -1), (0.1, 1))) == (False, None)


def test_half_denominator_rounds_away_from_zero():
    hit, pt = seg_intersect(((0, 0), (0.25, 0)), ((0.1, -1), (0.1, 1)))
    assert hit
    assert pt == pytest.approx((0.1, 0))


def test_degenerate_segment_never_hits():
    assert seg_intersect(((3, 3), (3, 3)), ((0, 0), (6, 6))) == (False, None)


def test_segment_rect_miss_when_boxes_do_not_overlap():
    assert seg_rect_intersect(((0, 0), (5, 5)), (10, 10, 10, 10)) == (False, None)


def test_segment_rect_box_overlap_without_crossing():
    seg = ((5, 18), (12, 25))
    rect = (10, 10, 10, 10)
    assert rects_overlap(bounding_box(seg), rect)
    assert seg_rect_intersect(seg, rect) == (False, None)


def test_segment_through_rect_reports_first_clockwise_edge():
    # enters on the left edge, leaves on the right; right is tested first
    hit, pt = seg_rect_intersect(((0, 0), (20, 0)), (10, -5, 5, 10))
    assert hit
    assert pt == pytest.approx((15, 0))


def test_vertical_segment_through_rect_reports_top_edge():
    hit, pt = seg_rect_intersect(((12, -20), (12, 20)), (10, -5, 5, 10))
    assert hit
    assert pt == pytest.approx((12, -5))


def test_segment_ending_inside_rect_hits_entry_edge():
    hit, pt = seg_rect_intersect(((0, 0), (12, 0)), (10, -5, 5, 10))
    assert hit
    assert pt == pytest.approx((10, 0))


def test_zero_extent_rect_does_not_crash():
    assert seg_rect_intersect(((0, 0), (10, 10)), (5, 5, 0, 0)) == (False, None)
