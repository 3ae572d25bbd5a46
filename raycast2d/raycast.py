# Ray casting over rect and segment obstacles.
#
# cast_ray marches the ray end one unit at a time and stops at the first
# contact; cast_ray_exact intersects the full-length probe once and keeps the
# nearest contact. Both return a fresh ((ox, oy), (ex, ey)) segment.
#
from math import atan2, cos, sin, degrees, radians

from raycast2d.geometry import (
    bounding_box,
    distance,
    rect_edges,
    rects_overlap,
    seg_intersect,
    seg_rect_intersect,
)

STEP = 1.0  # march step, in scene units


def angle_between(a, b):
    """Angle in degrees of the direction from ``b`` to ``a``.

    Aim from ``origin`` at ``target`` with ``angle_between(target, origin)``.
    """
    return degrees(atan2(a[1] - b[1], a[0] - b[0]))


def direction(angle_deg):
    rad = radians(angle_deg)
    return (cos(rad), sin(rad))


def _first_hit(ray, rects, segments):
    # rects first, then segments, each in list order
    for rect in rects:
        hit, pt = seg_rect_intersect(ray, rect)
        if hit:
            return pt
    for seg in segments:
        hit, pt = seg_intersect(ray, seg)
        if hit:
            return pt
    return None


def cast_ray(rects, segments, origin, angle_deg, max_length):
    start = (origin[0], origin[1])
    end = start
    if not max_length > 0:
        return (start, end)

    dx, dy = direction(angle_deg)
    travelled = 0.0
    hit_pt = None
    # stops once the ray is past the limit, up to one step over
    while travelled <= max_length and hit_pt is None:
        end = (end[0] + dx * STEP, end[1] + dy * STEP)
        travelled = distance(start, end)
        hit_pt = _first_hit((start, end), rects, segments)
        if hit_pt is not None:
            end = hit_pt
    return (start, end)


def cast_ray_exact(rects, segments, origin, angle_deg, max_length):
    start = (origin[0], origin[1])
    if not max_length > 0:
        return (start, start)

    dx, dy = direction(angle_deg)
    probe = (start, (start[0] + dx * max_length, start[1] + dy * max_length))
    probe_box = bounding_box(probe)

    best_d = None
    best_pt = probe[1]
    candidates = []
    for rect in rects:
        if rects_overlap(probe_box, rect):
            candidates.extend(rect_edges(rect))
    candidates.extend(segments)
    for seg in candidates:
        hit, pt = seg_intersect(probe, seg)
        if not hit:
            continue
        d = distance(start, pt)
        # strict: equal distances keep the earlier obstacle
        if best_d is None or d < best_d:
            best_d = d
            best_pt = pt
    return (start, best_pt)


CASTERS = {
    "march": cast_ray,
    "exact": cast_ray_exact,
}
