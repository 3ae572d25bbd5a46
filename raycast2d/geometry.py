# Geometry helpers for the ray caster.
# Points are (x, y), segments are ((x1, y1), (x2, y2)), rects are (left, top, w, h).

def length(vx, vy):
    return (vx * vx + vy * vy) ** 0.5

def distance(a, b):
    return length(a[0] - b[0], a[1] - b[1])

# --------------------------------- Primitives ---------------------------------

def bounding_box(seg):
    (x1, y1), (x2, y2) = seg
    return (min(x1, x2), min(y1, y2), abs(x1 - x2), abs(y1 - y2))

def rect_corners(rect):
    """Top-left, top-right, bottom-right, bottom-left."""
    rx, ry, rw, rh = rect
    return (
        (rx, ry),
        (rx + rw, ry),
        (rx + rw, ry + rh),
        (rx, ry + rh),
    )

def rect_edges(rect):
    """The four boundary segments, clockwise from the top edge.

    Edge order decides which point is reported when a segment crosses two
    edges of the same rect, so callers must not reorder them.
    """
    corners = rect_corners(rect)
    return tuple((corners[i], corners[(i + 1) % 4]) for i in range(4))

def rects_overlap(a, b):
    # inclusive: touching edges and zero-extent rects still overlap
    ax, ay, aw, ah = a
    bx, by, bw, bh = b
    return ax <= bx + bw and bx <= ax + aw and ay <= by + bh and by <= ay + ah

# -------------------------------- Intersection --------------------------------

def _in_span(value, start, delta):
    # ratio along one axis; a zero delta leaves the ratio undefined
    if delta == 0:
        return False
    r = (value - start) / -delta
    return 0 <= r <= 1

def seg_intersect(a, b):
    """Intersect two segments.

    Returns ``(True, (x, y))`` on a hit and ``(False, None)`` otherwise.
    Segments whose denominator rounds to zero count as parallel. The point is
    accepted when it falls inside either axis span of each segment, which
    keeps horizontal and vertical segments working.
    """
    (x1, y1), (x2, y2) = a
    (x3, y3), (x4, y4) = b
    dx1 = x1 - x2; dy1 = y1 - y2
    dx2 = x3 - x4; dy2 = y3 - y4

    den = dx1 * dy2 - dy1 * dx2
    # round half away from zero: |den| < 0.5 rounds to 0
    if abs(den) < 0.5:
        return (False, None)

    ca = x1 * y2 - y1 * x2
    cb = x3 * y4 - y3 * x4
    ix = (ca * dx2 - cb * dx1) / den
    iy = (ca * dy2 - cb * dy1) / den

    on_a = _in_span(ix, x1, dx1) or _in_span(iy, y1, dy1)
    on_b = _in_span(ix, x3, dx2) or _in_span(iy, y3, dy2)
    if on_a and on_b:
        return (True, (ix, iy))
    return (False, None)

def seg_rect_intersect(seg, rect):
    if not rects_overlap(bounding_box(seg), rect):
        return (False, None)
    for edge in rect_edges(rect):
        hit, pt = seg_intersect(seg, edge)
        if hit:
            return (True, pt)
    return (False, None)
