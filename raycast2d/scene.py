# Scene model shared by the pygame and kivy front ends.
# Owns the static obstacles, the ray source and the most recent ray.
#
import json, os
from math import isfinite

from raycast2d.geometry import bounding_box
from raycast2d.raycast import CASTERS, angle_between

# --------------------------------- Config ------------------------------------
WINDOW_W, WINDOW_H = 800, 600
MAX_RAY_LENGTH = 500
SCENE_CANDIDATES = ["raycast_scene.json", "scene.json"]
DEFAULT_MODE = "march"

# -------------------------------- Utilities ----------------------------------

def _search_paths(names):
    # search CWD and the project root
    out = []
    root_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    for name in names:
        out.append(os.path.join(os.getcwd(), name))
        out.append(os.path.join(root_dir, name))
    return out

def find_scene_file(names=None):
    for p in _search_paths(names or SCENE_CANDIDATES):
        if os.path.exists(p):
            return p
    return None

def default_scene_data():
    return {
        "window": {"w": WINDOW_W, "h": WINDOW_H},
        "origin": [WINDOW_W / 2, WINDOW_H / 2],
        "max_length": MAX_RAY_LENGTH,
        "rects": [[600, 100, 100, 50], [100, 400, 100, 100]],
        "segments": [[[30, 30], [30, 400]]],
    }

def _number(v, what):
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        raise ValueError("%s must be a number, got %r" % (what, v))
    if not isfinite(v):
        raise ValueError("%s must be finite, got %r" % (what, v))
    return float(v)

def _size(v, what):
    v = _number(v, what)
    if v <= 0 or not v.is_integer():
        raise ValueError("%s must be a positive whole number, got %r" % (what, v))
    return int(v)

def _point(p, what):
    if not isinstance(p, (list, tuple)) or len(p) != 2:
        raise ValueError("%s must be an [x, y] pair, got %r" % (what, p))
    return (_number(p[0], what + ".x"), _number(p[1], what + ".y"))

def _rect(r, what):
    if not isinstance(r, (list, tuple)) or len(r) != 4:
        raise ValueError("%s must be [left, top, w, h], got %r" % (what, r))
    rx, ry, rw, rh = (_number(v, what) for v in r)
    if rw < 0 or rh < 0:
        raise ValueError("%s has a negative extent: %r" % (what, r))
    return (rx, ry, rw, rh)

def _segment(s, what):
    if not isinstance(s, (list, tuple)) or len(s) != 2:
        raise ValueError("%s must be [[x1, y1], [x2, y2]], got %r" % (what, s))
    return (_point(s[0], what + "[0]"), _point(s[1], what + "[1]"))

# ------------------------------- Scene Model ---------------------------------

class Scene:
    def __init__(self, rects=(), segments=(), origin=None, max_length=MAX_RAY_LENGTH,
                 size=(WINDOW_W, WINDOW_H), mode=DEFAULT_MODE):
        if mode not in CASTERS:
            raise ValueError("unknown caster mode %r" % (mode,))
        self.width, self.height = size
        self.rects = [tuple(r) for r in rects]
        self.segments = [(tuple(a), tuple(b)) for a, b in segments]
        if origin is None:
            origin = (self.width / 2, self.height / 2)
        self.origin = (origin[0], origin[1])
        self.max_length = max_length
        self.mode = mode
        self.target = None
        self.ray = (self.origin, self.origin)
        self.ray_box = bounding_box(self.ray)

    def cast(self, angle_deg):
        caster = CASTERS[self.mode]
        self.ray = caster(self.rects, self.segments, self.origin, angle_deg, self.max_length)
        self.ray_box = bounding_box(self.ray)
        return self.ray

    def aim(self, target):
        """Point the ray at ``target`` and recompute it."""
        self.target = (target[0], target[1])
        return self.cast(angle_between(self.target, self.origin))

    def recast(self):
        if self.target is None:
            return self.ray
        return self.aim(self.target)

    def move_origin(self, point):
        self.origin = (point[0], point[1])
        if self.target is None:
            self.ray = (self.origin, self.origin)
            self.ray_box = bounding_box(self.ray)
            return self.ray
        return self.recast()

    def toggle_mode(self):
        modes = list(CASTERS)
        self.mode = modes[(modes.index(self.mode) + 1) % len(modes)]
        self.recast()
        return self.mode

    def to_dict(self):
        return {
            "window": {"w": self.width, "h": self.height},
            "origin": list(self.origin),
            "max_length": self.max_length,
            "mode": self.mode,
            "rects": [list(r) for r in self.rects],
            "segments": [[list(a), list(b)] for a, b in self.segments],
        }

# ---------------------------------- IO ---------------------------------------

def parse_scene(data):
    if not isinstance(data, dict):
        raise ValueError("scene must be a JSON object, got %r" % (type(data).__name__,))
    window = data.get("window", {})
    if not isinstance(window, dict):
        raise ValueError("window must be an object, got %r" % (window,))
    w = _size(window.get("w", WINDOW_W), "window.w")
    h = _size(window.get("h", WINDOW_H), "window.h")
    rects = [_rect(r, "rects[%d]" % i) for i, r in enumerate(data.get("rects", []))]
    segments = [_segment(s, "segments[%d]" % i) for i, s in enumerate(data.get("segments", []))]
    origin = data.get("origin")
    if origin is not None:
        origin = _point(origin, "origin")
    max_length = _number(data.get("max_length", MAX_RAY_LENGTH), "max_length")
    mode = data.get("mode", DEFAULT_MODE)
    if mode not in CASTERS:
        raise ValueError("unknown caster mode %r" % (mode,))
    return Scene(rects, segments, origin=origin, max_length=max_length,
                 size=(w, h), mode=mode)

def load_scene(path=None):
    if path is None:
        path = find_scene_file()
    if path is None:
        print("No scene file found; using built-in default. (Looked for: %s)" % SCENE_CANDIDATES)
        return parse_scene(default_scene_data())
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        scene = parse_scene(data)
    except (OSError, ValueError) as e:
        print("Failed to load scene from %s: %r" % (path, e))
        return parse_scene(default_scene_data())
    print("Loaded scene:", path)
    return scene

def save_scene(scene, path):
    with open(path, "w", encoding="utf-8") as f:
        json.dump(scene.to_dict(), f, indent=2)
