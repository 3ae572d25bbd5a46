import os
import pytest

os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
pygame = pytest.importorskip('pygame')

from pygame_raycast import BOX_COLOR, LINE_COLOR, RECT_COLOR, draw_scene
from raycast2d.scene import Scene


def make_scene():
    scene = Scene(rects=[(60, 10, 20, 40)], segments=[((5, 70), (95, 70))],
                  origin=(10, 30), max_length=200, size=(100, 100))
    scene.aim((90, 30))
    return scene


def test_draw_scene_renders_obstacles_and_ray():
    scene = make_scene()
    surface = pygame.Surface((scene.width, scene.height))
    draw_scene(surface, scene)
    assert tuple(surface.get_at((70, 30)))[:3] == RECT_COLOR
    assert tuple(surface.get_at((50, 70)))[:3] == LINE_COLOR
    # ray is horizontal, so its bounding box outline lies on the ray itself
    assert tuple(surface.get_at((30, 30)))[:3] in (LINE_COLOR, BOX_COLOR)
    assert tuple(surface.get_at((30, 50)))[:3] == (0, 0, 0)


def test_ray_stops_at_rect_in_rendered_scene():
    scene = make_scene()
    assert scene.ray[1] == pytest.approx((60, 30))
