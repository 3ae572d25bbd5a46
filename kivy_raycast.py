# kivy_raycast.py
# Kivy front end for the ray caster.
# - Same scene file as the pygame version (scene.json / raycast_scene.json).
# - Kivy's origin is bottom-left; the scene is top-left, so y is flipped on the way in and out.
# - Hover or drag to aim, tap the top-right box to switch caster, double tap to move the source.
#
import sys
from kivy.app import App
from kivy.clock import Clock
from kivy.graphics import Color, Rectangle, Line
from kivy.uix.widget import Widget
from kivy.uix.label import Label
from raycast2d.scene import load_scene

MODE_BOX_W, MODE_BOX_H = 140, 60

# -------------------------------- Utilities ----------------------------------

def touch_to_scene(x, y, height):
    return (x, height - y)

def rect_to_kivy(rect, height):
    # returns (pos, size) for a kivy Rectangle
    rx, ry, rw, rh = rect
    return (rx, height - (ry + rh)), (rw, rh)

def in_mode_box(x, y, width, height):
    return x > width - MODE_BOX_W and y > height - MODE_BOX_H

# -------------------------------- View ---------------------------------------

class RaycastView(Widget):
    def __init__(self, scene, **kwargs):
        super().__init__(**kwargs)
        self.scene = scene
        Clock.schedule_interval(self.update, 1.0/60.0)

    # Input
    def on_mouse_pos(self, window, pos):
        self.scene.aim(touch_to_scene(pos[0], pos[1], self.height))

    def on_touch_down(self, touch):
        if in_mode_box(touch.x, touch.y, self.width, self.height):
            self.scene.toggle_mode(); return True
        point = touch_to_scene(touch.x, touch.y, self.height)
        if touch.is_double_tap:
            self.scene.move_origin(point); return True
        self.scene.aim(point); return True

    def on_touch_move(self, touch):
        self.scene.aim(touch_to_scene(touch.x, touch.y, self.height)); return True

    def update(self, dt):
        self.draw()

    def draw(self):
        h = self.height
        self.canvas.clear()
        with self.canvas:
            Color(0, 0, 0, 1); Rectangle(pos=(0, 0), size=(self.width, h))
            # Obstacles
            Color(0, 0, 1, 1)
            for rect in self.scene.rects:
                pos, size = rect_to_kivy(rect, h)
                Rectangle(pos=pos, size=size)
            Color(1, 1, 1, 1)
            for a, b in self.scene.segments:
                Line(points=[*touch_to_scene(a[0], a[1], h), *touch_to_scene(b[0], b[1], h)], width=1)
            # Ray and its bounding box
            start, end = self.scene.ray
            Line(points=[*touch_to_scene(start[0], start[1], h), *touch_to_scene(end[0], end[1], h)], width=1)
            pos, size = rect_to_kivy(self.scene.ray_box, h)
            Color(0, 1, 0, 1); Line(rectangle=(pos[0], pos[1], size[0], size[1]), width=1)
            # Mode box
            Color(0.18, 0.18, 0.2, 0.8)
            Rectangle(pos=(self.width - MODE_BOX_W, h - MODE_BOX_H), size=(MODE_BOX_W - 10, MODE_BOX_H - 12))
        self._labels()

    def _labels(self):
        if not hasattr(self, "mode_label"):
            self.mode_label = Label(text="", font_size=16, color=(1,1,1,1), size_hint=(None,None),
                                    size=(MODE_BOX_W - 20, 30))
            self.add_widget(self.mode_label)
        self.mode_label.pos = (self.width - MODE_BOX_W + 5, self.height - MODE_BOX_H + 10)
        self.mode_label.text = "Mode: [b]{}[/b]".format(self.scene.mode); self.mode_label.markup = True

class RaycastApp(App):
    def __init__(self, scene_path=None, **kwargs):
        super().__init__(**kwargs)
        self.scene_path = scene_path

    def build(self):
        from kivy.core.window import Window
        scene = load_scene(self.scene_path)
        # Try not to crash if Window isn't available (e.g., packaging env)
        try:
            Window.size = (scene.width, scene.height)
        except Exception:
            pass
        view = RaycastView(scene)
        Window.bind(mouse_pos=view.on_mouse_pos)
        return view

def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    RaycastApp(argv[0] if argv else None).run()

if __name__ == "__main__":
    main()
