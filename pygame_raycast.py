import sys
import pygame

from raycast2d.scene import load_scene

# ------------------------------- Rendering -------------------------------

BG_COLOR = (0, 0, 0)
RECT_COLOR = (0, 0, 255)
LINE_COLOR = (255, 255, 255)
BOX_COLOR = (0, 255, 0)
TEXT_COLOR = (200, 200, 200)


def draw_scene(surface, scene, font=None):
    surface.fill(BG_COLOR)

    for rx, ry, rw, rh in scene.rects:
        pygame.draw.rect(surface, RECT_COLOR, pygame.Rect(rx, ry, rw, rh))

    bx, by, bw, bh = scene.ray_box
    pygame.draw.rect(surface, BOX_COLOR, pygame.Rect(bx, by, bw, bh), 1)

    start, end = scene.ray
    pygame.draw.line(surface, LINE_COLOR, start, end)
    for a, b in scene.segments:
        pygame.draw.line(surface, LINE_COLOR, a, b)

    if font is not None:
        text = font.render("Mode: %s (M to switch)" % scene.mode, True, TEXT_COLOR)
        surface.blit(text, (10, scene.height - 30))

# ------------------------------ Main loop -------------------------------

def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    scene = load_scene(argv[0] if argv else None)

    pygame.init()
    screen = pygame.display.set_mode((scene.width, scene.height))
    pygame.display.set_caption("Line Intersections")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont(None, 24)

    running = True
    while running:
        clock.tick(60)
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.MOUSEMOTION:
                scene.aim(event.pos)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 3:
                scene.move_origin(event.pos)
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_m:
                scene.toggle_mode()
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False

        draw_scene(screen, scene, font)
        pygame.display.flip()

    pygame.quit()


if __name__ == "__main__":
    main()
