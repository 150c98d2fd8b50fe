# renderer/preview.py
import numpy as np
import pygame
from renderer.canvas import Canvas


def to_surface(canvas: Canvas) -> pygame.Surface:
    """
    Converts a canvas to a pygame Surface. surfarray expects (width, height)
    ordering, so the image is transposed.
    """
    rgb = np.ascontiguousarray(canvas.to_rgb8().transpose(1, 0, 2))
    return pygame.surfarray.make_surface(rgb)


def show(canvas: Canvas, caption: str = "Ray Tracer"):
    """
    Opens a window showing the canvas and blocks until it is closed or
    Escape is pressed.
    """
    pygame.init()
    try:
        screen = pygame.display.set_mode((canvas.width, canvas.height))
        pygame.display.set_caption(caption)
        screen.blit(to_surface(canvas), (0, 0))
        pygame.display.flip()

        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            clock.tick(30)
    finally:
        pygame.quit()
