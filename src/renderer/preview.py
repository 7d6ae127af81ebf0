# renderer/preview.py
import numpy as np
import pygame


def image_to_surface(pixels: np.ndarray) -> pygame.Surface:
    """
    Converts an (H, W, 3) uint8 image into a pygame Surface.
    surfarray expects (W, H, 3), so the axes are swapped.
    """
    return pygame.surfarray.make_surface(np.ascontiguousarray(pixels.swapaxes(0, 1)))


def show_image(pixels: np.ndarray, title: str = "Ray Tracer", max_frames: int = None):
    """
    Opens a window with the finished frame and blocks until it is closed
    (window close or Escape). max_frames bounds the event loop, mainly for
    headless runs.
    """
    pygame.init()
    try:
        height, width = pixels.shape[:2]
        screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)
        surface = image_to_surface(pixels)
        clock = pygame.time.Clock()

        running = True
        frames = 0
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            screen.blit(surface, (0, 0))
            pygame.display.flip()
            clock.tick(30)
            frames += 1
            if max_frames is not None and frames >= max_frames:
                running = False
    finally:
        pygame.quit()
