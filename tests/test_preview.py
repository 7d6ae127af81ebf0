"""Tests for the pygame preview helpers."""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import numpy as np
import pygame

from renderer.preview import image_to_surface, show_image


def test_surface_size_is_width_by_height():
    pixels = np.zeros((3, 5, 3), dtype=np.uint8)
    pixels[0, 4] = (255, 128, 0)
    surface = image_to_surface(pixels)
    assert surface.get_size() == (5, 3)
    assert tuple(surface.get_at((4, 0)))[:3] == (255, 128, 0)


def test_show_image_stops_after_max_frames():
    pixels = np.zeros((4, 4, 3), dtype=np.uint8)
    show_image(pixels, max_frames=1)
    assert not pygame.get_init()
