"""Board geometry and helpers shared by the game objects."""

from __future__ import annotations

import os
from typing import Protocol

import pygame

RESOLUTION = 768
TILE = 64
LANE_STEP = 2 * TILE
OFF_BOARD = RESOLUTION
LANES = tuple(range(0, RESOLUTION, LANE_STEP))

_RANDOM_SPAN = 705


class _Rng(Protocol):
    def randrange(self, stop: int) -> int: ...


def random_lane(rng: _Rng, allow_zero: bool) -> int:
    """Draw random numbers until one lands on an open lane (an even tile)."""
    while True:
        n = rng.randrange(_RANDOM_SPAN)
        if n % LANE_STEP == 0 and (allow_zero or n != 0):
            return n


def load_image(path, size, color) -> pygame.Surface:
    """Load an image cropped to ``size``; a plain ``color`` tile if it cannot be read."""
    surface = pygame.Surface(size, pygame.SRCALPHA)
    try:
        image = pygame.image.load(os.fspath(path))
    except (FileNotFoundError, pygame.error):
        surface.fill(color)
        return surface
    surface.blit(image, (0, 0))
    return surface