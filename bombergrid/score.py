"""The running score shown in the corner of the board."""

from __future__ import annotations

from typing import Iterable

import pygame

FONT_PATH = "Fonts/arial.ttf"
BRICK_POINTS = 5
ENEMY_POINTS = 50
_POSITION = (704, 0)
_SIZE = 30
_COLOR = (0, 0, 0)


def _font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    try:
        font = pygame.font.Font(FONT_PATH, size)
    except (FileNotFoundError, OSError, pygame.error):
        font = pygame.font.Font(None, size)
    font.set_bold(True)
    return font


class Score:
    """Points earned for destroyed bricks and killed enemies."""

    def __init__(self):
        self.value = 0
        self._font: pygame.font.Font | None = None

    def add_bricks(self, destroyed: Iterable[int]) -> None:
        self.value += BRICK_POINTS * sum(1 for _ in destroyed)

    def add_enemy(self, index: int | None) -> None:
        if index is not None:
            self.value += ENEMY_POINTS

    def draw(self, surface: pygame.Surface) -> None:
        if self._font is None:
            self._font = _font(_SIZE)
        surface.blit(self._font.render(str(self.value), True, _COLOR), _POSITION)