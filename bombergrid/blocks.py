"""The fixed grid of unbreakable blocks."""

from __future__ import annotations

import pygame

from bombergrid.board import LANE_STEP, RESOLUTION, TILE, load_image

BLOCKS_TEXTURE = "Textures/blocks.png"
BLOCKS_COLOR = (90, 90, 90)


class Blocks:
    """Unbreakable blocks on every odd tile of both axes: a 6 by 6 grid."""

    def __init__(self):
        coords = range(TILE, RESOLUTION, LANE_STEP)
        self._positions = [(x, y) for y in coords for x in coords]
        self._image: pygame.Surface | None = None

    def positions(self) -> list[tuple[int, int]]:
        return list(self._positions)

    def draw(self, surface: pygame.Surface) -> None:
        if self._image is None:
            self._image = load_image(BLOCKS_TEXTURE, (TILE, TILE), BLOCKS_COLOR)
        for position in self._positions:
            surface.blit(self._image, position)