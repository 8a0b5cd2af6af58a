"""Breakable bricks scattered at random over the open lanes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import pygame

from bombergrid.board import OFF_BOARD, TILE, load_image, random_lane

BRICK_TEXTURE = "Textures/breakblocks.png"
BRICK_COLOR = (150, 75, 0)
BRICK_COUNT = 30


@dataclass
class _Brick:
    x: int
    y: int
    alive: bool = True


class Bricks:
    """Thirty bricks on random lane crossings, never on the start tile."""

    def __init__(self, rng):
        self._bricks: list[_Brick] = []
        for _ in range(BRICK_COUNT):
            x = random_lane(rng, True)
            while True:
                y = random_lane(rng, True)
                if x or y:
                    break
            self._bricks.append(_Brick(x, y))
        self._image: pygame.Surface | None = None

    @property
    def remaining(self) -> int:
        return sum(brick.alive for brick in self._bricks)

    def positions(self) -> list[tuple[int, int]]:
        """Position of every brick by index; destroyed ones sit off the board."""
        return [
            (brick.x, brick.y) if brick.alive else (OFF_BOARD, OFF_BOARD)
            for brick in self._bricks
        ]

    def destroy(self, indices: Iterable[int]) -> None:
        for index in indices:
            self._bricks[index].alive = False

    def draw(self, surface: pygame.Surface) -> None:
        if self._image is None:
            self._image = load_image(BRICK_TEXTURE, (TILE, TILE), BRICK_COLOR)
        for brick in self._bricks:
            if brick.alive:
                surface.blit(self._image, (brick.x, brick.y))