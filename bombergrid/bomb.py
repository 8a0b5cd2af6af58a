"""A single bomb with a fuse and a short explosion."""

from __future__ import annotations

import time
from enum import Enum
from typing import Callable

import pygame

from bombergrid.board import load_image

BOMB_TEXTURE = "Textures/bomb.png"
EXPLOSION_TEXTURE = "Textures/explosion.png"
BOMB_COLOR = (0, 0, 0)
EXPLOSION_COLOR = (255, 140, 0)

FUSE_SECONDS = 3.0
BLAST_SECONDS = 4.0


class BombPhase(Enum):
    IDLE = "idle"
    FUSE = "fuse"
    BLAST = "blast"


class Bomb:
    """A bomb that burns for three seconds, explodes for one, then vanishes."""

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._position: tuple[float, float] | None = None
        self._placed_at = 0.0
        self._images: dict[BombPhase, pygame.Surface] = {}

    @property
    def position(self) -> tuple[float, float] | None:
        """Where the bomb lies, or None when no bomb is on the board."""
        return self._position

    def place(self, x: float, y: float) -> bool:
        """Drop the bomb at (x, y) unless one is already on the board."""
        if self._position is not None:
            return False
        self._position = (x, y)
        self._placed_at = self._clock()
        return True

    def phase(self) -> BombPhase:
        """Current phase; a bomb past its blast is cleared."""
        if self._position is None:
            return BombPhase.IDLE
        elapsed = self._clock() - self._placed_at
        if elapsed > BLAST_SECONDS:
            self._position = None
            return BombPhase.IDLE
        if elapsed > FUSE_SECONDS:
            return BombPhase.BLAST
        return BombPhase.FUSE

    def _image(self, phase: BombPhase) -> pygame.Surface:
        if phase not in self._images:
            if phase is BombPhase.BLAST:
                image = load_image(EXPLOSION_TEXTURE, (64, 64), EXPLOSION_COLOR)
            else:
                image = load_image(BOMB_TEXTURE, (32, 32), BOMB_COLOR)
            self._images[phase] = image
        return self._images[phase]

    def draw(self, surface: pygame.Surface) -> None:
        phase = self.phase()
        if phase is BombPhase.IDLE or self._position is None:
            return
        x, y = self._position
        surface.blit(self._image(phase), (int(x), int(y)))