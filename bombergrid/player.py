"""The player: grid movement, bombs and what they hit."""

from __future__ import annotations

import os
import time
from enum import Enum
from functools import lru_cache
from typing import Callable, Iterable, Sequence

import pygame

from bombergrid.board import LANE_STEP, RESOLUTION, TILE, load_image
from bombergrid.bomb import Bomb

PLAYER_COLOR = (30, 144, 255)
EDGE = RESOLUTION - TILE
STEP_SOUND = "Sound/Bounce1.mp3"
KILL_SOUND = "Sound/kill.wav"

# An enemy kills the player when the player sits at one of these offsets
# from it on the same row or column.
DEATH_LEFT = 68
DEATH_RIGHT = 60
DEATH_ABOVE = 60
DEATH_BELOW = 68


class Action(Enum):
    RIGHT = "right"
    LEFT = "left"
    UP = "up"
    DOWN = "down"
    BOMB = "bomb"
    BACK = "back"


_STEPS = {
    Action.RIGHT: (TILE, 0),
    Action.LEFT: (-TILE, 0),
    Action.UP: (0, -TILE),
    Action.DOWN: (0, TILE),
}

_TEXTURES = {
    Action.RIGHT: "Textures/playerRR.png",
    Action.LEFT: "Textures/playerLR.png",
    Action.UP: "Textures/playerU.png",
    Action.DOWN: "Textures/playerD.png",
}

_BLAST_REACH = (-2 * TILE, -TILE, TILE, 2 * TILE)


@lru_cache(maxsize=None)
def _load_sound(path: str):
    try:
        return pygame.mixer.Sound(path)
    except (FileNotFoundError, pygame.error):
        return None


def _play(path: str, volume: float) -> None:
    if not pygame.mixer.get_init():
        return
    sound = _load_sound(path)
    if sound is not None:
        sound.set_volume(volume)
        sound.play()


class Player:
    """The player character, starting in the top left corner."""

    def __init__(self, image, clock: Callable[[], float] = time.monotonic):
        self.x = 0.0
        self.y = 0.0
        self.alive = True
        self.bomb = Bomb(clock)
        self._texture = os.fspath(image)
        self._images: dict[str, pygame.Surface] = {}

    def _inside(self, action: Action) -> bool:
        if action is Action.RIGHT:
            return self.x < EDGE
        if action is Action.LEFT:
            return self.x > 0
        if action is Action.UP:
            return self.y > 0
        return self.y < EDGE

    def move(self, action: Action, bricks: Iterable[tuple[float, float]]) -> bool:
        """Step one tile, or drop a bomb; returns whether the player moved."""
        if action is Action.BOMB:
            self.bomb.place(self.x, self.y)
            return False
        step = _STEPS.get(action)
        if step is None:
            return False
        dx, dy = step
        lane = int(self.y) if dx else int(self.x)
        if lane % LANE_STEP != 0 or not self._inside(action):
            return False
        if (self.x + dx, self.y + dy) in set(bricks):
            return False
        self.x += dx
        self.y += dy
        self._texture = _TEXTURES[action]
        _play(STEP_SOUND, 0.5)
        return True

    def bricks_destroyed(
        self, action: Action, bricks: Sequence[tuple[float, float]]
    ) -> list[int]:
        """Indices of bricks within two tiles of the bomb on its row or column."""
        if action is not Action.BOMB or self.bomb.position is None:
            return []
        bx, by = self.bomb.position
        return [
            index
            for index, (x, y) in enumerate(bricks)
            if (y == by and x - bx in _BLAST_REACH)
            or (x == bx and y - by in _BLAST_REACH)
        ]

    def enemy_hit(self, enemies: Iterable[tuple[int, int]]) -> int | None:
        """Index of the first enemy one tile from the bomb, or None."""
        if self.bomb.position is None:
            return None
        bx, by = self.bomb.position
        for index, (ex, ey) in enumerate(enemies):
            if (by == ey and bx in (ex - TILE, ex + TILE)) or (
                bx == ex and by in (ey - TILE, ey + TILE)
            ):
                _play(KILL_SOUND, 1.0)
                return index
        return None

    def check_death(self, enemies: Iterable[tuple[int, int]]) -> bool:
        """Whether an enemy has caught the player; a caught player dies."""
        for ex, ey in enemies:
            if (self.y == ey and self.x in (ex - DEATH_LEFT, ex + DEATH_RIGHT)) or (
                self.x == ex and self.y in (ey - DEATH_ABOVE, ey + DEATH_BELOW)
            ):
                self.alive = False
                return True
        return False

    def draw(self, surface: pygame.Surface) -> None:
        self.bomb.draw(surface)
        if not self.alive:
            return
        if self._texture not in self._images:
            self._images[self._texture] = load_image(
                self._texture, (TILE, TILE), PLAYER_COLOR
            )
        surface.blit(self._images[self._texture], (int(self.x), int(self.y)))