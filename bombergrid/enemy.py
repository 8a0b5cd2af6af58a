"""Enemies that patrol the lanes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import pygame

from bombergrid.board import LANES, TILE, load_image, random_lane

ENEMY_TEXTURE = "Textures/enemy.png"
ENEMY_COLOR = (200, 0, 200)
ENEMY_COUNT = 5
HORIZONTAL_MOVERS = 3
STEP = 0.05
UPPER_BOUND = 700
LOWER_BOUND = 2
DEAD = (-1, -1)


@dataclass
class _Enemy:
    x: float
    y: float
    alive: bool = True


class Enemies:
    """Five enemies; the first three walk across, the others up and down.

    All enemies share one direction per axis, so any one of them hitting an
    edge turns the whole group around on that axis.
    """

    def __init__(self, rng):
        self._rng = rng
        self._enemies: list[_Enemy] = []
        self._dx = STEP
        self._dy = STEP
        self._image: pygame.Surface | None = None

    def place(self, blocked: Iterable[tuple[float, float]]) -> None:
        """Put every enemy on a random inner lane crossing not in ``blocked``."""
        taken = set(blocked)
        free = [(x, y) for x in LANES[1:] for y in LANES[1:] if (x, y) not in taken]
        if not free:
            raise ValueError("no free tile for enemies")
        self._enemies = []
        for _ in range(ENEMY_COUNT):
            while True:
                x = random_lane(self._rng, False)
                y = random_lane(self._rng, False)
                if (x, y) not in taken:
                    break
            self._enemies.append(_Enemy(float(x), float(y)))

    def positions(self) -> list[tuple[int, int]]:
        """Whole-pixel position of each enemy; dead ones report (-1, -1)."""
        return [(int(enemy.x), int(enemy.y)) for enemy in self._enemies]

    def move(self) -> None:
        for index, enemy in enumerate(self._enemies):
            if not enemy.alive:
                continue
            if enemy.x >= UPPER_BOUND:
                self._dx = -self._dx
            if enemy.x <= LOWER_BOUND:
                self._dx = -self._dx
            if enemy.y >= UPPER_BOUND:
                self._dy = -self._dy
            if enemy.y <= LOWER_BOUND:
                self._dy = -self._dy
            if index < HORIZONTAL_MOVERS:
                if enemy.x >= 0:
                    enemy.x += self._dx
            elif enemy.y >= 0:
                enemy.y += self._dy

    def kill(self, index: int | None) -> None:
        """Kill the enemy at ``index``; anything out of range is ignored."""
        if index is None or not 0 <= index < len(self._enemies):
            return
        enemy = self._enemies[index]
        enemy.alive = False
        enemy.x, enemy.y = DEAD

    def draw(self, surface: pygame.Surface) -> None:
        if self._image is None:
            self._image = load_image(ENEMY_TEXTURE, (TILE, TILE), ENEMY_COLOR)
        for enemy in self._enemies:
            if enemy.alive:
                surface.blit(self._image, (int(enemy.x), int(enemy.y)))