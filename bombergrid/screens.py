"""Full-board screens with an optional row of buttons."""

from __future__ import annotations

import os

import pygame

from bombergrid.board import RESOLUTION, load_image
from bombergrid.buttons import Button

SCREEN_ALPHA = int(255 * 0.9)
SCREEN_COLOR = (0, 100, 0)


class Screen:
    """A background image with numbered buttons (numbered from 1)."""

    def __init__(self, image, button_count=0):
        if button_count < 0:
            raise ValueError("button count cannot be negative")
        self._path = os.fspath(image)
        self._buttons: list[Button | None] = [None] * button_count
        self._image: pygame.Surface | None = None

    def _index(self, number: int) -> int:
        if not 1 <= number <= len(self._buttons):
            raise IndexError(f"screen has no button {number}")
        return number - 1

    def set_button(self, number: int, button: Button) -> None:
        self._buttons[self._index(number)] = button

    def update(self, mouse, clicked: bool) -> None:
        for button in self._buttons:
            if button is not None:
                button.update(mouse, clicked)

    def is_open(self, number: int) -> bool:
        """Whether button ``number`` is unclicked; a screen without buttons is closed."""
        if not self._buttons:
            return False
        button = self._buttons[self._index(number)]
        return True if button is None else button.is_open

    def draw(self, surface: pygame.Surface) -> None:
        if self._image is None:
            image = load_image(self._path, (RESOLUTION, RESOLUTION), SCREEN_COLOR)
            image.set_alpha(SCREEN_ALPHA)
            self._image = image
        surface.blit(self._image, (0, 0))
        for button in self._buttons:
            if button is not None:
                button.draw(surface)