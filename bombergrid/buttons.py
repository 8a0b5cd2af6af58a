"""Clickable buttons that grow while the pointer is over them."""

from __future__ import annotations

import os

import pygame

from bombergrid.board import load_image

HOVER_GROW = 20
WHITE = (255, 255, 255)


class Button:
    """A textured rectangle; a click on it closes it until the next update."""

    def __init__(self, image, size, position, color=WHITE):
        self._path = os.fspath(image)
        self.size = (int(size[0]), int(size[1]))
        self.position = (int(position[0]), int(position[1]))
        self.color = tuple(color)
        self.hovered = False
        self.is_open = True
        self._image: pygame.Surface | None = None

    @property
    def rect(self) -> pygame.Rect:
        """Where the button is drawn; larger and shifted while hovered."""
        (x, y), (w, h) = self.position, self.size
        if self.hovered:
            return pygame.Rect(x - HOVER_GROW, y - HOVER_GROW, w + HOVER_GROW, h + HOVER_GROW)
        return pygame.Rect(x, y, w, h)

    def update(self, mouse, clicked: bool) -> None:
        self.is_open = True
        self.hovered = bool(pygame.Rect(self.position, self.size).collidepoint(mouse))
        if self.hovered and clicked:
            self.is_open = False

    def draw(self, surface: pygame.Surface) -> None:
        if self._image is None:
            image = load_image(self._path, self.size, WHITE)
            image.fill(self.color, special_flags=pygame.BLEND_RGBA_MULT)
            self._image = image
        rect = self.rect
        surface.blit(pygame.transform.scale(self._image, rect.size), rect.topleft)