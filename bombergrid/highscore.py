"""High scores kept in a plain text file, one score per line."""

from __future__ import annotations

from pathlib import Path

import pygame

FONT_PATH = "Fonts/arial.ttf"
DEFAULT_PATH = "highscore.txt"
_SIZE = 100
_COLOR = (255, 0, 0)
_OUTLINE = (0, 0, 0)
_OUTLINE_WIDTH = 5
_LEFT = 300
_TOP = 151
_SPACING = 150


def _font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    try:
        font = pygame.font.Font(FONT_PATH, size)
    except (FileNotFoundError, OSError, pygame.error):
        font = pygame.font.Font(None, size)
    font.set_bold(True)
    return font


class HighScores:
    """Appends finished scores to a file and reads back the best ones."""

    def __init__(self, path=DEFAULT_PATH):
        self.path = Path(path)
        self._font: pygame.font.Font | None = None

    def save(self, score: int) -> None:
        with self.path.open("a", encoding="utf-8") as stream:
            stream.write(f"{score}\n")

    def _scores(self) -> list[int]:
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        scores = []
        for token in text.split():
            try:
                scores.append(int(token))
            except ValueError:
                break
        return scores

    def top(self, count: int = 3) -> list[int]:
        """The ``count`` best scores, highest first."""
        return sorted(self._scores(), reverse=True)[:count]

    def draw(self, surface: pygame.Surface) -> None:
        if self._font is None:
            self._font = _font(_SIZE)
        offsets = [
            (dx, dy)
            for dx in (-_OUTLINE_WIDTH, 0, _OUTLINE_WIDTH)
            for dy in (-_OUTLINE_WIDTH, 0, _OUTLINE_WIDTH)
            if dx or dy
        ]
        for row, value in enumerate(self.top(3)):
            x, y = _LEFT, _TOP + row * _SPACING
            text = str(value)
            outline = self._font.render(text, True, _OUTLINE)
            for dx, dy in offsets:
                surface.blit(outline, (x + dx, y + dy))
            surface.blit(self._font.render(text, True, _COLOR), (x, y))