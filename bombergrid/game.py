"""The game: screens, the board and the main loop."""

from __future__ import annotations

import argparse
import random
from enum import Enum, auto
from pathlib import Path

import pygame

from bombergrid.blocks import Blocks
from bombergrid.board import RESOLUTION
from bombergrid.brick import Bricks
from bombergrid.buttons import WHITE, Button
from bombergrid.enemy import Enemies
from bombergrid.highscore import HighScores
from bombergrid.player import Action, Player
from bombergrid.score import Score
from bombergrid.screens import Screen

TITLE = "Bomberman"
WINDOW_SIZE = (640, 640)

_KEYS = {
    pygame.K_d: Action.RIGHT,
    pygame.K_a: Action.LEFT,
    pygame.K_w: Action.UP,
    pygame.K_s: Action.DOWN,
    pygame.K_SPACE: Action.BOMB,
    pygame.K_BACKSPACE: Action.BACK,
}


class View(Enum):
    START = auto()
    PLAYING = auto()
    HIGHSCORES = auto()
    GAME_OVER = auto()


class Game:
    """One round of the game with its menus."""

    def __init__(self, root=".", seed=None):
        self.root = Path(root)
        rng = random.Random(seed)

        self.background = Screen(self._asset("Textures/background.png"), 0)
        self.start_screen = Screen(self._asset("Textures/startscreen.png"), 3)
        self.highscore_screen = Screen(self._asset("Textures/highscore.png"), 1)
        self.gameover_screen = Screen(self._asset("Textures/gameover.png"), 0)
        for number, texture, y in (
            (1, "Textures/button.png", 470),
            (2, "Textures/highscorebutton.png", 570),
            (3, "Textures/exitbutton.png", 670),
        ):
            self.start_screen.set_button(
                number, Button(self._asset(texture), (250, 70), (250, y), WHITE)
            )
        self.highscore_screen.set_button(
            1, Button(self._asset("Textures/backbutton.png"), (290, 90), (470, 670), WHITE)
        )

        self.player = Player(self._asset("Textures/player.png"))
        self.blocks = Blocks()
        self.bricks = Bricks(rng)
        self.enemies = Enemies(rng)
        self.enemies.place(self.bricks.positions())
        self.score = Score()
        self.highscores = HighScores(self.root / "highscore.txt")

        self.view = View.START
        self.surface = pygame.Surface((RESOLUTION, RESOLUTION))
        self._saved = False

    def _asset(self, relative: str) -> Path:
        return self.root / relative

    def handle_key(self, action: Action) -> None:
        """Apply a key press while the game is being played."""
        if self.view is not View.PLAYING:
            return
        self.player.move(action, self.bricks.positions())
        destroyed = self.player.bricks_destroyed(action, self.bricks.positions())
        self.score.add_bricks(destroyed)
        self.bricks.destroy(destroyed)
        if action is Action.BACK:
            self.view = View.START

    def _dispatch(self, mouse, clicked: bool, action: Action | None) -> bool:
        """Route one input event; returns False when the player chose to quit."""
        if self.view is View.START:
            self.start_screen.update(mouse, clicked)
            if not self.start_screen.is_open(1):
                self.view = View.PLAYING
            if not self.start_screen.is_open(2):
                self.view = View.HIGHSCORES
            if not self.start_screen.is_open(3):
                return False
        if action is not None:
            self.handle_key(action)
        if self.view is View.HIGHSCORES:
            self.highscore_screen.update(mouse, clicked)
            if not self.highscore_screen.is_open(1):
                self.view = View.START
        return True

    def _on_death(self) -> None:
        if self._saved:
            return
        self.highscores.save(self.score.value)
        self._saved = True
        if pygame.mixer.get_init():
            pygame.mixer.music.pause()
            try:
                death = pygame.mixer.Sound(str(self._asset("Music/death.wav")))
            except (FileNotFoundError, pygame.error):
                return
            death.set_volume(0.5)
            death.play()

    def tick(self) -> None:
        """Advance one frame and draw it onto ``surface``."""
        self.surface.fill((0, 0, 0))
        if self.player.check_death(self.enemies.positions()):
            self._on_death()
            self.view = View.GAME_OVER
            self.gameover_screen.draw(self.surface)

        if self.view is View.START:
            self.start_screen.draw(self.surface)
        elif self.view is View.PLAYING:
            self.enemies.move()
            self.background.draw(self.surface)
            self.player.draw(self.surface)
            self.blocks.draw(self.surface)
            hit = self.player.enemy_hit(self.enemies.positions())
            self.score.add_enemy(hit)
            self.enemies.kill(hit)
            self.enemies.draw(self.surface)
            self.bricks.draw(self.surface)
            self.score.draw(self.surface)
        elif self.view is View.HIGHSCORES:
            self.highscore_screen.draw(self.surface)
            self.highscores.draw(self.surface)

    def _start_music(self) -> None:
        if not pygame.mixer.get_init():
            return
        try:
            pygame.mixer.music.load(str(self._asset("Music/bgmusic.mp3")))
        except (FileNotFoundError, pygame.error):
            return
        pygame.mixer.music.set_volume(0.2)
        pygame.mixer.music.play()

    def _handle_event(self, event, window_size) -> bool:
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            return False
        mx, my = pygame.mouse.get_pos()
        mouse = (mx * RESOLUTION // window_size[0], my * RESOLUTION // window_size[1])
        clicked = event.type == pygame.MOUSEBUTTONDOWN
        action = _KEYS.get(event.key) if event.type == pygame.KEYDOWN else None
        return self._dispatch(mouse, clicked, action)

    def run(self) -> None:
        """Open the window and play until it is closed."""
        pygame.init()
        try:
            window = pygame.display.set_mode(WINDOW_SIZE)
            pygame.display.set_caption(TITLE)
            self._start_music()
            while True:
                for event in pygame.event.get():
                    if not self._handle_event(event, window.get_size()):
                        return
                self.tick()
                window.blit(pygame.transform.scale(self.surface, window.get_size()), (0, 0))
                pygame.display.flip()
        finally:
            pygame.quit()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Play a round of the bomb game.")
    parser.add_argument("--root", default=".", help="directory holding the game assets")
    parser.add_argument("--seed", type=int, default=None, help="seed for the board layout")
    args = parser.parse_args(argv)
    Game(args.root, args.seed).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())