import pygame
import pytest

from bombergrid.buttons import Button
from bombergrid.screens import Screen


def make_button(color=(255, 255, 255)):
    return Button("missing-button.png", (250, 70), (250, 470), color)


def test_screen_without_buttons_is_closed():
    screen = Screen("missing.png", 0)
    assert screen.is_open(0) is False


def test_set_button_out_of_range():
    screen = Screen("missing.png", 2)
    with pytest.raises(IndexError):
        screen.set_button(3, make_button())
    with pytest.raises(IndexError):
        screen.set_button(0, make_button())


def test_is_open_out_of_range():
    screen = Screen("missing.png", 1)
    with pytest.raises(IndexError):
        screen.is_open(2)


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        Screen("missing.png", -1)


def test_click_closes_only_that_button():
    screen = Screen("missing.png", 2)
    screen.set_button(1, make_button())
    screen.update((260, 480), True)
    assert screen.is_open(1) is False
    assert screen.is_open(2) is True


def test_draw_shows_buttons():
    screen = Screen("missing.png", 1)
    screen.set_button(1, make_button((10, 20, 30)))
    surface = pygame.Surface((768, 768))
    screen.draw(surface)
    assert tuple(surface.get_at((300, 500)))[:3] == (10, 20, 30)