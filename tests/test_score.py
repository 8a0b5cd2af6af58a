import pygame

from bombergrid.score import BRICK_POINTS, ENEMY_POINTS, Score


def test_starts_at_zero():
    assert Score().value == 0


def test_each_brick_scores():
    score = Score()
    score.add_bricks([3])
    assert score.value == 5
    score.add_bricks([1, 4, 9])
    assert score.value == 4 * BRICK_POINTS


def test_no_bricks_no_points():
    score = Score()
    score.add_bricks([])
    assert score.value == 0


def test_enemy_hit_scores():
    score = Score()
    score.add_enemy(None)
    assert score.value == 0
    score.add_enemy(0)
    assert score.value == 50
    score.add_enemy(4)
    assert score.value == 2 * ENEMY_POINTS


def test_draw_renders_in_corner(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    surface = pygame.Surface((768, 768))
    surface.fill((255, 255, 255))
    score = Score()
    score.add_enemy(1)
    score.draw(surface)
    corner = [surface.get_at((x, y))[:3] for x in range(704, 768) for y in range(0, 40)]
    assert any(pixel != (255, 255, 255) for pixel in corner)
    assert tuple(surface.get_at((10, 500)))[:3] == (255, 255, 255)