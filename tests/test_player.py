from bombergrid.board import TILE
from bombergrid.player import (
    DEATH_ABOVE,
    DEATH_BELOW,
    DEATH_LEFT,
    DEATH_RIGHT,
    EDGE,
    PLAYER_COLOR,
    Action,
    Player,
)

import pygame


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def make_player():
    return Player("missing-player.png", FakeClock())


def test_starts_in_corner():
    player = make_player()
    assert (player.x, player.y, player.alive) == (0, 0, True)


def test_move_right_on_open_board():
    player = make_player()
    assert player.move(Action.RIGHT, [])
    assert (player.x, player.y) == (TILE, 0)


def test_cannot_leave_top_left():
    player = make_player()
    assert not player.move(Action.LEFT, [])
    assert not player.move(Action.UP, [])
    assert (player.x, player.y) == (0, 0)


def test_brick_blocks_movement():
    player = make_player()
    assert not player.move(Action.RIGHT, [(TILE, 0)])
    assert player.x == 0


def test_cannot_turn_off_lane():
    player = make_player()
    player.move(Action.RIGHT, [])
    assert not player.move(Action.DOWN, [])
    assert player.y == 0


def test_cannot_leave_right_edge():
    player = make_player()
    player.x = EDGE
    assert not player.move(Action.RIGHT, [])
    assert player.x == EDGE


def test_move_down_and_back_up():
    player = make_player()
    player.move(Action.DOWN, [])
    player.move(Action.UP, [])
    assert (player.x, player.y) == (0, 0)


def test_bomb_placed_at_player():
    player = make_player()
    player.move(Action.BOMB, [])
    assert player.bomb.position == (0, 0)


def test_bricks_destroyed_in_reach():
    player = make_player()
    player.move(Action.BOMB, [])
    bricks = [(TILE, 0), (2 * TILE, 0), (3 * TILE, 0), (0, 2 * TILE), (2 * TILE, 2 * TILE)]
    assert player.bricks_destroyed(Action.BOMB, bricks) == [0, 1, 3]


def test_bricks_destroyed_needs_bomb_action():
    player = make_player()
    player.move(Action.BOMB, [])
    assert player.bricks_destroyed(Action.RIGHT, [(TILE, 0)]) == []


def test_enemy_hit_next_to_bomb():
    player = make_player()
    player.move(Action.BOMB, [])
    assert player.enemy_hit([(500, 500), (TILE, 0)]) == 1


def test_enemy_hit_none_without_bomb_or_neighbour():
    player = make_player()
    assert player.enemy_hit([(TILE, 0)]) is None
    player.move(Action.BOMB, [])
    assert player.enemy_hit([(2 * TILE, 0)]) is None


def test_death_from_each_side():
    for enemy in [(DEATH_LEFT, 0), (-DEATH_RIGHT, 0), (0, DEATH_ABOVE), (0, -DEATH_BELOW)]:
        player = make_player()
        assert player.check_death([enemy])
        assert not player.alive


def test_no_death_when_apart():
    player = make_player()
    assert not player.check_death([(TILE, 0), (2 * TILE, 2 * TILE)])
    assert player.alive


def test_draw_uses_fallback_colour():
    player = make_player()
    surface = pygame.Surface((128, 128))
    player.draw(surface)
    assert tuple(surface.get_at((1, 1)))[:3] == PLAYER_COLOR