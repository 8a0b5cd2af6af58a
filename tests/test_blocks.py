import pygame

from bombergrid.blocks import BLOCKS_COLOR, Blocks


def test_thirty_six_distinct_blocks():
    positions = Blocks().positions()
    assert len(positions) == 36
    assert len(set(positions)) == 36


def test_blocks_sit_on_odd_tiles():
    positions = Blocks().positions()
    assert all(x % 128 == 64 and y % 128 == 64 for x, y in positions)
    assert positions[0] == (64, 64)
    assert positions[-1] == (704, 704)


def test_rows_fill_left_to_right():
    positions = Blocks().positions()
    assert [y for _, y in positions[:6]] == [64] * 6
    assert positions[6] == (64, 192)


def test_positions_returns_a_copy():
    blocks = Blocks()
    blocks.positions().clear()
    assert len(blocks.positions()) == 36


def test_draw_blits_blocks(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    surface = pygame.Surface((768, 768))
    surface.fill((255, 255, 255))
    Blocks().draw(surface)
    assert tuple(surface.get_at((70, 70)))[:3] == BLOCKS_COLOR
    assert tuple(surface.get_at((10, 10)))[:3] == (255, 255, 255)