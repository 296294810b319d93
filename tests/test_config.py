import pygame
import pytest

from smokefx import config
from smokefx.smoke_maker import aim_direction


def _start():
    return pygame.Vector2(config.EMITTER_START_POSITION)


def test_aim_along_window_midline_points_right():
    assert (config.WINDOW_WIDTH, config.WINDOW_HEIGHT) == config.WINDOW_SIZE
    assert config.WINDOW_SIZE == (1920, 1080)
    start = _start()
    target = pygame.Vector2(config.WINDOW_WIDTH, start.y)
    direction = aim_direction(target, start)
    assert direction[0] == pytest.approx(1.0)
    assert direction[1] == pytest.approx(0.0)


def test_aim_from_centred_emitter_to_bottom_edge_points_down():
    start = _start()
    assert 0 <= start.x < config.WINDOW_WIDTH
    assert start.y == pytest.approx(config.WINDOW_HEIGHT / 2)
    target = pygame.Vector2(start.x, config.WINDOW_HEIGHT)
    direction = aim_direction(target, start)
    assert direction[0] == pytest.approx(0.0)
    assert direction[1] == pytest.approx(1.0)


def test_aim_from_centred_emitter_to_top_edge_points_up():
    start = _start()
    target = pygame.Vector2(start.x, 0)
    direction = aim_direction(target, start)
    assert direction[0] == pytest.approx(0.0)
    assert direction[1] == pytest.approx(-1.0)


def test_aim_at_emitter_itself_is_zero_vector():
    start = _start()
    direction = aim_direction(pygame.Vector2(start), start)
    assert direction[0] == pytest.approx(0.0)
    assert direction[1] == pytest.approx(0.0)