import pygame
import pytest
from pygame.math import Vector2

from smokefx import config
from smokefx.smoke_maker import SimulationFeature, SmokeMaker, aim_direction


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


def make(clock, **kwargs):
    params = dict(
        position=(100, 100),
        main_color=config.EMITTER_MAIN_COLOR,
        outline_color=config.EMITTER_OUTLINE_COLOR,
        max_particles=50,
        particle_lifetime=10.0,
        particle_color=(255, 255, 255),
        particle_size=30.0,
        initial_direction=(1, 0),
        initial_speed=300.0,
        particles_per_second=4.0,
        clock=clock,
    )
    params.update(kwargs)
    return SmokeMaker(**params)


def test_aim_direction_is_unit_length():
    d = aim_direction((13, -7), (2, 5))
    assert d.length() == pytest.approx(1.0)


def test_aim_direction_along_axis():
    assert aim_direction((10, 0), (0, 0)) == Vector2(1, 0)


def test_aim_direction_same_point_is_zero():
    assert aim_direction((5, 5), (5, 5)) == Vector2(0, 0)


def test_inactive_maker_spawns_nothing(clock):
    maker = make(clock)
    maker.update(1.0)
    assert maker.particles == []


def test_active_maker_spawns_accumulated_count(clock):
    maker = make(clock)
    maker.active = True
    maker.update(0.5)
    assert len(maker.particles) == 2
    for particle in maker.particles:
        assert particle.velocity == Vector2(300, 0)
        assert particle.position - maker.position == particle.velocity * 0.5


def test_spawn_respects_max_particles(clock):
    maker = make(clock, max_particles=3)
    maker.active = True
    maker.update(5.0)
    assert len(maker.particles) == 3


def test_smooth_stop_sets_decelerating_acceleration(clock):
    maker = make(clock)
    maker.enable_features({SimulationFeature.SMOOTH_STOP: True})
    maker.active = True
    maker.update(0.25)
    assert len(maker.particles) == 1
    particle = maker.particles[0]
    assert particle.acceleration == -Vector2(300, 0) / 10.0


def test_enable_features_keeps_constant_speed(clock):
    maker = make(clock)
    maker.enable_features({SimulationFeature.CONSTANT_SPEED: False, SimulationFeature.ROTATION: True})
    assert maker.features[SimulationFeature.CONSTANT_SPEED] is True
    assert maker.features[SimulationFeature.ROTATION] is True
    assert SimulationFeature.SMOOTH_STOP not in maker.features


def test_default_features_only_constant_speed(clock):
    maker = make(clock)
    enabled = {f for f, on in maker.features.items() if on}
    assert enabled == {SimulationFeature.CONSTANT_SPEED}


def test_dead_particles_are_removed(clock):
    maker = make(clock)
    maker.active = True
    maker.update(0.5)
    assert maker.particles
    maker.active = False
    clock.now = 10.0
    maker.update(0.1)
    assert maker.particles == []


def test_aim_at_updates_direction_and_pointer(clock):
    maker = make(clock)
    maker.aim_at((100, 200))
    assert maker.direction == Vector2(0, 1)
    tip = maker.pointer[0]
    assert (tip - maker.position).length() == pytest.approx(config.EMITTER_RADIUS * 2.15)
    assert (tip - maker.position).normalize() == Vector2(0, 1)


def test_pointer_outline_tip_is_beyond_pointer_tip(clock):
    maker = make(clock)
    offset = maker.pointer_outline[0] - maker.pointer[0]
    assert offset.length() == pytest.approx(config.EMITTER_OUTLINE_THICKNESS)


def test_move_to_moves_spawn_point_and_pointer(clock):
    maker = make(clock)
    maker.move_to((300, 400))
    assert maker.position == Vector2(300, 400)
    base_mid = (maker.pointer[1] + maker.pointer[2]) / 2
    assert base_mid == Vector2(300, 400)
    maker.active = True
    maker.update(0.25)
    assert maker.particles[0].position.y == 400


def test_draw_inactive_shows_body_color(clock):
    surface = pygame.Surface((200, 200))
    surface.fill((0, 0, 0))
    maker = make(clock)
    maker.draw(surface)
    assert surface.get_at((100, 100)) == pygame.Color(*config.EMITTER_MAIN_COLOR)
    assert surface.get_at((0, 0)) == pygame.Color(0, 0, 0)


def test_draw_active_shows_pointer_tip_outline(clock):
    surface = pygame.Surface((200, 200))
    surface.fill((0, 0, 0))
    maker = make(clock)
    maker.active = True
    maker.draw(surface)
    tip_outline = maker.pointer_outline[0]
    just_inside = (int(tip_outline.x) - 1, int(tip_outline.y))
    assert surface.get_at(just_inside) == pygame.Color(*config.EMITTER_OUTLINE_COLOR)