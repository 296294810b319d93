"""An aimable emitter that spawns and manages smoke particles."""

from __future__ import annotations

import time
from enum import Enum, auto
from typing import Callable, Mapping

import pygame
from pygame.math import Vector2

from smokefx import config
from smokefx.particle import Particle


class SimulationFeature(Enum):
    """Effects that can be toggled on the emitted particles."""

    CONSTANT_SPEED = auto()  # always active
    SMOOTH_STOP = auto()
    DECREASING_ALPHA = auto()
    INCREASING_SIZE = auto()
    ROTATION = auto()
    TEXTURE = auto()
    STEAM_EFFECT = auto()


def aim_direction(target, source) -> Vector2:
    """Unit vector from ``source`` to ``target``; zero if they coincide."""
    direction = Vector2(target) - Vector2(source)
    length = direction.length()
    if length == 0:
        length = 1.0
    return direction / length


def _default_features() -> dict[SimulationFeature, bool]:
    features = dict.fromkeys(SimulationFeature, False)
    features[SimulationFeature.CONSTANT_SPEED] = True
    return features


class SmokeMaker:
    """Emitter that, while active, spawns particles in its aim direction."""

    POINTER_LENGTH = config.EMITTER_RADIUS * 2.15
    POINTER_WIDTH = config.EMITTER_RADIUS * 1.0

    def __init__(
        self,
        position,
        main_color,
        outline_color,
        max_particles: int,
        particle_lifetime: float,
        particle_color,
        particle_size: float,
        initial_direction,
        initial_speed: float,
        particles_per_second: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._position = Vector2(position)
        self.main_color = pygame.Color(main_color)
        self.outline_color = pygame.Color(outline_color)
        self.max_particles = max_particles
        self.particle_lifetime = particle_lifetime
        self.particle_color = pygame.Color(particle_color)
        self.particle_size = particle_size
        self.direction = Vector2(initial_direction)
        self.initial_speed = initial_speed
        self.particles_per_second = particles_per_second
        self.radius = config.EMITTER_RADIUS
        self.outline_thickness = config.EMITTER_OUTLINE_THICKNESS
        self.clock = clock
        self.particles: list[Particle] = []
        self.active = False
        self.features = _default_features()
        self.pointer: tuple[Vector2, Vector2, Vector2] = ()
        self.pointer_outline: tuple[Vector2, Vector2, Vector2] = ()
        self._spawn_accumulator = 0.0
        self._update_pointer()

    @property
    def position(self) -> Vector2:
        return Vector2(self._position)

    def _feature(self, feature: SimulationFeature) -> bool:
        return self.features.get(feature, False)

    def _spawn(self, dt: float) -> None:
        self._spawn_accumulator += dt
        to_spawn = self._spawn_accumulator * self.particles_per_second
        if to_spawn < 1.0:
            return
        count = int(to_spawn)
        for _ in range(count):
            if len(self.particles) >= self.max_particles:
                continue
            velocity = self.direction * self.initial_speed
            acceleration = Vector2(0, 0)
            if self._feature(SimulationFeature.SMOOTH_STOP) and self.particle_lifetime > 0:
                acceleration += -velocity / self.particle_lifetime
            self.particles.append(
                Particle(
                    position=self._position,
                    velocity=velocity,
                    color=self.particle_color,
                    size=self.particle_size,
                    lifetime=self.particle_lifetime,
                    acceleration=acceleration,
                    clock=self.clock,
                )
            )
        self._spawn_accumulator -= count

    def _update_pointer(self) -> None:
        length = self.POINTER_LENGTH
        width = self.POINTER_WIDTH
        thickness = self.outline_thickness
        d = self.direction
        perpendicular = Vector2(-d.y, d.x)
        pos = self._position

        self.pointer = (
            pos + d * length,
            pos - perpendicular * width,
            pos + perpendicular * width,
        )
        self.pointer_outline = (
            pos + d * (length + thickness),
            pos - perpendicular * (width - thickness),
            pos + perpendicular * (width + thickness),
        )

    def update(self, dt: float) -> None:
        """Spawn (when active), advance and prune particles."""
        if self.active:
            self._spawn(dt)
            self._update_pointer()
        for particle in self.particles:
            particle.update(dt)
        self.particles = [p for p in self.particles if not p.is_dead()]

    def _draw_body(self, surface: pygame.Surface) -> None:
        center = (self._position.x, self._position.y)
        pygame.draw.circle(surface, self.outline_color, center, self.radius + self.outline_thickness)
        pygame.draw.circle(surface, self.main_color, center, self.radius)

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the particles, then the emitter body and, if active, its pointer."""
        for particle in self.particles:
            particle.draw(surface)
        self._draw_body(surface)
        if self.active:
            pygame.draw.polygon(surface, self.outline_color, [tuple(p) for p in self.pointer_outline])
            pygame.draw.polygon(surface, self.main_color, [tuple(p) for p in self.pointer])

    def move_to(self, position) -> None:
        """Place the emitter at ``position``."""
        self._position = Vector2(position)
        self._update_pointer()

    def aim_at(self, target) -> None:
        """Point the emitter towards ``target``."""
        self.direction = aim_direction(target, self._position)
        self._update_pointer()

    def enable_features(self, features: Mapping[SimulationFeature, bool]) -> None:
        """Replace the enabled features; constant speed stays on."""
        self.features = dict(features)
        self.features[SimulationFeature.CONSTANT_SPEED] = True