"""A simple aimable emitter that launches particles at a fixed rate."""

from __future__ import annotations

import time
from typing import Callable, Optional

import pygame
from pygame.math import Vector2

from smokefx import config
from smokefx.particle import Particle

Triangle = tuple[Vector2, Vector2, Vector2]


class Emitter:
    """Emitter that, while casting, launches particles towards the mouse.

    ``pointer`` and ``pointer_outline`` each hold two triangles that together
    form the arrow drawn in front of the emitter while it is casting.
    """

    POINTER_TIP_LENGTH = 11.5
    OUTLINE_SPREAD = 1.20
    OUTLINE_TIP_STRETCH = 1.35

    def __init__(self, position, clock: Callable[[], float] = time.monotonic) -> None:
        self._position = Vector2(position)
        self.radius = config.EMITTER_RADIUS
        self.outline_thickness = config.EMITTER_OUTLINE_THICKNESS
        self.main_color = pygame.Color(config.EMITTER_MAIN_COLOR)
        self.outline_color = pygame.Color(config.EMITTER_OUTLINE_COLOR)
        self.casting = False
        self.direction = Vector2(0, 0)
        self.pointer: tuple[Triangle, ...] = ()
        self.pointer_outline: tuple[Triangle, ...] = ()
        self.clock = clock
        self._spawn_timer = 0.0

    @property
    def position(self) -> Vector2:
        return Vector2(self._position)

    def update(self, mouse_position) -> None:
        """Aim at ``mouse_position`` and rebuild the pointer geometry."""
        offset = Vector2(mouse_position) - self._position
        length = offset.length() or 1.0
        d = offset / length
        self.direction = d
        perpendicular = Vector2(-d.y, d.x)
        pos = self._position
        radius = self.radius
        thickness = self.outline_thickness

        connection = pos + d * radius
        tip = pos + d * (radius + self.POINTER_TIP_LENGTH)
        self.pointer = (
            (pos + perpendicular * radius, tip, Vector2(connection)),
            (pos - perpendicular * radius, Vector2(tip), Vector2(connection)),
        )

        spread = radius + thickness * self.OUTLINE_SPREAD
        outline_tip_length = self.POINTER_TIP_LENGTH + thickness
        outline_tip = pos + d * (radius + outline_tip_length * self.OUTLINE_TIP_STRETCH)
        self.pointer_outline = (
            (pos + perpendicular * spread, outline_tip, Vector2(connection)),
            (pos - perpendicular * spread, Vector2(outline_tip), Vector2(connection)),
        )

    def spawn(self, dt: float) -> Optional[Particle]:
        """Advance the spawn timer; return a new particle when one is due."""
        if not self.casting:
            return None
        self._spawn_timer += dt
        if self._spawn_timer <= config.PARTICLE_SPAWN_TIME:
            return None
        self._spawn_timer -= config.PARTICLE_SPAWN_TIME
        return Particle(
            position=self._position,
            velocity=self.direction * config.PARTICLE_INIT_SPEED,
            color=pygame.Color(255, 255, 255),
            size=config.PARTICLE_SIZE,
            lifetime=config.PARTICLE_LIFETIME,
            clock=self.clock,
        )

    def _draw_body(self, surface: pygame.Surface) -> None:
        center = (self._position.x, self._position.y)
        pygame.draw.circle(surface, self.outline_color, center, self.radius + self.outline_thickness)
        pygame.draw.circle(surface, self.main_color, center, self.radius)

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the emitter; the arrow is shown only while casting."""
        if not self.casting:
            self._draw_body(surface)
            return
        for triangle in self.pointer_outline:
            pygame.draw.polygon(surface, self.outline_color, [tuple(p) for p in triangle])
        self._draw_body(surface)
        for triangle in self.pointer:
            pygame.draw.polygon(surface, self.main_color, [tuple(p) for p in triangle])