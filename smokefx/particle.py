"""A single square smoke particle with motion, rotation, growth and fading."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable

import pygame
from pygame.math import Vector2


@dataclass(eq=False)
class Particle:
    """A square particle that moves, spins, scales and fades over its lifetime.

    Rotation is in degrees, sizes in pixels, alpha in the 0-255 range and all
    rates are per second. ``clock`` returns the current time in seconds.
    """

    position: Vector2
    velocity: Vector2
    color: pygame.Color
    size: float
    lifetime: float
    acceleration: Vector2 = field(default_factory=Vector2)
    rotation_speed: float = 0.0
    scale_rate: float = 0.0
    alpha_decay_rate: float = 0.0
    clock: Callable[[], float] = field(default=time.monotonic, repr=False)
    rotation: float = field(init=False, default=0.0)
    alpha: float = field(init=False)
    initial_size: float = field(init=False)
    initial_color: pygame.Color = field(init=False, repr=False)
    spawn_time: float = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.position = Vector2(self.position)
        self.velocity = Vector2(self.velocity)
        self.acceleration = Vector2(self.acceleration)
        self.color = pygame.Color(self.color)
        self.initial_color = pygame.Color(self.color)
        self.initial_size = float(self.size)
        self.size = float(self.size)
        self.alpha = float(self.color.a)
        self.spawn_time = self.clock()

    @property
    def age(self) -> float:
        """Seconds elapsed since the particle was created."""
        return self.clock() - self.spawn_time

    def update(self, dt: float) -> None:
        """Advance the particle by ``dt`` seconds."""
        if self.age >= self.lifetime and self.alpha <= 0.0:
            return

        self.velocity += self.acceleration * dt
        self.position += self.velocity * dt

        if self.rotation_speed != 0.0:
            self.rotation += self.rotation_speed * dt
            if self.rotation >= 360.0:
                self.rotation -= 360.0
            elif self.rotation < 0.0:
                self.rotation += 360.0

        if self.scale_rate != 0.0:
            self.size = max(0.0, self.size + self.scale_rate * dt)

        if self.alpha != 0.0:
            self.alpha -= self.alpha_decay_rate * dt
            self.alpha = min(255.0, max(0.0, self.alpha))
            self.color.a = int(self.alpha)

    def draw(self, surface: pygame.Surface) -> None:
        """Blit the particle centred on its position, unless fully transparent."""
        side = int(round(self.size))
        if self.color.a <= 0 or side <= 0:
            return
        square = pygame.Surface((side, side), pygame.SRCALPHA)
        square.fill(self.color)
        if self.rotation:
            square = pygame.transform.rotate(square, -self.rotation)
        rect = square.get_rect(center=(round(self.position.x), round(self.position.y)))
        surface.blit(square, rect)

    def is_dead(self) -> bool:
        """True once the lifetime has elapsed or the particle is invisible."""
        return self.age >= self.lifetime or self.alpha <= 0.0