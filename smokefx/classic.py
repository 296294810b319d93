"""Stand-alone emitter demo without the menu and state stack."""

from __future__ import annotations

import argparse
from typing import Iterable

import pygame

from smokefx import config
from smokefx.emitter import Emitter
from smokefx.particle import Particle


def process_events(events: Iterable[pygame.event.Event], emitter: Emitter) -> bool:
    """Apply input events to ``emitter``; return False once a close is requested."""
    keep_open = True
    for event in events:
        if event.type == pygame.QUIT:
            keep_open = False
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                keep_open = False
        elif event.type == pygame.MOUSEBUTTONDOWN:
            if event.button == pygame.BUTTON_LEFT:
                emitter.casting = True
        elif event.type == pygame.MOUSEBUTTONUP:
            if event.button == pygame.BUTTON_LEFT:
                emitter.casting = False
    return keep_open


def cull_particles(particles: Iterable[Particle], width: float, height: float) -> list[Particle]:
    """Keep only the particles whose position lies within the window."""
    return [p for p in particles if 0 <= p.position.x <= width and 0 <= p.position.y <= height]


def main(argv=None) -> int:
    """Run the emitter demo until the window is closed."""
    parser = argparse.ArgumentParser(
        prog="smokefx-classic",
        description="Hold the left mouse button to launch particles towards the cursor.",
    )
    parser.parse_args(argv)

    pygame.init()
    window = pygame.display.set_mode(config.WINDOW_SIZE)
    pygame.display.set_caption(config.WINDOW_TITLE)

    emitter = Emitter(config.EMITTER_START_POSITION)
    particles: list[Particle] = []
    clock = pygame.time.Clock()

    running = True
    try:
        while running:
            dt = clock.tick(config.MAX_FRAMERATE) / 1000.0

            running = process_events(pygame.event.get(), emitter)
            emitter.update(pygame.mouse.get_pos())

            particle = emitter.spawn(dt)
            if particle is not None:
                particles.append(particle)

            for particle in particles:
                particle.update(dt)
            particles = cull_particles(particles, config.WINDOW_WIDTH, config.WINDOW_HEIGHT)

            window.fill((0, 0, 0))
            for particle in particles:
                particle.draw(window)
            emitter.draw(window)
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0