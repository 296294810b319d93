"""The main loop and its stack of screens."""

from __future__ import annotations

from typing import Optional

import pygame

from smokefx import config
from smokefx.game_state import GameState


class Game:
    """Owns the window and runs the state on top of the state stack.

    Escape pops the top state, or closes the window when only one is left.
    """

    def __init__(self, font: Optional[pygame.font.Font] = None, surface: Optional[pygame.Surface] = None) -> None:
        self.font = font
        if surface is None:
            pygame.init()
            surface = pygame.display.set_mode(config.WINDOW_SIZE)
            pygame.display.set_caption(config.WINDOW_TITLE)
        self.window = surface
        self.is_open = True
        self._states: list[GameState] = []

    @property
    def states(self) -> tuple[GameState, ...]:
        """The state stack, bottom first."""
        return tuple(self._states)

    @property
    def top(self) -> Optional[GameState]:
        return self._states[-1] if self._states else None

    def close(self) -> None:
        """Stop the main loop after the current frame."""
        self.is_open = False

    def _dispatch(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.close()
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            if len(self._states) > 1:
                self.pop_state()
            else:
                self.close()
            return
        if self._states:
            self._states[-1].handle_event(event)

    def run(self) -> None:
        """Process events, update and draw until the window is closed."""
        clock = pygame.time.Clock()
        while self.is_open:
            dt = clock.tick(config.MAX_FRAMERATE) / 1000.0

            for event in pygame.event.get():
                self._dispatch(event)

            if self._states:
                self._states[-1].update(dt)
            else:
                self.close()

            self.window.fill((0, 0, 0))
            if self._states:
                self._states[-1].draw(self.window)
            if pygame.display.get_surface() is self.window:
                pygame.display.flip()

    def push_state(self, state: GameState) -> None:
        """Put ``state`` on top of the stack."""
        self._states.append(state)

    def pop_state(self) -> None:
        """Remove the top state, if any."""
        if self._states:
            self._states.pop()

    def change_state(self, state: GameState) -> None:
        """Replace the top state with ``state``."""
        self.pop_state()
        self._states.append(state)