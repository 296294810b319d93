"""Base class for screens managed by the game's state stack."""

from __future__ import annotations

import pygame


class GameState:
    """A screen that reacts to events, advances in time and draws itself.

    Every hook does nothing by default; subclasses override what they need.
    """

    def handle_event(self, event: pygame.event.Event) -> None:
        """React to a single input event."""

    def update(self, dt: float) -> None:
        """Advance the state by ``dt`` seconds."""

    def draw(self, surface: pygame.Surface) -> None:
        """Render the state onto ``surface``."""