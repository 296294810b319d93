"""A screen showing a single emitter that follows the mouse."""

from __future__ import annotations

from typing import Callable, Optional

import pygame

from smokefx import config
from smokefx.emitter import Emitter
from smokefx.game import Game
from smokefx.game_state import GameState


class ConstantSpeedState(GameState):
    """Shows an emitter aiming at the mouse; Escape leaves the screen."""

    def __init__(self, game: Game, mouse_position: Optional[Callable[[], tuple[int, int]]] = None) -> None:
        self.game = game
        self.emitter = Emitter(config.EMITTER_START_POSITION)
        self._mouse_position = mouse_position or pygame.mouse.get_pos

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            self.game.pop_state()

    def update(self, dt: float) -> None:
        self.emitter.update(self._mouse_position())

    def draw(self, surface: pygame.Surface) -> None:
        self.emitter.draw(surface)