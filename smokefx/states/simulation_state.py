"""The smoke simulation screen with toggleable particle effects."""

from __future__ import annotations

import time
from typing import Callable

import pygame

from smokefx import config
from smokefx.game import Game
from smokefx.game_state import GameState
from smokefx.smoke_maker import SimulationFeature, SmokeMaker

_FEATURE_KEYS: dict[int, SimulationFeature] = {
    pygame.K_1: SimulationFeature.SMOOTH_STOP,
    pygame.K_2: SimulationFeature.DECREASING_ALPHA,
    pygame.K_3: SimulationFeature.INCREASING_SIZE,
    pygame.K_4: SimulationFeature.ROTATION,
    pygame.K_6: SimulationFeature.STEAM_EFFECT,
}

_LABELS: dict[SimulationFeature, str] = {
    SimulationFeature.CONSTANT_SPEED: "Constant Speed",
    SimulationFeature.SMOOTH_STOP: "Smooth Stop",
    SimulationFeature.DECREASING_ALPHA: "Decreasing Alpha",
    SimulationFeature.INCREASING_SIZE: "Increasing Size",
    SimulationFeature.ROTATION: "Rotation",
    SimulationFeature.TEXTURE: "Texture",
    SimulationFeature.STEAM_EFFECT: "Steam Effect",
}

_STATUS_LINES: tuple[tuple[int, SimulationFeature], ...] = (
    (1, SimulationFeature.SMOOTH_STOP),
    (2, SimulationFeature.DECREASING_ALPHA),
    (3, SimulationFeature.INCREASING_SIZE),
    (4, SimulationFeature.ROTATION),
    (6, SimulationFeature.STEAM_EFFECT),
)

_TEXT_COLOR = (255, 255, 255)


def _on_off(enabled: bool) -> str:
    return "ON" if enabled else "OFF"


class SimulationState(GameState):
    """Holds a smoke maker driven by the mouse; number keys toggle effects.

    The left mouse button switches the emitter on while held, moving the
    mouse aims it, and Escape leaves the screen.
    """

    def __init__(self, game: Game, clock: Callable[[], float] = time.monotonic) -> None:
        self.game = game
        self.smoke_maker = SmokeMaker(
            config.EMITTER_START_POSITION,
            config.EMITTER_MAIN_COLOR,
            config.EMITTER_OUTLINE_COLOR,
            config.MAX_PARTICLES,
            config.PARTICLE_LIFETIME,
            (255, 255, 255),
            config.PARTICLE_SIZE,
            (1.0, 0.0),
            config.PARTICLE_INIT_SPEED,
            config.PARTICLE_SPAWN_RATE,
            clock=clock,
        )
        self.features: dict[SimulationFeature, bool] = dict.fromkeys(SimulationFeature, False)
        self.features[SimulationFeature.CONSTANT_SPEED] = True
        self.active = False
        self._apply_features()

    def _apply_features(self) -> None:
        self.smoke_maker.enable_features(self.features)

    def _set_active(self, active: bool) -> None:
        self.active = active
        self.smoke_maker.active = active

    def toggle_feature(self, feature: SimulationFeature) -> bool:
        """Flip ``feature``, report it and pass it on; return its new state."""
        enabled = not self.features.get(feature, False)
        self.features[feature] = enabled
        print(f"{_LABELS[feature]}: {_on_off(enabled)}")
        self._apply_features()
        return enabled

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.MOUSEMOTION:
            self.smoke_maker.aim_at(event.pos)

        if event.type == pygame.MOUSEBUTTONDOWN:
            if event.button == pygame.BUTTON_LEFT:
                self._set_active(True)
        elif event.type == pygame.MOUSEBUTTONUP:
            if event.button == pygame.BUTTON_LEFT:
                self._set_active(False)
        elif event.type == pygame.KEYDOWN:
            feature = _FEATURE_KEYS.get(event.key)
            if feature is not None:
                self.toggle_feature(feature)
            elif event.key == pygame.K_ESCAPE:
                self.game.pop_state()
            self._apply_features()

    def update(self, dt: float) -> None:
        self.smoke_maker.update(dt)

    def status_text(self) -> str:
        """The help text listing each effect and whether it is on."""
        lines = ["Funcionalidades Ativas:"]
        lines.extend(
            f"{number} - {_LABELS[feature]}: {_on_off(self.features.get(feature, False))}"
            for number, feature in _STATUS_LINES
        )
        lines.append("")
        lines.append("Mouse Esquerdo: ON/OFF emissor")
        lines.append("ESC: Sair")
        return "\n".join(lines)

    def _draw_status(self, surface: pygame.Surface) -> None:
        font = self.game.font
        if font is None:
            return
        y = 0
        for line in self.status_text().split("\n"):
            if line:
                surface.blit(font.render(line, True, _TEXT_COLOR), (0, y))
            y += font.get_linesize()

    def draw(self, surface: pygame.Surface) -> None:
        surface.fill((0, 0, 0))
        self.smoke_maker.draw(surface)
        self._draw_status(surface)