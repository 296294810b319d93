"""The start menu listing the available simulations."""

from __future__ import annotations

import sys
from typing import Callable, Optional

import pygame

from smokefx import config
from smokefx.game import Game
from smokefx.game_state import GameState
from smokefx.states.simulation_state import SimulationState

Measure = Callable[[str, int], tuple[int, int]]

TITLE = "SmokeFX Simulator"
TITLE_SIZE = 80
ITEM_SIZE = 50
ITEM_SPACING = 60
SIMULATION_ITEM = "Simulation: SmokeFX"
EXIT_ITEM = "Exit"

_WHITE = (255, 255, 255)
_YELLOW = (255, 255, 0)


def _centered_rect(size: tuple[int, int], center: tuple[float, float]) -> pygame.Rect:
    rect = pygame.Rect((0, 0), size)
    rect.center = (round(center[0]), round(center[1]))
    return rect


class MenuState(GameState):
    """A vertical menu navigated with the arrow keys, Enter or the mouse.

    ``measure`` gives the pixel size of a text at a font size; by default the
    font at ``font_path`` is used to measure and render.
    """

    def __init__(self, game: Game, font_path: str = config.FONT_PATH, measure: Optional[Measure] = None) -> None:
        self.game = game
        self.font_path = font_path
        self._fonts: dict[int, pygame.font.Font] = {}
        self._font_failed = False
        self._measure = measure or self._measure_with_font
        self.items: tuple[str, ...] = (SIMULATION_ITEM, EXIT_ITEM)
        self.selected_index = 0

        width, height = config.WINDOW_SIZE
        self.title_rect = _centered_rect(self._measure(TITLE, TITLE_SIZE), (width / 2, height / 2 - 150))

        sizes = [self._measure(item, ITEM_SIZE) for item in self.items]
        total_height = sum(h + 10 for _, h in sizes)
        start_y = height / 2 - total_height / 2 + 50
        self.item_rects: list[pygame.Rect] = [
            _centered_rect(size, (width / 2, start_y + i * ITEM_SPACING)) for i, size in enumerate(sizes)
        ]

    def _font(self, size: int) -> pygame.font.Font:
        font = self._fonts.get(size)
        if font is not None:
            return font
        if not pygame.font.get_init():
            pygame.font.init()
        try:
            font = pygame.font.Font(self.font_path, size)
        except (FileNotFoundError, OSError):
            if not self._font_failed:
                print(f"Could not load menu font {self.font_path!r}", file=sys.stderr)
                self._font_failed = True
            font = pygame.font.Font(None, size)
        self._fonts[size] = font
        return font

    def _measure_with_font(self, text: str, size: int) -> tuple[int, int]:
        return self._font(size).size(text)

    def select_next(self) -> None:
        """Move the highlight down, wrapping to the first item."""
        if self.items:
            self.selected_index = (self.selected_index + 1) % len(self.items)

    def select_previous(self) -> None:
        """Move the highlight up, wrapping to the last item."""
        if self.items:
            self.selected_index = (self.selected_index - 1) % len(self.items)

    def activate_selected(self) -> None:
        """Open the simulation or close the game, depending on the selection."""
        if not self.items:
            return
        if self.selected_index == 0:
            self.game.push_state(SimulationState(self.game))
        elif self.selected_index == 1:
            self.game.close()

    def _item_at(self, pos) -> Optional[int]:
        return next((i for i, rect in enumerate(self.item_rects) if rect.collidepoint(pos)), None)

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_UP:
                self.select_previous()
            elif event.key == pygame.K_DOWN:
                self.select_next()
            elif event.key == pygame.K_RETURN:
                self.activate_selected()
        elif event.type == pygame.MOUSEMOTION:
            index = self._item_at(event.pos)
            if index is not None:
                self.selected_index = index
        elif event.type == pygame.MOUSEBUTTONDOWN:
            if event.button == pygame.BUTTON_LEFT:
                index = self._item_at(event.pos)
                if index is not None:
                    self.selected_index = index
                    self.activate_selected()

    def update(self, dt: float) -> None:
        pass

    def _blit_text(self, surface: pygame.Surface, text: str, size: int, color, rect: pygame.Rect) -> None:
        rendered = self._font(size).render(text, True, color)
        surface.blit(rendered, rendered.get_rect(center=rect.center))

    def draw(self, surface: pygame.Surface) -> None:
        self._blit_text(surface, TITLE, TITLE_SIZE, _WHITE, self.title_rect)
        for i, (item, rect) in enumerate(zip(self.items, self.item_rects)):
            color = _YELLOW if i == self.selected_index else _WHITE
            self._blit_text(surface, item, ITEM_SIZE, color, rect)