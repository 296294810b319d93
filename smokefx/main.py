"""Entry point: open the window and start at the menu."""

from __future__ import annotations

import argparse
import sys

import pygame

from smokefx import config
from smokefx.game import Game
from smokefx.states.menu_state import MenuState

STATUS_FONT_SIZE = 18


def _load_font(path: str, size: int) -> pygame.font.Font:
    try:
        return pygame.font.Font(path, size)
    except (FileNotFoundError, OSError):
        print(f"Could not load font {path!r}", file=sys.stderr)
        return pygame.font.Font(None, size)


def main(argv=None) -> int:
    """Run the simulator until the window is closed."""
    parser = argparse.ArgumentParser(prog="smokefx", description="Interactive smoke particle simulator.")
    parser.add_argument("--font", default=config.FONT_PATH, help="TrueType font used for all text")
    args = parser.parse_args(argv)

    pygame.init()
    try:
        if not pygame.font.get_init():
            pygame.font.init()
        game = Game(_load_font(args.font, STATUS_FONT_SIZE))
        game.push_state(MenuState(game, font_path=args.font))
        game.run()
    finally:
        pygame.quit()
    return 0