"""Interactive smoke particle simulator: particles, emitters, game loop and screens."""

__version__ = "0.1.0"