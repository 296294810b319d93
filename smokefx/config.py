"""Window, emitter and particle settings shared by the whole simulator."""

# Window
WINDOW_SIZE: tuple[int, int] = (1920, 1080)
WINDOW_WIDTH, WINDOW_HEIGHT = WINDOW_SIZE
MAX_FRAMERATE: int = 60
CONFIG_DELTA_TIME: float = 1.0 / MAX_FRAMERATE
WINDOW_TITLE: str = "SmokeFX"

# Emitter
EMITTER_RADIUS: float = 10.0
EMITTER_OUTLINE_THICKNESS: float = 5.0
EMITTER_START_POSITION: tuple[float, float] = (50.0, WINDOW_HEIGHT * 0.5)
EMITTER_MAIN_COLOR: tuple[int, int, int] = (255, 128, 0)
EMITTER_OUTLINE_COLOR: tuple[int, int, int] = (192, 192, 192)

# Particles
MAX_PARTICLES: int = 2000
PARTICLE_LIFETIME: float = 10.0
PARTICLE_INIT_SPEED: float = 300.0
PARTICLE_SPAWN_RATE: float = 10.0  # particles per second
PARTICLE_SPAWN_TIME: float = 1.0 / PARTICLE_SPAWN_RATE
PARTICLE_SIZE: float = 30.0

FONT_PATH: str = "assets/fonts/Roboto-Italic.ttf"