# smokefx

An interactive smoke particle simulator built on pygame. A round emitter
sits on the left edge of a 1920×1080 window; hold the left mouse button to
make it fire square particles toward the mouse pointer, and switch effects
on and off while it runs.

## Installing

```
pip install .
```

## Running

```
smokefx
```

This opens a menu with two items, **Simulation: SmokeFX** and **Exit**.
Choose with the Up/Down keys and Enter, or hover and click with the mouse.
Escape on the menu closes the window.

The `--font` option names the TrueType font used for all text (default
`assets/fonts/Roboto-Italic.ttf`). If it cannot be loaded, a message is
printed to standard error and pygame's built-in font is used instead.

In the simulation:

| Input             | Effect                          |
|-------------------|---------------------------------|
| Left mouse button | Hold to emit particles          |
| Mouse movement    | Aims the emitter                |
| `1`               | Toggle smooth stop              |
| `2`               | Toggle decreasing alpha         |
| `3`               | Toggle increasing size          |
| `4`               | Toggle rotation                 |
| `6`               | Toggle steam effect             |
| `Esc`             | Back to the menu                |

Each toggle prints its new state (for example `Smooth Stop: ON`), and the
list of effects with their state is drawn in the top-left corner. Particles
are emitted at 10 per second, up to 2000 at once, and disappear after ten
seconds.

A simpler single-screen version with no menu, in which particles travel at
constant speed and are removed once they leave the window:

```
smokefx-classic
```

## Using the pieces

The simulation parts work without opening a window:

```python
from smokefx import config
from smokefx.smoke_maker import SmokeMaker, SimulationFeature

maker = SmokeMaker(
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
)
maker.aim_at((800.0, 540.0))
maker.enable_features({SimulationFeature.SMOOTH_STOP: True})
maker.active = True
maker.update(0.5)
print(len(maker.particles))
```

Other pieces:

- `smokefx.particle.Particle` – one square particle with `update(dt)`,
  `draw(surface)` and `is_dead()`.
- `smokefx.emitter.Emitter` – the emitter of the classic demo; `spawn(dt)`
  returns a new `Particle` when one is due.
- `smokefx.game.Game` – the main loop and its state stack (`push_state`,
  `pop_state`, `change_state`, `run`). It can be given an existing surface
  instead of opening a window.
- `smokefx.states.menu_state.MenuState`,
  `smokefx.states.simulation_state.SimulationState` and
  `smokefx.states.constant_speed_state.ConstantSpeedState` – the screens.
- `smokefx.classic` – `process_events`, `cull_particles` and the demo's `main`.

Drawing takes any `pygame.Surface`. The particle and emitter classes accept
a `clock` callable, so their timing can be controlled.

## Limitations

Only smooth stop currently changes how particles behave: it slows each
particle to a halt over its lifetime. The decreasing alpha, increasing size,
rotation and steam effect toggles are recorded and shown in the status list,
but emitted particles do not use them yet. There is no texture support, and
settings are fixed in `smokefx.config`; nothing is saved between runs.

## Tests

```
pip install .[test]
pytest
```