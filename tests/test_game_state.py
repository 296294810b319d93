import pygame

from smokefx.game_state import GameState


class Counter(GameState):
    def __init__(self):
        self.elapsed = 0.0

    def update(self, dt):
        self.elapsed += dt


def test_base_draw_leaves_surface_untouched():
    surface = pygame.Surface((8, 8))
    surface.fill((12, 34, 56))
    GameState().draw(surface)
    assert surface.get_at((3, 3)) == pygame.Color(12, 34, 56)


def test_base_hooks_return_none():
    state = GameState()
    event = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE)
    assert state.handle_event(event) is None
    assert state.update(0.5) is None


def test_subclass_override_is_used_and_defaults_remain():
    state = Counter()
    state.update(0.25)
    state.update(0.5)
    assert state.elapsed == 0.75

    event = pygame.event.Event(pygame.MOUSEMOTION, pos=(1, 2))
    assert GameState.handle_event(state, event) is None
    assert GameState.update(state, 1.0) is None
    assert state.elapsed == 0.75

    surface = pygame.Surface((4, 4))
    surface.fill((7, 8, 9))
    GameState.draw(state, surface)
    assert surface.get_at((1, 1)) == pygame.Color(7, 8, 9)
    assert state.elapsed == 0.75