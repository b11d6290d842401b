import logging

import pygame
import pytest

from tilepath.pathfinding import Heuristic
from tilepath.tile_map import TileMap


@pytest.fixture(autouse=True)
def stub_pygame_display(monkeypatch):
    """Stub out pygame init, display and event queue so the Demo runs headless."""
    monkeypatch.setattr(pygame, "init", lambda: None)
    monkeypatch.setattr(pygame, "quit", lambda: None)
    monkeypatch.setattr(
        pygame.display, "set_mode", lambda size, *args, **kwargs: pygame.Surface(size)
    )
    monkeypatch.setattr(
        pygame.display, "set_caption", lambda *args, **kwargs: None
    )
    flips = []
    monkeypatch.setattr(pygame.display, "flip", lambda: flips.append(True))
    monkeypatch.setattr(pygame.event, "get", lambda: [])
    return flips


class DummyClock:
    def tick(self, fps):
        return 0


def make_demo(grid=None):
    from tilepath.demo import Demo

    tile_map = TileMap(map_grid=grid or [[0, 0, 0], [0, 0, 0], [0, 0, 0]])
    return Demo(tile_map=tile_map, clock=DummyClock())


def post(monkeypatch, *events):
    monkeypatch.setattr(pygame.event, "get", lambda: list(events))


def click(demo, tile, button):
    pos = demo.engine.tile_to_screen(tile)
    return pygame.event.Event(
        pygame.MOUSEBUTTONDOWN, button=button, pos=(int(pos[0]), int(pos[1]))
    )


def test_demo_window_matches_map():
    demo = make_demo([[0, 0, 0, 0], [0, 0, 0, 0]])
    assert (demo.screen_width, demo.screen_height) == (128, 64)
    assert demo.screen.get_size() == (128, 64)
    assert demo.start is None and demo.target is None
    assert demo.path is None


def test_default_map_has_path():
    from tilepath.demo import Demo

    demo = Demo(clock=DummyClock())
    assert demo.start == (1, 1) and demo.target == (18, 13)
    assert demo.path is not None
    assert demo.path[0] == demo.engine.tile_to_screen(demo.start)
    assert demo.path[-1] == demo.engine.tile_to_screen(demo.target)


def test_right_clicks_place_start_then_target(monkeypatch):
    demo = make_demo()
    post(monkeypatch, click(demo, (0, 0), 3), click(demo, (2, 2), 3))
    demo.handle_events()
    assert demo.start == (0, 0)
    assert demo.target == (2, 2)
    # Open 3x3 grid with diagonals: straight across the diagonal
    assert demo.path == [demo.engine.tile_to_screen(t) for t in ((0, 0), (1, 1), (2, 2))]


def test_left_click_toggles_wall_and_replans(monkeypatch):
    demo = make_demo()
    demo.place_endpoint((0, 0))
    demo.place_endpoint((2, 2))
    post(monkeypatch, click(demo, (1, 1), 1))
    demo.handle_events()
    assert demo.tile_map.is_wall((1, 1))
    assert demo.engine.tile_to_screen((1, 1)) not in demo.path
    assert len(demo.path) == 4


def test_walls_cannot_cover_endpoints():
    demo = make_demo()
    demo.place_endpoint((0, 0))
    assert demo.toggle_wall((0, 0)) is False
    assert demo.toggle_wall((5, 5)) is False
    assert not demo.tile_map.is_wall((0, 0))


def test_endpoint_off_map_is_ignored():
    demo = make_demo()
    assert demo.place_endpoint((3, 0)) is False
    assert demo.start is None


def test_setting_keys_change_engine(monkeypatch, caplog):
    demo = make_demo()
    post(
        monkeypatch,
        pygame.event.Event(pygame.KEYDOWN, key=pygame.K_g, mod=0),
        pygame.event.Event(pygame.KEYDOWN, key=pygame.K_h, mod=0),
        pygame.event.Event(pygame.KEYDOWN, key=pygame.K_b, mod=0),
        pygame.event.Event(pygame.KEYDOWN, key=pygame.K_c, mod=0),
    )
    with caplog.at_level(logging.INFO, logger="tilepath.demo"):
        demo.handle_events()
    assert demo.engine.allow_diagonal is False
    assert demo.engine.heuristic is Heuristic.EUCLIDEAN
    assert demo.engine.ignore_diagonal_barriers is True
    assert demo.engine.allow_crossing_borders is False
    assert "heuristic=euclidean" in caplog.text


def test_cycle_heuristic_wraps():
    demo = make_demo()
    assert demo.cycle_heuristic() is Heuristic.EUCLIDEAN
    assert demo.cycle_heuristic() is Heuristic.CHEBYSHEV
    assert demo.cycle_heuristic() is Heuristic.MANHATTAN


def test_clear_key_removes_walls(monkeypatch):
    demo = make_demo([[1, 1, 0], [0, 1, 0], [0, 0, 0]])
    post(monkeypatch, pygame.event.Event(pygame.KEYDOWN, key=pygame.K_r, mod=0))
    demo.handle_events()
    assert not demo.tile_map.walls.any()


def test_run_stops_on_quit(monkeypatch, stub_pygame_display):
    demo = make_demo()
    frames = []

    def events():
        frames.append(True)
        if len(frames) > 2:
            return [pygame.event.Event(pygame.QUIT)]
        return []

    monkeypatch.setattr(pygame.event, "get", events)
    demo.run()
    assert demo.running is False
    # Two frames rendered before the quit event arrived
    assert len(stub_pygame_display) == 2
