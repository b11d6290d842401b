from __future__ import annotations
import logging
import pygame
from typing import Optional, Tuple

from .tile_map import TileMap
from .pathfinding import Heuristic, Origin, PathfindingEngine
from .renderer import Renderer
from .input_handler import InputHandler
from .config import TILE_WIDTH, TILE_HEIGHT, FPS, WINDOW_TITLE

logger = logging.getLogger(__name__)


class Demo:
    """Interactive demo: edit walls, place endpoints and watch the A* path update."""

    def __init__(
        self,
        tile_map: Optional[TileMap] = None,
        clock: Optional[pygame.time.Clock] = None,
    ) -> None:
        pygame.init()
        self.tile_map = tile_map or TileMap()
        # Pygame's y axis points down, so positions are measured from the top-left
        self.engine = PathfindingEngine.for_tile_map(
            self.tile_map, (TILE_WIDTH, TILE_HEIGHT), origin=Origin.TOP_LEFT
        )
        self.screen_width = self.tile_map.width * TILE_WIDTH
        self.screen_height = self.tile_map.height * TILE_HEIGHT
        self.screen = pygame.display.set_mode(
            (self.screen_width, self.screen_height)
        )
        # Clock for frame rate (injectable for testing)
        self.clock = clock or pygame.time.Clock()
        self.fps = FPS
        self.renderer = Renderer(self.engine)
        self.input = InputHandler()
        self.start: Optional[Tuple[int, int]] = self.tile_map.start
        self.target: Optional[Tuple[int, int]] = self.tile_map.target
        # Right clicks alternate between placing the start and the target
        self._place_start = True
        self.path = None
        self.running = True
        self.recompute_path()

    def caption(self) -> str:
        engine = self.engine
        return (
            f"{WINDOW_TITLE} | heuristic={engine.heuristic.value}"
            f" diagonal={engine.allow_diagonal}"
            f" ignore_barriers={engine.ignore_diagonal_barriers}"
            f" cross_borders={engine.allow_crossing_borders}"
        )

    def handle_events(self) -> None:
        """Process input via InputHandler and apply edits and setting changes."""
        self.input.process_events()
        if self.input.should_quit():
            self.running = False
            return
        changed = False
        for pos in self.input.wall_clicks():
            changed |= self.toggle_wall(self.engine.screen_to_tile(pos))
        for pos in self.input.endpoint_clicks():
            changed |= self.place_endpoint(self.engine.screen_to_tile(pos))
        if self.input.toggle_diagonal_pressed():
            self.engine.allow_diagonal = not self.engine.allow_diagonal
            changed = True
        if self.input.cycle_heuristic_pressed():
            self.cycle_heuristic()
            changed = True
        if self.input.toggle_barriers_pressed():
            self.engine.ignore_diagonal_barriers = (
                not self.engine.ignore_diagonal_barriers
            )
            changed = True
        if self.input.toggle_borders_pressed():
            self.engine.allow_crossing_borders = (
                not self.engine.allow_crossing_borders
            )
            changed = True
        if self.input.clear_pressed():
            self.tile_map.clear()
            changed = True
        if changed:
            logger.info("Settings: %s", self.caption())
            self.recompute_path()

    def toggle_wall(self, tile: Tuple[int, int]) -> bool:
        """Flip a wall, leaving endpoints and off-map tiles alone."""
        if not self.tile_map.in_bounds(tile) or tile in (self.start, self.target):
            return False
        self.tile_map.toggle_wall(tile)
        return True

    def place_endpoint(self, tile: Tuple[int, int]) -> bool:
        """Place the start or the target on tile, alternating between the two."""
        if not self.tile_map.in_bounds(tile):
            return False
        if self._place_start:
            self.start = tile
        else:
            self.target = tile
        self._place_start = not self._place_start
        return True

    def cycle_heuristic(self) -> Heuristic:
        kinds = list(Heuristic)
        index = kinds.index(self.engine.heuristic)
        self.engine.heuristic = kinds[(index + 1) % len(kinds)]
        return self.engine.heuristic

    def recompute_path(self) -> None:
        if self.start is None or self.target is None:
            self.path = None
        else:
            self.path = self.engine.find_path(
                self.engine.tile_to_screen(self.start),
                self.engine.tile_to_screen(self.target),
            )
        pygame.display.set_caption(self.caption())

    def render(self) -> None:
        """Draw the current frame and present it."""
        self.renderer.draw(
            self.screen, self.tile_map, self.start, self.target, self.path
        )
        pygame.display.flip()

    def run(self) -> None:
        """Main loop: handle events and render until the user quits."""
        while self.running:
            self.clock.tick(self.fps)
            self.handle_events()
            if not self.running:
                break
            self.render()
        pygame.quit()
