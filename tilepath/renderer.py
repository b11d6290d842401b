"""
Pygame renderer for the demo: tiles, endpoints and the current path.
"""

from __future__ import annotations
import pygame
from typing import Optional, Sequence, Tuple, TYPE_CHECKING

from .config import (
    BACKGROUND_COLOR,
    FLOOR_COLOR,
    WALL_COLOR,
    GRID_LINE_COLOR,
    START_COLOR,
    TARGET_COLOR,
    PATH_COLOR,
    PATH_WIDTH,
    WAYPOINT_RADIUS,
)

if TYPE_CHECKING:
    from .pathfinding import PathfindingEngine
    from .tile_map import TileMap

Point = Tuple[float, float]


class Renderer:
    """Draws a tile map and a path using the engine's tile/screen conversion."""

    def __init__(self, engine: PathfindingEngine) -> None:
        self.engine = engine

    def tile_rect(self, tile: Tuple[int, int]) -> pygame.Rect:
        """Screen rectangle covered by tile."""
        tile_w, tile_h = self.engine.tile_size
        cx, cy = self.engine.tile_to_screen(tile)
        return pygame.Rect(
            int(round(cx - tile_w / 2)),
            int(round(cy - tile_h / 2)),
            int(tile_w),
            int(tile_h),
        )

    def draw(
        self,
        surface: pygame.Surface,
        tile_map: TileMap,
        start: Optional[Tuple[int, int]] = None,
        target: Optional[Tuple[int, int]] = None,
        path: Optional[Sequence[Point]] = None,
    ) -> None:
        """Draw one frame onto surface without flipping the display."""
        surface.fill(BACKGROUND_COLOR)
        for row in range(tile_map.height):
            for col in range(tile_map.width):
                rect = self.tile_rect((col, row))
                color = WALL_COLOR if tile_map.is_wall((col, row)) else FLOOR_COLOR
                pygame.draw.rect(surface, color, rect)
                pygame.draw.rect(surface, GRID_LINE_COLOR, rect, 1)
        if path:
            points = [(int(round(x)), int(round(y))) for x, y in path]
            if len(points) > 1:
                pygame.draw.lines(surface, PATH_COLOR, False, points, PATH_WIDTH)
            for point in points:
                pygame.draw.circle(surface, PATH_COLOR, point, WAYPOINT_RADIUS)
        # Endpoint markers on top of the path
        marker_radius = max(2, int(min(self.engine.tile_size) / 3))
        for tile, color in ((start, START_COLOR), (target, TARGET_COLOR)):
            if tile is None:
                continue
            cx, cy = self.engine.tile_to_screen(tile)
            pygame.draw.circle(
                surface, color, (int(round(cx)), int(round(cy))), marker_radius
            )
