from __future__ import annotations
import os
import json
import logging
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .config import MAP_FILE, TILE_WALL
from .node import Coordinate

logger = logging.getLogger(__name__)


class TileMap:
    """
    Wall layout of a tile grid, loaded from an external file (default) or
    provided rows. Rows are given top row first, as they appear on screen;
    internally row 0 is the bottom row so coordinates match the engine's.
    """

    def __init__(self, map_grid: Optional[Sequence[Sequence[int]]] = None) -> None:
        # Suggested endpoints as (col, row) tiles, if the map file names them
        self.start: Optional[Coordinate] = None
        self.target: Optional[Coordinate] = None
        if map_grid is None:
            map_path = os.path.join(os.path.dirname(__file__), MAP_FILE)
            try:
                with open(map_path, "r") as f:
                    data = json.load(f)
                map_grid = data["map"]
            except (OSError, ValueError, KeyError) as e:
                raise RuntimeError(
                    f"Failed to load tile map from {map_path}: {e}"
                ) from e
            self.start = self._parse_tile(data.get("start"))
            self.target = self._parse_tile(data.get("target"))
            logger.info("Loaded tile map from %s", map_path)
        rows = [list(row) for row in map_grid]
        if not rows or not rows[0]:
            raise ValueError("Tile map must have at least one row and one column")
        if any(len(row) != len(rows[0]) for row in rows):
            raise ValueError("Tile map rows must all have the same length")
        # walls[row, col], row 0 at the bottom
        self.walls = np.flipud(np.array(rows) == TILE_WALL).copy()

    @staticmethod
    def _parse_tile(value) -> Optional[Coordinate]:
        if isinstance(value, (list, tuple)) and len(value) == 2:
            try:
                return (int(value[0]), int(value[1]))
            except (TypeError, ValueError):
                logger.warning("Ignoring malformed tile %r in map file", value)
        return None

    @property
    def width(self) -> int:
        return int(self.walls.shape[1])

    @property
    def height(self) -> int:
        return int(self.walls.shape[0])

    @property
    def size(self) -> Tuple[int, int]:
        return (self.width, self.height)

    def in_bounds(self, tile: Coordinate) -> bool:
        return 0 <= tile[0] < self.width and 0 <= tile[1] < self.height

    def is_wall(self, tile: Coordinate) -> bool:
        """Return True if tile is a wall or out of bounds."""
        if not self.in_bounds(tile):
            return True
        return bool(self.walls[tile[1], tile[0]])

    def is_walkable(self, tile: Coordinate) -> bool:
        return not self.is_wall(tile)

    def set_wall(self, tile: Coordinate, wall: bool = True) -> None:
        if not self.in_bounds(tile):
            raise IndexError(f"Tile {tile} is outside the {self.width}x{self.height} map")
        self.walls[tile[1], tile[0]] = wall

    def toggle_wall(self, tile: Coordinate) -> bool:
        """Flip the wall state of tile and return the new state."""
        self.set_wall(tile, not self.is_wall(tile))
        return self.is_wall(tile)

    def clear(self) -> None:
        self.walls[:, :] = False

    def rows(self) -> List[List[int]]:
        """Return the layout as rows of tile codes, top row first."""
        return np.flipud(self.walls).astype(int).tolist()
