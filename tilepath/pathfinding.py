"""
Pathfinding utilities: implements grid-based A* search and conversion
between screen positions and tile coordinates.
"""
from __future__ import annotations
import heapq
import itertools
import logging
import math
from enum import Enum
from typing import Callable, Dict, Iterator, List, Optional, Sequence, Tuple, TYPE_CHECKING

from .config import (
    STRAIGHT_COST,
    DIAGONAL_COST,
    HEURISTIC_SCALE,
    DEFAULT_HEURISTIC,
    DEFAULT_ALLOW_DIAGONAL,
    DEFAULT_IGNORE_DIAGONAL_BARRIERS,
    DEFAULT_ALLOW_CROSSING_BORDERS,
    DEFAULT_ORIGIN,
)
from .node import Coordinate, GridNode

if TYPE_CHECKING:
    from .tile_map import TileMap

logger = logging.getLogger(__name__)

Point = Tuple[float, float]
WalkableFn = Callable[[Coordinate], bool]

# Neighbour offsets as (d_col, d_row); N, E, S, W then NE, SE, SW, NW
CARDINAL_STEPS = ((0, 1), (1, 0), (0, -1), (-1, 0))
DIAGONAL_STEPS = ((1, 1), (1, -1), (-1, -1), (-1, 1))


class Heuristic(str, Enum):
    """Distance formula used to estimate the cost from a tile to the target."""

    # Taxicab distance; suited to 4-directional movement
    MANHATTAN = "manhattan"
    # Straight-line distance; suited to movement in any direction
    EUCLIDEAN = "euclidean"
    # Diagonal distance; suited to 8-directional movement
    CHEBYSHEV = "chebyshev"


class Origin(str, Enum):
    """Screen corner that positions are measured from."""

    BOTTOM_LEFT = "bottom_left"
    TOP_LEFT = "top_left"


def heuristic_cost(a: Coordinate, b: Coordinate, kind=Heuristic.MANHATTAN) -> float:
    """Estimated cost between two tiles, on the same scale as the step costs."""
    kind = Heuristic(kind)
    dx = abs(a[0] - b[0])
    dy = abs(a[1] - b[1])
    if kind is Heuristic.MANHATTAN:
        return HEURISTIC_SCALE * (dx + dy)
    if kind is Heuristic.EUCLIDEAN:
        return HEURISTIC_SCALE * math.sqrt(dx * dx + dy * dy)
    return HEURISTIC_SCALE * max(dx, dy)


def step_cost(a: Coordinate, b: Coordinate) -> int:
    """Cost of moving between two adjacent tiles."""
    if a[0] != b[0] and a[1] != b[1]:
        return DIAGONAL_COST
    return STRAIGHT_COST


def path_cost(tiles: Sequence[Coordinate]) -> int:
    """Total movement cost of a tile path (0 for fewer than two tiles)."""
    return sum(step_cost(a, b) for a, b in zip(tiles, tiles[1:]))


def _positive_pair(value, name: str, integral: bool) -> Tuple:
    try:
        width, height = value
        valid = width > 0 and height > 0
    except (TypeError, ValueError):
        valid = False
    if valid and integral:
        valid = int(width) == width and int(height) == height
    if not valid:
        kind = "positive integers" if integral else "positive numbers"
        logger.error("Invalid %s: %r", name, value)
        raise ValueError(f"{name} must be a pair of {kind}, got {value!r}")
    if integral:
        return (int(width), int(height))
    return (float(width), float(height))


def _coerce_enum(enum_cls, value, name: str):
    try:
        return enum_cls(value)
    except ValueError:
        choices = ", ".join(member.value for member in enum_cls)
        logger.error("Invalid %s: %r", name, value)
        raise ValueError(f"{name} must be one of {choices}, got {value!r}") from None


class PathfindingEngine:
    """
    A* pathfinder for a fixed-size tile grid.

    Walkability is decided by an optional callable taking a (col, row) tuple.
    Without one every in-bounds tile is walkable. Configuration may be
    changed between searches; each search keeps its own node table, so one
    instance must not be reconfigured while a search is running on it.
    """

    def __init__(
        self,
        map_size: Tuple[int, int],
        tile_size: Tuple[float, float],
        walkable: Optional[WalkableFn] = None,
        *,
        heuristic=DEFAULT_HEURISTIC,
        allow_diagonal: bool = DEFAULT_ALLOW_DIAGONAL,
        ignore_diagonal_barriers: bool = DEFAULT_IGNORE_DIAGONAL_BARRIERS,
        allow_crossing_borders: bool = DEFAULT_ALLOW_CROSSING_BORDERS,
        origin=DEFAULT_ORIGIN,
    ) -> None:
        self.map_size = map_size
        self.tile_size = tile_size
        self.walkable = walkable
        self.heuristic = heuristic
        self.allow_diagonal = allow_diagonal
        # Only consulted when diagonal movement is allowed
        self.ignore_diagonal_barriers = ignore_diagonal_barriers
        # Ignored when ignore_diagonal_barriers is set
        self.allow_crossing_borders = allow_crossing_borders
        self.origin = origin

    @classmethod
    def for_tile_map(
        cls, tile_map: TileMap, tile_size: Tuple[float, float], **options
    ) -> PathfindingEngine:
        """Build an engine sized to tile_map that uses it as the walkability oracle."""
        return cls(tile_map.size, tile_size, tile_map.is_walkable, **options)

    # -------------------- configuration --------------------

    @property
    def map_size(self) -> Tuple[int, int]:
        return self._map_size

    @map_size.setter
    def map_size(self, value) -> None:
        self._map_size = _positive_pair(value, "map_size", integral=True)

    @property
    def tile_size(self) -> Tuple[float, float]:
        return self._tile_size

    @tile_size.setter
    def tile_size(self, value) -> None:
        self._tile_size = _positive_pair(value, "tile_size", integral=False)

    @property
    def heuristic(self) -> Heuristic:
        return self._heuristic

    @heuristic.setter
    def heuristic(self, value) -> None:
        self._heuristic = _coerce_enum(Heuristic, value, "heuristic")

    @property
    def origin(self) -> Origin:
        return self._origin

    @origin.setter
    def origin(self, value) -> None:
        self._origin = _coerce_enum(Origin, value, "origin")

    # -------------------- grid queries --------------------

    def in_bounds(self, tile: Coordinate) -> bool:
        width, height = self._map_size
        return 0 <= tile[0] < width and 0 <= tile[1] < height

    def is_walkable(self, tile: Coordinate) -> bool:
        """Return True if tile is inside the grid and the oracle accepts it."""
        if not self.in_bounds(tile):
            return False
        if self.walkable is None:
            return True
        return bool(self.walkable(tile))

    # -------------------- coordinate conversion --------------------

    def tile_to_screen(self, tile: Coordinate) -> Point:
        """Return the screen position of the centre of tile."""
        col, row = tile
        tile_w, tile_h = self._tile_size
        if self._origin is Origin.TOP_LEFT:
            row = self._map_size[1] - 1 - row
        return (col * tile_w + tile_w / 2, row * tile_h + tile_h / 2)

    def screen_to_tile(self, position: Point) -> Coordinate:
        """
        Return the tile containing a screen position.
        Positions off the grid map to out-of-bounds tiles; see in_bounds().
        """
        tile_w, tile_h = self._tile_size
        col = math.floor(position[0] / tile_w)
        row = math.floor(position[1] / tile_h)
        if self._origin is Origin.TOP_LEFT:
            row = self._map_size[1] - 1 - row
        return (int(col), int(row))

    # -------------------- search --------------------

    def find_path(self, start: Point, target: Point) -> Optional[List[Point]]:
        """
        Find the shortest path between two screen positions.
        Returns the tile centres from start to target inclusive, or None if
        the endpoints share a tile, either is off the grid, the target is
        not walkable, or no route exists.
        """
        tiles = self.find_tile_path(
            self.screen_to_tile(start), self.screen_to_tile(target)
        )
        if tiles is None:
            return None
        return [self.tile_to_screen(tile) for tile in tiles]

    def find_tile_path(
        self, start: Coordinate, target: Coordinate
    ) -> Optional[List[Coordinate]]:
        """Same as find_path, but endpoints and result are tile coordinates."""
        start = (int(start[0]), int(start[1]))
        target = (int(target[0]), int(target[1]))
        if start == target:
            logger.debug("No path: start and target are both %s", start)
            return None
        if not self.in_bounds(start) or not self.in_bounds(target):
            logger.debug(
                "No path: %s -> %s leaves the %dx%d grid",
                start,
                target,
                *self._map_size,
            )
            return None
        if not self.is_walkable(target):
            logger.debug("No path: target %s is not walkable", target)
            return None
        return self._search(start, target)

    def _estimate(self, tile: Coordinate, target: Coordinate) -> float:
        return heuristic_cost(tile, target, self._heuristic)

    def _neighbors(self, tile: Coordinate) -> Iterator[Tuple[Coordinate, int]]:
        """Yield (neighbour, step cost) for every tile the search may enter from tile."""
        col, row = tile
        for d_col, d_row in CARDINAL_STEPS:
            candidate = (col + d_col, row + d_row)
            if self.is_walkable(candidate):
                yield candidate, STRAIGHT_COST
        if not self.allow_diagonal:
            return
        for d_col, d_row in DIAGONAL_STEPS:
            candidate = (col + d_col, row + d_row)
            if not self.is_walkable(candidate):
                continue
            if self._can_cut_corner(col, row, d_col, d_row):
                yield candidate, DIAGONAL_COST

    def _can_cut_corner(self, col: int, row: int, d_col: int, d_row: int) -> bool:
        """Apply the corner-cutting policy to the two tiles flanking a diagonal step."""
        if self.ignore_diagonal_barriers:
            return True
        horizontal = self.is_walkable((col + d_col, row))
        vertical = self.is_walkable((col, row + d_row))
        if self.allow_crossing_borders:
            return horizontal or vertical
        return horizontal and vertical

    def _search(
        self, start: Coordinate, target: Coordinate
    ) -> Optional[List[Coordinate]]:
        # Node table for this search; parents are indices into it
        nodes: List[GridNode] = [GridNode(start, 0, self._estimate(start, target))]
        index_of: Dict[Coordinate, int] = {start: 0}
        closed = set()
        # Heap entries: (f, h, insertion order, node index)
        counter = itertools.count()
        open_heap = [(nodes[0].f_value, nodes[0].h_value, next(counter), 0)]

        while open_heap:
            _, _, _, index = heapq.heappop(open_heap)
            # Superseded entry for a node that was already expanded
            if index in closed:
                continue
            closed.add(index)
            current = nodes[index]
            if current.coordinate == target:
                logger.debug(
                    "Path %s -> %s found, cost %s, %d nodes expanded",
                    start,
                    target,
                    current.g_cost,
                    len(closed),
                )
                return self._reconstruct(nodes, index)

            for neighbor, cost in self._neighbors(current.coordinate):
                tentative = current.g_cost + cost
                n_index = index_of.get(neighbor)
                if n_index is None:
                    n_index = len(nodes)
                    nodes.append(
                        GridNode(
                            neighbor,
                            tentative,
                            self._estimate(neighbor, target),
                            index,
                        )
                    )
                    index_of[neighbor] = n_index
                elif n_index in closed:
                    continue
                else:
                    node = nodes[n_index]
                    if tentative >= node.g_cost:
                        continue
                    node.g_cost = tentative
                    node.parent = index
                node = nodes[n_index]
                heapq.heappush(
                    open_heap, (node.f_value, node.h_value, next(counter), n_index)
                )

        logger.debug(
            "No path: %s -> %s unreachable after expanding %d nodes",
            start,
            target,
            len(closed),
        )
        return None

    @staticmethod
    def _reconstruct(nodes: List[GridNode], index: int) -> List[Coordinate]:
        path = []
        current: Optional[int] = index
        while current is not None:
            node = nodes[current]
            path.append(node.coordinate)
            current = node.parent
        path.reverse()
        return path
