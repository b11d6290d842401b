"""
Search record for a single grid cell visited during one A* search.
"""
from typing import Optional, Tuple

Coordinate = Tuple[int, int]


class GridNode:
    """One cell of the open/closed sets: coordinate, costs and back-reference."""

    __slots__ = ("_coordinate", "g_cost", "h_value", "parent")

    def __init__(
        self,
        coordinate: Coordinate,
        g_cost: float = 0,
        h_value: float = 0,
        parent: Optional[int] = None,
    ) -> None:
        self._coordinate = (int(coordinate[0]), int(coordinate[1]))
        # Accumulated cost from the start along the best known path
        self.g_cost = g_cost
        # Estimate of the remaining cost; set once when the node is created
        self.h_value = h_value
        # Index of the parent in the search's node table, None for the start
        self.parent = parent

    @classmethod
    def at(cls, col: int, row: int) -> "GridNode":
        return cls((col, row))

    @property
    def coordinate(self) -> Coordinate:
        return self._coordinate

    @property
    def f_value(self) -> float:
        return self.g_cost + self.h_value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GridNode):
            return NotImplemented
        return self._coordinate == other._coordinate

    def __hash__(self) -> int:
        return hash(self._coordinate)

    def __repr__(self) -> str:
        return (
            f"<GridNode {self._coordinate} g={self.g_cost} "
            f"h={self.h_value:.1f} parent={self.parent}>"
        )
