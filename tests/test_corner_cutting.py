import pytest

from tilepath.pathfinding import PathfindingEngine

DIRECT = [(0, 0), (1, 1)]
AROUND_NORTH = [(0, 0), (0, 1), (1, 1)]

# 2x2 map, moving from (0, 0) to (1, 1); flanking tiles are (1, 0) and (0, 1).
CASES = [
    # ignore_barriers, cross_borders, blocked flanks, expected path
    (False, True, set(), DIRECT),
    (False, False, set(), DIRECT),
    (True, True, set(), DIRECT),
    (True, False, set(), DIRECT),
    (False, True, {(1, 0)}, DIRECT),
    (False, False, {(1, 0)}, AROUND_NORTH),
    (True, True, {(1, 0)}, DIRECT),
    (True, False, {(1, 0)}, DIRECT),
    (False, True, {(1, 0), (0, 1)}, None),
    (False, False, {(1, 0), (0, 1)}, None),
    (True, True, {(1, 0), (0, 1)}, DIRECT),
    (True, False, {(1, 0), (0, 1)}, DIRECT),
]


@pytest.mark.parametrize("ignore_barriers,cross_borders,walls,expected", CASES)
def test_corner_cutting_policy(ignore_barriers, cross_borders, walls, expected):
    engine = PathfindingEngine(
        (2, 2),
        (16, 16),
        lambda tile: tile not in walls,
        ignore_diagonal_barriers=ignore_barriers,
        allow_crossing_borders=cross_borders,
    )
    assert engine.find_tile_path((0, 0), (1, 1)) == expected


@pytest.mark.parametrize("ignore_barriers", [True, False])
def test_diagonal_disabled_overrides_corner_flags(ignore_barriers):
    engine = PathfindingEngine(
        (2, 2),
        (16, 16),
        allow_diagonal=False,
        ignore_diagonal_barriers=ignore_barriers,
    )
    path = engine.find_tile_path((0, 0), (1, 1))
    assert len(path) == 3


def _corner_gap_walls():
    # Rows 2 and 3 are walls except (3, 2) and (2, 3), which touch only at a corner
    walls = {(2, 2), (3, 3)}
    for x in range(6):
        if x not in (2, 3):
            walls.add((x, 2))
            walls.add((x, 3))
    return walls


@pytest.mark.parametrize("cross_borders", [True, False])
def test_no_diagonal_squeeze_between_blocked_flanks(cross_borders):
    walls = _corner_gap_walls()
    engine = PathfindingEngine(
        (6, 6),
        (16, 16),
        lambda tile: tile not in walls,
        allow_crossing_borders=cross_borders,
    )
    assert engine.find_tile_path((3, 0), (2, 5)) is None


def test_diagonal_squeeze_allowed_when_ignoring_barriers():
    walls = _corner_gap_walls()
    engine = PathfindingEngine(
        (6, 6),
        (16, 16),
        lambda tile: tile not in walls,
        ignore_diagonal_barriers=True,
        allow_crossing_borders=False,
    )
    path = engine.find_tile_path((3, 0), (2, 5))
    assert path is not None
    assert (3, 2) in path and (2, 3) in path
