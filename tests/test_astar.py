import pytest

from algokit.astar import DEMO_MAP, AStar, SearchParams, Vec2, main


def grid_params(rows, start, end, corner=False):
    return SearchParams(
        width=len(rows[0]),
        height=len(rows),
        start=start,
        end=end,
        can_reach=lambda pos: rows[pos.y][pos.x] == 0,
        corner=corner,
    )


def assert_valid_path(path, rows, start, end, corner):
    assert path[-1] == end
    previous = start
    for pos in path:
        assert rows[pos.y][pos.x] == 0
        dx, dy = abs(pos.x - previous.x), abs(pos.y - previous.y)
        assert max(dx, dy) == 1
        if not corner:
            assert dx + dy == 1
        previous = pos


def test_straight_corridor():
    rows = [[0, 0, 0, 0, 0]]
    path = AStar().find(grid_params(rows, Vec2(0, 0), Vec2(4, 0)))
    assert path == [Vec2(1, 0), Vec2(2, 0), Vec2(3, 0), Vec2(4, 0)]


def test_demo_map_with_corners():
    params = grid_params(DEMO_MAP, Vec2(0, 0), Vec2(9, 9), corner=True)
    path = AStar().find(params)
    assert_valid_path(path, DEMO_MAP, Vec2(0, 0), Vec2(9, 9), True)


def test_demo_map_without_corners_uses_orthogonal_moves():
    params = grid_params(DEMO_MAP, Vec2(0, 0), Vec2(9, 9), corner=False)
    path = AStar().find(params)
    assert_valid_path(path, DEMO_MAP, Vec2(0, 0), Vec2(9, 9), False)


def test_unreachable_end_gives_empty_path():
    rows = [[0, 1, 0]]
    assert AStar().find(grid_params(rows, Vec2(0, 0), Vec2(2, 0))) == []


def test_diagonal_needs_an_open_side():
    rows = [[0, 1], [1, 0]]
    assert AStar().find(grid_params(rows, Vec2(0, 0), Vec2(1, 1), corner=True)) == []


def test_diagonal_with_one_open_side():
    rows = [[0, 0], [1, 0]]
    path = AStar().find(grid_params(rows, Vec2(0, 0), Vec2(1, 1), corner=True))
    assert path == [Vec2(1, 1)]


def test_start_equal_to_end_gives_empty_path():
    rows = [[0, 0], [0, 0]]
    assert AStar().find(grid_params(rows, Vec2(1, 1), Vec2(1, 1), corner=True)) == []


@pytest.mark.parametrize(
    "params",
    [
        SearchParams(0, 5, Vec2(0, 0), Vec2(0, 0), lambda p: True),
        SearchParams(5, 5, Vec2(5, 0), Vec2(0, 0), lambda p: True),
        SearchParams(5, 5, Vec2(0, 0), Vec2(0, -1), lambda p: True),
        SearchParams(5, 5, Vec2(0, 0), Vec2(1, 1), None),
    ],
)
def test_invalid_params_raise(params):
    with pytest.raises(ValueError):
        AStar().find(params)


def test_main_prints_path(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "path found!" in out
    assert "(9,9)-->" in out