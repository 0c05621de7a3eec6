"""A* path finding on a rectangular grid.

The costs follow a fixed scheme. A move changes the coordinate sum ``x + y``
by 1 (orthogonal), by 2 (main diagonal) or by 0 (anti-diagonal). Only a
change of 2 is charged the oblique cost. The heuristic is the difference of
coordinate sums times the step cost. The search stops as soon as the end cell
is first discovered.
"""

from __future__ import annotations

import heapq
import sys
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from enum import Enum

__all__ = ["Vec2", "SearchParams", "AStar", "DEMO_MAP", "main"]


@dataclass(frozen=True)
class Vec2:
    """A grid coordinate."""

    x: int = 0
    y: int = 0


@dataclass
class SearchParams:
    """What to search: grid size, endpoints, passability test and diagonal moves."""

    width: int
    height: int
    start: Vec2
    end: Vec2
    can_reach: Callable[[Vec2], bool] | None
    corner: bool = False

    def contains(self, pos: Vec2) -> bool:
        """Whether ``pos`` lies inside the grid."""
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def is_valid(self) -> bool:
        """Whether the grid is non-empty, both endpoints lie in it and a test is given."""
        return (
            self.can_reach is not None
            and self.width > 0
            and self.height > 0
            and self.contains(self.start)
            and self.contains(self.end)
        )


class _State(Enum):
    OPEN = 1
    CLOSED = 2


@dataclass(eq=False)
class _Node:
    pos: Vec2
    g: int = 0
    h: int = 0
    state: _State = _State.OPEN
    parent: _Node | None = field(default=None, repr=False)

    @property
    def f(self) -> int:
        return self.g + self.h

    def __lt__(self, other: _Node) -> bool:
        return self.f < other.f


def _sum_delta(a: Vec2, b: Vec2) -> int:
    return abs(a.y + a.x - b.y - b.x)


class _Search:
    """The state of one search."""

    def __init__(self, step: int, oblique: int, params: SearchParams) -> None:
        assert params.can_reach is not None
        self.step = step
        self.oblique = oblique
        self.params = params
        self.query = params.can_reach
        self.nodes: dict[Vec2, _Node] = {}
        self.open: list[_Node] = []

    def _passable(self, pos: Vec2) -> bool:
        return self.params.contains(pos) and bool(self.query(pos))

    def _closed(self, pos: Vec2) -> bool:
        node = self.nodes.get(pos)
        return node is not None and node.state is _State.CLOSED

    def _can_move(self, current: Vec2, target: Vec2) -> bool:
        if not self.params.contains(target) or self._closed(target):
            return False
        if _sum_delta(current, target) == 1:
            return bool(self.query(target))
        if self.params.corner:
            side_open = self._passable(Vec2(target.x, current.y)) or self._passable(
                Vec2(current.x, target.y)
            )
            return side_open and bool(self.query(target))
        return False

    def _reachable(self, current: Vec2) -> Iterator[Vec2]:
        for y in range(max(current.y - 1, 0), current.y + 2):
            for x in range(max(current.x - 1, 0), current.x + 2):
                target = Vec2(x, y)
                if self._can_move(current, target):
                    yield target

    def _g(self, parent: _Node, pos: Vec2) -> int:
        cost = self.oblique if _sum_delta(pos, parent.pos) == 2 else self.step
        return parent.g + cost

    def _h(self, pos: Vec2) -> int:
        return _sum_delta(self.params.end, pos) * self.step

    def _percolate_up(self, hole: int) -> None:
        heap = self.open
        while hole > 0:
            parent = (hole - 1) // 2
            if heap[hole].f < heap[parent].f:
                heap[hole], heap[parent] = heap[parent], heap[hole]
                hole = parent
            else:
                return

    def _relax(self, current: _Node, node: _Node) -> None:
        g = self._g(current, node.pos)
        if g < node.g:
            node.g = g
            node.parent = current
            self._percolate_up(self.open.index(node))

    def run(self) -> list[Vec2]:
        start = _Node(self.params.start)
        self.nodes[start.pos] = start
        self.open.append(start)

        while self.open:
            current = heapq.heappop(self.open)
            current.state = _State.CLOSED
            for pos in list(self._reachable(current.pos)):
                known = self.nodes.get(pos)
                if known is not None and known.state is _State.OPEN:
                    self._relax(current, known)
                    continue
                node = _Node(pos, g=self._g(current, pos), h=self._h(pos), parent=current)
                self.nodes[pos] = node
                heapq.heappush(self.open, node)
                if pos == self.params.end:
                    return self._path(node)
        return []

    @staticmethod
    def _path(node: _Node) -> list[Vec2]:
        path: list[Vec2] = []
        while node.parent is not None:
            path.append(node.pos)
            node = node.parent
        path.reverse()
        return path


class AStar:
    """A* searcher with configurable orthogonal and oblique step costs."""

    def __init__(self, step_value: int = 10, oblique_value: int = 14) -> None:
        self.step_value = step_value
        self.oblique_value = oblique_value

    def find(self, params: SearchParams) -> list[Vec2]:
        """Cells from just after the start up to the end, or [] when unreachable.

        Raises ValueError when ``params`` is not valid.
        """
        if not params.is_valid():
            raise ValueError("invalid search parameters")
        return _Search(self.step_value, self.oblique_value, params).run()


DEMO_MAP: tuple[tuple[int, ...], ...] = (
    (0, 1, 0, 0, 0, 1, 0, 0, 0, 0),
    (0, 0, 0, 1, 0, 1, 0, 1, 0, 1),
    (1, 1, 1, 1, 0, 1, 0, 1, 0, 1),
    (0, 0, 0, 1, 0, 0, 0, 1, 0, 1),
    (0, 1, 0, 1, 1, 1, 1, 1, 0, 1),
    (0, 1, 0, 0, 0, 0, 0, 0, 0, 1),
    (0, 1, 1, 1, 1, 1, 1, 1, 1, 1),
    (0, 0, 0, 0, 1, 0, 0, 0, 1, 0),
    (1, 1, 0, 0, 1, 0, 1, 0, 0, 0),
    (0, 0, 0, 0, 0, 0, 1, 0, 1, 0),
)
"""Demo grid indexed as ``DEMO_MAP[y][x]``: 0 is open, 1 is an obstacle."""


def main(argv: list[str] | None = None) -> int:
    """Find a path across the demo grid and print it."""
    params = SearchParams(
        width=10,
        height=10,
        start=Vec2(0, 0),
        end=Vec2(9, 9),
        can_reach=lambda pos: DEMO_MAP[pos.y][pos.x] == 0,
        corner=True,
    )
    path = AStar().find(params)
    print("path not found!" if not path else "path found!")
    sys.stdout.write("".join(f"({pos.x},{pos.y})-->" for pos in path) + "\n")
    return 0