"""Breadth-first searches on character grids.

A grid is a sequence of equally long strings. Cells are addressed as
``(row, column)`` pairs counted from 0, and ``#`` marks a wall.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence
from enum import Enum

from graphsolve.graphs import ImpossibleError

Cell = tuple[int, int]
Grid = Sequence[str]


class Move(Enum):
    """A single step between neighbouring cells, in the order L, R, U, D."""

    LEFT = ("L", 0, -1)
    RIGHT = ("R", 0, 1)
    UP = ("U", -1, 0)
    DOWN = ("D", 1, 0)

    def __init__(self, letter: str, d_row: int, d_col: int) -> None:
        self.letter = letter
        self.d_row = d_row
        self.d_col = d_col


def _steps(grid: Grid, row: int, col: int) -> Iterator[tuple[Move, int, int]]:
    rows, cols = len(grid), len(grid[0])
    for move in Move:
        r, c = row + move.d_row, col + move.d_col
        if 0 <= r < rows and 0 <= c < cols:
            yield move, r, c


def _find(grid: Grid, mark: str) -> Cell | None:
    """Return the last cell holding ``mark``, scanning row by row."""
    found = None
    for r, line in enumerate(grid):
        for c, ch in enumerate(line):
            if ch == mark:
                found = (r, c)
    return found


def _on_border(grid: Grid, cell: Cell) -> bool:
    r, c = cell
    return r in (0, len(grid) - 1) or c in (0, len(grid[0]) - 1)


def _trace(parent: dict[Cell, tuple[Cell, Move] | None], end: Cell) -> str:
    letters = []
    cell = end
    while (step := parent[cell]) is not None:
        cell, move = step
        letters.append(move.letter)
    return "".join(reversed(letters))


def flood_fill(
    grid: Grid, row: int, col: int, visited: set[Cell] | None = None
) -> list[Cell]:
    """Reach every floor cell (``.``) connected to ``(row, col)``.

    Returns the reached cells in visiting order, starting cell first, and
    adds them to ``visited`` when one is given.
    """
    if visited is None:
        visited = set()
    visited.add((row, col))
    reached = [(row, col)]
    queue = deque(reached)
    while queue:
        r, c = queue.popleft()
        for _, nr, nc in _steps(grid, r, c):
            nxt = (nr, nc)
            if grid[nr][nc] == "." and nxt not in visited:
                visited.add(nxt)
                reached.append(nxt)
                queue.append(nxt)
    return reached


def count_rooms(grid: Grid) -> int:
    """Count the connected areas of floor cells."""
    visited: set[Cell] = set()
    rooms = 0
    for r, line in enumerate(grid):
        for c, ch in enumerate(line):
            if ch == "." and (r, c) not in visited:
                flood_fill(grid, r, c, visited)
                rooms += 1
    return rooms


def labyrinth_path(grid: Grid) -> str:
    """Return a shortest sequence of move letters leading from ``A`` to ``B``."""
    start = _find(grid, "A")
    end = _find(grid, "B")
    if start is None or end is None:
        raise ValueError("grid must contain both A and B")
    parent: dict[Cell, tuple[Cell, Move] | None] = {start: None}
    queue = deque([start])
    while queue:
        cell = queue.popleft()
        for move, nr, nc in _steps(grid, *cell):
            nxt = (nr, nc)
            if grid[nr][nc] != "#" and nxt not in parent:
                parent[nxt] = (cell, move)
                queue.append(nxt)
    if end not in parent:
        raise ImpossibleError("B cannot be reached from A")
    return _trace(parent, end)


def escape_monsters(grid: Grid) -> str:
    """Return a way for ``A`` to reach the border before any monster ``M``.

    Monsters move at the same time as ``A``; a cell a monster reaches no
    later than ``A`` is closed to it. Returns the move letters of a
    shortest safe escape, which is empty when ``A`` starts on the border.
    """
    start: Cell | None = None
    owner: dict[Cell, str] = {}
    queue: deque[tuple[Cell, str]] = deque()
    for r, line in enumerate(grid):
        for c, ch in enumerate(line):
            if ch == "A":
                start = (r, c)
            elif ch == "M":
                owner[(r, c)] = "M"
                queue.append(((r, c), "M"))
    if start is None:
        raise ValueError("grid must contain A")
    if _on_border(grid, start):
        return ""
    owner[start] = "A"
    queue.append((start, "A"))
    parent: dict[Cell, tuple[Cell, Move] | None] = {start: None}
    while queue:
        cell, who = queue.popleft()
        for move, nr, nc in _steps(grid, *cell):
            if grid[nr][nc] != ".":
                continue
            nxt = (nr, nc)
            if who == "M":
                if owner.get(nxt) != "M":
                    owner[nxt] = "M"
                    queue.append((nxt, "M"))
            elif nxt not in owner:
                owner[nxt] = "A"
                parent[nxt] = (cell, move)
                queue.append((nxt, "A"))
                if _on_border(grid, nxt):
                    return _trace(parent, nxt)
    raise ImpossibleError("A cannot escape")