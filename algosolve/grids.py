"""Problems on two-dimensional grids."""

from __future__ import annotations

from itertools import count
from typing import Sequence

_DIRECTIONS = ((0, 1), (1, 0), (0, -1), (-1, 0))
_MAGIC_RINGS = ("4381672943816729", "9276183492761834")
_RING = (0, 1, 2, 5, 8, 7, 6, 3)

Grid = Sequence[Sequence[int]]


def _is_magic(grid: Grid, i: int, j: int) -> bool:
    ring = "".join(str(grid[i + p // 3][j + p % 3]) for p in _RING)
    return any(ring in pattern for pattern in _MAGIC_RINGS)


def num_magic_squares_inside(grid: Grid) -> int:
    """Count the 3x3 subgrids that are magic squares of the numbers 1 to 9."""
    if len(grid) < 3:
        return 0
    return sum(
        1
        for i in range(len(grid) - 2)
        for j in range(len(grid[0]) - 2)
        if grid[i][j] % 2 == 0 and grid[i + 1][j + 1] == 5 and _is_magic(grid, i, j)
    )


def robot_sim(commands: Sequence[int], obstacles: Sequence[Sequence[int]]) -> int:
    """Return the largest squared distance from the origin a walking robot reaches.

    -1 turns right, -2 turns left, a positive number moves that many steps,
    stopping short of any obstacle.
    """
    blocked = {(o[0], o[1]) for o in obstacles}
    x = y = direction = best = 0
    for command in commands:
        if command == -1:
            direction = (direction + 1) % 4
        elif command == -2:
            direction = (direction + 3) % 4
        else:
            dx, dy = _DIRECTIONS[direction]
            for _ in range(command):
                if (x + dx, y + dy) in blocked:
                    break
                x, y = x + dx, y + dy
        best = max(best, x * x + y * y)
    return best


def spiral_matrix_iii(rows: int, cols: int, r_start: int, c_start: int) -> list[list[int]]:
    """List the cells of a grid in the order a clockwise spiral from a start visits them."""
    row_steps = (0, 1, 0, -1)
    col_steps = (1, 0, -1, 0)
    cells = [[r_start, c_start]]
    r, c = r_start, c_start
    for leg in count():
        if len(cells) >= rows * cols:
            break
        for _ in range(leg // 2 + 1):
            r += row_steps[leg % 4]
            c += col_steps[leg % 4]
            if 0 <= r < rows and 0 <= c < cols:
                cells.append([r, c])
    return cells


def _flood(blocked: list[list[bool]], i: int, j: int) -> None:
    rows, cols = len(blocked), len(blocked[0])
    stack = [(i, j)]
    blocked[i][j] = True
    while stack:
        x, y = stack.pop()
        for dx, dy in _DIRECTIONS:
            nx, ny = x + dx, y + dy
            if 0 <= nx < rows and 0 <= ny < cols and not blocked[nx][ny]:
                blocked[nx][ny] = True
                stack.append((nx, ny))


def regions_by_slashes(grid: Sequence[str]) -> int:
    """Count the regions an n x n grid of '/', '\\' and ' ' cells is cut into."""
    size = len(grid) * 3
    blocked = [[False] * size for _ in range(size)]
    for i, row in enumerate(grid):
        for j, cell in enumerate(row):
            if cell == "/":
                marks = ((0, 2), (1, 1), (2, 0))
            elif cell == "\\":
                marks = ((0, 0), (1, 1), (2, 2))
            else:
                continue
            for di, dj in marks:
                blocked[i * 3 + di][j * 3 + dj] = True

    regions = 0
    for i in range(size):
        for j in range(size):
            if not blocked[i][j]:
                regions += 1
                _flood(blocked, i, j)
    return regions


def _visit_island(grid: Grid, i: int, j: int, seen: set[tuple[int, int]]) -> None:
    rows, cols = len(grid), len(grid[0])
    stack = [(i, j)]
    seen.add((i, j))
    while stack:
        x, y = stack.pop()
        for dx, dy in _DIRECTIONS:
            nx, ny = x + dx, y + dy
            if 0 <= nx < rows and 0 <= ny < cols and grid[nx][ny] != 0 and (nx, ny) not in seen:
                seen.add((nx, ny))
                stack.append((nx, ny))


def _disconnected(grid: Grid) -> bool:
    islands = 0
    seen: set[tuple[int, int]] = set()
    for i, row in enumerate(grid):
        for j, cell in enumerate(row):
            if cell == 0 or (i, j) in seen:
                continue
            islands += 1
            if islands > 1:
                return True
            _visit_island(grid, i, j, seen)
    return islands != 1


def min_days(grid: Grid) -> int:
    """Return how many land cells must be flooded to leave other than one island."""
    land = [list(row) for row in grid]
    if _disconnected(land):
        return 0
    for row in land:
        for j, cell in enumerate(row):
            if cell == 1:
                row[j] = 0
                if _disconnected(land):
                    return 1
                row[j] = 1
    return 2


def count_sub_islands(grid1: Grid, grid2: Grid) -> int:
    """Count islands of ``grid2`` whose every cell is land in ``grid1``."""
    rows = len(grid2)
    cols = len(grid2[0]) if rows else 0
    seen: set[tuple[int, int]] = set()
    sub_islands = 0
    for i in range(rows):
        for j in range(cols):
            if grid2[i][j] != 1 or (i, j) in seen:
                continue
            seen.add((i, j))
            stack = [(i, j)]
            inside = True
            while stack:
                x, y = stack.pop()
                if grid1[x][y] == 0:
                    inside = False
                for dx, dy in _DIRECTIONS:
                    nx, ny = x + dx, y + dy
                    if (0 <= nx < rows and 0 <= ny < cols
                            and grid2[nx][ny] == 1 and (nx, ny) not in seen):
                        seen.add((nx, ny))
                        stack.append((nx, ny))
            if inside:
                sub_islands += 1
    return sub_islands