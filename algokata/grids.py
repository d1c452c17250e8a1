"""Breadth-first search on character grids."""

from collections import deque

_STEPS = ((-1, 0, "U"), (1, 0, "D"), (0, -1, "L"), (0, 1, "R"))


def _rows(grid):
    rows = [str(row) for row in grid]
    if any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("grid rows must have equal length")
    return rows


def _locate(rows, mark):
    for r, row in enumerate(rows):
        c = row.find(mark)
        if c != -1:
            return r, c
    raise ValueError(f"grid has no {mark!r} cell")


def _neighbours(rows, cell):
    r, c = cell
    for dr, dc, letter in _STEPS:
        nr, nc = r + dr, c + dc
        if 0 <= nr < len(rows) and 0 <= nc < len(rows[0]) and rows[nr][nc] != "#":
            yield (nr, nc), letter


def _trace(came_from, cell):
    letters = []
    while came_from[cell] is not None:
        cell, letter = came_from[cell]
        letters.append(letter)
    return "".join(reversed(letters))


def counting_rooms(grid):
    """Return the number of connected areas of '.' cells."""
    rows = _rows(grid)
    seen = set()
    rooms = 0
    for r, row in enumerate(rows):
        for c, cell in enumerate(row):
            if cell != "." or (r, c) in seen:
                continue
            rooms += 1
            seen.add((r, c))
            queue = deque([(r, c)])
            while queue:
                current = queue.popleft()
                for (nr, nc), _ in _neighbours(rows, current):
                    if rows[nr][nc] == "." and (nr, nc) not in seen:
                        seen.add((nr, nc))
                        queue.append((nr, nc))
    return rooms


def labyrinth(grid):
    """Return the moves (U, D, L, R) of a shortest path from 'A' to 'B', or None."""
    rows = _rows(grid)
    start = _locate(rows, "A")
    end = _locate(rows, "B")
    came_from = {start: None}
    queue = deque([start])
    while queue:
        cell = queue.popleft()
        if cell == end:
            return _trace(came_from, cell)
        for neighbour, letter in _neighbours(rows, cell):
            if neighbour not in came_from:
                came_from[neighbour] = (cell, letter)
                queue.append(neighbour)
    return None


def monsters(grid):
    """Return moves that take 'A' to the border before any 'M' can reach its cell, or None."""
    rows = _rows(grid)
    start = _locate(rows, "A")
    height, width = len(rows), len(rows[0])

    arrival = {}
    queue = deque()
    for r, row in enumerate(rows):
        for c, cell in enumerate(row):
            if cell == "M":
                arrival[(r, c)] = 0
                queue.append((r, c))
    while queue:
        cell = queue.popleft()
        for neighbour, _ in _neighbours(rows, cell):
            if neighbour not in arrival:
                arrival[neighbour] = arrival[cell] + 1
                queue.append(neighbour)

    came_from = {start: None}
    walk = deque([(start, 0)])
    while walk:
        cell, time = walk.popleft()
        r, c = cell
        if r in (0, height - 1) or c in (0, width - 1):
            return _trace(came_from, cell)
        for neighbour, letter in _neighbours(rows, cell):
            if neighbour in came_from:
                continue
            danger = arrival.get(neighbour)
            if danger is None or danger > time + 1:
                came_from[neighbour] = (cell, letter)
                walk.append((neighbour, time + 1))
    return None