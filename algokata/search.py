"""Exhaustive search and recursive construction problems."""

from itertools import combinations

_BOARD = 8
_GRID = 7
_PATH_LENGTH = _GRID * _GRID - 1
_MOVES = ((-1, 0, "U"), (1, 0, "D"), (0, -1, "L"), (0, 1, "R"))


def _ordered_permutations(items):
    """Yield every distinct arrangement of ``items`` in lexicographic order."""
    current = sorted(items)
    while True:
        yield current[:]
        pivot = next(
            (i for i in reversed(range(len(current) - 1)) if current[i] < current[i + 1]),
            None,
        )
        if pivot is None:
            return
        swap = next(j for j in reversed(range(len(current))) if current[j] > current[pivot])
        current[pivot], current[swap] = current[swap], current[pivot]
        current[pivot + 1:] = reversed(current[pivot + 1:])


def creating_strings(text):
    """Return all distinct strings formed from the characters of ``text``, sorted."""
    return ["".join(arrangement) for arrangement in _ordered_permutations(text)]


def apple_division(weights):
    """Return the minimal weight difference between two groups of apples."""
    apples = sorted(weights, reverse=True)
    total = sum(apples)
    target = total // 2

    def smallest_reaching(index, subtotal):
        if subtotal >= target:
            return subtotal
        if index == len(apples):
            return None
        options = [
            found
            for found in (
                smallest_reaching(index + 1, subtotal + apples[index]),
                smallest_reaching(index + 1, subtotal),
            )
            if found is not None
        ]
        return min(options, default=None)

    best = smallest_reaching(0, 0)
    if best is None:
        best = 0
    return abs((total - best) - best)


def chessboard_and_queens(board):
    """Count placements of eight non-attacking queens avoiding '*' squares."""
    rows = list(board)
    if len(rows) != _BOARD or any(len(row) < _BOARD for row in rows):
        raise ValueError("board must have 8 rows of 8 squares")
    columns, rising, falling = set(), set(), set()

    def place(row):
        if row == _BOARD:
            return 1
        count = 0
        for column in range(_BOARD):
            if (
                column in columns
                or row + column in rising
                or row - column in falling
                or rows[row][column] == "*"
            ):
                continue
            columns.add(column)
            rising.add(row + column)
            falling.add(row - column)
            count += place(row + 1)
            columns.discard(column)
            rising.discard(row + column)
            falling.discard(row - column)
        return count

    return place(0)


def _dead_end(seen, row, col, prow, pcol):
    """Tell whether the walk has cut the unvisited area in two."""
    last = _GRID - 1
    checks = (
        col == 0 and row + 1 < _GRID and seen(row + 1, col) and pcol == 1,
        col == 0 and row + 1 < _GRID and row >= 1
        and not seen(row + 1, col) and not seen(row - 1, col) and pcol == 1,
        row == last and col > 0 and seen(row, col - 1) and prow == last - 1,
        row == last and col > 0 and col + 1 < _GRID
        and not seen(row, col - 1) and not seen(row, col + 1) and prow == last - 1,
        col == last and row + 1 < _GRID and seen(row + 1, col) and pcol == last - 1,
        col == last and row + 1 < _GRID and row >= 1
        and not seen(row + 1, col) and not seen(row - 1, col) and pcol == last - 1,
        row == 0 and col + 1 < _GRID and seen(row, col + 1) and prow == 1,
        row == 0 and col + 1 < _GRID and col >= 1
        and not seen(row, col - 1) and not seen(row, col + 1) and prow == 1,
        row > 0 and seen(row - 1, col) and col > 0
        and not seen(row, col - 1) and not seen(row, col + 1) and prow == row + 1,
        row + 1 < _GRID and seen(row + 1, col) and col > 0
        and not seen(row, col - 1) and not seen(row, col + 1) and prow == row - 1,
        col > 0 and seen(row, col - 1) and row > 0
        and not seen(row - 1, col) and not seen(row + 1, col) and pcol == col + 1,
        col + 1 < _GRID and seen(row, col + 1) and row > 0
        and not seen(row - 1, col) and not seen(row + 1, col) and pcol == col - 1,
    )
    return any(checks)


def grid_paths(description):
    """Count 7x7 grid paths from the top-left to the bottom-left corner.

    ``description`` has 48 characters from "UDLR?", '?' allowing any move.
    """
    if len(description) != _PATH_LENGTH:
        raise ValueError(f"description must have {_PATH_LENGTH} characters")
    # Row-major cells, padded so that looking one cell past an edge reads as free.
    visited = [False] * (_GRID * _GRID + _GRID + 1)

    def seen(row, col):
        return visited[row * _GRID + col]

    def walk(row, col, prow, pcol, steps):
        if row == _GRID - 1 and col == 0:
            return 1 if steps == _PATH_LENGTH else 0
        if _dead_end(seen, row, col, prow, pcol):
            return 0
        visited[row * _GRID + col] = True
        wanted = description[steps]
        total = 0
        for dr, dc, letter in _MOVES:
            r, c = row + dr, col + dc
            if 0 <= r < _GRID and 0 <= c < _GRID and not seen(r, c) and wanted in ("?", letter):
                total += walk(r, c, row, col, steps + 1)
        visited[row * _GRID + col] = False
        return total

    return walk(0, 0, 0, 0, 0)


def gray_code(n):
    """Return the reflected Gray code of n bits as strings."""
    if n < 1:
        raise ValueError("n must be at least 1")
    codes = ["0", "1"]
    for _ in range(n - 1):
        codes = ["0" + code for code in codes] + ["1" + code for code in reversed(codes)]
    return codes


def tower_of_hanoi(n):
    """Return the moves (from, to) that carry n disks from stack 1 to stack 3."""
    if n < 1:
        raise ValueError("n must be at least 1")

    def moves(source, spare, target, disks):
        if disks == 1:
            yield source, target
            return
        yield from moves(source, target, spare, disks - 1)
        yield source, target
        yield from moves(spare, source, target, disks - 1)

    return list(moves(1, 2, 3, n))


def _subset_sums(weights):
    """Yield the sum of every subset of ``weights``."""
    for size in range(len(weights) + 1):
        for chosen in combinations(weights, size):
            yield sum(chosen)