"""Tours that visit every square, city or bit pattern exactly once."""

from collections import Counter

from .introductory import MOD

_SIZE = 8
_KNIGHT = ((-2, -1), (-2, 1), (2, -1), (2, 1), (-1, -2), (-1, 2), (1, -2), (1, 2))


def knights_tour(column, row):
    """Return an 8x8 board numbering a knight's tour that starts at (column, row), 1-based."""
    if not (1 <= column <= _SIZE and 1 <= row <= _SIZE):
        raise ValueError("column and row must lie in 1..8")
    board = [[0] * _SIZE for _ in range(_SIZE)]
    last = _SIZE * _SIZE

    def free(r, c):
        return 0 <= r < _SIZE and 0 <= c < _SIZE and board[r][c] == 0

    def onward(r, c):
        return sum(free(r + dr, c + dc) for dr, dc in _KNIGHT)

    def visit(r, c, step):
        board[r][c] = step
        if step == last:
            return True
        candidates = sorted(
            (onward(r + dr, c + dc), r + dr, c + dc)
            for dr, dc in _KNIGHT
            if free(r + dr, c + dc)
        )
        for _, nr, nc in candidates:
            if visit(nr, nc, step + 1):
                return True
        board[r][c] = 0
        return False

    if not visit(row - 1, column - 1, 1):
        raise RuntimeError("no knight's tour found")
    return board


def hamiltonian_flights(n, flights):
    """Count routes from city 1 to city n visiting every city once, modulo 10**9 + 7."""
    if n < 1:
        raise ValueError("n must be at least 1")
    multiplicity = Counter()
    for a, b in flights:
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError(f"flight ({a}, {b}) is outside 1..{n}")
        if a != b:
            multiplicity[(a - 1, b - 1)] += 1
    predecessors = [[] for _ in range(n)]
    for (a, b), count in multiplicity.items():
        predecessors[b].append((a, count))

    full = (1 << n) - 1
    last = 1 << (n - 1)
    empty = [0] * n
    ways = [empty] * (1 << n)
    ways[1] = [1] + [0] * (n - 1)
    for mask in range(3, 1 << n, 2):
        if mask & last and mask != full:
            continue
        row = [0] * n
        for city in range(1, n):
            bit = 1 << city
            if not mask & bit:
                continue
            previous = ways[mask ^ bit]
            total = sum(count * previous[other] for other, count in predecessors[city] if mask >> other & 1)
            row[city] = total % MOD
        ways[mask] = row
    return ways[full][n - 1]


def de_bruijn_sequence(n):
    """Return a shortest bit string that holds every n-bit string as a substring."""
    if n < 1:
        raise ValueError("n must be at least 1")
    mask = (1 << (n - 1)) - 1
    adjacency = [[] for _ in range(1 << (n - 1))]
    for edge in range(1 << n):
        adjacency[edge >> 1].append((edge & mask, edge))
    used = [False] * (1 << n)
    bits = []
    stack = [(0, iter(adjacency[0]), None)]
    while stack:
        node, edges, incoming = stack[-1]
        for target, edge in edges:
            if not used[edge]:
                used[edge] = True
                stack.append((target, iter(adjacency[target]), edge))
                break
        else:
            stack.pop()
            if incoming is not None:
                bits.append(str(incoming % 2))
    return "0" * (n - 1) + "".join(reversed(bits))