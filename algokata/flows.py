"""Maximum flow and minimum cut with the Edmonds-Karp method."""

from collections import deque


def _check(n, a, b):
    if not (1 <= a <= n and 1 <= b <= n):
        raise ValueError(f"edge ({a}, {b}) is outside 1..{n}")


def _augmenting_path(residual, source, sink):
    parent = {source: None}
    queue = deque([source])
    while queue and sink not in parent:
        node = queue.popleft()
        for other, capacity in residual[node].items():
            if capacity > 0 and other not in parent:
                parent[other] = node
                queue.append(other)
    return parent if sink in parent else None


def _max_flow(residual, source, sink):
    """Push as much flow as possible from source to sink, updating ``residual`` in place."""
    if source == sink:
        return 0
    total = 0
    while (parent := _augmenting_path(residual, source, sink)) is not None:
        bottleneck = None
        node = sink
        while parent[node] is not None:
            capacity = residual[parent[node]][node]
            bottleneck = capacity if bottleneck is None else min(bottleneck, capacity)
            node = parent[node]
        node = sink
        while parent[node] is not None:
            previous = parent[node]
            residual[previous][node] -= bottleneck
            residual[node][previous] += bottleneck
            node = previous
        total += bottleneck
    return total


def _reachable(residual, source):
    seen = {source}
    queue = deque([source])
    while queue:
        node = queue.popleft()
        for other, capacity in residual[node].items():
            if capacity > 0 and other not in seen:
                seen.add(other)
                queue.append(other)
    return seen


def download_speed(n, connections):
    """Return the greatest rate from computer 1 to computer n over (a, b, speed) links."""
    if n < 1:
        raise ValueError("n must be at least 1")
    residual = [{} for _ in range(n)]
    for a, b, speed in connections:
        _check(n, a, b)
        if speed < 0:
            raise ValueError("speeds must not be negative")
        a, b = a - 1, b - 1
        residual[a][b] = residual[a].get(b, 0) + speed
        residual[b].setdefault(a, 0)
    return _max_flow(residual, 0, n - 1)


def police_chase(n, streets):
    """Return the fewest two-way streets, as given, whose closing separates crossing 1 from n."""
    if n < 1:
        raise ValueError("n must be at least 1")
    streets = list(streets)
    residual = [{} for _ in range(n)]
    for a, b in streets:
        _check(n, a, b)
        if a != b:
            residual[a - 1][b - 1] = 1
            residual[b - 1][a - 1] = 1
    _max_flow(residual, 0, n - 1)
    if n == 1:
        return []
    side = _reachable(residual, 0)
    closed = []
    taken = set()
    for a, b in streets:
        key = frozenset((a, b))
        if key in taken:
            continue
        if ((a - 1) in side) != ((b - 1) in side):
            taken.add(key)
            closed.append((a, b))
    return closed