"""Weighted shortest-path problems: Dijkstra, Floyd-Warshall and Bellman-Ford."""

import heapq
from collections import deque

from .introductory import MOD


def _check_size(n):
    if n < 1:
        raise ValueError("n must be at least 1")


def _check_nodes(n, a, b):
    if not (1 <= a <= n and 1 <= b <= n):
        raise ValueError(f"edge ({a}, {b}) is outside 1..{n}")


def _weighted_edges(n, edges):
    _check_size(n)
    checked = []
    for a, b, weight in edges:
        _check_nodes(n, a, b)
        checked.append((a - 1, b - 1, weight))
    return checked


def _adjacency(n, edges):
    adjacency = [[] for _ in range(n)]
    for a, b, weight in _weighted_edges(n, edges):
        adjacency[a].append((b, weight))
    return adjacency


def _dijkstra(adjacency, source=0):
    distance = [None] * len(adjacency)
    distance[source] = 0
    done = [False] * len(adjacency)
    heap = [(0, source)]
    while heap:
        cost, node = heapq.heappop(heap)
        if done[node]:
            continue
        done[node] = True
        for other, weight in adjacency[node]:
            candidate = cost + weight
            if distance[other] is None or candidate < distance[other]:
                distance[other] = candidate
                heapq.heappush(heap, (candidate, other))
    return distance


def _reachable(adjacency, root):
    seen = {root}
    queue = deque([root])
    while queue:
        node = queue.popleft()
        for other in adjacency[node]:
            if other not in seen:
                seen.add(other)
                queue.append(other)
    return seen


def shortest_routes_i(n, flights):
    """Return the cheapest price from city 1 to every city, None where unreachable.

    ``flights`` holds one-way (from, to, price) triples with 1-based cities.
    """
    return _dijkstra(_adjacency(n, flights))


def shortest_routes_ii(n, roads, queries):
    """Answer (a, b) queries with the shortest two-way road distance, None where unreachable."""
    infinity = float("inf")
    distance = [[infinity] * n for _ in range(n)]
    for node in range(n):
        distance[node][node] = 0
    for a, b, length in _weighted_edges(n, roads):
        if length < distance[a][b]:
            distance[a][b] = length
        distance[b][a] = distance[a][b]
    for middle in range(n):
        through = distance[middle]
        for row in distance:
            head = row[middle]
            if head == infinity:
                continue
            for target, tail in enumerate(through):
                if head + tail < row[target]:
                    row[target] = head + tail
    answers = []
    for a, b in queries:
        _check_nodes(n, a, b)
        value = distance[a - 1][b - 1]
        answers.append(None if value == infinity else value)
    return answers


def high_score(n, tunnels):
    """Return the largest score on a route from room 1 to room n.

    Returns None when the score can be made arbitrarily large and raises
    ValueError when room n cannot be reached at all.
    """
    edges = _weighted_edges(n, tunnels)
    score = [None] * n
    score[0] = 0
    changed = set()
    for _ in range(n):
        changed = set()
        for a, b, gain in edges:
            if score[a] is None:
                continue
            candidate = score[a] + gain
            if score[b] is None or candidate > score[b]:
                score[b] = candidate
                changed.add(b)
    if score[n - 1] is None:
        raise ValueError(f"room {n} cannot be reached from room 1")
    if changed:
        forward = [[] for _ in range(n)]
        backward = [[] for _ in range(n)]
        for a, b, _ in edges:
            forward[a].append(b)
            backward[b].append(a)
        relevant = _reachable(forward, 0) & _reachable(backward, n - 1)
        if changed & relevant:
            return None
    return score[n - 1]


def flight_discount(n, flights):
    """Return the cheapest price from city 1 to city n when one flight may be halved.

    Returns None when city n cannot be reached.
    """
    adjacency = _adjacency(n, flights)
    best = {(0, False): 0, (0, True): 0}
    heap = [(0, 0, False)]
    while heap:
        cost, node, used = heapq.heappop(heap)
        if best[(node, used)] < cost:
            continue
        for other, price in adjacency[node]:
            options = [(cost + price, used)]
            if not used:
                options.append((cost + price // 2, True))
            for candidate, flag in options:
                key = (other, flag)
                if key not in best or candidate < best[key]:
                    best[key] = candidate
                    heapq.heappush(heap, (candidate, other, flag))
    return best.get((n - 1, True))


def cycle_finding(n, edges):
    """Return a negative cycle as 1-based nodes, the first repeated at the end, or None."""
    checked = _weighted_edges(n, edges)
    distance = [0] * n
    parent = [-1] * n
    last = None
    for _ in range(n):
        last = None
        for a, b, weight in checked:
            if distance[a] + weight < distance[b]:
                distance[b] = distance[a] + weight
                parent[b] = a
                last = b
    if last is None:
        return None
    node = last
    for _ in range(n):
        node = parent[node]
    cycle = [node]
    current = parent[node]
    while current != node:
        cycle.append(current)
        current = parent[current]
    cycle.append(node)
    return [item + 1 for item in reversed(cycle)]


def flight_routes(n, flights, k):
    """Return, ascending, the prices of the k cheapest routes from city 1 to city n.

    Fewer prices are returned when fewer routes exist.
    """
    if k < 1:
        raise ValueError("k must be at least 1")
    adjacency = _adjacency(n, flights)
    target = n - 1
    popped = [0] * n
    prices = []
    heap = [(0, 0)]
    while heap and len(prices) < k:
        cost, node = heapq.heappop(heap)
        if popped[node] >= k:
            continue
        popped[node] += 1
        if node == target:
            prices.append(cost)
        for other, price in adjacency[node]:
            if popped[other] < k:
                heapq.heappush(heap, (cost + price, other))
    return prices


def investigation(n, flights):
    """Describe the cheapest routes from city 1 to city n.

    Returns (price, number of cheapest routes modulo 10**9 + 7, fewest flights,
    most flights) over the cheapest routes, or None when city n is unreachable.
    """
    adjacency = _adjacency(n, flights)
    if any(price <= 0 for edges in adjacency for _, price in edges):
        raise ValueError("flight prices must be positive")
    distance = [None] * n
    routes = [0] * n
    fewest = [0] * n
    most = [0] * n
    distance[0] = 0
    routes[0] = 1
    done = [False] * n
    heap = [(0, 0)]
    while heap:
        cost, node = heapq.heappop(heap)
        if done[node]:
            continue
        done[node] = True
        for other, price in adjacency[node]:
            candidate = cost + price
            if distance[other] is None or candidate < distance[other]:
                distance[other] = candidate
                routes[other] = routes[node]
                fewest[other] = fewest[node] + 1
                most[other] = most[node] + 1
                heapq.heappush(heap, (candidate, other))
            elif candidate == distance[other]:
                routes[other] = (routes[other] + routes[node]) % MOD
                fewest[other] = min(fewest[other], fewest[node] + 1)
                most[other] = max(most[other], most[node] + 1)
    target = n - 1
    if distance[target] is None:
        return None
    return distance[target], routes[target], fewest[target], most[target]