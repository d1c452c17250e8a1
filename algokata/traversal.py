"""Connectivity, shortest unweighted routes, bipartition and cycle detection."""

from collections import deque


def _adjacency(n, edges, directed=False):
    if n < 0:
        raise ValueError("n must not be negative")
    adjacency = [[] for _ in range(n)]
    for a, b in edges:
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError(f"edge ({a}, {b}) is outside 1..{n}")
        adjacency[a - 1].append(b - 1)
        if not directed:
            adjacency[b - 1].append(a - 1)
    return adjacency


def _reach(adjacency, root, seen):
    seen.add(root)
    queue = deque([root])
    while queue:
        node = queue.popleft()
        for other in adjacency[node]:
            if other not in seen:
                seen.add(other)
                queue.append(other)


def building_roads(n, roads):
    """Return new roads (a, b) that join all components, linking each to the first one."""
    adjacency = _adjacency(n, roads)
    seen = set()
    leaders = []
    for city in range(n):
        if city not in seen:
            _reach(adjacency, city, seen)
            leaders.append(city + 1)
    return [(leaders[0], leader) for leader in leaders[1:]]


def message_route(n, connections):
    """Return a shortest list of computers from 1 to n, or None when n cannot be reached."""
    if n < 1:
        raise ValueError("n must be at least 1")
    adjacency = _adjacency(n, connections)
    came_from = {0: None}
    queue = deque([0])
    while queue:
        node = queue.popleft()
        if node == n - 1:
            route = []
            while node is not None:
                route.append(node + 1)
                node = came_from[node]
            return route[::-1]
        for other in adjacency[node]:
            if other not in came_from:
                came_from[other] = node
                queue.append(other)
    return None


def building_teams(n, friendships):
    """Assign every pupil team 1 or 2 so that friends differ, or return None."""
    adjacency = _adjacency(n, friendships)
    team = [0] * n
    for root in range(n):
        if team[root]:
            continue
        team[root] = 1
        queue = deque([root])
        while queue:
            node = queue.popleft()
            for other in adjacency[node]:
                if not team[other]:
                    team[other] = 3 - team[node]
                    queue.append(other)
                elif team[other] == team[node]:
                    return None
    return team


def _find_cycle(adjacency, undirected):
    """Return [u, v, parent(v), ..., u] for the first back edge v -> u found, or None."""
    size = len(adjacency)
    color = [0] * size
    parent = [-1] * size
    for root in range(size):
        if color[root]:
            continue
        color[root] = 1
        stack = [(root, iter(adjacency[root]))]
        while stack:
            node, neighbours = stack[-1]
            for other in neighbours:
                if undirected and other == parent[node]:
                    continue
                if color[other] == 0:
                    parent[other] = node
                    color[other] = 1
                    stack.append((other, iter(adjacency[other])))
                    break
                if color[other] == 1:
                    cycle = [other]
                    current = node
                    while current != other:
                        cycle.append(current)
                        current = parent[current]
                    cycle.append(other)
                    return cycle
            else:
                color[node] = 2
                stack.pop()
    return None


def round_trip(n, roads):
    """Return a round trip over two-way roads that starts and ends in one city, or None."""
    cycle = _find_cycle(_adjacency(n, roads), undirected=True)
    return None if cycle is None else [city + 1 for city in cycle]


def round_trip_ii(n, flights):
    """Return a round trip following one-way flights, first city repeated at the end, or None."""
    cycle = _find_cycle(_adjacency(n, flights, directed=True), undirected=False)
    return None if cycle is None else [city + 1 for city in reversed(cycle)]