"""Problems on directed acyclic graphs: ordering, longest routes and route counts."""

from collections import deque
from graphlib import CycleError, TopologicalSorter

from .introductory import MOD


def _adjacency(n, pairs):
    if n < 1:
        raise ValueError("n must be at least 1")
    forward = [[] for _ in range(n)]
    backward = [[] for _ in range(n)]
    for a, b in pairs:
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError(f"edge ({a}, {b}) is outside 1..{n}")
        forward[a - 1].append(b - 1)
        backward[b - 1].append(a - 1)
    return forward, backward


def course_schedule(n, requirements):
    """Order courses 1..n so that for each (a, b) course a comes before b, or return None."""
    requirements = list(requirements)
    forward, backward = _adjacency(n, requirements)
    sorter = TopologicalSorter()
    for a, b in requirements:
        sorter.add(b, a)
    try:
        sorter.prepare()
    except CycleError:
        return None

    order = []
    seen = [False] * n
    for root in range(n):
        if forward[root] or seen[root]:
            continue
        seen[root] = True
        stack = [(root, iter(backward[root]))]
        while stack:
            node, predecessors = stack[-1]
            for other in predecessors:
                if not seen[other]:
                    seen[other] = True
                    stack.append((other, iter(backward[other])))
                    break
            else:
                stack.pop()
                order.append(node + 1)
    return order


def longest_flight_route(n, flights):
    """Return the route from city 1 to city n with the most cities, or None."""
    forward, _ = _adjacency(n, flights)
    indegree = [0] * n
    for targets in forward:
        for target in targets:
            indegree[target] += 1
    length = [None] * n
    length[0] = 0
    parent = [None] * n
    queue = deque(node for node in range(n) if indegree[node] == 0)
    while queue:
        node = queue.popleft()
        for other in forward[node]:
            if length[node] is not None and (length[other] is None or length[node] + 1 > length[other]):
                length[other] = length[node] + 1
                parent[other] = node
            indegree[other] -= 1
            if indegree[other] == 0:
                queue.append(other)
    if length[n - 1] is None:
        return None
    route = [n - 1]
    while route[-1] != 0:
        route.append(parent[route[-1]])
    return [node + 1 for node in reversed(route)]


def game_routes(n, teleporters):
    """Return the number of routes from level 1 to level n, modulo 10**9 + 7."""
    forward, _ = _adjacency(n, teleporters)
    target = n - 1
    state = [0] * n
    ways = [0] * n
    state[0] = 1
    stack = [(0, iter(forward[0]))]
    while stack:
        node, successors = stack[-1]
        for other in successors:
            if state[other] == 0:
                state[other] = 1
                stack.append((other, iter(forward[other])))
                break
        else:
            stack.pop()
            state[node] = 2
            ways[node] = ((node == target) + sum(ways[other] for other in forward[node])) % MOD
    return ways[0]