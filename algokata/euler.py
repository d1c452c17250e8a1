"""Routes that use every street or teleporter exactly once."""


def _check(n, edges):
    if n < 1:
        raise ValueError("n must be at least 1")
    edges = list(edges)
    for a, b in edges:
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError(f"edge ({a}, {b}) is outside 1..{n}")
    return edges


def mail_delivery(n, streets):
    """Return a round trip from crossing 1 using every two-way street once, or None."""
    streets = _check(n, streets)
    incident = [[] for _ in range(n)]
    for index, (a, b) in enumerate(streets):
        incident[a - 1].append(index)
        incident[b - 1].append(index)
    if any(len(edges) % 2 for edges in incident):
        return None
    used = [False] * len(streets)
    stack = [0]
    route = []
    while stack:
        node = stack[-1]
        if incident[node]:
            index = incident[node].pop()
            if not used[index]:
                used[index] = True
                a, b = streets[index]
                stack.append((a - 1) ^ (b - 1) ^ node)
        else:
            route.append(stack.pop() + 1)
    return route if len(route) == len(streets) + 1 else None


def teleporters_path(n, teleporters):
    """Return a route from level 1 to level n using every one-way teleporter once, or None."""
    teleporters = _check(n, teleporters)
    outgoing = [[] for _ in range(n)]
    indegree = [0] * n
    for index, (a, b) in enumerate(teleporters):
        outgoing[a - 1].append(index)
        indegree[b - 1] += 1
    for node in range(n):
        out = len(outgoing[node])
        if node == 0:
            balanced = indegree[node] + 1 == out
        elif node == n - 1:
            balanced = indegree[node] == out + 1
        else:
            balanced = indegree[node] == out
        if not balanced:
            return None
    stack = [0]
    route = []
    while stack:
        node = stack[-1]
        if outgoing[node]:
            index = outgoing[node].pop()
            stack.append(teleporters[index][1] - 1)
        else:
            route.append(stack.pop() + 1)
    if len(route) != len(teleporters) + 1:
        return None
    return route[::-1]