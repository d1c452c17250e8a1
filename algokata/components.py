"""Strongly connected components and the problems built on them."""


def _adjacency(n, edges):
    if n < 1:
        raise ValueError("n must be at least 1")
    forward = [[] for _ in range(n)]
    backward = [[] for _ in range(n)]
    for a, b in edges:
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError(f"edge ({a}, {b}) is outside 1..{n}")
        forward[a - 1].append(b - 1)
        backward[b - 1].append(a - 1)
    return forward, backward


def _kosaraju(forward, backward):
    """Return (component index of every node, members of every component).

    Components are numbered in topological order of the condensed graph, so an
    edge always leads from a component to one with an equal or larger index.
    """
    size = len(forward)
    seen = [False] * size
    finished = []
    for root in range(size):
        if seen[root]:
            continue
        seen[root] = True
        stack = [(root, iter(forward[root]))]
        while stack:
            node, successors = stack[-1]
            for other in successors:
                if not seen[other]:
                    seen[other] = True
                    stack.append((other, iter(forward[other])))
                    break
            else:
                stack.pop()
                finished.append(node)

    component = [-1] * size
    groups = []
    for root in reversed(finished):
        if component[root] != -1:
            continue
        index = len(groups)
        members = []
        component[root] = index
        stack = [root]
        while stack:
            node = stack.pop()
            members.append(node)
            for other in backward[node]:
                if component[other] == -1:
                    component[other] = index
                    stack.append(other)
        groups.append(members)
    return component, groups


def strongly_connected_components(n, edges):
    """Return the strongly connected components of a directed graph as lists of 1-based nodes.

    Components come in topological order: no edge leads to an earlier component.
    """
    _, groups = _kosaraju(*_adjacency(n, edges))
    return [[node + 1 for node in members] for members in groups]


def flight_routes_check(n, flights):
    """Return None when every city reaches every other, else (a, b) with no route from a to b."""
    groups = strongly_connected_components(n, flights)
    if len(groups) == 1:
        return None
    return groups[1][0], groups[0][0]


def planets_and_kingdoms(n, roads):
    """Return the number of kingdoms and, for each planet, the 1-based kingdom it belongs to."""
    component, groups = _kosaraju(*_adjacency(n, roads))
    return len(groups), [index + 1 for index in component]


def _literal(sign, topping, toppings):
    if sign not in ("+", "-"):
        raise ValueError(f"sign must be '+' or '-', not {sign!r}")
    if not 1 <= topping <= toppings:
        raise ValueError(f"topping {topping} is outside 1..{toppings}")
    return 2 * (topping - 1) + (sign == "-")


def giant_pizza(toppings, wishes):
    """Choose '+' or '-' for every topping so each wish has one of its two parts granted.

    Each wish is (sign, topping, sign, topping). Returns None when no choice works.
    """
    if toppings < 1:
        raise ValueError("toppings must be at least 1")
    size = 2 * toppings
    forward = [[] for _ in range(size)]
    for first_sign, first, second_sign, second in wishes:
        x = _literal(first_sign, first, toppings)
        y = _literal(second_sign, second, toppings)
        forward[x ^ 1].append(y)
        forward[y ^ 1].append(x)
    backward = [[] for _ in range(size)]
    for node, targets in enumerate(forward):
        for target in targets:
            backward[target].append(node)
    component, _ = _kosaraju(forward, backward)
    if any(component[2 * i] == component[2 * i + 1] for i in range(toppings)):
        return None
    return ["+" if component[2 * i] > component[2 * i + 1] else "-" for i in range(toppings)]


def coin_collector(coins, tunnels):
    """Return the most coins collectable on a walk through one-way tunnels between rooms."""
    coins = list(coins)
    if not coins:
        return 0
    forward, backward = _adjacency(len(coins), tunnels)
    component, groups = _kosaraju(forward, backward)
    best = [0] * len(groups)
    for index in reversed(range(len(groups))):
        onward = max(
            (
                best[component[other]]
                for node in groups[index]
                for other in forward[node]
                if component[other] != index
            ),
            default=0,
        )
        best[index] = sum(coins[node] for node in groups[index]) + onward
    return max(best)