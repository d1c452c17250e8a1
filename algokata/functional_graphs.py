"""Graphs in which every node has exactly one outgoing edge."""

from dataclasses import dataclass


def _targets(destinations):
    destinations = list(destinations)
    size = len(destinations)
    if not size:
        raise ValueError("destinations must not be empty")
    for target in destinations:
        if not 1 <= target <= size:
            raise ValueError(f"destination {target} is outside 1..{size}")
    return [target - 1 for target in destinations]


def _check_planet(planet, size):
    if not 1 <= planet <= size:
        raise ValueError(f"planet {planet} is outside 1..{size}")


@dataclass
class _Layout:
    tail: list
    root: list
    cycle: list
    position: list
    lengths: list
    entry: list
    exit: list


def _layout(targets):
    """Describe each node's distance to its cycle, the cycle node it reaches and the cycles."""
    size = len(targets)
    cycle = [-1] * size
    position = [0] * size
    lengths = []
    state = [0] * size
    for start in range(size):
        path = []
        node = start
        while state[node] == 0:
            state[node] = 1
            path.append(node)
            node = targets[node]
        if state[node] == 1:
            loop = path[path.index(node):]
            for place, member in enumerate(loop):
                cycle[member] = len(lengths)
                position[member] = place
            lengths.append(len(loop))
        for member in path:
            state[member] = 2

    children = [[] for _ in range(size)]
    for node in range(size):
        if cycle[node] == -1:
            children[targets[node]].append(node)

    tail = [0] * size
    root = list(range(size))
    entry = [0] * size
    exit_ = [0] * size
    clock = 0
    for top in range(size):
        if cycle[top] == -1:
            continue
        entry[top] = clock
        clock += 1
        stack = [(top, iter(children[top]))]
        while stack:
            node, pending = stack[-1]
            child = next(pending, None)
            if child is None:
                stack.pop()
                exit_[node] = clock
                continue
            tail[child] = tail[node] + 1
            root[child] = top
            entry[child] = clock
            clock += 1
            stack.append((child, iter(children[child])))
    return _Layout(tail, root, cycle, position, lengths, entry, exit_)


def planets_queries_i(destinations, queries):
    """Answer (planet, k) queries with the planet reached after k teleports."""
    targets = _targets(destinations)
    size = len(targets)
    queries = list(queries)
    for planet, steps in queries:
        _check_planet(planet, size)
        if steps < 0:
            raise ValueError("steps must not be negative")
    levels = max((steps.bit_length() for _, steps in queries), default=0)
    jumps = [targets]
    while len(jumps) < levels:
        previous = jumps[-1]
        jumps.append([previous[node] for node in previous])
    answers = []
    for planet, steps in queries:
        node = planet - 1
        level = 0
        while steps:
            if steps & 1:
                node = jumps[level][node]
            steps >>= 1
            level += 1
        answers.append(node + 1)
    return answers


def planets_queries_ii(destinations, queries):
    """Answer (a, b) queries with the fewest teleports from a to b, or None when impossible."""
    layout = _layout(_targets(destinations))
    size = len(layout.tail)
    answers = []
    for a, b in queries:
        _check_planet(a, size)
        _check_planet(b, size)
        a, b = a - 1, b - 1
        if layout.cycle[b] == -1:
            inside = (
                layout.root[a] == layout.root[b]
                and layout.entry[b] <= layout.entry[a] < layout.exit[b]
            )
            answers.append(layout.tail[a] - layout.tail[b] if inside else None)
            continue
        arrival = layout.root[a]
        which = layout.cycle[arrival]
        if which != layout.cycle[b]:
            answers.append(None)
            continue
        around = (layout.position[b] - layout.position[arrival]) % layout.lengths[which]
        answers.append(layout.tail[a] + around)
    return answers


def planets_cycles(destinations):
    """Return, for each planet, how many distinct planets a walk from it visits."""
    layout = _layout(_targets(destinations))
    return [
        tail + layout.lengths[layout.cycle[top]]
        for tail, top in zip(layout.tail, layout.root)
    ]