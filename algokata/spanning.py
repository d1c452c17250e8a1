"""Union-find and the spanning-tree problems built on it."""


class DisjointSet:
    """Union-find over 0..size-1 with union by size and path compression.

    ``components`` counts the sets and ``largest`` is the size of the biggest one.
    """

    def __init__(self, size):
        if size < 0:
            raise ValueError("size must not be negative")
        self._parent = list(range(size))
        self._size = [1] * size
        self.components = size
        self.largest = 1 if size else 0

    def find(self, item):
        """Return the representative of the set holding ``item``."""
        if not 0 <= item < len(self._parent):
            raise IndexError(f"item {item} is out of range")
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[item] != root:
            self._parent[item], item = root, self._parent[item]
        return root

    def union(self, a, b):
        """Merge the sets of ``a`` and ``b``; return False when they were already one."""
        first, second = self.find(a), self.find(b)
        if first == second:
            return False
        if self._size[first] < self._size[second]:
            first, second = second, first
        self._parent[second] = first
        self._size[first] += self._size[second]
        self.components -= 1
        self.largest = max(self.largest, self._size[first])
        return True


def _check_road(n, a, b):
    if not (1 <= a <= n and 1 <= b <= n):
        raise ValueError(f"road ({a}, {b}) is outside 1..{n}")


def road_reparation(n, roads):
    """Return the least cost of (a, b, cost) roads joining all n cities, or None."""
    if n < 1:
        raise ValueError("n must be at least 1")
    ordered = []
    for a, b, cost in roads:
        _check_road(n, a, b)
        ordered.append((cost, a - 1, b - 1))
    ordered.sort()
    cities = DisjointSet(n)
    total = 0
    for cost, a, b in ordered:
        if cities.union(a, b):
            total += cost
    return total if cities.components == 1 else None


def road_construction(n, roads):
    """Return (number of components, largest component size) after each road is built."""
    cities = DisjointSet(n)
    states = []
    for a, b in roads:
        _check_road(n, a, b)
        cities.union(a - 1, b - 1)
        states.append((cities.components, cities.largest))
    return states