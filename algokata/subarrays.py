"""Subarray sums, sliding windows and small-tuple sums."""

from collections import Counter, defaultdict, deque
from itertools import accumulate, combinations

from sortedcontainers import SortedList


def maximum_subarray_sum_ii(values, shortest, longest):
    """Return the largest sum of a subarray whose length lies in [shortest, longest]."""
    values = list(values)
    if not 1 <= shortest <= longest:
        raise ValueError("need 1 <= shortest <= longest")
    if shortest > len(values):
        raise ValueError("shortest is longer than the array")
    prefix = [0, *accumulate(values)]
    window = deque()
    best = None
    for end in range(shortest, len(prefix)):
        entering = end - shortest
        while window and prefix[window[-1]] >= prefix[entering]:
            window.pop()
        window.append(entering)
        while window[0] < end - longest:
            window.popleft()
        candidate = prefix[end] - prefix[window[0]]
        best = candidate if best is None else max(best, candidate)
    return best


def nearest_smaller_values(values):
    """Return, for each value, the 1-based position of the nearest smaller value to its left, or 0."""
    stack = []
    nearest = []
    for position, value in enumerate(values, 1):
        while stack and stack[-1][0] >= value:
            stack.pop()
        nearest.append(stack[-1][1] if stack else 0)
        stack.append((value, position))
    return nearest


class _MedianWindow:
    """A multiset split into a lower and an upper half, keeping the sums of both."""

    def __init__(self):
        self._low = SortedList()
        self._high = SortedList()
        self._low_sum = 0
        self._high_sum = 0

    def add(self, item):
        if self._low and item <= self._low[-1]:
            self._low.add(item)
            self._low_sum += item[0]
        else:
            self._high.add(item)
            self._high_sum += item[0]
        self._rebalance()

    def remove(self, item):
        if self._low and item <= self._low[-1]:
            self._low.remove(item)
            self._low_sum -= item[0]
        else:
            self._high.remove(item)
            self._high_sum -= item[0]
        self._rebalance()

    def _rebalance(self):
        target = (len(self._low) + len(self._high) + 1) // 2
        while len(self._low) > target:
            item = self._low.pop()
            self._low_sum -= item[0]
            self._high.add(item)
            self._high_sum += item[0]
        while len(self._low) < target:
            item = self._high.pop(0)
            self._high_sum -= item[0]
            self._low.add(item)
            self._low_sum += item[0]

    @property
    def median(self):
        return self._low[-1][0]

    @property
    def cost(self):
        median = self.median
        return (
            median * len(self._low)
            - self._low_sum
            + self._high_sum
            - median * len(self._high)
        )


def _windows(values, k):
    """Yield the median window over each run of k consecutive values."""
    values = list(values)
    if not 1 <= k <= len(values):
        raise ValueError("k must lie between 1 and the number of values")
    window = _MedianWindow()
    for index, value in enumerate(values):
        window.add((value, index))
        if index >= k - 1:
            yield window
            start = index - k + 1
            window.remove((values[start], start))


def sliding_median(values, k):
    """Return the lower median of every window of k consecutive values."""
    return [window.median for window in _windows(values, k)]


def sliding_cost(values, k):
    """Return, for every window of k values, the least total change making them equal."""
    return [window.cost for window in _windows(values, k)]


def subarray_divisibility(values):
    """Return how many subarrays have a sum divisible by the number of values."""
    values = list(values)
    size = len(values)
    if not size:
        return 0
    seen = Counter({0: 1})
    total = 0
    count = 0
    for value in values:
        total = (total + value) % size
        count += seen[total]
        seen[total] += 1
    return count


def subarray_sums_i(values, target):
    """Return how many subarrays of positive values sum to ``target``."""
    values = list(values)
    start = 0
    total = 0
    count = 0
    for end, value in enumerate(values):
        total += value
        while total > target and start <= end:
            total -= values[start]
            start += 1
        if total == target:
            count += 1
    return count


def subarray_sums_ii(values, target):
    """Return how many subarrays sum to ``target``."""
    seen = Counter({0: 1})
    total = 0
    count = 0
    for value in values:
        total += value
        count += seen[total - target]
        seen[total] += 1
    return count


def sum_of_three_values(values, target):
    """Return 1-based positions of three values adding up to ``target``, or None."""
    ordered = sorted((value, position) for position, value in enumerate(values, 1))
    for first, (value, position) in enumerate(ordered):
        low, high = first + 1, len(ordered) - 1
        while low < high:
            total = value + ordered[low][0] + ordered[high][0]
            if total == target:
                return position, ordered[low][1], ordered[high][1]
            if total < target:
                low += 1
            else:
                high -= 1
    return None


def sum_of_four_values(values, target):
    """Return 1-based positions of four values adding up to ``target``, or None."""
    numbered = list(enumerate(values, 1))
    pairs = defaultdict(list)
    for (i, a), (j, b) in combinations(numbered, 2):
        pairs[a + b].append((i, j))
    for (i, a), (j, b) in combinations(numbered, 2):
        for p, q in pairs.get(target - a - b, ()):
            if {p, q}.isdisjoint((i, j)):
                return i, j, p, q
    return None