"""Optimisation problems solved by dynamic programming over intervals, subsets and prefixes."""

from bisect import bisect_left

from .introductory import MOD


def counting_towers(n):
    """Return the ways to build a tower of height n and width 2 from blocks, modulo 10**9 + 7."""
    if n < 1:
        raise ValueError("n must be at least 1")
    split, joined = 1, 1
    for _ in range(n - 1):
        either = split + joined
        split, joined = (either + 3 * split) % MOD, (either + joined) % MOD
    return (split + joined) % MOD


def edit_distance(first, second):
    """Return the fewest insertions, deletions and replacements turning ``first`` into ``second``."""
    previous = list(range(len(second) + 1))
    for i, left in enumerate(first, 1):
        current = [i]
        for j, right in enumerate(second, 1):
            current.append(
                min(
                    previous[j] + 1,
                    current[j - 1] + 1,
                    previous[j - 1] + (left != right),
                )
            )
        previous = current
    return previous[-1]


def elevator_rides(weights, limit):
    """Return the fewest elevator rides that carry everyone when a ride holds at most ``limit``."""
    weights = list(weights)
    count = len(weights)
    best = [(1, 0)] + [None] * ((1 << count) - 1)
    for mask in range(1, 1 << count):
        options = []
        for person, weight in enumerate(weights):
            if mask >> person & 1:
                rides, last = best[mask ^ (1 << person)]
                if last + weight <= limit:
                    options.append((rides, last + weight))
                else:
                    options.append((rides + 1, weight))
        best[mask] = min(options)
    return best[-1][0]


def increasing_subsequence(values):
    """Return the length of the longest strictly increasing subsequence."""
    tails = []
    for value in values:
        index = bisect_left(tails, value)
        if index == len(tails):
            tails.append(value)
        else:
            tails[index] = value
    return len(tails)


def projects(projects):
    """Return the largest reward from non-overlapping (start, end, reward) projects.

    Two projects overlap when one starts on or before the day the other ends.
    """
    ordered = sorted(projects, key=lambda project: project[1])
    ends = [end for _, end, _ in ordered]
    best = [0]
    for start, _, reward in ordered:
        earlier = bisect_left(ends, start)
        best.append(max(best[-1], best[earlier] + reward))
    return best[-1]


def rectangle_cutting(width, height):
    """Return the fewest straight cuts that split a width x height rectangle into squares."""
    if width < 1 or height < 1:
        raise ValueError("both sides must be at least 1")
    cuts = [[0] * (height + 1) for _ in range(width + 1)]
    for i in range(1, width + 1):
        for j in range(1, height + 1):
            if i == j:
                continue
            if i == 1 or j == 1:
                cuts[i][j] = max(i, j) - 1
                continue
            cuts[i][j] = min(
                min(cuts[i - k][j] + cuts[k][j] + 1 for k in range(1, i)),
                min(cuts[i][j - k] + cuts[i][k] + 1 for k in range(1, j)),
            )
    return cuts[width][height]


def removal_game(values):
    """Return the score of the first player when both take from either end and play optimally."""
    values = list(values)
    if not values:
        raise ValueError("values must not be empty")
    size = len(values)
    # scores[left] is (mover, other) for the interval of the current length starting at left.
    scores = [(value, 0) for value in values]
    for length in range(2, size + 1):
        scores = [
            _best_end(values[left], values[left + length - 1], scores[left], scores[left + 1])
            for left in range(size - length + 1)
        ]
    return scores[0][0]


def _best_end(left_value, right_value, without_right, without_left):
    take_left = left_value + without_left[1]
    take_right = without_right[1] + right_value
    if take_left > take_right:
        return take_left, without_left[0]
    return take_right, without_right[0]


def two_sets_ii(n):
    """Return the ways to split 1..n into two sets of equal sum, modulo 10**9 + 7."""
    if n < 0:
        raise ValueError("n must not be negative")
    total = n * (n + 1) // 2
    if total % 2:
        return 0
    half = total // 2
    # Only sets that contain 1 are counted, so each split is counted once.
    ways = [1] + [0] * half
    for number in range(1, n + 1):
        for target in range(half, number - 1, -1):
            ways[target] = (ways[target] + ways[target - number]) % MOD
        ways[0] = 0
    return ways[half]