"""Sorting, greedy and two-pointer problems."""

from bisect import bisect_right
from collections import Counter

from sortedcontainers import SortedList, SortedSet


def distinct_numbers(values):
    """Return how many distinct values occur in ``values``."""
    return len(set(values))


def apartments(desired, sizes, tolerance):
    """Return how many applicants get an apartment within ``tolerance`` of their wish."""
    wants = sorted(desired)
    offers = sorted(sizes)
    matched = 0
    want_index = offer_index = 0
    while want_index < len(wants) and offer_index < len(offers):
        offer, want = offers[offer_index], wants[want_index]
        if offer < want - tolerance:
            offer_index += 1
        elif offer > want + tolerance:
            want_index += 1
        else:
            offer_index += 1
            want_index += 1
            matched += 1
    return matched


def ferris_wheel(weights, limit):
    """Return the fewest gondolas, each holding one or two children within ``limit``."""
    ordered = sorted(weights)
    light, heavy = 0, len(ordered) - 1
    gondolas = 0
    while light <= heavy:
        gondolas += 1
        if light < heavy and ordered[light] + ordered[heavy] <= limit:
            light += 1
        heavy -= 1
    return gondolas


def concert_tickets(prices, bids):
    """Sell, for every bid in turn, the dearest ticket not above it.

    Returns the price paid for each bid, or -1 where no ticket is cheap enough.
    """
    available = SortedList(prices)
    sold = []
    for bid in bids:
        index = available.bisect_right(bid)
        sold.append(-1 if index == 0 else available.pop(index - 1))
    return sold


def restaurant_customers(intervals):
    """Return the most customers present at once; leaving precedes arriving at a tie."""
    events = sorted(
        [(arrival, True) for arrival, _ in intervals]
        + [(departure, False) for _, departure in intervals]
    )
    present = best = 0
    for _, arriving in events:
        if arriving:
            present += 1
            best = max(best, present)
        else:
            present -= 1
    return best


def movie_festival(movies):
    """Return the most (start, end) movies that can be watched entirely."""
    ordered = sorted((end, start) for start, end in movies)
    if not ordered:
        return 0
    watched = 1
    last_end = ordered[0][0]
    for end, start in ordered[1:]:
        if start >= last_end:
            watched += 1
            last_end = end
    return watched


def sum_of_two_values(values, target):
    """Return 1-based positions of two values adding up to ``target``, or None."""
    ordered = sorted((value, position) for position, value in enumerate(values, 1))
    last = len(ordered) - 1
    for index, (value, position) in enumerate(ordered[:-1]):
        if value >= target:
            break
        wanted = target - value
        low, high = index + 1, last
        while low <= high:
            middle = (low + high) // 2
            candidate, other = ordered[middle]
            if candidate == wanted:
                return position, other
            if candidate < wanted:
                low = middle + 1
            else:
                high = middle - 1
    return None


def maximum_subarray_sum(values):
    """Return the largest sum of a non-empty contiguous subarray."""
    iterator = iter(values)
    try:
        best = current = next(iterator)
    except StopIteration:
        raise ValueError("values must not be empty") from None
    for value in iterator:
        current = max(value, current + value)
        best = max(best, current)
    return best


def stick_lengths(lengths):
    """Return the least total change that makes all sticks equally long."""
    ordered = sorted(lengths)
    if not ordered:
        raise ValueError("lengths must not be empty")
    median = ordered[len(ordered) // 2]
    return sum(abs(length - median) for length in ordered)


def missing_coin_sum(coins):
    """Return the smallest sum that no subset of ``coins`` adds up to."""
    reachable = 1
    for coin in sorted(coins):
        if coin > reachable:
            break
        reachable += coin
    return reachable


def _positions(numbers):
    """Map each value of a permutation of 1..n to its 1-based position; index 0 maps to 0."""
    size = len(numbers)
    if sorted(numbers) != list(range(1, size + 1)):
        raise ValueError("numbers must be a permutation of 1..n")
    positions = [0] * (size + 1)
    for index, value in enumerate(numbers, 1):
        positions[value] = index
    return positions


def _rounds(positions):
    return 1 + sum(
        1 for value in range(1, len(positions)) if positions[value] < positions[value - 1]
    )


def collecting_numbers(numbers):
    """Return the rounds needed to collect 1..n scanning the permutation left to right."""
    return _rounds(_positions(numbers))


def collecting_numbers_ii(numbers, swaps):
    """Return the round count after each swap of two 1-based positions."""
    size = len(numbers)
    positions = _positions(numbers)
    arrangement = [0, *numbers]
    rounds = _rounds(positions)
    results = []

    def inversions(pairs):
        return sum(1 for low, high in pairs if positions[high] < positions[low])

    for a, b in swaps:
        if not (1 <= a <= size and 1 <= b <= size):
            raise IndexError(f"swap ({a}, {b}) is outside 1..{size}")
        first, second = arrangement[a], arrangement[b]
        pairs = {(first - 1, first), (second - 1, second)}
        if first < size:
            pairs.add((first, first + 1))
        if second < size:
            pairs.add((second, second + 1))
        rounds -= inversions(pairs)
        arrangement[a], arrangement[b] = second, first
        positions[first], positions[second] = positions[second], positions[first]
        rounds += inversions(pairs)
        results.append(rounds)
    return results


def playlist(songs):
    """Return the length of the longest stretch of songs with no repeats."""
    last_seen = {}
    start = 0
    best = 0
    for index, song in enumerate(songs):
        if last_seen.get(song, -1) >= start:
            start = last_seen[song] + 1
        last_seen[song] = index
        best = max(best, index - start + 1)
    return best


def towers(cubes):
    """Return the fewest towers built by stacking each cube on a strictly larger top."""
    tops = []
    for cube in cubes:
        index = bisect_right(tops, cube)
        if index < len(tops):
            tops[index] = cube
        else:
            tops.append(cube)
    return len(tops)


def traffic_lights(length, positions):
    """Return the longest unlit stretch of a street after each light is added."""
    lights = SortedSet([0, length])
    gaps = SortedList([length])
    longest = []
    for position in positions:
        if not 0 < position <= length:
            raise ValueError(f"position {position} is outside 1..{length}")
        index = lights.bisect_left(position)
        right, left = lights[index], lights[index - 1]
        lights.add(position)
        gaps.remove(right - left)
        gaps.add(right - position)
        gaps.add(position - left)
        longest.append(gaps[-1])
    return longest


__all__ = [
    "Counter",
    "apartments",
    "collecting_numbers",
    "collecting_numbers_ii",
    "concert_tickets",
    "distinct_numbers",
    "ferris_wheel",
    "maximum_subarray_sum",
    "missing_coin_sum",
    "movie_festival",
    "playlist",
    "restaurant_customers",
    "stick_lengths",
    "sum_of_two_values",
    "towers",
    "traffic_lights",
]