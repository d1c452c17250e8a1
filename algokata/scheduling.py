"""Scheduling problems solved by binary search on the answer and greedy choice."""

from sortedcontainers import SortedList


def _segments(values, limit):
    """Return how many consecutive segments of sum at most ``limit`` a greedy split needs."""
    count = 1
    current = 0
    for value in values:
        if current + value > limit:
            count += 1
            current = value
        else:
            current += value
    return count


def array_division(values, parts):
    """Return the smallest possible largest sum when ``values`` is cut into ``parts`` pieces."""
    values = list(values)
    if not values:
        raise ValueError("values must not be empty")
    if parts < 1:
        raise ValueError("parts must be at least 1")
    low, high = max(values), sum(values)
    while low < high:
        limit = (low + high) // 2
        if _segments(values, limit) > parts:
            low = limit + 1
        else:
            high = limit
    return low


def factory_machines(times, products):
    """Return the shortest time in which machines with the given speeds make ``products`` items."""
    times = list(times)
    if not times:
        raise ValueError("times must not be empty")
    if any(time <= 0 for time in times):
        raise ValueError("every machine time must be positive")
    low, high = 1, max(1, min(times) * products)
    while low < high:
        middle = (low + high) // 2
        if sum(middle // time for time in times) >= products:
            high = middle
        else:
            low = middle + 1
    return low


def movie_festival_ii(movies, members):
    """Return how many (start, end) movies ``members`` people can watch in total."""
    ordered = sorted((end, start, index) for index, (start, end) in enumerate(movies))
    busy = SortedList()
    watched = 0
    for end, start, index in ordered:
        free = busy.bisect_left((start + 1,))
        if free:
            del busy[free - 1]
        if len(busy) < members:
            busy.add((end, index))
            watched += 1
    return watched


def room_allocation(intervals):
    """Give each (arrival, departure) customer a room.

    Returns the number of rooms used and, in input order, the room of each customer.
    """
    intervals = list(intervals)
    ordered = sorted(
        (departure, arrival, index) for index, (arrival, departure) in enumerate(intervals)
    )
    occupied = SortedList()
    assignment = [0] * len(intervals)
    rooms = 0
    for departure, arrival, index in ordered:
        position = occupied.bisect_left((arrival,))
        if position == 0:
            rooms += 1
            room = rooms
        else:
            _, room = occupied.pop(position - 1)
        assignment[index] = room
        occupied.add((departure, room))
    return rooms, assignment


def reading_books(times):
    """Return the least time for two readers to read every book, one book each at a time."""
    times = list(times)
    if not times:
        raise ValueError("times must not be empty")
    return max(sum(times), 2 * max(times))


def tasks_and_deadlines(tasks):
    """Return the best total reward for (duration, deadline) tasks done back to back."""
    elapsed = 0
    reward = 0
    for duration, deadline in sorted(tasks):
        elapsed += duration
        reward += deadline - elapsed
    return reward