"""Introductory counting and construction problems."""

from collections import Counter
from itertools import groupby

MOD = 1_000_000_007

_SMALL_KNIGHT_COUNTS = {2: 6, 3: 28, 4: 96}


def weird_algorithm(n):
    """Return the sequence n, ..., 1 produced by the halve-or-3n+1 rule."""
    steps = []
    while n > 1:
        steps.append(n)
        n = n // 2 if n % 2 == 0 else n * 3 + 1
    steps.append(1)
    return steps


def missing_number(n, numbers):
    """Return the smallest number in 1..n that does not occur in ``numbers``."""
    present = set(numbers)
    missing = next((value for value in range(1, n + 1) if value not in present), None)
    if missing is None:
        raise ValueError(f"no number in 1..{n} is missing")
    return missing


def repetitions(sequence):
    """Return the length of the longest run of equal consecutive items."""
    if not sequence:
        raise ValueError("sequence must not be empty")
    return max(sum(1 for _ in run) for _, run in groupby(sequence))


def increasing_array(values):
    """Return the fewest unit increments that make ``values`` non-decreasing."""
    iterator = iter(values)
    previous = next(iterator, None)
    if previous is None:
        return 0
    moves = 0
    for value in iterator:
        if value < previous:
            moves += previous - value
        else:
            previous = value
    return moves


def permutation(n):
    """Return a permutation of 1..n with no adjacent values differing by one.

    Returns None when no such permutation exists.
    """
    if n == 1:
        return [1]
    if n < 4:
        return None
    return list(range(2, n + 1, 2)) + list(range(1, n + 1, 2))


def number_spiral(row, column):
    """Return the number written at (row, column) of the infinite number spiral."""
    layer = max(row, column)
    value = (layer - 1) * (layer - 1)
    if value % 2 == 0:
        if layer > row:
            value += layer + (layer - row)
        else:
            value += column
    else:
        if layer > column:
            value += layer + (layer - column)
        else:
            value += row
    return value


def two_knights(n):
    """Return, for every k in 1..n, the ways to place two non-attacking knights on k x k."""
    counts = [0]
    for k in range(2, n + 1):
        if k in _SMALL_KNIGHT_COUNTS:
            counts.append(_SMALL_KNIGHT_COUNTS[k])
            continue
        limit = k * k - 1
        count = limit * (1 + limit) // 2
        # outer two columns on each side
        count -= 2 * ((k - 2) * 2 + 1)
        count -= 2 * ((k - 2) * 3 + 1)
        # the rectangle in the middle and the second-to-last row
        count -= (k - 4) * (k - 2) * 4
        count -= (k - 4) * 2
        counts.append(count)
    return counts


def two_sets(n):
    """Split 1..n into two sets of equal sum.

    Returns a pair of lists, or None when no split exists.
    """
    total = n * (1 + n) // 2
    if total % 2 != 0:
        return None
    first, second = [], []
    if n == 3:
        return [3], [1, 2]
    if (n - 3) % 4 == 0:
        first.append(3)
        second.extend((1, 2))
        start = 4
    elif n % 4 == 0:
        start = 1
    else:
        return None
    for i in range(start, n + 1, 4):
        first.extend((i, i + 3))
        second.extend((i + 1, i + 2))
    return first, second


def bit_strings(n):
    """Return the number of bit strings of length n, modulo 10**9 + 7."""
    return pow(2, max(n, 1), MOD)


def trailing_zeros(n):
    """Return the number of trailing zeros of n!."""
    zeros = 0
    divisor = 5
    while n // divisor > 0:
        zeros += n // divisor
        divisor *= 5
    return zeros


def coin_piles(a, b):
    """Tell whether both piles can be emptied by taking (1, 2) or (2, 1) coins."""
    a, b = max(a, b), min(a, b)
    while a > 0 and b > 0:
        gap = a - b
        if gap > 1:
            half = gap // 2
            a -= 2 * half
            b -= half
        elif gap == 1:
            a -= 2
            b -= 1
        elif a % 3 == 0:
            a = b = 0
        else:
            a, b = 1, 0
    return a == 0 and b == 0


def palindrome_reorder(text):
    """Reorder the characters of ``text`` into a palindrome, or return None."""
    counts = Counter(text)
    letters = sorted(counts)
    odd = [letter for letter in letters if counts[letter] % 2]
    if len(odd) > 1:
        return None
    half = "".join(letter * (counts[letter] // 2) for letter in letters if letter not in odd)
    middle = odd[0] * counts[odd[0]] if odd else ""
    return half + middle + half[::-1]


def digit_query(position):
    """Return the digit at a 1-based position of the string 123456789101112..."""
    index = position
    length = 1
    limit = 9
    while index > limit * length:
        index -= limit * length
        limit *= 10
        length += 1
    start = 10 ** (length - 1) - 1 + index // length
    remainder = index % length
    if remainder == 0:
        return start % 10
    return int(str(start + 1)[remainder - 1])