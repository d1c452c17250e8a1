"""Counting and optimisation by dynamic programming over sums and grids."""

from .introductory import MOD


def _check_target(target):
    if target < 0:
        raise ValueError("target must not be negative")


def _check_coins(coins):
    coins = list(coins)
    if any(coin <= 0 for coin in coins):
        raise ValueError("coins must be positive")
    return coins


def dice_combinations(n):
    """Return the ordered ways to reach sum n with die throws, modulo 10**9 + 7."""
    _check_target(n)
    ways = [1] + [0] * n
    for total in range(1, n + 1):
        ways[total] = sum(ways[max(0, total - 6):total]) % MOD
    return ways[n]


def coin_combinations_i(coins, target):
    """Return the ordered ways to make ``target`` from the coins, modulo 10**9 + 7."""
    coins = _check_coins(coins)
    _check_target(target)
    ways = [1] + [0] * target
    for total in range(1, target + 1):
        ways[total] = sum(ways[total - coin] for coin in coins if coin <= total) % MOD
    return ways[target]


def coin_combinations_ii(coins, target):
    """Return the unordered ways to make a positive ``target`` from the coins, modulo 10**9 + 7.

    A target of zero counts as no way at all.
    """
    coins = _check_coins(coins)
    _check_target(target)
    ways = [1] + [0] * target
    for coin in coins:
        for total in range(coin, target + 1):
            ways[total] = (ways[total] + ways[total - coin]) % MOD
    return ways[target] if target > 0 else 0


def minimizing_coins(coins, target):
    """Return the fewest coins summing to ``target``, or None when it cannot be made."""
    coins = _check_coins(coins)
    _check_target(target)
    fewest = [0] + [None] * target
    for total in range(1, target + 1):
        fewest[total] = min(
            (
                fewest[total - coin] + 1
                for coin in coins
                if coin <= total and fewest[total - coin] is not None
            ),
            default=None,
        )
    return fewest[target]


def removing_digits(n):
    """Return the fewest steps to reach 0, each step subtracting a digit of the number."""
    if n < 0:
        raise ValueError("n must not be negative")
    steps = [None] * (n + 1)
    steps[n] = 0
    for number in range(n, 0, -1):
        if steps[number] is None:
            continue
        for digit in {int(char) for char in str(number)} - {0}:
            current = steps[number - digit]
            if current is None or steps[number] + 1 < current:
                steps[number - digit] = steps[number] + 1
    return steps[0]


def grid_paths(grid):
    """Count right/down paths over '.' cells of a square grid, modulo 10**9 + 7."""
    rows = list(grid)
    size = len(rows)
    if not size or any(len(row) != size for row in rows):
        raise ValueError("grid must be a non-empty square")
    previous = [0] * size
    for r, row in enumerate(rows):
        current = [0] * size
        for c, cell in enumerate(row):
            if cell != ".":
                continue
            if r == 0 and c == 0:
                current[c] = 1
            else:
                current[c] = (previous[c] + (current[c - 1] if c else 0)) % MOD
        previous = current
    return previous[-1]


def book_shop(prices, pages, budget):
    """Return the most pages obtainable by buying each book at most once within ``budget``."""
    prices = list(prices)
    pages = list(pages)
    if len(prices) != len(pages):
        raise ValueError("prices and pages must have the same length")
    if budget < 0:
        raise ValueError("budget must not be negative")
    best = [0] * (budget + 1)
    for price, value in zip(prices, pages):
        for spend in range(budget, price - 1, -1):
            best[spend] = max(best[spend], best[spend - price] + value)
    return best[budget]


def money_sums(coins):
    """Return, sorted, every sum that a non-empty selection of the coins makes."""
    sums = set()
    for coin in coins:
        sums |= {total + coin for total in sums} | {coin}
    return sorted(sums)


def array_description(values, upper):
    """Count arrays in 1..upper matching ``values`` (0 unknown) whose neighbours differ by at most one."""
    values = list(values)
    if upper < 1:
        raise ValueError("upper must be at least 1")
    if not values:
        return upper % MOD
    first = values[0]
    ways = [0] + [1 if first in (0, j) else 0 for j in range(1, upper + 1)] + [0]
    for value in values[1:]:
        ways = (
            [0]
            + [
                (ways[j - 1] + ways[j] + ways[j + 1]) % MOD if value in (0, j) else 0
                for j in range(1, upper + 1)
            ]
            + [0]
        )
    return sum(ways) % MOD