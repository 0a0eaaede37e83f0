"""Dynamic-programming routines: coin change, Fibonacci and 0/1 knapsack."""

from __future__ import annotations

import math
from collections.abc import Sequence
from functools import lru_cache

__all__ = [
    "coin_change",
    "fibonacci_memo",
    "fibonacci_table",
    "knapsack",
    "knapsack_memo",
]


def coin_change(coins: Sequence[int], amount: int) -> int:
    """Return the fewest coins summing to ``amount``, or -1 if it cannot be made."""
    if amount < 0:
        raise ValueError("amount must be non-negative")
    if any(coin < 0 for coin in coins):
        raise ValueError("coin values must be non-negative")

    best: list[float] = [0] + [math.inf] * amount
    for coin in coins:
        if coin == 0:
            continue
        for total in range(coin, amount + 1):
            candidate = best[total - coin] + 1
            if candidate < best[total]:
                best[total] = candidate

    result = best[amount]
    return -1 if result == math.inf else int(result)


def fibonacci_memo(n: int) -> int:
    """Return the n-th Fibonacci number using top-down memoisation."""
    if n < 0:
        raise ValueError("n must be non-negative")

    memo: dict[int, int] = {0: 0, 1: 1}

    def fib(k: int) -> int:
        if k not in memo:
            memo[k] = fib(k - 1) + fib(k - 2)
        return memo[k]

    return fib(n)


def fibonacci_table(n: int) -> int:
    """Return the n-th Fibonacci number using a bottom-up table."""
    if n < 0:
        raise ValueError("n must be non-negative")
    table = [0, 1]
    while len(table) <= n:
        table.append(table[-1] + table[-2])
    return table[n]


def _validate_items(capacity: int, weights: Sequence[int], values: Sequence[int]) -> None:
    if capacity < 0:
        raise ValueError("capacity must be non-negative")
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if any(weight < 0 for weight in weights):
        raise ValueError("weights must be non-negative")


def knapsack(capacity: int, weights: Sequence[int], values: Sequence[int]) -> int:
    """Return the best total value of items fitting in ``capacity`` (tabulated)."""
    _validate_items(capacity, weights, values)

    previous = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        current = [0] * (capacity + 1)
        for limit in range(1, capacity + 1):
            if weight <= limit:
                current[limit] = max(value + previous[limit - weight], previous[limit])
            else:
                current[limit] = previous[limit]
        previous = current
    return previous[capacity]


def knapsack_memo(capacity: int, weights: Sequence[int], values: Sequence[int]) -> int:
    """Return the best total value of items fitting in ``capacity`` (memoised)."""
    _validate_items(capacity, weights, values)
    weights = tuple(weights)
    values = tuple(values)

    @lru_cache(maxsize=None)
    def best(count: int, limit: int) -> int:
        if count == 0 or limit == 0:
            return 0
        weight, value = weights[count - 1], values[count - 1]
        exclude = best(count - 1, limit)
        if weight > limit:
            return exclude
        include = value + best(count - 1, limit - weight)
        return max(include, exclude)

    return best(len(weights), capacity)