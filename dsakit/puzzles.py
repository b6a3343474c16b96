"""Assorted greedy and counting puzzles."""

from __future__ import annotations

import math
import string
from bisect import bisect_left
from collections.abc import Iterable, Sequence
from itertools import accumulate
from typing import Optional

MODULUS = 1_000_000_007


def _range_sum(low: int, high: int) -> int:
    return high * (high + 1) // 2 - low * (low - 1) // 2


def accessory_collection(total: int, alphabet: int, window: int, distinct: int) -> Optional[int]:
    """Largest total price of ``total`` accessories priced 1..``alphabet``.

    Every ``window`` of them must hold ``distinct`` different prices.
    Returns ``None`` when no arrangement exists.
    """
    if min(total, alphabet, window, distinct) < 1:
        raise ValueError("all parameters must be positive")
    if window > total:
        raise ValueError("window cannot exceed the total")
    if distinct == 1:
        return total * alphabet
    left_slots = total - window + 1
    right_slots = window - 1
    top = alphabet - distinct + 1
    best: Optional[int] = None
    for copies in range(1, total + 1):
        if top * copies < left_slots or (distinct - 1) * copies > right_slots:
            continue
        full, rest = divmod(left_slots, copies)
        value = _range_sum(top - full + 1, top) * copies + rest * (top - full)
        value += _range_sum(top + 1, alphabet - 1) * copies
        value += (right_slots - copies * (distinct - 2)) * alphabet
        best = value if best is None else max(best, value)
    return best


def chief_hopper(heights: Iterable[int]) -> int:
    """Smallest starting energy that never drops below zero over the buildings."""
    energy = 0
    for height in reversed(list(heights)):
        if height < 0:
            raise ValueError("heights must not be negative")
        energy = (energy + height + 1) // 2
    return energy


def cutting_boards(y_costs: Iterable[int], x_costs: Iterable[int]) -> int:
    """Least cost, modulo 1e9+7, of cutting a board into unit squares."""
    cuts = [("y", cost) for cost in y_costs] + [("x", cost) for cost in x_costs]
    cuts.sort(key=lambda cut: cut[1], reverse=True)
    vertical = horizontal = 1
    total = 0
    for axis, cost in cuts:
        if axis == "y":
            total = (total + vertical * cost % MODULUS) % MODULUS
            horizontal += 1
        else:
            total = (total + horizontal * cost % MODULUS) % MODULUS
            vertical += 1
    return total


class DecibinaryTable:
    """Ranks decibinary numbers of value up to ``max_sum``.

    Numbers are ordered by value, then numerically.
    """

    def __init__(self, max_sum: int = 300_002) -> None:
        if max_sum < 0:
            raise ValueError("max_sum must not be negative")
        self._levels = max(1, max_sum.bit_length())
        ways = [[1] + [0] * max_sum]
        for level in range(self._levels):
            previous = ways[-1]
            row = previous[:]
            step = 1 << level
            for digit in range(1, 10):
                shift = digit * step
                if shift > max_sum:
                    break
                row[shift:] = [a + b for a, b in zip(row[shift:], previous)]
            ways.append(row)
        self._ways = ways
        self._cumulative = list(accumulate(ways[-1]))

    def _count(self, level: int, value: int) -> int:
        if value < 0:
            return 0
        return self._ways[level + 1][value]

    def __len__(self) -> int:
        return self._cumulative[-1]

    def nth(self, k: int) -> str:
        """Return the ``k``-th decibinary number (1-based) as its digit string."""
        if not 1 <= k <= len(self):
            raise ValueError(f"k={k} is outside 1..{len(self)}")
        if k == 1:
            return "0"
        value = bisect_left(self._cumulative, k)
        rank = k - self._cumulative[value - 1]
        start = next(
            level for level in range(self._levels) if self._count(level, value) >= rank
        )
        digits: list[str] = []
        for level in range(start, -1, -1):
            step = 1 << level
            seen = 0
            for digit in range(10):
                rest = value - digit * step
                if rest < 0:
                    break
                ways = self._count(level - 1, rest)
                if seen + ways >= rank:
                    digits.append(str(digit))
                    rank -= seen
                    value = rest
                    break
                seen += ways
        return "".join(digits)


def reverse_shuffle_merge(text: str) -> str:
    """Lexicographically smallest A with ``text`` a merge of reverse(A) and a shuffle of A."""
    if len(text) % 2:
        raise ValueError("text length must be even")
    if any(char not in string.ascii_lowercase for char in text):
        raise ValueError("text must hold only lowercase letters")
    if not text:
        return ""
    reversed_text = text[::-1]
    counts = [0] * 26
    prefix = [counts[:]]
    positions: list[list[int]] = [[] for _ in range(26)]
    for index, char in enumerate(reversed_text):
        letter = ord(char) - ord("a")
        counts[letter] += 1
        positions[letter].append(index)
        prefix.append(counts[:])
    if any(count % 2 for count in counts):
        raise ValueError("every letter must occur an even number of times")
    totals = [count // 2 for count in counts]

    used = [0] * 26
    skipped = [0] * 26
    result: list[str] = []
    start = 0
    while len(result) < len(text) // 2:
        for letter in range(26):
            if used[letter] == totals[letter]:
                continue
            found = bisect_left(positions[letter], start)
            if found == len(positions[letter]):
                continue
            position = positions[letter][found]
            gained = [b - a for a, b in zip(prefix[start], prefix[position])]
            if all(s + g <= t for s, g, t in zip(skipped, gained, totals)):
                result.append(chr(ord("a") + letter))
                skipped = [s + g for s, g in zip(skipped, gained)]
                used[letter] += 1
                start = position + 1
                break
        else:
            raise ValueError("text is not a reverse-shuffle merge")
    return "".join(result)


def _half_toward_zero(number: int) -> int:
    half = abs(number) // 2
    return -half if number < 0 else half


def sherlock_minimax(values: Sequence[int], low: int, high: int) -> int:
    """Smallest M in [low, high] maximising the least distance to any of ``values``."""
    if low > high:
        raise ValueError("low must not exceed high")
    values = list(values)
    points = values + [low, high]
    best: Optional[tuple[float, int]] = None
    for i, a in enumerate(points):
        for b in points[: i + 1]:
            middle = _half_toward_zero(a + b)
            for candidate in (middle - 1, middle, middle + 1):
                if not low <= candidate <= high:
                    continue
                gap = min((abs(value - candidate) for value in values), default=math.inf)
                key = (gap, -candidate)
                if best is None or key > best:
                    best = key
    assert best is not None
    return -best[1]