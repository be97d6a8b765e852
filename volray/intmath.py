"""Integer helpers: saturating and wide arithmetic, bounds, pair numbering."""

from __future__ import annotations

import math
import operator
import random
from typing import Callable, Iterable, MutableSequence, Sequence

_INT64_MASK = (1 << 64) - 1


def _to_int64(value: int) -> int:
    value &= _INT64_MASK
    return value - (1 << 64) if value >> 63 else value


class PairIdInjection:
    """Numbers the unordered pairs ``{i, j}`` of ``n`` elements.

    Pairs are visited with ``i < j`` in lexicographic order and a pair gets
    the next free id if ``exists(i, j)`` holds. By default every pair of
    distinct elements exists.
    """

    def __init__(
        self, n: int, exists: Callable[[int, int], bool] | None = None
    ) -> None:
        if n < 0:
            raise ValueError("Number of elements must not be negative")
        if exists is None:
            exists = operator.ne
        self.num_elements = n
        self.num_ids = n * (n - 1) // 2
        self._pairs: list[tuple[int, int]] = []
        self._ids: list[int | None] = [None] * (n * n)
        for i in range(n):
            for j in range(i + 1, n):
                if exists(i, j):
                    pair_id = len(self._pairs)
                    self._ids[i * n + j] = pair_id
                    self._ids[j * n + i] = pair_id
                    self._pairs.append((i, j))

    def __len__(self) -> int:
        return len(self._pairs)

    def _check(self, element: int) -> None:
        if not 0 <= element < self.num_elements:
            raise IndexError(f"Element {element} out of range")

    def id_of(self, i: int, j: int) -> int:
        """Id of the pair ``{i, j}``; ``KeyError`` if the pair has none."""
        self._check(i)
        self._check(j)
        pair_id = self._ids[i * self.num_elements + j]
        if pair_id is None:
            raise KeyError((i, j))
        return pair_id

    def pair(self, pair_id: int) -> tuple[int, int]:
        """The pair ``(i, j)`` with ``i < j`` that carries ``pair_id``."""
        if not 0 <= pair_id < len(self._pairs):
            raise IndexError(f"Pair id {pair_id} out of range")
        return self._pairs[pair_id]

    def row(self, row: int) -> list[int | None]:
        """Ids of the pairs ``{row, j}`` for every ``j``; ``None`` where absent."""
        self._check(row)
        start = row * self.num_elements
        return self._ids[start:start + self.num_elements]


def sign(x, y=None) -> int:
    """Sign of ``x``, or of ``x - y`` when ``y`` is given, as -1, 0 or 1."""
    if y is None:
        return 1 if x > 0 else (-1 if x < 0 else 0)
    return 1 if x > y else (-1 if x < y else 0)


def mulshift(a: int, b: int, s: int) -> int:
    """Shift the 128-bit product of two 64-bit integers right by ``s``.

    The result is truncated to a signed 64-bit integer; the shift count is
    taken modulo 64.
    """
    product = _to_int64(a) * _to_int64(b)
    return _to_int64(product >> (s & 63))


def plus_clamp(left, right, low, high):
    """Add two values, saturating at ``low`` and ``high``."""
    if left < 0:
        return low if low - left > right else left + right
    return high if high - left < right else left + right


def divide_round_up(value, div):
    """Divide, rounding up for integers; plain division otherwise."""
    if isinstance(value, int):
        return (value + (div - 1)) // div
    return value / div


def sqrt_lower_bound(value) -> int:
    """Largest integer ``r`` with ``r * r <= value`` (-1 for negative values)."""
    if value < 0:
        return -1
    if isinstance(value, int):
        return math.isqrt(value)
    root = math.floor(math.sqrt(value))
    while root * root > value:
        root -= 1
    while (root + 1) * (root + 1) <= value:
        root += 1
    return root


def sqrt_upper_bound(value) -> int:
    """Smallest non-negative integer ``r`` with ``r * r >= value``."""
    if value <= 0:
        return 0
    if isinstance(value, int):
        root = math.isqrt(value)
        return root if root * root == value else root + 1
    root = math.ceil(math.sqrt(value))
    while root > 0 and (root - 1) * (root - 1) >= value:
        root -= 1
    while root * root < value:
        root += 1
    return root


def get_next_pow(lhs, rhs, current_pow: int = 0) -> int:
    """Find ``d`` with ``rhs * 2**(d-1) < lhs <= rhs * 2**d``, searching from ``current_pow``.

    Returns 0 when ``lhs <= rhs``; ``d`` never exceeds 255.
    """
    while current_pow < 255 and lhs > rhs * (1 << current_pow):
        current_pow += 1
    while current_pow > 0 and lhs <= rhs * (1 << (current_pow - 1)):
        current_pow -= 1
    return current_pow


def log2_upper_bound(number) -> int:
    """``ceil(log2(number))`` for numbers above one, else 0."""
    result = 0
    while number > 1:
        number -= number // 2 if isinstance(number, int) else number / 2
        result += 1
    return result


def log2_lower_bound(number) -> int:
    """``floor(log2(number))`` for numbers above one, else 0."""
    result = 0
    while number > 1:
        number = number // 2 if isinstance(number, int) else number / 2
        result += 1
    return result


def clamp(v, lo, hi, comp: Callable | None = None):
    """Return ``lo`` if ``v`` is before it, ``hi`` if ``v`` is after it, else ``v``."""
    if comp is None:
        comp = operator.lt
    if comp(v, lo):
        return lo
    if comp(hi, v):
        return hi
    return v


def rand_mark(take: Iterable[bool], num: int, seed: int) -> list[bool]:
    """Return a copy of ``take`` with ``num`` distinct random positions set to True."""
    marks: MutableSequence[bool] = list(take)
    if not 0 <= num <= len(marks):
        raise ValueError(f"Cannot mark {num} of {len(marks)} positions")
    for index in random.Random(seed).sample(range(len(marks)), num):
        marks[index] = True
    return list(marks)


__all__: Sequence[str] = (
    "PairIdInjection",
    "sign",
    "mulshift",
    "plus_clamp",
    "divide_round_up",
    "sqrt_lower_bound",
    "sqrt_upper_bound",
    "get_next_pow",
    "log2_upper_bound",
    "log2_lower_bound",
    "clamp",
    "rand_mark",
)