"""Index-driven sequence helpers: permutations, masks, pairwise walks."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Sequence, TypeVar

T = TypeVar("T")


class OperationTimeout(Exception):
    """Raised when an operation runs out of time."""

    def __init__(self, message: str = "timeout error") -> None:
        super().__init__(message)


def all_of_pairs(first: Iterable, second: Iterable, pred: Callable[[Any, Any], bool]) -> bool:
    """True if ``pred(a, b)`` holds for every element of ``first`` and its partner in ``second``."""
    return all(pred(a, b) for a, b in zip(first, second))


def find_if_pairs(
    first: Iterable, second: Iterable, pred: Callable[[Any, Any], bool]
) -> int | None:
    """Index of the first position where ``pred(a, b)`` holds, or ``None``."""
    for index, (a, b) in enumerate(zip(first, second)):
        if pred(a, b):
            return index
    return None


def any_of_pairs(first: Iterable, second: Iterable, pred: Callable[[Any, Any], bool]) -> bool:
    """True if ``pred(a, b)`` holds at some position."""
    return find_if_pairs(first, second, pred) is not None


def transpose(rows: Sequence[Sequence[T]]) -> list[list[T]]:
    """Swap the two indices of a list of equally long rows."""
    if not rows:
        return []
    height = len(rows[0])
    return [[row[i] for row in rows] for i in range(height)]


def copy_elements(source: Sequence[T], target: Iterable[T], indices: Iterable[int]) -> list[T]:
    """Return a copy of ``target`` with ``target[i] = source[i]`` for each ``i`` in ``indices``."""
    result = list(target)
    for index in indices:
        result[index] = source[index]
    return result


def remove_if_index(items: Iterable[T], pred: Callable[[int], bool]) -> list[T]:
    """Items whose position does not satisfy ``pred``, in order."""
    return [item for index, item in enumerate(items) if not pred(index)]


def copy_if_index(items: Iterable[T], mask: Sequence) -> list[T]:
    """Items whose position is set in ``mask``, in order."""
    return [item for index, item in enumerate(items) if mask[index]]


def permutate_to_indices(indices: Iterable[int], values: Iterable[T], out: Iterable[T]) -> list[T]:
    """Return a copy of ``out`` with ``out[indices[i]] = values[i]``."""
    result = list(out)
    for index, value in zip(indices, values):
        result[index] = value
    return result


def permutate_from_indices(indices: Iterable[int], values: Sequence[T]) -> list[T]:
    """Return ``[values[i] for i in indices]``."""
    return [values[index] for index in indices]


def permutate_inverse(perm: Sequence[int]) -> list[int]:
    """Inverse permutation ``inv`` with ``inv[perm[i]] == i``."""
    if not is_permutation(perm):
        raise ValueError("Not a permutation")
    inverse = [0] * len(perm)
    for position, target in enumerate(perm):
        inverse[target] = position
    return inverse


def is_permutation(seq: Iterable[int]) -> bool:
    """True if ``seq`` holds each of ``0 .. len(seq) - 1`` exactly once."""
    values = list(seq)
    visited = [False] * len(values)
    for value in values:
        if not 0 <= value < len(values) or visited[value]:
            return False
        visited[value] = True
    return True


def are_inverse(first: Iterable[int], second: Sequence[int]) -> bool:
    """True if ``second[first[i]] == i`` for every position ``i`` of ``first``."""
    return all(second[value] == position for position, value in enumerate(first))


def permutate_from_iter(items: Iterable[T], from_index: Sequence[int]) -> list[T]:
    """Return ``result`` with ``result[i] = items[from_index[i]]``; ``from_index`` must be a permutation."""
    values = list(items)
    if len(from_index) != len(values) or not is_permutation(from_index):
        raise ValueError("Index sequence is not a permutation of the items")
    return [values[source] for source in from_index]


def permutate_cycle(items: Iterable[T], from_index) -> list[T]:
    """Apply ``result[i] = items[from_index[i]]`` along the cycle through position 0 only.

    ``from_index`` is either a sequence of indices or a function of an index.
    Positions outside the cycle through 0 keep their items.
    """
    result = list(items)
    if not result:
        return result
    step = from_index if callable(from_index) else from_index.__getitem__
    original = list(result)
    last = 0
    for _ in range(len(result)):
        following = step(last)
        if following == 0:
            result[last] = original[0]
            return result
        result[last] = original[following]
        last = following
    raise ValueError("Index map does not form a cycle through position 0")


def assign_elements(
    indices: Iterable[int],
    out: Iterable[T],
    value: T,
    pred: Callable[[int], bool] | None = None,
) -> list[T]:
    """Return a copy of ``out`` with ``out[i] = value`` for each ``i`` in ``indices`` where ``pred(i)`` holds."""
    result = list(out)
    for index in indices:
        if pred is None or pred(index):
            result[index] = value
    return result


def for_each_pair(first: Iterable, second: Iterable | None, fn: Callable[[Any, Any], Any]):
    """Call ``fn(a, b)`` for every ``a`` in ``first`` and ``b`` in ``second``.

    With ``second`` set to ``None`` every ordered pair of ``first`` is visited,
    including an element paired with itself. Returns ``fn``.
    """
    left = list(first)
    right = left if second is None else list(second)
    for a in left:
        for b in right:
            fn(a, b)
    return fn


def for_each_pair_unordered(items: Iterable, fn: Callable[[Any, Any], Any]):
    """Call ``fn(a, b)`` once for every pair of positions ``i < j``. Returns ``fn``."""
    values = list(items)
    for i, a in enumerate(values):
        for b in values[i + 1:]:
            fn(a, b)
    return fn


def compose(f: Callable, g: Callable) -> Callable:
    """Return the function ``x -> f(g(x))``."""

    def composed(x):
        return f(g(x))

    return composed


def ends_with(text: str, suffix: str) -> bool:
    """True if ``text`` ends with ``suffix``."""
    return text.endswith(suffix)


def starts_with(text: str, prefix: str) -> bool:
    """True if ``text`` starts with ``prefix``."""
    return text.startswith(prefix)


def vector_less(left: Iterable, right: Iterable) -> bool:
    """Lexicographic ``left < right``."""
    return list(left) < list(right)