"""Small fixed-size numeric vectors and the fixed-point helpers used with them."""

from __future__ import annotations

import math
from typing import Callable, Iterator, Union

Number = Union[int, float]

_SIZES = frozenset({1, 2, 3, 4, 8})

# Size pairs for which element-wise vector arithmetic is defined.  When the
# sizes differ only the leading common components are combined; the left
# operand's remaining components are kept as they are.
_COMPATIBLE = frozenset(
    {(1, 1), (2, 2), (3, 2), (2, 3), (3, 3), (4, 3), (3, 4), (4, 4), (8, 8)}
)


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def _to_uint32(value: int) -> int:
    return value & 0xFFFFFFFF


def _divide(a: Number, b: Number) -> Number:
    """Divide like the fixed-width arithmetic: integers truncate toward zero."""
    if isinstance(a, int) and isinstance(b, int):
        quotient = abs(a) // abs(b)
        return -quotient if (a < 0) != (b < 0) else quotient
    return a / b


def _round_half_away(value: Number) -> int:
    rounded = math.floor(abs(value) + 0.5)
    return -rounded if value < 0 else rounded


def _component(index: int, name: str) -> property:
    def get(self: "Vec") -> Number:
        try:
            return self._items[index]
        except IndexError:
            raise AttributeError(
                f"{len(self._items)}-component vector has no component {name!r}"
            ) from None

    return property(get, doc=f"Component {name}.")


class Vec:
    """An immutable vector of 1, 2, 3, 4 or 8 numbers."""

    __slots__ = ("_items",)

    x = _component(0, "x")
    y = _component(1, "y")
    z = _component(2, "z")
    w = _component(3, "w")
    s = _component(4, "s")
    t = _component(5, "t")
    u = _component(6, "u")
    v = _component(7, "v")

    def __init__(self, *components: Number) -> None:
        if len(components) not in _SIZES:
            raise ValueError(
                f"A vector has 1, 2, 3, 4 or 8 components, not {len(components)}"
            )
        self._items = tuple(components)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Number]:
        return iter(self._items)

    def __getitem__(self, index):
        return self._items[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec):
            return NotImplemented
        return self._items == other._items

    def __hash__(self) -> int:
        return hash(self._items)

    def __repr__(self) -> str:
        return f"Vec{self._items!r}"

    def _combine(self, other, op: Callable[[Number, Number], Number]) -> "Vec":
        if isinstance(other, Vec):
            if (len(self), len(other)) not in _COMPATIBLE:
                raise ValueError(
                    f"Cannot combine vectors of sizes {len(self)} and {len(other)}"
                )
            combined = tuple(op(a, b) for a, b in zip(self._items, other._items))
            return Vec(*combined, *self._items[len(combined):])
        if isinstance(other, (int, float)):
            return Vec(*(op(a, other) for a in self._items))
        return NotImplemented

    def __add__(self, other) -> "Vec":
        return self._combine(other, lambda a, b: a + b)

    def __sub__(self, other) -> "Vec":
        return self._combine(other, lambda a, b: a - b)

    def __mul__(self, other) -> "Vec":
        return self._combine(other, lambda a, b: a * b)

    def __truediv__(self, other) -> "Vec":
        return self._combine(other, _divide)

    def __rshift__(self, other) -> "Vec":
        if not isinstance(other, int):
            return NotImplemented
        return Vec(*(a >> other for a in self._items))

    def __lt__(self, other: "Vec") -> bool:
        """True when every component is smaller than the matching one."""
        if not isinstance(other, Vec):
            return NotImplemented
        if len(self) != len(other) or len(self) > 4:
            raise ValueError("Comparison needs two vectors of the same size up to 4")
        return all(a < b for a, b in zip(self._items, other._items))

    def resize(self, n: int) -> "Vec":
        """Return a vector of ``n`` components, copying the leading ones and padding with zeros."""
        if n not in _SIZES:
            raise ValueError(f"A vector has 1, 2, 3, 4 or 8 components, not {n}")
        kept = self._items[:n]
        return Vec(*kept, *([0] * (n - len(kept))))

    def prod(self) -> Number:
        """Product of all components."""
        if len(self) > 4:
            raise ValueError("Product is defined for vectors of up to 4 components")
        return math.prod(self._items)

    def dot(self, other: "Vec") -> Number:
        """Scalar product with a vector of the same size."""
        if len(self) != len(other) or len(self) > 4:
            raise ValueError("Dot product needs two vectors of the same size up to 4")
        return sum(a * b for a, b in zip(self._items, other._items))

    def extract_low(self) -> "Vec":
        """First four components of an eight-component vector."""
        if len(self) != 8:
            raise ValueError("extract_low needs an eight-component vector")
        return Vec(*self._items[:4])

    def extract_high(self) -> "Vec":
        """Last four components of an eight-component vector."""
        if len(self) != 8:
            raise ValueError("extract_high needs an eight-component vector")
        return Vec(*self._items[4:])

    def round_to_int(self) -> "Vec":
        """Round every component to the nearest integer, halves away from zero."""
        return Vec(*(_round_half_away(a) for a in self._items))

    def format(self) -> str:
        """Text form: integers in decimal, floats with six decimals, in parentheses."""
        parts = (
            str(a) if isinstance(a, int) else "%f" % a for a in self._items
        )
        return "(" + " ".join(parts) + ")"


def mulhi(x, y: int, signed: bool = True):
    """High 32 bits of the 64-bit product of two 32-bit integers.

    ``x`` may be a :class:`Vec`, in which case every component is multiplied.
    """
    if isinstance(x, Vec):
        return Vec(*(mulhi(a, y, signed) for a in x))
    wrap = _to_int32 if signed else _to_uint32
    return (wrap(x) * wrap(y)) >> 32


def add_weighted(left: Vec, right: Vec, multl: Number, multr: Number) -> Vec:
    """Return ``left * multl + right * multr``."""
    return left * multl + right * multr


def blend(left: Vec, right: Vec, alpha: Number) -> Vec:
    """Return ``left * alpha + right * (1 - alpha)``."""
    return left * alpha + right * (1 - alpha)


def add_fixed(left: Vec, right: Vec, multl: int, multr: int) -> Vec:
    """Weighted sum of fixed-point vectors using 32-bit high multiplication."""
    total = mulhi(left, multl) + mulhi(right, multr)
    return Vec(*(_to_int32(a * 0x100) for a in total))