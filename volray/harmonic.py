"""Iterative solver for weighted harmonic functions on regular grids."""

from __future__ import annotations

import math
from typing import Sequence


def _neighbours(index: int, bounds: Sequence[int], steps: Sequence[int]):
    """Yield the flat indices of the grid neighbours of ``index``."""
    rest = index
    for bound, step in zip(bounds, steps):
        position = rest % bound
        rest //= bound
        if position > 0:
            yield index - step
        if position + 1 < bound:
            yield index + step


def solve_harmonic(
    values: Sequence[float],
    derivative_divisor: Sequence[float],
    is_fixed: Sequence[bool],
    bounds: Sequence[int],
    max_iterations: int,
    max_error: float,
) -> list[float]:
    """Relax the free cells of a grid towards a weighted harmonic function.

    Neighbour ``n`` of cell ``c`` is weighted by ``1 / (1 + (d[c] - d[n])**2)``
    where ``d`` is ``derivative_divisor``. Fixed cells keep their value.
    Iteration stops after ``max_iterations`` sweeps or once the summed
    squared change of a sweep is below ``max_error``. The input is left
    unchanged; the relaxed values are returned.
    """
    size = math.prod(bounds)
    if not (len(is_fixed) == len(derivative_divisor) == len(values) == size):
        raise ValueError("Wrong input dimensions")

    steps = []
    step = 1
    for bound in bounds:
        steps.append(step)
        step *= bound

    stencils: list[list[tuple[int, float]] | None] = []
    div_sums: list[float] = []
    for index, fixed in enumerate(is_fixed):
        if fixed:
            stencils.append(None)
            div_sums.append(0.0)
            continue
        mid = derivative_divisor[index]
        stencil = []
        for neighbour in _neighbours(index, bounds, steps):
            diff = mid - derivative_divisor[neighbour]
            stencil.append((neighbour, 1.0 / (1.0 + diff * diff)))
        stencils.append(stencil)
        div_sums.append(sum(weight for _, weight in stencil))

    current = [float(v) for v in values]
    for _ in range(max_iterations):
        error = 0.0
        updated = list(current)
        for index, stencil in enumerate(stencils):
            if stencil is None:
                continue
            div_sum = div_sums[index]
            add_middle = div_sum * current[index]
            total = sum(current[n] * w for n, w in stencil) + add_middle
            denominator = div_sum * 2
            result = total / denominator if denominator else math.nan
            difference = result - add_middle
            error += difference * difference
            updated[index] = result
        current = updated
        if error < max_error:
            break
    return current