"""Numerical analysis of plotted functions.

Every routine takes the function as a callable that maps an x value to a
y value. Undefined points are ``nan`` and infinite results saturate to
:data:`chartviz.operations.INFINITE`.
"""

from __future__ import annotations

import math
from typing import Callable

from chartviz.concepts import Equation, Interval
from chartviz.operations import INFINITE, divide, multiply, subtract

Function = Callable[[float], float]
Point = tuple[float, float]

LIMIT_EPSILON = 0.01
"""Two successive samples closer than this count as converged."""

STEP = 0.01
"""Sampling step along the x axis."""

VERTICAL_PROBE = 1e-9
"""Distance from a point at which a vertical asymptote is probed."""


def _round_half_away(value: float) -> float:
    """Round to the nearest integer, halves away from zero; non-finite values pass through."""
    if not math.isfinite(value):
        return value
    return math.copysign(math.floor(abs(value) + 0.5), value)


def _limit(f: Function, start: float) -> float:
    x = start
    previous = f(x)
    current = f(x * 2)
    while abs(current - previous) > LIMIT_EPSILON:
        x *= 2
        if math.isinf(x):
            break
        previous = current
        current = f(x * 2)
    return _round_half_away(current)


def limit_positive(f: Function) -> float:
    """Estimate the limit of ``f`` as x goes to plus infinity, rounded to an integer."""
    return _limit(f, 1e5)


def limit_negative(f: Function) -> float:
    """Estimate the limit of ``f`` as x goes to minus infinity, rounded to an integer."""
    return _limit(f, -1e5)


def _extrema(
    f: Function, a: float, b: float, is_extremum: Callable[[float, float, float], bool],
    better: Callable[[float, float], bool], start_value: float,
) -> tuple[list[Point], Point]:
    points: list[Point] = []
    best_x, best_y = 0.0, start_value
    x_val = f(a)
    y_val = f(a + STEP)
    i = a * 100 + 2
    while i <= b * 100:
        z_val = f(i * STEP)
        if not (math.isnan(x_val) or math.isnan(y_val) or math.isnan(z_val)) and is_extremum(
            x_val, y_val, z_val
        ):
            points.append((i * STEP - STEP, y_val))
            if better(y_val, best_y):
                best_x, best_y = i * STEP, y_val
        x_val, y_val = y_val, z_val
        i += 1
    return points, (best_x, best_y)


def extrema_max(f: Function, a: float, b: float) -> tuple[list[Point], Point]:
    """Find local maxima of ``f`` on ``[a, b]``.

    Returns the list of maximum points and the global maximum found.
    """
    return _extrema(
        f, a, b,
        lambda x, y, z: x < y and z < y,
        lambda y, best: y > best,
        -INFINITE,
    )


def extrema_min(f: Function, a: float, b: float) -> tuple[list[Point], Point]:
    """Find local minima of ``f`` on ``[a, b]``.

    Returns the list of minimum points and the global minimum found.
    """
    return _extrema(
        f, a, b,
        lambda x, y, z: x > y and z > y,
        lambda y, best: y < best,
        INFINITE,
    )


def _horizontal(limit: float) -> Equation:
    if abs(limit) < INFINITE:
        return Equation(offset=limit, slope=0.0, valid=True)
    return Equation(0.0, 0.0, False)


def horizontal_asymptote_plus(f: Function) -> Equation:
    """Horizontal asymptote of ``f`` towards plus infinity, if any."""
    return _horizontal(limit_positive(f))


def horizontal_asymptote_minus(f: Function) -> Equation:
    """Horizontal asymptote of ``f`` towards minus infinity, if any."""
    return _horizontal(limit_negative(f))


def _slant(f: Function, limit: Callable[[Function], float]) -> Equation:
    slope = limit(lambda x: divide(x, f(x)))
    if abs(slope) < INFINITE and abs(slope) > LIMIT_EPSILON:
        offset = limit(lambda x: subtract(multiply(slope, x), f(x)))
        return Equation(offset=offset, slope=slope, valid=True)
    return Equation(0.0, 0.0, False)


def slant_asymptote_plus(f: Function) -> Equation:
    """Slant asymptote of ``f`` towards plus infinity, if any."""
    return _slant(f, limit_positive)


def slant_asymptote_minus(f: Function) -> Equation:
    """Slant asymptote of ``f`` towards minus infinity, if any."""
    return _slant(f, limit_negative)


def is_vertical_asymptote(f: Function, x: float) -> bool:
    """Return True when ``f`` saturates right next to ``x``."""
    return (
        abs(f(x - VERTICAL_PROBE)) >= INFINITE
        or abs(f(x + VERTICAL_PROBE)) >= INFINITE
    )


def undefined_intervals(f: Function, a: float, b: float) -> list[Interval]:
    """Return the runs of sample points on ``[a, b]`` where ``f`` is undefined."""
    result: list[Interval] = []
    i = a * 100
    while i <= b * 100:
        j = i
        found = False
        value = f(j * STEP)
        while math.isnan(value) and j <= b * 100:
            j += 1
            found = True
            value = f(j * STEP)
        if found:
            j -= 1
            result.append(Interval(i * STEP, j * STEP))
            i = j
        i += 1
    return result


def vertical_asymptotes(f: Function, a: float, b: float) -> list[Equation]:
    """Return vertical asymptotes at the edges of undefined runs on ``[a, b]``.

    Each asymptote is an equation whose ``slope`` holds its x position.
    """
    found: list[Equation] = []
    for run in undefined_intervals(f, a, b):
        for edge in (run.a, run.b):
            if is_vertical_asymptote(f, edge):
                found.append(Equation(offset=0.0, slope=edge, valid=True))
    return found


def _simpson_three_eighths(f: Function, a: float, b: float) -> float:
    h = b - a
    x1 = a + h / 3
    x2 = a + 2 * h / 3
    return (h / 8.0) * (f(a) + 3 * f(x1) + 3 * f(x2) + f(b))


def integral(f: Function, a: float, b: float) -> float:
    """Integrate ``f`` from ``a`` over unit steps while the step start is below ``b``."""
    total = 0.0
    i = a
    while i < b:
        total += _simpson_three_eighths(f, i, i + 1)
        i += 1
    return total