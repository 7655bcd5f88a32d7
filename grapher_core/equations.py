"""Closed form curve fitting for the interactive graph types.

Each graph type is parameterised by two control points. The helpers here turn
those points into coefficients and into an evaluator ``f(x) -> y``. Arithmetic
runs through numpy so a degenerate exponential (a control point sitting on the
asymptote, or a negative base raised to a fractional power) evaluates to
``nan``/``inf`` instead of raising or producing a complex number. Fits that
need two distinct x coordinates raise :class:`DegenerateInputError`.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable

import numpy as np

from grapher_core.errors import DegenerateInputError
from grapher_core.geometry import Point

CurveFunction = Callable[[float], float]


@dataclass(frozen=True)
class LinearCoefficients:
    m: float
    b: float


@dataclass(frozen=True)
class QuadraticCoefficients:
    a: float
    vx: float
    vy: float


@dataclass(frozen=True)
class ExponentialCoefficients:
    a: float
    b: float
    c: float


def is_point_below_function(fn: CurveFunction, point: Point) -> bool:
    """Return True when ``point`` lies strictly under the curve."""
    return bool(fn(point.x) > point.y)


def is_point_close_to_function(fn: CurveFunction, point: Point, tolerance: float) -> bool:
    return bool(abs(fn(point.x) - point.y) < tolerance)


# y = m * x + b
def linear_coefficients(point1: Point, point2: Point) -> LinearCoefficients:
    if point1.x == point2.x:
        raise DegenerateInputError(
            f"A linear fit needs distinct x coordinates, got x={point1.x} twice."
        )
    m = (point2.y - point1.y) / (point2.x - point1.x)
    b = point2.y - m * point2.x
    return LinearCoefficients(m=m, b=b)


def linear_function(point1: Point, point2: Point) -> CurveFunction:
    coefficients = linear_coefficients(point1, point2)
    m, b = coefficients.m, coefficients.b
    return lambda x: m * x + b


# y = a * (x - vx)^2 + vy, with a solved from the second point
def quadratic_coefficients(vertex: Point, point: Point) -> QuadraticCoefficients:
    if point.x == vertex.x:
        raise DegenerateInputError(
            f"A quadratic fit needs the point off the vertex axis x={vertex.x}."
        )
    a = (point.y - vertex.y) / (point.x - vertex.x) ** 2
    return QuadraticCoefficients(a=a, vx=vertex.x, vy=vertex.y)


def quadratic_function(vertex: Point, point: Point) -> CurveFunction:
    coefficients = quadratic_coefficients(vertex, point)
    a, vx, vy = coefficients.a, coefficients.vx, coefficients.vy
    return lambda x: a * (x - vx) ** 2 + vy


# y = a * b^x + c
def exponential_coefficients(
    asymptote_y: float, point1: Point, point2: Point
) -> ExponentialCoefficients:
    if point1.x == point2.x:
        raise DegenerateInputError(
            f"An exponential fit needs distinct x coordinates, got x={point1.x} twice."
        )
    c = float(asymptote_y)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        ratio = np.float64(point2.y - c) / np.float64(point1.y - c)
        exponent = 1.0 / (point2.x - point1.x)
        b = np.power(ratio, exponent)
        a = np.power(ratio, exponent * -point1.x) * (point1.y - c)
    return ExponentialCoefficients(a=float(a), b=float(b), c=c)


def exponential_function(asymptote_y: float, point1: Point, point2: Point) -> CurveFunction:
    coefficients = exponential_coefficients(asymptote_y, point1, point2)
    a, b, c = coefficients.a, coefficients.b, coefficients.c

    def evaluate(x):
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            return a * np.power(b, x) + c

    return evaluate


def sample_curve(fn: CurveFunction, min_x: float, max_x: float, step: float) -> list[Point]:
    """Evaluate ``fn`` every ``step`` over ``[min_x, max_x]``.

    Non-finite samples are dropped so a renderer can draw whatever part of a
    degenerate curve is still defined.
    """

    if step <= 0 or max_x < min_x:
        return []
    count = int(math.floor((max_x - min_x) / step + 1e-9)) + 1
    xs = min_x + step * np.arange(count, dtype=float)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        ys = np.array([fn(float(x)) for x in xs], dtype=float)
    finite = np.isfinite(ys)
    return [Point(float(x), float(y)) for x, y in zip(xs[finite], ys[finite])]
