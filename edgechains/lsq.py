"""Least-squares fit of a straight segment to a run of chain points."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence, Tuple

Vector = Tuple[float, float]


@dataclass(frozen=True)
class LineFit:
    """A segment fitted to points.

    ``centre`` is the centre of gravity of the points and ``direction`` the
    unit vector ``(cos, sin)`` of the line, oriented from ``start`` to
    ``end``. ``start`` and ``end`` are the projections of the first and last
    point on the line. ``error`` is the sum of the squared distances of the
    points to the line.
    """

    centre: Vector
    direction: Vector
    start: Vector
    end: Vector
    error: float


def _fit_many(xy: Sequence[Vector]) -> LineFit:
    n = len(xy)
    sumx = sum(x for x, _ in xy)
    sumy = sum(y for _, y in xy)
    sumx2 = sum(x * x for x, _ in xy) - sumx * sumx / n
    sumy2 = sum(y * y for _, y in xy) - sumy * sumy / n
    sumxy = sum(x * y for x, y in xy) - sumx * sumy / n

    spread = sumx2 - sumy2
    if sumxy == 0.0:
        cos, sin = (0.0, 1.0) if spread < 0.0 else (1.0, 0.0)
    else:
        half = 0.5 * spread / math.sqrt(spread * spread + 4.0 * sumxy * sumxy)
        cos = math.sqrt(max(0.0, 0.5 + half))
        sin = math.sqrt(max(0.0, 0.5 - half))
        if sumxy < 0.0:
            sin = -sin

    xm, ym = sumx / n, sumy / n

    def project(point: Vector) -> Vector:
        along = (point[0] - xm) * cos + (point[1] - ym) * sin
        return (xm + along * cos, ym + along * sin)

    xd, yd = project(xy[0])
    xf, yf = project(xy[-1])
    error = cos * cos * sumy2 + sin * sin * sumx2 - 2.0 * sin * cos * sumxy

    if xd > xf:
        cos, sin = -cos, -sin
    elif xd == xf and yd > yf:
        sin = -1.0

    return LineFit((xm, ym), (cos, sin), (xd, yd), (xf, yf), error)


def fit_line(points: Sequence[Sequence[float]]) -> LineFit:
    """Fit a segment to ``points`` (items whose first two values are x, y)."""
    xy = [(float(p[0]), float(p[1])) for p in points]
    if not xy:
        raise ValueError("cannot fit a line to no points")

    if len(xy) == 1:
        point = xy[0]
        return LineFit(point, (1.0, 0.0), point, point, 0.0)

    if len(xy) == 2:
        (xd, yd), (xf, yf) = xy
        dx, dy = xf - xd, yf - yd
        length = math.sqrt(dx * dx + dy * dy)
        direction = (dx / length, dy / length) if length else (1.0, 0.0)
        return LineFit(
            ((xd + xf) / 2.0, (yd + yf) / 2.0),
            direction,
            (xd, yd),
            (xf, yf),
            0.0,
        )

    return _fit_many(xy)