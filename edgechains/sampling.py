"""Polygonal sampling of a chain of points within a distance tolerance.

Starting from a sample point, a cone of admissible directions is narrowed
point by point; the run ends when the cone becomes empty or the path turns
back on itself, and a point of the run becomes the next sample.
"""

from __future__ import annotations

import math
from typing import List, Sequence, Tuple

DEFAULT_TOLERANCE = 1.5


def _cone(
    dx: float, dy: float, h: float, dev: float, rsq: float
) -> Tuple[float, float, float, float]:
    """Return (cos1, sin1, cos2, sin2) of the directions tangent to the disc."""
    return (
        (dx * h + dy * dev) / rsq,
        (dy * h - dx * dev) / rsq,
        (dx * h - dy * dev) / rsq,
        (dy * h + dx * dev) / rsq,
    )


def _sample(points: Sequence[Sequence[float]], dev: float, centred: bool) -> List[int]:
    xy = [(float(p[0]), float(p[1])) for p in points]
    count = len(xy)
    if count == 0:
        return []
    devsq = dev * dev
    samples = [0]
    j = 0
    while j < count:
        ox, oy = xy[j]
        rsq = 0.0
        dx = dy = 0.0
        while rsq <= devsq:
            j += 1
            if j >= count:
                break
            dx, dy = xy[j][0] - ox, xy[j][1] - oy
            rsq = dx * dx + dy * dy
        if j >= count:
            break

        h = math.sqrt(rsq - devsq)
        cos1, sin1, cos2, sin2 = _cone(dx, dy, h, dev, rsq)
        candidate = j
        margin = dev / h
        rsqmax = rsq
        rsqmin = rsq - devsq

        while True:
            j += 1
            if j >= count:
                break
            dx, dy = xy[j][0] - ox, xy[j][1] - oy
            rsq = dx * dx + dy * dy
            if rsq <= rsqmin:
                break
            if rsq > rsqmax:
                rsqmax = rsq
                rsqmin = rsq - devsq
            excess = rsq - devsq
            if excess <= 0.0:
                continue
            h = math.sqrt(excess)
            h1 = cos1 * dy - sin1 * dx
            h2 = sin2 * dx - cos2 * dy
            if h1 >= 0.0 and h2 >= 0.0:
                if not centred:
                    candidate = j
                else:
                    ratio = max(h1, h2) / h
                    if ratio <= margin or j == count - 1:
                        margin = ratio
                        candidate = j
            lcos1, lsin1, lcos2, lsin2 = _cone(dx, dy, h, dev, rsq)
            if lsin1 * cos1 - sin1 * lcos1 > 0.0:
                cos1, sin1 = lcos1, lsin1
            if sin2 * lcos2 - lsin2 * cos2 > 0.0:
                cos2, sin2 = lcos2, lsin2
            if sin1 * cos2 - sin2 * cos1 > 0.0:
                break

        samples.append(candidate)
        j = candidate

    if samples[-1] < count - 1:
        samples.append(count - 1)
    return samples


def strip(points: Sequence[Sequence[float]], tolerance: float) -> List[int]:
    """Sample ``points`` keeping every point within ``tolerance`` of a segment.

    Among the admissible points of a run, the best-centred one in the cone
    is chosen (the last point of the chain is always admissible). Return the
    indices of the samples, first and last point included.
    """
    if tolerance <= 0:
        raise ValueError(f"tolerance must be positive, got {tolerance}")
    return _sample(points, tolerance, centred=True)


def strip_basic(
    points: Sequence[Sequence[float]], tolerance: float = DEFAULT_TOLERANCE
) -> List[int]:
    """Sample ``points`` like :func:`strip`, taking the farthest admissible point."""
    if tolerance <= 0:
        raise ValueError(f"tolerance must be positive, got {tolerance}")
    return _sample(points, tolerance, centred=False)