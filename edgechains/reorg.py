"""Local clean-up of the point order of an edge chain.

Tracing a contour row by row sometimes puts the points of a staircase or of
a corner in an order that makes the chain zig-zag. :func:`reorganize`
swaps such neighbouring points back into a smooth order.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

Point = Tuple[int, ...]


def _descending_step(chain: Sequence[Point], i: int) -> bool:
    (x0, y0), (x1, y1), (x2, y2), (x3, y3) = (p[:2] for p in chain[i : i + 4])
    return (
        x0 < x1 and y0 > y1
        and y1 == y2 and x1 > x2
        and x2 < x3 and y2 > y3
    )


def _ascending_step(chain: Sequence[Point], i: int) -> bool:
    (x0, y0), (x1, y1), (x2, y2), (x3, y3) = (p[:2] for p in chain[i : i + 4])
    return (
        x0 > x1 and y0 < y1
        and y1 == y2 and x1 < x2
        and x2 > x3 and y2 < y3
    )


def _swap(chain: List[Point], a: int, b: int) -> None:
    chain[a], chain[b] = chain[b], chain[a]


def reorganize(
    points: Sequence[Point], head_links: int, tail_links: int
) -> List[Point]:
    """Return the chain's points with zig-zags along steps and corners removed.

    ``points`` are ``(x, y, level)`` tuples. ``head_links`` and
    ``tail_links`` are the number of chains connected at the head and at the
    tail; an end with connections keeps its first (or last) points as they
    are. The input is left untouched.
    """
    chain = list(points)
    count = len(chain)
    if count < 3:
        return chain

    i = 0
    if head_links == 0:
        (x0, y0), (x1, y1), (x2, y2) = (p[:2] for p in chain[:3])
        if (x0 == x1 and y0 == y2) or (y0 == y1 and x0 == x2):
            _swap(chain, 0, 1)
            i = 2

    last = count - 3
    while i < last:
        if _descending_step(chain, i):
            _swap(chain, i + 1, i + 2)
            i += 2
        if i + 3 < count and _ascending_step(chain, i):
            _swap(chain, i + 1, i + 2)
            i += 2
        i += 1

    if tail_links == 0 and i == last:
        (x0, y0), (x1, y1), (x2, y2) = (p[:2] for p in chain[i : i + 3])
        if (x2 == x1 and y0 == y2) or (y2 == y1 and x0 == x2):
            _swap(chain, i + 1, i + 2)

    return chain