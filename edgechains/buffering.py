"""Planning of strip-wise image reads through a fixed-size buffer.

When an image is filtered by a neighbourhood operator of ``filter_size``
lines, consecutive strips must overlap by ``filter_size - 1`` lines.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class ReadPlan:
    """How an image is read through the buffer.

    ``lines`` is the number of lines read on the first pass, ``remainder``
    the number of lines held on the last pass, ``passes`` the number of
    passes and ``useful`` the number of lines each full pass contributes.
    """

    lines: int
    remainder: int
    passes: int
    useful: int


def plan_reads(shape: Tuple[int, int], buffer_size: int, filter_size: int) -> ReadPlan:
    """Plan reading an image of ``shape`` (width, height) in overlapping strips.

    ``buffer_size`` is the number of pixels the buffer holds.
    """
    width, height = shape
    if width <= 0 or height <= 0:
        raise ValueError(f"image shape must be positive, got {shape!r}")
    if filter_size < 1:
        raise ValueError(f"filter size must be at least 1, got {filter_size}")
    lines = buffer_size // width
    if lines < filter_size:
        raise ValueError(
            f"a buffer of {buffer_size} pixels holds {lines} lines of {width}, "
            f"fewer than the {filter_size} the filter needs"
        )

    top = lines
    passes = 0
    for _ in range(height):
        passes += 1
        if top >= height:
            break
        top += lines - filter_size + 1

    remainder = lines - (top - height)
    lines = min(lines, height)
    return ReadPlan(lines, remainder, passes, lines - filter_size + 1)