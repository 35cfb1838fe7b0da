"""Edge chains and their links, plus removal of short (noise) chains.

A chain is an ordered run of edge points ``(x, y, level)``. Its two ends can
be linked to ends of other chains. A link is stored as a signed chain
number: a positive number refers to the head of the other chain and a
negative number to its tail. Links attached to a chain's head are kept in
``ancestors`` and links attached to its tail in ``children``. Each end holds
at most :data:`FAMILY_SIZE` links.

Chains are kept in a list where chain number ``n`` sits at index ``n - 1``.
A removed chain leaves ``None`` behind until :func:`compact` is run.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from itertools import combinations
from typing import List, Optional, Sequence, Tuple

FAMILY_SIZE = 4

Point = Tuple[int, int, int]
ChainList = List[Optional["Chain"]]


@dataclass
class Chain:
    """One edge chain: its number, points and links at both ends."""

    number: int
    points: List[Point] = field(default_factory=list)
    ancestors: List[int] = field(default_factory=list)
    children: List[int] = field(default_factory=list)
    closed: bool = False

    def head(self) -> Point:
        """Return the first point of the chain."""
        if not self.points:
            raise ValueError(f"chain {self.number} has no points")
        return self.points[0]

    def tail(self) -> Point:
        """Return the last point of the chain."""
        if not self.points:
            raise ValueError(f"chain {self.number} has no points")
        return self.points[-1]

    def __len__(self) -> int:
        return len(self.points)

    def _add_ancestor(self, ref: int) -> bool:
        return _add_link(self.ancestors, ref)

    def _add_child(self, ref: int) -> bool:
        return _add_link(self.children, ref)

    def _forget(self, number: int) -> None:
        self.ancestors[:] = [ref for ref in self.ancestors if abs(ref) != number]
        self.children[:] = [ref for ref in self.children if abs(ref) != number]


def _add_link(family: List[int], ref: int) -> bool:
    """Add ``ref`` to ``family``; tell whether it was actually added."""
    if ref == 0 or ref in family or len(family) >= FAMILY_SIZE:
        return False
    family.append(ref)
    return True


def _chain_at(chains: Sequence[Optional[Chain]], ref: int) -> Chain:
    index = abs(ref) - 1
    if index < 0 or index >= len(chains):
        raise IndexError(f"no chain numbered {abs(ref)}")
    chain = chains[index]
    if chain is None:
        raise ValueError(f"chain {abs(ref)} has been removed")
    return chain


def _end_point(chains: Sequence[Optional[Chain]], ref: int) -> Point:
    chain = _chain_at(chains, ref)
    return chain.head() if ref > 0 else chain.tail()


def distance(chains: Sequence[Optional[Chain]], first: int, second: int) -> float:
    """Euclidean distance between two chain ends.

    A positive chain number designates the head of that chain, a negative
    one its tail.
    """
    if first == 0 or second == 0:
        raise ValueError("chain numbers must be non-zero")
    x1, y1, _ = _end_point(chains, first)
    x2, y2, _ = _end_point(chains, second)
    return math.hypot(x1 - x2, y1 - y2)


def _relink(chains: ChainList, family: Sequence[int]) -> None:
    """Link the first end of ``family`` to every other end of it."""
    if not family:
        return
    first = family[0]
    anchor = _chain_at(chains, first)
    for ref in family[1:]:
        if ref == 0:
            break
        other = _chain_at(chains, ref)
        if first > 0:
            if anchor._add_ancestor(ref):
                if ref > 0:
                    other._add_ancestor(first)
                else:
                    other._add_child(first)
        elif ref > 0:
            if other._add_ancestor(first):
                anchor._add_child(ref)
        elif other._add_child(first):
            anchor._add_child(ref)


def _disjoint_pair(
    pairs: Sequence[Tuple[int, int]], taken: Tuple[int, int]
) -> Optional[Tuple[int, int]]:
    found = None
    for a, b in pairs:
        if a not in taken and b not in taken:
            found = (a, b)
    return found


def _relink_single_point(chains: ChainList, family: Sequence[int]) -> None:
    """Reconnect the neighbours of a removed one-point chain, nearest first."""
    count = len(family)
    if count == 2:
        _relink(chains, family)
        return
    if count not in (3, 4):
        return

    pairs = list(combinations(family, 2))
    gaps = [distance(chains, a, b) for a, b in pairs]

    if count == 3:
        order = sorted(range(len(pairs)), key=gaps.__getitem__)
        for index in order[:2]:
            _relink(chains, pairs[index])
        return

    shortest = min(gaps)
    ties = sum(1 for gap in gaps if gap == shortest)
    if ties < 4:
        first_pair = pairs[gaps.index(shortest)]
    else:
        spreads = [abs(abs(a) - abs(b)) for a, b in pairs]
        first_pair = pairs[spreads.index(min(spreads))]
    second_pair = _disjoint_pair(pairs, first_pair)

    _relink(chains, first_pair)
    if second_pair is not None:
        _relink(chains, second_pair)


def _forget_in(chains: ChainList, family: Sequence[int], number: int) -> None:
    for ref in family:
        index = abs(ref) - 1
        if 0 <= index < len(chains) and chains[index] is not None:
            chains[index]._forget(number)


def denoise(chains: ChainList, threshold: int) -> int:
    """Remove every chain of at most ``threshold`` points.

    The neighbours of a removed chain are linked to each other so that the
    connectivity of the remaining chains is preserved. Removed chains are
    replaced by ``None`` in ``chains``. Return the number of chains removed.
    """
    removed = 0
    for index, chain in enumerate(chains):
        if chain is None or not chain.points or len(chain.points) > threshold:
            continue
        if chain.number != index + 1:
            raise ValueError(
                f"chain at position {index} is numbered {chain.number}, "
                f"expected {index + 1}"
            )
        number = chain.number
        ancestors = list(chain.ancestors)
        children = list(chain.children)

        if not ancestors and not children:
            pass
        elif len(chain.points) == 1:
            _forget_in(chains, ancestors, number)
            _relink_single_point(chains, ancestors)
        elif not children:
            _forget_in(chains, ancestors, number)
            _relink(chains, ancestors)
        elif not ancestors:
            _forget_in(chains, children, number)
            _relink(chains, children)
        elif (
            len(ancestors) == 1
            and len(children) == 1
            and abs(children[0]) == number
            and abs(ancestors[0]) == number
        ):
            pass
        else:
            _forget_in(chains, children, number)
            _relink(chains, children)
            _forget_in(chains, ancestors, number)
            _relink(chains, ancestors)

        chains[index] = None
        removed += 1
    return removed


def compact(chains: ChainList) -> int:
    """Drop removed chains and renumber the rest, links included.

    Links that point to a removed chain are dropped. Return the number of
    entries taken out of ``chains``.
    """
    renumber = {}
    survivors: List[Chain] = []
    for index, chain in enumerate(chains):
        if chain is not None:
            survivors.append(chain)
            renumber[index + 1] = len(survivors)

    def remap(family: List[int]) -> List[int]:
        return [
            renumber[abs(ref)] if ref > 0 else -renumber[abs(ref)]
            for ref in family
            if abs(ref) in renumber
        ]

    for new_number, chain in enumerate(survivors, start=1):
        chain.number = new_number
        chain.ancestors[:] = remap(chain.ancestors)
        chain.children[:] = remap(chain.children)

    dropped = len(chains) - len(survivors)
    chains[:] = survivors
    return dropped