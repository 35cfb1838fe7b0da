"""Search for metachains: cycles of chains connected end to end.

Chains are the :class:`edgechains.chain.Chain` objects, chain ``n`` at
index ``n - 1``. A signed chain number designates an end: positive for the
head, negative for the tail. The graph of chain ends is explored depth
first; every time the walk comes back to a chain already on its path, the
chains of that loop form a metachain.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from edgechains.chain import Chain

MAX_NEIGHBOURS = 10


def _lookup(chains: Sequence[Optional[Chain]], ref: int) -> Chain:
    if ref == 0:
        raise ValueError("chain numbers must be non-zero")
    index = abs(ref) - 1
    if index >= len(chains):
        raise IndexError(f"no chain numbered {abs(ref)}")
    chain = chains[index]
    if chain is None:
        raise ValueError(f"chain {abs(ref)} has been removed")
    return chain


def _gather(chains: Sequence[Optional[Chain]], end: int, found: List[int]) -> None:
    chain = _lookup(chains, end)
    links = chain.ancestors if end > 0 else chain.children
    before = len(found)
    for ref in links:
        duplicate = any(
            known == ref or (known == -ref and position != 0)
            for position, known in enumerate(found)
        )
        if duplicate:
            continue
        if len(found) >= MAX_NEIGHBOURS:
            raise ValueError(
                f"more than {MAX_NEIGHBOURS} chain ends meet at a junction"
            )
        found.append(ref)
    for ref in found[before:]:
        _gather(chains, ref, found)


def neighbours(chains: Sequence[Optional[Chain]], end: int) -> List[int]:
    """Return every chain end joined to ``end``, directly or through others."""
    found = [end]
    _gather(chains, end, found)
    return found[1:]


class _Search:
    def __init__(self, chains: Sequence[Optional[Chain]]) -> None:
        size = len(chains)
        self.chains = chains
        self.limit = size
        self.stack = [0] * (size + 2)
        self.top = 0
        self.marked = [0] * (size + 1)
        self.pending = [False] + [chain is not None for chain in chains]
        self.found: List[List[int]] = []

    def push(self, ref: int) -> None:
        if self.top < 0 or self.top + 1 > self.limit:
            raise RuntimeError(f"path stack overflow at depth {self.top}")
        self.top += 1
        self.stack[self.top] = ref

    def pop(self) -> int:
        if self.top == 0:
            raise RuntimeError("path stack underflow")
        self.top -= 1
        return self.stack[self.top + 1]

    def close_loop(self, ref: int) -> None:
        start = self.marked[abs(ref)]
        extra = False
        if self.stack[start] != ref:
            if not self.pending[abs(ref)]:
                return
            self.push(ref)
            extra = True
        self.found.append(self.stack[start : self.top + 1])
        if extra:
            self.pop()

    def visit(self, ref: int) -> None:
        self.push(ref)
        self.marked[abs(ref)] = self.top
        self.pending[abs(ref)] = False

        around = neighbours(self.chains, -ref)
        if around:
            around = [around[-1]] + around[:-1]

        to_visit = []
        for other in around:
            if self.marked[abs(other)]:
                self.close_loop(other)
                to_visit.append(False)
            else:
                to_visit.append(True)
                self.marked[abs(other)] = self.top + 1

        for other, go in zip(around, to_visit):
            if go:
                self.visit(other)
        for other, go in zip(around, to_visit):
            if go:
                self.marked[abs(other)] = 0

        self.pop()


def find_metachains(chains: Sequence[Optional[Chain]]) -> List[List[int]]:
    """Return the metachains of ``chains``, most recently found first.

    Each metachain is the list of signed chain numbers along the loop.
    Removed chains (``None``) are left out of the search.
    """
    search = _Search(chains)
    for number in range(1, len(chains) + 1):
        if search.pending[number]:
            search.visit(number)
    return list(reversed(search.found))


def format_metachains(metachains: Iterable[Sequence[int]]) -> str:
    """Render metachains one per line, chain numbers separated by spaces."""
    return "".join(" ".join(str(ref) for ref in meta) + "\n" for meta in metachains)