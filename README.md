# edgechains

Tools for chains of edge pixels taken from contour images: removing short
(noise) chains from a linked chain graph while keeping it connected,
reordering pixels along a chain, picking the vertices of a polygonal
approximation, fitting lines by least squares and finding metachains
(loops of chains connected end to end).

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Conventions

A chain is an ordered list of points `(x, y, level)`. Chains live in a
list in which chain number `n` sits at index `n - 1`; a removed chain
leaves `None` in its place. A signed chain number designates one end of a
chain: positive for its head, negative for its tail. Links at a chain's
head are kept in `Chain.ancestors`, links at its tail in `Chain.children`,
at most four per end.

## Modules

- `edgechains.chain`
  - `Chain`: a dataclass with `number`, `points`, `ancestors`, `children`
    and `closed`; `head()` and `tail()` return the first and last point
    and raise `ValueError` on an empty chain.
  - `distance(chains, first, second)`: Euclidean distance between two
    chain ends.
  - `denoise(chains, threshold)`: removes every chain of at most
    `threshold` points, links the chains that were attached to it to each
    other, replaces it with `None` and returns the number removed.
  - `compact(chains)`: drops the `None` entries, renumbers the remaining
    chains and their links (links to removed chains are dropped) and
    returns the number of entries taken out.
- `edgechains.reorg`
  - `reorganize(points, head_links, tail_links)`: returns a new list of
    points with zig-zags along staircase steps and corners swapped back
    into order; an end with links (non-zero count) keeps its points as
    they are.
- `edgechains.buffering`
  - `plan_reads(shape, buffer_size, filter_size)`: for an image of shape
    `(width, height)` read through a buffer of `buffer_size` pixels in
    strips overlapping by `filter_size - 1` lines, returns a frozen
    `ReadPlan` with `lines`, `remainder`, `passes` and `useful`. Raises
    `ValueError` when the buffer cannot hold `filter_size` lines.
- `edgechains.options`
  - `OptionScanner(argv=None)`: scans an argument list (by default
    `sys.argv`) in which options are looked up one by one.
    `take(option, *converters)` consumes the option and up to two
    following values and returns a tuple, or `None` if the option is
    absent; an empty `option` matches the first free argument that starts
    neither with `-` nor with a digit. `unconsumed()` lists the arguments
    nobody took (the free flags `-x -y -z -v -o -b -e`, each with its value,
    and `-r -f -p -s` are ignored). `check()` reports each leftover on
    stderr and returns whether there were none.
- `edgechains.sampling`
  - `strip(points, tolerance)`: indices of the sample points, first and
    last included, such that every point stays within `tolerance` of its
    segment; the best-centred admissible point of each run is chosen.
  - `strip_basic(points, tolerance=1.5)`: the same, taking the farthest
    admissible point of each run.
- `edgechains.lsq`
  - `fit_line(points)`: returns a frozen `LineFit` with `centre`,
    `direction` (unit `(cos, sin)` from `start` to `end`), `start`, `end`
    (projections of the first and last point on the line) and `error`
    (sum of squared distances to the line).
- `edgechains.metachains`
  - `neighbours(chains, end)`: every chain end joined to `end`, directly
    or through other ends; raises `ValueError` beyond ten.
  - `find_metachains(chains)`: lists of signed chain numbers, one per
    loop, most recently found first; `None` entries are skipped.
  - `format_metachains(metachains)`: one metachain per line, numbers
    separated by spaces.

## Example

```python
from edgechains.sampling import strip
from edgechains.lsq import fit_line

points = [(x, 0) for x in range(10)] + [(9, y) for y in range(1, 10)]
vertices = strip(points, 1.5)
fit = fit_line(points[:10])
print(vertices, fit.direction)
```

## What this package does not do

It works on chains that are already built. It does not read images, trace
chains out of pixels, or write chains or segments to files, and it has no
command-line program.