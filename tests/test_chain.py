import pytest

from edgechains.chain import Chain, compact, denoise, distance


def line(number, start, length, ancestors=(), children=()):
    x0, y0 = start
    points = [(x0 + step, y0, 1) for step in range(length)]
    return Chain(number, points, list(ancestors), list(children))


def test_head_and_tail():
    chain = Chain(1, [(0, 0, 5), (1, 0, 6), (2, 1, 7)])
    assert chain.head() == (0, 0, 5)
    assert chain.tail() == (2, 1, 7)


def test_head_of_empty_chain_raises():
    with pytest.raises(ValueError):
        Chain(1).head()
    with pytest.raises(ValueError):
        Chain(1).tail()


def test_distance_uses_head_or_tail_by_sign():
    chains = [
        Chain(1, [(0, 0, 1), (3, 0, 1)]),
        Chain(2, [(3, 4, 1), (9, 9, 1)]),
    ]
    assert distance(chains, 1, 2) == pytest.approx(5.0)
    assert distance(chains, -1, 2) == pytest.approx(4.0)
    assert distance(chains, 1, 2) == distance(chains, 2, 1)
    assert distance(chains, 1, 1) == 0.0


def test_distance_rejects_zero():
    chains = [Chain(1, [(0, 0, 1)])]
    with pytest.raises(ValueError):
        distance(chains, 0, 1)


def test_isolated_short_chain_removed_long_kept():
    chains = [line(1, (0, 0), 2), line(2, (10, 10), 6)]
    assert denoise(chains, 3) == 1
    assert chains[0] is None
    assert chains[1].number == 2


def test_threshold_is_inclusive():
    chains = [line(1, (0, 0), 3), line(2, (10, 10), 4)]
    assert denoise(chains, 3) == 1
    assert chains[0] is None
    assert chains[1] is not None and len(chains[1]) == 4


def test_short_chain_at_single_neighbour_is_detached():
    chains = [
        line(1, (0, 0), 8, ancestors=[-2]),
        line(2, (-3, 0), 2, children=[1]),
    ]
    assert denoise(chains, 2) == 1
    assert chains[1] is None
    assert chains[0].ancestors == []


def test_short_chain_at_junction_relinks_neighbours():
    chains = [
        line(1, (0, 0), 8, ancestors=[-3]),
        line(2, (0, 5), 8, ancestors=[-3]),
        line(3, (-2, 2), 2, children=[1, 2]),
    ]
    assert denoise(chains, 2) == 1
    assert chains[2] is None
    assert chains[0].ancestors == [2]
    assert chains[1].ancestors == [1]


def test_short_linking_chain_removed_from_both_sides():
    chains = [
        line(1, (0, 0), 8, children=[2]),
        line(2, (8, 0), 2, ancestors=[-1], children=[3]),
        line(3, (10, 0), 8, ancestors=[-2]),
    ]
    assert denoise(chains, 2) == 1
    assert chains[1] is None
    assert chains[0].children == []
    assert chains[2].ancestors == []


def test_self_looped_short_chain_removed():
    chains = [line(1, (0, 0), 2, ancestors=[-1], children=[1])]
    assert denoise(chains, 2) == 1
    assert chains == [None]


def test_single_point_chain_with_two_neighbours():
    chains = [
        line(1, (0, 0), 5, children=[2]),
        Chain(2, [(5, 0, 1)], ancestors=[-1, 3]),
        line(3, (6, 0), 5, ancestors=[2]),
    ]
    assert denoise(chains, 2) == 1
    assert chains[1] is None
    assert chains[0].children == [3]
    assert chains[2].ancestors == [-1]


def test_single_point_chain_four_neighbours_pairs_nearest():
    chains = [
        line(1, (0, 0), 5, ancestors=[5]),
        line(2, (1, 0), 5, ancestors=[5]),
        line(3, (10, 10), 5, ancestors=[5]),
        line(4, (10, 13), 5, ancestors=[5]),
        Chain(5, [(5, 5, 1)], ancestors=[1, 2, 3, 4]),
    ]
    assert denoise(chains, 2) == 1
    assert chains[4] is None
    assert chains[0].ancestors == [2]
    assert chains[1].ancestors == [1]
    assert chains[2].ancestors == [4]
    assert chains[3].ancestors == [3]


def test_single_point_chain_equal_distances_pairs_by_number():
    # Heads on the corners of a square, ordered so that chains 1 and 2
    # sit on a diagonal: the distance criterion alone cannot decide.
    chains = [
        Chain(1, [(0, 0, 1), (0, -1, 1), (0, -2, 1)], ancestors=[5]),
        Chain(2, [(4, 4, 1), (4, 5, 1), (4, 6, 1)], ancestors=[5]),
        Chain(3, [(4, 0, 1), (5, 0, 1), (6, 0, 1)], ancestors=[5]),
        Chain(4, [(0, 4, 1), (-1, 4, 1), (-2, 4, 1)], ancestors=[5]),
        Chain(5, [(2, 2, 1)], ancestors=[1, 2, 3, 4]),
    ]
    assert denoise(chains, 1) == 1
    assert chains[0].ancestors == [2]
    assert chains[1].ancestors == [1]
    assert chains[2].ancestors == [4]
    assert chains[3].ancestors == [3]


def test_single_point_chain_three_neighbours_links_two_nearest_pairs():
    chains = [
        line(1, (0, 0), 5, ancestors=[4]),
        line(2, (1, 0), 5, ancestors=[4]),
        line(3, (0, 20), 5, ancestors=[4]),
        Chain(4, [(0, 1, 1)], ancestors=[1, 2, 3]),
    ]
    assert denoise(chains, 1) == 1
    assert chains[3] is None
    links = {1: set(chains[0].ancestors), 2: set(chains[1].ancestors),
             3: set(chains[2].ancestors)}
    total = sum(len(family) for family in links.values())
    assert total == 4
    assert 2 in links[1] and 1 in links[2]


def test_denoise_rejects_misnumbered_chain():
    chains = [Chain(7, [(0, 0, 1)])]
    with pytest.raises(ValueError):
        denoise(chains, 2)


def test_denoise_leaves_long_chains_untouched():
    chains = [
        line(1, (0, 0), 6, children=[2]),
        line(2, (6, 0), 6, ancestors=[-1]),
    ]
    assert denoise(chains, 5) == 0
    assert chains[0].children == [2]
    assert chains[1].ancestors == [-1]


def test_compact_renumbers_chains_and_links():
    first = line(1, (0, 0), 4, children=[3])
    third = line(3, (4, 0), 4, ancestors=[-1])
    chains = [first, None, third]
    assert compact(chains) == 1
    assert chains == [first, third]
    assert [chain.number for chain in chains] == [1, 2]
    assert first.children == [2]
    assert third.ancestors == [-1]


def test_compact_drops_links_to_removed_chains():
    chains = [line(1, (0, 0), 4, children=[2, -3]), None, line(3, (9, 9), 4)]
    compact(chains)
    assert chains[0].children == [-2]
    assert len(chains) == 2


def test_denoise_then_compact_keeps_numbering_consistent():
    chains = [
        line(1, (0, 0), 1),
        line(2, (5, 5), 6, children=[4]),
        line(3, (20, 20), 2),
        line(4, (11, 5), 6, ancestors=[-2]),
    ]
    removed = denoise(chains, 2)
    assert compact(chains) == removed
    for index, chain in enumerate(chains):
        assert chain.number == index + 1
    assert chains[0].children == [2]
    assert chains[1].ancestors == [-1]