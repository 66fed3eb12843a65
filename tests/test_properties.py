"""Algebraic properties of chains, checked over a handful of sources."""

from collections.abc import Callable, Sequence
from operator import add

import pytest

import pullchain as pc

SOURCES: list[Sequence[object]] = [
    [],
    [1],
    [3, 1, 2],
    list(range(25)),
    (None, 0, False, ""),
    "lazy",
]


@pytest.mark.parametrize("seq", SOURCES)
def test_collect_preserves_native_order(seq: Sequence[object]) -> None:
    """collect() returns the source's values in iteration order."""
    assert pc.values(seq).collect().inner() == tuple(seq)


@pytest.mark.parametrize("seq", SOURCES)
@pytest.mark.parametrize("func", [repr, str, lambda x: (x, x)])
def test_map_is_elementwise(
    seq: Sequence[object], func: Callable[[object], object]
) -> None:
    """map(f) then collect equals collect with f applied to each item."""
    assert pc.values(seq).map(func).collect().inner() == tuple(map(func, seq))


@pytest.mark.parametrize("seq", SOURCES)
@pytest.mark.parametrize("pred", [bool, lambda x: x is None, lambda x: hash(x) % 2 == 0])
def test_filter_is_sound_and_ordered(
    seq: Sequence[object], pred: Callable[[object], bool]
) -> None:
    """Every kept item satisfies the predicate, in upstream order."""
    kept = pc.values(seq).filter(pred).collect()
    assert kept.all(pred)
    assert kept.inner() == tuple(x for x in seq if pred(x))


@pytest.mark.parametrize("seq", SOURCES)
@pytest.mark.parametrize("n", [0, 1, 3, 100])
def test_take_is_bounded(seq: Sequence[object], n: int) -> None:
    """take(n) yields min(n, available) items."""
    assert pc.values(seq).take(n).length() == min(n, len(seq))


def test_zip_shortest_wins() -> None:
    """Zipping 3 items with 2 gives 2 pairs."""
    result = pc.values([1, 2, 3]).zip(pc.values(["a", "b"])).collect()
    assert result.inner() == (
        pc.Pair(key=1, value="a"),
        pc.Pair(key=2, value="b"),
    )


def test_iota_then_take() -> None:
    """iota(0, 1).take(5) starts at 1."""
    assert pc.iota(0, 1).take(5).collect().inner() == (1, 2, 3, 4, 5)


def test_fold_sums() -> None:
    """Folding with addition sums the items."""
    assert pc.values([1, 2, 3]).fold(add, 0) == 6


def test_reduce_on_empty_is_none() -> None:
    """Reducing nothing gives NONE."""
    assert pc.values([]).reduce(add) is pc.NONE


@pytest.mark.parametrize("seq", SOURCES)
def test_drain_then_pull_is_none(seq: Sequence[object]) -> None:
    """After drain(), every pull is NONE."""
    it = pc.values(seq)
    it.drain()
    assert it.next() is pc.NONE
    assert it.next() is pc.NONE


@pytest.mark.parametrize("seq", SOURCES)
def test_enumerate_then_unzip_roundtrip(seq: Sequence[object]) -> None:
    """Unzipping an enumeration gives 1..n and the original items."""
    unzipped = pc.values(seq).enumerate().unzip()
    assert unzipped.left.inner() == tuple(range(1, len(seq) + 1))
    assert unzipped.right.inner() == tuple(seq)
