"""Tests for the lazy combinators: map, filter, take, zip, enumerate."""

import pytest

import pullchain as pc


class _Counting:
    """Source wrapper counting how many times its producer is pulled."""

    def __init__(self, data: list[object]) -> None:
        self.pulls = 0
        self._data = iter(data)

    def __call__(self) -> pc.Option[object]:
        self.pulls += 1
        for item in self._data:
            return pc.Some(item)
        return pc.NONE


def test_combinators_are_lazy() -> None:
    """Test that building a chain pulls nothing."""
    source = _Counting([1, 2, 3])
    calls: list[object] = []
    chain = (
        pc.new(source)
        .map(lambda x: calls.append(x) or x)
        .filter(lambda _: True)
        .take(2)
        .enumerate()
    )
    assert source.pulls == 0
    assert calls == []
    assert chain.next() == pc.Some(pc.Pair(1, 1))
    assert source.pulls == 1


def test_map_forwards_extra_arguments() -> None:
    """Test that trailing args and kwargs reach the mapper."""
    result = pc.values([1, 2]).map(lambda x, a, b=0: x + a + b, 10, b=100).collect()
    assert result.inner() == (111, 112)


def test_map_is_not_called_at_end_of_stream() -> None:
    """Test that the mapper only ever sees real items."""
    seen: list[object] = []
    it = pc.values([None, 1]).map(seen.append)
    it.drain()
    assert it.next().is_none()
    assert seen == [None, 1]


def test_filter_skips_until_match() -> None:
    """Test that filter loops upstream and keeps order."""
    source = _Counting([1, 2, 3, 4, 5, 6])
    it = pc.new(source).filter(lambda x: x % 3 == 0)
    assert it.next() == pc.Some(3)
    assert source.pulls == 3
    assert it.collect().inner() == (6,)


def test_filter_never_sees_termination() -> None:
    """Test that the predicate is only called with items."""
    seen: list[object] = []

    def _pred(x: object) -> bool:
        seen.append(x)
        return x is None

    assert pc.values([0, None, 2]).filter(_pred).collect().inner() == (None,)
    assert seen == [0, None, 2]


def test_filter_forwards_extra_arguments() -> None:
    """Test filter with a bound threshold."""
    result = pc.values([1, 5, 10]).filter(lambda x, low: x > low, 4).collect()
    assert result.inner() == (5, 10)


@pytest.mark.parametrize(("n", "expected_pulls"), [(0, 0), (-3, 0), (1, 1), (3, 3)])
def test_take_delegates_exactly_n_pulls(n: int, expected_pulls: int) -> None:
    """Test the take boundary, including n <= 0."""
    source = _Counting(list(range(10)))
    taken = pc.new(source).take(n)
    assert taken.length() == max(n, 0)
    assert taken.next().is_none()
    assert source.pulls == expected_pulls


def test_take_more_than_available() -> None:
    """Test take on a shorter upstream."""
    source = _Counting([1, 2])
    assert pc.new(source).take(5).collect().inner() == (1, 2)
    assert source.pulls == 3


def test_zip_stops_at_shorter_side() -> None:
    """Test that zip ends with the shorter side without draining the longer."""
    left = _Counting([1, 2, 3, 4])
    right = _Counting(["a", "b"])
    pairs = pc.new(left).zip(pc.new(right)).collect()
    assert pairs.inner() == (pc.Pair(1, "a"), pc.Pair(2, "b"))
    assert left.pulls == 3
    assert right.pulls == 3


def test_zip_pairs_have_named_fields() -> None:
    """Test the Pair record produced by zip."""
    pair = pc.values([1]).zip(["x"]).next().unwrap()
    assert pair.key == 1
    assert pair.value == "x"
    assert pair == (1, "x")


def test_zip_accepts_plain_iterables() -> None:
    """Test zip with a non-Iter argument."""
    result = pc.values("ab").zip(range(5)).collect()
    assert result.inner() == (("a", 0), ("b", 1))


def test_zip_with_none_items() -> None:
    """Test that None items are zipped, not treated as the end."""
    result = pc.values([None, None]).zip(pc.values([None])).collect()
    assert result.inner() == (pc.Pair(None, None),)


def test_enumerate_starts_at_one() -> None:
    """Test enumerate indexing."""
    result = pc.values(["x", "y", "z"]).enumerate().collect()
    assert result.inner() == (
        pc.Pair(key=1, value="x"),
        pc.Pair(key=2, value="y"),
        pc.Pair(key=3, value="z"),
    )


def test_enumerate_matches_iota_zip() -> None:
    """Test that enumerate is the same as zipping a fresh iota with the chain."""
    data = ("a", "b", "c")
    assert (
        pc.values(data).enumerate().collect().inner()
        == pc.iota(0, 1).zip(pc.values(data)).collect().inner()
    )


def test_combinator_over_exhausted_upstream_stays_exhausted() -> None:
    """Test that wrapping an exhausted Iter yields an exhausted Iter."""
    base = pc.values([1, 2])
    base.drain()
    for it in (
        base.map(str),
        base.filter(bool),
        base.take(3),
        base.zip(pc.iota()),
        base.enumerate(),
    ):
        assert it.next().is_none()
        assert it.next().is_none()


def test_errors_from_callbacks_propagate() -> None:
    """Test that exceptions raised by caller functions are not caught."""

    def _boom(x: int) -> int:
        if x == 2:
            msg = "boom"
            raise ValueError(msg)
        return x

    chain = pc.values([1, 2, 3]).map(_boom).filter(lambda _: True)
    with pytest.raises(ValueError, match="boom"):
        chain.collect()


def test_non_callable_fails_at_point_of_use() -> None:
    """Test that a non-callable mapper fails when pulled, not when chained."""
    chain = pc.values([1]).map(42)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        chain.collect()
