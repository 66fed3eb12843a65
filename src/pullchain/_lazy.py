from __future__ import annotations

import enum
import logging
from collections.abc import Callable, Iterable, Iterator, Mapping, Sequence
from typing import TYPE_CHECKING, Any, Concatenate

import more_itertools as mit

from ._core import get_config
from ._iter import CommonMethods
from ._results import NONE, Option, Some
from ._types import Pair

if TYPE_CHECKING:
    from ._eager import Seq
    from ._types import Producer

logger = logging.getLogger(__name__)


class _Default(enum.Enum):
    Exhausted = enum.auto()


def _counter(start: int, step: int, limit: int | None) -> Producer[int]:
    counter = start
    produced = 0

    def _iota() -> Option[int]:
        nonlocal counter, produced
        if limit is not None and produced >= limit:
            logger.debug("iota stopped after %d values (iota_limit)", limit)
            return NONE
        produced += 1
        counter += step  # pre-increment: the first value is start + step
        return Some(counter)

    return _iota


class Iter[T](CommonMethods[T], Iterator[T]):
    """A lazy, single-use chain of producers.

    An `Iter` wraps exactly one producer: a zero-argument callable returning `Some(item)`, or `NONE` once the sequence is exhausted.

    - Combinators (`map`, `filter`, `take`, `zip`, `enumerate`) return a new `Iter` whose producer pulls from this one. Nothing is evaluated until a terminal operation runs.
    - Terminal operations (`collect`, `fold`, `any`, ...) pull items one at a time from the outermost producer, which pulls transitively down to the source.
    - Once the producer has returned `NONE`, the `Iter` is exhausted for good: the producer is never called again and every later pull returns `NONE`.

    Implements the `Iterator` Protocol from `collections.abc`, so it can be consumed by a for-loop.

    Keep in mind that `Iter` instances are single-use; once exhausted, they cannot be reused or reset.

    If you need to reuse the data, collect it into a `Seq` first with `.collect()`.

    Args:
        producer (Producer[T]): The callable pulled for each item.
    """

    _inner: Producer[T]
    _exhausted: bool

    __slots__ = ("_exhausted",)

    def __init__(self, producer: Producer[T]) -> None:
        self._inner = producer
        self._exhausted = False

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        match self.next():
            case Some(value):
                return value
            case _:
                raise StopIteration

    def __repr__(self) -> str:
        state = "exhausted" if self._exhausted else "active"
        return f"{self.__class__.__name__}(<{state}>)"

    def next(self) -> Option[T]:
        """Pull the next item.

        Returns:
            Option[T]: `Some[T]`, or `NONE` if the iterator is exhausted.

        Example:
        ```python
        >>> import pullchain as pc
        >>> it = pc.values([1, None])
        >>> it.next()
        Some(value=1)
        >>> it.next()
        Some(value=None)
        >>> it.next()
        NONE
        >>> it.next()
        NONE

        ```
        """
        if self._exhausted:
            return NONE
        item = self._inner()
        if item.is_none():
            self._exhausted = True
            logger.debug("%r reached the end of its producer", self)
        return item

    # constructors ------------------------------------------------------------

    @staticmethod
    def new[U](producer: Producer[U]) -> Iter[U]:
        """Wrap an arbitrary producer into an `Iter`.

        The producer is not validated.

        Args:
            producer (Producer[U]): Zero-argument callable returning `Some(item)` or `NONE`.

        Returns:
            Iter[U]: An iterator pulling from the producer.

        Example:
        ```python
        >>> import pullchain as pc
        >>> state = [3]
        >>> def countdown() -> pc.Option[int]:
        ...     if state[0] == 0:
        ...         return pc.NONE
        ...     state[0] -= 1
        ...     return pc.Some(state[0])
        >>> pc.new(countdown).collect()
        Seq(2, 1, 0)

        ```
        """
        return Iter(producer)

    @staticmethod
    def from_iterable[U](data: Iterable[U]) -> Iter[U]:
        """Create an `Iter` pulling from any Python iterable.

        Args:
            data (Iterable[U]): Any object that can be iterated over.

        Returns:
            Iter[U]: An iterator over the items of `data`.

        Example:
        ```python
        >>> import pullchain as pc
        >>> pc.from_iterable(x * x for x in range(4)).collect()
        Seq(0, 1, 4, 9)

        ```
        """
        source = iter(data)

        def _from_iterable() -> Option[U]:
            item = next(source, _Default.Exhausted)
            if item is _Default.Exhausted:
                return NONE
            return Some(item)

        return Iter(_from_iterable)

    @staticmethod
    def from_keys[K](source: Mapping[K, Any] | Sequence[Any]) -> Iter[Any]:
        """Create an `Iter` over the keys of a keyed source.

        - For a `Mapping`, keys come in the mapping's own iteration order.
        - For a `Sequence`, keys are its indices, from `0` to `len(source) - 1`.

        Args:
            source (Mapping[K, Any] | Sequence[Any]): The keyed source.

        Returns:
            Iter[Any]: An iterator over the keys.

        Raises:
            TypeError: If `source` is neither a `Mapping` nor a `Sequence`.

        Example:
        ```python
        >>> import pullchain as pc
        >>> pc.keys({"a": 1, "b": 2}).collect()
        Seq('a', 'b')
        >>> pc.keys(["x", "y"]).collect()
        Seq(0, 1)

        ```
        """
        match source:
            case Mapping():
                return Iter.from_iterable(source.keys())
            case Sequence():
                return Iter.from_iterable(range(len(source)))
            case _:
                msg = f"expected a Mapping or a Sequence, got {type(source).__name__}"
                raise TypeError(msg)

    @staticmethod
    def from_values[V](source: Mapping[Any, V] | Sequence[V]) -> Iter[V]:
        """Create an `Iter` over the values of a keyed source.

        Each pull advances the key cursor and looks up `source[key]`.

        Args:
            source (Mapping[Any, V] | Sequence[V]): The keyed source.

        Returns:
            Iter[V]: An iterator over the values, in key order.

        Raises:
            TypeError: If `source` is neither a `Mapping` nor a `Sequence`.

        Example:
        ```python
        >>> import pullchain as pc
        >>> pc.values({"a": 1, "b": 2}).collect()
        Seq(1, 2)
        >>> pc.values("hi").collect()
        Seq('h', 'i')

        ```
        """
        return Iter.from_keys(source).map(source.__getitem__)

    @staticmethod
    def iota(start: int = 0, step: int = 1) -> Iter[int]:
        """Create an infinite arithmetic sequence.

        The counter is incremented **before** being returned, so the first value is `start + step`, not `start`.

        **Warning** ⚠️
            This creates an infinite iterator, unless `Config.iota_limit` is set.
            Be sure to use `Iter.take()` or a short-circuiting terminal operation.

        Args:
            start (int): Value preceding the first produced value. Defaults to 0.
            step (int): Difference between consecutive values. Defaults to 1.

        Returns:
            Iter[int]: An iterator generating the sequence.

        Example:
        ```python
        >>> import pullchain as pc
        >>> pc.iota().take(3).collect()
        Seq(1, 2, 3)
        >>> pc.iota(10, -2).take(3).collect()
        Seq(8, 6, 4)

        ```
        """
        return Iter(_counter(start, step, get_config().iota_limit))

    # combinators -------------------------------------------------------------

    def map[**P, R](
        self,
        func: Callable[Concatenate[T, P], R],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Iter[R]:
        """Apply a function to each element of the iterator.

        The function is called once per pulled item, as `func(item, *args, **kwargs)`.

        It is never called at the end of the stream.

        Args:
            func (Callable[Concatenate[T, P], R]): Function to apply to each element.
            *args (P.args): Positional arguments forwarded after the item.
            **kwargs (P.kwargs): Keyword arguments forwarded to the function.

        Returns:
            Iter[R]: An iterator of transformed elements.

        Example:
        ```python
        >>> import pullchain as pc
        >>> pc.values([1, 2]).map(lambda x: x + 1).collect()
        Seq(2, 3)
        >>> pc.values([1, 2]).map(pow, 3).collect()
        Seq(1, 8)

        ```
        """

        def _apply(item: T) -> R:
            return func(item, *args, **kwargs)

        def _map() -> Option[R]:
            return self.next().map(_apply)

        return Iter(_map)

    def filter[**P](
        self,
        func: Callable[Concatenate[T, P], bool],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Iter[T]:
        """Keep only the items for which a predicate holds.

        Each pull loops over the upstream until an item matches, or the upstream is exhausted.

        Args:
            func (Callable[Concatenate[T, P], bool]): Predicate evaluated on each item.
            *args (P.args): Positional arguments forwarded after the item.
            **kwargs (P.kwargs): Keyword arguments forwarded to the predicate.

        Returns:
            Iter[T]: An iterator of the matching items, in upstream order.

        Example:
        ```python
        >>> import pullchain as pc
        >>> pc.values([1, 2, 3, 4]).filter(lambda x: x % 2 == 0).collect()
        Seq(2, 4)
        >>> pc.iota().filter(lambda x, n: x % n == 0, 5).take(2).collect()
        Seq(5, 10)

        ```
        """

        def _filter() -> Option[T]:
            while (item := self.next()).is_some():
                if func(item.unwrap(), *args, **kwargs):
                    return item
            return NONE

        return Iter(_filter)

    def take(self, n: int) -> Iter[T]:
        """Yield at most the first `n` items.

        Exactly `n` pulls are delegated upstream (fewer if it ends sooner), after which the upstream is never touched again.

        `n <= 0` yields nothing, and pulls nothing.

        Args:
            n (int): Number of elements to take.

        Returns:
            Iter[T]: An iterator over the first `n` items.

        Example:
        ```python
        >>> import pullchain as pc
        >>> pc.values([1, 2, 3]).take(2).collect()
        Seq(1, 2)
        >>> pc.values([1, 2, 3]).take(5).collect()
        Seq(1, 2, 3)
        >>> pc.iota().take(0).collect()
        Seq()

        ```
        """
        remaining = n

        def _take() -> Option[T]:
            nonlocal remaining
            remaining -= 1
            if remaining < 0:
                return NONE
            return self.next()

        return Iter(_take)

    def zip[U](self, other: Iterable[U]) -> Iter[Pair[T, U]]:
        """Pair up the items of this iterator with the items of another.

        Every pull takes one item from `self` **and** one from `other`, and yields `Pair(key=self_item, value=other_item)`.

        The result ends as soon as either side does; the longer side is not drained.

        Args:
            other (Iterable[U]): An `Iter`, or any iterable (wrapped with `Iter.from_iterable`).

        Returns:
            Iter[Pair[T, U]]: An iterator of pairs, as long as the shorter side.

        Example:
        ```python
        >>> import pullchain as pc
        >>> pc.values([1, 2, 3]).zip(pc.values(["a", "b"])).collect()
        Seq(Pair(key=1, value='a'), Pair(key=2, value='b'))

        ```
        """
        right = other if isinstance(other, Iter) else Iter.from_iterable(other)

        def _zip() -> Option[Pair[T, U]]:
            key = self.next()
            value = right.next()
            return key.and_then(lambda k: value.map(lambda v: Pair(k, v)))

        return Iter(_zip)

    def enumerate(self) -> Iter[Pair[int, T]]:
        """Pair each item with its 1-based index.

        Equivalent to `Iter.iota(0, 1).zip(self)`: the index is the `key`, the item the `value`.

        The index counter ignores `Config.iota_limit`.

        Returns:
            Iter[Pair[int, T]]: An iterator of `(index, item)` pairs.

        Example:
        ```python
        >>> import pullchain as pc
        >>> pc.values(["x", "y"]).enumerate().collect()
        Seq(Pair(key=1, value='x'), Pair(key=2, value='y'))

        ```
        """
        return Iter(_counter(0, 1, None)).zip(self)

    # lazy-only terminal operations --------------------------------------------

    def collect(self) -> Seq[T]:
        """Pull every remaining item into a `Seq`, in pull order.

        Returns:
            Seq[T]: The collected items.

        Example:
        ```python
        >>> import pullchain as pc
        >>> pc.values((3, 1, 2)).collect()
        Seq(3, 1, 2)

        ```
        """
        from ._eager import Seq

        return Seq(tuple(self))

    def drain(self) -> None:
        """Pull to exhaustion, discarding every item.

        Useful when the interesting work happens in side effects upstream, e.g. inside `map`.

        Example:
        ```python
        >>> import pullchain as pc
        >>> it = pc.values([1, 2]).map(print)
        >>> it.drain()
        1
        2
        >>> it.next()
        NONE

        ```
        """
        mit.consume(self)
