from __future__ import annotations

import functools
from abc import abstractmethod
from collections.abc import Callable, Iterable, Iterator
from typing import TYPE_CHECKING, Any, Concatenate

import cytoolz as cz
import more_itertools as mit

from ._core import CommonBase, get_config
from ._results import NONE, Option, Some
from ._types import Pair, Unzipped

if TYPE_CHECKING:
    from ._eager import Seq


class CommonMethods[T](CommonBase[Any]):
    """Terminal operations shared by `Iter` and `Seq`.

    Every method here consumes `iter(self)`.

    On an `Iter`, this is the pull chain itself, so each method drives the upstream producers and leaves the `Iter` partially or fully exhausted.
    """

    __slots__ = ()

    @abstractmethod
    def __iter__(self) -> Iterator[T]: ...

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({get_config().iter_repr(self)})"

    def for_each[**P](
        self,
        func: Callable[Concatenate[T, P], Any],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> None:
        """Consume every item by passing it to a function, for its side effects.

        Args:
            func (Callable[Concatenate[T, P], Any]): Function to apply to each element.
            *args (P.args): Positional arguments forwarded to the function after the item.
            **kwargs (P.kwargs): Keyword arguments forwarded to the function.

        Returns:
            None: This is a terminal operation with no return value.

        Example:
        ```python
        >>> import pullchain as pc
        >>> pc.values([1, 2, 3]).for_each(lambda x, n: print(x + n), 10)
        11
        12
        13

        ```
        """
        for item in self:
            func(item, *args, **kwargs)

    def any[**P](
        self,
        func: Callable[Concatenate[T, P], bool],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> bool:
        """Tests if any item matches a predicate.

        Pulling stops at the first match, so this is safe on an infinite `Iter` that contains one.

        An empty stream returns `False`.

        Args:
            func (Callable[Concatenate[T, P], bool]): Predicate to evaluate each item.
            *args (P.args): Positional arguments forwarded to the predicate.
            **kwargs (P.kwargs): Keyword arguments forwarded to the predicate.

        Returns:
            bool: True if any element matches the predicate, False otherwise.

        Example:
        ```python
        >>> import pullchain as pc
        >>> pc.iota().any(lambda x: x == 3)
        True
        >>> pc.values([1, 3]).any(lambda x, n: x % n == 0, 2)
        False

        ```
        """
        return any(func(item, *args, **kwargs) for item in self)

    def all[**P](
        self,
        func: Callable[Concatenate[T, P], bool],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> bool:
        """Tests if every item matches a predicate.

        Pulling stops at the first item that does not match.

        An empty stream returns `True`.

        Args:
            func (Callable[Concatenate[T, P], bool]): Predicate to evaluate each item.
            *args (P.args): Positional arguments forwarded to the predicate.
            **kwargs (P.kwargs): Keyword arguments forwarded to the predicate.

        Returns:
            bool: True if all elements match the predicate, False otherwise.

        Example:
        ```python
        >>> import pullchain as pc
        >>> pc.values([2, 4, 6]).all(lambda x: x % 2 == 0)
        True
        >>> pc.iota().all(lambda x: x < 10)
        False

        ```
        """
        return all(func(item, *args, **kwargs) for item in self)

    def find[**P](
        self,
        func: Callable[Concatenate[T, P], bool],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Seq[T]:
        """Collect **every** item matching a predicate, in pull order.

        Note:
            This is not a first-match search: the whole stream is consumed.
            Use `.filter(func).next()` to stop at the first match.

        Args:
            func (Callable[Concatenate[T, P], bool]): Predicate to evaluate each item.
            *args (P.args): Positional arguments forwarded to the predicate.
            **kwargs (P.kwargs): Keyword arguments forwarded to the predicate.

        Returns:
            Seq[T]: All matching items.

        Example:
        ```python
        >>> import pullchain as pc
        >>> pc.values(["ab", "c", "de"]).find(lambda s: len(s) == 2)
        Seq('ab', 'de')

        ```
        """
        from ._eager import Seq

        return Seq(tuple(item for item in self if func(item, *args, **kwargs)))

    def position[**P](
        self,
        func: Callable[Concatenate[T, P], bool],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Seq[int]:
        """Collect the 1-based pull index of every item matching a predicate.

        Args:
            func (Callable[Concatenate[T, P], bool]): Predicate to evaluate each item.
            *args (P.args): Positional arguments forwarded to the predicate.
            **kwargs (P.kwargs): Keyword arguments forwarded to the predicate.

        Returns:
            Seq[int]: Indices of the matching items, starting at 1.

        Example:
        ```python
        >>> import pullchain as pc
        >>> pc.values(["a", "b", "a"]).position(lambda s: s == "a")
        Seq(1, 3)

        ```
        """
        from ._eager import Seq

        def _pred(item: T) -> bool:
            return func(item, *args, **kwargs)

        return Seq(tuple(idx + 1 for idx in mit.locate(self, _pred)))

    def unzip[K, V](self: CommonMethods[Pair[K, V]]) -> Unzipped[K, V]:
        """Split a stream of pairs into two index-aligned sequences.

        Every item must be a `Pair` (or any other 2-item sequence such as a tuple or list).

        Anything else, including strings, sets and mappings of length 2, raises `TypeError` at the offending item.

        Returns:
            Unzipped[K, V]: dataclass with the `left` (keys) and `right` (values) sequences.

        Example:
        ```python
        >>> import pullchain as pc
        >>> unzipped = pc.values("xyz").enumerate().unzip()
        >>> unzipped.left
        Seq(1, 2, 3)
        >>> unzipped.right
        Seq('x', 'y', 'z')

        ```
        """
        from ._eager import Seq

        left: list[K] = []
        right: list[V] = []
        for item in self:
            match item:
                case (key, value):
                    left.append(key)
                    right.append(value)
                case _:
                    msg = f"expected a pair, got {item!r}"
                    raise TypeError(msg)
        return Unzipped(Seq(tuple(left)), Seq(tuple(right)))

    def fold[U](self, func: Callable[[U, T], U], initial: U) -> U:
        """Thread an accumulator through every item, starting from `initial`.

        Args:
            func (Callable[[U, T], U]): Called as `func(acc, item)`, returns the new accumulator.
            initial (U): The starting accumulator, returned as-is for an empty stream.

        Returns:
            U: The final accumulator.

        Example:
        ```python
        >>> import pullchain as pc
        >>> pc.values([1, 2, 3]).fold(lambda acc, x: acc + x, 0)
        6
        >>> pc.values("abc").fold(lambda acc, x: x + acc, "")
        'cba'

        ```
        """
        return functools.reduce(func, self, initial)

    def reduce(self, func: Callable[[T, T], T]) -> Option[T]:
        """Fold the stream using its first item as the seed.

        Returns:
            Option[T]: `NONE` if the stream was empty, otherwise `Some` of the final accumulator.

        Example:
        ```python
        >>> import pullchain as pc
        >>> pc.values([1, 2, 3]).reduce(lambda a, b: a + b)
        Some(value=6)
        >>> pc.values([]).reduce(lambda a, b: a + b)
        NONE

        ```
        """
        data = iter(self)
        for seed in data:
            return Some(functools.reduce(func, data, seed))
        return NONE

    def length(self) -> int:
        """Return the number of items.

        Consumes an `Iter`.

        Example:
        ```python
        >>> import pullchain as pc
        >>> pc.iota().take(4).length()
        4

        ```
        """
        return cz.itertoolz.count(self)

    def eq(self, other: Iterable[T]) -> bool:
        """Check if this and another iterable hold the same items, in the same order.

        Note:
            This will consume any `Iter` involved in the comparison.

        Example:
        ```python
        >>> import pullchain as pc
        >>> pc.values([1, 2]).eq([1, 2])
        True
        >>> pc.values([1, 2]).collect().eq(pc.values([1]))
        False

        ```
        """
        return tuple(self) == tuple(other)
