from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import TYPE_CHECKING, Any, overload

import cytoolz as cz

from ._iter import CommonMethods

if TYPE_CHECKING:
    from ._lazy import Iter


class Seq[T](CommonMethods[T], Sequence[T]):
    """`Seq` represent an in memory, ordered Sequence.

    Implements the `Sequence` Protocol from `collections.abc`, so it can be used as a standard immutable sequence.

    It is the return type of `Iter.collect()`, `find()`, `position()` and `unzip()`, and provides the same terminal operations as `Iter`, evaluated over the stored items.

    The underlying data structure is an immutable tuple.

    If you already have a tuple, simply pass it to the constructor, without runtime checks.

    Args:
        data (tuple[T, ...]): The data to initialize the Seq with.
    """

    _inner: tuple[T, ...]

    __slots__ = ()

    def __init__(self, data: tuple[T, ...]) -> None:
        self._inner = data

    def __iter__(self) -> Iterator[T]:
        return iter(self._inner)

    def __len__(self) -> int:
        return len(self._inner)

    def __contains__(self, item: object) -> bool:
        return self._inner.__contains__(item)

    @overload
    def __getitem__(self, index: int) -> T: ...
    @overload
    def __getitem__(self, index: slice) -> Sequence[T]: ...
    def __getitem__(self, index: int | slice[Any, Any, Any]) -> T | Sequence[T]:
        return self._inner.__getitem__(index)

    @overload
    @staticmethod
    def from_[U](data: Iterable[U]) -> Seq[U]: ...
    @overload
    @staticmethod
    def from_[U](data: U, *more_data: U) -> Seq[U]: ...
    @staticmethod
    def from_[U](data: Iterable[U] | U, *more_data: U) -> Seq[U]:
        """Create a `Seq` from an `Iterable` or unpacked values.

        Prefer using the standard constructor, as this method involves extra checks and conversions steps.

        Args:
            data (Iterable[U] | U): Iterable to convert into a sequence, or a single value.
            *more_data (U): Unpacked items to include in the sequence, if 'data' is not an Iterable.

        Returns:
            Seq[U]: A new Seq instance containing the provided data.

        Example:
        ```python
        >>> import pullchain as pc
        >>> pc.Seq.from_(1, 2, 3)
        Seq(1, 2, 3)
        >>> pc.Seq.from_(range(2))
        Seq(0, 1)

        ```
        """
        if cz.itertoolz.isiterable(data):
            return Seq(tuple(data))  # type: ignore[arg-type]
        return Seq((data, *more_data))  # type: ignore[arg-type]

    def iter(self) -> Iter[T]:
        """Start a new lazy chain over the stored items.

        The `Seq` itself is left untouched, so it can be iterated again.

        Returns:
            Iter[T]: A fresh iterator.

        Example:
        ```python
        >>> import pullchain as pc
        >>> data = pc.Seq((1, 2, 3))
        >>> data.iter().map(lambda x: x * 2).collect()
        Seq(2, 4, 6)
        >>> data.iter().take(1).collect()
        Seq(1)

        ```
        """
        from ._lazy import Iter

        return Iter.from_iterable(self._inner)
