from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple

from ._core import Pipeable

if TYPE_CHECKING:
    from ._eager import Seq
    from ._results import Option

type Producer[T] = Callable[[], Option[T]]
"""A zero-argument, stateful callable returning the next item as `Some`, or `NONE` once exhausted."""


class Pair[K, V](NamedTuple):
    """An immutable key/value record.

    Yielded by `Iter.zip()` and `Iter.enumerate()`, consumed by `unzip()`.
    """

    key: K
    """Item from the left side (or the index, for `enumerate`)."""
    value: V
    """Item from the right side (or the original item, for `enumerate`)."""


@dataclass(slots=True)
class Unzipped[K, V](Pipeable):
    """Represents the result of unzipping a stream of pairs into two index-aligned sequences.

    See `Iter.unzip()` for details.
    """

    left: Seq[K]
    """The keys of the pairs, in pull order."""
    right: Seq[V]
    """The values of the pairs, in pull order."""
