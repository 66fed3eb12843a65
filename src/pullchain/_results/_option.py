from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Never, TypeIs


class OptionUnwrapError(RuntimeError): ...


class Option[T](ABC):
    """Two-state result of a pull: `Some(value)` or the termination signal `NONE`.

    Every producer returns an `Option`.

    `NONE` never collides with an item, so `Some(None)` is a perfectly valid item.

    Example:
    ```python
    >>> import pullchain as pc
    >>> pc.Some(None).is_some()
    True
    >>> pc.NONE.is_some()
    False

    ```
    """

    __slots__ = ()

    @abstractmethod
    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        """Returns `True` if the option holds a value."""
        ...

    @abstractmethod
    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        """Returns `True` if the option is the termination signal."""
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """Returns the contained value.

        Returns:
            T: The contained `Some` value.

        Raises:
            OptionUnwrapError: If the option is `NONE`.

        Example:
        ```python
        >>> import pullchain as pc
        >>> pc.Some("car").unwrap()
        'car'
        >>> pc.NONE.unwrap()
        Traceback (most recent call last):
            ...
        pullchain._results._option.OptionUnwrapError: called `unwrap` on a `None`

        ```
        """
        ...

    def expect(self, msg: str) -> T:
        """Returns the contained value, or raises with a custom message.

        Args:
            msg (str): The message to include in the exception if the option is `NONE`.

        Returns:
            T: The contained `Some` value.

        Raises:
            OptionUnwrapError: If the option is `NONE`.

        Example:
        ```python
        >>> import pullchain as pc
        >>> pc.Some(3).expect("need a value")
        3
        >>> pc.NONE.expect("need a value")
        Traceback (most recent call last):
            ...
        pullchain._results._option.OptionUnwrapError: need a value (called `expect` on a `None`)

        ```
        """
        if self.is_some():
            return self.unwrap()
        msg = f"{msg} (called `expect` on a `None`)"
        raise OptionUnwrapError(msg)

    def unwrap_or(self, default: T) -> T:
        """Returns the contained value or a provided default.

        Example:
        ```python
        >>> import pullchain as pc
        >>> pc.Some(1).unwrap_or(0)
        1
        >>> pc.NONE.unwrap_or(0)
        0

        ```
        """
        return self.unwrap() if self.is_some() else default

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        """Returns the contained value or computes one from `f`."""
        return self.unwrap() if self.is_some() else f()

    def map[U](self, f: Callable[[T], U]) -> Option[U]:
        """Apply `f` to a contained value, leaving `NONE` untouched.

        `f` is never called on `NONE`.

        Args:
            f (Callable[[T], U]): The function to apply to the `Some` value.

        Returns:
            Option[U]: `Some(f(value))`, or `NONE`.

        Example:
        ```python
        >>> import pullchain as pc
        >>> pc.Some("abc").map(len)
        Some(value=3)
        >>> pc.NONE.map(len)
        NONE

        ```
        """
        if self.is_some():
            return Some(f(self.unwrap()))
        return NONE

    def and_then[U](self, f: Callable[[T], Option[U]]) -> Option[U]:
        """Chain another fallible step, returning `NONE` as soon as one step does.

        Example:
        ```python
        >>> import pullchain as pc
        >>> pc.Some(2).and_then(lambda x: pc.Some(x * 10))
        Some(value=20)
        >>> pc.Some(2).and_then(lambda _: pc.NONE)
        NONE

        ```
        """
        if self.is_some():
            return f(self.unwrap())
        return NONE

    def or_else(self, f: Callable[[], Option[T]]) -> Option[T]:
        """Returns the option if it holds a value, otherwise the result of `f`."""
        return self if self.is_some() else f()


@dataclass(slots=True)
class Some[T](Option[T]):
    """Option variant holding a pulled item."""

    value: T

    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        return True

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(slots=True)
class NoneOption(Option[Any]):
    """Option variant signalling the end of a stream."""

    def __repr__(self) -> str:
        return "NONE"

    def is_some(self) -> TypeIs[Some[Any]]:  # type: ignore[misc]
        return False

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return True

    def unwrap(self) -> Never:
        raise OptionUnwrapError("called `unwrap` on a `None`")


NONE: Option[Any] = NoneOption()
"""The termination signal, shared by every producer."""
