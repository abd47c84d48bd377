from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeIs

from .._core import deprecated


class Maybe[T](ABC):
    __slots__ = ()

    @staticmethod
    def just[U](value: U) -> Maybe[U]:
        """
        Creates a `Maybe` holding a present value.

        `None` is never stored: `Maybe.just(None)` is `NOTHING`.

        Args:
            value: The value to hold.

        Returns:
            A `Just` containing `value`, or `NOTHING` if `value` is `None`.

        Example:
            ```python
            >>> from pyomonads import Maybe
            >>> Maybe.just(0)
            Just(value=0)
            >>> Maybe.just(None)
            NOTHING

            ```
        """
        return maybe(value)

    @staticmethod
    def nothing() -> Maybe[Any]:
        """
        Returns the absent `Maybe`.

        Example:
            ```python
            >>> from pyomonads import Maybe
            >>> Maybe.nothing()
            NOTHING

            ```
        """
        return NOTHING

    @abstractmethod
    def is_present(self) -> TypeIs[Just[T]]:  # type: ignore[misc]
        """
        Returns `True` if the maybe holds a value.

        Presence depends only on the variant: falsy values such as `0`, `""`
        or `False` are present.

        Example:
            ```python
            >>> from pyomonads import maybe
            >>> maybe(0).is_present()
            True
            >>> maybe(None).is_present()
            False

            ```
        """
        ...

    def is_absent(self) -> TypeIs[Nothing]:  # type: ignore[misc]
        """Returns `True` if the maybe holds no value."""
        return not self.is_present()

    @deprecated("`is_just` is deprecated, use `is_present` instead")
    def is_just(self) -> bool:
        """Deprecated alias of `is_present`."""
        return self.is_present()

    @abstractmethod
    def get_or_none(self) -> T | None:
        """
        Returns the contained value, or `None` if absent.

        Example:
            ```python
            >>> from pyomonads import Maybe
            >>> Maybe.just("car").get_or_none()
            'car'
            >>> Maybe.nothing().get_or_none() is None
            True

            ```
        """
        ...

    def get_or_else(self, default: T) -> T:
        """
        Returns the contained value or a provided default.

        Args:
            default: The value to return if the maybe is absent.

        Returns:
            The contained value or `default`.

        Example:
            ```python
            >>> from pyomonads import Maybe
            >>> Maybe.just("car").get_or_else("bike")
            'car'
            >>> Maybe.nothing().get_or_else("bike")
            'bike'

            ```
        """
        if self.is_present():
            return self.value
        return default

    def get_or_else_get(self, supplier: Callable[[], T]) -> T:
        """
        Returns the contained value or computes one from `supplier`.

        `supplier` is only called when the maybe is absent.

        Args:
            supplier: A zero-argument function producing the fallback value.

        Returns:
            The contained value or the result of `supplier()`.

        Example:
            ```python
            >>> from pyomonads import Maybe
            >>> k = 10
            >>> Maybe.just(4).get_or_else_get(lambda: 2 * k)
            4
            >>> Maybe.nothing().get_or_else_get(lambda: 2 * k)
            20

            ```
        """
        if self.is_present():
            return self.value
        return supplier()

    def get_or_raise(self, error: BaseException) -> T:
        """
        Returns the contained value, or raises `error` if absent.

        The exception object is raised as given, it is never wrapped.

        Args:
            error: The exception to raise when the maybe is absent.

        Returns:
            The contained value.

        Raises:
            BaseException: `error` itself, if the maybe is absent.

        Example:
            ```python
            >>> from pyomonads import Maybe
            >>> Maybe.just(3).get_or_raise(KeyError("missing"))
            3
            >>> Maybe.nothing().get_or_raise(KeyError("missing"))
            Traceback (most recent call last):
                ...
            KeyError: 'missing'

            ```
        """
        if self.is_present():
            return self.value
        raise error

    def map[U](self, f: Callable[[T], U | None]) -> Maybe[U]:
        """
        Maps a `Maybe[T]` to `Maybe[U]` by applying a function to a contained value.

        A `None` returned by `f` gives an absent maybe.
        `f` is not called on an absent maybe.

        Args:
            f: The function to apply to the contained value.

        Returns:
            A new `Maybe` with the mapped value, or `NOTHING`.

        Example:
            ```python
            >>> from pyomonads import Maybe
            >>> Maybe.just("Hello, World!").map(len)
            Just(value=13)
            >>> Maybe.just({"a": 1}).map(lambda d: d.get("b"))
            NOTHING
            >>> Maybe.nothing().map(len)
            NOTHING

            ```
        """
        if self.is_present():
            return maybe(f(self.value))
        return NOTHING

    def flat_map[U](self, f: Callable[[T], Maybe[U]]) -> Maybe[U]:
        """
        Calls `f` with the contained value and returns its result as is.

        Args:
            f: The function to call with the contained value.

        Returns:
            The result of `f` if present, otherwise `NOTHING`.

        Example:
            ```python
            >>> from pyomonads import Maybe
            >>> def sq(x: int) -> Maybe[int]:
            ...     return Maybe.just(x * x)
            >>> def nope(x: int) -> Maybe[int]:
            ...     return Maybe.nothing()
            >>> Maybe.just(2).flat_map(sq).flat_map(sq)
            Just(value=16)
            >>> Maybe.just(2).flat_map(nope).flat_map(sq)
            NOTHING

            ```
        """
        if self.is_present():
            return f(self.value)
        return NOTHING


@dataclass(slots=True)
class Just[T](Maybe[T]):
    """`Maybe` variant holding a value."""

    value: T

    def __str__(self) -> str:
        return f"Just({self.value})"

    def is_present(self) -> TypeIs[Just[T]]:  # type: ignore[misc]
        return True

    def get_or_none(self) -> T:
        return self.value


@dataclass(slots=True)
class Nothing(Maybe[Any]):
    """`Maybe` variant holding no value."""

    def __repr__(self) -> str:
        return "NOTHING"

    def __str__(self) -> str:
        return "Nothing"

    def is_present(self) -> TypeIs[Just[Any]]:  # type: ignore[misc]
        return False

    def get_or_none(self) -> None:
        return None


NOTHING: Maybe[Any] = Nothing()
"""Singleton instance representing the absence of a value."""


def maybe[T](value: T | None) -> Maybe[T]:
    """
    Wraps a possibly-`None` value.

    Only `None` counts as absent.

    Args:
        value: The value to wrap.

    Returns:
        `NOTHING` if `value` is `None`, otherwise `Just(value)`.

    Example:
        ```python
        >>> from pyomonads import maybe
        >>> maybe("")
        Just(value='')
        >>> maybe(None)
        NOTHING

        ```
    """
    if value is None:
        return NOTHING
    return Just(value)
