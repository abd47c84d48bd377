from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeIs

from .._core import deprecated


class EitherError(ValueError): ...


class Either[L, R](ABC):
    __slots__ = ()

    @abstractmethod
    def is_left(self) -> TypeIs[Left[L, R]]:  # type: ignore[misc]
        """Returns True if the either holds a left value."""
        ...

    @abstractmethod
    def is_right(self) -> TypeIs[Right[L, R]]:  # type: ignore[misc]
        """Returns True if the either holds a right value."""
        ...

    def map[U](self, f: Callable[[R], U]) -> Either[L, U]:
        """
        Maps an Either[L, R] to Either[L, U] by applying a function to a right value, leaving a left value untouched.

        Args:
            f: Callable to apply to the right value.

        Returns:
            Either[L, U]: Right(f(value)) if Right, otherwise Left(value).

        Example:
            ```python
            >>> from pyomonads import Left, Right
            >>> print(Right(42).map(lambda x: x + 1))
            Right(43)
            >>> print(Left("e").map(lambda x: x + 1))
            Left(e)

            ```
        """
        if self.is_right():
            return Right(f(self.value))
        return Left(self.value)

    def map_left[U](self, f: Callable[[L], U]) -> Either[U, R]:
        """
        Maps an Either[L, R] to Either[U, R] by applying a function to a left value, leaving a right value untouched.

        Args:
            f: Callable to apply to the left value.

        Returns:
            Either[U, R]: Left(f(value)) if Left, otherwise Right(value).

        Example:
            ```python
            >>> from pyomonads import Left, Right
            >>> print(Left("e").map_left(str.upper))
            Left(E)
            >>> print(Right(42).map_left(str.upper))
            Right(42)

            ```
        """
        if self.is_left():
            return Left(f(self.value))
        return Right(self.value)

    def flat_map[U](self, f: Callable[[R], Either[L, U]]) -> Either[L, U]:
        """
        Calls f with the right value and returns its result, otherwise returns Left.

        Args:
            f: Callable that takes the right value and returns an Either.

        Returns:
            Either[L, U]: The result of f(value) if Right, otherwise Left(value).

        Example:
            ```python
            >>> from pyomonads import Left, Right
            >>> print(Right(42).flat_map(lambda x: Right(x + 1)))
            Right(43)
            >>> print(Right(42).flat_map(lambda x: Left("too big")))
            Left(too big)
            >>> print(Left("e").flat_map(lambda x: Right(x + 1)))
            Left(e)

            ```
        """
        if self.is_right():
            return f(self.value)
        return Left(self.value)

    def fold[A](self, on_left: Callable[[L], A], on_right: Callable[[R], A]) -> A:
        """
        Pattern matches on the either, calling on_left if Left, or on_right if Right.

        Exactly one of the two callables is invoked.

        Args:
            on_left: Callable to handle the left value.
            on_right: Callable to handle the right value.

        Returns:
            The result of the called function.

        Example:
            ```python
            >>> from pyomonads import Left, Right
            >>> Right(42).fold(lambda l: f"Error: {l}", lambda r: f"Value: {r}")
            'Value: 42'
            >>> Left("boom").fold(lambda l: f"Error: {l}", lambda r: f"Value: {r}")
            'Error: boom'

            ```
        """
        if self.is_right():
            return on_right(self.value)
        return on_left(self.value)

    def get_or_else(self, default: R) -> R:
        """
        Returns the right value or a provided default.

        Args:
            default: The value to return if the either is Left.

        Returns:
            The right value or the default.

        Example:
            ```python
            >>> from pyomonads import Left, Right
            >>> Right(42).get_or_else(100)
            42
            >>> Left("e").get_or_else(100)
            100

            ```
        """
        if self.is_right():
            return self.value
        return default

    @deprecated("`or_else` is deprecated, use `get_or_else` instead")
    def or_else(self, default: R) -> R:
        """Deprecated alias of `get_or_else`."""
        return self.get_or_else(default)

    def get_or_else_get(self, supplier: Callable[[], R]) -> R:
        """
        Returns the right value or computes one from supplier if Left.

        Args:
            supplier: Zero-argument callable, only called if the either is Left.

        Returns:
            The right value or the result of supplier().

        Example:
            ```python
            >>> from pyomonads import Left, Right
            >>> Right(4).get_or_else_get(lambda: 20)
            4
            >>> Left("e").get_or_else_get(lambda: 20)
            20

            ```
        """
        if self.is_right():
            return self.value
        return supplier()

    def get_or_raise(self, error: BaseException) -> R:
        """
        Returns the right value, or raises error if the either is Left.

        Args:
            error: The exception to raise as is.

        Returns:
            The right value.

        Raises:
            BaseException: error itself, if the either is Left.

        Example:
            ```python
            >>> from pyomonads import Left, Right
            >>> Right(3).get_or_raise(LookupError("no value"))
            3
            >>> Left("e").get_or_raise(LookupError("no value"))
            Traceback (most recent call last):
                ...
            LookupError: no value

            ```
        """
        if self.is_right():
            return self.value
        raise error


@dataclass(slots=True)
class Left[L, R](Either[L, R]):
    value: L

    def __str__(self) -> str:
        return f"Left({self.value})"

    def is_left(self) -> TypeIs[Left[L, R]]:  # type: ignore[misc]
        return True

    def is_right(self) -> TypeIs[Right[L, R]]:  # type: ignore[misc]
        return False


@dataclass(slots=True)
class Right[L, R](Either[L, R]):
    value: R

    def __str__(self) -> str:
        return f"Right({self.value})"

    def is_left(self) -> TypeIs[Left[L, R]]:  # type: ignore[misc]
        return False

    def is_right(self) -> TypeIs[Right[L, R]]:  # type: ignore[misc]
        return True


def either[L, R](left: L | None, right: R | None) -> Either[L, R]:
    """
    Builds an Either from two optional values, exactly one of which must be given.

    Args:
        left: The left value, or None.
        right: The right value, or None.

    Returns:
        Either[L, R]: Left(left) or Right(right).

    Raises:
        EitherError: If both values are given, or if neither is.

    Example:
        ```python
        >>> from pyomonads import either
        >>> either(5, None)
        Left(value=5)
        >>> either(None, "x")
        Right(value='x')
        >>> either(None, None)
        Traceback (most recent call last):
            ...
        pyomonads._monads._either.EitherError: Either requires left or right value to be defined.

        ```
    """
    if left is not None and right is not None:
        raise EitherError("Either can't have both values defined.")
    if left is not None:
        return Left(left)
    if right is not None:
        return Right(right)
    raise EitherError("Either requires left or right value to be defined.")
