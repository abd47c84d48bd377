"""Tests for the Either container."""

import pytest

import pyomonads as pm


def _is_valid(value: pm.Either[object, object]) -> bool:
    return value.is_left() != value.is_right()


class TestConstruction:
    """Test the raw factory and the named constructors."""

    def test_both_absent_raises(self) -> None:
        """Test either(None, None) is rejected."""
        with pytest.raises(
            pm.EitherError, match="Either requires left or right value to be defined."
        ):
            pm.either(None, None)

    def test_both_present_raises(self) -> None:
        """Test either(5, "x") is rejected."""
        with pytest.raises(pm.EitherError, match="Either can't have both values defined."):
            pm.either(5, "x")

    def test_either_error_is_value_error(self) -> None:
        """Test EitherError can be caught as ValueError."""
        with pytest.raises(ValueError):  # noqa: PT011
            pm.either(None, None)

    def test_left_from_factory(self) -> None:
        """Test either(5, None) gives a Left."""
        result = pm.either(5, None)
        assert result.is_left()
        assert result == pm.Left(5)

    def test_right_from_factory(self) -> None:
        """Test either(None, "x") gives a Right."""
        result = pm.either(None, "x")
        assert result.is_right()
        assert result == pm.Right("x")

    def test_falsy_side_counts_as_given(self) -> None:
        """Test falsy values are not treated as missing."""
        assert pm.either(0, None) == pm.Left(0)
        assert pm.either(None, "") == pm.Right("")
        with pytest.raises(pm.EitherError):
            pm.either(False, 0)

    def test_named_constructors(self) -> None:
        """Test Left and Right render as expected."""
        assert str(pm.Right[str, int](42)) == "Right(42)"
        assert str(pm.Left[str, int]("Error")) == "Left(Error)"

    def test_left_and_right_never_equal(self) -> None:
        """Test a Left and a Right with the same value differ."""
        assert pm.Left(1) != pm.Right(1)


class TestTransformations:
    """Test map, map_left and flat_map."""

    def test_map_right(self) -> None:
        """Test map applies to a Right."""
        assert str(pm.Right(42).map(lambda x: x + 1)) == "Right(43)"

    def test_map_left_passthrough(self) -> None:
        """Test map leaves a Left untouched and never calls the function."""
        calls: list[int] = []
        mapped = pm.Left[str, int]("e").map(calls.append)
        assert str(mapped) == "Left(e)"
        assert calls == []

    def test_map_left_on_left(self) -> None:
        """Test map_left applies to a Left."""
        assert str(pm.Left("e").map_left(str.upper)) == "Left(E)"
        mapped = pm.Left[str, int]("Error").map_left(lambda v: f"{v} occurred")
        assert str(mapped) == "Left(Error occurred)"

    def test_map_left_on_right(self) -> None:
        """Test map_left leaves a Right untouched."""
        assert str(pm.Right[str, int](42).map_left(str.upper)) == "Right(42)"

    def test_flat_map_right(self) -> None:
        """Test flat_map returns the function result as is."""
        result = pm.Right[str, int](42).flat_map(lambda v: pm.Right(v + 1))
        assert str(result) == "Right(43)"

    def test_flat_map_can_switch_side(self) -> None:
        """Test flat_map on a Right may produce a Left."""
        result = pm.Right[str, int](42).flat_map(lambda _: pm.Left("too big"))
        assert result.is_left()
        assert str(result) == "Left(too big)"

    def test_flat_map_left(self) -> None:
        """Test flat_map on a Left keeps the left value."""
        result = pm.Left[str, int]("Error").flat_map(lambda v: pm.Right(v + 1))
        assert str(result) == "Left(Error)"

    def test_transformations_return_new_instances(self) -> None:
        """Test no operation mutates its receiver."""
        original = pm.Right[str, int](1)
        mapped = original.map(lambda x: x + 1)
        assert mapped is not original
        assert original == pm.Right(1)

    def test_exactly_one_side_after_every_transformation(self) -> None:
        """Test is_left/is_right stay mutually exclusive."""
        values: list[pm.Either[object, object]] = [
            pm.Left("e"),
            pm.Right(1),
            pm.either(None, 2),
            pm.either("x", None),
        ]
        for value in values:
            assert _is_valid(value)
            assert _is_valid(value.map(str))
            assert _is_valid(value.map_left(str))
            assert _is_valid(value.flat_map(lambda v: pm.Left(v)))
            assert _is_valid(value.flat_map(lambda v: pm.Right(v)))

    def test_callback_exception_propagates(self) -> None:
        """Test errors raised by callbacks are not caught."""

        error = KeyError("boom")

        def boom(_: object) -> object:
            raise error

        with pytest.raises(KeyError) as exc_info:
            pm.Right(1).map(boom)
        assert exc_info.value is error
        with pytest.raises(KeyError) as exc_info:
            pm.Left(1).map_left(boom)
        assert exc_info.value is error

    def test_flat_map_exception_propagates(self) -> None:
        """Test errors raised by the flat_map function reach the caller unchanged."""
        error = ValueError("bad input")

        def boom(_: int) -> pm.Either[str, int]:
            raise error

        with pytest.raises(ValueError) as exc_info:  # noqa: PT011
            pm.Right[str, int](1).flat_map(boom)
        assert exc_info.value is error


class TestFold:
    """Test fold only ever calls one branch."""

    def test_fold_right(self) -> None:
        """Test fold on a Right calls on_right."""
        calls: list[str] = []

        def on_left(v: str) -> str:
            calls.append("left")
            return "L"

        def on_right(v: int) -> str:
            calls.append("right")
            return f"R:{v}"

        assert pm.Right[str, int](42).fold(on_left, on_right) == "R:42"
        assert calls == ["right"]

    def test_fold_left(self) -> None:
        """Test fold on a Left calls on_left."""
        calls: list[str] = []

        def on_left(v: str) -> str:
            calls.append("left")
            return f"Error: {v}"

        def on_right(v: int) -> str:
            calls.append("right")
            return f"Value: {v}"

        assert pm.Left[str, int]("Error").fold(on_left, on_right) == "Error: Error"
        assert calls == ["left"]

    def test_fold_branch_exception_propagates(self) -> None:
        """Test errors raised by either branch reach the caller unchanged."""
        left_error = RuntimeError("left branch")
        right_error = ArithmeticError("right branch")

        def on_left(_: str) -> str:
            raise left_error

        def on_right(_: int) -> str:
            raise right_error

        with pytest.raises(RuntimeError) as left_info:
            pm.Left[str, int]("e").fold(on_left, on_right)
        assert left_info.value is left_error
        with pytest.raises(ArithmeticError) as right_info:
            pm.Right[str, int](1).fold(on_left, on_right)
        assert right_info.value is right_error


class TestExtraction:
    """Test the right-side accessors."""

    def test_get_or_else(self) -> None:
        """Test get_or_else on both sides."""
        assert pm.Right[str, int](42).get_or_else(100) == 42
        assert pm.Left[str, int]("Error").get_or_else(100) == 100

    def test_get_or_else_get(self) -> None:
        """Test the supplier only runs on a Left."""
        calls: list[None] = []

        def supplier() -> int:
            calls.append(None)
            return 7

        assert pm.Right[str, int](1).get_or_else_get(supplier) == 1
        assert calls == []
        assert pm.Left[str, int]("e").get_or_else_get(supplier) == 7
        assert len(calls) == 1

    def test_get_or_else_get_supplier_exception_propagates(self) -> None:
        """Test errors raised by the supplier reach the caller unchanged."""
        error = LookupError("no fallback")

        def supplier() -> int:
            raise error

        with pytest.raises(LookupError) as exc_info:
            pm.Left[str, int]("e").get_or_else_get(supplier)
        assert exc_info.value is error

    def test_get_or_raise(self) -> None:
        """Test get_or_raise returns the right value or raises the given instance."""
        error = RuntimeError("no value")
        assert pm.Right[str, int](3).get_or_raise(error) == 3
        with pytest.raises(RuntimeError) as exc_info:
            pm.Left[str, int]("e").get_or_raise(error)
        assert exc_info.value is error
