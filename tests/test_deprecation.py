"""Tests for the deprecated method aliases."""

import pytest

import pyomonads as pm


def test_is_just_warns() -> None:
    """Test is_just still answers but warns."""
    with pytest.warns(DeprecationWarning, match="use `is_present` instead"):
        assert pm.Maybe.just(1).is_just() is True
    with pytest.warns(DeprecationWarning):
        assert pm.NOTHING.is_just() is False


def test_or_else_warns() -> None:
    """Test or_else behaves like get_or_else but warns."""
    with pytest.warns(DeprecationWarning, match="use `get_or_else` instead"):
        assert pm.Right[str, int](42).or_else(100) == 42
    with pytest.warns(DeprecationWarning):
        assert pm.Left[str, int]("Error").or_else(100) == 100
