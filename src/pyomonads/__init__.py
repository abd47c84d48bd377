from ._monads import (
    NOTHING,
    Either,
    EitherError,
    Just,
    Left,
    Maybe,
    Nothing,
    Right,
    either,
    maybe,
)

__all__ = [
    "NOTHING",
    "Either",
    "EitherError",
    "Just",
    "Left",
    "Maybe",
    "Nothing",
    "Right",
    "either",
    "maybe",
]
