from ._either import Either, EitherError, Left, Right, either
from ._maybe import NOTHING, Just, Maybe, Nothing, maybe

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
