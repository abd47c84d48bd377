from ._deprecation import deprecated

__all__ = ["deprecated"]
