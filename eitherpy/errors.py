from __future__ import annotations
from typing import Optional, TypeVar

T = TypeVar("T")


class EitherError(Exception):
    pass


class NotPresent(EitherError, LookupError):
    """Raised when reading a side that the value does not hold."""


class NullArgument(EitherError, ValueError):
    """Raised when a required callback or Either argument is None."""


def require(value: Optional[T], name: str = "Argument") -> T:
    if value is None:
        raise NullArgument(f"{name} is required, None supplied")
    return value
