from __future__ import annotations
from typing import Any, Callable, TypeVar

from .either import Either, Left, Right
from .errors import require

T = TypeVar("T")
U = TypeVar("U")
L = TypeVar("L")
R = TypeVar("R")


def merge(either: Either[T, T]) -> T:
    """Return the held value when both sides share a type."""
    require(either, "either")
    if not isinstance(either, Either):
        raise TypeError(f"merge expects an Either, got {type(either).__name__}")
    return either.left_value() if either.is_left() else either.right_value()


def left_flatten() -> Callable[[Either[T, T]], Either[T, Any]]:
    def run(e: Either[T, T]) -> Either[T, Any]:
        return Left(merge(e))
    return run


def right_flatten() -> Callable[[Either[T, T]], Either[Any, T]]:
    def run(e: Either[T, T]) -> Either[Any, T]:
        return Right(merge(e))
    return run


def flatten_left(either: Either[Either[L, L], R]) -> Either[L, R]:
    return require(either, "either").flat_map_left(left_flatten())


def flatten_right(either: Either[L, Either[R, R]]) -> Either[L, R]:
    return require(either, "either").flat_map_right(right_flatten())


def flatten(either: Either[Either[L, L], Either[R, R]]) -> Either[L, R]:
    # Each side collapses onto itself: Left(Right(x)) -> Left(x).
    return require(either, "either").flat_map(left_flatten(), right_flatten())
