from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from .errors import NotPresent, require
from .option import NONE, Option, Some

L = TypeVar("L")
R = TypeVar("R")
L2 = TypeVar("L2")
R2 = TypeVar("R2")
T = TypeVar("T")

_MISSING: Any = object()


class Either(Generic[L, R]):
    """A value holding exactly one of a left value or a right value.

    Neither side implies failure or success. Instances are immutable; every
    combinator returns a new Either (or an equal one) and never mutates the
    receiver. Callback arguments are all validated up front, so passing
    ``None`` for any of them raises ``NullArgument`` whichever side is held.
    """

    @staticmethod
    def of_left(value: L) -> "Either[L, Any]":
        return Left(value)

    @staticmethod
    def of_right(value: R) -> "Either[Any, R]":
        return Right(value)

    def left_value(self) -> L: raise NotImplementedError
    def right_value(self) -> R: raise NotImplementedError
    def is_left(self) -> bool: raise NotImplementedError
    def is_right(self) -> bool: return not self.is_left()

    def left_or_else(self, default: L) -> L:
        return self.left_value() if self.is_left() else default

    def right_or_else(self, default: R) -> R:
        return self.right_value() if self.is_right() else default

    # Variant check only: Left(None).optional_left() is Some(None).
    def optional_left(self) -> Option[L]:
        return Some(self.left_value()) if self.is_left() else NONE  # type: ignore[return-value]

    def optional_right(self) -> Option[R]:
        return Some(self.right_value()) if self.is_right() else NONE  # type: ignore[return-value]

    def value(self) -> Any:
        return self.left_value() if self.is_left() else self.right_value()

    def match(self, left: Callable[[L], bool], right: Callable[[R], bool]) -> bool:
        require(left, "left"); require(right, "right")
        return bool(left(self.left_value()) if self.is_left() else right(self.right_value()))

    def match_left(self, left: Callable[[L], bool]) -> bool:
        require(left, "left")
        return self.is_left() and bool(left(self.left_value()))

    def match_right(self, right: Callable[[R], bool]) -> bool:
        require(right, "right")
        return self.is_right() and bool(right(self.right_value()))

    def filter_left(self, left: Callable[[L], bool]) -> Option[L]:
        require(left, "left")
        if self.is_left() and left(self.left_value()):
            return Some(self.left_value())
        return NONE  # type: ignore[return-value]

    def filter_right(self, right: Callable[[R], bool]) -> Option[R]:
        require(right, "right")
        if self.is_right() and right(self.right_value()):
            return Some(self.right_value())
        return NONE  # type: ignore[return-value]

    def swap(self) -> "Either[R, L]":
        return Right(self.left_value()) if self.is_left() else Left(self.right_value())

    def fold(self, left: Callable[..., T], right: Callable[[R], T] = _MISSING) -> T:
        """Reduce to a single value.

        ``fold(left_fn, right_fn)`` applies whichever function matches the
        held side. ``fold(fn)`` hands the whole Either to ``fn``.
        """
        if right is _MISSING:
            return require(left, "function")(self)
        require(left, "left"); require(right, "right")
        return left(self.left_value()) if self.is_left() else right(self.right_value())

    def fold_left(self, left: Callable[[L], R]) -> R:
        require(left, "left")
        return self.right_value() if self.is_right() else left(self.left_value())

    def fold_right(self, right: Callable[[R], L]) -> L:
        require(right, "right")
        return self.left_value() if self.is_left() else right(self.right_value())

    def map(self, left: Callable[[L], L2], right: Callable[[R], R2]) -> "Either[L2, R2]":
        require(left, "left"); require(right, "right")
        if self.is_left():
            return Left(left(self.left_value()))
        return Right(right(self.right_value()))

    def map_left(self, left: Callable[[L], L2]) -> "Either[L2, R]":
        require(left, "left")
        if self.is_left():
            return Left(left(self.left_value()))
        return Right(self.right_value())

    def map_right(self, right: Callable[[R], R2]) -> "Either[L, R2]":
        require(right, "right")
        if self.is_right():
            return Right(right(self.right_value()))
        return Left(self.left_value())

    def flat_map(self, left: Callable[[L], "Either[L2, R2]"], right: Callable[[R], "Either[L2, R2]"]) -> "Either[L2, R2]":
        require(left, "left"); require(right, "right")
        return left(self.left_value()) if self.is_left() else right(self.right_value())

    def flat_map_left(self, left: Callable[[L], "Either[L2, R]"]) -> "Either[L2, R]":
        require(left, "left")
        if self.is_left():
            return left(self.left_value())
        return Right(self.right_value())

    def flat_map_right(self, right: Callable[[R], "Either[L, R2]"]) -> "Either[L, R2]":
        require(right, "right")
        if self.is_right():
            return right(self.right_value())
        return Left(self.left_value())

    def peek(self, left: Callable[[L], Any], right: Callable[[R], Any]) -> "Either[L, R]":
        require(left, "left"); require(right, "right")
        if self.is_left():
            v = self.left_value(); left(v)
            return Left(v)
        v = self.right_value(); right(v)
        return Right(v)

    def peek_left(self, left: Callable[[L], Any]) -> "Either[L, R]":
        require(left, "left")
        if self.is_left():
            v = self.left_value(); left(v)
            return Left(v)
        return Right(self.right_value())

    def peek_right(self, right: Callable[[R], Any]) -> "Either[L, R]":
        require(right, "right")
        if self.is_right():
            v = self.right_value(); right(v)
            return Right(v)
        return Left(self.left_value())

    def for_each(self, left: Callable[[L], Any], right: Callable[[R], Any]) -> None:
        require(left, "left"); require(right, "right")
        if self.is_left(): left(self.left_value())
        else: right(self.right_value())

    def for_each_left(self, left: Callable[[L], Any]) -> None:
        require(left, "left")
        if self.is_left(): left(self.left_value())

    def for_each_right(self, right: Callable[[R], Any]) -> None:
        require(right, "right")
        if self.is_right(): right(self.right_value())


@dataclass(frozen=True, repr=False)
class Left(Either[L, R]):
    left: L

    def left_value(self) -> L: return self.left
    def right_value(self) -> R: raise NotPresent("Not a Right")
    def is_left(self) -> bool: return True

    def __hash__(self) -> int: return hash(("Left", self.left))
    def __repr__(self) -> str: return f"Left[{self.left!r}]"


@dataclass(frozen=True, repr=False)
class Right(Either[L, R]):
    right: R

    def left_value(self) -> L: raise NotPresent("Not a Left")
    def right_value(self) -> R: return self.right
    def is_left(self) -> bool: return False

    def __hash__(self) -> int: return hash(("Right", self.right))
    def __repr__(self) -> str: return f"Right[{self.right!r}]"
