"""A two-case tagged union for computations that may fail.

``Left`` holds an error value and ``Right`` holds a success value. Both are
immutable and compare by value. The module-level helpers mirror the methods
on the variants, with ``fold`` and ``map`` curried so they compose in a
pipeline::

    >>> to_text = fold(lambda err: f"err:{err}", lambda n: f"ok:{n}")
    >>> to_text(map(lambda n: n * 2)(right(5)))
    'ok:10'
    >>> to_text(map(lambda n: n * 2)(left("bad")))
    'err:bad'
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import ClassVar, Literal, Never, Protocol, TypeIs

from .exceptions import MissingBranchError


class _Either[_LT, _RT]:
    tag: ClassVar[Literal["Left", "Right"]]


@dataclass(frozen=True)
class Left[_LT](_Either[_LT, Never]):
    value: _LT

    tag: ClassVar[Literal["Left"]] = "Left"

    @property
    def is_left(self) -> Literal[True]:
        return True

    @property
    def is_right(self) -> Literal[False]:
        return False

    @property
    def left(self) -> _LT:
        return self.value

    @property
    def right(self) -> None:
        return None

    def fold[_T](
        self,
        on_left: Callable[[_LT], _T],
        on_right: Callable[[Never], _T],
    ) -> _T:
        return fold(on_left, on_right)(self)

    def map(self, f: Callable[[Never], object]) -> "Left[_LT]":
        _require_callable("map", f)
        return self


@dataclass(frozen=True)
class Right[_RT](_Either[Never, _RT]):
    value: _RT

    tag: ClassVar[Literal["Right"]] = "Right"

    @property
    def is_left(self) -> Literal[False]:
        return False

    @property
    def is_right(self) -> Literal[True]:
        return True

    @property
    def left(self) -> None:
        return None

    @property
    def right(self) -> _RT:
        return self.value

    def fold[_T](
        self,
        on_left: Callable[[Never], _T],
        on_right: Callable[[_RT], _T],
    ) -> _T:
        return fold(on_left, on_right)(self)

    def map[_RT2](self, f: Callable[[_RT], _RT2]) -> "Right[_RT2]":
        _require_callable("map", f)
        return Right(f(self.value))


type Either[_LT, _RT] = Left[_LT] | Right[_RT]


class Mapper[_RT, _RT2](Protocol):
    def __call__[_LT](self, e: Either[_LT, _RT], /) -> Either[_LT, _RT2]: ...


def _require_callable(name: str, f: object) -> None:
    if not callable(f):
        raise TypeError(f"{name}() requires a callable, got {f!r}")


def _not_an_either(e: object) -> TypeError:
    return TypeError(f"Expected Left or Right, got {type(e).__name__}")


def left[_LT](value: _LT) -> Left[_LT]:
    """Wrap ``value`` as a failure."""
    return Left(value)


def right[_RT](value: _RT) -> Right[_RT]:
    """Wrap ``value`` as a success."""
    return Right(value)


def is_left[_LT, _RT](e: Either[_LT, _RT]) -> TypeIs[Left[_LT]]:
    if not isinstance(e, (Left, Right)):
        raise _not_an_either(e)
    return e.tag == "Left"


def is_right[_LT, _RT](e: Either[_LT, _RT]) -> TypeIs[Right[_RT]]:
    if not isinstance(e, (Left, Right)):
        raise _not_an_either(e)
    return e.tag == "Right"


def fold[_LT, _RT, _T](
    on_left: Callable[[_LT], _T],
    on_right: Callable[[_RT], _T],
) -> Callable[[Either[_LT, _RT]], _T]:
    """
    Build a function which collapses an ``Either`` into a single value.

    ``on_left`` receives the payload of a ``Left`` and ``on_right`` the payload
    of a ``Right``. Only the matching handler is called. Both handlers are
    checked here, so a missing one fails before any value is folded.
    """
    if not callable(on_left):
        raise MissingBranchError("on_left", on_left)
    if not callable(on_right):
        raise MissingBranchError("on_right", on_right)

    def _fold(e: Either[_LT, _RT]) -> _T:
        match e:
            case Left(value):
                return on_left(value)
            case Right(value):
                return on_right(value)
            case _:
                raise _not_an_either(e)

    return _fold


def map[_RT, _RT2](f: Callable[[_RT], _RT2]) -> Mapper[_RT, _RT2]:
    """
    Build a function which applies ``f`` to the payload of a ``Right``.

    A ``Left`` is returned as-is (the same object) and ``f`` is never called,
    so once a chain fails every later ``map`` passes the failure through.
    Exceptions raised by ``f`` are not caught.
    """
    _require_callable("map", f)

    def _map[_LT](e: Either[_LT, _RT], /) -> Either[_LT, _RT2]:
        match e:
            case Right(value):
                return Right(f(value))
            case Left():
                return e
            case _:
                raise _not_an_either(e)

    return _map
