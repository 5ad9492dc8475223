"""Chaining helpers built on top of :mod:`thelabeither.result`.

These extend the core combinators without changing them: ``flat_map`` binds a
step that may itself fail, ``map_left`` rewrites an error, and ``compose`` /
``pipe`` string curried steps together left to right.
"""

from collections.abc import Callable
from functools import reduce
from typing import Any, Protocol
import logging

from .result import Either, Left, Right, _not_an_either, _require_callable

logger = logging.getLogger(__name__)


class LeftMapper[_LT, _LT2](Protocol):
    def __call__[_RT](self, e: Either[_LT, _RT], /) -> Either[_LT2, _RT]: ...


def _stage_name(stage: Callable[..., Any]) -> str:
    return getattr(stage, "__qualname__", None) or repr(stage)


def flat_map[_LT, _RT, _RT2](
    f: Callable[[_RT], Either[_LT, _RT2]],
) -> Callable[[Either[_LT, _RT]], Either[_LT, _RT2]]:
    """
    Build a function which feeds the payload of a ``Right`` into ``f``.

    ``f`` returns an ``Either`` of its own, which becomes the result. A
    ``Left`` is passed through untouched without calling ``f``.
    """
    _require_callable("flat_map", f)

    def _flat_map(e: Either[_LT, _RT]) -> Either[_LT, _RT2]:
        match e:
            case Right(value):
                result = f(value)
                if not isinstance(result, (Left, Right)):
                    raise TypeError(
                        f"flat_map() step {_stage_name(f)} must return Left or "
                        f"Right, got {type(result).__name__}"
                    )
                return result
            case Left():
                return e
            case _:
                raise _not_an_either(e)

    return _flat_map


def map_left[_LT, _LT2](f: Callable[[_LT], _LT2]) -> LeftMapper[_LT, _LT2]:
    """The mirror image of ``map``: transform a ``Left``, keep a ``Right``."""
    _require_callable("map_left", f)

    def _map_left[_R](e: Either[_LT, _R], /) -> Either[_LT2, _R]:
        match e:
            case Left(value):
                return Left(f(value))
            case Right():
                return e
            case _:
                raise _not_an_either(e)

    return _map_left


def compose(*fns: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """
    Compose ``fns`` left to right, so ``compose(f, g)(x) == g(f(x))``.

    With no arguments this is the identity function.
    """
    for fn in fns:
        _require_callable("compose", fn)

    def _composed(value: Any) -> Any:
        return reduce(lambda acc, fn: fn(acc), fns, value)

    return _composed


def pipe(value: Any, *fns: Callable[[Any], Any]) -> Any:
    """Apply ``fns`` to ``value`` in order and return the final result."""
    result = value
    for idx, fn in enumerate(fns, start=1):
        was_left = isinstance(result, Left)
        result = fn(result)
        if not was_left and isinstance(result, Left):
            logger.debug(
                "Pipeline short-circuited at stage %d (%s) with %r",
                idx,
                _stage_name(fn),
                result,
            )
    return result
