from __future__ import annotations

from collections.abc import Callable
import functools
from typing import Any, TypeVar

from .errors import ConflictingArgumentsError
from .logging import logger
from .result import Outcome, Ok, Failure


P = TypeVar("P")
V = TypeVar("V")
D = TypeVar("D")

Operation = Callable[[P], V]
"""A unary operation that either returns or raises."""

Trap = bool | type[Exception] | tuple[type[Exception], ...] | None

log = logger()


class _Nothing:
    def __repr__(self):
        return "NOTHING"


NOTHING: Any = _Nothing()


def _trapped_exceptions(trap: Trap, error_if) -> tuple[type[Exception], ...]:
    match trap:
        case None:
            return () if error_if is not None else (Exception,)
        case True:
            return (Exception,)
        case False:
            return ()
        case type():
            return (trap,)
        case _:
            return tuple(trap)


def invoke(
    operation: Operation[Any, V] | Callable[[], V],
    parameter: Any = NOTHING,
    *,
    parameter_from: Callable[[], Any] | None = None,
    error_if: Callable[[V], bool] | None = None,
    to_error: Callable[[V], D] | None = None,
    trap: Trap = None,
) -> Outcome[V, Any]:
    """Call `operation` once and classify what happens into an `Outcome`.

    The operation receives `parameter`, or the result of `parameter_from()`
    when a producer is given, or nothing at all. The producer is called once,
    before the operation, and outside of any trapping.

    Without `error_if`, a normal return is a success and a raised `Exception`
    becomes a failure carrying the exception itself. With `error_if`, the
    return value is tested: `True` means failure, with `to_error(value)` (or
    the raw value) as the error descriptor, and anything the operation raises
    propagates. `trap` overrides which exceptions are captured: `True` for any
    `Exception`, an exception class or tuple of classes, or `False` for none.
    """
    if parameter is not NOTHING and parameter_from is not None:
        raise ConflictingArgumentsError(
            "Give either `parameter` or `parameter_from`, not both."
        )
    if to_error is not None and error_if is None:
        raise ConflictingArgumentsError(
            "`to_error` is only used together with `error_if`."
        )

    if parameter_from is not None:
        parameter = parameter_from()
    args = () if parameter is NOTHING else (parameter,)

    trapped = _trapped_exceptions(trap, error_if)
    try:
        value = operation(*args)
    except trapped as e:
        log.debug(f"`{_name(operation)}` raised {e!r}, captured as failure")
        return Failure(e)

    if error_if is not None and error_if(value):
        return Failure(to_error(value) if to_error is not None else value)
    return Ok(value)


def outcome_of(
    error_if: Callable[[Any], bool] | None = None,
    to_error: Callable[[Any], Any] | None = None,
    trap: Trap = None,
):
    """Decorator: make every call of a function return an `Outcome`,
    classified with the same rules as `invoke`."""
    def decorator(f: Callable[..., V]) -> Callable[..., Outcome[V, Any]]:
        @functools.wraps(f)
        def run(*args, **kwargs) -> Outcome[V, Any]:
            return invoke(
                functools.partial(f, *args, **kwargs),
                error_if=error_if, to_error=to_error, trap=trap,
            )
        return run

    return decorator


def _name(operation) -> str:
    if isinstance(operation, functools.partial):
        operation = operation.func
    return getattr(operation, "__qualname__", repr(operation))
