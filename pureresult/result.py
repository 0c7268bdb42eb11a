"""The two-case outcome of an operation.

An `Outcome` is either `Ok(value)` or `Failure(error_descriptor)`. The case is
carried by the class, so a success holding `None` is still a success. Both
cases are frozen dataclasses: transformations build new outcomes, dispatch
methods return the very same instance so calls can be chained.

    >>> Outcome.of_value("value").map_value(str.upper)
    Ok(value='VALUE')
"""
from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from .errors import require


V = TypeVar("V")
D = TypeVar("D")
W = TypeVar("W")
E = TypeVar("E")


def identity(x):
    return x


class Outcome(Generic[V, D]):
    value: V | None
    error_descriptor: D | None

    def __new__(cls, *args, **kwargs):
        if not issubclass(cls, (Ok, Failure)):
            raise TypeError(
                f"`{cls.__name__}` is not an outcome case, construct `Ok` or `Failure`."
            )
        return super().__new__(cls)

    @staticmethod
    def of_value(value: V) -> Outcome[V, Any]:
        return Ok(value)

    @staticmethod
    def of_error(error_descriptor: D) -> Outcome[Any, D]:
        return Failure(error_descriptor)

    def is_success(self) -> bool:
        return isinstance(self, Ok)

    def is_failure(self) -> bool:
        return not self.is_success()

    def __bool__(self):
        return self.is_success()

    def map(
        self, value_mapper: Callable[[V], W], error_mapper: Callable[[D], E]
    ) -> Outcome[W, E]:
        """Apply exactly one of the mappers, chosen by case, and wrap the
        result in a new outcome of the same case. Both mappers must be given,
        whichever branch runs."""
        require("map", value_mapper=value_mapper, error_mapper=error_mapper)
        match self:
            case Ok(value):
                return Ok(value_mapper(value))
            case _:
                return Failure(error_mapper(self.error_descriptor))

    def map_value(self, value_mapper: Callable[[V], W]) -> Outcome[W, D]:
        require("map_value", value_mapper=value_mapper)
        return self.map(value_mapper, identity)

    def map_error_descriptor(self, error_mapper: Callable[[D], E]) -> Outcome[V, E]:
        require("map_error_descriptor", error_mapper=error_mapper)
        return self.map(identity, error_mapper)

    def call(
        self, on_success: Callable[[V], Any], on_error: Callable[[D], Any]
    ) -> Outcome[V, D]:
        """Pass the payload to `on_success` or `on_error`, then return `self`."""
        require("call", on_success=on_success, on_error=on_error)
        if self.is_success():
            return self.call_on_success(on_success)
        return self.call_on_error(on_error)

    def call_on_success(self, on_success: Callable[[V], Any]) -> Outcome[V, D]:
        require("call_on_success", on_success=on_success)
        if self.is_success():
            on_success(self.value)  # type: ignore[arg-type]
        return self

    def call_on_error(self, on_error: Callable[[D], Any]) -> Outcome[V, D]:
        require("call_on_error", on_error=on_error)
        if self.is_failure():
            on_error(self.error_descriptor)  # type: ignore[arg-type]
        return self


@dataclass(frozen=True)
class Ok(Outcome[V, Any]):
    value: V

    @property
    def error_descriptor(self) -> None:
        return None


@dataclass(frozen=True)
class Failure(Outcome[Any, D]):
    error_descriptor: D

    @property
    def value(self) -> None:
        return None


of_value = Outcome.of_value
of_error = Outcome.of_error
