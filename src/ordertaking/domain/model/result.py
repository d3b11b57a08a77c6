"""Explicit success-or-failure return values.

Every factory in the domain returns a ``Result``: either ``Ok`` holding
the constructed value or ``Err`` holding the reason it could not be
built. Callers decide what to do with a failure; nothing is raised or
logged on their behalf.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Iterable, TypeVar, Union

from ordertaking.domain.exceptions import ValidationError

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True

    def map(self, fn: Callable[[T], U]) -> Ok[U]:
        return Ok(fn(self.value))

    def bind(self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Chain another fallible step; the first failure short-circuits."""
        return fn(self.value)

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value


@dataclass(frozen=True)
class Err(Generic[E]):
    error: E

    @property
    def ok(self) -> bool:
        return False

    def map(self, fn: Callable) -> Err[E]:
        return self

    def bind(self, fn: Callable) -> Err[E]:
        return self

    def unwrap(self):
        """Raise instead of returning a value.

        Only for call sites that have already proven validity some other way.
        """
        raise ValidationError(str(self.error))

    def unwrap_or(self, default: T) -> T:
        return default


Result = Union[Ok[T], Err[E]]


def collect(results: Iterable[Result[T, E]]) -> Result[list[T], tuple[E, ...]]:
    """Gather a batch of results.

    Returns ``Ok`` with every value when all succeeded, otherwise ``Err``
    with every error in input order.
    """
    values: list[T] = []
    errors: list[E] = []
    for result in results:
        if isinstance(result, Ok):
            values.append(result.value)
        else:
            errors.append(result.error)
    if errors:
        return Err(tuple(errors))
    return Ok(values)
