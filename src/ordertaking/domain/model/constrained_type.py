"""Reusable constructors for constrained types.

Each ``create_*`` function checks a raw primitive against one rule and,
if it passes, builds the target type with the constructor it was given.
They know nothing about the concrete types that use them.

``ConstrainedValue`` is the base for those concrete types. Its
``__init__`` only accepts the module-private seal that ``_wrap`` supplies,
so the one way to obtain an instance is through a type's factory.
"""

from __future__ import annotations

import re
from dataclasses import KW_ONLY, InitVar, dataclass
from decimal import Decimal, InvalidOperation
from typing import Callable, Optional, TypeVar

from ordertaking.domain.exceptions import ValidationError
from ordertaking.domain.model.errors import ConstraintViolation
from ordertaking.domain.model.result import Err, Ok, Result

S = TypeVar("S")

_SEAL = object()


@dataclass(frozen=True)
class ConstrainedValue:
    """Opaque wrapper whose instances are valid by construction."""

    _: KW_ONLY
    seal: InitVar[object] = None

    def __post_init__(self, seal: object) -> None:
        if seal is not _SEAL:
            name = type(self).__name__
            raise TypeError(f"{name} can only be built through {name}.create()")

    @classmethod
    def _wrap(cls, value):
        return cls(value, seal=_SEAL)


# ---------------------------------------------------------------------------
# Input coercion
# ---------------------------------------------------------------------------


def to_decimal(raw: str | float | int | Decimal) -> Decimal:
    """Coerce a raw number to Decimal via its string form.

    Going through ``str`` keeps ``2.9`` as ``Decimal("2.9")`` rather than
    the binary expansion of the float.
    """
    if isinstance(raw, Decimal):
        value = raw
    else:
        try:
            value = Decimal(str(raw))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Not a number: {raw!r}") from exc
    if value.is_nan():
        raise ValidationError(f"Not a number: {raw!r}")
    return value


# ---------------------------------------------------------------------------
# Constructors
# ---------------------------------------------------------------------------


def create_string(
    field_name: str, ctor: Callable[[str], S], max_len: int, raw: str
) -> Result[S, ConstraintViolation]:
    """Fail if *raw* is empty or longer than *max_len*."""
    if not raw:
        return Err(ConstraintViolation.empty_input(field_name))
    if len(raw) > max_len:
        return Err(ConstraintViolation.too_long(field_name, max_len))
    return Ok(ctor(raw))


def create_string_option(
    field_name: str, ctor: Callable[[str], S], max_len: int, raw: str
) -> Result[Optional[S], ConstraintViolation]:
    """Like ``create_string`` but an empty *raw* is a valid ``None``."""
    if not raw:
        return Ok(None)
    if len(raw) > max_len:
        return Err(ConstraintViolation.too_long(field_name, max_len))
    return Ok(ctor(raw))


def create_int(
    field_name: str, ctor: Callable[[int], S], min_val: int, max_val: int, raw: int
) -> Result[S, ConstraintViolation]:
    """Fail if *raw* is outside ``[min_val, max_val]``.

    *raw* must be a real ``int``; floats and bools raise ValidationError.
    """
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise ValidationError(
            f"{field_name} must be an integer, got {type(raw).__name__}"
        )
    if raw < min_val:
        return Err(ConstraintViolation.below_min(field_name, min_val))
    if raw > max_val:
        return Err(ConstraintViolation.above_max(field_name, max_val))
    return Ok(ctor(raw))


def create_decimal(
    field_name: str,
    ctor: Callable[[Decimal], S],
    min_val: Decimal,
    max_val: Decimal,
    raw: Decimal,
) -> Result[S, ConstraintViolation]:
    """Decimal counterpart of ``create_int``. Both bounds are inclusive."""
    if raw < min_val:
        return Err(ConstraintViolation.below_min(field_name, min_val))
    if raw > max_val:
        return Err(ConstraintViolation.above_max(field_name, max_val))
    return Ok(ctor(raw))


def create_like(
    field_name: str, ctor: Callable[[str], S], pattern: re.Pattern[str], raw: str
) -> Result[S, ConstraintViolation]:
    """Fail if *raw* is empty or does not match *pattern* in full."""
    if not raw:
        return Err(ConstraintViolation.empty_input(field_name))
    if pattern.fullmatch(raw) is None:
        return Err(ConstraintViolation.pattern_mismatch(field_name, raw, pattern.pattern))
    return Ok(ctor(raw))
