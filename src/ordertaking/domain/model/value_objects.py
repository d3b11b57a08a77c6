"""Simple constrained value objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
Each one is built only through its ``create`` factory, which returns a
``Result`` instead of raising, so an invalid value can never exist.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ordertaking.domain.model import constrained_type
from ordertaking.domain.model.constrained_type import ConstrainedValue
from ordertaking.domain.model.errors import ConstraintViolation
from ordertaking.domain.model.result import Err, Ok, Result

US_STATE_CODES = frozenset(
    {
        "AK", "AL", "AR", "AZ", "CA", "CO", "CT", "DE", "FL", "GA",
        "HI", "IA", "ID", "IL", "IN", "KS", "KY", "LA", "MA", "MD",
        "ME", "MI", "MN", "MO", "MS", "MT", "NC", "ND", "NE", "NH",
        "NJ", "NM", "NV", "NY", "OH", "OK", "OR", "PA", "RI", "SC",
        "SD", "TN", "TX", "UT", "VA", "VT", "WA", "WI", "WV", "WY",
    }
)

EMAIL_ADDRESS_PATTERN = re.compile(r".+@.+")
ZIP_CODE_PATTERN = re.compile(r"\d{5}")
US_STATE_CODE_PATTERN = re.compile("(?:" + "|".join(sorted(US_STATE_CODES)) + ")")


@dataclass(frozen=True)
class String50(ConstrainedValue):
    """A non-empty string of at most 50 characters."""

    value: str

    MAX_LENGTH = 50

    @classmethod
    def create(cls, field_name: str, raw: str) -> Result[String50, ConstraintViolation]:
        return constrained_type.create_string(field_name, cls._wrap, cls.MAX_LENGTH, raw)

    @classmethod
    def create_option(
        cls, field_name: str, raw: str
    ) -> Result[Optional[String50], ConstraintViolation]:
        """Empty input means "not given" and yields ``Ok(None)``."""
        return constrained_type.create_string_option(
            field_name, cls._wrap, cls.MAX_LENGTH, raw
        )

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class EmailAddress(ConstrainedValue):
    """Loosely checked: something, an ``@``, then something."""

    value: str

    @classmethod
    def create(cls, field_name: str, raw: str) -> Result[EmailAddress, ConstraintViolation]:
        return constrained_type.create_like(field_name, cls._wrap, EMAIL_ADDRESS_PATTERN, raw)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ZipCode(ConstrainedValue):
    """Exactly five digits."""

    value: str

    @classmethod
    def create(cls, field_name: str, raw: str) -> Result[ZipCode, ConstraintViolation]:
        return constrained_type.create_like(field_name, cls._wrap, ZIP_CODE_PATTERN, raw)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class UsStateCode(ConstrainedValue):
    """One of the 50 USPS state abbreviations, upper case."""

    value: str

    @classmethod
    def create(cls, field_name: str, raw: str) -> Result[UsStateCode, ConstraintViolation]:
        return constrained_type.create_like(field_name, cls._wrap, US_STATE_CODE_PATTERN, raw)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class OrderId(ConstrainedValue):
    value: str

    @classmethod
    def create(cls, field_name: str, raw: str) -> Result[OrderId, ConstraintViolation]:
        return constrained_type.create_string(field_name, cls._wrap, 50, raw)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class OrderLineId(ConstrainedValue):
    value: str

    @classmethod
    def create(cls, field_name: str, raw: str) -> Result[OrderLineId, ConstraintViolation]:
        return constrained_type.create_string(field_name, cls._wrap, 50, raw)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class PromotionCode(ConstrainedValue):
    value: str

    @classmethod
    def create(cls, field_name: str, raw: str) -> Result[PromotionCode, ConstraintViolation]:
        return constrained_type.create_string(field_name, cls._wrap, 50, raw)

    def __str__(self) -> str:
        return self.value


class VipStatus(Enum):
    """Customer's VIP status. The member value is the display string."""

    NORMAL = "Normal"
    VIP = "VIP"

    @classmethod
    def create(cls, field_name: str, raw: str) -> Result[VipStatus, ConstraintViolation]:
        """Parse case-insensitively: ``"vip"``, ``"Vip"`` and ``"VIP"`` all work."""
        for status in cls:
            if raw.casefold() == status.value.casefold():
                return Ok(status)
        return Err(
            ConstraintViolation.unrecognized_value(
                field_name, raw, tuple(s.value for s in cls)
            )
        )

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class PdfAttachment:
    """A PDF document attached to an order acknowledgment."""

    name: str
    content: bytes

    def __repr__(self) -> str:
        return f"PdfAttachment(name={self.name!r}, size={len(self.content)})"
