"""Compound types built from already-validated value objects.

They perform no validation of their own: holding only constrained
fields is what makes them valid.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ordertaking.domain.model.value_objects import (
    EmailAddress,
    String50,
    UsStateCode,
    VipStatus,
    ZipCode,
)


@dataclass(frozen=True)
class PersonalName:
    first_name: String50
    last_name: String50

    def __str__(self) -> str:
        return f"{self.first_name} {self.last_name}"


@dataclass(frozen=True)
class CustomerInfo:
    name: PersonalName
    email_address: EmailAddress
    vip_status: VipStatus


@dataclass(frozen=True)
class Address:
    """A US postal address. Lines 2-4 are absent when not given."""

    address_line1: String50
    address_line2: Optional[String50]
    address_line3: Optional[String50]
    address_line4: Optional[String50]
    city: String50
    zip_code: ZipCode
    state: UsStateCode
    country: String50

    @property
    def lines(self) -> list[String50]:
        """The address lines that are present, in order."""
        candidates = [
            self.address_line1,
            self.address_line2,
            self.address_line3,
            self.address_line4,
        ]
        return [line for line in candidates if line is not None]
