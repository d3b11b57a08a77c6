"""Application service: Validate Address use case.

Unlike customer validation, every field is checked and every failure is
reported together, so a form can highlight all bad fields at once.
"""

from __future__ import annotations

from ordertaking.application.dto import UnvalidatedAddress
from ordertaking.domain.model.compound_types import Address
from ordertaking.domain.model.errors import ConstraintViolation
from ordertaking.domain.model.result import Err, Ok, Result, collect
from ordertaking.domain.model.value_objects import String50, UsStateCode, ZipCode


class ValidateAddressHandler:

    def handle(
        self, address: UnvalidatedAddress
    ) -> Result[Address, tuple[ConstraintViolation, ...]]:
        checked = collect(
            [
                String50.create("AddressLine1", address.address_line1),
                String50.create_option("AddressLine2", address.address_line2),
                String50.create_option("AddressLine3", address.address_line3),
                String50.create_option("AddressLine4", address.address_line4),
                String50.create("City", address.city),
                ZipCode.create("ZipCode", address.zip_code),
                UsStateCode.create("State", address.state),
                String50.create("Country", address.country),
            ]
        )
        if isinstance(checked, Err):
            return checked

        line1, line2, line3, line4, city, zip_code, state, country = checked.value
        return Ok(
            Address(
                address_line1=line1,
                address_line2=line2,
                address_line3=line3,
                address_line4=line4,
                city=city,
                zip_code=zip_code,
                state=state,
                country=country,
            )
        )
