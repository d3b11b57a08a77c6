"""Application service: Validate Customer use case.

Turns raw customer input into a ``CustomerInfo``. Fails fast: the first
field that does not validate is the one reported.
"""

from __future__ import annotations

from ordertaking.application.dto import UnvalidatedCustomerInfo
from ordertaking.domain.model.compound_types import CustomerInfo, PersonalName
from ordertaking.domain.model.errors import ConstraintViolation
from ordertaking.domain.model.result import Err, Ok, Result
from ordertaking.domain.model.value_objects import EmailAddress, String50, VipStatus


class ValidateCustomerHandler:

    def handle(
        self, customer: UnvalidatedCustomerInfo
    ) -> Result[CustomerInfo, ConstraintViolation]:
        first_name = String50.create("FirstName", customer.first_name)
        if isinstance(first_name, Err):
            return first_name

        last_name = String50.create("LastName", customer.last_name)
        if isinstance(last_name, Err):
            return last_name

        email = EmailAddress.create("EmailAddress", customer.email_address)
        if isinstance(email, Err):
            return email

        vip_status = VipStatus.create("VipStatus", customer.vip_status)
        if isinstance(vip_status, Err):
            return vip_status

        return Ok(
            CustomerInfo(
                name=PersonalName(first_name.value, last_name.value),
                email_address=email.value,
                vip_status=vip_status.value,
            )
        )
