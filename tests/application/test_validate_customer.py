"""Tests for the ValidateCustomer use case (fail-fast)."""

from ordertaking.application.dto import UnvalidatedCustomerInfo
from ordertaking.application.validate_customer import ValidateCustomerHandler
from ordertaking.domain.model.errors import ErrorKind
from ordertaking.domain.model.result import Err
from ordertaking.domain.model.value_objects import VipStatus


def _customer(**overrides) -> UnvalidatedCustomerInfo:
    fields = {
        "first_name": "Ada",
        "last_name": "Lovelace",
        "email_address": "ada@example.com",
        "vip_status": "vip",
    }
    fields.update(overrides)
    return UnvalidatedCustomerInfo(**fields)


class TestValidateCustomerHappyPath:

    def test_builds_customer_info(self):
        info = ValidateCustomerHandler().handle(_customer()).unwrap()
        assert str(info.name) == "Ada Lovelace"
        assert info.email_address.value == "ada@example.com"
        assert info.vip_status is VipStatus.VIP


class TestValidateCustomerFailures:

    def test_bad_email(self):
        result = ValidateCustomerHandler().handle(_customer(email_address="ada"))
        assert isinstance(result, Err)
        assert result.error.field_name == "EmailAddress"
        assert result.error.kind == ErrorKind.PATTERN_MISMATCH

    def test_first_failure_wins(self):
        result = ValidateCustomerHandler().handle(
            _customer(first_name="", email_address="ada", vip_status="gold")
        )
        assert result.error.field_name == "FirstName"
        assert result.error.kind == ErrorKind.EMPTY_INPUT

    def test_unknown_vip_status(self):
        result = ValidateCustomerHandler().handle(_customer(vip_status="gold"))
        assert result.error.kind == ErrorKind.UNRECOGNIZED_VALUE

    def test_long_last_name(self):
        result = ValidateCustomerHandler().handle(_customer(last_name="x" * 51))
        assert result.error.field_name == "LastName"
        assert result.error.kind == ErrorKind.TOO_LONG
