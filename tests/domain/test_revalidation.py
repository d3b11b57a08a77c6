"""Re-validating the raw value inside any constructed value gives it back unchanged."""

import pytest

from ordertaking.domain.model.money import BillingAmount, Price
from ordertaking.domain.model.product_code import GizmoCode, ProductCode, WidgetCode
from ordertaking.domain.model.quantity import KilogramQuantity, OrderQuantity, UnitQuantity
from ordertaking.domain.model.value_objects import (
    EmailAddress,
    OrderId,
    OrderLineId,
    String50,
    UsStateCode,
    VipStatus,
    ZipCode,
)

CASES = [
    (String50.create, "Alice"),
    (EmailAddress.create, "alice@example.com"),
    (ZipCode.create, "90210"),
    (UsStateCode.create, "CA"),
    (OrderId.create, "ORD-42"),
    (OrderLineId.create, "LINE-1"),
    (WidgetCode.create, "W1234"),
    (GizmoCode.create, "G123"),
    (ProductCode.create, "W1234"),
    (ProductCode.create, "G123"),
    (UnitQuantity.create, 7),
    (KilogramQuantity.create, "2.35"),
    (VipStatus.create, "vip"),
]


@pytest.mark.parametrize("factory, raw", CASES)
def test_revalidating_the_unwrapped_value_is_idempotent(factory, raw):
    first = factory("Field", raw).unwrap()
    second = factory("Field", first.value).unwrap()
    assert second == first


@pytest.mark.parametrize("factory", [Price.create, BillingAmount.create])
def test_money_revalidation_is_idempotent(factory):
    first = factory("12.34").unwrap()
    assert factory(first.value).unwrap() == first


@pytest.mark.parametrize("code, raw_qty", [("W1234", 2.9), ("G123", "0.05")])
def test_order_quantity_revalidation_is_idempotent(code, raw_qty):
    product_code = ProductCode.create("ProductCode", code).unwrap()
    first = OrderQuantity.create("Quantity", product_code, raw_qty).unwrap()
    second = OrderQuantity.create("Quantity", product_code, first.value).unwrap()
    assert second == first
