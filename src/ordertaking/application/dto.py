"""Data Transfer Objects: plain containers that cross layer boundaries.

Inputs are unvalidated raw strings and numbers exactly as they arrive
from outside. Outputs are display-ready strings, so the CLI never has
to reach into domain types.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class UnvalidatedCustomerInfo:
    """Input: customer details as typed in."""

    first_name: str
    last_name: str
    email_address: str
    vip_status: str


@dataclass(frozen=True)
class UnvalidatedAddress:
    """Input: an address as typed in. Empty optional lines mean "not given"."""

    address_line1: str
    city: str
    zip_code: str
    state: str
    country: str
    address_line2: str = ""
    address_line3: str = ""
    address_line4: str = ""


@dataclass(frozen=True)
class UnvalidatedOrderLine:
    """Input: one line of an order to be priced."""

    order_line_id: str
    product_code: str
    quantity: str | float | int | Decimal
    unit_price: str | float | int | Decimal


@dataclass(frozen=True)
class QuoteLineDTO:
    """Output: a priced order line as displayed to the user."""

    order_line_id: str
    product_code: str
    quantity: str  # "3" or "2.5 kg"
    unit_price: str  # formatted, e.g. "$15.00"
    line_price: str


@dataclass(frozen=True)
class QuoteDTO:
    """Output: all priced lines plus the amount to bill."""

    lines: list[QuoteLineDTO]
    billing_amount: str
