"""Application service: Price Order Lines use case.

Validates each raw order line, prices it at quantity times unit price,
and totals the lines into the amount to bill.
"""

from __future__ import annotations

from ordertaking.application.dto import QuoteDTO, QuoteLineDTO, UnvalidatedOrderLine
from ordertaking.domain.model.errors import ConstraintViolation
from ordertaking.domain.model.money import BillingAmount, Price
from ordertaking.domain.model.product_code import ProductCode
from ordertaking.domain.model.quantity import OrderQuantity
from ordertaking.domain.model.result import Err, Ok, Result
from ordertaking.domain.model.value_objects import OrderLineId


class PriceOrderLinesHandler:

    def handle(
        self, lines: list[UnvalidatedOrderLine]
    ) -> Result[QuoteDTO, ConstraintViolation]:
        """Price every line, stopping at the first invalid one.

        Steps:
        1. Validate id, product code and unit price of the line.
        2. Let the product code decide which quantity kind applies.
        3. Multiply; a line price above the Price range is an error.
        4. Sum all line prices into a BillingAmount.
        """
        priced: list[QuoteLineDTO] = []
        line_prices: list[Price] = []

        for line in lines:
            line_id = OrderLineId.create("OrderLineId", line.order_line_id)
            if isinstance(line_id, Err):
                return line_id

            code = ProductCode.create("ProductCode", line.product_code)
            if isinstance(code, Err):
                return code
            product_code = code.value

            qty = OrderQuantity.create("Quantity", product_code, line.quantity)
            if isinstance(qty, Err):
                return qty
            quantity = qty.value

            unit_price = Price.create(line.unit_price)
            if isinstance(unit_price, Err):
                return unit_price

            line_price = Price.multiply(quantity.value, unit_price.value)
            if isinstance(line_price, Err):
                return line_price

            line_prices.append(line_price.value)
            priced.append(
                QuoteLineDTO(
                    order_line_id=str(line_id.value),
                    product_code=product_code.value,
                    quantity=str(quantity),
                    unit_price=str(unit_price.value),
                    line_price=str(line_price.value),
                )
            )

        billing_amount = BillingAmount.sum_prices(line_prices)
        if isinstance(billing_amount, Err):
            return billing_amount

        return Ok(QuoteDTO(lines=priced, billing_amount=str(billing_amount.value)))
