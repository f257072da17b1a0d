"""Application service: Checkout use case.

Runs the checkout engine for a customer and maps the receipt to a DTO
for the presentation layer.
"""

from __future__ import annotations

from shop.application.dto import ReceiptDTO, ShipmentDTO
from shop.domain.model.customer import Customer
from shop.domain.model.receipt import CheckoutReceipt
from shop.domain.service.checkout_engine import CheckoutEngine


class CheckoutHandler:

    def __init__(self, engine: CheckoutEngine) -> None:
        self._engine = engine

    def handle(self, customer: Customer) -> ReceiptDTO:
        receipt = self._engine.checkout(customer)
        return self._to_dto(customer, receipt)

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_dto(customer: Customer, receipt: CheckoutReceipt) -> ReceiptDTO:
        def fmt(value) -> str:
            return "" if value is None else str(value)

        return ReceiptDTO(
            customer_name=customer.name,
            outcome=receipt.outcome.value,
            subtotal=fmt(receipt.subtotal),
            shipping_cost=fmt(receipt.shipping_cost),
            total=fmt(receipt.total),
            balance=fmt(receipt.balance),
            shipments=[
                ShipmentDTO(name=s.name, weight=s.weight) for s in receipt.shipments
            ],
            reason=receipt.reason,
        )
