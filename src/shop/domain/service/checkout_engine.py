"""Domain service: Checkout Engine.

Turns a customer's cart into committed stock and balance changes.

The two-phase approach (validate-then-mutate) is the whole atomicity
story: every check runs before the first mutation, so a rejected
checkout leaves the catalog, the cart and the balance exactly as they
were.  There is no rollback step because nothing needs undoing.

The commit phase is not idempotent and runs once per successful
checkout.  Stock is not reserved while items sit in a cart, so with
several concurrent customers the commit would need per-item locking to
keep stock non-negative; this engine assumes a single session.
"""

from __future__ import annotations

from decimal import Decimal
from enum import Enum

import structlog

from shop.domain.exceptions import (
    CheckoutRejected,
    EntityNotFoundError,
    InsufficientFundsError,
    StockUnavailableError,
    ValidationError,
)
from shop.domain.model.catalog_item import CatalogItem
from shop.domain.model.customer import Customer
from shop.domain.model.receipt import CheckoutReceipt
from shop.domain.model.value_objects import Money
from shop.domain.repository.catalog_repository import CatalogRepository
from shop.domain.service.shipping_dispatcher import ShippingDispatcher

logger = structlog.get_logger(__name__)


# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
FLAT_SHIPPING_COST = Money(Decimal("10.00"))


class CheckoutState(Enum):
    IDLE = "IDLE"
    VALIDATING = "VALIDATING"
    COMMITTING = "COMMITTING"
    DISPATCHING = "DISPATCHING"
    COMPLETE = "COMPLETE"
    REJECTED = "REJECTED"


_ALLOWED_TRANSITIONS: dict[CheckoutState, set[CheckoutState]] = {
    CheckoutState.IDLE: {CheckoutState.VALIDATING},
    # back to IDLE when the cart turns out to be empty
    CheckoutState.VALIDATING: {
        CheckoutState.COMMITTING,
        CheckoutState.REJECTED,
        CheckoutState.IDLE,
    },
    CheckoutState.COMMITTING: {CheckoutState.DISPATCHING},
    CheckoutState.DISPATCHING: {CheckoutState.COMPLETE},
    CheckoutState.COMPLETE: set(),
    CheckoutState.REJECTED: set(),
}


class CheckoutEngine:

    def __init__(
        self,
        catalog_repo: CatalogRepository,
        dispatcher: ShippingDispatcher,
        shipping_cost: Money = FLAT_SHIPPING_COST,
    ) -> None:
        self._catalog_repo = catalog_repo
        self._dispatcher = dispatcher
        self._shipping_cost = shipping_cost
        self._state = CheckoutState.IDLE

    @property
    def state(self) -> CheckoutState:
        """State reached by the most recent checkout.

        Always IDLE, COMPLETE or REJECTED once ``checkout`` returns or raises.
        """
        return self._state

    @property
    def shipping_cost(self) -> Money:
        return self._shipping_cost

    def checkout(self, customer: Customer) -> CheckoutReceipt:
        """Check out the customer's cart.

        Returns a receipt for every ordinary outcome: empty cart,
        rejection (insufficient funds or stock) or completion.  A cart
        line pointing at an item the catalog no longer has raises
        EntityNotFoundError.
        """
        self._state = CheckoutState.IDLE
        self._transition(CheckoutState.VALIDATING, customer)

        cart = customer.cart
        if cart.is_empty():
            logger.info("checkout_empty_cart", customer=customer.name)
            self._transition(CheckoutState.IDLE, customer)
            return CheckoutReceipt.empty_cart()

        try:
            resolved = self._validate(customer)
        except CheckoutRejected as exc:
            self._transition(CheckoutState.REJECTED, customer)
            logger.info("checkout_rejected", customer=customer.name, reason=exc.reason)
            return CheckoutReceipt.rejected(exc.reason)
        except EntityNotFoundError as exc:
            self._transition(CheckoutState.REJECTED, customer)
            logger.warning("checkout_failed", customer=customer.name, error=str(exc))
            raise

        self._transition(CheckoutState.COMMITTING, customer)
        subtotal = cart.total
        self._commit(customer, resolved, subtotal + self._shipping_cost)

        self._transition(CheckoutState.DISPATCHING, customer)
        shippable = self._shippable_items(resolved)
        shipments = self._dispatcher.dispatch(shippable) if shippable else []

        self._transition(CheckoutState.COMPLETE, customer)
        receipt = CheckoutReceipt.completed(
            subtotal=subtotal,
            shipping_cost=self._shipping_cost,
            balance=customer.balance,
            shipments=shipments,
        )
        logger.info(
            "checkout_completed",
            customer=customer.name,
            total=str(receipt.total),
            balance=str(customer.balance),
            shipments=len(shipments),
        )
        return receipt

    # --- Phases ---------------------------------------------------------------

    def _validate(self, customer: Customer) -> list[tuple[CatalogItem, int]]:
        """Phase 1: resolve every line and check stock and funds.

        Fails fast before any mutation.
        """
        resolved: list[tuple[CatalogItem, int]] = []
        requested: dict[str, int] = {}
        items: dict[str, CatalogItem] = {}

        for line in customer.cart.lines:
            item = self._catalog_repo.get_by_id(line.item_id)
            if item is None:
                raise EntityNotFoundError(
                    f"Item '{line.item_name}' is no longer in the catalog"
                )
            qty = line.quantity.value
            resolved.append((item, qty))
            items[item.id] = item
            requested[item.id] = requested.get(item.id, 0) + qty

        # Same item on several lines must be covered in aggregate
        for item_id, qty in requested.items():
            item = items[item_id]
            if not item.is_available(qty):
                raise StockUnavailableError(
                    f"Insufficient stock for {item.name} "
                    f"(need {qty}, have {item.stock_quantity})"
                )

        amount_due = customer.cart.total + self._shipping_cost
        if not customer.can_afford(amount_due):
            raise InsufficientFundsError(
                f"Insufficient balance (amount due {amount_due}, "
                f"balance {customer.balance})"
            )

        return resolved

    def _commit(
        self,
        customer: Customer,
        resolved: list[tuple[CatalogItem, int]],
        amount_due: Money,
    ) -> None:
        """Phase 2: decrement stock, debit the balance, empty the cart."""
        for item, qty in resolved:
            item.decrement_stock(qty)
            self._catalog_repo.save(item)
        customer.debit(amount_due)
        customer.cart.clear()

    @staticmethod
    def _shippable_items(resolved: list[tuple[CatalogItem, int]]) -> list[CatalogItem]:
        """Distinct shippable items in cart order."""
        seen: set[str] = set()
        result: list[CatalogItem] = []
        for item, _ in resolved:
            if item.id in seen or not item.is_shippable():
                continue
            seen.add(item.id)
            result.append(item)
        return result

    # --- Internal helpers -----------------------------------------------------

    def _transition(self, target: CheckoutState, customer: Customer) -> None:
        if target not in _ALLOWED_TRANSITIONS[self._state]:
            raise ValidationError(
                f"Cannot move checkout from {self._state.value} to {target.value}"
            )
        logger.debug(
            "checkout_state_changed",
            customer=customer.name,
            from_state=self._state.value,
            to_state=target.value,
        )
        self._state = target
