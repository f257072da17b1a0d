"""Domain service: Shipping Dispatcher.

Hands physically shippable items over for delivery.  In this model that
means emitting one shipment record per item; there is no carrier.
"""

from __future__ import annotations

from collections.abc import Sequence

import structlog

from shop.domain.model.capabilities import Shippable
from shop.domain.model.receipt import ShipmentRecord

logger = structlog.get_logger(__name__)


class ShippingDispatcher:
    """Stateless; safe to share between checkouts."""

    def dispatch(self, items: Sequence[Shippable]) -> list[ShipmentRecord]:
        records: list[ShipmentRecord] = []
        for item in items:
            record = ShipmentRecord(name=item.name, weight=item.weight)
            logger.info("shipment_dispatched", item=record.name, weight=record.weight)
            records.append(record)
        return records
