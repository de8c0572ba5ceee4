import logging
from datetime import timedelta
from typing import List, Optional

from storefront.models import Order, OrderStatus, STATUS_ORDER, TimelineEntry, utcnow
from storefront.store import Store
from storefront.utils.latency import no_latency

logger = logging.getLogger(__name__)

STATUS_DESCRIPTIONS = {
    OrderStatus.PENDING.value: "Order placed and payment confirmed",
    OrderStatus.PROCESSING.value: "Order is being prepared for shipment",
    OrderStatus.SHIPPED.value: "Order has been shipped",
    OrderStatus.DELIVERED.value: "Order has been delivered",
}

# How far "pending" is backdated before "processing" on a new order
PENDING_BACKDATE = timedelta(minutes=5)

# Fields the service owns; caller-supplied values are ignored
_SERVICE_FIELDS = {"id", "Id", "status", "date", "timeline"}


def _status_rank(status: str) -> int:
    try:
        return STATUS_ORDER.index(status)
    except ValueError:
        return len(STATUS_ORDER)


def sort_timeline(timeline: List[TimelineEntry]) -> List[TimelineEntry]:
    """Canonical order, unknown statuses last in insertion order."""
    return sorted(timeline, key=lambda entry: _status_rank(entry.status))


class OrderService:
    def __init__(self, store: Store, delay=None):
        self.store = store
        self._delay = delay or no_latency

    def get_all(self) -> List[Order]:
        self._delay(300)
        return [o.clone() for o in self.store.orders]

    def get_by_id(self, order_id) -> Optional[Order]:
        self._delay(200)
        order = self.store.find_order(order_id)
        return order.clone() if order else None

    def create(self, order_data) -> Order:
        """Store a new order built from a cart snapshot and checkout totals.

        The id is one past the highest existing id. The order starts in
        "processing" with a backdated "pending" entry so it reads as already
        confirmed.
        """
        self._delay(500)
        if isinstance(order_data, Order):
            order_data = order_data.model_dump(by_alias=True)
        data = {k: v for k, v in dict(order_data).items() if k not in _SERVICE_FIELDS}

        now = utcnow()
        new_id = max((o.id for o in self.store.orders), default=0) + 1
        order = Order.model_validate({
            **data,
            "Id": new_id,
            "status": OrderStatus.PROCESSING.value,
            "date": now,
            "timeline": [
                TimelineEntry(
                    status=OrderStatus.PENDING.value,
                    timestamp=now - PENDING_BACKDATE,
                    description=STATUS_DESCRIPTIONS[OrderStatus.PENDING.value],
                ),
                TimelineEntry(
                    status=OrderStatus.PROCESSING.value,
                    timestamp=now,
                    description=STATUS_DESCRIPTIONS[OrderStatus.PROCESSING.value],
                ),
            ],
        }).clone()
        self.store.orders.append(order)
        logger.info("order created id=%s total=%s", order.id, order.total)
        return order.clone()

    def update_status(self, order_id, status: str) -> Optional[Order]:
        self._delay(300)
        order = self.store.find_order(order_id)
        if not order:
            return None
        order.status = status
        if order.timeline_entry(status) is None:
            order.timeline.append(
                TimelineEntry(
                    status=status,
                    timestamp=utcnow(),
                    description=STATUS_DESCRIPTIONS.get(status, f"Order status updated to {status}"),
                )
            )
            order.timeline = sort_timeline(order.timeline)
            logger.info("order status id=%s status=%s", order_id, status)
        return order.clone()

    def get_order_timeline(self, order_id) -> List[TimelineEntry]:
        self._delay(200)
        order = self.store.find_order(order_id)
        if not order:
            return []
        return [entry.clone() for entry in order.timeline]

    def filter_orders(self, search_term: str = "", status: str = "all") -> List[Order]:
        """Order history search by id or shipping name, plus a status filter."""
        term = (search_term or "").lower()
        result = []
        for order in self.get_all():
            address = order.shipping_address
            matches_search = (
                term in str(order.id)
                or bool(address and term in address.first_name.lower())
                or bool(address and term in address.last_name.lower())
            )
            matches_status = not status or status == "all" or order.status == status
            if matches_search and matches_status:
                result.append(order)
        return result
