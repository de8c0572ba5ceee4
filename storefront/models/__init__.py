from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def ensure_utc(value):
    """Attach UTC to naive datetimes so mixed seed/runtime values compare."""
    if isinstance(value, datetime) and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class StoreModel(BaseModel):
    """Base for records held by the in-memory store.

    Field names are snake_case in Python and camelCase on the wire so the
    bundled mock data loads unchanged.
    """

    model_config = ConfigDict(populate_by_name=True)

    def to_dict(self):
        return self.model_dump(mode="json", by_alias=True)

    def clone(self):
        return self.model_copy(deep=True)


from .product import Product  # noqa: E402
from .cart import CartLineItem  # noqa: E402
from .wishlist import WishlistEntry  # noqa: E402
from .order import (  # noqa: E402
    Order,
    OrderStatus,
    PaymentMethod,
    ShippingAddress,
    TimelineEntry,
    STATUS_ORDER,
)

__all__ = [
    "StoreModel",
    "utcnow",
    "ensure_utc",
    "Product",
    "CartLineItem",
    "WishlistEntry",
    "Order",
    "OrderStatus",
    "PaymentMethod",
    "ShippingAddress",
    "TimelineEntry",
    "STATUS_ORDER",
]
