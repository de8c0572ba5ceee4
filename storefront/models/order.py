from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import Field, field_validator

from . import StoreModel, ensure_utc, utcnow
from .cart import CartLineItem


class OrderStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"


# Canonical rendering order for timelines
STATUS_ORDER = [s.value for s in OrderStatus]


class TimelineEntry(StoreModel):
    status: str
    timestamp: datetime = Field(default_factory=utcnow)
    description: str = ""

    @field_validator("timestamp")
    @classmethod
    def normalize_timestamp(cls, value):
        return ensure_utc(value)


class ShippingAddress(StoreModel):
    first_name: str = Field(default="", alias="firstName")
    last_name: str = Field(default="", alias="lastName")
    email: str = ""
    phone: str = ""
    address: str = ""
    city: str = ""
    state: str = ""
    zip_code: str = Field(default="", alias="zipCode")


class PaymentMethod(StoreModel):
    type: str = "card"
    last4: str = ""


class Order(StoreModel):
    id: int = Field(alias="Id")
    items: List[CartLineItem] = Field(default_factory=list)
    subtotal: float = 0.0
    shipping: float = 0.0
    tax: float = 0.0
    total: float = 0.0
    shipping_address: Optional[ShippingAddress] = Field(default=None, alias="shippingAddress")
    payment_method: Optional[PaymentMethod] = Field(default=None, alias="paymentMethod")
    shipping_method: str = Field(default="standard", alias="shippingMethod")
    status: str = OrderStatus.PROCESSING.value
    date: datetime = Field(default_factory=utcnow)
    timeline: List[TimelineEntry] = Field(default_factory=list)

    @field_validator("date")
    @classmethod
    def normalize_date(cls, value):
        return ensure_utc(value)

    def timeline_entry(self, status: str) -> Optional[TimelineEntry]:
        return next((t for t in self.timeline if t.status == status), None)
