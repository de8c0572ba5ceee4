from datetime import datetime
from typing import List, Optional

from pydantic import Field, field_validator

from . import StoreModel, ensure_utc


class Product(StoreModel):
    id: int = Field(alias="Id")
    title: str
    description: str = ""
    category: str
    price: float = Field(ge=0)
    original_price: Optional[float] = Field(default=None, alias="originalPrice", ge=0)
    rating: float = Field(default=0, ge=0, le=5)
    review_count: int = Field(default=0, alias="reviewCount", ge=0)
    images: List[str] = Field(min_length=1)
    in_stock: bool = Field(default=True, alias="inStock")
    discount: Optional[float] = Field(default=None, ge=0, le=100)
    date_added: Optional[datetime] = Field(default=None, alias="dateAdded")

    @field_validator("date_added")
    @classmethod
    def normalize_date_added(cls, value):
        return ensure_utc(value)

    @property
    def on_sale(self) -> bool:
        return self.original_price is not None and self.original_price > self.price

    @property
    def effective_discount(self) -> float:
        """Discount percent, falling back to the original/current price gap."""
        if self.discount:
            return float(self.discount)
        if self.on_sale and self.original_price:
            return (self.original_price - self.price) / self.original_price * 100
        return 0.0
