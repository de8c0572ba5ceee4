from datetime import datetime

from pydantic import Field, field_validator

from . import StoreModel, ensure_utc, utcnow


class WishlistEntry(StoreModel):
    id: int = Field(alias="Id")
    product_id: int = Field(alias="productId")
    added_at: datetime = Field(default_factory=utcnow, alias="addedAt")

    @field_validator("added_at")
    @classmethod
    def normalize_added_at(cls, value):
        return ensure_utc(value)
