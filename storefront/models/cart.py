from pydantic import Field

from . import StoreModel


class CartLineItem(StoreModel):
    product_id: int = Field(alias="productId")
    quantity: int = 1
    saved_for_later: bool = Field(default=False, alias="savedForLater")
