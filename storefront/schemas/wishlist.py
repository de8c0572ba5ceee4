from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class WishlistRequest(BaseModel):
    # Left untyped: the wishlist service owns product id validation.
    model_config = ConfigDict(populate_by_name=True)

    product_id: Any = Field(default=None, alias="productId")
