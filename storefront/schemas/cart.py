from pydantic import BaseModel, ConfigDict, Field

MAX_QUANTITY_PER_ITEM = 10


class CartProductRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    product_id: int = Field(alias="productId")


class CartItemRequest(CartProductRequest):
    quantity: int = Field(default=1, ge=1, le=MAX_QUANTITY_PER_ITEM)


class UpdateQuantityRequest(CartProductRequest):
    quantity: int = Field(ge=1, le=MAX_QUANTITY_PER_ITEM)
