from pydantic import BaseModel

from storefront.models import OrderStatus


class StatusUpdateRequest(BaseModel):
    status: OrderStatus


class OrderListQuery(BaseModel):
    q: str = ""
    status: str = "all"
