from typing import Optional

from pydantic import BaseModel, Field

from storefront.services.catalog import ProductFilters


class LimitQuery(BaseModel):
    limit: int = Field(default=8, ge=1, le=100)


class DealsQuery(LimitQuery):
    limit: int = Field(default=6, ge=1, le=100)


class RecommendationQuery(LimitQuery):
    type: str = "bought"


class ProductListQuery(BaseModel):
    q: Optional[str] = None
    category: str = "all"
    min_price: Optional[float] = Field(default=None, ge=0)
    max_price: Optional[float] = Field(default=None, ge=0)
    rating: Optional[float] = Field(default=None, ge=0, le=5)
    in_stock: bool = False
    on_sale: bool = False
    sort: Optional[str] = None

    def to_filters(self) -> ProductFilters:
        price_range = None
        if self.min_price is not None or self.max_price is not None:
            price_range = (
                self.min_price if self.min_price is not None else 0.0,
                self.max_price if self.max_price is not None else float("inf"),
            )
        return ProductFilters(
            category=self.category,
            price_range=price_range,
            rating=self.rating,
            in_stock=self.in_stock,
            on_sale=self.on_sale,
        )
