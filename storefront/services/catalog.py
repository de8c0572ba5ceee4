import logging
import random
import re
from datetime import datetime, timezone
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from storefront.models import Product
from storefront.store import Store
from storefront.utils.latency import no_latency

logger = logging.getLogger(__name__)

SAME_CATEGORY_BONUS = 40
RATING_PROXIMITY_MAX = 20
PRICE_PROXIMITY_MAX = 20
JITTER_MAX = 20
TOP_RATED_BONUS = 10
TOP_RATED_THRESHOLD = 4.5
IN_STOCK_BONUS = 5

SORT_KEYS = ("price-low", "price-high", "rating", "newest", "name", "discount")

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class ProductFilters(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    category: Optional[str] = "all"
    price_range: Optional[Tuple[float, float]] = Field(default=None, alias="priceRange")
    rating: Optional[float] = None
    in_stock: bool = Field(default=False, alias="inStock")
    on_sale: bool = Field(default=False, alias="onSale")


def _matches_query(product: Product, query: str) -> bool:
    return (
        query in product.title.lower()
        or query in product.description.lower()
        or query in product.category.lower()
    )


def _sort(products: List[Product], sort_by: Optional[str]) -> List[Product]:
    # list.sort is stable, so ties keep their filtered order
    if sort_by == "price-low":
        products.sort(key=lambda p: p.price)
    elif sort_by == "price-high":
        products.sort(key=lambda p: p.price, reverse=True)
    elif sort_by == "rating":
        products.sort(key=lambda p: p.rating, reverse=True)
    elif sort_by == "newest":
        products.sort(key=lambda p: p.date_added or _EPOCH, reverse=True)
    elif sort_by == "name":
        products.sort(key=lambda p: (p.title.casefold(), p.title))
    elif sort_by == "discount":
        products.sort(key=lambda p: p.effective_discount, reverse=True)
    return products


def apply_filters_and_sort(products, filters=None, sort_by=None, search_query=None) -> List[Product]:
    """Listing pipeline: search, category, price, rating, stock, sale, then one sort.

    ``filters`` may be a ProductFilters or a plain dict using either field
    names or their camelCase aliases. Unknown sort keys leave the order as is.
    """
    if filters is None:
        filters = ProductFilters()
    elif not isinstance(filters, ProductFilters):
        filters = ProductFilters.model_validate(filters)

    filtered = list(products)

    if search_query:
        query = search_query.lower()
        filtered = [p for p in filtered if _matches_query(p, query)]

    if filters.category and filters.category.lower() != "all":
        category = filters.category.lower()
        filtered = [p for p in filtered if p.category.lower() == category]

    if filters.price_range:
        low, high = filters.price_range
        filtered = [p for p in filtered if low <= p.price <= high]

    if filters.rating:
        filtered = [p for p in filtered if p.rating >= filters.rating]

    if filters.in_stock:
        filtered = [p for p in filtered if p.in_stock]

    if filters.on_sale:
        filtered = [p for p in filtered if p.on_sale]

    return _sort(filtered, sort_by)


def score_candidate(anchor: Product, candidate: Product, rng) -> float:
    """Heuristic "bought together" score of one candidate against the anchor."""
    score = 0.0
    if candidate.category == anchor.category:
        score += SAME_CATEGORY_BONUS

    rating_diff = abs(candidate.rating - anchor.rating)
    score += max(0.0, RATING_PROXIMITY_MAX - rating_diff * 10)

    price_diff = abs(candidate.price - anchor.price)
    if anchor.price > 0:
        score += max(0.0, PRICE_PROXIMITY_MAX - price_diff / anchor.price * 30)
    elif price_diff == 0:
        score += PRICE_PROXIMITY_MAX

    score += rng.random() * JITTER_MAX

    if candidate.rating >= TOP_RATED_THRESHOLD:
        score += TOP_RATED_BONUS
    if candidate.in_stock:
        score += IN_STOCK_BONUS
    return score


def slugify(name: str) -> str:
    return re.sub(r"\s+", "-", name.lower())


class ProductCatalog:
    """Read-side queries over the static catalog."""

    def __init__(self, store: Store, rng: Optional[random.Random] = None, delay=None):
        self.store = store
        self.rng = rng or random.Random()
        self._delay = delay or no_latency

    def _all(self) -> List[Product]:
        return [p.clone() for p in self.store.products]

    def get_all(self) -> List[Product]:
        self._delay(300)
        return self._all()

    def get_by_id(self, product_id) -> Optional[Product]:
        self._delay(200)
        product = self.store.find_product(product_id)
        return product.clone() if product else None

    def get_by_category(self, category: str) -> List[Product]:
        self._delay(250)
        wanted = category.lower()
        return [p for p in self._all() if p.category.lower() == wanted]

    def get_featured(self, limit: int = 8) -> List[Product]:
        self._delay(200)
        return sorted(self._all(), key=lambda p: p.rating, reverse=True)[:max(limit, 0)]

    def search(self, query: str) -> List[Product]:
        self._delay(300)
        term = query.lower()
        return [p for p in self._all() if _matches_query(p, term)]

    def get_deals(self, limit: int = 6) -> List[Product]:
        self._delay(200)
        return [p for p in self._all() if p.on_sale][:max(limit, 0)]

    def get_categories(self, limit: Optional[int] = None) -> List[dict]:
        self._delay(200)
        products = self._all()
        categories = []
        for product in products:
            if any(c["name"] == product.category for c in categories):
                continue
            members = [p for p in products if p.category == product.category]
            categories.append({
                "id": slugify(product.category),
                "name": product.category,
                "slug": slugify(product.category),
                "image": product.images[0],
                "product_count": len(members),
            })
        return categories[:limit] if limit is not None else categories

    def filter_and_sort(self, filters=None, sort_by=None, search_query=None) -> List[Product]:
        self._delay(300)
        return apply_filters_and_sort(self._all(), filters, sort_by, search_query)

    def get_recommendations(self, product_id, type: str = "bought", limit: int = 8) -> List[Product]:
        """Rank every other product against the anchor and return the top ``limit``.

        Output varies between calls through the jitter term unless the catalog
        was built with a seeded ``random.Random``.
        """
        self._delay(300)
        anchor = self.store.find_product(product_id)
        if not anchor:
            return []
        scored = [
            (score_candidate(anchor, candidate, self.rng), candidate)
            for candidate in self.store.products
            if candidate.id != anchor.id
        ]
        scored.sort(key=lambda pair: pair[0], reverse=True)
        logger.debug("recommendations anchor=%s type=%s candidates=%d", anchor.id, type, len(scored))
        return [candidate.clone() for _, candidate in scored[:max(limit, 0)]]
