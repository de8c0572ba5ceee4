import json
import logging
import os
from typing import Iterable, List, Optional

from storefront.models import CartLineItem, Order, Product, WishlistEntry

DATA_DIR = os.path.join(os.path.dirname(__file__), "data")
DEFAULT_CATALOG_PATH = os.path.join(DATA_DIR, "products.json")
DEFAULT_ORDERS_PATH = os.path.join(DATA_DIR, "orders.json")

logger = logging.getLogger(__name__)


def load_json_records(path: str) -> list:
    with open(path, encoding="utf-8") as fh:
        records = json.load(fh)
    if not isinstance(records, list):
        raise ValueError(f"Expected a list of records in {path}")
    return records


class Store:
    """Process-local state shared by the storefront services.

    The catalog is read-only. Cart, wishlist and orders are mutable lists that
    only the owning service touches; everything handed out is a clone.
    """

    def __init__(self, products: Iterable[Product] = (), orders: Iterable[Order] = ()):
        self.products = tuple(products)
        self._seed_orders = [o.clone() for o in orders]
        self.cart: List[CartLineItem] = []
        self.wishlist: List[WishlistEntry] = []
        self.orders: List[Order] = [o.clone() for o in self._seed_orders]

    @classmethod
    def from_seed(cls, catalog_path: Optional[str] = None, orders_path: Optional[str] = None) -> "Store":
        catalog_path = catalog_path or DEFAULT_CATALOG_PATH
        orders_path = orders_path or DEFAULT_ORDERS_PATH
        products = [Product.model_validate(r) for r in load_json_records(catalog_path)]
        orders = [Order.model_validate(r) for r in load_json_records(orders_path)]
        ids = [p.id for p in products]
        if len(ids) != len(set(ids)):
            raise ValueError(f"Duplicate product ids in {catalog_path}")
        logger.info("Seeded store with %d products and %d orders", len(products), len(orders))
        return cls(products=products, orders=orders)

    def reset(self) -> None:
        self.cart = []
        self.wishlist = []
        self.orders = [o.clone() for o in self._seed_orders]

    def find_product(self, product_id) -> Optional[Product]:
        return next((p for p in self.products if p.id == product_id), None)

    def find_order(self, order_id) -> Optional[Order]:
        return next((o for o in self.orders if o.id == order_id), None)
