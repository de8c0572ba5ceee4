import logging
from typing import List, Optional

from pydantic import ValidationError

from storefront.models import CartLineItem
from storefront.services.exceptions import InvalidArgument
from storefront.store import Store
from storefront.utils.latency import no_latency

logger = logging.getLogger(__name__)


def _product_id(value) -> int:
    """Coerce a caller-supplied id the way stored line items do."""
    if isinstance(value, bool):
        raise InvalidArgument("Product ID must be a number")
    try:
        return CartLineItem(product_id=value).product_id
    except ValidationError:
        raise InvalidArgument("Product ID must be a number") from None


class CartService:
    """Cart line items keyed by product id.

    Quantity bounds (1-10) are enforced by the API schemas, not here.
    """

    def __init__(self, store: Store, delay=None):
        self.store = store
        self._delay = delay or no_latency

    def _snapshot(self) -> List[CartLineItem]:
        return [item.clone() for item in self.store.cart]

    def _find(self, product_id: int) -> Optional[CartLineItem]:
        return next((i for i in self.store.cart if i.product_id == product_id), None)

    def get_cart_items(self) -> List[CartLineItem]:
        self._delay(200)
        return self._snapshot()

    def get_active_items(self) -> List[CartLineItem]:
        return [i for i in self.get_cart_items() if not i.saved_for_later]

    def get_saved_items(self) -> List[CartLineItem]:
        return [i for i in self.get_cart_items() if i.saved_for_later]

    def add_item(self, product_id: int, quantity: int = 1) -> List[CartLineItem]:
        self._delay(300)
        product_id = _product_id(product_id)
        existing = self._find(product_id)
        if existing:
            existing.quantity += quantity
        else:
            self.store.cart.append(
                CartLineItem(product_id=product_id, quantity=quantity, saved_for_later=False)
            )
        logger.info("cart add product_id=%s quantity=%s", product_id, quantity)
        return self._snapshot()

    def update_quantity(self, product_id: int, new_quantity: int) -> List[CartLineItem]:
        self._delay(200)
        product_id = _product_id(product_id)
        item = self._find(product_id)
        if item:
            item.quantity = new_quantity
        return self._snapshot()

    def remove_item(self, product_id: int) -> List[CartLineItem]:
        self._delay(200)
        product_id = _product_id(product_id)
        self.store.cart = [i for i in self.store.cart if i.product_id != product_id]
        return self._snapshot()

    def save_for_later(self, product_id: int) -> List[CartLineItem]:
        self._delay(200)
        product_id = _product_id(product_id)
        item = self._find(product_id)
        if item:
            item.saved_for_later = True
        return self._snapshot()

    def move_to_cart(self, product_id: int) -> List[CartLineItem]:
        self._delay(200)
        product_id = _product_id(product_id)
        item = self._find(product_id)
        if item:
            item.saved_for_later = False
        return self._snapshot()

    def clear_cart(self) -> List[CartLineItem]:
        self._delay(200)
        self.store.cart = []
        logger.info("cart cleared")
        return []

    def get_cart_count(self) -> int:
        self._delay(100)
        return sum(i.quantity for i in self.store.cart if not i.saved_for_later)
