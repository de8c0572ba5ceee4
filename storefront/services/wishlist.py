import logging
from numbers import Real
from typing import List

from storefront.models import WishlistEntry, utcnow
from storefront.services.exceptions import InvalidArgument
from storefront.store import Store
from storefront.utils.latency import no_latency

logger = logging.getLogger(__name__)


def _is_product_id(value) -> bool:
    # Whole numbers only; ids are ints on the stored entries
    return isinstance(value, Real) and not isinstance(value, bool) and float(value).is_integer()


def _require_product_id(value) -> None:
    if not _is_product_id(value):
        raise InvalidArgument("Product ID must be a number")


class WishlistService:
    def __init__(self, store: Store, delay=None):
        self.store = store
        self._delay = delay or no_latency

    def _snapshot(self) -> List[WishlistEntry]:
        return [entry.clone() for entry in self.store.wishlist]

    def _contains(self, product_id) -> bool:
        return any(e.product_id == product_id for e in self.store.wishlist)

    def get_all(self) -> List[WishlistEntry]:
        self._delay(100)
        return self._snapshot()

    def get_wishlist_count(self) -> int:
        self._delay(50)
        return len(self.store.wishlist)

    def add_to_wishlist(self, product_id) -> List[WishlistEntry]:
        self._delay(200)
        _require_product_id(product_id)
        if not self._contains(product_id):
            next_id = max((e.id for e in self.store.wishlist), default=0) + 1
            self.store.wishlist.append(
                WishlistEntry(id=next_id, product_id=product_id, added_at=utcnow())
            )
            logger.info("wishlist add product_id=%s", product_id)
        return self._snapshot()

    def remove_from_wishlist(self, product_id) -> List[WishlistEntry]:
        self._delay(200)
        _require_product_id(product_id)
        self.store.wishlist = [e for e in self.store.wishlist if e.product_id != product_id]
        return self._snapshot()

    def is_in_wishlist(self, product_id) -> bool:
        # Bad input from callers reads as "not in wishlist" rather than failing.
        self._delay(50)
        if not _is_product_id(product_id):
            return False
        return self._contains(product_id)

    def toggle_wishlist(self, product_id) -> bool:
        self._delay(200)
        _require_product_id(product_id)
        if self.is_in_wishlist(product_id):
            self.remove_from_wishlist(product_id)
            return False
        self.add_to_wishlist(product_id)
        return True

    def clear_wishlist(self) -> List[WishlistEntry]:
        self._delay(200)
        self.store.wishlist = []
        return []
