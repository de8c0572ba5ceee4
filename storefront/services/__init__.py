from .exceptions import InvalidArgument
from .cart import CartService
from .wishlist import WishlistService
from .orders import OrderService, STATUS_DESCRIPTIONS, sort_timeline
from .catalog import ProductCatalog, ProductFilters, apply_filters_and_sort, score_candidate
from .checkout import CheckoutService, SHIPPING_OPTIONS

__all__ = [
    "InvalidArgument",
    "CartService",
    "WishlistService",
    "OrderService",
    "STATUS_DESCRIPTIONS",
    "sort_timeline",
    "ProductCatalog",
    "ProductFilters",
    "apply_filters_and_sort",
    "score_candidate",
    "CheckoutService",
    "SHIPPING_OPTIONS",
]
