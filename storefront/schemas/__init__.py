from .cart import CartItemRequest, CartProductRequest, UpdateQuantityRequest
from .wishlist import WishlistRequest
from .orders import OrderListQuery, StatusUpdateRequest
from .checkout import CheckoutRequest, PaymentForm, QuoteRequest, ShippingForm
from .products import DealsQuery, LimitQuery, ProductListQuery, RecommendationQuery

__all__ = [
    "CartItemRequest",
    "CartProductRequest",
    "UpdateQuantityRequest",
    "WishlistRequest",
    "OrderListQuery",
    "StatusUpdateRequest",
    "CheckoutRequest",
    "PaymentForm",
    "QuoteRequest",
    "ShippingForm",
    "DealsQuery",
    "LimitQuery",
    "ProductListQuery",
    "RecommendationQuery",
]
