from .products import products_bp
from .cart import cart_bp
from .wishlist import wishlist_bp
from .orders import orders_bp
from .checkout import checkout_bp

__all__ = [
    'products_bp',
    'cart_bp',
    'wishlist_bp',
    'orders_bp',
    'checkout_bp',
]
