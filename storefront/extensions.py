import logging
import random

from flask import current_app
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

from storefront.services import (
    CartService,
    CheckoutService,
    OrderService,
    ProductCatalog,
    WishlistService,
)
from storefront.store import Store
from storefront.utils.latency import SimulatedLatency

# Limits come from RATELIMIT_* config keys; the checkout route adds its own.
limiter = Limiter(key_func=get_remote_address, strategy="fixed-window")


class StorefrontServices:
    """Everything one application instance needs, built around one Store."""

    def __init__(self, store: Store, latency_scale=0.0, rng=None, tax_rate="0.08", free_shipping_threshold="50"):
        delay = SimulatedLatency(latency_scale)
        self.store = store
        self.cart = CartService(store, delay=delay)
        self.wishlist = WishlistService(store, delay=delay)
        self.orders = OrderService(store, delay=delay)
        self.catalog = ProductCatalog(store, rng=rng, delay=delay)
        self.checkout = CheckoutService(
            store,
            self.cart,
            self.orders,
            tax_rate=tax_rate,
            free_shipping_threshold=free_shipping_threshold,
        )

    @classmethod
    def from_config(cls, config) -> "StorefrontServices":
        store = Store.from_seed(config.get("CATALOG_PATH"), config.get("ORDERS_SEED_PATH"))
        seed = config.get("RECOMMENDATION_SEED")
        rng = random.Random(int(seed)) if seed not in (None, "") else random.Random()
        return cls(
            store,
            latency_scale=config.get("SIMULATED_LATENCY_SCALE", 0.0),
            rng=rng,
            tax_rate=config.get("TAX_RATE", "0.08"),
            free_shipping_threshold=config.get("FREE_SHIPPING_THRESHOLD", "50"),
        )


def init_services(app) -> StorefrontServices:
    services = StorefrontServices.from_config(app.config)
    app.extensions["storefront"] = services
    logging.info("Storefront services ready")
    return services


def get_services() -> StorefrontServices:
    return current_app.extensions["storefront"]
