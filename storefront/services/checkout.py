import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Optional

from storefront.models import CartLineItem, Order, PaymentMethod, ShippingAddress
from storefront.services.cart import CartService
from storefront.services.exceptions import InvalidArgument
from storefront.services.orders import OrderService
from storefront.store import Store

logger = logging.getLogger(__name__)

TWOPLACES = Decimal("0.01")

SHIPPING_OPTIONS = [
    {"id": "standard", "name": "Standard Shipping", "time": "5-7 business days", "price": Decimal("9.99")},
    {"id": "express", "name": "Express Shipping", "time": "2-3 business days", "price": Decimal("19.99")},
    {"id": "overnight", "name": "Overnight Shipping", "time": "Next business day", "price": Decimal("29.99")},
]
SHIPPING_RATES = {opt["id"]: opt["price"] for opt in SHIPPING_OPTIONS}
DEFAULT_SHIPPING_METHOD = "standard"


def _to_money(value) -> Decimal:
    d = Decimal(str(value))
    return d.quantize(TWOPLACES, rounding=ROUND_HALF_UP)


class CheckoutService:
    """Turns the active cart into an order.

    Order creation and cart clearing are two separate store operations with no
    transaction around them.
    """

    def __init__(
        self,
        store: Store,
        cart: CartService,
        orders: OrderService,
        tax_rate="0.08",
        free_shipping_threshold="50",
    ):
        self.store = store
        self.cart = cart
        self.orders = orders
        self.tax_rate = Decimal(str(tax_rate))
        self.free_shipping_threshold = Decimal(str(free_shipping_threshold))

    def shipping_options(self) -> List[dict]:
        return [{**opt, "price": float(opt["price"])} for opt in SHIPPING_OPTIONS]

    def _subtotal(self, items: List[CartLineItem]) -> Decimal:
        total = Decimal("0")
        for item in items:
            product = self.store.find_product(item.product_id)
            if product:
                total += Decimal(str(product.price)) * item.quantity
        return total

    def _shipping(self, subtotal: Decimal, shipping_method: str) -> Decimal:
        if subtotal >= self.free_shipping_threshold:
            return Decimal("0")
        return SHIPPING_RATES.get(shipping_method, SHIPPING_RATES[DEFAULT_SHIPPING_METHOD])

    def quote_items(self, items: List[CartLineItem], shipping_method: str = DEFAULT_SHIPPING_METHOD) -> dict:
        subtotal = self._subtotal(items)
        shipping = _to_money(self._shipping(subtotal, shipping_method))
        tax = _to_money(subtotal * self.tax_rate)
        subtotal = _to_money(subtotal)
        return {
            "subtotal": float(subtotal),
            "shipping": float(shipping),
            "tax": float(tax),
            "total": float(subtotal + shipping + tax),
            "shipping_method": shipping_method,
        }

    def quote(self, shipping_method: str = DEFAULT_SHIPPING_METHOD) -> dict:
        return self.quote_items(self.cart.get_active_items(), shipping_method)

    def place_order(
        self,
        shipping_address,
        card_number: str,
        shipping_method: str = DEFAULT_SHIPPING_METHOD,
    ) -> Order:
        items = self.cart.get_active_items()
        if not items:
            raise InvalidArgument("Cart is empty")

        totals = self.quote_items(items, shipping_method)
        digits = "".join(ch for ch in str(card_number) if ch.isdigit())
        if isinstance(shipping_address, dict):
            shipping_address = ShippingAddress.model_validate(shipping_address)

        order = self.orders.create({
            "items": items,
            "subtotal": totals["subtotal"],
            "shipping": totals["shipping"],
            "tax": totals["tax"],
            "total": totals["total"],
            "shippingAddress": shipping_address,
            "paymentMethod": PaymentMethod(type="card", last4=digits[-4:]),
            "shippingMethod": shipping_method,
        })

        try:
            self.cart.clear_cart()
        except Exception:
            logger.error("Order %s created but cart could not be cleared", order.id, exc_info=True)
            raise
        return order

    def reorder(self, order_id) -> Optional[List[CartLineItem]]:
        order = self.orders.get_by_id(order_id)
        if not order:
            return None
        snapshot = []
        for item in order.items:
            snapshot = self.cart.add_item(item.product_id, item.quantity)
        logger.info("reorder order_id=%s items=%d", order_id, len(order.items))
        return snapshot or self.cart.get_cart_items()
