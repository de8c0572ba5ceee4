from flask import Blueprint, request
from storefront.extensions import get_services
from storefront.metrics import get_metrics
from storefront.schemas import CartItemRequest, CartProductRequest, UpdateQuantityRequest
from storefront.utils import ok, error, validate_schema
from storefront.version import API_PREFIX

cart_bp = Blueprint("cart", __name__, url_prefix=f"{API_PREFIX}/cart")


def _cart_payload(items):
    return {
        "items": [i.to_dict() for i in items],
        "count": get_services().cart.get_cart_count(),
    }


@cart_bp.route("", methods=["GET"])
def view_cart():
    items = get_services().cart.get_cart_items()
    payload = _cart_payload(items)
    payload["active"] = [i.to_dict() for i in items if not i.saved_for_later]
    payload["saved"] = [i.to_dict() for i in items if i.saved_for_later]
    return ok(payload)


@cart_bp.route("/count", methods=["GET"])
def cart_count():
    return ok({"count": get_services().cart.get_cart_count()})


@cart_bp.route("/add", methods=["POST"])
@validate_schema(CartItemRequest)
def add_to_cart():
    """Add a product, merging with an existing line item.
    ---
    tags:
      - Cart
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          required: [product_id]
          properties:
            product_id: {type: integer}
            quantity: {type: integer, minimum: 1, maximum: 10, default: 1}
    responses:
      200:
        description: Cart snapshot and active item count
      400:
        description: Validation failed or product out of stock
      404:
        description: Product not found
    """
    data = request.validated_data
    services = get_services()
    product = services.catalog.get_by_id(data.product_id)
    if not product:
        return error("Product not found", status=404)
    if not product.in_stock:
        return error("Product is out of stock", status=400)
    items = services.cart.add_item(data.product_id, data.quantity)
    get_metrics().cart_adds.inc()
    return ok(_cart_payload(items), message="Item added to cart")


@cart_bp.route("/update", methods=["POST"])
@validate_schema(UpdateQuantityRequest)
def update_cart_quantity():
    data = request.validated_data
    items = get_services().cart.update_quantity(data.product_id, data.quantity)
    return ok(_cart_payload(items), message="Cart quantity updated")


@cart_bp.route("/remove", methods=["POST"])
@validate_schema(CartProductRequest)
def remove_from_cart():
    items = get_services().cart.remove_item(request.validated_data.product_id)
    return ok(_cart_payload(items), message="Item removed")


@cart_bp.route("/save-for-later", methods=["POST"])
@validate_schema(CartProductRequest)
def save_for_later():
    items = get_services().cart.save_for_later(request.validated_data.product_id)
    return ok(_cart_payload(items), message="Item saved for later")


@cart_bp.route("/move-to-cart", methods=["POST"])
@validate_schema(CartProductRequest)
def move_to_cart():
    items = get_services().cart.move_to_cart(request.validated_data.product_id)
    return ok(_cart_payload(items), message="Item moved to cart")


@cart_bp.route("/clear", methods=["POST"])
def clear_cart():
    items = get_services().cart.clear_cart()
    return ok(_cart_payload(items), message="Cart cleared")
