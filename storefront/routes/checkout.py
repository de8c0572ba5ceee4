from flask import Blueprint, request, current_app
from flask_limiter.util import get_remote_address
from storefront.extensions import get_services, limiter
from storefront.metrics import get_metrics
from storefront.schemas import CheckoutRequest, QuoteRequest
from storefront.services.exceptions import InvalidArgument
from storefront.utils import ok, error, validate_schema
from storefront.version import API_PREFIX

checkout_bp = Blueprint("checkout", __name__, url_prefix=f"{API_PREFIX}/checkout")


@checkout_bp.route("/shipping-options", methods=["GET"])
def shipping_options():
    return ok({"options": get_services().checkout.shipping_options()})


@checkout_bp.route("/quote", methods=["POST"])
@validate_schema(QuoteRequest)
def quote():
    shipping_method = request.validated_data.shipping_method
    return ok({"totals": get_services().checkout.quote(shipping_method)})


@checkout_bp.route("", methods=["POST"])
@limiter.limit(
    lambda: current_app.config["CHECKOUT_LIMIT_PER_IP"],
    key_func=get_remote_address,
    error_message="Too many checkout attempts, rate limit exceeded",
)
@validate_schema(CheckoutRequest)
def place_order():
    """Place an order from the active cart items and clear the cart.
    ---
    tags:
      - Checkout
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          required: [shippingAddress, payment]
          properties:
            shippingMethod:
              type: string
              enum: [standard, express, overnight]
            shippingAddress:
              type: object
              properties:
                firstName: {type: string}
                lastName: {type: string}
                email: {type: string}
                phone: {type: string}
                address: {type: string}
                city: {type: string}
                state: {type: string}
                zipCode: {type: string}
            payment:
              type: object
              properties:
                cardNumber: {type: string}
                expiryDate: {type: string, example: "12/29"}
                cvv: {type: string}
                cardholderName: {type: string}
    responses:
      201:
        description: The created order; only the card's last four digits are kept
      400:
        description: Validation failed or the cart is empty
      429:
        description: Too many checkout attempts
    """
    data = request.validated_data
    current_app.logger.info({
        "event": "checkout",
        "email": data.shipping_address.email,
        "shipping_method": data.shipping_method,
    })
    try:
        order = get_services().checkout.place_order(
            data.shipping_address.model_dump(by_alias=True),
            data.payment.card_number,
            data.shipping_method,
        )
    except InvalidArgument as e:
        return error(str(e), status=400)
    get_metrics().orders_placed.labels(data.shipping_method).inc()
    return ok({"order": order.to_dict()}, message="Order placed successfully", status=201)
