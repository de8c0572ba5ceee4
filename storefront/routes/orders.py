from flask import Blueprint, request
from storefront.extensions import get_services
from storefront.schemas import OrderListQuery, StatusUpdateRequest
from storefront.utils import ok, not_found, validate_query, validate_schema
from storefront.version import API_PREFIX

orders_bp = Blueprint("orders", __name__, url_prefix=f"{API_PREFIX}/orders")


@orders_bp.route("", methods=["GET"])
@validate_query(OrderListQuery)
def order_history():
    query = request.validated_query
    orders = get_services().orders.filter_orders(query.q, query.status)
    orders.sort(key=lambda o: o.date, reverse=True)
    return ok({"orders": [o.to_dict() for o in orders]})


@orders_bp.route("/<int:order_id>", methods=["GET"])
def get_order(order_id):
    order = get_services().orders.get_by_id(order_id)
    if not order:
        return not_found("Order not found")
    return ok({"order": order.to_dict()})


@orders_bp.route("/<int:order_id>/timeline", methods=["GET"])
def order_timeline(order_id):
    orders = get_services().orders
    if not orders.get_by_id(order_id):
        return not_found("Order not found")
    return ok({"timeline": [t.to_dict() for t in orders.get_order_timeline(order_id)]})


@orders_bp.route("/<int:order_id>/status", methods=["POST"])
@validate_schema(StatusUpdateRequest)
def update_order_status(order_id):
    """Move an order to a status and record it on the timeline.
    ---
    tags:
      - Orders
    parameters:
      - {name: order_id, in: path, type: integer, required: true}
      - in: body
        name: body
        required: true
        schema:
          type: object
          properties:
            status:
              type: string
              enum: [pending, processing, shipped, delivered]
    responses:
      200:
        description: The updated order
      404:
        description: Order not found
    """
    status = request.validated_data.status.value
    order = get_services().orders.update_status(order_id, status)
    if not order:
        return not_found("Order not found")
    return ok({"order": order.to_dict()}, message=f"Order status updated to {status}")


@orders_bp.route("/<int:order_id>/reorder", methods=["POST"])
def reorder(order_id):
    items = get_services().checkout.reorder(order_id)
    if items is None:
        return not_found("Order not found")
    return ok({"items": [i.to_dict() for i in items]}, message="Items added to cart")
