from flask import Blueprint, request
from storefront.extensions import get_services
from storefront.schemas import WishlistRequest
from storefront.utils import ok, validate_schema
from storefront.version import API_PREFIX

wishlist_bp = Blueprint("wishlist", __name__, url_prefix=f"{API_PREFIX}/wishlist")


def _dump(entries):
    return [e.to_dict() for e in entries]


@wishlist_bp.route("", methods=["GET"])
def list_wishlist():
    return ok({"items": _dump(get_services().wishlist.get_all())})


@wishlist_bp.route("/count", methods=["GET"])
def wishlist_count():
    return ok({"count": get_services().wishlist.get_wishlist_count()})


@wishlist_bp.route("/contains/<int:product_id>", methods=["GET"])
def wishlist_contains(product_id):
    return ok({"product_id": product_id, "in_wishlist": get_services().wishlist.is_in_wishlist(product_id)})


# InvalidArgument from the service is turned into a 400 by errors_bp
@wishlist_bp.route("/add", methods=["POST"])
@validate_schema(WishlistRequest)
def add_to_wishlist():
    items = get_services().wishlist.add_to_wishlist(request.validated_data.product_id)
    return ok({"items": _dump(items)}, message="Added to wishlist")


@wishlist_bp.route("/remove", methods=["POST"])
@validate_schema(WishlistRequest)
def remove_from_wishlist():
    items = get_services().wishlist.remove_from_wishlist(request.validated_data.product_id)
    return ok({"items": _dump(items)}, message="Removed from wishlist")


@wishlist_bp.route("/toggle", methods=["POST"])
@validate_schema(WishlistRequest)
def toggle_wishlist():
    product_id = request.validated_data.product_id
    in_wishlist = get_services().wishlist.toggle_wishlist(product_id)
    return ok({"product_id": product_id, "in_wishlist": in_wishlist})


@wishlist_bp.route("/clear", methods=["POST"])
def clear_wishlist():
    return ok({"items": _dump(get_services().wishlist.clear_wishlist())}, message="Wishlist cleared")
