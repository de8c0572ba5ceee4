from flask import Blueprint, request
from storefront.extensions import get_services
from storefront.schemas import DealsQuery, LimitQuery, ProductListQuery, RecommendationQuery
from storefront.utils import ok, not_found, validate_query
from storefront.version import API_PREFIX

products_bp = Blueprint("products", __name__, url_prefix=f"{API_PREFIX}/products")


def _dump(products):
    return [p.to_dict() for p in products]


@products_bp.route("", methods=["GET"])
@validate_query(ProductListQuery)
def list_products():
    """Catalog listing with search, compound filters and a single sort key.
    ---
    tags:
      - Products
    parameters:
      - {name: q, in: query, type: string}
      - {name: category, in: query, type: string, default: all}
      - {name: min_price, in: query, type: number}
      - {name: max_price, in: query, type: number}
      - {name: rating, in: query, type: number}
      - {name: in_stock, in: query, type: boolean}
      - {name: on_sale, in: query, type: boolean}
      - name: sort
        in: query
        type: string
        enum: [price-low, price-high, rating, newest, name, discount]
    responses:
      200:
        description: Matching products and their count
      400:
        description: Invalid query parameters
    """
    query = request.validated_query
    products = get_services().catalog.filter_and_sort(
        filters=query.to_filters(),
        sort_by=query.sort,
        search_query=query.q,
    )
    return ok({"products": _dump(products), "count": len(products)})


@products_bp.route("/featured", methods=["GET"])
@validate_query(LimitQuery)
def featured_products():
    limit = request.validated_query.limit
    return ok({"products": _dump(get_services().catalog.get_featured(limit))})


@products_bp.route("/deals", methods=["GET"])
@validate_query(DealsQuery)
def deal_products():
    limit = request.validated_query.limit
    return ok({"products": _dump(get_services().catalog.get_deals(limit))})


@products_bp.route("/categories", methods=["GET"])
def list_categories():
    return ok({"categories": get_services().catalog.get_categories()})


@products_bp.route("/category/<string:category>", methods=["GET"])
def products_by_category(category):
    return ok({"products": _dump(get_services().catalog.get_by_category(category))})


@products_bp.route("/<int:product_id>", methods=["GET"])
def get_product(product_id):
    product = get_services().catalog.get_by_id(product_id)
    if not product:
        return not_found("Product not found")
    return ok({"product": product.to_dict()})


@products_bp.route("/<int:product_id>/recommendations", methods=["GET"])
@validate_query(RecommendationQuery)
def product_recommendations(product_id):
    """Products frequently bought with this one.
    ---
    tags:
      - Products
    parameters:
      - {name: product_id, in: path, type: integer, required: true}
      - {name: type, in: query, type: string, default: bought}
      - {name: limit, in: query, type: integer, default: 8}
    responses:
      200:
        description: Ranked recommendations, anchor excluded
      404:
        description: Product not found
    """
    catalog = get_services().catalog
    if not catalog.get_by_id(product_id):
        return not_found("Product not found")
    query = request.validated_query
    products = catalog.get_recommendations(product_id, query.type, query.limit)
    return ok({"products": _dump(products)})
