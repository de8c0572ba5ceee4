from storefront.routes import (
    products_bp,
    cart_bp,
    wishlist_bp,
    orders_bp,
    checkout_bp,
)


def register_api_v1(app):
    """Register blueprint routes under the API version prefix."""
    app.register_blueprint(products_bp)
    app.register_blueprint(cart_bp)
    app.register_blueprint(wishlist_bp)
    app.register_blueprint(orders_bp)
    app.register_blueprint(checkout_bp)
