import os
import sys
import random
import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from storefront.extensions import StorefrontServices
from storefront.models import Product
from storefront.store import Store


def make_product(product_id, **overrides):
    data = {
        "Id": product_id,
        "title": f"Product {product_id}",
        "description": "A product",
        "category": "Electronics",
        "price": 10.0,
        "rating": 4.0,
        "reviewCount": 10,
        "images": [f"https://img.test/{product_id}.jpg"],
        "inStock": True,
    }
    data.update(overrides)
    return Product.model_validate(data)


@pytest.fixture
def catalog_products():
    return [
        make_product(1, title="Noise Cancelling Headphones", category="Electronics", price=80.0, rating=4.6, dateAdded="2024-03-01T00:00:00Z"),
        make_product(2, title="budget earbuds", category="Electronics", price=25.0, rating=3.5, inStock=False, dateAdded="2024-05-01T00:00:00Z"),
        make_product(3, title="Smart Speaker", category="Electronics", price=120.0, rating=4.2, originalPrice=150.0, discount=20, dateAdded="2024-01-01T00:00:00Z"),
        make_product(4, title="Tablet Stand", category="electronics", price=15.0, rating=4.8, description="Aluminium stand for tablets"),
        make_product(5, title="Linen Shirt", category="Clothing", price=45.0, rating=4.1, originalPrice=60.0, dateAdded="2024-06-01T00:00:00Z"),
        make_product(6, title="Wool Socks", category="Clothing", price=9.5, rating=4.9, description="Warm socks for headphone lovers"),
        make_product(7, title="Chef Knife", category="Home & Kitchen", price=70.0, rating=3.9, dateAdded="2023-12-01T00:00:00Z"),
        make_product(8, title="Espresso Cups", category="Home & Kitchen", price=30.0, rating=4.4, inStock=False, originalPrice=36.0),
    ]


@pytest.fixture
def store(catalog_products):
    return Store(products=catalog_products)


@pytest.fixture
def services(store):
    return StorefrontServices(store, rng=random.Random(1234))


@pytest.fixture(scope='session')
def app_instance():
    os.environ.setdefault('APP_ENV', 'testing')
    from storefront import create_app
    from storefront.config import TestingConfig
    app = create_app(TestingConfig)
    app.config.update(TESTING=True)
    return app


@pytest.fixture(scope='function')
def app(app_instance):
    with app_instance.app_context():
        app_instance.extensions["storefront"].store.reset()
        yield app_instance


@pytest.fixture(scope='function')
def client(app):
    return app.test_client()
