"""
Live scenarios against the public Fake Store API.

These depend on the service's current data (product 5, four categories),
so they carry the e2e marker; deselect with -m "not e2e" when offline.
"""
import pytest

from fakestore.models import Product, ProductList, ProductUpdate
from tests.utils.api_helpers import (
    PRODUCTS_PATH,
    KNOWN_PRODUCT,
    KNOWN_PRODUCT_ID,
    KNOWN_CATEGORY_COUNT,
    product_path,
    new_product_payload,
    product_update_payload,
)


@pytest.mark.e2e
class TestProducts:
    """GET/POST/PUT on /products."""

    def test_get_all_products(self, api):
        data = ProductList.validate_python(api.fetch(PRODUCTS_PATH))

        assert len(data) > 0
        assert data[0].id is not None

    def test_get_specific_product(self, api):
        data = Product.model_validate(api.fetch(product_path(KNOWN_PRODUCT_ID)))

        assert data.id == KNOWN_PRODUCT["id"]
        assert data.title == KNOWN_PRODUCT["title"]
        assert data.price == KNOWN_PRODUCT["price"]
        assert data.description == KNOWN_PRODUCT["description"]

    def test_get_all_unique_categories(self, api):
        data = ProductList.validate_python(api.fetch(PRODUCTS_PATH))

        unique_categories = {p.category for p in data}
        assert len(unique_categories) == KNOWN_CATEGORY_COUNT, f"Categories: {sorted(unique_categories)}"

    def test_create_product(self, api):
        # The API does not reject missing fields, so only the happy path is checked here
        request_data = Product.model_validate(new_product_payload())

        api.method = "POST"
        api.body = request_data.model_dump_json()

        data = Product.model_validate(api.fetch(PRODUCTS_PATH))

        assert data.category == request_data.category
        assert data.id != request_data.id
        assert data.title == request_data.title
        assert data.price == request_data.price

    def test_update_product(self, api):
        update_data = ProductUpdate.model_validate(product_update_payload())

        api.method = "PUT"
        api.body = update_data.model_dump_json(exclude_none=True)

        data = ProductUpdate.model_validate(api.fetch(product_path(KNOWN_PRODUCT_ID)))

        assert data.title == update_data.title
        assert data.price == update_data.price
        assert data.category == update_data.category
        assert data.id == KNOWN_PRODUCT_ID
