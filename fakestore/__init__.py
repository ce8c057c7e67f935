"""Test harness for the public Fake Store REST API."""
from fakestore.client import FakeStoreApi
from fakestore.models import Product, ProductUpdate, ProductList

__all__ = ["FakeStoreApi", "Product", "ProductUpdate", "ProductList"]
