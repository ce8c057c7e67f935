import pytest

pytest.register_assert_rewrite("fakestore.client")

from fakestore.client import FakeStoreApi


@pytest.fixture
def api():
    """Fresh client per test; no configuration leaks between scenarios."""
    return FakeStoreApi()
