import pytest
from buyer_registry.main import app
from buyer_registry.services.shares import ShareStore

@pytest.fixture(autouse=True)
def share_store():
    """Fresh store per test so grants never leak between tests."""
    store = ShareStore()
    app.state.share_store = store
    yield store
