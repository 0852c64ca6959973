from httpx import ASGITransport, AsyncClient
from buyer_registry.main import app

SELLER = {"x-user-id": "seller-123", "x-user-role": "seller"}
OTHER_SELLER = {"x-user-id": "seller-456", "x-user-role": "seller"}
AGENT = {"x-user-id": "agent-7", "x-user-role": "agent", "x-user-scopes": "listings:read homes:manage"}
AGENT_WITHOUT_CAPABILITY = {"x-user-id": "agent-8", "x-user-role": "agent", "x-user-scopes": "listings:read"}
BUYER = {"x-user-id": "b1", "x-user-role": "buyer"}
MORTGAGE = {"x-user-id": "m1", "x-user-role": "mortgage"}

def make_client(**transport_options) -> AsyncClient:
    return AsyncClient(transport=ASGITransport(app=app, **transport_options), base_url="http://test")
