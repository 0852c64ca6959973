import re
from fastapi import Header, Request
from pydantic import BaseModel
from structlog import get_logger
from buyer_registry.errors import Unauthenticated
from buyer_registry.services.shares import ShareStore

logger = get_logger()

KNOWN_ROLES = ("buyer", "seller", "agent", "mortgage")
_SCOPE_SEPARATOR = re.compile(r"[\s,]+")

class AuthContext(BaseModel):
    user_id: str
    role: str
    scopes: frozenset[str] = frozenset()

    def has_scope(self, scope: str) -> bool:
        return scope in self.scopes

def parse_scopes(raw: str | None) -> frozenset[str]:
    """Split a space- or comma-separated capability list."""
    if not raw:
        return frozenset()
    return frozenset(part for part in _SCOPE_SEPARATOR.split(raw.strip()) if part)

async def get_auth_context(
    x_user_id: str | None = Header(default=None),
    x_user_role: str | None = Header(default=None),
    x_user_scopes: str | None = Header(default=None),
) -> AuthContext | None:
    """Build the caller identity from the identity headers.
    Identity is asserted by the upstream gateway; no credential check happens here.
    Returns None when the id or role header is missing.
    """
    user_id = (x_user_id or "").strip()
    role = (x_user_role or "").strip().lower()
    if not user_id or not role:
        return None
    if role not in KNOWN_ROLES:
        logger.warning("Unknown role on request", user_id=user_id, role=role)
    return AuthContext(user_id=user_id, role=role, scopes=parse_scopes(x_user_scopes))

async def require_auth_context(
    x_user_id: str | None = Header(default=None),
    x_user_role: str | None = Header(default=None),
    x_user_scopes: str | None = Header(default=None),
) -> AuthContext:
    auth = await get_auth_context(x_user_id, x_user_role, x_user_scopes)
    if auth is None:
        raise Unauthenticated("Unauthenticated")
    return auth

def get_share_store(request: Request) -> ShareStore:
    return request.app.state.share_store
