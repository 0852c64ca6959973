"""Decide how much of a home a requester may see.

Three outcomes: full access (owner acting as seller, or an agent holding the
manage-homes capability), scoped access (buyer with an active grant) or denial
with a reason.
"""

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel
from structlog import get_logger

from buyer_registry.config import settings
from buyer_registry.dependencies.auth import AuthContext
from buyer_registry.models.home import Home
from buyer_registry.services.shares import FULL_SCOPE, ShareStore

logger = get_logger()


class AccessOutcome(str, Enum):
    FULL = "full"
    SCOPED = "scoped"
    DENIED = "denied"


class DenialReason(str, Enum):
    UNAUTHENTICATED = "unauthenticated"
    ROLE_NOT_PERMITTED = "role_not_permitted"
    NO_GRANT = "no_grant"
    GRANT_EXPIRED = "grant_expired"


class AccessDecision(BaseModel):
    outcome: AccessOutcome
    scope: dict[str, bool] = {}
    reason: DenialReason | None = None
    share_id: str | None = None

    @property
    def allowed(self) -> bool:
        return self.outcome is not AccessOutcome.DENIED

    @classmethod
    def full(cls) -> "AccessDecision":
        return cls(outcome=AccessOutcome.FULL, scope=dict(FULL_SCOPE))

    @classmethod
    def denied(cls, reason: DenialReason) -> "AccessDecision":
        return cls(outcome=AccessOutcome.DENIED, reason=reason)


def can_manage_home(auth: AuthContext | None, home: Home, capability: str | None = None) -> bool:
    if auth is None:
        return False
    capability = capability or settings.MANAGE_HOMES_CAPABILITY
    if auth.role == "seller" and auth.user_id == home.owner_id:
        return True
    return auth.role == "agent" and auth.has_scope(capability)


def resolve_home_access(
    auth: AuthContext | None,
    home: Home,
    store: ShareStore,
    now: datetime | None = None,
    capability: str | None = None,
) -> AccessDecision:
    if auth is None:
        return AccessDecision.denied(DenialReason.UNAUTHENTICATED)

    if can_manage_home(auth, home, capability):
        return AccessDecision.full()

    if auth.role != "buyer":
        logger.info("Shared home access denied", home_id=home.id, user_id=auth.user_id, role=auth.role)
        return AccessDecision.denied(DenialReason.ROLE_NOT_PERMITTED)

    share = store.find_by_home_and_buyer(home.id, auth.user_id)
    if share is None:
        return AccessDecision.denied(DenialReason.NO_GRANT)

    if share.is_expired(now or datetime.now(timezone.utc)):
        logger.info("Shared home grant expired", home_id=home.id, share_id=share.id)
        return AccessDecision.denied(DenialReason.GRANT_EXPIRED)

    return AccessDecision(outcome=AccessOutcome.SCOPED, scope=dict(share.scope), share_id=share.id)
