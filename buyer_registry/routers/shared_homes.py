from fastapi import APIRouter, Depends
from structlog import get_logger
from buyer_registry.dependencies.auth import AuthContext, get_auth_context, get_share_store
from buyer_registry.errors import Forbidden, NotFound, Unauthenticated
from buyer_registry.schemas.shared_home import SharedHomeResponse
from buyer_registry.services.catalog import get_home
from buyer_registry.services.projection import project_home
from buyer_registry.services.shares import ShareStore
from buyer_registry.services.visibility import DenialReason, resolve_home_access

logger = get_logger()
router = APIRouter(prefix="/shared/homes", tags=["shared-homes"])

_DENIAL_MESSAGES = {
    DenialReason.ROLE_NOT_PERMITTED: "Forbidden",
    DenialReason.NO_GRANT: "No share found",
    DenialReason.GRANT_EXPIRED: "Share expired",
}

@router.get("/{home_id}", response_model=SharedHomeResponse, response_model_exclude_none=True)
async def get_shared_home(home_id: str, auth: AuthContext | None = Depends(get_auth_context), store: ShareStore = Depends(get_share_store)):
    if auth is None:
        raise Unauthenticated("Unauthenticated")
    home = get_home(home_id)
    if home is None:
        raise NotFound("Home not found", homeId=home_id)
    decision = resolve_home_access(auth, home, store)
    if not decision.allowed:
        raise Forbidden(_DENIAL_MESSAGES[decision.reason], reason=decision.reason.value)
    payload = project_home(home, decision.scope)
    payload["access"] = decision.outcome.value
    logger.info("Served shared home", home_id=home_id, user_id=auth.user_id, access=decision.outcome.value)
    return payload
