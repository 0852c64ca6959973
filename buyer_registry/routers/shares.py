from fastapi import APIRouter, Depends, Response
from structlog import get_logger
from buyer_registry.dependencies.auth import AuthContext, require_auth_context, get_share_store
from buyer_registry.errors import Forbidden, NotFound
from buyer_registry.models.home import Home
from buyer_registry.schemas.shares import ShareCreateRequest, ShareUpdateRequest, ShareResponse, ShareListResponse
from buyer_registry.services.catalog import get_home
from buyer_registry.services.shares import ShareStore
from buyer_registry.services.visibility import DenialReason, can_manage_home

logger = get_logger()
router = APIRouter(prefix="/homes", tags=["shares"])

def _managed_home(home_id: str, auth: AuthContext) -> Home:
    home = get_home(home_id)
    if home is None:
        raise NotFound("Home not found", homeId=home_id)
    if not can_manage_home(auth, home):
        logger.warning("Share management denied", home_id=home_id, user_id=auth.user_id, role=auth.role)
        raise Forbidden("Only the owner or a managing agent can share this home", reason=DenialReason.ROLE_NOT_PERMITTED.value)
    return home

@router.get("/{home_id}/shares", response_model=ShareListResponse)
async def list_shares(home_id: str, auth: AuthContext = Depends(require_auth_context), store: ShareStore = Depends(get_share_store)):
    _managed_home(home_id, auth)
    shares = store.list_for_home(home_id)
    logger.info("Listed shares", home_id=home_id, user_id=auth.user_id, total=len(shares))
    return {"total": len(shares), "items": shares}

@router.post("/{home_id}/shares", response_model=ShareResponse, status_code=201)
async def share_home(home_id: str, data: ShareCreateRequest, auth: AuthContext = Depends(require_auth_context), store: ShareStore = Depends(get_share_store)):
    _managed_home(home_id, auth)
    share = store.upsert(home_id, data.buyer_id, data.model_dump(exclude_unset=True, exclude={"buyer_id"}))
    logger.info("Shared home", home_id=home_id, share_id=share.id, buyer_id=data.buyer_id, user_id=auth.user_id)
    return share

@router.patch("/{home_id}/shares/{share_id}", response_model=ShareResponse)
async def update_share(home_id: str, share_id: str, data: ShareUpdateRequest, auth: AuthContext = Depends(require_auth_context), store: ShareStore = Depends(get_share_store)):
    _managed_home(home_id, auth)
    share = store.update(home_id, share_id, data.model_dump(exclude_unset=True))
    if share is None:
        raise NotFound("Share not found", homeId=home_id, shareId=share_id)
    logger.info("Updated share", home_id=home_id, share_id=share_id, user_id=auth.user_id)
    return share

@router.delete("/{home_id}/shares/{share_id}", status_code=204)
async def revoke_share(home_id: str, share_id: str, auth: AuthContext = Depends(require_auth_context), store: ShareStore = Depends(get_share_store)):
    _managed_home(home_id, auth)
    if not store.delete(home_id, share_id):
        raise NotFound("Share not found", homeId=home_id, shareId=share_id)
    logger.info("Revoked share", home_id=home_id, share_id=share_id, user_id=auth.user_id)
    return Response(status_code=204)
