from fastapi import APIRouter, Depends
from structlog import get_logger
from buyer_registry.dependencies.auth import AuthContext, require_auth_context
from buyer_registry.errors import NotFound
from buyer_registry.services.catalog import get_wishlist_snapshot, get_wishlist_match_summary
from buyer_registry.services.wishlists import build_supply_snapshot, build_wishlist_view

logger = get_logger()
router = APIRouter(prefix="/wishlists", tags=["wishlists"])

def _snapshot_or_404(wishlist_id: str):
    snapshot = get_wishlist_snapshot(wishlist_id)
    if snapshot is None:
        raise NotFound("Wishlist not found", wishlistId=wishlist_id)
    return snapshot

@router.get("/{wishlist_id}/supply-snapshot")
async def supply_snapshot(wishlist_id: str, auth: AuthContext = Depends(require_auth_context)):
    snapshot = _snapshot_or_404(wishlist_id)
    logger.info("Fetched supply snapshot", wishlist_id=wishlist_id, user_id=auth.user_id)
    return build_supply_snapshot(snapshot)

@router.get("/{wishlist_id}/matched-homes")
async def matched_homes(wishlist_id: str, auth: AuthContext = Depends(require_auth_context)):
    snapshot = _snapshot_or_404(wishlist_id)
    view = build_wishlist_view(snapshot, get_wishlist_match_summary(wishlist_id), auth.role)
    logger.info("Fetched matched homes", wishlist_id=wishlist_id, user_id=auth.user_id, role=auth.role, restricted=view["restricted"])
    return view
