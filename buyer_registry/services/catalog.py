from buyer_registry.data.homes import HOMES
from buyer_registry.data.wishlists import WISHLIST_SNAPSHOTS, WISHLIST_MATCH_SUMMARIES
from buyer_registry.models.home import Home
from buyer_registry.models.wishlist import WishlistSnapshot, WishlistMatchSummary

_homes = {home.id: home for home in HOMES}
_snapshots = {snapshot.id: snapshot for snapshot in WISHLIST_SNAPSHOTS}


def get_home(home_id: str) -> Home | None:
    return _homes.get(home_id)


def get_wishlist_snapshot(wishlist_id: str) -> WishlistSnapshot | None:
    return _snapshots.get(wishlist_id)


def get_wishlist_match_summary(wishlist_id: str) -> list[WishlistMatchSummary]:
    return list(WISHLIST_MATCH_SUMMARIES.get(wishlist_id, []))
