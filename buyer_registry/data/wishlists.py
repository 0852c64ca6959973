from buyer_registry.models.wishlist import WishlistSnapshot, WishlistMatchSummary

WISHLIST_SNAPSHOTS = [
    WishlistSnapshot(
        id="wishlist-1",
        match_count=27,
        top_fit={"home_id": "home-100", "score": 92},
        new_since="2024-01-18T00:00:00.000Z",
        area="Port Moody",
        fit={
            "location_score": 96,
            "features_score": 88,
            "lifestyle_score": 84,
            "within_budget": True,
            "price_delta": -35000,
        },
    ),
    WishlistSnapshot(
        id="wishlist-2",
        match_count=11,
        top_fit={"home_id": "home-210", "score": 88},
        new_since="2024-01-11T00:00:00.000Z",
        area="Vancouver",
    ),
]

# Itemized matches exist for wishlist-1 only
WISHLIST_MATCH_SUMMARIES = {
    "wishlist-1": [
        WishlistMatchSummary(
            id="home-100",
            alias="Evergreen Terrace Home",
            match_percent=92,
            area="Port Moody",
            price_band="$1.05M - $1.18M",
        ),
        WishlistMatchSummary(
            id="home-210",
            alias="Aquarius Villas 1702",
            match_percent=81,
            area="Vancouver",
            price_band="$1.18M - $1.26M",
        ),
    ],
}
