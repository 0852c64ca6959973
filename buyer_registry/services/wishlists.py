import math
from buyer_registry.models.wishlist import FitBreakdown, WishlistSnapshot, WishlistMatchSummary

ITEMIZED_ROLES = ("seller", "agent")
RESTRICTED_MESSAGE = "Aggregate view only. Details unlock when owners share a Home Profile."
FIT_WEIGHTS = {"location": 0.45, "features": 0.30, "lifestyle": 0.25}


def build_new_match_copy(area: str, match_count: int, top_fit_percentage: float) -> str:
    """Headline for a wishlist that has new matching supply."""
    safe_match_count = max(0, match_count)
    # round half up, so 92.5 reads as 93
    safe_top_fit = int(max(0.0, min(100.0, float(top_fit_percentage))) + 0.5)
    return (
        f"{safe_match_count} homes fit your wishlist in {area} (top fit {safe_top_fit}%). "
        "Owners decide what to share. Update your wishlist to improve fit."
    )


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def clamp_score(score: float) -> int:
    """Bound a component score to 0..100; NaN and infinities count as 0."""
    if not math.isfinite(score):
        return 0
    return _round_half_up(min(100.0, max(0.0, float(score))))


def compute_weighted_fit(location_score: float, features_score: float, lifestyle_score: float, within_budget: bool = True) -> int:
    """Weighted 0..100 fit, location weighted highest. Over-budget homes score 0."""
    if not within_budget:
        return 0
    score = (
        clamp_score(location_score) * FIT_WEIGHTS["location"]
        + clamp_score(features_score) * FIT_WEIGHTS["features"]
        + clamp_score(lifestyle_score) * FIT_WEIGHTS["lifestyle"]
    )
    return _round_half_up(score)


def build_fit(fit: FitBreakdown) -> dict:
    return {
        "locationScore": fit.location_score,
        "featuresScore": fit.features_score,
        "lifestyleScore": fit.lifestyle_score,
        "price": {"withinBudget": fit.within_budget, "delta": fit.price_delta},
        "weightedFit": compute_weighted_fit(
            fit.location_score, fit.features_score, fit.lifestyle_score, fit.within_budget
        ),
    }


def build_aggregate(snapshot: WishlistSnapshot) -> dict:
    return {
        "id": snapshot.id,
        "matchCount": snapshot.match_count,
        "topFit": {"homeId": snapshot.top_fit.home_id, "score": snapshot.top_fit.score},
        "newSince": snapshot.new_since,
    }


def build_supply_snapshot(snapshot: WishlistSnapshot) -> dict:
    view = build_aggregate(snapshot)
    if snapshot.area:
        view["area"] = snapshot.area
        view["headline"] = build_new_match_copy(snapshot.area, snapshot.match_count, snapshot.top_fit.score)
    if snapshot.fit is not None:
        view["fit"] = build_fit(snapshot.fit)
    return view


def build_wishlist_view(snapshot: WishlistSnapshot, summaries: list[WishlistMatchSummary], role: str) -> dict:
    """Aggregate envelope, with itemized matches for seller and agent roles only."""
    view = build_aggregate(snapshot)
    if role not in ITEMIZED_ROLES:
        view.update({"homes": [], "restricted": True, "message": RESTRICTED_MESSAGE})
        return view
    view.update({
        "homes": [
            {
                "id": item.id,
                "alias": item.alias,
                "matchPercent": item.match_percent,
                "area": item.area,
                "priceBand": item.price_band,
            }
            for item in summaries
        ],
        "restricted": False,
    })
    return view
