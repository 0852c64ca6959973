from buyer_registry.services.catalog import get_wishlist_match_summary, get_wishlist_snapshot
from buyer_registry.services.wishlists import (
    build_new_match_copy,
    build_supply_snapshot,
    build_wishlist_view,
    clamp_score,
    compute_weighted_fit,
)

def test_buyer_view_is_aggregate_only():
    snapshot = get_wishlist_snapshot("wishlist-1")
    view = build_wishlist_view(snapshot, get_wishlist_match_summary("wishlist-1"), "buyer")
    assert view["homes"] == []
    assert view["restricted"] is True
    assert view["message"]
    assert view["matchCount"] == 27
    assert view["topFit"] == {"homeId": "home-100", "score": 92}

def test_seller_and_agent_views_are_itemized():
    snapshot = get_wishlist_snapshot("wishlist-1")
    summaries = get_wishlist_match_summary("wishlist-1")
    for role in ("seller", "agent"):
        view = build_wishlist_view(snapshot, summaries, role)
        assert view["restricted"] is False
        assert [home["alias"] for home in view["homes"]] == ["Evergreen Terrace Home", "Aquarius Villas 1702"]
        assert view["homes"][1]["priceBand"] == "$1.18M - $1.26M"

def test_other_roles_get_aggregate_only():
    snapshot = get_wishlist_snapshot("wishlist-1")
    view = build_wishlist_view(snapshot, get_wishlist_match_summary("wishlist-1"), "mortgage")
    assert view["restricted"] is True

def test_missing_summaries_yield_empty_itemized_list():
    assert get_wishlist_match_summary("wishlist-2") == []
    view = build_wishlist_view(get_wishlist_snapshot("wishlist-2"), [], "agent")
    assert view["homes"] == []

def test_new_match_copy_clamps_values():
    assert build_new_match_copy("Port Moody", 27, 92) == (
        "27 homes fit your wishlist in Port Moody (top fit 92%). "
        "Owners decide what to share. Update your wishlist to improve fit."
    )
    assert build_new_match_copy("Vancouver", -4, 140).startswith("0 homes fit your wishlist in Vancouver (top fit 100%)")
    assert "(top fit 0%)" in build_new_match_copy("Vancouver", 1, -3)
    assert "(top fit 93%)" in build_new_match_copy("Vancouver", 1, 92.5)

def test_supply_snapshot_includes_headline():
    view = build_supply_snapshot(get_wishlist_snapshot("wishlist-2"))
    assert view["matchCount"] == 11
    assert view["newSince"] == "2024-01-11T00:00:00.000Z"
    assert view["headline"].startswith("11 homes fit your wishlist in Vancouver (top fit 88%)")
    assert "fit" not in view

def test_supply_snapshot_includes_fit_breakdown():
    view = build_supply_snapshot(get_wishlist_snapshot("wishlist-1"))
    fit = view["fit"]
    assert fit["locationScore"] == 96
    assert fit["price"] == {"withinBudget": True, "delta": -35000}
    # 96 * .45 + 88 * .30 + 84 * .25 = 90.6
    assert fit["weightedFit"] == 91

def test_weighted_fit_uses_location_features_lifestyle_weights():
    assert compute_weighted_fit(100, 100, 100) == 100
    assert compute_weighted_fit(0, 0, 0) == 0
    assert compute_weighted_fit(100, 0, 0) == 45
    assert compute_weighted_fit(0, 100, 0) == 30
    assert compute_weighted_fit(0, 0, 100) == 25

def test_weighted_fit_clamps_component_scores():
    assert clamp_score(150) == 100
    assert clamp_score(-10) == 0
    assert clamp_score(72.5) == 73
    # 100 * .45 + 0 * .30 + 50 * .25 = 57.5, rounded half up
    assert compute_weighted_fit(150, -10, 50) == 58

def test_weighted_fit_treats_non_finite_scores_as_zero():
    assert clamp_score(float("nan")) == 0
    assert clamp_score(float("inf")) == 0
    assert clamp_score(float("-inf")) == 0
    assert compute_weighted_fit(float("nan"), 100, float("inf")) == 30

def test_weighted_fit_is_zero_over_budget():
    assert compute_weighted_fit(100, 100, 100, within_budget=False) == 0
    assert compute_weighted_fit(96, 88, 84, within_budget=True) == 91
