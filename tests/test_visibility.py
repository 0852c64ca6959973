from datetime import datetime, timedelta, timezone
from buyer_registry.dependencies.auth import AuthContext, parse_scopes
from buyer_registry.models.home import Home
from buyer_registry.services.catalog import get_home
from buyer_registry.services.projection import project_home
from buyer_registry.services.shares import ShareStore
from buyer_registry.services.visibility import AccessOutcome, DenialReason, can_manage_home, resolve_home_access

HOME = get_home("home-100")
NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)

def _auth(user_id, role, scopes=""):
    return AuthContext(user_id=user_id, role=role, scopes=parse_scopes(scopes))

def test_parse_scopes_accepts_spaces_and_commas():
    assert parse_scopes("homes:manage, listings:read  extra") == {"homes:manage", "listings:read", "extra"}
    assert parse_scopes(None) == frozenset()
    assert parse_scopes("  ") == frozenset()

def test_unauthenticated_is_denied():
    decision = resolve_home_access(None, HOME, ShareStore(), NOW)
    assert decision.outcome is AccessOutcome.DENIED
    assert decision.reason is DenialReason.UNAUTHENTICATED

def test_owner_seller_gets_full_access_without_grant():
    decision = resolve_home_access(_auth("seller-123", "seller"), HOME, ShareStore(), NOW)
    assert decision.outcome is AccessOutcome.FULL
    assert decision.scope == {"address": True, "photos": True, "profile": True}

def test_non_owner_seller_is_denied():
    decision = resolve_home_access(_auth("seller-456", "seller"), HOME, ShareStore(), NOW)
    assert decision.reason is DenialReason.ROLE_NOT_PERMITTED

def test_agent_needs_manage_capability():
    store = ShareStore()
    assert resolve_home_access(_auth("agent-7", "agent", "homes:manage"), HOME, store, NOW).outcome is AccessOutcome.FULL
    denied = resolve_home_access(_auth("agent-8", "agent", "listings:read"), HOME, store, NOW)
    assert denied.reason is DenialReason.ROLE_NOT_PERMITTED
    assert can_manage_home(_auth("agent-9", "agent", "custom:cap"), HOME, capability="custom:cap")

def test_other_roles_are_denied_even_with_grant():
    store = ShareStore()
    store.create(HOME.id, "m1", {"photos": True})
    decision = resolve_home_access(_auth("m1", "mortgage"), HOME, store, NOW)
    assert decision.reason is DenialReason.ROLE_NOT_PERMITTED

def test_buyer_without_grant_is_denied():
    decision = resolve_home_access(_auth("b1", "buyer"), HOME, ShareStore(), NOW)
    assert decision.reason is DenialReason.NO_GRANT

def test_buyer_with_active_grant_gets_scope():
    store = ShareStore()
    share = store.create(HOME.id, "b1", {"photos": True}, NOW + timedelta(hours=1))
    decision = resolve_home_access(_auth("b1", "buyer"), HOME, store, NOW)
    assert decision.outcome is AccessOutcome.SCOPED
    assert decision.scope == {"photos": True}
    assert decision.share_id == share.id

def test_expired_grant_is_denied_even_when_fully_permissive():
    store = ShareStore()
    store.create(HOME.id, "b1", {"photos": True, "address": True, "profile": True}, NOW - timedelta(seconds=1))
    decision = resolve_home_access(_auth("b1", "buyer"), HOME, store, NOW)
    assert decision.outcome is AccessOutcome.DENIED
    assert decision.reason is DenialReason.GRANT_EXPIRED
    # expiring exactly now is not in the future
    store.upsert(HOME.id, "b1", {"scope": {"photos": True}, "expires_at": NOW})
    assert resolve_home_access(_auth("b1", "buyer"), HOME, store, NOW).reason is DenialReason.GRANT_EXPIRED

def test_grant_for_other_home_does_not_apply():
    store = ShareStore()
    store.create("home-210", "b1", {"photos": True})
    assert resolve_home_access(_auth("b1", "buyer"), HOME, store, NOW).reason is DenialReason.NO_GRANT

def test_full_projection_includes_everything():
    payload = project_home(HOME, {"address": True, "photos": True, "profile": True})
    assert payload["address"] == "123 Seaview Drive, Port Moody, BC"
    assert payload["featureSummary"].startswith("Three-level end unit")
    assert payload["photos"] == [
        {"id": "home-100-photo-1", "url": "https://cdn.example.com/homes/home-100/1.jpg"},
        {"id": "home-100-photo-2", "url": "https://cdn.example.com/homes/home-100/2.jpg"},
    ]

def test_empty_scope_projection_keeps_structure_only():
    payload = project_home(HOME, {})
    assert payload == {
        "id": "home-100",
        "type": "townhouse",
        "beds": 3,
        "baths": 2,
        "photos": [],
        "address": {"area": "Seaview", "city": "Port Moody"},
    }

def test_projection_keeps_fractional_baths():
    half_bath_home = HOME.model_copy(update={"baths": 2.5})
    assert project_home(half_bath_home, {})["baths"] == 2.5
    assert Home(**{**HOME.model_dump(), "baths": 1.5}).baths == 1.5
    assert HOME.baths == 2

def test_catalog_lookup_exposes_owner_and_misses_unknown_home():
    assert HOME.owner_id == "seller-123"
    assert get_home("home-999") is None
