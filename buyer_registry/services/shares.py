from collections.abc import Mapping
from datetime import datetime, timezone
from structlog import get_logger
from buyer_registry.models.share import ShareGrant

logger = get_logger()

ALLOWED_SCOPE_KEYS = frozenset({"address", "profile", "photos"})
FULL_SCOPE = {"address": True, "photos": True, "profile": True}


def sanitize_scope(scope) -> dict:
    """Keep only allowed scope keys with truthy values, each normalized to True."""
    if not isinstance(scope, Mapping):
        return {}
    return {key: True for key, value in scope.items() if key in ALLOWED_SCOPE_KEYS and value}


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def normalize_expiry(value: datetime | None) -> datetime | None:
    """Coerce an expiry to an aware UTC instant; naive values are read as UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class ShareStore:
    """In-memory share grants keyed by id.

    At most one grant exists per (home, buyer); ``upsert`` is the entry point
    that keeps it that way.
    """

    def __init__(self):
        self._shares: dict[str, ShareGrant] = {}
        self._counter = 0

    def __len__(self) -> int:
        return len(self._shares)

    def create(self, home_id: str, buyer_id: str, scope=None, expires_at: datetime | None = None) -> ShareGrant:
        self._counter += 1
        now = _utcnow()
        record = ShareGrant(
            id=f"share-{self._counter}",
            home_id=home_id,
            buyer_id=buyer_id,
            scope=sanitize_scope(scope),
            created_at=now,
            updated_at=now,
            expires_at=normalize_expiry(expires_at),
        )
        self._shares[record.id] = record
        logger.info("Share created", share_id=record.id, home_id=home_id, buyer_id=buyer_id)
        return record

    def update(self, home_id: str, share_id: str, changes: dict) -> ShareGrant | None:
        """Apply ``changes`` (only the fields the caller set) to a grant.

        A missing ``scope`` keeps the stored scope. A missing or null
        ``expires_at`` clears the expiry.
        """
        existing = self.get(home_id, share_id)
        if existing is None:
            return None
        scope = sanitize_scope(changes["scope"]) if "scope" in changes else existing.scope
        updated = existing.model_copy(update={
            "scope": scope,
            "updated_at": _utcnow(),
            "expires_at": normalize_expiry(changes.get("expires_at")),
        })
        self._shares[share_id] = updated
        logger.info("Share updated", share_id=share_id, home_id=home_id)
        return updated

    def delete(self, home_id: str, share_id: str) -> bool:
        if self.get(home_id, share_id) is None:
            return False
        del self._shares[share_id]
        logger.info("Share deleted", share_id=share_id, home_id=home_id)
        return True

    def get(self, home_id: str, share_id: str) -> ShareGrant | None:
        share = self._shares.get(share_id)
        if share is None or share.home_id != home_id:
            return None
        return share

    def find_by_home_and_buyer(self, home_id: str, buyer_id: str) -> ShareGrant | None:
        for share in self._shares.values():
            if share.home_id == home_id and share.buyer_id == buyer_id:
                return share
        return None

    def list_for_home(self, home_id: str) -> list[ShareGrant]:
        return [share for share in self._shares.values() if share.home_id == home_id]

    def upsert(self, home_id: str, buyer_id: str, changes: dict) -> ShareGrant:
        """Update the grant for (home, buyer) with ``changes``, or create one.

        ``changes`` follows ``update``: an absent ``scope`` keeps the stored
        scope, an explicit null scope clears it.
        """
        existing = self.find_by_home_and_buyer(home_id, buyer_id)
        if existing is not None:
            return self.update(home_id, existing.id, changes)
        return self.create(home_id, buyer_id, changes.get("scope"), changes.get("expires_at"))

    def purge_expired(self, now: datetime | None = None) -> int:
        now = now or _utcnow()
        expired = [share_id for share_id, share in self._shares.items() if share.is_expired(now)]
        for share_id in expired:
            del self._shares[share_id]
        if expired:
            logger.info("Expired shares purged", count=len(expired))
        return len(expired)

    def reset(self) -> None:
        self._shares.clear()
        self._counter = 0
