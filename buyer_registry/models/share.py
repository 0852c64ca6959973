from pydantic import BaseModel
from typing import Dict, Optional
from datetime import datetime

class ShareGrant(BaseModel):
    id: str
    home_id: str
    buyer_id: str
    scope: Dict[str, bool] = {}
    created_at: datetime
    updated_at: datetime
    expires_at: Optional[datetime] = None

    def is_expired(self, now: datetime) -> bool:
        return self.expires_at is not None and self.expires_at <= now
