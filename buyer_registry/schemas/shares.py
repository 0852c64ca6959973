from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, List, Optional
from datetime import datetime

class ShareCreateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    buyer_id: str = Field(alias="buyerId", min_length=1)
    scope: Optional[Any] = None
    expires_at: Optional[datetime] = Field(default=None, alias="expiresAt")

class ShareUpdateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    scope: Optional[Any] = None
    expires_at: Optional[datetime] = Field(default=None, alias="expiresAt")

class ShareResponse(BaseModel):
    id: str
    home_id: str
    buyer_id: str
    scope: Dict[str, bool]
    created_at: datetime
    updated_at: datetime
    expires_at: Optional[datetime] = None

class ShareListResponse(BaseModel):
    total: int
    items: List[ShareResponse]
