from pydantic import BaseModel
from typing import Optional

class TopFit(BaseModel):
    home_id: str
    score: float

class FitBreakdown(BaseModel):
    location_score: float
    features_score: float
    lifestyle_score: float
    within_budget: bool = True
    # positive when over budget
    price_delta: float = 0

class WishlistSnapshot(BaseModel):
    id: str
    match_count: int
    top_fit: TopFit
    new_since: str
    area: Optional[str] = None
    fit: Optional[FitBreakdown] = None

class WishlistMatchSummary(BaseModel):
    id: str
    alias: str
    match_percent: float
    area: str
    price_band: str
