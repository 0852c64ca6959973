from pydantic import BaseModel
from typing import List, Optional, Union

Number = Union[int, float]

class TrendPoint(BaseModel):
    period: str
    value: Number

class TrendRange(BaseModel):
    low: Number
    high: Number

class TrendMeta(BaseModel):
    """Optional metadata attached to a series; absent fields stay ``None``."""
    currency: Optional[str] = None
    yoy_change_pct: Optional[float] = None
    last_updated: Optional[str] = None
    coverage: Optional[str] = None
    licensed: bool = False
    precision: Optional[str] = None
    range: Optional[TrendRange] = None
    ingested_at: Optional[str] = None
    source_date: Optional[str] = None
    trend: List[TrendPoint] = []

class TrendSeries(BaseModel):
    provider: str
    geo_code: str
    geo_name: str
    property_type: str
    metric: str
    period: str
    value: Number
    meta: TrendMeta = TrendMeta()
