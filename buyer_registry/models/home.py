from pydantic import BaseModel
from typing import List
from buyer_registry.models.trend import Number

class Photo(BaseModel):
    id: str
    cdn_url: str

class Home(BaseModel):
    id: str
    owner_id: str
    type: str
    beds: int
    baths: Number
    feature_summary: str
    photos: List[Photo] = []
    full_address: str
    neighbourhood: str
    city: str
