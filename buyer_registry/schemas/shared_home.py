from pydantic import BaseModel
from typing import List, Optional, Union

class SharedPhoto(BaseModel):
    id: str
    url: str

class CoarseAddress(BaseModel):
    area: str
    city: str

class SharedHomeResponse(BaseModel):
    id: str
    type: str
    beds: int
    baths: int
    featureSummary: Optional[str] = None
    photos: List[SharedPhoto]
    address: Union[str, CoarseAddress]
    access: str
