from typing import Dict, Optional

from pydantic import BaseModel

from closet.schemas.items import ItemOut


class OutfitSuggestIn(BaseModel):
    occasion: Optional[str] = None
    weather: Optional[str] = None
    seed: Optional[int] = None


class OutfitSuggestOut(BaseModel):
    # slot name -> item; absent slots are omitted
    suggestion: Dict[str, ItemOut]
    confidence_score: int
    status: str
    message: Optional[str] = None
    occasion: str
    weather: str
