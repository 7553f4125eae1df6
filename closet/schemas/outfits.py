from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class OutfitCreate(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    item_ids: List[int]
    occasion: Optional[str] = None
    weather: Optional[str] = None


class OutfitItemOut(BaseModel):
    item_id: int
    slot: str
    position: int = 0


class OutfitOut(BaseModel):
    id: int
    name: str
    occasion: Optional[str] = None
    weather: Optional[str] = None
    item_ids: List[int]
    items: List[OutfitItemOut]
    created_at: Optional[str] = None


class HistoryIn(BaseModel):
    item_ids: List[int] = Field(min_length=1)
    outfit_id: Optional[int] = None
    occasion: Optional[str] = None
    weather: Optional[str] = None


class HistoryOut(BaseModel):
    id: int
    item_ids: List[int]
    outfit_id: Optional[int] = None
    occasion: Optional[str] = None
    weather: Optional[str] = None
    worn_date: datetime
