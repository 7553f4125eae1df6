from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

Category = Literal["tops", "bottoms", "shoes", "accessories"]


class ItemCreate(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    category: Category
    image_url: Optional[str] = None
    colors: Optional[List[str]] = None
    seasons: Optional[List[str]] = None
    occasions: Optional[List[str]] = None


class ItemUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    category: Optional[Category] = None
    image_url: Optional[str] = None
    colors: Optional[List[str]] = None
    seasons: Optional[List[str]] = None
    occasions: Optional[List[str]] = None


class ItemOut(BaseModel):
    id: int
    name: str
    category: str
    image_url: Optional[str] = None
    colors: List[str] = []
    seasons: List[str] = []
    occasions: List[str] = []
    wear_count: int = 0
    last_worn: Optional[datetime] = None
