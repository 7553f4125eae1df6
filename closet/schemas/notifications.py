from typing import Any, Dict, Optional
from pydantic import BaseModel


class DailyOutfitIn(BaseModel):
    weather: str
    occasion: Optional[str] = None


class NotificationOut(BaseModel):
    title: str
    body: str
    channel: Optional[str] = None
    data: Dict[str, Any] = {}
