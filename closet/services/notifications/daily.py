import random
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from closet.core.config import settings
from closet.notifications.types import Notification
from closet.services import catalog
from closet.services.notifications.service import NotificationService
from closet.services.suggest import OutfitSuggestion, pick_daily_outfit
from closet.services.suggestions import suggest_config

WEATHER_SYMBOLS = {
    "cold": "❄️",
    "warm": "☀️",
    "rainy": "🌧️",
}
DEFAULT_SYMBOL = "☁️"


def build_daily_notification(user_id: str, suggestion: OutfitSuggestion, weather: str) -> Notification:
    names = [suggestion.top.name, suggestion.bottom.name, suggestion.shoes.name]
    return Notification(
        user_id=user_id,
        title=f"{WEATHER_SYMBOLS.get(weather, DEFAULT_SYMBOL)} Your Daily Outfit",
        body=f"Today's suggestion: {names[0]}, {names[1]}, and {names[2]}",
        channel="push",
        data={"url": "/", "outfit_items": [suggestion.top.id, suggestion.bottom.id, suggestion.shoes.id]},
    )


async def send_daily_outfit(
    session: AsyncSession,
    user_id: str,
    weather: str,
    occasion: Optional[str] = None,
    *,
    rng: Optional[random.Random] = None,
    service: Optional[NotificationService] = None,
) -> Notification:
    """Pick today's outfit and push it through the configured provider.

    Raises `IncompleteOutfit` when top, bottom and shoes can't all be filled.
    """
    window = settings.SUGGEST_RECENT_WINDOW_DAYS
    items = await catalog.list_items(session, user_id)
    history = await catalog.recent_history(session, user_id, window)
    suggestion = pick_daily_outfit(
        weather,
        items,
        history,
        occasion=occasion,
        recent_window_days=window,
        rng=rng,
        config=suggest_config(),
    )
    notification = build_daily_notification(user_id, suggestion, weather)
    (service or NotificationService()).send(notification)
    return notification
