import random
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from closet.core.config import settings
from closet.services import catalog
from closet.services.suggest import SuggestConfig, SuggestionResult, suggest_outfit


def suggest_config() -> SuggestConfig:
    return SuggestConfig(
        base_per_slot=settings.SUGGEST_BASE_PER_SLOT,
        jitter_span=settings.SUGGEST_JITTER_SPAN,
        confidence_cap=settings.SUGGEST_CONFIDENCE_CAP,
        shortlist_size=settings.SUGGEST_SHORTLIST_SIZE,
    )


async def suggest_for_user(
    session: AsyncSession,
    user_id: str,
    occasion: str,
    weather: str,
    rng: Optional[random.Random] = None,
) -> SuggestionResult:
    window = settings.SUGGEST_RECENT_WINDOW_DAYS
    items = await catalog.list_items(session, user_id)
    history = await catalog.recent_history(session, user_id, window)
    return suggest_outfit(
        occasion,
        weather,
        items,
        history,
        window,
        rng=rng,
        config=suggest_config(),
    )
