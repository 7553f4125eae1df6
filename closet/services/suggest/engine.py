import logging
import random
from datetime import datetime, timezone
from typing import Optional, Sequence

from .scoring import (
    confidence_score,
    matches_occasion,
    matches_weather,
    partition_by_category,
    rank_items,
    recently_worn_ids,
    select_from_shortlist,
)
from .taxonomy import (
    CATEGORY_TO_SLOT,
    CORE_CATEGORIES,
    MESSAGE_EMPTY_WARDROBE,
    MESSAGE_LIMITED,
    MESSAGE_NO_MATCH,
)
from .types import HistoryEntry, OutfitSuggestion, SuggestConfig, SuggestionResult, WardrobeItem

logger = logging.getLogger(__name__)

STATUS_OK = "ok"
STATUS_NO_WARDROBE = "no_wardrobe"
STATUS_NO_MATCH = "no_match"
STATUS_PARTIAL = "partial_match"


class InvalidSuggestRequest(ValueError):
    """Occasion or weather missing, or a nonsensical history window."""


class IncompleteOutfit(LookupError):
    """The daily pick could not fill top, bottom and shoes."""


def _require(value: Optional[str], name: str) -> None:
    if value is None or not str(value).strip():
        raise InvalidSuggestRequest(f"{name}_required")


def suggest_outfit(
    occasion: str,
    weather: str,
    items: Sequence[WardrobeItem],
    recent_history: Sequence[HistoryEntry],
    recent_window_days: int = 7,
    *,
    rng: Optional[random.Random] = None,
    now: Optional[datetime] = None,
    config: Optional[SuggestConfig] = None,
) -> SuggestionResult:
    """Pick one item per slot for the given occasion and weather.

    Items worn within `recent_window_days` are excluded outright. Within each
    slot the candidates are ranked by `score_item` and one of the top
    `config.shortlist_size` is drawn from `rng`, so repeated calls vary unless
    the caller passes a seeded generator.

    Conditions that prevent an outfit (empty wardrobe, nothing matching, only
    one core slot fillable) come back as a result with an empty suggestion and
    an explanatory status/message. Only missing occasion/weather raise.
    """
    _require(occasion, "occasion")
    _require(weather, "weather")
    if recent_window_days < 0:
        raise InvalidSuggestRequest("recent_window_days_negative")
    rng = rng or random.Random()
    now = now or datetime.now(timezone.utc)
    config = config or SuggestConfig()

    if not items:
        return SuggestionResult(status=STATUS_NO_WARDROBE, message=MESSAGE_EMPTY_WARDROBE)

    worn = recently_worn_ids(recent_history, recent_window_days, now)
    candidates = [
        it
        for it in items
        if matches_occasion(it, occasion) and matches_weather(it, weather) and it.id not in worn
    ]
    buckets = partition_by_category(candidates)
    available_core = sum(1 for category in CORE_CATEGORIES if buckets[category])
    logger.debug(
        "suggest: items=%d candidates=%d recently_worn=%d core_slots=%d",
        len(items),
        len(candidates),
        len(worn),
        available_core,
    )

    if available_core == 0:
        return SuggestionResult(status=STATUS_NO_MATCH, message=MESSAGE_NO_MATCH)
    if available_core == 1:
        return SuggestionResult(
            confidence_score=config.partial_match_score,
            status=STATUS_PARTIAL,
            message=MESSAGE_LIMITED,
        )

    suggestion = OutfitSuggestion()
    for category, slot in CATEGORY_TO_SLOT.items():
        ranked = rank_items(buckets[category], occasion, weather, now)
        setattr(suggestion, slot, select_from_shortlist(ranked, rng, config.shortlist_size))

    score = confidence_score(suggestion, occasion, weather, rng, config)
    return SuggestionResult(suggestion=suggestion, confidence_score=score, status=STATUS_OK)


def pick_daily_outfit(
    weather: str,
    items: Sequence[WardrobeItem],
    recent_history: Sequence[HistoryEntry],
    occasion: Optional[str] = None,
    recent_window_days: int = 7,
    *,
    rng: Optional[random.Random] = None,
    now: Optional[datetime] = None,
    config: Optional[SuggestConfig] = None,
) -> OutfitSuggestion:
    """Stricter pick used for the daily notification.

    The whole wardrobe is ranked first and then filtered, occasion is optional,
    and top, bottom and shoes must all be filled or `IncompleteOutfit` is raised.
    """
    _require(weather, "weather")
    occasion = occasion.strip() if occasion else None
    rng = rng or random.Random()
    now = now or datetime.now(timezone.utc)
    config = config or SuggestConfig()

    worn = recently_worn_ids(recent_history, recent_window_days, now)
    ranked = [
        it
        for it in rank_items(items, occasion, weather, now)
        if (not occasion or matches_occasion(it, occasion))
        and matches_weather(it, weather)
        and it.id not in worn
    ]
    buckets = partition_by_category(ranked)

    suggestion = OutfitSuggestion()
    for category, slot in CATEGORY_TO_SLOT.items():
        setattr(suggestion, slot, select_from_shortlist(buckets[category], rng, config.shortlist_size))
    if suggestion.top is None or suggestion.bottom is None or suggestion.shoes is None:
        raise IncompleteOutfit("not_enough_items")
    return suggestion
