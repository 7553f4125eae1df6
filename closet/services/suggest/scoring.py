import math
import random
from datetime import datetime, timedelta, timezone
from typing import Dict, Iterable, List, Optional, Sequence, Set

from .taxonomy import (
    CATEGORY_TO_SLOT,
    NEUTRAL_COLORS,
    NEVER_WORN_POINTS,
    NEUTRAL_COLOR_POINTS,
    OCCASION_MATCH_POINTS,
    RECENCY_CAP_DAYS,
    SEASON_MATCH_POINTS,
    WEAR_COUNT_CEILING,
    WEATHER_TO_SEASONS,
)
from .types import HistoryEntry, OutfitSuggestion, SuggestConfig, WardrobeItem


def _as_utc(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


def matches_weather(item: WardrobeItem, weather: str) -> bool:
    """Season-less items fit any weather; unknown weather only admits those."""
    if not item.seasons:
        return True
    allowed = WEATHER_TO_SEASONS.get(weather, frozenset())
    return any(season in allowed for season in item.seasons)


def matches_occasion(item: WardrobeItem, occasion: str) -> bool:
    if not item.occasions:
        return True
    return occasion in item.occasions


def window_cutoff(now: datetime, window_days: int) -> datetime:
    """Start of a look-back window; very long windows reach back to the earliest date."""
    try:
        return _as_utc(now) - timedelta(days=window_days)
    except OverflowError:
        return datetime.min.replace(tzinfo=timezone.utc)


def recently_worn_ids(
    history: Iterable[HistoryEntry], window_days: int, now: datetime
) -> Set[int]:
    cutoff = window_cutoff(now, window_days)
    worn: Set[int] = set()
    for entry in history:
        if _as_utc(entry.worn_date) < cutoff:
            continue
        worn.update(entry.item_ids)
    return worn


def partition_by_category(items: Iterable[WardrobeItem]) -> Dict[str, List[WardrobeItem]]:
    buckets: Dict[str, List[WardrobeItem]] = {category: [] for category in CATEGORY_TO_SLOT}
    for item in items:
        bucket = buckets.get(item.category)
        if bucket is None:
            continue
        bucket.append(item)
    return buckets


def score_item(item: WardrobeItem, occasion: Optional[str], weather: str, now: datetime) -> int:
    score = 0
    if item.seasons and matches_weather(item, weather):
        score += SEASON_MATCH_POINTS
    if occasion and item.occasions and occasion in item.occasions:
        score += OCCASION_MATCH_POINTS
    if any(color in NEUTRAL_COLORS for color in item.colors):
        score += NEUTRAL_COLOR_POINTS
    score += max(0, WEAR_COUNT_CEILING - (item.wear_count or 0))
    if item.last_worn is not None:
        days = (_as_utc(now) - _as_utc(item.last_worn)).days
        score += max(0, min(RECENCY_CAP_DAYS, days))
    else:
        score += NEVER_WORN_POINTS
    return score


def rank_items(
    items: Iterable[WardrobeItem], occasion: Optional[str], weather: str, now: datetime
) -> List[WardrobeItem]:
    """Highest score first; ties keep input order."""
    return sorted(items, key=lambda it: score_item(it, occasion, weather, now), reverse=True)


def select_from_shortlist(
    ranked: Sequence[WardrobeItem], rng: random.Random, size: int = 3
) -> Optional[WardrobeItem]:
    if not ranked:
        return None
    shortlist = ranked[: min(size, len(ranked))]
    return shortlist[rng.randrange(len(shortlist))]


def confidence_score(
    suggestion: OutfitSuggestion,
    occasion: str,
    weather: str,
    rng: random.Random,
    config: SuggestConfig,
) -> int:
    picked = suggestion.items()
    total = float(len(picked) * config.base_per_slot)
    for item in picked:
        if matches_weather(item, weather):
            total += config.weather_bonus
        if item.occasions and occasion in item.occasions:
            total += config.occasion_bonus
    total += rng.random() * config.jitter_span
    total = min(float(config.confidence_cap), total)
    return int(math.floor(total + 0.5))
