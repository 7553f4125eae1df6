from .engine import (
    IncompleteOutfit,
    InvalidSuggestRequest,
    pick_daily_outfit,
    suggest_outfit,
)
from .scoring import (
    confidence_score,
    matches_occasion,
    matches_weather,
    partition_by_category,
    rank_items,
    recently_worn_ids,
    score_item,
    select_from_shortlist,
    window_cutoff,
)
from .types import HistoryEntry, OutfitSuggestion, SuggestConfig, SuggestionResult, WardrobeItem

__all__ = [
    "IncompleteOutfit",
    "InvalidSuggestRequest",
    "pick_daily_outfit",
    "suggest_outfit",
    "confidence_score",
    "matches_occasion",
    "matches_weather",
    "partition_by_category",
    "rank_items",
    "recently_worn_ids",
    "score_item",
    "select_from_shortlist",
    "window_cutoff",
    "HistoryEntry",
    "OutfitSuggestion",
    "SuggestConfig",
    "SuggestionResult",
    "WardrobeItem",
]
