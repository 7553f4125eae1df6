from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional, Tuple


@dataclass(frozen=True)
class WardrobeItem:
    """Read-only view of a clothing item as the suggestion engine sees it."""
    id: int
    category: str
    name: str = ""
    colors: Tuple[str, ...] = ()
    seasons: Tuple[str, ...] = ()
    occasions: Tuple[str, ...] = ()
    wear_count: int = 0
    last_worn: Optional[datetime] = None


@dataclass(frozen=True)
class HistoryEntry:
    """A set of items worn together at `worn_date`."""
    item_ids: Tuple[int, ...]
    worn_date: datetime


@dataclass(frozen=True)
class SuggestConfig:
    base_per_slot: int = 25
    weather_bonus: int = 5
    occasion_bonus: int = 5
    jitter_span: float = 20.0
    confidence_cap: int = 95
    shortlist_size: int = 3
    partial_match_score: int = 25


@dataclass
class OutfitSuggestion:
    top: Optional[WardrobeItem] = None
    bottom: Optional[WardrobeItem] = None
    shoes: Optional[WardrobeItem] = None
    accessory: Optional[WardrobeItem] = None

    def slots(self) -> Dict[str, WardrobeItem]:
        """Filled slots only, in top/bottom/shoes/accessory order."""
        out: Dict[str, WardrobeItem] = {}
        for name in ("top", "bottom", "shoes", "accessory"):
            item = getattr(self, name)
            if item is not None:
                out[name] = item
        return out

    def items(self) -> List[WardrobeItem]:
        return list(self.slots().values())

    @property
    def is_empty(self) -> bool:
        return not self.slots()


@dataclass
class SuggestionResult:
    suggestion: OutfitSuggestion = field(default_factory=OutfitSuggestion)
    confidence_score: int = 0
    status: str = "ok"
    message: Optional[str] = None
