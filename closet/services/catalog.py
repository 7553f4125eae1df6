import logging
from datetime import datetime, timezone
from typing import Iterable, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from closet.models.models import ClothingItem, OutfitHistory, OutfitHistoryItem
from closet.services.suggest.scoring import window_cutoff
from closet.services.suggest.types import HistoryEntry, WardrobeItem

logger = logging.getLogger(__name__)


def _utc(dt: Optional[datetime]) -> Optional[datetime]:
    # sqlite hands back naive datetimes; everything is stored as UTC
    if dt is not None and dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


def to_wardrobe_item(item: ClothingItem) -> WardrobeItem:
    return WardrobeItem(
        id=item.id,
        category=item.category or "",
        name=item.name or "",
        colors=tuple(item.colors or ()),
        seasons=tuple(item.seasons or ()),
        occasions=tuple(item.occasions or ()),
        wear_count=item.wear_count or 0,
        last_worn=_utc(item.last_worn),
    )


def to_history_entry(row: OutfitHistory) -> HistoryEntry:
    return HistoryEntry(
        item_ids=tuple(hi.item_id for hi in row.items),
        worn_date=_utc(row.worn_at),
    )


async def list_items(session: AsyncSession, user_id: str) -> List[WardrobeItem]:
    res = await session.execute(
        select(ClothingItem).where(ClothingItem.user_id == user_id).order_by(ClothingItem.id)
    )
    return [to_wardrobe_item(i) for i in res.scalars().all()]


async def list_history(session: AsyncSession, user_id: str, days: int, now: datetime | None = None) -> List[OutfitHistory]:
    now = now or datetime.now(timezone.utc)
    cutoff = window_cutoff(now, days)
    res = await session.execute(
        select(OutfitHistory)
        .where(OutfitHistory.user_id == user_id, OutfitHistory.worn_at >= cutoff)
        .order_by(OutfitHistory.worn_at.desc())
    )
    return list(res.scalars().all())


async def recent_history(
    session: AsyncSession, user_id: str, window_days: int, now: datetime | None = None
) -> List[HistoryEntry]:
    rows = await list_history(session, user_id, window_days, now=now)
    return [to_history_entry(r) for r in rows]


async def record_wear(
    session: AsyncSession,
    user_id: str,
    item_ids: Iterable[int],
    *,
    outfit_id: int | None = None,
    occasion: str | None = None,
    weather: str | None = None,
    worn_at: datetime | None = None,
) -> OutfitHistory:
    """Log a wear and bump wear_count/last_worn on the user's own items."""
    worn_at = worn_at or datetime.now(timezone.utc)
    ordered: list[int] = []
    for iid in item_ids:
        if iid not in ordered:
            ordered.append(iid)

    row = OutfitHistory(
        user_id=user_id,
        outfit_id=outfit_id,
        occasion=occasion,
        weather=weather,
        worn_at=worn_at,
        items=[OutfitHistoryItem(item_id=iid, position=pos) for pos, iid in enumerate(ordered)],
    )
    session.add(row)

    if ordered:
        res = await session.execute(
            select(ClothingItem).where(ClothingItem.user_id == user_id, ClothingItem.id.in_(ordered))
        )
        owned = res.scalars().all()
        for item in owned:
            item.wear_count = (item.wear_count or 0) + 1
            item.last_worn = worn_at
        skipped = len(ordered) - len(owned)
        if skipped:
            logger.info("record_wear: skipped %d unknown item ids user=%s", skipped, user_id)

    await session.commit()
    return row
