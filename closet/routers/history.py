from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from closet.auth.deps import get_current_user_id
from closet.core.config import settings
from closet.core.db import get_session
from closet.models.models import OutfitHistory
from closet.schemas.outfits import HistoryIn, HistoryOut
from closet.services import catalog

router = APIRouter(prefix="/outfit-history", tags=["history"])


def _history_out(row: OutfitHistory) -> HistoryOut:
    return HistoryOut(
        id=row.id,
        item_ids=[hi.item_id for hi in row.items],
        outfit_id=row.outfit_id,
        occasion=row.occasion,
        weather=row.weather,
        worn_date=row.worn_at,
    )


@router.get("", response_model=List[HistoryOut])
async def list_history(
    days: int | None = Query(None, ge=0, le=settings.HISTORY_MAX_DAYS),
    session: AsyncSession = Depends(get_session),
    user_id: str = Depends(get_current_user_id),
):
    window = days if days is not None else settings.HISTORY_DEFAULT_DAYS
    return [_history_out(r) for r in await catalog.list_history(session, user_id, window)]


@router.post("", response_model=HistoryOut)
async def record_wear(
    payload: HistoryIn,
    session: AsyncSession = Depends(get_session),
    user_id: str = Depends(get_current_user_id),
):
    """Record that a set of items was worn now; bumps each item's wear count."""
    row = await catalog.record_wear(
        session,
        user_id,
        payload.item_ids,
        outfit_id=payload.outfit_id,
        occasion=payload.occasion,
        weather=payload.weather,
    )
    return _history_out(row)
