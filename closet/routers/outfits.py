import logging
import random
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from closet.auth.deps import get_current_user_id
from closet.core.db import get_session
from closet.models.models import ClothingItem, Outfit as OutfitModel
from closet.routers.items_helpers import _build_item_out
from closet.schemas.outfits import OutfitCreate, OutfitItemOut, OutfitOut
from closet.schemas.suggest import OutfitSuggestIn, OutfitSuggestOut
from closet.services import outfits as outfit_store
from closet.services.outfits import OutfitValidationError
from closet.services.suggest import InvalidSuggestRequest
from closet.services.suggestions import suggest_for_user

router = APIRouter(prefix="/outfits", tags=["outfits"])
logger = logging.getLogger("uvicorn.error")


def _outfit_out(outfit: OutfitModel) -> OutfitOut:
    ordered = sorted(outfit.items, key=lambda oi: (oi.position or 0, oi.slot))
    return OutfitOut(
        id=outfit.id,
        name=outfit.name,
        occasion=outfit.occasion,
        weather=outfit.weather,
        item_ids=[oi.item_id for oi in ordered],
        items=[OutfitItemOut(item_id=oi.item_id, slot=oi.slot, position=oi.position or 0) for oi in ordered],
        created_at=str(outfit.created_at) if outfit.created_at else None,
    )


@router.post("/suggest", response_model=OutfitSuggestOut)
async def suggest_outfit(
    ctx: OutfitSuggestIn,
    session: AsyncSession = Depends(get_session),
    user_id: str = Depends(get_current_user_id),
):
    """
    Suggest one outfit for an occasion and weather.
    Repeating the call reshuffles among the best candidates; pass `seed` to pin the pick.
    """
    rng = random.Random(ctx.seed) if ctx.seed is not None else None
    try:
        result = await suggest_for_user(session, user_id, ctx.occasion, ctx.weather, rng=rng)
    except InvalidSuggestRequest as e:
        raise HTTPException(status_code=400, detail="occasion_and_weather_required") from e

    slots = result.suggestion.slots()
    lookup: dict[int, ClothingItem] = {}
    if slots:
        res = await session.execute(
            select(ClothingItem).where(
                ClothingItem.user_id == user_id,
                ClothingItem.id.in_([it.id for it in slots.values()]),
            )
        )
        lookup = {i.id: i for i in res.scalars().all()}
    logger.info(
        "outfit-suggest user=%s occasion=%s weather=%s status=%s confidence=%s",
        user_id,
        ctx.occasion,
        ctx.weather,
        result.status,
        result.confidence_score,
    )
    return OutfitSuggestOut(
        suggestion={slot: _build_item_out(lookup[it.id]) for slot, it in slots.items() if it.id in lookup},
        confidence_score=result.confidence_score,
        status=result.status,
        message=result.message,
        occasion=ctx.occasion,
        weather=ctx.weather,
    )


@router.post("", response_model=OutfitOut)
async def create_outfit(
    payload: OutfitCreate,
    session: AsyncSession = Depends(get_session),
    user_id: str = Depends(get_current_user_id),
):
    try:
        outfit_id = await outfit_store.save_outfit(
            session, user_id, payload.name, payload.item_ids, payload.occasion, payload.weather
        )
    except OutfitValidationError as e:
        raise HTTPException(status_code=422, detail=e.code) from e
    outfit = await outfit_store.get_outfit(session, user_id, outfit_id)
    return _outfit_out(outfit)


@router.get("", response_model=List[OutfitOut])
async def list_outfits(
    session: AsyncSession = Depends(get_session),
    user_id: str = Depends(get_current_user_id),
):
    return [_outfit_out(o) for o in await outfit_store.list_outfits(session, user_id)]


@router.get("/{outfit_id}", response_model=OutfitOut)
async def get_outfit(
    outfit_id: int,
    session: AsyncSession = Depends(get_session),
    user_id: str = Depends(get_current_user_id),
):
    outfit = await outfit_store.get_outfit(session, user_id, outfit_id)
    if not outfit:
        raise HTTPException(status_code=404, detail="outfit_not_found")
    return _outfit_out(outfit)


@router.delete("/{outfit_id}", status_code=204)
async def delete_outfit(
    outfit_id: int,
    session: AsyncSession = Depends(get_session),
    user_id: str = Depends(get_current_user_id),
):
    if not await outfit_store.delete_outfit(session, user_id, outfit_id):
        raise HTTPException(status_code=404, detail="outfit_not_found")
    return None
