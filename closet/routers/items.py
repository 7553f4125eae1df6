import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from closet.auth.deps import get_current_user_id
from closet.core.db import get_session
from closet.models.models import ClothingItem
from closet.routers.items_helpers import _apply_updates, _build_item_out, _normalize_category_tags
from closet.schemas.items import ItemCreate, ItemOut, ItemUpdate

router = APIRouter(prefix="/items", tags=["items"])
logger = logging.getLogger("uvicorn.error")


async def _owned_item(session: AsyncSession, item_id: int, user_id: str) -> ClothingItem:
    item = await session.get(ClothingItem, item_id)
    if not item:
        raise HTTPException(status_code=404, detail="item_not_found")
    if item.user_id != user_id:
        raise HTTPException(status_code=403, detail="forbidden")
    return item


@router.get("", response_model=list[ItemOut])
async def list_items(
    category: Optional[str] = Query(None),
    session: AsyncSession = Depends(get_session),
    user_id: str = Depends(get_current_user_id),
):
    q = select(ClothingItem).where(ClothingItem.user_id == user_id).order_by(ClothingItem.id)
    if category:
        q = q.where(ClothingItem.category == category)
    res = await session.execute(q)
    return [_build_item_out(i) for i in res.scalars().all()]


@router.post("", response_model=ItemOut)
async def create_item(
    payload: ItemCreate,
    session: AsyncSession = Depends(get_session),
    user_id: str = Depends(get_current_user_id),
):
    item = ClothingItem(
        user_id=user_id,
        name=payload.name.strip(),
        category=payload.category,
        image_url=payload.image_url,
        colors=_normalize_category_tags("colors", payload.colors),
        seasons=_normalize_category_tags("seasons", payload.seasons),
        occasions=_normalize_category_tags("occasions", payload.occasions),
        wear_count=0,
        last_worn=None,
    )
    session.add(item)
    await session.commit()
    await session.refresh(item)
    logger.info("item created id=%s category=%s", item.id, item.category)
    return _build_item_out(item)


@router.get("/{item_id}", response_model=ItemOut)
async def get_item(
    item_id: int,
    session: AsyncSession = Depends(get_session),
    user_id: str = Depends(get_current_user_id),
):
    return _build_item_out(await _owned_item(session, item_id, user_id))


@router.patch("/{item_id}", response_model=ItemOut)
async def update_item(
    item_id: int,
    payload: ItemUpdate,
    session: AsyncSession = Depends(get_session),
    user_id: str = Depends(get_current_user_id),
):
    item = await _owned_item(session, item_id, user_id)
    _apply_updates(item, payload.model_dump(exclude_unset=True))
    await session.commit()
    await session.refresh(item)
    return _build_item_out(item)


@router.delete("/{item_id}", status_code=204)
async def delete_item(
    item_id: int,
    session: AsyncSession = Depends(get_session),
    user_id: str = Depends(get_current_user_id),
):
    item = await _owned_item(session, item_id, user_id)
    await session.delete(item)
    await session.commit()
    return None
