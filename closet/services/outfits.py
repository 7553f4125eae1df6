import logging
from typing import List, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from closet.models.models import ClothingItem, Outfit, OutfitItem
from closet.services.suggest.taxonomy import slot_for_category

logger = logging.getLogger(__name__)


class OutfitValidationError(ValueError):
    def __init__(self, code: str) -> None:
        super().__init__(code)
        self.code = code


async def save_outfit(
    session: AsyncSession,
    user_id: str,
    name: str,
    item_ids: Sequence[int],
    occasion: str | None = None,
    weather: str | None = None,
) -> int:
    """Persist an accepted suggestion (or a hand-picked set) as a named outfit."""
    if not item_ids:
        raise OutfitValidationError("item_ids_required")
    if len(set(item_ids)) != len(item_ids):
        raise OutfitValidationError("duplicate_item_ids")

    res = await session.execute(
        select(ClothingItem).where(ClothingItem.user_id == user_id, ClothingItem.id.in_(list(item_ids)))
    )
    found = {i.id: i for i in res.scalars().all()}
    if len(found) != len(item_ids):
        raise OutfitValidationError("item_not_owned_or_missing")

    outfit = Outfit(user_id=user_id, name=name, occasion=occasion, weather=weather)
    for pos, iid in enumerate(item_ids):
        outfit.items.append(
            OutfitItem(item_id=iid, slot=slot_for_category(found[iid].category) or "accessory", position=pos)
        )
    session.add(outfit)
    await session.commit()
    logger.info("outfit saved id=%s user=%s items=%d", outfit.id, user_id, len(item_ids))
    return outfit.id


async def get_outfit(session: AsyncSession, user_id: str, outfit_id: int) -> Outfit | None:
    res = await session.execute(select(Outfit).where(Outfit.id == outfit_id, Outfit.user_id == user_id))
    return res.scalar_one_or_none()


async def list_outfits(session: AsyncSession, user_id: str) -> List[Outfit]:
    res = await session.execute(
        select(Outfit).where(Outfit.user_id == user_id).order_by(Outfit.created_at.desc(), Outfit.id.desc())
    )
    return list(res.scalars().all())


async def delete_outfit(session: AsyncSession, user_id: str, outfit_id: int) -> bool:
    outfit = await get_outfit(session, user_id, outfit_id)
    if not outfit:
        return False
    await session.delete(outfit)
    await session.commit()
    return True
