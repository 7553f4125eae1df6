import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from closet.auth.deps import get_current_user_id
from closet.core.db import get_session
from closet.schemas.notifications import DailyOutfitIn, NotificationOut
from closet.services.notifications import send_daily_outfit
from closet.services.suggest import IncompleteOutfit, InvalidSuggestRequest

router = APIRouter(prefix="/notifications", tags=["notifications"])
logger = logging.getLogger("uvicorn.error")


@router.post("/daily-outfit", response_model=NotificationOut)
async def daily_outfit(
    payload: DailyOutfitIn,
    session: AsyncSession = Depends(get_session),
    user_id: str = Depends(get_current_user_id),
):
    try:
        notification = await send_daily_outfit(session, user_id, payload.weather, payload.occasion)
    except InvalidSuggestRequest as e:
        raise HTTPException(status_code=400, detail="weather_required") from e
    except IncompleteOutfit as e:
        logger.info("daily-outfit: not enough items user=%s", user_id)
        raise HTTPException(status_code=404, detail="not_enough_items") from e
    return NotificationOut(
        title=notification.title,
        body=notification.body,
        channel=notification.channel,
        data=notification.data,
    )
