from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import HTTPException

from closet.core.tags import ALLOWED_OCCASIONS, ALLOWED_SEASONS, MAX_COLORS, normalize_many
from closet.models.models import ClothingItem
from closet.schemas.items import ItemOut

TAG_FIELDS = ("colors", "seasons", "occasions")


def _tag_error(category: str, tag: str, reason: str) -> HTTPException:
    return HTTPException(
        status_code=400,
        detail={"error": "invalid_tag", "details": {"category": category, "tag": tag, "reason": reason}},
    )


def _normalize_category_tags(category: str, values: Optional[List[str]]) -> list[str]:
    try:
        normalized = normalize_many(values or [])
    except ValueError as e:
        raise _tag_error(category, values[0] if values else "", str(e))
    if category == "seasons":
        for t in normalized:
            if t not in ALLOWED_SEASONS:
                raise _tag_error(category, t, "not_in_enum")
    if category == "occasions":
        for t in normalized:
            if t not in ALLOWED_OCCASIONS:
                raise _tag_error(category, t, "not_in_enum")
    if category == "colors" and len(normalized) > MAX_COLORS:
        raise _tag_error(category, normalized[MAX_COLORS], "too_many_tags")
    return normalized


def _apply_updates(item: ClothingItem, data: Dict[str, Any]) -> None:
    if data.get("name"):
        item.name = data["name"].strip()
    if data.get("category"):
        item.category = data["category"]
    if "image_url" in data:
        item.image_url = data["image_url"]
    for field in TAG_FIELDS:
        if field in data:
            setattr(item, field, _normalize_category_tags(field, data[field]))


def _build_item_out(item: ClothingItem) -> ItemOut:
    return ItemOut(
        id=item.id,
        name=item.name,
        category=item.category,
        image_url=item.image_url,
        colors=list(item.colors or []),
        seasons=list(item.seasons or []),
        occasions=list(item.occasions or []),
        wear_count=item.wear_count or 0,
        last_worn=item.last_worn,
    )
