from types import MappingProxyType

CATEGORY_TO_SLOT = MappingProxyType({
    "tops": "top",
    "bottoms": "bottom",
    "shoes": "shoes",
    "accessories": "accessory",
})

CORE_CATEGORIES = ("tops", "bottoms", "shoes")

WEATHER_TO_SEASONS = MappingProxyType({
    "cold": frozenset({"winter", "fall"}),
    "warm": frozenset({"summer", "spring"}),
    "rainy": frozenset({"fall", "winter"}),
    "windy": frozenset({"fall", "spring"}),
})

NEUTRAL_COLORS = frozenset({"black", "white", "gray", "brown", "navy"})

# scoring weights
SEASON_MATCH_POINTS = 10
OCCASION_MATCH_POINTS = 10
NEUTRAL_COLOR_POINTS = 5
WEAR_COUNT_CEILING = 10
RECENCY_CAP_DAYS = 10
NEVER_WORN_POINTS = 15

MESSAGE_EMPTY_WARDROBE = "No items in your wardrobe yet. Add some clothing items first!"
MESSAGE_NO_MATCH = "No matching items found for these conditions. Try different options or add more items!"
MESSAGE_LIMITED = "Limited matches. Add more items for better suggestions!"


def slot_for_category(category: str) -> str | None:
    return CATEGORY_TO_SLOT.get(category)
