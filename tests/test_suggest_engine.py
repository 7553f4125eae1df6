"""
Pure tests for the outfit suggestion engine: filtering, scoring, shortlist pick
and confidence. No database involved; randomness is pinned with seeded generators.
"""
import random
from datetime import datetime, timedelta, timezone

import pytest

from closet.services.suggest import (
    HistoryEntry,
    InvalidSuggestRequest,
    IncompleteOutfit,
    OutfitSuggestion,
    SuggestConfig,
    matches_occasion,
    matches_weather,
    partition_by_category,
    pick_daily_outfit,
    rank_items,
    recently_worn_ids,
    score_item,
    suggest_outfit,
)
from closet.services.suggest.types import WardrobeItem

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)
NO_JITTER = SuggestConfig(jitter_span=0)


def _item(id, category, **kw):
    return WardrobeItem(id=id, category=category, name=kw.pop("name", f"{category}-{id}"), **kw)


def _basic_wardrobe():
    return [_item(1, "tops"), _item(2, "bottoms"), _item(3, "shoes")]


class TestAvailability:
    def test_empty_wardrobe(self):
        res = suggest_outfit("casual", "warm", [], [], rng=random.Random(1), now=NOW)
        assert res.status == "no_wardrobe"
        assert res.confidence_score == 0
        assert res.suggestion.is_empty
        assert "wardrobe" in res.message.lower()

    def test_single_summer_top_in_cold_weather_has_no_match(self):
        items = [_item(1, "tops", seasons=("summer",))]
        res = suggest_outfit("casual", "cold", items, [], rng=random.Random(1), now=NOW)
        assert res.status == "no_match"
        assert res.confidence_score == 0
        assert res.suggestion.is_empty

    def test_one_core_slot_is_partial_match(self):
        items = [_item(1, "tops"), _item(2, "tops"), _item(3, "accessories")]
        res = suggest_outfit("casual", "warm", items, [], rng=random.Random(1), now=NOW)
        assert res.status == "partial_match"
        assert res.confidence_score == 25
        assert res.suggestion.is_empty
        assert "limited" in res.message.lower()

    def test_two_core_slots_is_enough(self):
        items = [_item(1, "tops"), _item(2, "bottoms")]
        res = suggest_outfit("casual", "warm", items, [], rng=random.Random(1), now=NOW)
        assert res.status == "ok"
        assert res.suggestion.top.id == 1
        assert res.suggestion.bottom.id == 2
        assert res.suggestion.shoes is None

    def test_one_item_per_core_slot(self):
        res = suggest_outfit("casual", "warm", _basic_wardrobe(), [], rng=random.Random(7), now=NOW)
        assert res.status == "ok"
        assert res.message is None
        assert (res.suggestion.top.id, res.suggestion.bottom.id, res.suggestion.shoes.id) == (1, 2, 3)
        assert res.suggestion.accessory is None
        assert 75 <= res.confidence_score <= 95

    def test_unknown_category_never_selected(self):
        items = [_item(1, "hats"), _item(2, "socks")]
        res = suggest_outfit("casual", "warm", items, [], rng=random.Random(1), now=NOW)
        assert res.status == "no_match"

    def test_accessory_fills_when_available(self):
        items = _basic_wardrobe() + [_item(4, "accessories")]
        res = suggest_outfit("casual", "warm", items, [], rng=random.Random(1), now=NOW, config=NO_JITTER)
        assert res.suggestion.accessory.id == 4
        assert res.confidence_score == 95  # 4 slots x 25, capped


class TestRecentlyWorn:
    def test_recent_item_is_excluded_even_if_only_candidate(self):
        history = [HistoryEntry(item_ids=(3,), worn_date=NOW - timedelta(days=2))]
        res = suggest_outfit("casual", "warm", _basic_wardrobe(), history, 7, rng=random.Random(1), now=NOW)
        assert res.status == "ok"
        assert res.suggestion.shoes is None
        assert res.suggestion.top.id == 1

    def test_history_outside_window_is_ignored(self):
        history = [HistoryEntry(item_ids=(3,), worn_date=NOW - timedelta(days=10))]
        res = suggest_outfit("casual", "warm", _basic_wardrobe(), history, 7, rng=random.Random(1), now=NOW)
        assert res.suggestion.shoes.id == 3

    def test_recently_worn_ids_union(self):
        history = [
            HistoryEntry(item_ids=(1, 2), worn_date=NOW - timedelta(days=1)),
            HistoryEntry(item_ids=(2, 5), worn_date=NOW - timedelta(days=6)),
            HistoryEntry(item_ids=(9,), worn_date=NOW - timedelta(days=30)),
        ]
        assert recently_worn_ids(history, 7, NOW) == {1, 2, 5}

    @pytest.mark.parametrize("window", [10**6, 10**9])
    def test_very_long_window_reaches_back_to_the_start(self, window):
        history = [HistoryEntry(item_ids=(3,), worn_date=NOW - timedelta(days=5000))]
        assert recently_worn_ids(history, window, NOW) == {3}
        res = suggest_outfit("casual", "warm", _basic_wardrobe(), history, window, rng=random.Random(1), now=NOW)
        assert res.status == "ok"
        assert res.suggestion.shoes is None

    def test_naive_history_dates_are_treated_as_utc(self):
        naive = (NOW - timedelta(days=1)).replace(tzinfo=None)
        assert recently_worn_ids([HistoryEntry(item_ids=(4,), worn_date=naive)], 7, NOW) == {4}

    @pytest.mark.parametrize("seed", range(25))
    def test_worn_items_never_suggested(self, seed):
        rng = random.Random(seed)
        items = [_item(i, cat) for i, cat in enumerate(["tops", "bottoms", "shoes", "accessories"] * 3)]
        worn = tuple(rng.sample([it.id for it in items], 4))
        history = [HistoryEntry(item_ids=worn, worn_date=NOW - timedelta(days=3))]
        res = suggest_outfit("casual", "warm", items, history, rng=rng, now=NOW)
        assert not {it.id for it in res.suggestion.items()} & set(worn)


class TestMatching:
    @pytest.mark.parametrize(
        "weather,season,expected",
        [
            ("cold", "winter", True),
            ("cold", "fall", True),
            ("cold", "summer", False),
            ("warm", "summer", True),
            ("warm", "spring", True),
            ("warm", "winter", False),
            ("rainy", "fall", True),
            ("rainy", "winter", True),
            ("rainy", "spring", False),
            ("windy", "fall", True),
            ("windy", "spring", True),
            ("windy", "summer", False),
        ],
    )
    def test_weather_to_season_table(self, weather, season, expected):
        assert matches_weather(_item(1, "tops", seasons=(season,)), weather) is expected

    @pytest.mark.parametrize("weather", ["cold", "warm", "rainy", "windy", "sunny", "foggy"])
    def test_seasonless_item_matches_any_weather(self, weather):
        assert matches_weather(_item(1, "tops"), weather)

    def test_unknown_weather_only_admits_seasonless_items(self):
        tagged = _item(1, "tops", seasons=("summer", "spring", "fall", "winter"))
        assert not matches_weather(tagged, "sunny")
        items = [tagged, _item(2, "tops"), _item(3, "bottoms"), _item(4, "shoes", seasons=("winter",))]
        res = suggest_outfit("casual", "sunny", items, [], rng=random.Random(3), now=NOW)
        assert res.suggestion.top.id == 2
        assert res.suggestion.shoes is None

    @pytest.mark.parametrize("occasion", ["casual", "work", "party", "gym", "formal", "date", "brunch"])
    def test_occasionless_item_matches_any_occasion(self, occasion):
        assert matches_occasion(_item(1, "tops"), occasion)

    def test_occasion_match_is_exact(self):
        item = _item(1, "tops", occasions=("casual",))
        assert matches_occasion(item, "casual")
        assert not matches_occasion(item, "Casual")
        assert not matches_occasion(item, "work")

    def test_partition_drops_unknown_categories(self):
        buckets = partition_by_category([_item(1, "tops"), _item(2, "hats"), _item(3, "shoes")])
        assert [it.id for it in buckets["tops"]] == [1]
        assert [it.id for it in buckets["shoes"]] == [3]
        assert buckets["bottoms"] == [] and buckets["accessories"] == []
        assert "hats" not in buckets


class TestScoring:
    def test_untagged_never_worn_item(self):
        assert score_item(_item(1, "tops"), "casual", "warm", NOW) == 25

    def test_season_and_occasion_bonuses_need_explicit_tags(self):
        tagged = _item(1, "tops", seasons=("summer",), occasions=("casual",))
        assert score_item(tagged, "casual", "warm", NOW) == 45
        assert score_item(tagged, "work", "cold", NOW) == 25

    def test_neutral_color_bonus(self):
        assert score_item(_item(1, "tops", colors=("coral", "navy")), "casual", "warm", NOW) == 30
        assert score_item(_item(1, "tops", colors=("coral",)), "casual", "warm", NOW) == 25

    def test_wear_count_penalty_bottoms_out(self):
        a = _item(1, "tops", wear_count=0)
        b = _item(2, "tops", wear_count=20)
        assert score_item(a, "casual", "warm", NOW) - score_item(b, "casual", "warm", NOW) >= 10
        assert score_item(_item(3, "tops", wear_count=10), "casual", "warm", NOW) == score_item(b, "casual", "warm", NOW)

    def test_recency_bonus_is_capped(self):
        three_days = _item(1, "tops", wear_count=10, last_worn=NOW - timedelta(days=3))
        long_ago = _item(2, "tops", wear_count=10, last_worn=NOW - timedelta(days=40))
        never = _item(3, "tops", wear_count=10)
        assert score_item(three_days, "casual", "warm", NOW) == 3
        assert score_item(long_ago, "casual", "warm", NOW) == 10
        assert score_item(never, "casual", "warm", NOW) == 15

    def test_future_last_worn_gets_no_recency_bonus(self):
        item = _item(1, "tops", wear_count=10, last_worn=NOW + timedelta(days=2))
        assert score_item(item, "casual", "warm", NOW) == 0

    def test_rank_items_orders_by_score(self):
        items = [_item(1, "tops", wear_count=5), _item(2, "tops"), _item(3, "tops", wear_count=9)]
        assert [it.id for it in rank_items(items, "casual", "warm", NOW)] == [2, 1, 3]


class TestSelection:
    @pytest.mark.parametrize("seed", range(40))
    def test_pick_comes_from_top_three(self, seed):
        tops = [_item(i, "tops", wear_count=i) for i in range(6)]
        items = tops + [_item(10, "bottoms"), _item(11, "shoes")]
        res = suggest_outfit("casual", "warm", items, [], rng=random.Random(seed), now=NOW)
        scores = sorted((score_item(t, "casual", "warm", NOW) for t in tops), reverse=True)
        assert score_item(res.suggestion.top, "casual", "warm", NOW) >= scores[2]

    def test_shuffle_reaches_whole_shortlist(self):
        tops = [_item(i, "tops", wear_count=i) for i in range(6)]
        items = tops + [_item(10, "bottoms"), _item(11, "shoes")]
        picked = {
            suggest_outfit("casual", "warm", items, [], rng=random.Random(seed), now=NOW).suggestion.top.id
            for seed in range(200)
        }
        assert picked == {0, 1, 2}

    def test_same_seed_same_outfit(self):
        items = [_item(i, cat) for i, cat in enumerate(["tops", "bottoms", "shoes", "accessories"] * 4)]
        a = suggest_outfit("casual", "warm", items, [], rng=random.Random(42), now=NOW)
        b = suggest_outfit("casual", "warm", items, [], rng=random.Random(42), now=NOW)
        assert a.suggestion == b.suggestion
        assert a.confidence_score == b.confidence_score

    @pytest.mark.parametrize("seed", range(30))
    def test_category_isolation(self, seed):
        rng = random.Random(seed)
        items = [_item(i, rng.choice(["tops", "bottoms", "shoes", "accessories", "hats"])) for i in range(20)]
        res = suggest_outfit("casual", "warm", items, [], rng=rng, now=NOW)
        expected = {"top": "tops", "bottom": "bottoms", "shoes": "shoes", "accessory": "accessories"}
        for slot, item in res.suggestion.slots().items():
            assert item.category == expected[slot]


class TestConfidence:
    def test_base_per_filled_slot(self):
        items = [_item(1, "tops"), _item(2, "bottoms")]
        res = suggest_outfit("casual", "warm", items, [], rng=random.Random(1), now=NOW, config=NO_JITTER)
        assert res.confidence_score == 50 + 5 + 5  # untagged items fit any weather

    def test_weather_and_occasion_bonuses(self):
        items = [
            _item(1, "tops", seasons=("summer",), occasions=("casual",)),
            _item(2, "bottoms", seasons=("summer",)),
        ]
        res = suggest_outfit("casual", "warm", items, [], rng=random.Random(1), now=NOW, config=NO_JITTER)
        assert res.confidence_score == 50 + 10 + 5

    def test_seasonless_picks_earn_weather_bonus(self):
        res = suggest_outfit("casual", "warm", _basic_wardrobe(), [], rng=random.Random(1), now=NOW, config=NO_JITTER)
        assert res.confidence_score == 75 + 15

    def test_occasion_bonus_needs_explicit_tag(self):
        items = [_item(1, "tops", seasons=("winter",)), _item(2, "bottoms", seasons=("fall",), occasions=("casual",))]
        res = suggest_outfit("casual", "cold", items, [], rng=random.Random(1), now=NOW, config=NO_JITTER)
        assert res.confidence_score == 50 + 10 + 5

    def test_configurable_base_and_cap(self):
        config = SuggestConfig(base_per_slot=20, confidence_cap=90, jitter_span=0)
        items = _basic_wardrobe() + [_item(4, "accessories", seasons=("summer",), occasions=("casual",))]
        res = suggest_outfit("casual", "warm", items, [], rng=random.Random(1), now=NOW, config=config)
        assert res.confidence_score == 90

    @pytest.mark.parametrize("seed", range(50))
    def test_bounds(self, seed):
        rng = random.Random(seed)
        items = [
            _item(
                i,
                rng.choice(["tops", "bottoms", "shoes", "accessories"]),
                seasons=tuple(rng.sample(["spring", "summer", "fall", "winter"], rng.randint(0, 2))),
                occasions=tuple(rng.sample(["casual", "work", "party"], rng.randint(0, 2))),
                wear_count=rng.randint(0, 15),
            )
            for i in range(rng.randint(0, 12))
        ]
        res = suggest_outfit("casual", rng.choice(["warm", "cold", "rainy", "windy", "hail"]), items, [], rng=rng, now=NOW)
        assert isinstance(res.confidence_score, int)
        assert 0 <= res.confidence_score <= 95


class TestValidation:
    @pytest.mark.parametrize("occasion,weather", [("", "warm"), ("casual", ""), ("  ", "cold"), (None, "warm"), ("casual", None)])
    def test_missing_occasion_or_weather(self, occasion, weather):
        with pytest.raises(InvalidSuggestRequest):
            suggest_outfit(occasion, weather, _basic_wardrobe(), [])

    def test_negative_window(self):
        with pytest.raises(InvalidSuggestRequest):
            suggest_outfit("casual", "warm", _basic_wardrobe(), [], -1)


class TestDailyPick:
    def test_requires_all_core_slots(self):
        with pytest.raises(IncompleteOutfit):
            pick_daily_outfit("warm", [_item(1, "tops"), _item(2, "bottoms")], [], rng=random.Random(1), now=NOW)

    def test_occasion_is_optional(self):
        items = [
            _item(1, "tops", occasions=("work",)),
            _item(2, "bottoms", occasions=("gym",)),
            _item(3, "shoes"),
        ]
        outfit = pick_daily_outfit("warm", items, [], rng=random.Random(1), now=NOW)
        assert isinstance(outfit, OutfitSuggestion)
        assert (outfit.top.id, outfit.bottom.id, outfit.shoes.id) == (1, 2, 3)
        with pytest.raises(IncompleteOutfit):
            pick_daily_outfit("warm", items, [], occasion="work", rng=random.Random(1), now=NOW)

    def test_skips_recent_and_off_season(self):
        items = _basic_wardrobe() + [_item(4, "shoes", seasons=("winter",)), _item(5, "shoes")]
        history = [HistoryEntry(item_ids=(3,), worn_date=NOW - timedelta(days=1))]
        outfit = pick_daily_outfit("warm", items, history, rng=random.Random(1), now=NOW)
        assert outfit.shoes.id == 5

    @pytest.mark.parametrize("occasion", ["", "   "])
    def test_blank_occasion_means_any(self, occasion):
        items = [
            _item(1, "tops", occasions=("work",)),
            _item(2, "bottoms", occasions=("gym",)),
            _item(3, "shoes"),
        ]
        outfit = pick_daily_outfit("warm", items, [], occasion=occasion, rng=random.Random(1), now=NOW)
        assert (outfit.top.id, outfit.bottom.id, outfit.shoes.id) == (1, 2, 3)
