"""
Tests for matchup, item, ability and hero pool analyzers.
"""

import pytest

from dota_insights.core.enums import BuildTendency, ItemGroup
from dota_insights.core.models import HeroMatchupRecord, ItemRecord, PlayerHeroStat
from dota_insights.features.builds import (
    AbilityBuildAnalyzer,
    ItemBuildAnalyzer,
    MatchupAnalyzer,
    PlayerHeroAnalyzer,
    group_catalog,
)
from dota_insights.features.builds.items import build_tendency, matches_keywords

ITEM_NAMES = {
    1: "Blink Dagger",
    36: "Magic Wand",
    63: "Power Treads",
    65: "Hand of Midas",
    116: "Black King Bar",
    145: "Battle Fury",
}


def item_name(item_id: int) -> str:
    return ITEM_NAMES.get(item_id, f"Item ID {item_id}")


class TestMatchupAnalyzer:
    @pytest.fixture
    def analyzer(self):
        return MatchupAnalyzer()

    def test_low_sample_matchup_excluded(self, analyzer):
        matchups = [
            HeroMatchupRecord(hero_id=2, games_played=40, wins=35),
            HeroMatchupRecord(hero_id=3, games_played=100, wins=60),
            HeroMatchupRecord(hero_id=4, games_played=50, wins=20),
        ]

        result = analyzer.analyze(1, matchups)

        assert [m.hero_id for m in result.best] == [3, 4]
        assert [m.hero_id for m in result.worst] == [4, 3]
        assert result.qualifying_matchups == 2
        assert result.best[0].win_rate == pytest.approx(0.6)

    def test_lists_are_capped_and_stable(self, analyzer):
        matchups = [
            HeroMatchupRecord(hero_id=i, games_played=100, wins=50) for i in range(2, 20)
        ]

        result = analyzer.analyze(1, matchups)

        assert [m.hero_id for m in result.best] == list(range(2, 12))
        assert [m.hero_id for m in result.worst] == list(range(2, 12))

    def test_names_resolved(self, analyzer):
        matchups = [HeroMatchupRecord(hero_id=2, games_played=60, wins=30)]

        result = analyzer.analyze(1, matchups, hero_name=lambda hid: {1: "Anti-Mage", 2: "Axe"}[hid])

        assert result.hero_name == "Anti-Mage"
        assert result.best[0].hero_name == "Axe"

    def test_no_data(self, analyzer):
        result = analyzer.analyze(1, [])

        assert result.data_available is False
        assert result.best == []
        assert result.hero_name == "Hero ID 1"


class TestItemBuildAnalyzer:
    @pytest.fixture
    def analyzer(self):
        return ItemBuildAnalyzer()

    def test_frequency_filter_and_win_rate(self, analyzer, detailed_factory):
        # Item 1 in 5 of 10 matches with 3 wins; item 999 in only one match
        records = []
        for i in range(10):
            items = (1,) if i < 5 else ()
            if i == 9:
                items = (999,)
            records.append(detailed_factory(match_id=i, won=i < 3 or i == 9, items=items))

        result = analyzer.analyze(42, 1, records, item_name=item_name)

        ids = [s.item_id for s in result.most_frequent]
        assert ids == [1]
        stat = result.most_frequent[0]
        assert stat.games == 5
        assert stat.wins == 3
        assert stat.win_rate == pytest.approx(0.60)
        assert stat.share == pytest.approx(0.5)
        assert result.matches_sampled == 10

    def test_ties_ordered_by_item_id(self, analyzer, detailed_factory):
        records = [
            detailed_factory(match_id=1, items=(116, 36, 63)),
            detailed_factory(match_id=2, items=(63, 116, 36)),
        ]

        result = analyzer.analyze(42, 1, records, item_name=item_name)

        assert [s.item_id for s in result.most_frequent] == [36, 63, 116]

    def test_highest_win_rate_needs_three_games(self, analyzer, detailed_factory):
        records = [
            detailed_factory(match_id=1, won=True, items=(1, 63)),
            detailed_factory(match_id=2, won=True, items=(1, 63)),
            detailed_factory(match_id=3, won=False, items=(63,)),
        ]

        result = analyzer.analyze(42, 1, records, item_name=item_name)

        assert [s.item_id for s in result.most_frequent] == [63, 1]
        assert [s.item_id for s in result.highest_win_rate] == [63]

    def test_core_items(self, analyzer, detailed_factory):
        records = [
            detailed_factory(match_id=1, won=True, items=(63, 1)),
            detailed_factory(match_id=2, won=True, items=(63, 1)),
            detailed_factory(match_id=3, won=False, items=(63,)),
            detailed_factory(match_id=4, won=False, items=(63, 116)),
            detailed_factory(match_id=5, won=False, items=(116,)),
        ]

        result = analyzer.analyze(42, 1, records, item_name=item_name)

        # Core needs games >= ceil(5 * 0.5) = 3 and win rate >= 50%
        assert [s.item_id for s in result.core_items] == [63]

    def test_farming_tendency(self, analyzer, detailed_factory):
        records = [
            detailed_factory(match_id=1, items=(145, 65, 116)),
            detailed_factory(match_id=2, items=(145, 65)),
            detailed_factory(match_id=3, items=(145, 116)),
        ]

        result = analyzer.analyze(42, 1, records, item_name=item_name)

        assert [s.item_id for s in result.farming_items] == [145, 65]
        assert [s.item_id for s in result.fighting_items] == [116]
        assert result.farming_games == 5
        assert result.fighting_games == 2
        assert result.tendency is BuildTendency.FARMING

    def test_empty_sample(self, analyzer):
        result = analyzer.analyze(42, 1, [])

        assert result.data_available is False
        assert result.most_frequent == []
        assert result.tendency is BuildTendency.BALANCED

    def test_keyword_match_is_case_insensitive(self):
        assert matches_keywords("BLACK KING BAR", ["Black King Bar"])
        assert not matches_keywords("Blink Dagger", ["Black King Bar"])

    @pytest.mark.parametrize(
        "farming, fighting, expected",
        [
            (3, 1, BuildTendency.FARMING),
            (1, 3, BuildTendency.FIGHTING),
            (2, 2, BuildTendency.BALANCED),
            (0, 0, BuildTendency.BALANCED),
        ],
    )
    def test_build_tendency(self, farming, fighting, expected):
        assert build_tendency(farming, fighting) is expected


class TestItemCatalog:
    def test_group_catalog(self):
        catalog = {
            116: ItemRecord(id=116, display_name="Black King Bar", category="artifact", name="black_king_bar"),
            44: ItemRecord(id=44, display_name="Tango", category="consumable", name="tango"),
            11: ItemRecord(id=11, display_name="Quelling Blade", category="component", name="quelling_blade"),
            1: ItemRecord(id=1, display_name="Blink Dagger", category="common", name="blink"),
        }

        result = group_catalog(catalog)

        assert result.total_items == 4
        assert [i.item_id for i in result.groups[ItemGroup.CONSUMABLE]] == [44]
        assert [i.item_id for i in result.groups[ItemGroup.EQUIPMENT]] == [11, 116]
        assert [i.item_id for i in result.groups[ItemGroup.OTHER]] == [1]


class TestAbilityBuildAnalyzer:
    def test_most_common_per_level(self, detailed_factory):
        records = [
            detailed_factory(match_id=1, abilities=(5003, 5004, 5003)),
            detailed_factory(match_id=2, abilities=(5003, 5005, 5004)),
            detailed_factory(match_id=3, abilities=(5004, 5005)),
        ]

        result = AbilityBuildAnalyzer().analyze(42, 1, records)

        assert result.matches_sampled == 3
        levels = {choice.level: choice for choice in result.levels}
        assert levels[1].ability_id == 5003
        assert levels[1].count == 2
        assert levels[1].share == pytest.approx(2 / 3)
        assert levels[2].ability_id == 5005
        # Level 3 is a tie between 5003 and 5004; lowest id wins
        assert levels[3].ability_id == 5003

    def test_no_upgrades(self, detailed_factory):
        result = AbilityBuildAnalyzer().analyze(42, 1, [detailed_factory(match_id=1)])

        assert result.levels == []
        assert result.data_available is False

    def test_records_without_skill_order_are_not_sampled(self, detailed_factory):
        records = [
            detailed_factory(match_id=1, abilities=(5001,)),
            detailed_factory(match_id=2),
        ]

        result = AbilityBuildAnalyzer().analyze(42, 1, records)

        assert result.matches_sampled == 1
        assert result.levels[0].ability_id == 5001
        assert result.levels[0].share == pytest.approx(1.0)


class TestPlayerHeroAnalyzer:
    def test_rankings(self):
        stats = [
            PlayerHeroStat(hero_id=1, games=50, wins=20),
            PlayerHeroStat(hero_id=2, games=4, wins=4),
            PlayerHeroStat(hero_id=3, games=10, wins=7),
            PlayerHeroStat(hero_id=4, games=0, wins=0),
        ]

        result = PlayerHeroAnalyzer().analyze(42, stats)

        assert [e.hero_id for e in result.most_played] == [1, 3, 2]
        assert [e.hero_id for e in result.most_effective] == [3, 1]
        assert result.most_effective[0].win_rate == pytest.approx(0.7)
        assert result.data_available is True

    def test_empty(self):
        result = PlayerHeroAnalyzer().analyze(42, [])

        assert result.data_available is False
