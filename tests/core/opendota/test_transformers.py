"""
Tests for OpenDota payload transformers.
"""

import pytest

from dota_insights.core.enums import Bracket, MetaMetric
from dota_insights.core.opendota.models import (
    HeroStatsDTO,
    ItemDTO,
    MatchDetailDTO,
    PlayerMatchDTO,
)
from dota_insights.core.opendota.transformers import OpenDotaTransformer


class TestMetaStats:
    def test_counts_become_percentages(self):
        dtos = [
            HeroStatsDTO.model_validate({"id": 1, "7_pick": 100, "7_win": 53}),
            HeroStatsDTO.model_validate({"id": 2, "7_pick": 4900, "7_win": 2352}),
        ]

        stats = OpenDotaTransformer.to_meta_stats(dtos)

        # 5000 picks in the bracket means 500 matches
        assert stats[0].win_rate(Bracket.DIVINE) == pytest.approx(53.0)
        assert stats[0].pick_rate(Bracket.DIVINE) == pytest.approx(20.0)
        assert stats[1].win_rate(Bracket.DIVINE) == pytest.approx(48.0)

    def test_bracket_without_picks_has_no_entry(self):
        stats = OpenDotaTransformer.to_meta_stats(
            [HeroStatsDTO.model_validate({"id": 1, "7_pick": 10, "7_win": 5})]
        )

        assert stats[0].win_rate(Bracket.HERALD) is None
        assert stats[0].pick_rate(Bracket.HERALD) is None

    def test_meta_values_are_read_only(self):
        stats = OpenDotaTransformer.to_meta_stats(
            [HeroStatsDTO.model_validate({"id": 1, "7_pick": 10, "7_win": 5})]
        )

        with pytest.raises(TypeError):
            stats[0].values[(Bracket.DIVINE, MetaMetric.WIN_RATE)] = 99.0


class TestMatchTransforms:
    def test_player_match(self):
        dto = PlayerMatchDTO(
            match_id=1,
            player_slot=130,
            radiant_win=False,
            duration=1900,
            hero_id=8,
            lobby_type=7,
            party_size=2,
            item_0=63,
            item_1=0,
            item_2=None,
            item_3=116,
        )

        record = OpenDotaTransformer.to_match(dto)

        assert record.won is True
        assert record.is_radiant is False
        assert record.items == (63, 116)
        assert record.party_size == 2

    def test_match_without_result_is_a_loss_for_both_sides(self):
        dire = PlayerMatchDTO(match_id=1, player_slot=130, radiant_win=None, hero_id=1)
        radiant = PlayerMatchDTO(match_id=1, player_slot=1, radiant_win=None, hero_id=2)

        assert OpenDotaTransformer.to_match(dire).won is False
        assert OpenDotaTransformer.to_match(radiant).won is False

    def test_detailed_records_per_participant(self):
        dto = MatchDetailDTO.model_validate(
            {
                "match_id": 5,
                "radiant_win": True,
                "players": [
                    {
                        "account_id": 42,
                        "player_slot": 1,
                        "hero_id": 1,
                        "item_0": 145,
                        "ability_upgrades_arr": [5003, 5004],
                    },
                    {
                        "account_id": 43,
                        "player_slot": 129,
                        "hero_id": 2,
                        "ability_upgrades": [
                            {"ability": 5007, "time": 120, "level": 1},
                        ],
                    },
                ],
            }
        )

        records = OpenDotaTransformer.to_detailed_records(dto)

        assert [r.account_id for r in records] == [42, 43]
        assert records[0].won is True
        assert records[1].won is False
        assert records[0].items == (145,)
        assert [(u.ability, u.level) for u in records[0].ability_upgrades] == [
            (5003, 1),
            (5004, 2),
        ]
        assert records[1].ability_upgrades[0].time == 120


class TestItemCatalog:
    def test_rekeyed_by_id(self):
        catalog = OpenDotaTransformer.to_item_catalog(
            {
                "black_king_bar": ItemDTO(id=116, dname="Black King Bar", qual="artifact"),
                "blink": ItemDTO(id=1, dname="Blink Dagger", qual="component"),
                "recipe_blink": ItemDTO(id=900),
            }
        )

        assert list(catalog) == [1, 116]
        assert catalog[116].display_name == "Black King Bar"
        assert catalog[116].name == "black_king_bar"
        assert catalog[1].category == "component"
