"""Transformers from OpenDota DTOs to domain records.

Keeps OpenDota naming (``item_0``..``item_5``, count-based bracket stats,
``qual`` tags) out of the analysis features.
"""

from typing import Dict, List, Optional, Sequence, Tuple

from ..enums import Bracket, MetaMetric
from ..models import (
    AbilityUpgrade,
    DetailedMatchRecord,
    HeroMatchupRecord,
    HeroMetaStat,
    HeroRecord,
    ItemRecord,
    MatchRecord,
    PlayerHeroStat,
)
from .constants import PICKS_PER_MATCH
from .models import (
    HeroDTO,
    HeroMatchupDTO,
    HeroStatsDTO,
    ItemDTO,
    MatchDetailDTO,
    MatchPlayerDTO,
    PlayerHeroDTO,
    PlayerMatchDTO,
)


def _filled_slots(slots: Sequence[Optional[int]]) -> Tuple[int, ...]:
    """Drop empty item slots (absent or id 0)."""
    return tuple(item_id for item_id in slots if item_id and item_id > 0)


class OpenDotaTransformer:
    """Transformer for converting OpenDota payloads into domain records."""

    @staticmethod
    def to_hero(dto: HeroDTO) -> HeroRecord:
        return HeroRecord(
            id=dto.id,
            localized_name=dto.localized_name,
            roles=tuple(dto.roles),
            primary_attr=dto.primary_attr,
            name=dto.name,
        )

    @staticmethod
    def to_meta_stats(dtos: Sequence[HeroStatsDTO]) -> List[HeroMetaStat]:
        """Convert bracket pick/win counts into percentages.

        Win rate is wins over picks. Pick rate is picks over matches played in
        the bracket, where matches = total picks in the bracket / 10. A bracket
        with zero picks has no entry.
        """
        counts = [dto.bracket_counts() for dto in dtos]
        matches_per_bracket: Dict[Bracket, float] = {
            bracket: sum(c[bracket][0] for c in counts) / PICKS_PER_MATCH
            for bracket in Bracket
        }

        stats = []
        for dto, hero_counts in zip(dtos, counts):
            values: Dict[Tuple[Bracket, MetaMetric], float] = {}
            for bracket, (picks, wins) in hero_counts.items():
                if picks <= 0:
                    continue
                values[(bracket, MetaMetric.WIN_RATE)] = wins / picks * 100
                matches = matches_per_bracket[bracket]
                if matches > 0:
                    values[(bracket, MetaMetric.PICK_RATE)] = picks / matches * 100
            stats.append(HeroMetaStat(hero_id=dto.id, values=values))
        return stats

    @staticmethod
    def to_match(dto: PlayerMatchDTO) -> MatchRecord:
        return MatchRecord(
            match_id=dto.match_id,
            hero_id=dto.hero_id,
            duration=dto.duration,
            start_time=dto.start_time,
            player_slot=dto.player_slot,
            radiant_win=dto.radiant_win,
            kills=dto.kills,
            deaths=dto.deaths,
            assists=dto.assists,
            lobby_type=dto.lobby_type,
            party_size=dto.party_size,
            items=_filled_slots(dto.item_slots()),
        )

    @staticmethod
    def _ability_upgrades(player: MatchPlayerDTO) -> Tuple[AbilityUpgrade, ...]:
        if player.ability_upgrades:
            return tuple(
                AbilityUpgrade(ability=u.ability, time=u.time, level=u.level)
                for u in player.ability_upgrades
            )
        # The flat array lists one ability per level, starting at level 1
        if player.ability_upgrades_arr:
            return tuple(
                AbilityUpgrade(ability=ability, time=0, level=index + 1)
                for index, ability in enumerate(player.ability_upgrades_arr)
            )
        return ()

    @staticmethod
    def to_detailed_records(dto: MatchDetailDTO) -> List[DetailedMatchRecord]:
        """Expand a full match payload into one record per participant."""
        return [
            DetailedMatchRecord(
                match_id=dto.match_id,
                hero_id=player.hero_id,
                player_slot=player.player_slot,
                radiant_win=dto.radiant_win,
                account_id=player.account_id,
                items=_filled_slots(player.item_slots()),
                ability_upgrades=OpenDotaTransformer._ability_upgrades(player),
            )
            for player in dto.players
        ]

    @staticmethod
    def to_matchup(dto: HeroMatchupDTO) -> HeroMatchupRecord:
        return HeroMatchupRecord(
            hero_id=dto.hero_id, games_played=dto.games_played, wins=dto.wins
        )

    @staticmethod
    def to_item_catalog(items: Dict[str, ItemDTO]) -> Dict[int, ItemRecord]:
        """Re-key the item constants (keyed by internal name) by numeric id."""
        catalog: Dict[int, ItemRecord] = {}
        for key, item in items.items():
            if not item.dname:
                continue
            catalog[item.id] = ItemRecord(
                id=item.id,
                display_name=item.dname,
                category=item.qual or "",
                name=key,
            )
        return dict(sorted(catalog.items()))

    @staticmethod
    def to_player_hero(dto: PlayerHeroDTO) -> PlayerHeroStat:
        return PlayerHeroStat(hero_id=dto.hero_id, games=dto.games, wins=dto.win)
