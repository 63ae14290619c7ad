"""Shared fixtures for domain records."""

from typing import Callable, Optional, Tuple

import pytest

from dota_insights.core.enums import Bracket, MetaMetric
from dota_insights.core.models import (
    AbilityUpgrade,
    DetailedMatchRecord,
    HeroMetaStat,
    HeroRecord,
    MatchRecord,
)


@pytest.fixture
def match_factory() -> Callable[..., MatchRecord]:
    """Build a MatchRecord from the player's point of view.

    The player is always on Radiant, so ``won`` maps straight to
    ``radiant_win``.
    """

    counter = {"next_id": 1000}

    def make(
        won: bool = True,
        hero_id: int = 1,
        duration: int = 2000,
        kills: int = 5,
        deaths: int = 5,
        assists: int = 5,
        lobby_type: int = 0,
        party_size: Optional[int] = None,
        items: Tuple[int, ...] = (),
        match_id: Optional[int] = None,
    ) -> MatchRecord:
        counter["next_id"] += 1
        return MatchRecord(
            match_id=match_id if match_id is not None else counter["next_id"],
            hero_id=hero_id,
            duration=duration,
            start_time=1_700_000_000,
            player_slot=0,
            radiant_win=won,
            kills=kills,
            deaths=deaths,
            assists=assists,
            lobby_type=lobby_type,
            party_size=party_size,
            items=items,
        )

    return make


@pytest.fixture
def detailed_factory() -> Callable[..., DetailedMatchRecord]:
    def make(
        match_id: int,
        won: bool = True,
        items: Tuple[int, ...] = (),
        abilities: Tuple[int, ...] = (),
        account_id: int = 42,
        hero_id: int = 1,
    ) -> DetailedMatchRecord:
        return DetailedMatchRecord(
            match_id=match_id,
            hero_id=hero_id,
            player_slot=0,
            radiant_win=won,
            account_id=account_id,
            items=items,
            ability_upgrades=tuple(
                AbilityUpgrade(ability=ability, time=0, level=index + 1)
                for index, ability in enumerate(abilities)
            ),
        )

    return make


@pytest.fixture
def sample_heroes() -> list:
    return [
        HeroRecord(id=1, localized_name="Anti-Mage", roles=("Carry", "Escape", "Nuker")),
        HeroRecord(id=2, localized_name="Axe", roles=("Initiator", "Durable", "Disabler")),
        HeroRecord(id=5, localized_name="Crystal Maiden", roles=("Support", "Disabler", "Nuker")),
        HeroRecord(id=8, localized_name="Juggernaut", roles=("Carry", "Pusher", "Escape")),
        HeroRecord(id=26, localized_name="Lion", roles=("Support", "Disabler", "Nuker")),
    ]


def meta_stat(hero_id: int, win_rate: float, pick_rate: float) -> HeroMetaStat:
    return HeroMetaStat(
        hero_id=hero_id,
        values={
            (Bracket.DIVINE, MetaMetric.WIN_RATE): win_rate,
            (Bracket.DIVINE, MetaMetric.PICK_RATE): pick_rate,
        },
    )


@pytest.fixture
def meta_stat_factory() -> Callable[[int, float, float], HeroMetaStat]:
    return meta_stat
