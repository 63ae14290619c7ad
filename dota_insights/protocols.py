"""Protocol definitions for the data provider consumed by the insights service."""

from abc import abstractmethod
from typing import Dict, List, Optional, Protocol

from .core.models import (
    DetailedMatchRecord,
    HeroMatchupRecord,
    HeroMetaStat,
    HeroRecord,
    ItemRecord,
    MatchRecord,
    PlayerHeroStat,
)


class DataProvider(Protocol):
    """Protocol for statistics provider implementations.

    Every method either returns domain records (possibly empty) or raises.
    Empty results are not errors.
    """

    @abstractmethod
    async def fetch_heroes(self) -> List[HeroRecord]:
        """Get all heroes."""
        ...

    @abstractmethod
    async def fetch_hero_meta_stats(self) -> List[HeroMetaStat]:
        """Get per-bracket meta statistics for every hero."""
        ...

    @abstractmethod
    async def fetch_player_matches(
        self, account_id: int, hero_id: Optional[int] = None, limit: int = 20
    ) -> List[MatchRecord]:
        """Get a player's recent matches, newest first."""
        ...

    @abstractmethod
    async def fetch_match_detail(self, match_id: int) -> List[DetailedMatchRecord]:
        """Get detailed records for all participants of a match."""
        ...

    @abstractmethod
    async def fetch_hero_matchups(self, hero_id: int) -> List[HeroMatchupRecord]:
        """Get a hero's results against each opponent hero."""
        ...

    @abstractmethod
    async def fetch_item_catalog(self) -> Dict[int, ItemRecord]:
        """Get the item catalog keyed by item id."""
        ...

    @abstractmethod
    async def fetch_player_heroes(self, account_id: int) -> List[PlayerHeroStat]:
        """Get a player's per-hero games and wins."""
        ...
