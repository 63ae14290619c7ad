"""
OpenDota gateway - Anti-Corruption Layer for the data provider.

This gateway isolates the insights feature from OpenDota API specifics:
the client returns OpenDota DTOs, the gateway hands out domain records.
It implements the ``DataProvider`` protocol and lets client errors
propagate; deciding what is best-effort is the service's job.
"""

from typing import Dict, List, Optional

import structlog

from ...core.models import (
    DetailedMatchRecord,
    HeroMatchupRecord,
    HeroMetaStat,
    HeroRecord,
    ItemRecord,
    MatchRecord,
    PlayerHeroStat,
)
from ...core.opendota import OpenDotaClient, OpenDotaTransformer

logger = structlog.get_logger(__name__)


class OpenDotaGateway:
    """
    Gateway implementing ``DataProvider`` on top of the OpenDota client.

    Example usage:
        async with OpenDotaClient() as client:
            gateway = OpenDotaGateway(client)
            heroes = await gateway.fetch_heroes()
    """

    def __init__(self, client: OpenDotaClient):
        self.client = client
        self.transformer = OpenDotaTransformer()

    async def fetch_heroes(self) -> List[HeroRecord]:
        dtos = await self.client.get_heroes()
        return [self.transformer.to_hero(dto) for dto in dtos]

    async def fetch_hero_meta_stats(self) -> List[HeroMetaStat]:
        dtos = await self.client.get_hero_stats()
        return self.transformer.to_meta_stats(dtos)

    async def fetch_player_matches(
        self, account_id: int, hero_id: Optional[int] = None, limit: int = 20
    ) -> List[MatchRecord]:
        dtos = await self.client.get_player_matches(account_id, hero_id=hero_id, limit=limit)
        return [self.transformer.to_match(dto) for dto in dtos]

    async def fetch_match_detail(self, match_id: int) -> List[DetailedMatchRecord]:
        dto = await self.client.get_match(match_id)
        records = self.transformer.to_detailed_records(dto)
        logger.debug("Match detail fetched", match_id=match_id, players=len(records))
        return records

    async def fetch_hero_matchups(self, hero_id: int) -> List[HeroMatchupRecord]:
        dtos = await self.client.get_hero_matchups(hero_id)
        return [self.transformer.to_matchup(dto) for dto in dtos]

    async def fetch_item_catalog(self) -> Dict[int, ItemRecord]:
        items = await self.client.get_item_constants()
        return self.transformer.to_item_catalog(items)

    async def fetch_player_heroes(self, account_id: int) -> List[PlayerHeroStat]:
        dtos = await self.client.get_player_heroes(account_id)
        return [self.transformer.to_player_hero(dto) for dto in dtos]
