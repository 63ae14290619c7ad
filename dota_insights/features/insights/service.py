"""
Insights service - orchestrates provider fetches and the analysis engines.

Failure policy:

- Hero list, hero meta stats and the primary match list are required. If
  fetching them fails, the error reaches the caller as
  ``ProviderFailureError``.
- Per-match detail fetches are sampled best-effort. Each attempt yields a
  ``FetchOutcome`` and only successes are analyzed.
- A player's hero stats for draft suggestions and the item catalog used for
  item names are optional and fall back to nothing.
- Empty inputs produce empty results with ``data_available=False``.
"""

from typing import List, Optional, Sequence

import structlog

from ...core.config import Settings, get_global_settings
from ...core.decorators import service_error_handler
from ...core.enums import Bracket
from ...core.exceptions import DataUnavailableError, ProviderFailureError
from ...core.models import (
    DetailedMatchRecord,
    FetchOutcome,
    MatchRecord,
    PlayerHeroStat,
    successful_values,
)
from ...core.opendota.errors import OpenDotaAPIError
from ...core.reference_cache import ReferenceDataCache
from ...protocols import DataProvider
from ..builds import (
    AbilityBuildAnalysis,
    AbilityBuildAnalyzer,
    ItemBuildAnalysis,
    ItemBuildAnalyzer,
    ItemCatalogGroups,
    MatchupAnalyzer,
    MatchupRankings,
    PlayerHeroAnalyzer,
    PlayerHeroRankings,
    group_catalog,
)
from ..draft import DraftSuggestionRequest, DraftSuggestionResult, HeroSuggestionScorer
from ..patterns import PatternDetector, PatternReport
from ..stats import StatsAggregator
from .schemas import (
    HeroListEntry,
    HeroListResponse,
    PlayerSummaryResponse,
    RecentMatchEntry,
)

logger = structlog.get_logger(__name__)

# Errors a single provider call can fail with
PROVIDER_ERRORS = (OpenDotaAPIError, ProviderFailureError)


class InsightsService:
    """Fetches provider data and runs the analysis engines over it."""

    def __init__(
        self,
        provider: DataProvider,
        cache: ReferenceDataCache,
        settings: Optional[Settings] = None,
    ):
        self.provider = provider
        self.cache = cache
        self.settings = settings or get_global_settings()

        self.aggregator = StatsAggregator()
        self.detector = PatternDetector()
        self.scorer = HeroSuggestionScorer(bracket=Bracket(self.settings.meta_bracket))
        self.matchup_analyzer = MatchupAnalyzer()
        self.item_analyzer = ItemBuildAnalyzer()
        self.ability_analyzer = AbilityBuildAnalyzer()
        self.player_hero_analyzer = PlayerHeroAnalyzer()

    # Fetch helpers

    async def _recent_matches(
        self,
        account_id: int,
        hero_id: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> List[MatchRecord]:
        records = await self.provider.fetch_player_matches(
            account_id,
            hero_id=hero_id,
            limit=limit or self.settings.match_history_limit,
        )
        if not records:
            raise DataUnavailableError(
                "no recent matches",
                resource="player_matches",
                context={"account_id": account_id, "hero_id": hero_id},
            )
        return records

    async def _fetch_player_detail(
        self, match_id: int, account_id: int
    ) -> FetchOutcome[DetailedMatchRecord]:
        """Fetch one match and pick out the player's record."""
        try:
            records = await self.provider.fetch_match_detail(match_id)
        except PROVIDER_ERRORS as e:
            logger.warning(
                "Failed to fetch match detail", match_id=match_id, error=str(e)
            )
            return FetchOutcome.failure(match_id, e)

        for record in records:
            if record.account_id == account_id:
                return FetchOutcome.success(match_id, record)

        logger.warning(
            "Player not found in match detail", match_id=match_id, account_id=account_id
        )
        return FetchOutcome.failure(
            match_id,
            DataUnavailableError("player missing from match", resource="match_detail"),
        )

    async def sample_player_records(
        self, account_id: int, hero_id: int
    ) -> List[DetailedMatchRecord]:
        """
        Detailed records of the player's most recent matches on a hero.

        Fetches are sequential and best-effort: failed attempts are logged
        and left out of the sample.
        """
        matches = await self._recent_matches(account_id, hero_id=hero_id)

        outcomes: List[FetchOutcome[DetailedMatchRecord]] = []
        for match in matches[: self.settings.detail_sample_size]:
            outcomes.append(await self._fetch_player_detail(match.match_id, account_id))

        sampled = successful_values(outcomes)
        logger.info(
            "Match details sampled",
            account_id=account_id,
            hero_id=hero_id,
            attempted=len(outcomes),
            succeeded=len(sampled),
        )
        return sampled

    async def _optional_player_heroes(
        self, account_id: Optional[int]
    ) -> Optional[Sequence[PlayerHeroStat]]:
        if account_id is None:
            return None
        try:
            return await self.provider.fetch_player_heroes(account_id)
        except PROVIDER_ERRORS as e:
            logger.warning(
                "Could not fetch player hero data", account_id=account_id, error=str(e)
            )
            return []

    async def _optional_items(self) -> None:
        try:
            await self.cache.ensure_items(self.provider)
        except PROVIDER_ERRORS as e:
            logger.warning("Item catalog unavailable, using fallback names", error=str(e))

    # Public operations

    @service_error_handler("InsightsService")
    async def player_patterns(self, account_id: int) -> PatternReport:
        """Detect performance patterns over a player's recent matches."""
        heroes = await self.cache.ensure_heroes(self.provider)
        try:
            records = await self._recent_matches(account_id)
        except DataUnavailableError:
            return PatternReport(account_id=account_id)

        profile = self.aggregator.build_profile(records, heroes)
        return self.detector.report(profile, account_id=account_id)

    @service_error_handler("InsightsService")
    async def player_summary(
        self, account_id: int, limit: Optional[int] = None
    ) -> PlayerSummaryResponse:
        """Aggregate totals plus the per-match list, newest first."""
        await self.cache.ensure_heroes(self.provider)
        try:
            records = await self._recent_matches(account_id, limit=limit)
        except DataUnavailableError:
            records = []

        matches = [
            RecentMatchEntry(
                match_id=r.match_id,
                hero_id=r.hero_id,
                hero_name=self.cache.hero_name(r.hero_id),
                won=r.won,
                kills=r.kills,
                deaths=r.deaths,
                assists=r.assists,
                duration=r.duration,
                start_time=r.start_time,
            )
            for r in records
        ]
        return PlayerSummaryResponse(
            account_id=account_id,
            summary=self.aggregator.summarize(records),
            matches=matches,
        )

    @service_error_handler("InsightsService")
    async def player_heroes(self, account_id: int) -> PlayerHeroRankings:
        await self.cache.ensure_heroes(self.provider)
        stats = await self.provider.fetch_player_heroes(account_id)
        return self.player_hero_analyzer.analyze(
            account_id, stats, hero_name=self.cache.hero_name
        )

    @service_error_handler("InsightsService")
    async def hero_matchups(self, hero_id: int) -> MatchupRankings:
        await self.cache.ensure_heroes(self.provider)
        matchups = await self.provider.fetch_hero_matchups(hero_id)
        return self.matchup_analyzer.analyze(
            hero_id, matchups, hero_name=self.cache.hero_name
        )

    @service_error_handler("InsightsService")
    async def item_builds(self, account_id: int, hero_id: int) -> ItemBuildAnalysis:
        await self.cache.ensure_heroes(self.provider)
        await self._optional_items()
        try:
            records = await self.sample_player_records(account_id, hero_id)
        except DataUnavailableError:
            records = []

        return self.item_analyzer.analyze(
            account_id,
            hero_id,
            records,
            item_name=self.cache.item_name,
            hero_name=self.cache.hero_name(hero_id),
        )

    @service_error_handler("InsightsService")
    async def ability_builds(self, account_id: int, hero_id: int) -> AbilityBuildAnalysis:
        await self.cache.ensure_heroes(self.provider)
        try:
            records = await self.sample_player_records(account_id, hero_id)
        except DataUnavailableError:
            records = []

        return self.ability_analyzer.analyze(
            account_id, hero_id, records, hero_name=self.cache.hero_name(hero_id)
        )

    @service_error_handler("InsightsService")
    async def draft_suggestions(self, request: DraftSuggestionRequest) -> DraftSuggestionResult:
        """Score unpicked heroes for the ally team's next pick."""
        heroes = await self.cache.ensure_heroes(self.provider)
        meta_stats = await self.cache.ensure_meta_stats(self.provider)
        player_heroes = await self._optional_player_heroes(request.account_id)

        return self.scorer.suggest(
            list(heroes.values()),
            meta_stats,
            request.ally_heroes,
            request.enemy_heroes,
            player_heroes=player_heroes,
        )

    @service_error_handler("InsightsService")
    async def hero_list(self) -> HeroListResponse:
        heroes = await self.cache.ensure_heroes(self.provider)
        entries = [
            HeroListEntry(
                hero_id=hero.id,
                localized_name=hero.localized_name,
                name=hero.name,
                roles=list(hero.roles),
            )
            for hero in sorted(heroes.values(), key=lambda h: h.id)
        ]
        return HeroListResponse(heroes=entries, total=len(entries))

    @service_error_handler("InsightsService")
    async def item_catalog(self) -> ItemCatalogGroups:
        catalog = await self.cache.ensure_items(self.provider)
        return group_catalog(catalog)
