from typing import Annotated, Optional

from fastapi import APIRouter, Path, Query

from ..builds import (
    AbilityBuildAnalysis,
    ItemBuildAnalysis,
    ItemCatalogGroups,
    MatchupRankings,
    PlayerHeroRankings,
)
from ..draft import DraftSuggestionRequest, DraftSuggestionResult
from ..patterns import PatternReport
from .dependencies import InsightsServiceDep
from .schemas import HeroListResponse, PlayerSummaryResponse

router = APIRouter(tags=["insights"])

AccountId = Annotated[int, Path(ge=0, description="OpenDota account id (32-bit Steam id)")]
HeroId = Annotated[int, Path(ge=1, description="Hero id")]


@router.get("/players/{account_id}/patterns", response_model=PatternReport)
async def get_player_patterns(
    service: InsightsServiceDep, account_id: AccountId
) -> PatternReport:
    """Detect strengths and weaknesses over the player's recent matches."""
    return await service.player_patterns(account_id)


@router.get("/players/{account_id}/summary", response_model=PlayerSummaryResponse)
async def get_player_summary(
    service: InsightsServiceDep,
    account_id: AccountId,
    limit: Annotated[
        Optional[int],
        Query(ge=1, le=100, description="Number of recent matches (default from settings)"),
    ] = None,
) -> PlayerSummaryResponse:
    """Win/loss, average K/D/A and the per-match list over recent matches."""
    return await service.player_summary(account_id, limit=limit)


@router.get("/players/{account_id}/heroes", response_model=PlayerHeroRankings)
async def get_player_heroes(
    service: InsightsServiceDep, account_id: AccountId
) -> PlayerHeroRankings:
    """Most played and most effective heroes."""
    return await service.player_heroes(account_id)


@router.get(
    "/players/{account_id}/heroes/{hero_id}/items", response_model=ItemBuildAnalysis
)
async def get_item_builds(
    service: InsightsServiceDep,
    account_id: AccountId,
    hero_id: HeroId,
) -> ItemBuildAnalysis:
    """Item frequency, win rates and build tendency on one hero."""
    return await service.item_builds(account_id, hero_id)


@router.get(
    "/players/{account_id}/heroes/{hero_id}/abilities",
    response_model=AbilityBuildAnalysis,
)
async def get_ability_builds(
    service: InsightsServiceDep,
    account_id: AccountId,
    hero_id: HeroId,
) -> AbilityBuildAnalysis:
    """Most common skill choice per level on one hero."""
    return await service.ability_builds(account_id, hero_id)


@router.get("/heroes", response_model=HeroListResponse)
async def get_heroes(service: InsightsServiceDep) -> HeroListResponse:
    """All heroes with ids, display names and internal names."""
    return await service.hero_list()


@router.get("/heroes/{hero_id}/matchups", response_model=MatchupRankings)
async def get_hero_matchups(
    service: InsightsServiceDep, hero_id: HeroId
) -> MatchupRankings:
    """Best and worst opponents for a hero."""
    return await service.hero_matchups(hero_id)


@router.get("/items", response_model=ItemCatalogGroups)
async def get_item_catalog(service: InsightsServiceDep) -> ItemCatalogGroups:
    """Item catalog grouped into consumables, equipment and other items."""
    return await service.item_catalog()


@router.post("/draft/suggestions", response_model=DraftSuggestionResult)
async def suggest_draft_picks(
    request: DraftSuggestionRequest, service: InsightsServiceDep
) -> DraftSuggestionResult:
    """Rank unpicked heroes for the ally team's next pick."""
    return await service.draft_suggestions(request)
