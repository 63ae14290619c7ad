"""Schemas for the insights API responses."""

from typing import List

from pydantic import BaseModel, Field

from ..stats.schemas import MatchSummary


class RecentMatchEntry(BaseModel):
    """One match from the player's recent history."""

    match_id: int
    hero_id: int
    hero_name: str
    won: bool
    kills: int = 0
    deaths: int = 0
    assists: int = 0
    duration: int = Field(default=0, ge=0, description="Match length in seconds")
    start_time: int = Field(default=0, description="Unix timestamp of the match start")


class PlayerSummaryResponse(BaseModel):
    """Recent match summary for one player."""

    account_id: int
    summary: MatchSummary
    matches: List[RecentMatchEntry] = Field(
        default_factory=list, description="Recent matches, newest first"
    )


class HeroListEntry(BaseModel):
    hero_id: int
    localized_name: str
    name: str = Field(default="", description="Internal hero name, e.g. npc_dota_hero_axe")
    roles: List[str] = Field(default_factory=list)


class HeroListResponse(BaseModel):
    """All known heroes ordered by id."""

    heroes: List[HeroListEntry] = Field(default_factory=list)
    total: int = Field(default=0, ge=0)
