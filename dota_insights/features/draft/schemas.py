"""Schemas for draft pick suggestions."""

from typing import List, Optional

from pydantic import BaseModel, Field


class DraftSuggestionRequest(BaseModel):
    """Current draft state and optional player to personalize for."""

    ally_heroes: List[int] = Field(default_factory=list, max_length=5)
    enemy_heroes: List[int] = Field(default_factory=list, max_length=5)
    account_id: Optional[int] = Field(
        default=None, description="Player whose hero pool is taken into account"
    )


class ScoredHero(BaseModel):
    """A candidate hero with its additive score and the reasons behind it."""

    hero_id: int
    hero_name: str
    roles: List[str] = Field(default_factory=list)
    score: int = 0
    reasons: List[str] = Field(default_factory=list)


class DraftSuggestionResult(BaseModel):
    """Ranked suggestions plus the team composition they were scored against."""

    ally_heroes: List[int] = Field(default_factory=list)
    enemy_heroes: List[int] = Field(default_factory=list)
    ally_roles: List[str] = Field(default_factory=list)
    missing_roles: List[str] = Field(default_factory=list)
    suggestions: List[ScoredHero] = Field(default_factory=list)
    player_history_requested: bool = False
    used_player_history: bool = False
