"""Schemas for aggregated match statistics."""

from typing import Dict, Optional

from pydantic import BaseModel, Field


class BucketStats(BaseModel):
    """Games, wins and win rate of one bucket of matches."""

    label: str = Field(..., description="Bucket key, e.g. 'short' or 'Carry'")
    games: int = Field(default=0, ge=0)
    wins: int = Field(default=0, ge=0)
    win_rate: Optional[float] = Field(
        default=None,
        ge=0.0,
        le=1.0,
        description="Win fraction; absent when the bucket has no games",
    )

    @property
    def has_games(self) -> bool:
        return self.games > 0


class PerformanceProfile(BaseModel):
    """Everything the pattern detector needs about a player's recent matches."""

    overall: BucketStats
    timing: Dict[str, BucketStats] = Field(default_factory=dict)
    roles: Dict[str, BucketStats] = Field(default_factory=dict)
    recent: BucketStats
    party: BucketStats
    solo: BucketStats
    ranked: BucketStats
    unranked: BucketStats
    avg_kills: float = 0.0
    avg_deaths: float = 0.0
    avg_assists: float = 0.0
    record_count: int = Field(default=0, ge=0)


class MatchSummary(BaseModel):
    """Win/loss and average K/D/A over a player's recent matches."""

    games: int = Field(default=0, ge=0)
    wins: int = Field(default=0, ge=0)
    losses: int = Field(default=0, ge=0)
    win_rate: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    avg_kills: float = 0.0
    avg_deaths: float = 0.0
    avg_assists: float = 0.0
    data_available: bool = False
