"""Schemas for detected performance patterns."""

from typing import List, Optional

from pydantic import BaseModel, Field

from ...core.enums import PatternCategory, PatternDirection


class Pattern(BaseModel):
    """A classified deviation of one bucket from its baseline."""

    category: PatternCategory
    direction: PatternDirection
    bucket: str = Field(..., description="Bucket the pattern was derived from")
    description: str
    confidence: float = Field(..., ge=0.0, le=1.0)
    sample_size: int = Field(..., ge=0)
    recommendation: str


class PatternReport(BaseModel):
    """All patterns detected for a player plus the highest-confidence ones."""

    account_id: Optional[int] = None
    record_count: int = Field(default=0, ge=0)
    baseline_win_rate: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    patterns: List[Pattern] = Field(default_factory=list)
    top_patterns: List[Pattern] = Field(default_factory=list)
    data_available: bool = False
