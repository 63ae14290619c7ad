"""Draft hero suggestion feature."""

from .scorer import HeroSuggestionScorer
from .schemas import DraftSuggestionRequest, DraftSuggestionResult, ScoredHero

__all__ = [
    "HeroSuggestionScorer",
    "DraftSuggestionRequest",
    "DraftSuggestionResult",
    "ScoredHero",
]
