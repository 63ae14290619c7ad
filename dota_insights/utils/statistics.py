"""Statistical utility functions for safe calculations."""

import statistics
from typing import Callable, Iterable, List, Optional, TypeVar

T = TypeVar("T")


def safe_mean(values: List[float], default: float = 0.0) -> float:
    """
    Safely calculate mean of values, returning default if list is empty.

    Args:
        values: List of numeric values
        default: Value to return if list is empty

    Returns:
        Mean of values or default value
    """
    return statistics.mean(values) if values else default


def win_rate(wins: int, games: int) -> Optional[float]:
    """
    Win fraction in [0, 1], or None when there are no games.

    A zero-game sample has no win rate at all; callers must not treat it as 0.
    """
    if games <= 0:
        return None
    return wins / games


def top_n(
    items: Iterable[T],
    key: Callable[[T], float],
    limit: int,
    descending: bool = True,
) -> List[T]:
    """Sort by key and keep the first ``limit`` entries.

    Python's sort is stable, so entries with equal keys keep input order.
    """
    return sorted(items, key=key, reverse=descending)[:limit]
