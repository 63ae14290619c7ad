"""Domain records shared by the analysis features.

Records are immutable once built from provider data. Transformers in
``core.opendota.transformers`` are the only place that constructs them from
raw API payloads.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Generic, Mapping, Optional, Tuple, TypeVar

from .enums import Bracket, MetaMetric

T = TypeVar("T")

# Player slots below this value belong to the Radiant side
RADIANT_SLOT_LIMIT = 128

MAX_ITEM_SLOTS = 6


@dataclass(frozen=True)
class MatchRecord:
    """One match from a player's match history."""

    match_id: int
    hero_id: int
    duration: int
    start_time: int
    player_slot: int
    radiant_win: Optional[bool]
    kills: int = 0
    deaths: int = 0
    assists: int = 0
    lobby_type: int = 0
    party_size: Optional[int] = None
    items: Tuple[int, ...] = ()

    @property
    def is_radiant(self) -> bool:
        return self.player_slot < RADIANT_SLOT_LIMIT

    @property
    def won(self) -> bool:
        """Whether the player's side won the match.

        Matches without a recorded result count as losses for both sides.
        """
        if self.radiant_win is None:
            return False
        return self.is_radiant == self.radiant_win


@dataclass(frozen=True)
class HeroRecord:
    """Static hero reference data."""

    id: int
    localized_name: str
    roles: Tuple[str, ...] = ()
    primary_attr: str = ""
    name: str = ""


@dataclass(frozen=True)
class HeroMetaStat:
    """Per-bracket pick-rate and win-rate percentages for one hero."""

    hero_id: int
    values: Mapping[Tuple[Bracket, MetaMetric], float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))

    def get(self, bracket: Bracket, metric: MetaMetric) -> Optional[float]:
        return self.values.get((bracket, metric))

    def win_rate(self, bracket: Bracket) -> Optional[float]:
        return self.get(bracket, MetaMetric.WIN_RATE)

    def pick_rate(self, bracket: Bracket) -> Optional[float]:
        return self.get(bracket, MetaMetric.PICK_RATE)


@dataclass(frozen=True)
class ItemRecord:
    """Item catalog entry."""

    id: int
    display_name: str
    category: str = ""
    name: str = ""


@dataclass(frozen=True)
class PlayerHeroStat:
    """A player's lifetime record on one hero."""

    hero_id: int
    games: int
    wins: int

    @property
    def win_rate(self) -> Optional[float]:
        if self.games <= 0:
            return None
        return self.wins / self.games


@dataclass(frozen=True)
class HeroMatchupRecord:
    """Aggregate results of a hero against one opponent hero."""

    hero_id: int
    games_played: int
    wins: int


@dataclass(frozen=True)
class AbilityUpgrade:
    ability: int
    time: int
    level: int


@dataclass(frozen=True)
class DetailedMatchRecord:
    """One participant's detailed record from a full match payload."""

    match_id: int
    hero_id: int
    player_slot: int
    radiant_win: bool
    account_id: Optional[int] = None
    items: Tuple[int, ...] = ()
    ability_upgrades: Tuple[AbilityUpgrade, ...] = ()

    @property
    def won(self) -> bool:
        return (self.player_slot < RADIANT_SLOT_LIMIT) == self.radiant_win


@dataclass(frozen=True)
class FetchOutcome(Generic[T]):
    """Result of a single best-effort fetch attempt.

    Exactly one of ``value`` and ``error`` is set.
    """

    key: int
    value: Optional[T] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, key: int, value: T) -> "FetchOutcome[T]":
        return cls(key=key, value=value)

    @classmethod
    def failure(cls, key: int, error: Exception) -> "FetchOutcome[T]":
        return cls(key=key, error=error)


def successful_values(outcomes: "list[FetchOutcome[T]]") -> "list[T]":
    """Keep the values of successful outcomes in attempt order."""
    return [o.value for o in outcomes if o.ok and o.value is not None]

