"""
Populate-once cache for static reference data.

Heroes, the item catalog and hero meta statistics are fetched from the data
provider at most once per cache instance and are read-only afterwards. There
is no TTL and no invalidation. A failed or empty fetch leaves the resource
unpopulated so the next request fetches it again.

The cache is an explicit object handed to whatever needs lookups; nothing in
the package keeps reference data in module globals.
"""

import asyncio
from types import MappingProxyType
from typing import TYPE_CHECKING, Awaitable, Callable, Dict, Mapping, Optional, TypeVar

import structlog

from .models import HeroMetaStat, HeroRecord, ItemRecord

if TYPE_CHECKING:
    from ..protocols import DataProvider

logger = structlog.get_logger(__name__)

K = TypeVar("K")
V = TypeVar("V")


class ReferenceDataCache:
    """Read-through cache of hero list, item catalog and hero meta stats."""

    def __init__(self) -> None:
        self._heroes: Optional[Mapping[int, HeroRecord]] = None
        self._items: Optional[Mapping[int, ItemRecord]] = None
        self._meta_stats: Optional[Mapping[int, HeroMetaStat]] = None
        self._locks: Dict[str, asyncio.Lock] = {
            "heroes": asyncio.Lock(),
            "items": asyncio.Lock(),
            "meta_stats": asyncio.Lock(),
        }
        self._fetches: Dict[str, int] = {"heroes": 0, "items": 0, "meta_stats": 0}

    async def _populate(
        self,
        resource: str,
        current: Callable[[], Optional[Mapping[K, V]]],
        fetch: Callable[[], Awaitable[Dict[K, V]]],
    ) -> Mapping[K, V]:
        cached = current()
        if cached is not None:
            return cached

        async with self._locks[resource]:
            # Another task may have populated it while we waited
            cached = current()
            if cached is not None:
                return cached

            self._fetches[resource] += 1
            data = await fetch()
            if not data:
                logger.warning("Reference data fetch returned nothing", resource=resource)
                return MappingProxyType({})

            frozen = MappingProxyType(dict(data))
            setattr(self, f"_{resource}", frozen)
            logger.info("Reference data cached", resource=resource, entries=len(frozen))
            return frozen

    async def ensure_heroes(self, provider: "DataProvider") -> Mapping[int, HeroRecord]:
        """Return the hero list keyed by id, fetching it on first use."""

        async def fetch() -> Dict[int, HeroRecord]:
            return {hero.id: hero for hero in await provider.fetch_heroes()}

        return await self._populate("heroes", lambda: self._heroes, fetch)

    async def ensure_items(self, provider: "DataProvider") -> Mapping[int, ItemRecord]:
        """Return the item catalog keyed by id, fetching it on first use."""

        async def fetch() -> Dict[int, ItemRecord]:
            return await provider.fetch_item_catalog()

        return await self._populate("items", lambda: self._items, fetch)

    async def ensure_meta_stats(
        self, provider: "DataProvider"
    ) -> Mapping[int, HeroMetaStat]:
        """Return hero meta stats keyed by hero id, fetching them on first use."""

        async def fetch() -> Dict[int, HeroMetaStat]:
            return {stat.hero_id: stat for stat in await provider.fetch_hero_meta_stats()}

        return await self._populate("meta_stats", lambda: self._meta_stats, fetch)

    # Read-only accessors

    @property
    def heroes(self) -> Mapping[int, HeroRecord]:
        return self._heroes if self._heroes is not None else MappingProxyType({})

    @property
    def items(self) -> Mapping[int, ItemRecord]:
        return self._items if self._items is not None else MappingProxyType({})

    @property
    def meta_stats(self) -> Mapping[int, HeroMetaStat]:
        return self._meta_stats if self._meta_stats is not None else MappingProxyType({})

    def hero(self, hero_id: int) -> Optional[HeroRecord]:
        return self.heroes.get(hero_id)

    def hero_name(self, hero_id: int) -> str:
        hero = self.hero(hero_id)
        return hero.localized_name if hero else f"Hero ID {hero_id}"

    def item_name(self, item_id: int) -> str:
        if item_id <= 0:
            return "Empty Slot"
        item = self.items.get(item_id)
        return item.display_name if item else f"Item ID {item_id}"

    def meta_stat(self, hero_id: int) -> Optional[HeroMetaStat]:
        return self.meta_stats.get(hero_id)

    def stats(self) -> Dict[str, Dict[str, int | bool]]:
        """Get fetch counts and population state per resource."""
        return {
            resource: {
                "populated": getattr(self, f"_{resource}") is not None,
                "fetches": self._fetches[resource],
            }
            for resource in self._locks
        }
