"""Lottery service: orchestrates catalog loading, caching and lookups."""

import asyncio
from datetime import datetime, timezone

from loguru import logger

from stoloto_advisor.schemas.lottery import FilterCriteria, Lottery, RefreshResponse
from stoloto_advisor.scraper.base import BaseCatalogSource
from stoloto_advisor.scraper.parsers.stoloto_parser import StolotoSource
from stoloto_advisor.services.catalog_cache import CatalogCache


def matches_criteria(lottery: Lottery, criteria: FilterCriteria) -> bool:
    """True when the lottery satisfies every supplied criterion (AND semantics)."""
    if criteria.ticket_price and not criteria.ticket_price.contains(lottery.ticket_price):
        return False
    if criteria.lottery_type is not None and lottery.type != criteria.lottery_type:
        return False
    if criteria.max_jackpot and not criteria.max_jackpot.contains(lottery.current_jackpot):
        return False
    if criteria.win_probability and not criteria.win_probability.contains(lottery.win_probability):
        return False
    return True


class CatalogService:
    """Resolves the lottery catalog: cache first, then the source (with fallback).

    Concurrent cache misses share one refresh.
    """

    def __init__(
        self,
        source: BaseCatalogSource | None = None,
        cache: CatalogCache | None = None,
    ):
        self.source = source or StolotoSource()
        self.cache = cache or CatalogCache()
        self._refresh_lock = asyncio.Lock()
        self.last_source: str | None = None

    async def _load(self) -> list[Lottery]:
        lotteries, origin = await self.source.load_with_fallback()
        self.cache.set(lotteries)
        self.last_source = origin
        return lotteries

    async def get_all_lotteries(self) -> list[Lottery]:
        cached = self.cache.get()
        if cached is not None:
            return cached

        async with self._refresh_lock:
            # Another request may have refreshed while we waited
            cached = self.cache.get()
            if cached is not None:
                return cached
            logger.info("Catalog cache miss, loading from {}", self.source.name)
            return await self._load()

    async def get_lottery_by_id(self, lottery_id: str) -> Lottery | None:
        lottery = self.cache.get_by_id(lottery_id)
        if lottery is not None:
            return lottery

        lotteries = await self.get_all_lotteries()
        return next((lottery for lottery in lotteries if lottery.id == lottery_id), None)

    async def get_active_lotteries(self) -> list[Lottery]:
        return [lottery for lottery in await self.get_all_lotteries() if lottery.is_active]

    async def filter_lotteries(self, criteria: FilterCriteria) -> list[Lottery]:
        lotteries = await self.get_all_lotteries()
        return [lottery for lottery in lotteries if matches_criteria(lottery, criteria)]

    async def refresh(self) -> RefreshResponse:
        """Drop the cached catalog and reload it through the source."""
        async with self._refresh_lock:
            self.cache.invalidate()
            lotteries = await self._load()

        logger.info("Catalog refreshed: {} lotteries from {}", len(lotteries), self.last_source)
        return RefreshResponse(
            total=len(lotteries),
            source=self.last_source,
            refreshed_at=datetime.now(timezone.utc).isoformat(),
        )
