"""Unit tests for the catalog service"""

import asyncio

import pytest
from pydantic import ValidationError

from conftest import FakeClock, StubSource, make_lottery
from stoloto_advisor.schemas.lottery import FilterCriteria, LotteryType
from stoloto_advisor.scraper.base import SOURCE_FALLBACK, SOURCE_UPSTREAM
from stoloto_advisor.scraper.fallback import FALLBACK_LOTTERIES
from stoloto_advisor.scraper.stoloto_client import StolotoAPIError
from stoloto_advisor.services.catalog_cache import CatalogCache
from stoloto_advisor.services.lottery_service import CatalogService, matches_criteria


async def test_catalog_is_cached(catalog_service: CatalogService, stub_source: StubSource):
    first = await catalog_service.get_all_lotteries()
    second = await catalog_service.get_all_lotteries()

    assert first == second
    assert stub_source.calls == 1
    assert catalog_service.last_source == SOURCE_UPSTREAM


async def test_catalog_reloaded_after_ttl(
    catalog_service: CatalogService, stub_source: StubSource, fake_clock: FakeClock,
):
    await catalog_service.get_all_lotteries()
    fake_clock.advance(301)
    await catalog_service.get_all_lotteries()

    assert stub_source.calls == 2


async def test_concurrent_misses_share_one_load(catalog_service: CatalogService, stub_source: StubSource):
    results = await asyncio.gather(*(catalog_service.get_all_lotteries() for _ in range(5)))

    assert stub_source.calls == 1
    assert all(r == results[0] for r in results)


async def test_failing_source_serves_fallback(fake_clock: FakeClock):
    service = CatalogService(
        source=StubSource(error=StolotoAPIError("down")),
        cache=CatalogCache(ttl=300, clock=fake_clock),
    )

    lotteries = await service.get_all_lotteries()

    assert lotteries == list(FALLBACK_LOTTERIES)
    assert service.last_source == SOURCE_FALLBACK


async def test_get_lottery_by_id(catalog_service: CatalogService):
    lottery = await catalog_service.get_lottery_by_id("6")

    assert lottery.name == "12/24"
    assert await catalog_service.get_lottery_by_id("404") is None


async def test_get_lottery_by_id_after_expiry_reloads(
    catalog_service: CatalogService, stub_source: StubSource, fake_clock: FakeClock,
):
    await catalog_service.get_all_lotteries()
    fake_clock.advance(1000)

    assert (await catalog_service.get_lottery_by_id("1")).id == "1"
    assert stub_source.calls == 2


async def test_active_lotteries(fake_clock: FakeClock):
    service = CatalogService(
        source=StubSource([make_lottery("on"), make_lottery("off", is_active=False)]),
        cache=CatalogCache(ttl=300, clock=fake_clock),
    )

    assert [l.id for l in await service.get_active_lotteries()] == ["on"]


async def test_filter_is_conjunctive(catalog_service: CatalogService):
    criteria = FilterCriteria(
        ticket_price={"min": 50, "max": 100},
        lottery_type="числовая",
        max_jackpot={"min": 1_000_000, "max": 60_000_000},
    )

    lotteries = await catalog_service.filter_lotteries(criteria)

    assert [l.id for l in lotteries] == ["6", "8"]


async def test_filter_without_criteria_returns_everything(catalog_service: CatalogService):
    lotteries = await catalog_service.filter_lotteries(FilterCriteria())

    assert len(lotteries) == len(FALLBACK_LOTTERIES)


def test_filter_criteria_rejects_unknown_lottery_type():
    with pytest.raises(ValidationError):
        FilterCriteria(lottery_type="lotto")


def test_matches_criteria_lottery_type():
    criteria = FilterCriteria(lottery_type=LotteryType.INSTANT)

    assert matches_criteria(make_lottery(type=LotteryType.INSTANT), criteria)
    assert not matches_criteria(make_lottery(type=LotteryType.NUMERIC), criteria)


def test_matches_criteria_win_probability():
    criteria = FilterCriteria(win_probability={"min": 0.05, "max": 1})

    assert matches_criteria(make_lottery(win_probability=0.05), criteria)
    assert not matches_criteria(make_lottery(win_probability=0.01), criteria)


async def test_refresh_invalidates_and_reloads(catalog_service: CatalogService, stub_source: StubSource):
    await catalog_service.get_all_lotteries()

    result = await catalog_service.refresh()

    assert stub_source.calls == 2
    assert result.total == len(FALLBACK_LOTTERIES)
    assert result.source == SOURCE_UPSTREAM
    assert result.refreshed_at
