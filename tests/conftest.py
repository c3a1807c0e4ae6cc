"""Pytest fixtures for testing"""

import os

# Keep test runs from writing the rotating log file
os.environ.setdefault("LOG_FILE", "")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from stoloto_advisor.api.deps import get_catalog_service  # noqa: E402
from stoloto_advisor.main import app  # noqa: E402
from stoloto_advisor.schemas.lottery import (  # noqa: E402
    DrawFrequency,
    Lottery,
    LotteryType,
    UserPreferences,
)
from stoloto_advisor.scraper.base import BaseCatalogSource  # noqa: E402
from stoloto_advisor.scraper.fallback import FALLBACK_LOTTERIES  # noqa: E402
from stoloto_advisor.services.catalog_cache import CatalogCache  # noqa: E402
from stoloto_advisor.services.lottery_service import CatalogService  # noqa: E402


class StubSource(BaseCatalogSource):
    """Catalog source returning a fixed list, or raising ``error``."""

    name = "stub"

    def __init__(self, lotteries: list[Lottery] | None = None, error: Exception | None = None):
        self.lotteries = lotteries or []
        self.error = error
        self.calls = 0

    async def fetch_catalog(self) -> list[Lottery]:
        self.calls += 1
        if self.error:
            raise self.error
        return list(self.lotteries)


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def make_lottery(lottery_id: str = "test", **overrides) -> Lottery:
    fields = {
        "id": lottery_id,
        "name": f"Lottery {lottery_id}",
        "type": LotteryType.NUMERIC,
        "ticket_price": 100,
        "max_jackpot": 5_000_000,
        "current_jackpot": 5_000_000,
        "win_probability": 0.01,
        "draw_frequency": DrawFrequency.DAILY,
        "description": "Test lottery",
        "rules": "Pick numbers",
        "prize_structure": [],
    }
    fields.update(overrides)
    return Lottery(**fields)


def make_preferences(**overrides) -> UserPreferences:
    fields = {
        "ticket_price": {"min": 50, "max": 150},
        "play_frequency": DrawFrequency.DAILY,
        "lottery_type": LotteryType.NUMERIC,
        "max_jackpot": {"min": 1_000_000, "max": 10_000_000},
        "win_probability": {"min": 0.001, "max": 1},
    }
    fields.update(overrides)
    return UserPreferences(**fields)


@pytest.fixture
def fallback_catalog() -> list[Lottery]:
    return list(FALLBACK_LOTTERIES)


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def stub_source(fallback_catalog: list[Lottery]) -> StubSource:
    return StubSource(fallback_catalog)


@pytest.fixture
def catalog_service(stub_source: StubSource, fake_clock: FakeClock) -> CatalogService:
    return CatalogService(source=stub_source, cache=CatalogCache(ttl=300, clock=fake_clock))


@pytest.fixture
def client(catalog_service: CatalogService):
    """FastAPI test client backed by the stub catalog source"""
    app.dependency_overrides[get_catalog_service] = lambda: catalog_service
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
