"""Unit tests for the catalog cache"""

from conftest import FakeClock, make_lottery
from stoloto_advisor.services.catalog_cache import CatalogCache


def test_empty_cache_reports_absence(fake_clock: FakeClock):
    cache = CatalogCache(ttl=300, clock=fake_clock)

    assert cache.get() is None
    assert cache.get_by_id("a") is None


def test_set_then_get_within_window(fake_clock: FakeClock):
    cache = CatalogCache(ttl=300, clock=fake_clock)
    cache.set([make_lottery("a"), make_lottery("b")])

    fake_clock.advance(299)

    assert [l.id for l in cache.get()] == ["a", "b"]
    assert cache.get_by_id("b").id == "b"
    assert cache.get_by_id("missing") is None


def test_expiry_is_all_or_nothing(fake_clock: FakeClock):
    cache = CatalogCache(ttl=300, clock=fake_clock)
    cache.set([make_lottery("a")])

    fake_clock.advance(300)

    assert cache.get() is None
    assert cache.get_by_id("a") is None


def test_set_replaces_wholesale_and_restarts_window(fake_clock: FakeClock):
    cache = CatalogCache(ttl=300, clock=fake_clock)
    cache.set([make_lottery("a")])
    fake_clock.advance(200)

    cache.set([make_lottery("b")])
    fake_clock.advance(200)

    assert [l.id for l in cache.get()] == ["b"]
    assert cache.get_by_id("a") is None


def test_invalidate(fake_clock: FakeClock):
    cache = CatalogCache(ttl=300, clock=fake_clock)
    cache.set([make_lottery("a")])

    cache.invalidate()

    assert cache.get() is None
    assert cache.get_by_id("a") is None


def test_returned_list_is_a_copy(fake_clock: FakeClock):
    cache = CatalogCache(ttl=300, clock=fake_clock)
    cache.set([make_lottery("a")])

    cache.get().clear()

    assert len(cache.get()) == 1
