"""In-memory catalog cache with a time-to-live.

Staleness is all-or-nothing: once the window since the last ``set`` has
elapsed, both ``get`` and ``get_by_id`` report absence, even though the old
snapshot is still held. Expiry is checked only on access.
"""

import threading
import time
from collections.abc import Callable

from loguru import logger

from stoloto_advisor.config import settings
from stoloto_advisor.schemas.lottery import Lottery


class CatalogCache:
    def __init__(
        self,
        ttl: float | None = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.ttl = ttl if ttl is not None else settings.CATALOG_CACHE_TTL_SECONDS
        self._clock = clock
        self._lock = threading.Lock()
        self._lotteries: tuple[Lottery, ...] = ()
        self._by_id: dict[str, Lottery] = {}
        self._stored_at: float | None = None

    def _is_valid(self) -> bool:
        return self._stored_at is not None and self._clock() - self._stored_at < self.ttl

    def get(self) -> list[Lottery] | None:
        """Return the cached catalog, or None when empty or expired."""
        with self._lock:
            if not self._is_valid():
                return None
            return list(self._lotteries)

    def set(self, lotteries: list[Lottery]) -> None:
        """Replace the cached catalog wholesale and restart the window."""
        snapshot = tuple(lotteries)
        by_id = {lottery.id: lottery for lottery in snapshot}
        with self._lock:
            self._lotteries = snapshot
            self._by_id = by_id
            self._stored_at = self._clock()
        logger.debug("Catalog cache set: {} lotteries, ttl {}s", len(snapshot), self.ttl)

    def get_by_id(self, lottery_id: str) -> Lottery | None:
        with self._lock:
            if not self._is_valid():
                return None
            return self._by_id.get(lottery_id)

    def invalidate(self) -> None:
        with self._lock:
            self._lotteries = ()
            self._by_id = {}
            self._stored_at = None
        logger.debug("Catalog cache invalidated")
