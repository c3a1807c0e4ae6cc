"""Base catalog source abstract class."""

from abc import ABC, abstractmethod

from loguru import logger

from stoloto_advisor.schemas.lottery import Lottery
from stoloto_advisor.scraper.fallback import FALLBACK_LOTTERIES

SOURCE_UPSTREAM = "upstream"
SOURCE_FALLBACK = "fallback"


class BaseCatalogSource(ABC):
    """Abstract base for all lottery catalog sources."""

    name: str = ""

    @abstractmethod
    async def fetch_catalog(self) -> list[Lottery]:
        """Fetch the catalog from the source. May raise on any failure."""
        ...

    async def load_with_fallback(self) -> tuple[list[Lottery], str]:
        """Fetch the catalog, substituting the fallback catalog on any failure.

        Returns the lotteries together with where they came from
        (``SOURCE_UPSTREAM`` or ``SOURCE_FALLBACK``). Never raises.
        """
        try:
            lotteries = await self.fetch_catalog()
        except Exception as e:
            logger.warning("[{}] unavailable, using fallback data: {}", self.name, e)
            return list(FALLBACK_LOTTERIES), SOURCE_FALLBACK

        if not lotteries:
            logger.warning("[{}] returned an empty game list, using fallback data", self.name)
            return list(FALLBACK_LOTTERIES), SOURCE_FALLBACK

        logger.info("[{}] loaded {} lotteries", self.name, len(lotteries))
        return lotteries, SOURCE_UPSTREAM
