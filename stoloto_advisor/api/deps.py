"""Dependency injection for FastAPI."""

from stoloto_advisor.services.lottery_service import CatalogService

catalog_service = CatalogService()


def get_catalog_service() -> CatalogService:
    """Return the process-wide catalog service."""
    return catalog_service
