"""Catalog filter API endpoint."""

from fastapi import APIRouter, Depends

from stoloto_advisor.api.deps import get_catalog_service
from stoloto_advisor.schemas.lottery import FilterCriteria, Lottery
from stoloto_advisor.services.lottery_service import CatalogService

router = APIRouter()


@router.post("", response_model=list[Lottery])
async def filter_lotteries(
    criteria: FilterCriteria,
    service: CatalogService = Depends(get_catalog_service),
):
    """Lotteries matching every supplied criterion."""
    return await service.filter_lotteries(criteria)
