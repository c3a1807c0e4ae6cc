"""Lottery catalog API endpoints."""

from fastapi import APIRouter, Depends, HTTPException

from stoloto_advisor.api.deps import get_catalog_service
from stoloto_advisor.schemas.lottery import Lottery, RefreshResponse
from stoloto_advisor.services.lottery_service import CatalogService

router = APIRouter()


@router.get("", response_model=list[Lottery])
async def list_lotteries(service: CatalogService = Depends(get_catalog_service)):
    """All available lotteries (upstream catalog or fallback)."""
    return await service.get_all_lotteries()


@router.get("/active", response_model=list[Lottery])
async def list_active_lotteries(service: CatalogService = Depends(get_catalog_service)):
    return await service.get_active_lotteries()


@router.post("/refresh", response_model=RefreshResponse)
async def refresh_catalog(service: CatalogService = Depends(get_catalog_service)):
    """Invalidate the catalog cache and reload it from StolotoAPI."""
    return await service.refresh()


@router.get("/{lottery_id}", response_model=Lottery)
async def get_lottery(
    lottery_id: str,
    service: CatalogService = Depends(get_catalog_service),
):
    lottery = await service.get_lottery_by_id(lottery_id)
    if not lottery:
        raise HTTPException(status_code=404, detail=f"Lottery {lottery_id} not found")
    return lottery
