"""Aggregate API v1 router."""

from fastapi import APIRouter

from stoloto_advisor.api.v1.endpoints import (
    lotteries,
    recommendations,
    catalog_filter,
)

api_router = APIRouter()

api_router.include_router(lotteries.router, prefix="/lotteries", tags=["Lotteries"])
api_router.include_router(recommendations.router, prefix="/recommendations", tags=["Recommendations"])
api_router.include_router(catalog_filter.router, prefix="/filter", tags=["Filter"])
