"""Recommendation API endpoints."""

from fastapi import APIRouter, Depends
from loguru import logger

from stoloto_advisor.api.deps import get_catalog_service
from stoloto_advisor.schemas.lottery import RecommendationRequest, RecommendationResponse
from stoloto_advisor.services import recommendation_service
from stoloto_advisor.services.lottery_service import CatalogService

router = APIRouter()


@router.post("", response_model=RecommendationResponse)
async def recommend(
    request: RecommendationRequest,
    service: CatalogService = Depends(get_catalog_service),
):
    """Rank the catalog against the user's preferences.

    ``previousLotteryIds`` marks which recommendations the user has already seen.
    """
    lotteries = await service.get_all_lotteries()
    recommendations = recommendation_service.generate_recommendations(
        lotteries,
        request.preferences,
        previous_ids=request.previous_lottery_ids,
    )
    logger.debug(
        "{} of {} lotteries recommended", len(recommendations), len(lotteries),
    )
    return recommendation_service.build_response(recommendations)
