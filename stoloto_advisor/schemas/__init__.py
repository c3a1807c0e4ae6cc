"""Pydantic schemas package."""

from stoloto_advisor.schemas.lottery import (
    DrawFrequency,
    FilterCriteria,
    JackpotRange,
    Lottery,
    LotteryType,
    PriceRange,
    PrizeCategory,
    ProbabilityRange,
    Recommendation,
    RecommendationRequest,
    RecommendationResponse,
    RefreshResponse,
    UserPreferences,
)
from stoloto_advisor.schemas.stoloto import StolotoDraw, StolotoDrawsResponse, StolotoGame

__all__ = [
    "DrawFrequency",
    "FilterCriteria",
    "JackpotRange",
    "Lottery",
    "LotteryType",
    "PriceRange",
    "PrizeCategory",
    "ProbabilityRange",
    "Recommendation",
    "RecommendationRequest",
    "RecommendationResponse",
    "RefreshResponse",
    "UserPreferences",
    "StolotoDraw",
    "StolotoDrawsResponse",
    "StolotoGame",
]
