"""Pydantic schemas for lotteries, preferences and recommendations."""

from enum import Enum

from pydantic import BaseModel, Field, model_validator
from pydantic.alias_generators import to_camel


class LotteryType(str, Enum):
    NUMERIC = "числовая"        # numeric-pick
    INSTANT = "моментальная"    # instant
    DRAW = "тиражная"           # draw-based
    SPORTS = "спортлото"        # sports-pool


class DrawFrequency(str, Enum):
    DAILY = "ежедневно"
    SEVERAL_PER_WEEK = "несколько раз в неделю"
    WEEKLY = "еженедельно"
    MONTHLY = "раз в месяц"


class CamelModel(BaseModel):
    """Base model serialised with camelCase keys, accepting either spelling on input."""

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
    }


# --- Catalog ---

class PrizeCategory(CamelModel):
    model_config = {"frozen": True}

    category: str
    prize: str
    probability: str  # odds, e.g. "1:8145060"


class Lottery(CamelModel):
    model_config = {"frozen": True}

    id: str
    name: str
    type: LotteryType
    ticket_price: float
    max_jackpot: float
    current_jackpot: float
    win_probability: float  # percent, chance of any prize
    draw_frequency: DrawFrequency
    description: str
    rules: str
    prize_structure: list[PrizeCategory]
    image_url: str | None = None
    is_active: bool = True


# --- Ranges ---

class NumericRange(CamelModel):
    min: float = Field(ge=0)
    max: float = Field(ge=0)

    @model_validator(mode="after")
    def _check_bounds(self):
        if self.min > self.max:
            raise ValueError(f"min ({self.min}) must not exceed max ({self.max})")
        return self

    def contains(self, value: float) -> bool:
        return self.min <= value <= self.max


class PriceRange(NumericRange):
    pass


class JackpotRange(NumericRange):
    pass


class ProbabilityRange(NumericRange):
    pass


# --- Preferences ---

class UserPreferences(CamelModel):
    ticket_price: PriceRange
    play_frequency: DrawFrequency
    lottery_type: LotteryType | None = None  # None = any type
    max_jackpot: JackpotRange  # compared against the lottery's *current* jackpot
    win_probability: ProbabilityRange


class FilterCriteria(CamelModel):
    ticket_price: PriceRange | None = None
    lottery_type: LotteryType | None = None
    max_jackpot: JackpotRange | None = None
    win_probability: ProbabilityRange | None = None


# --- Recommendations ---

class Recommendation(CamelModel):
    model_config = {"frozen": True}

    lottery: Lottery
    match_score: int = Field(ge=0, le=100)
    personalized_reason: str
    matched_criteria: list[str]
    is_new: bool = True


class RecommendationRequest(CamelModel):
    preferences: UserPreferences
    previous_lottery_ids: list[str] | None = None


class RecommendationResponse(CamelModel):
    recommendations: list[Recommendation]
    total_matches: int
    average_match_score: float


class RefreshResponse(CamelModel):
    total: int
    source: str  # upstream / fallback
    refreshed_at: str
