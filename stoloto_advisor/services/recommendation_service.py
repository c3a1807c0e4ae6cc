"""Recommendation service: scores, explains, ranks and filters the catalog."""

from collections.abc import Iterable

from stoloto_advisor.config import settings
from stoloto_advisor.schemas.lottery import (
    DrawFrequency,
    Lottery,
    LotteryType,
    Recommendation,
    RecommendationResponse,
    UserPreferences,
)
from stoloto_advisor.services.scoring import (
    calculate_match_score,
    frequency_matches,
    jackpot_matches,
    price_matches,
    probability_matches,
    type_matches,
)

CRITERION_TICKET_PRICE = "ticket price"
CRITERION_LOTTERY_TYPE = "lottery type"
CRITERION_JACKPOT = "jackpot size"
CRITERION_WIN_PROBABILITY = "win probability"
CRITERION_DRAW_FREQUENCY = "draw frequency"

TYPE_REASONS = {
    LotteryType.NUMERIC: "You prefer number lotteries where you pick the numbers yourself",
    LotteryType.INSTANT: "You enjoy fast-paced games with frequent draws",
    LotteryType.DRAW: "You prefer traditional draw lotteries",
    LotteryType.SPORTS: "You are interested in sports lotteries",
}

FREQUENCY_REASONS = {
    DrawFrequency.DAILY: "Daily draws mean you never wait long for a result",
    DrawFrequency.WEEKLY: "Weekly draws suit how often you play",
}

HIGH_PROBABILITY = 0.05  # percent
GOOD_PROBABILITY = 0.01

PERFECT_SCORE = 90
GREAT_SCORE = 70

FALLBACK_REASON = "You might enjoy this lottery!"


def get_matched_criteria(lottery: Lottery, preferences: UserPreferences) -> list[str]:
    """Labels of the criteria the lottery fully satisfies."""
    criteria = []
    if price_matches(lottery, preferences):
        criteria.append(CRITERION_TICKET_PRICE)
    if type_matches(lottery, preferences):
        criteria.append(CRITERION_LOTTERY_TYPE)
    if jackpot_matches(lottery, preferences):
        criteria.append(CRITERION_JACKPOT)
    if probability_matches(lottery, preferences):
        criteria.append(CRITERION_WIN_PROBABILITY)
    if frequency_matches(lottery, preferences):
        criteria.append(CRITERION_DRAW_FREQUENCY)
    return criteria


def _collect_reasons(lottery: Lottery, preferences: UserPreferences) -> list[str]:
    reasons = []

    if price_matches(lottery, preferences):
        budget = preferences.ticket_price
        reasons.append(
            f"The ticket costs {lottery.ticket_price:g} ₽, which fits your budget "
            f"({budget.min:g}-{budget.max:g} ₽)"
        )

    if type_matches(lottery, preferences):
        reasons.append(TYPE_REASONS[lottery.type])

    jackpot_mln = lottery.current_jackpot / 1_000_000
    if jackpot_matches(lottery, preferences):
        reasons.append(
            f"The current jackpot of {jackpot_mln:.1f}M ₽ is within the range you are interested in"
        )
    elif lottery.current_jackpot > preferences.max_jackpot.max:
        reasons.append(
            f"A huge jackpot of {jackpot_mln:.1f}M ₽ - a chance to win even more than you planned!"
        )

    probability = lottery.win_probability
    if probability >= preferences.win_probability.min:
        if probability >= HIGH_PROBABILITY:
            reasons.append(f"High chance of winning ({probability:.3f}%) - excellent odds!")
        elif probability >= GOOD_PROBABILITY:
            reasons.append(f"Good chance of winning ({probability:.3f}%) with a decent prize pool")

    if frequency_matches(lottery, preferences):
        reasons.append(FREQUENCY_REASONS[preferences.play_frequency])

    return reasons


def generate_personalized_reason(
    lottery: Lottery, preferences: UserPreferences, match_score: int
) -> str:
    reasons = _collect_reasons(lottery, preferences)
    body = ". ".join(reasons) + "." if reasons else FALLBACK_REASON

    if match_score >= PERFECT_SCORE:
        return f"Perfect choice! {body}"
    if match_score >= GREAT_SCORE:
        return f"Great option! {body}"
    return body


def generate_recommendations(
    lotteries: Iterable[Lottery],
    preferences: UserPreferences,
    previous_ids: Iterable[str] | None = None,
    threshold: int | None = None,
) -> list[Recommendation]:
    """Rank ``lotteries`` for ``preferences``.

    Entries below ``threshold`` are dropped; the rest are ordered by descending
    match score, ties keeping catalog order. ``is_new`` is True unless the id is
    in ``previous_ids``; with no ``previous_ids`` every entry is new.
    """
    if threshold is None:
        threshold = settings.RECOMMENDATION_THRESHOLD
    seen = set(previous_ids) if previous_ids is not None else None

    scored = []
    for lottery in lotteries:
        match_score = calculate_match_score(lottery, preferences)
        scored.append(Recommendation(
            lottery=lottery,
            match_score=match_score,
            personalized_reason=generate_personalized_reason(lottery, preferences, match_score),
            matched_criteria=get_matched_criteria(lottery, preferences),
            is_new=seen is None or lottery.id not in seen,
        ))

    scored.sort(key=lambda r: r.match_score, reverse=True)
    return [r for r in scored if r.match_score >= threshold]


def build_response(recommendations: list[Recommendation]) -> RecommendationResponse:
    total = len(recommendations)
    average = sum(r.match_score for r in recommendations) / total if total > 0 else 0.0
    return RecommendationResponse(
        recommendations=recommendations,
        total_matches=total,
        average_match_score=average,
    )
