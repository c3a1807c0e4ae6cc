"""Match scoring: weighted compatibility between a lottery and user preferences.

Criteria and weights:

    ticket price      25   range, partial credit
    lottery type      20   equality, only when a type is requested
    current jackpot   30   range, partial credit
    win probability   25   range, partial credit

Out-of-range values earn ``weight * (1 - distance / width)`` floored at 0, where
distance is measured to the nearer bound. A zero-width range (min == max) is an
exact-match requirement with binary credit. The score is the earned share of
the applicable points (100 with a type preference, 80 without), scaled to 0-100.
"""

import math

from stoloto_advisor.schemas.lottery import DrawFrequency, Lottery, NumericRange, UserPreferences

WEIGHT_TICKET_PRICE = 25
WEIGHT_LOTTERY_TYPE = 20
WEIGHT_JACKPOT = 30
WEIGHT_WIN_PROBABILITY = 25

# Play frequencies that can be matched against a lottery's draw frequency
FREQUENCY_MATCH_MARKERS = {
    DrawFrequency.DAILY: "ежедневно",
    DrawFrequency.WEEKLY: "еженедельно",
}


def range_credit(value: float, bounds: NumericRange, weight: float) -> float:
    """Points earned by ``value`` against ``bounds`` for a criterion of ``weight``."""
    if bounds.contains(value):
        return float(weight)

    width = bounds.max - bounds.min
    if width <= 0:
        return 0.0

    distance = min(abs(value - bounds.min), abs(value - bounds.max))
    return max(0.0, weight - distance / width * weight)


def price_matches(lottery: Lottery, preferences: UserPreferences) -> bool:
    return preferences.ticket_price.contains(lottery.ticket_price)


def type_matches(lottery: Lottery, preferences: UserPreferences) -> bool:
    return preferences.lottery_type is not None and lottery.type == preferences.lottery_type


def jackpot_matches(lottery: Lottery, preferences: UserPreferences) -> bool:
    return preferences.max_jackpot.contains(lottery.current_jackpot)


def probability_matches(lottery: Lottery, preferences: UserPreferences) -> bool:
    return preferences.win_probability.contains(lottery.win_probability)


def frequency_matches(lottery: Lottery, preferences: UserPreferences) -> bool:
    """Daily/weekly play frequency against the lottery's draw frequency. Carries no points."""
    marker = FREQUENCY_MATCH_MARKERS.get(preferences.play_frequency)
    return marker is not None and marker in lottery.draw_frequency.value


def calculate_match_score(lottery: Lottery, preferences: UserPreferences) -> int:
    """Score ``lottery`` against ``preferences`` as an integer in [0, 100]."""
    earned = 0.0
    applicable = 0

    earned += range_credit(lottery.ticket_price, preferences.ticket_price, WEIGHT_TICKET_PRICE)
    applicable += WEIGHT_TICKET_PRICE

    if preferences.lottery_type is not None:
        applicable += WEIGHT_LOTTERY_TYPE
        if lottery.type == preferences.lottery_type:
            earned += WEIGHT_LOTTERY_TYPE

    earned += range_credit(lottery.current_jackpot, preferences.max_jackpot, WEIGHT_JACKPOT)
    applicable += WEIGHT_JACKPOT

    earned += range_credit(
        lottery.win_probability, preferences.win_probability, WEIGHT_WIN_PROBABILITY,
    )
    applicable += WEIGHT_WIN_PROBABILITY

    # round half up
    return int(math.floor(earned / applicable * 100 + 0.5))
