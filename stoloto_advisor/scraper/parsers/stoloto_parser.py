"""Parser for StolotoAPI games: converts upstream records into Lottery entities.

Type, draw frequency and win probability are inferred from the game code and
the free-text frequency label through ordered rule tables: the first rule whose
substrings occur in the (lower-cased) text wins, otherwise the default applies.
"""

from loguru import logger

from stoloto_advisor.schemas.lottery import (
    DrawFrequency,
    Lottery,
    LotteryType,
    PrizeCategory,
)
from stoloto_advisor.schemas.stoloto import StolotoGame
from stoloto_advisor.scraper.base import BaseCatalogSource
from stoloto_advisor.scraper.stoloto_client import StolotoClient

Rule = tuple[tuple[str, ...], object]

TYPE_RULES: list[Rule] = [
    (("6x45", "5x36", "4x20", "7x49"), LotteryType.NUMERIC),
    (("rapido", "12x24"), LotteryType.INSTANT),
    (("top3",), LotteryType.SPORTS),
]
DEFAULT_TYPE = LotteryType.DRAW

FREQUENCY_RULES: list[Rule] = [
    (("daily", "ежедневно"), DrawFrequency.DAILY),
    (("weekly", "еженедельно"), DrawFrequency.WEEKLY),
    (("several", "несколько"), DrawFrequency.SEVERAL_PER_WEEK),
    (("monthly", "месяц"), DrawFrequency.MONTHLY),
]
DEFAULT_FREQUENCY = DrawFrequency.WEEKLY

# Coarse per-game estimates in percent, not computed odds
PROBABILITY_RULES: list[Rule] = [
    (("6x45",), 0.00001),
    (("5x36",), 0.0001),
    (("4x20",), 0.001),
    (("rapido", "12x24"), 0.01),
]
DEFAULT_PROBABILITY = 0.0001

DESCRIPTION_TEMPLATES = {
    LotteryType.NUMERIC: "{name} - популярная числовая лотерея. Выберите числа и выиграйте крупный приз!",
    LotteryType.INSTANT: "{name} - моментальная лотерея с частыми розыгрышами и быстрыми результатами!",
    LotteryType.DRAW: "{name} - классическая тиражная лотерея с большими призами!",
    LotteryType.SPORTS: "{name} - спортивная лотерея для любителей динамичных игр!",
}

RULES_TEMPLATE = (
    "Купите билет {name}, выберите числа согласно правилам игры. "
    "Розыгрыш проходит согласно расписанию. "
    "При совпадении всех чисел вы выигрываете главный приз!"
)


def classify(text: str, rules: list[Rule], default):
    """Return the result of the first rule with a substring contained in ``text``."""
    lowered = text.lower()
    for needles, result in rules:
        if any(needle in lowered for needle in needles):
            return result
    return default


def kopecks_to_roubles(kopecks: int) -> float:
    return kopecks / 100


def determine_lottery_type(name: str) -> LotteryType:
    return classify(name, TYPE_RULES, DEFAULT_TYPE)


def convert_draw_frequency(label: str) -> DrawFrequency:
    return classify(label, FREQUENCY_RULES, DEFAULT_FREQUENCY)


def estimate_win_probability(name: str) -> float:
    return classify(name, PROBABILITY_RULES, DEFAULT_PROBABILITY)


def generate_prize_structure(jackpot: float) -> list[PrizeCategory]:
    """Synthetic four-tier prize table: jackpot, 10% of jackpot, two fixed tiers."""
    return [
        PrizeCategory(category="Джекпот", prize=f"{jackpot / 1_000_000:.1f} млн ₽", probability="1:1000000"),
        PrizeCategory(category="2 категория", prize=f"{jackpot * 0.1:.0f} ₽", probability="1:100000"),
        PrizeCategory(category="3 категория", prize="10000 ₽", probability="1:10000"),
        PrizeCategory(category="4 категория", prize="1000 ₽", probability="1:1000"),
    ]


def convert_game(game: StolotoGame) -> Lottery:
    """Convert one upstream game record into a Lottery.

    Deterministic: the same record always yields identical fields.
    """
    lottery_type = determine_lottery_type(game.name)
    current_jackpot = kopecks_to_roubles(game.jackpot)

    return Lottery(
        id=game.name,
        name=game.displayName,
        type=lottery_type,
        ticket_price=kopecks_to_roubles(game.ticketPrice),
        max_jackpot=current_jackpot,  # no historical maximum upstream
        current_jackpot=current_jackpot,
        win_probability=estimate_win_probability(game.name),
        draw_frequency=convert_draw_frequency(game.drawFrequency),
        description=DESCRIPTION_TEMPLATES[lottery_type].format(name=game.displayName),
        rules=RULES_TEMPLATE.format(name=game.displayName),
        prize_structure=generate_prize_structure(current_jackpot),
        is_active=True,
    )


class StolotoSource(BaseCatalogSource):
    name = "StolotoAPI"

    def __init__(self, client: StolotoClient | None = None):
        self.client = client or StolotoClient()

    async def fetch_catalog(self) -> list[Lottery]:
        response = await self.client.get_all_draws()

        lotteries = []
        seen: set[str] = set()
        for game in response.games:
            if game.name in seen:
                logger.warning("Skipping duplicate StolotoAPI game: {}", game.name)
                continue
            seen.add(game.name)
            lotteries.append(convert_game(game))

        return lotteries
