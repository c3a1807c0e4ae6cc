"""Pydantic schemas for the StolotoAPI draws payload.

Prices and jackpots arrive in kopecks (1 rouble = 100 kopecks).
"""

from pydantic import BaseModel


class StolotoDraw(BaseModel):
    number: int
    drawDate: str
    status: str
    winningNumbers: list[int] | None = None


class StolotoGame(BaseModel):
    name: str           # internal code, e.g. "6x45", "rapido"
    displayName: str
    ticketPrice: int    # kopecks
    jackpot: int        # kopecks
    drawFrequency: str  # free-text label
    draw: StolotoDraw | None = None
    completedDraw: StolotoDraw | None = None


class StolotoDrawsResponse(BaseModel):
    requestStatus: str | None = None
    games: list[StolotoGame]
