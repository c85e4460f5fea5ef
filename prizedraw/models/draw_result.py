"""Draw result model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DrawResult:
    """Outcome of a single draw, linking a winner to a prize."""

    prize_name: str
    prize_item: str
    winner_id: str
    winner_name: str
