"""Prize model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Prize:
    """A prize category with a remaining quantity.

    ``draw_from_all`` prizes can go to anyone who has not already won a prize
    with the same name; the others only go to participants with no wins yet.
    """

    name: str
    item: str
    quantity: int
    draw_from_all: bool = False

    @property
    def is_exhausted(self) -> bool:
        return self.quantity <= 0
