"""Business logic for drawing a winner for a prize."""

from __future__ import annotations

import logging
import random
import time

from prizedraw.errors import NoEligibleParticipantsError, PrizeExhaustedError, PrizeNotFoundError
from prizedraw.models.draw_result import DrawResult
from prizedraw.models.participant import Participant
from prizedraw.models.prize import Prize
from prizedraw.models.tenant_session import TenantSession

logger = logging.getLogger(__name__)


def create_rng(seed: int | None = None) -> random.Random:
    """Process-wide random source, seeded once from wall-clock time unless a seed is given."""

    return random.Random(time.time_ns() if seed is None else seed)


class DrawService:
    """Pick an eligible participant uniformly at random and commit the win.

    Eligibility:
      - ``draw_from_all`` prizes: anyone who has not already won a prize with
        this name.
      - other prizes: only participants with no wins at all, so each person
        takes at most one of them.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or create_rng()

    @staticmethod
    def _require_prize(session: TenantSession, prize_name: str) -> Prize:
        prize = session.find_prize(prize_name)
        if prize is None:
            raise PrizeNotFoundError(prize_name)
        if prize.is_exhausted:
            raise PrizeExhaustedError(prize_name)
        return prize

    @staticmethod
    def _eligible(session: TenantSession, prize: Prize) -> list[Participant]:
        eligible: list[Participant] = []
        for participant in session.participants:
            wins = session.wins_of(participant.id)
            if prize.draw_from_all:
                if prize.name not in wins:
                    eligible.append(participant)
            elif not wins:
                eligible.append(participant)
        return eligible

    def eligible_participants(self, session: TenantSession, prize_name: str) -> list[Participant]:
        """Participants who could win ``prize_name`` right now.

        Raises the same errors as ``draw`` when the prize is missing, exhausted
        or has nobody left to draw from.
        """

        with session.lock:
            prize = self._require_prize(session, prize_name)
            eligible = self._eligible(session, prize)
        if not eligible:
            raise NoEligibleParticipantsError(prize_name)
        return eligible

    def draw(self, session: TenantSession, prize_name: str) -> DrawResult:
        """Draw one winner for ``prize_name``.

        The whole check-select-commit sequence runs under the session lock, and
        every failure is raised before any state changes.
        """

        with session.lock:
            prize = self._require_prize(session, prize_name)
            eligible = self._eligible(session, prize)
            if not eligible:
                raise NoEligibleParticipantsError(prize_name)

            winner = eligible[self._rng.randrange(len(eligible))]

            prize.quantity -= 1
            session.record_win(winner.id, prize.name)
            result = DrawResult(
                prize_name=prize.name,
                prize_item=prize.item,
                winner_id=winner.id,
                winner_name=winner.name,
            )
            session.append_result(result)
            logger.debug(
                "Tenant %s drew %s for prize %s (%d left)",
                session.tenant_id,
                winner.id,
                prize.name,
                prize.quantity,
            )

        return result
