"""Per-tenant draw state.

A ``TenantSession`` is the unit of isolation: every tenant gets its own prize
list, participant list, win record and result log. Nothing in here is shared
between tenants.

All reads and writes go through ``lock`` (re-entrant, so the draw engine can
hold it across a whole draw while calling the helpers below).
"""

from __future__ import annotations

from dataclasses import replace
from threading import RLock

from prizedraw.errors import ValidationError
from prizedraw.models.draw_result import DrawResult
from prizedraw.models.participant import Participant
from prizedraw.models.prize import Prize


class TenantSession:
    """Mutable state owned by a single tenant."""

    def __init__(self, tenant_id: str, now: float) -> None:
        self.tenant_id = tenant_id
        self.last_activity = now
        self.lock = RLock()

        self._prizes: list[Prize] = []
        self._participants: list[Participant] = []
        self._participant_ids: set[str] = set()
        # participant id -> names of the prizes they have won
        self._wins: dict[str, set[str]] = {}
        self._results: list[DrawResult] = []

    def touch(self, now: float) -> None:
        self.last_activity = now

    def add_prize(self, name: str, item: str, quantity: int, draw_from_all: bool) -> Prize:
        """Append a prize. Names are not checked for uniqueness; lookups use the first match."""

        if quantity < 0:
            raise ValidationError(
                message="Invalid quantity",
                details={"quantity": ["Must be >= 0"]},
            )

        prize = Prize(name=name, item=item, quantity=int(quantity), draw_from_all=bool(draw_from_all))
        with self.lock:
            self._prizes.append(prize)
        return replace(prize)

    def add_participant(self, participant_id: str, name: str) -> bool:
        """Append a participant unless the id is already taken.

        Returns True when added. A duplicate id is silently ignored.
        """

        with self.lock:
            if participant_id in self._participant_ids:
                return False
            self._participant_ids.add(participant_id)
            self._participants.append(Participant(id=participant_id, name=name))
            return True

    def record_win(self, participant_id: str, prize_name: str) -> None:
        with self.lock:
            self._wins.setdefault(participant_id, set()).add(prize_name)

    def append_result(self, result: DrawResult) -> None:
        with self.lock:
            self._results.append(result)

    def find_prize(self, name: str) -> Prize | None:
        """Return the live prize object for ``name`` (first match), or None.

        Callers that mutate it must hold ``lock``.
        """

        with self.lock:
            for prize in self._prizes:
                if prize.name == name:
                    return prize
        return None

    def wins_of(self, participant_id: str) -> frozenset[str]:
        with self.lock:
            return frozenset(self._wins.get(participant_id, ()))

    @property
    def prizes(self) -> list[Prize]:
        with self.lock:
            return [replace(p) for p in self._prizes]

    @property
    def participants(self) -> list[Participant]:
        with self.lock:
            return list(self._participants)

    @property
    def results(self) -> list[DrawResult]:
        with self.lock:
            return list(self._results)

    def __repr__(self) -> str:
        return (
            f"TenantSession(tenant_id={self.tenant_id!r}, prizes={len(self._prizes)}, "
            f"participants={len(self._participants)}, results={len(self._results)})"
        )
