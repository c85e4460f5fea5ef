"""Tenant-facing lottery use-cases.

Everything here is keyed by tenant id; each call looks the session up through
the store, which also refreshes the tenant's last-activity timestamp.
"""

from __future__ import annotations

from prizedraw.models import DrawResult, Participant, Prize, TenantSession
from prizedraw.repositories.session_store import SessionStore
from prizedraw.services.draw_service import DrawService

DEFAULT_MAX_IDLE_SECONDS = 3600.0


class LotteryService:
    """Prize, participant and draw operations for many independent tenants."""

    def __init__(
        self,
        store: SessionStore | None = None,
        draw_service: DrawService | None = None,
        max_idle_seconds: float = DEFAULT_MAX_IDLE_SECONDS,
    ) -> None:
        self._store = store if store is not None else SessionStore()
        self._draws = draw_service if draw_service is not None else DrawService()
        self._max_idle_seconds = float(max_idle_seconds)

    @property
    def store(self) -> SessionStore:
        return self._store

    def get_session(self, tenant_id: str) -> TenantSession:
        return self._store.get_or_create(tenant_id)

    def add_prize(self, tenant_id: str, name: str, item: str, quantity: int, draw_from_all: bool) -> Prize:
        return self.get_session(tenant_id).add_prize(name, item, quantity, draw_from_all)

    def add_participant(self, tenant_id: str, participant_id: str, name: str) -> bool:
        return self.get_session(tenant_id).add_participant(participant_id, name)

    def get_prizes(self, tenant_id: str) -> list[Prize]:
        return self.get_session(tenant_id).prizes

    def get_participants(self, tenant_id: str) -> list[Participant]:
        return self.get_session(tenant_id).participants

    def get_results(self, tenant_id: str) -> list[DrawResult]:
        return self.get_session(tenant_id).results

    def eligible_participants(self, tenant_id: str, prize_name: str) -> list[Participant]:
        return self._draws.eligible_participants(self.get_session(tenant_id), prize_name)

    def draw(self, tenant_id: str, prize_name: str) -> DrawResult:
        return self._draws.draw(self.get_session(tenant_id), prize_name)

    def clear_session(self, tenant_id: str) -> bool:
        return self._store.clear(tenant_id)

    def sweep_inactive(self) -> list[str]:
        return self._store.sweep_inactive(self._max_idle_seconds)
