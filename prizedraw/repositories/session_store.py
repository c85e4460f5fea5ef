"""In-memory registry of tenant sessions.

One exclusive lock guards the tenant map. Every lookup refreshes the
session's last-activity timestamp, so lookups take the same lock as
creation, clearing and sweeping. Tenant counts are expected to be small,
which keeps a whole-store lock cheap; per-tenant state has its own lock on
``TenantSession``.
"""

from __future__ import annotations

import logging
import time
from threading import Lock
from typing import Callable

from prizedraw.models.tenant_session import TenantSession

logger = logging.getLogger(__name__)


class SessionStore:
    """Map tenant id -> ``TenantSession``, created lazily."""

    def __init__(self, clock: Callable[[], float] | None = None) -> None:
        self._clock = clock or time.monotonic
        self._lock = Lock()
        self._sessions: dict[str, TenantSession] = {}

    def get_or_create(self, tenant_id: str) -> TenantSession:
        """Return the tenant's session, creating an empty one if needed.

        Also acts as the heartbeat: last activity is refreshed on every call.
        """

        with self._lock:
            now = self._clock()
            session = self._sessions.get(tenant_id)
            if session is None:
                session = TenantSession(tenant_id, now)
                self._sessions[tenant_id] = session
                logger.debug("Created session for tenant %s", tenant_id)
            else:
                session.touch(now)
            return session

    def clear(self, tenant_id: str) -> bool:
        """Drop all data for a tenant. Returns True if a session existed."""

        with self._lock:
            removed = self._sessions.pop(tenant_id, None) is not None
        if removed:
            logger.info("Cleared session for tenant: %s", tenant_id)
        return removed

    def sweep_inactive(self, max_idle: float) -> list[str]:
        """Remove sessions idle for longer than ``max_idle`` seconds.

        Holds the store lock for the whole pass. Returns the removed tenant ids.
        """

        with self._lock:
            now = self._clock()
            expired = [
                tenant_id
                for tenant_id, session in self._sessions.items()
                if now - session.last_activity > max_idle
            ]
            for tenant_id in expired:
                del self._sessions[tenant_id]

        if expired:
            logger.info("Swept %d inactive session(s): %s", len(expired), ", ".join(expired))
        return expired

    def tenant_ids(self) -> list[str]:
        with self._lock:
            return list(self._sessions)

    def __contains__(self, tenant_id: object) -> bool:
        with self._lock:
            return tenant_id in self._sessions

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
