"""Casual tenant identification.

A tenant is a display name (from a cookie, or ``user-<ip>`` when unset)
combined with the client IP. This is not authentication; it only keeps
people on different machines or with different names from seeing each
other's draws.
"""

from __future__ import annotations

from flask import Flask, current_app, g, request

from prizedraw.services.lottery_service import LotteryService


def get_lottery_service() -> LotteryService:
    return current_app.extensions["lottery_service"]


def client_ip() -> str:
    return request.remote_addr or "unknown"


def current_tenant_name() -> str:
    """Name stored in the tenant cookie, or an empty string."""

    return request.cookies.get(current_app.config["TENANT_COOKIE_NAME"], "")


def tenant_id_for(name: str, ip: str) -> str:
    return f"{name}-{ip}"


def tenant_id_from_request() -> str:
    ip = client_ip()
    name = current_tenant_name() or f"user-{ip}"
    return tenant_id_for(name, ip)


def resolve_tenant() -> None:
    """``before_request`` hook for tenant routes.

    Stores the tenant id on ``g`` and touches the tenant's session so that any
    request keeps it alive.
    """

    tenant_id = tenant_id_from_request()
    g.tenant_id = tenant_id
    get_lottery_service().get_session(tenant_id)


def current_tenant_id() -> str:
    """Tenant id resolved for the current request."""

    tenant_id: str | None = getattr(g, "tenant_id", None)
    if tenant_id is None:
        raise RuntimeError("Tenant not resolved for this request")
    return tenant_id


def init_tenancy(app: Flask) -> None:
    @app.context_processor
    def _inject_current_tenant() -> dict[str, str]:
        return {"current_tenant": current_tenant_name()}
