"""Tenant cookie routes. Public: no tenant middleware."""

from __future__ import annotations

import logging

from flask import Blueprint, current_app, redirect, request

from prizedraw.tenancy import (
    client_ip,
    current_tenant_name,
    get_lottery_service,
    tenant_id_for,
    tenant_id_from_request,
)
from prizedraw.utils.responses import ok

logger = logging.getLogger(__name__)

tenant_bp = Blueprint("tenant", __name__)


@tenant_bp.post("/set-tenant")
def set_tenant():
    tenant_name = (request.form.get("tenantName") or "").strip()
    response = redirect("/")
    if tenant_name:
        response.set_cookie(
            current_app.config["TENANT_COOKIE_NAME"],
            tenant_name,
            max_age=int(current_app.config["TENANT_COOKIE_MAX_AGE"]),
            path="/",
            httponly=True,
            samesite="Lax",
        )
    return response


@tenant_bp.get("/clear-tenant")
def clear_tenant():
    """Drop the cookie holder's session data, then forget the cookie."""

    tenant_name = current_tenant_name()
    if tenant_name:
        get_lottery_service().clear_session(tenant_id_for(tenant_name, client_ip()))

    response = redirect("/")
    response.delete_cookie(current_app.config["TENANT_COOKIE_NAME"], path="/")
    return response


@tenant_bp.delete("/api/session")
def delete_session():
    tenant_id = tenant_id_from_request()
    cleared = get_lottery_service().clear_session(tenant_id)
    return ok({"tenantId": tenant_id, "cleared": cleared})
