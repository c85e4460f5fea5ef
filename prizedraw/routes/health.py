"""Health check routes."""

from __future__ import annotations

from flask import Blueprint

from prizedraw.tenancy import get_lottery_service
from prizedraw.utils.responses import ok

health_bp = Blueprint("health", __name__)


@health_bp.get("/health")
def health_check():
    """Health check endpoint. Does not touch any tenant session."""

    return ok({"status": "ok", "tenants": len(get_lottery_service().store)})
