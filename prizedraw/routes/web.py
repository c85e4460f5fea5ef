"""Web page routes."""

from __future__ import annotations

from flask import Blueprint, render_template

from prizedraw.errors import DrawError
from prizedraw.tenancy import current_tenant_id, get_lottery_service, resolve_tenant

web_bp = Blueprint("web", __name__)
web_bp.before_request(resolve_tenant)


@web_bp.get("/")
def index():
    return render_template("index.html", title="Home")


@web_bp.get("/prizes")
def prizes_page():
    prizes = get_lottery_service().get_prizes(current_tenant_id())
    return render_template("prize_setting.html", title="Prizes", prizes=prizes)


@web_bp.get("/participants")
def participants_page():
    participants = get_lottery_service().get_participants(current_tenant_id())
    return render_template("participant_setting.html", title="Participants", participants=participants)


@web_bp.get("/lottery")
def lottery_page():
    service = get_lottery_service()
    tenant_id = current_tenant_id()
    prizes = service.get_prizes(tenant_id)

    eligible_counts: dict[str, int] = {}
    for prize in prizes:
        if prize.name in eligible_counts:
            continue
        try:
            eligible_counts[prize.name] = len(service.eligible_participants(tenant_id, prize.name))
        except DrawError:
            eligible_counts[prize.name] = 0

    return render_template(
        "lottery.html",
        title="Draw",
        prizes=prizes,
        participants=service.get_participants(tenant_id),
        results=service.get_results(tenant_id),
        eligible_counts=eligible_counts,
    )
