"""Prize routes (controllers). No business logic here."""

from __future__ import annotations

from flask import Blueprint, render_template, request

from prizedraw.errors import ValidationError
from prizedraw.schemas.prize import PrizeCreateSchema, PrizeSchema
from prizedraw.services import csv_service
from prizedraw.tenancy import current_tenant_id, get_lottery_service, resolve_tenant
from prizedraw.utils.responses import ok

prizes_bp = Blueprint("prizes", __name__)
prizes_bp.before_request(resolve_tenant)

_prize_schema = PrizeSchema()
_prizes_schema = PrizeSchema(many=True)
_create_schema = PrizeCreateSchema()


def _create_prize(payload: dict):
    data = _create_schema.load(payload)
    return get_lottery_service().add_prize(
        current_tenant_id(),
        name=str(data["name"]),
        item=str(data["item"]),
        quantity=int(data["quantity"]),
        draw_from_all=bool(data["draw_from_all"]),
    )


def _render_prize_list():
    prizes = get_lottery_service().get_prizes(current_tenant_id())
    return render_template("partials/prize_list_container.html", prizes=prizes)


@prizes_bp.post("/prizes")
def add_prize_form():
    """Form submission; responds with the refreshed prize list partial."""

    _create_prize(
        {
            "name": request.form.get("prizeName", ""),
            "item": request.form.get("itemName", ""),
            "quantity": request.form.get("quantity", ""),
            "drawFromAll": request.form.get("drawFromAll") == "true",
        }
    )
    return _render_prize_list()


@prizes_bp.post("/upload-prizes-csv")
def upload_prizes_csv():
    upload = request.files.get("prizeCSV")
    if upload is None:
        raise ValidationError(message="Error retrieving file", details={"prizeCSV": ["File is required"]})

    csv_service.import_prizes(get_lottery_service(), current_tenant_id(), upload.read())
    return _render_prize_list()


@prizes_bp.get("/prizes/list")
def prize_list_partial():
    prizes = get_lottery_service().get_prizes(current_tenant_id())
    return render_template("partials/prize_list_table_body.html", prizes=prizes)


@prizes_bp.get("/api/prizes")
def list_prizes():
    """List the tenant's prizes."""

    return ok(_prizes_schema.dump(get_lottery_service().get_prizes(current_tenant_id())))


@prizes_bp.post("/api/prizes")
def create_prize():
    """Create a new prize."""

    payload = request.get_json(silent=True) or {}
    prize = _create_prize(payload)
    return ok(_prize_schema.dump(prize), status_code=201)
