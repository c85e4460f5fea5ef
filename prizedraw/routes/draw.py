"""Draw and result routes (controllers). No business logic here."""

from __future__ import annotations

from flask import Blueprint, Response, render_template, request

from prizedraw.errors import DrawError, ValidationError
from prizedraw.schemas.draw import DrawRequestSchema, DrawResultSchema
from prizedraw.schemas.prize import PrizeSchema
from prizedraw.services import csv_service
from prizedraw.tenancy import current_tenant_id, get_lottery_service, resolve_tenant
from prizedraw.utils.responses import ok

draw_bp = Blueprint("draw", __name__)
draw_bp.before_request(resolve_tenant)

_request_schema = DrawRequestSchema()
_result_schema = DrawResultSchema()
_results_schema = DrawResultSchema(many=True)
_prizes_schema = PrizeSchema(many=True)


@draw_bp.post("/draw")
def draw_form():
    """Draw from the lottery page.

    Draw failures are user-correctable, so they are rendered into the page
    as a message rather than returned as an HTTP error.
    """

    prize_name = request.form.get("prizeName", "")
    if not prize_name:
        raise ValidationError(message="Please select a prize.", details={"prizeName": ["Required"]})

    service = get_lottery_service()
    tenant_id = current_tenant_id()
    try:
        result = service.draw(tenant_id, prize_name)
    except DrawError as exc:
        return render_template("partials/draw_error.html", message=exc.message)

    return render_template(
        "partials/draw_response.html",
        result=result,
        prizes=service.get_prizes(tenant_id),
    )


@draw_bp.post("/api/draw")
def draw_api():
    payload = request.get_json(silent=True) or {}
    data = _request_schema.load(payload)

    service = get_lottery_service()
    tenant_id = current_tenant_id()
    result = service.draw(tenant_id, str(data["prize_name"]))
    return ok(
        {
            "result": _result_schema.dump(result),
            "prizes": _prizes_schema.dump(service.get_prizes(tenant_id)),
        }
    )


@draw_bp.get("/api/results")
def list_results():
    return ok(_results_schema.dump(get_lottery_service().get_results(current_tenant_id())))


@draw_bp.get("/export-results-csv")
def export_results_csv():
    results = get_lottery_service().get_results(current_tenant_id())
    return Response(
        csv_service.export_results(results),
        mimetype="text/csv; charset=utf-8",
        headers={"Content-Disposition": f"attachment; filename={csv_service.EXPORT_FILENAME}"},
    )
