"""Participant routes (controllers). No business logic here."""

from __future__ import annotations

from flask import Blueprint, render_template, request

from prizedraw.errors import ValidationError
from prizedraw.schemas.participant import ParticipantCreateSchema, ParticipantSchema
from prizedraw.services import csv_service
from prizedraw.tenancy import current_tenant_id, get_lottery_service, resolve_tenant
from prizedraw.utils.responses import ok

participants_bp = Blueprint("participants", __name__)
participants_bp.before_request(resolve_tenant)

_participants_schema = ParticipantSchema(many=True)
_create_schema = ParticipantCreateSchema()


def _render_participant_list():
    participants = get_lottery_service().get_participants(current_tenant_id())
    return render_template("partials/participant_list_container.html", participants=participants)


@participants_bp.post("/participants")
def add_participant_form():
    data = _create_schema.load(
        {
            "id": request.form.get("participantID", ""),
            "name": request.form.get("participantName", ""),
        }
    )
    get_lottery_service().add_participant(current_tenant_id(), data["id"], data["name"])
    return _render_participant_list()


@participants_bp.post("/upload-participants-csv")
def upload_participants_csv():
    upload = request.files.get("participantCSV")
    if upload is None:
        raise ValidationError(message="Error retrieving file", details={"participantCSV": ["File is required"]})

    csv_service.import_participants(get_lottery_service(), current_tenant_id(), upload.read())
    return _render_participant_list()


@participants_bp.get("/api/participants")
def list_participants():
    """List the tenant's participants."""

    return ok(_participants_schema.dump(get_lottery_service().get_participants(current_tenant_id())))


@participants_bp.post("/api/participants")
def create_participant():
    """Add a participant. An already-used id is ignored (``added`` is false)."""

    payload = request.get_json(silent=True) or {}
    data = _create_schema.load(payload)

    added = get_lottery_service().add_participant(current_tenant_id(), data["id"], data["name"])
    return ok({"id": data["id"], "name": data["name"], "added": added}, status_code=201 if added else 200)
