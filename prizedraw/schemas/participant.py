"""Marshmallow schemas for Participant."""

from __future__ import annotations

from marshmallow import Schema, fields, validate


class ParticipantSchema(Schema):
    """Serialize Participant."""

    id = fields.Str(required=True)
    name = fields.Str(required=True)


class ParticipantCreateSchema(Schema):
    """Validate create Participant payload. Both fields must be non-empty."""

    id = fields.Str(required=True, validate=validate.Length(min=1))
    name = fields.Str(required=True, validate=validate.Length(min=1))
