"""Marshmallow schemas for Prize."""

from __future__ import annotations

from marshmallow import Schema, fields, validate


class PrizeSchema(Schema):
    """Serialize Prize."""

    name = fields.Str(required=True)
    item = fields.Str(required=True)
    quantity = fields.Int(required=True)
    draw_from_all = fields.Bool(required=True, data_key="drawFromAll")


class PrizeCreateSchema(Schema):
    """Validate create Prize payload."""

    name = fields.Str(required=True, validate=validate.Length(min=1))
    item = fields.Str(required=False, load_default="")
    quantity = fields.Int(required=True, validate=validate.Range(min=0))
    draw_from_all = fields.Bool(required=False, load_default=False, data_key="drawFromAll")
