"""Schemas for the prize draw API."""

from __future__ import annotations

from marshmallow import Schema, fields, validate


class DrawRequestSchema(Schema):
    prize_name = fields.String(required=True, data_key="prizeName", validate=validate.Length(min=1))


class DrawResultSchema(Schema):
    prize_name = fields.String(required=True, data_key="prizeName")
    prize_item = fields.String(required=True, data_key="prizeItem")
    winner_id = fields.String(required=True, data_key="winnerId")
    winner_name = fields.String(required=True, data_key="winnerName")
