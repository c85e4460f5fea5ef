"""Participant model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Participant:
    """Someone entered into the draw."""

    id: str
    name: str
