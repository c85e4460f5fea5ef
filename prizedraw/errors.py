"""Custom exceptions for centralized error handling."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


@dataclass
class AppError(Exception):
    """Base application error."""

    code: str
    message: str
    status_code: int
    details: Any | None = None


class ValidationError(AppError):
    """Input validation error."""

    def __init__(self, message: str = "Validation error", details: Any | None = None) -> None:
        super().__init__(code="validation_error", message=message, status_code=400, details=details)


class DrawErrorKind(str, Enum):
    PRIZE_NOT_FOUND = "prize_not_found"
    PRIZE_EXHAUSTED = "prize_exhausted"
    NO_ELIGIBLE_PARTICIPANTS = "no_eligible_participants"


class DrawError(AppError):
    """A draw that cannot be performed. ``kind`` tells the callers which one."""

    kind: DrawErrorKind

    def __init__(self, kind: DrawErrorKind, message: str, status_code: int, prize_name: str) -> None:
        super().__init__(
            code=kind.value,
            message=message,
            status_code=status_code,
            details={"prizeName": prize_name},
        )
        self.kind = kind
        self.prize_name = prize_name


class PrizeNotFoundError(DrawError):
    def __init__(self, prize_name: str) -> None:
        super().__init__(
            DrawErrorKind.PRIZE_NOT_FOUND,
            f"Prize '{prize_name}' does not exist",
            404,
            prize_name,
        )


class PrizeExhaustedError(DrawError):
    def __init__(self, prize_name: str) -> None:
        super().__init__(
            DrawErrorKind.PRIZE_EXHAUSTED,
            f"Prize '{prize_name}' has already been fully drawn",
            409,
            prize_name,
        )


class NoEligibleParticipantsError(DrawError):
    def __init__(self, prize_name: str) -> None:
        super().__init__(
            DrawErrorKind.NO_ELIGIBLE_PARTICIPANTS,
            f"No eligible participants left for prize '{prize_name}'",
            409,
            prize_name,
        )
