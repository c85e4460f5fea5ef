"""CSV import of prizes/participants and CSV export of draw results.

Import formats (no header row):
  prizes:        name,item,quantity,drawFromAll
  participants:  id,name

Rows with the wrong number of columns are skipped and logged.
"""

from __future__ import annotations

import csv
import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from io import StringIO

from prizedraw.errors import ValidationError
from prizedraw.models import DrawResult
from prizedraw.services.lottery_service import LotteryService

logger = logging.getLogger(__name__)

EXPORT_HEADER = ("Prize Name", "Participant ID", "Participant Name", "Prize Item")
EXPORT_FILENAME = "lottery_results.csv"

_TRUE_VALUES = {"1", "t", "T", "TRUE", "true", "True"}


@dataclass(frozen=True)
class ImportSummary:
    added: int
    skipped: int


def parse_bool(raw: str) -> bool:
    """Lenient boolean: anything not recognised as true is false."""

    return raw.strip() in _TRUE_VALUES


def parse_quantity(raw: str) -> int:
    """Integer quantity; unparsable values count as 0."""

    try:
        return int(raw.strip())
    except ValueError:
        return 0


def _read_rows(data: bytes) -> list[list[str]]:
    try:
        text = data.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise ValidationError(message="CSV file must be UTF-8 encoded") from exc

    try:
        return [row for row in csv.reader(StringIO(text)) if row]
    except csv.Error as exc:
        raise ValidationError(message="Error reading CSV", details=str(exc)) from exc


def import_prizes(service: LotteryService, tenant_id: str, data: bytes) -> ImportSummary:
    added = skipped = 0
    for row in _read_rows(data):
        if len(row) != 4:
            logger.warning("Skipping malformed prize CSV record: %s", row)
            skipped += 1
            continue

        name, item, raw_quantity, raw_draw_from_all = row
        quantity = parse_quantity(raw_quantity)
        if quantity < 0:
            logger.warning("Skipping prize CSV record with negative quantity: %s", row)
            skipped += 1
            continue

        service.add_prize(tenant_id, name, item, quantity, parse_bool(raw_draw_from_all))
        added += 1

    logger.info("Imported %d prize(s) for tenant %s (%d skipped)", added, tenant_id, skipped)
    return ImportSummary(added=added, skipped=skipped)


def import_participants(service: LotteryService, tenant_id: str, data: bytes) -> ImportSummary:
    # Duplicate ids are not counted as skipped; they are simply ignored.
    added = skipped = 0
    for row in _read_rows(data):
        if len(row) != 2:
            logger.warning("Skipping malformed participant CSV record: %s", row)
            skipped += 1
            continue

        if service.add_participant(tenant_id, row[0], row[1]):
            added += 1

    logger.info("Imported %d participant(s) for tenant %s (%d skipped)", added, tenant_id, skipped)
    return ImportSummary(added=added, skipped=skipped)


def _format_row(values: Iterable[str]) -> str:
    buf = StringIO()
    csv.writer(buf, lineterminator="\n").writerow(list(values))
    return buf.getvalue()


def export_results(results: Iterable[DrawResult]) -> Iterator[str]:
    """Yield the results CSV chunk by chunk, BOM first so spreadsheets pick UTF-8."""

    yield "\ufeff"
    yield _format_row(EXPORT_HEADER)
    for r in results:
        yield _format_row((r.prize_name, r.winner_id, r.winner_name, r.prize_item))
