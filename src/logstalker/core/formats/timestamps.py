"""Timestamp normalization.

Each helper parses one source-specific timestamp grammar. On success the record
gets a canonical UTC ``timestamp`` and a ``tableName`` bucketed from the same
instant; on failure the record is left untouched and False is returned.
"""

from __future__ import annotations

from datetime import UTC, datetime

from ..models import CANONICAL_TIME_FORMAT, TABLE_NAME, Record, RecordField
from ..partitions import bucket

ACCESS_TIME_FORMAT = "%d/%b/%Y:%H:%M:%S +0000"
ERROR_TIME_FORMAT = "%Y/%m/%d %H:%M:%S"

_TIMESTAMP = RecordField.TIMESTAMP.value


def _parse(value: object, fmt: str) -> datetime | None:
    if not isinstance(value, str):
        return None
    try:
        return datetime.strptime(value, fmt).replace(tzinfo=UTC)
    except ValueError:
        return None


def _stamp(record: Record, instant: datetime) -> None:
    record[_TIMESTAMP] = instant.strftime(CANONICAL_TIME_FORMAT)
    record[TABLE_NAME] = bucket(instant)


def normalize_access_timestamp(record: Record) -> bool:
    """Rewrite an access-log ``timestamp`` (10/Oct/2000:13:55:36 +0000)."""
    instant = _parse(record.get(_TIMESTAMP), ACCESS_TIME_FORMAT)
    if instant is None:
        return False
    _stamp(record, instant)
    return True


def normalize_error_timestamp(record: Record, raw: str) -> bool:
    """Set ``timestamp`` from an error-log header prefix (2016/01/02 03:04:05)."""
    instant = _parse(raw, ERROR_TIME_FORMAT)
    if instant is None:
        return False
    _stamp(record, instant)
    return True


def bucket_rails_timestamp(record: Record) -> bool:
    """Set only ``tableName``; rails timestamps are already canonical."""
    instant = _parse(record.get(_TIMESTAMP), CANONICAL_TIME_FORMAT)
    if instant is None:
        return False
    record[TABLE_NAME] = bucket(instant)
    return True


def stamp_now(record: Record, now: datetime | None = None) -> None:
    """Stamp ``timestamp`` and ``tableName`` with the wall-clock instant."""
    instant = now or datetime.now(UTC)
    if instant.tzinfo is not None:
        instant = instant.astimezone(UTC)
    _stamp(record, instant)
