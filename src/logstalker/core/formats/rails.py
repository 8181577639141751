"""Rails JSON log parser."""

from __future__ import annotations

from dataclasses import dataclass

from ..models import REQUEST, LogType, Record, RecordField
from .base import decode_json_record
from .timestamps import bucket_rails_timestamp


@dataclass(frozen=True, slots=True)
class RailsLogParser:
    """Parse JSON rails logs whose ``timestamp`` is already canonical."""

    def parse(self, host: str, line: str) -> Record:
        """Parse a rails log line into a Record."""
        record = decode_json_record(line)
        record.pop(REQUEST, None)
        record[RecordField.HOST.value] = host
        record[RecordField.LOG_TYPE.value] = LogType.RAILS.value
        bucket_rails_timestamp(record)
        return record
