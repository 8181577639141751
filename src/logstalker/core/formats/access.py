"""Nginx JSON access log parser."""

from __future__ import annotations

from dataclasses import dataclass

from ..models import LogType, Record, RecordField
from .base import decode_json_record
from .request import split_request
from .timestamps import normalize_access_timestamp

# nginx writes these for unset variables.
_EMPTY_VALUES = ("", "-")


@dataclass(frozen=True, slots=True)
class AccessLogParser:
    """Parse nginx access logs written with a JSON ``log_format``.

    Expects a ``request`` field holding the raw request line and a
    ``timestamp`` in ``$time_local`` form.
    """

    def parse(self, host: str, line: str) -> Record:
        """Parse an access-log line into a Record."""
        record = decode_json_record(line)
        record[RecordField.HOST.value] = host
        record[RecordField.LOG_TYPE.value] = LogType.NGINX_ACCESS.value

        split_request(record)
        normalize_access_timestamp(record)

        for key in [k for k, v in record.items() if isinstance(v, str) and v in _EMPTY_VALUES]:
            del record[key]
        return record
