"""Nginx error log parser."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime

from ..models import REQUEST, LogType, Record, RecordField
from .request import split_request
from .timestamps import normalize_error_timestamp, stamp_now

_CLAUSE_SEP = ", "
_KEY_SEP = ": "
_ERROR_MARKER = " [error] "

# error-log clause key -> record field
_CLAUSE_FIELDS = {
    "client": RecordField.IP.value,
    "host": RecordField.DOMAIN.value,
    "request": REQUEST,
    "referrer": RecordField.REFERRER.value,
}


def _utc_now() -> datetime:
    return datetime.now(UTC)


def _unquote(s: str) -> str:
    return s.replace('"', "")


@dataclass(frozen=True, slots=True)
class ErrorLogParser:
    """Parse nginx error logs.

    Example line::

        2016/01/02 03:04:05 [error] 1234#0: *1 "boom", client: 1.2.3.4,
        server: example.com, request: "GET / HTTP/1.1", host: "example.com"

    Never fails: unrecognized pieces are skipped and whatever was understood
    is returned.
    """

    clock: Callable[[], datetime] = _utc_now

    def _parse_header(self, header: str, record: Record) -> None:
        if _ERROR_MARKER not in header:
            # No timestamp of its own: bucket by arrival time.
            record[RecordField.MESSAGE.value] = _unquote(header)
            stamp_now(record, self.clock())
            return

        pieces = header.split(_ERROR_MARKER)
        if len(pieces) != 2:
            return

        raw_ts, detail = pieces
        normalize_error_timestamp(record, raw_ts)

        # "<pid>#<tid>: *<cid> <message>"
        msg_pieces = detail.split(" ", 2)
        if len(msg_pieces) == 3:
            record[RecordField.MESSAGE.value] = _unquote(msg_pieces[2])

    @staticmethod
    def _parse_clauses(clauses: list[str]) -> dict[str, str]:
        params: dict[str, str] = {}
        for clause in clauses:
            parts = clause.split(_KEY_SEP, 1)
            if len(parts) == 2:
                key, value = parts
                params[key] = _unquote(value)
        return params

    def parse(self, host: str, line: str) -> Record:
        """Parse an error-log line into a (possibly partial) Record."""
        record: Record = {}

        header, *clauses = line.split(_CLAUSE_SEP)
        self._parse_header(header, record)

        params = self._parse_clauses(clauses)
        for key, field in _CLAUSE_FIELDS.items():
            if key in params:
                record[field] = params[key]
        if REQUEST in record:
            split_request(record)

        record[RecordField.HOST.value] = host
        record[RecordField.LOG_TYPE.value] = LogType.NGINX_ERROR.value
        return record
