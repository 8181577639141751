"""HTTP request-line splitting."""

from __future__ import annotations

from ..models import REQUEST, Record, RecordField


def split_request(record: Record) -> bool:
    """Split ``request`` ("GET /path?q=1 HTTP/1.1") into method/path/query.

    Only a line of exactly three space-separated tokens is split. The
    transient ``request`` field is removed either way.
    """
    raw = record.pop(REQUEST, None)
    if not isinstance(raw, str):
        return False

    tokens = raw.split(" ")
    if len(tokens) != 3:
        return False

    method, target, _protocol = tokens
    record[RecordField.METHOD.value] = method
    if "?" in target:
        path, _, query = target.partition("?")
        record[RecordField.PATH.value] = path
        record[RecordField.QUERY.value] = query
    else:
        record[RecordField.PATH.value] = target
    return True
