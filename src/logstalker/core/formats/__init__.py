"""Log line parsers.

Contains parsers for nginx access/error logs and rails logs, plus the
timestamp and request-line helpers they share.
"""

from __future__ import annotations

from .access import AccessLogParser
from .base import LineParser, decode_json_record
from .error import ErrorLogParser
from .rails import RailsLogParser
from .registry import DEFAULT_PARSER_TYPE, PARSER_TYPES, resolve_parser
from .request import split_request
from .timestamps import (
    bucket_rails_timestamp,
    normalize_access_timestamp,
    normalize_error_timestamp,
    stamp_now,
)

__all__ = [
    "DEFAULT_PARSER_TYPE",
    "PARSER_TYPES",
    "AccessLogParser",
    "ErrorLogParser",
    "LineParser",
    "RailsLogParser",
    "bucket_rails_timestamp",
    "decode_json_record",
    "normalize_access_timestamp",
    "normalize_error_timestamp",
    "resolve_parser",
    "split_request",
    "stamp_now",
]
