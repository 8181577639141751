"""Parser interface."""

from __future__ import annotations

import json
from typing import Protocol

from ..errors import ParseError
from ..models import Record


class LineParser(Protocol):
    """Parser interface: turn one raw line from ``host`` into a Record.

    Raises ParseError when the line cannot be decoded at all.
    """

    def parse(self, host: str, line: str) -> Record:
        """Parse a single log line."""
        ...


def decode_json_record(line: str) -> Record:
    """Decode a single-line JSON object into a fresh Record.

    JSON nulls are dropped so that unset fields stay absent.
    """
    try:
        obj = json.loads(line)
    except (ValueError, RecursionError) as e:
        raise ParseError(f"Invalid JSON log line: {e}") from e
    if not isinstance(obj, dict):
        raise ParseError("JSON log line is not an object")
    return {k: v for k, v in obj.items() if v is not None}
