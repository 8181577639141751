"""Parser lookup by configured parser type."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from ..errors import ConfigurationError
from ..models import LogType
from .access import AccessLogParser
from .base import LineParser
from .error import ErrorLogParser
from .rails import RailsLogParser

PARSERS: Mapping[str, LineParser] = MappingProxyType(
    {
        LogType.NGINX_ACCESS.value: AccessLogParser(),
        LogType.NGINX_ERROR.value: ErrorLogParser(),
        LogType.RAILS.value: RailsLogParser(),
    }
)

PARSER_TYPES: tuple[str, ...] = tuple(PARSERS)
DEFAULT_PARSER_TYPE = LogType.NGINX_ACCESS.value


def resolve_parser(parser_type: str) -> LineParser:
    """Return the parser registered for ``parser_type``."""
    try:
        return PARSERS[parser_type]
    except KeyError as e:
        valid = ", ".join(PARSER_TYPES)
        raise ConfigurationError(
            f"Unsupported parser type '{parser_type}'. Valid values: {valid}."
        ) from e
