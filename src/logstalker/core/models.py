"""Core data models for log shipping."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TypeAlias

# One normalized log event. A missing field is a missing key, never None.
Value: TypeAlias = str | int | float
Record: TypeAlias = dict[str, Value]

CANONICAL_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


class RecordField(str, Enum):
    """Canonical field vocabulary persisted to the sink."""

    SERVICE = "service"
    LOG_TYPE = "log_type"
    HOST = "host"
    TIMESTAMP = "timestamp"
    IP = "ip"
    DOMAIN = "domain"
    METHOD = "method"
    PATH = "path"
    QUERY = "query"
    ACTION = "action"
    MESSAGE = "message"
    STATUS = "status"
    REFERRER = "referrer"
    USER_AGENT = "user_agent"
    USER_ID = "user_id"
    RESPONSE_TIME = "response_time"


# Transient fields, never persisted.
REQUEST = "request"
TABLE_NAME = "tableName"


class LogType(str, Enum):
    """Log sources understood by the parsers."""

    NGINX_ACCESS = "nginx-access"
    NGINX_ERROR = "nginx-error"
    RAILS = "rails"


class ColumnType(str, Enum):
    """Column types of a partition table."""

    STRING = "STRING"
    TIMESTAMP = "TIMESTAMP"
    INTEGER = "INTEGER"
    FLOAT = "FLOAT"


@dataclass(frozen=True, slots=True)
class SchemaColumn:
    """A single named, typed column of the partition schema."""

    name: str
    type: ColumnType


PARTITION_SCHEMA: tuple[SchemaColumn, ...] = (
    SchemaColumn(RecordField.SERVICE.value, ColumnType.STRING),
    SchemaColumn(RecordField.LOG_TYPE.value, ColumnType.STRING),
    SchemaColumn(RecordField.HOST.value, ColumnType.STRING),
    SchemaColumn(RecordField.TIMESTAMP.value, ColumnType.TIMESTAMP),
    SchemaColumn(RecordField.IP.value, ColumnType.STRING),
    SchemaColumn(RecordField.DOMAIN.value, ColumnType.STRING),
    SchemaColumn(RecordField.METHOD.value, ColumnType.STRING),
    SchemaColumn(RecordField.PATH.value, ColumnType.STRING),
    SchemaColumn(RecordField.QUERY.value, ColumnType.STRING),
    SchemaColumn(RecordField.ACTION.value, ColumnType.STRING),
    SchemaColumn(RecordField.MESSAGE.value, ColumnType.STRING),
    SchemaColumn(RecordField.STATUS.value, ColumnType.INTEGER),
    SchemaColumn(RecordField.REFERRER.value, ColumnType.STRING),
    SchemaColumn(RecordField.USER_AGENT.value, ColumnType.STRING),
    SchemaColumn(RecordField.USER_ID.value, ColumnType.STRING),
    SchemaColumn(RecordField.RESPONSE_TIME.value, ColumnType.FLOAT),
)
