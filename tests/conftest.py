from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import UTC, datetime

import pytest

from logstalker.core.models import Record, SchemaColumn


@dataclass
class RecordingSink:
    """In-memory sink that records every call."""

    created: list[tuple[str, tuple[SchemaColumn, ...]]] = field(default_factory=list)
    inserted: list[tuple[str, str, Record]] = field(default_factory=list)
    fail: bool = False

    def create_partition(self, partition_id: str, schema: Sequence[SchemaColumn]) -> None:
        if self.fail:
            raise RuntimeError("create failed")
        self.created.append((partition_id, tuple(schema)))

    def insert_record(self, partition_id: str, dedup_id: str, record: Record) -> None:
        if self.fail:
            raise RuntimeError("insert failed")
        self.inserted.append((partition_id, dedup_id, dict(record)))


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def failing_sink() -> RecordingSink:
    return RecordingSink(fail=True)


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2016, 1, 2, 3, 4, 5, tzinfo=UTC)
