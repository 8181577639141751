"""Record dispatch to the sink."""

from __future__ import annotations

import uuid
from collections.abc import Callable
from datetime import UTC, datetime

from .models import TABLE_NAME, Record, RecordField
from .partitions import bucket
from .sink import Sink


def _utc_now() -> datetime:
    return datetime.now(UTC)


class StreamDispatcher:
    """Annotate parsed records and stream them into their day partition."""

    def __init__(
        self,
        sink: Sink,
        *,
        service_name: str,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._sink = sink
        self._service_name = service_name
        self._clock = clock

    def dispatch(self, record: Record) -> str:
        """Insert ``record`` into its partition and return the dedup id.

        Records without a ``tableName`` go to today's partition. Sink errors
        propagate to the caller.
        """
        dedup_id = str(uuid.uuid4())
        record[RecordField.SERVICE.value] = self._service_name

        partition_id = record.pop(TABLE_NAME, None)
        if not isinstance(partition_id, str):
            partition_id = bucket(self._clock())

        self._sink.insert_record(partition_id, dedup_id, record)
        return dedup_id
