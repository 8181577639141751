"""Sink interface for partitioned record storage."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .models import Record, SchemaColumn


class Sink(Protocol):
    """Remote day-partitioned table store.

    Both calls are fire-and-forget from the caller's point of view: creating an
    existing partition is expected to be harmless, and duplicate inserts sharing
    a dedup id are collapsed by the store.
    """

    def create_partition(self, partition_id: str, schema: Sequence[SchemaColumn]) -> None:
        """Create the partition if it does not already exist."""
        ...

    def insert_record(self, partition_id: str, dedup_id: str, record: Record) -> None:
        """Stream a single record into a partition."""
        ...
