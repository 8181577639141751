"""Day partitioning helpers.

Maps instants to partition ids and keeps the upcoming partitions provisioned.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from datetime import UTC, datetime, timedelta

from .models import PARTITION_SCHEMA
from .sink import Sink

logger = logging.getLogger(__name__)

PARTITION_PREFIX = "logs_"
DEFAULT_PROVISION_DAYS = 5
DEFAULT_PROVISION_INTERVAL = timedelta(hours=24)


def _utc_now() -> datetime:
    return datetime.now(UTC)


def bucket(instant: datetime) -> str:
    """Return the partition id (logs_YYYYMMDD) for an instant.

    Aware instants are converted to UTC; naive ones are taken as UTC already.
    """
    if instant.tzinfo is not None:
        instant = instant.astimezone(UTC)
    return f"{PARTITION_PREFIX}{instant:%Y%m%d}"


def upcoming_partitions(now: datetime, days: int = DEFAULT_PROVISION_DAYS) -> list[str]:
    """Partition ids for ``now`` and the following ``days - 1`` days."""
    return [bucket(now + timedelta(days=i)) for i in range(days)]


class PartitionProvisioner:
    """Create today's partition and the next few days' ahead of writes.

    Each run covers a window of ``days`` partitions, so with a daily cadence
    every partition gets ``days`` creation attempts before it is needed.
    Failures are not retried.
    """

    def __init__(
        self,
        sink: Sink,
        *,
        days: int = DEFAULT_PROVISION_DAYS,
        interval: timedelta = DEFAULT_PROVISION_INTERVAL,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        if days < 1:
            raise ValueError("days must be >= 1")
        if interval <= timedelta(0):
            raise ValueError("interval must be positive")
        self._sink = sink
        self._days = days
        self._interval = interval
        self._clock = clock

    def provision(self, now: datetime | None = None) -> list[str]:
        """Issue one create call per upcoming partition and return their ids."""
        partition_ids = upcoming_partitions(now or self._clock(), self._days)
        for partition_id in partition_ids:
            try:
                self._sink.create_partition(partition_id, PARTITION_SCHEMA)
            except Exception as exc:
                logger.debug("Creating partition %s failed: %s", partition_id, exc)
        logger.info("Provisioned partitions %s..%s", partition_ids[0], partition_ids[-1])
        return partition_ids

    async def run(self) -> None:
        """Provision now, then once per interval until cancelled.

        Create calls run on a dedicated thread, not the loop's default
        executor shared with record dispatch.
        """
        loop = asyncio.get_running_loop()
        executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="provisioner")
        try:
            while True:
                await loop.run_in_executor(executor, self.provision)
                await asyncio.sleep(self._interval.total_seconds())
        finally:
            executor.shutdown(wait=False)
