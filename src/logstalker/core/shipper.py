"""Tail, parse and ship log lines.

This module is the main integration point: it wires the tailer, the selected
parser, the dispatcher and the partition provisioner together.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterable
from pathlib import Path

from .config import StalkerConfig
from .dispatch import StreamDispatcher
from .errors import ParseError
from .formats import LineParser, resolve_parser
from .models import Record
from .partitions import PartitionProvisioner
from .sink import Sink
from .tail import follow

logger = logging.getLogger(__name__)


class LogShipper:
    """Parse lines in arrival order and dispatch each record concurrently.

    Dispatches are fire-and-forget: they are not ordered, bounded, retried or
    awaited. Tasks are only referenced until they finish.
    """

    def __init__(self, parser: LineParser, dispatcher: StreamDispatcher, *, host: str) -> None:
        self._parser = parser
        self._dispatcher = dispatcher
        self._host = host
        self._inflight: set[asyncio.Task[None]] = set()

    @property
    def inflight(self) -> int:
        return len(self._inflight)

    def parse_line(self, line: str) -> Record | None:
        """Parse one raw line; None if it had to be dropped."""
        try:
            return self._parser.parse(self._host, line.replace("\\", ""))
        except ParseError as e:
            logger.debug("Dropping unparsable line: %s", e)
            return None

    async def _dispatch(self, record: Record) -> None:
        loop = asyncio.get_running_loop()
        try:
            await loop.run_in_executor(None, self._dispatcher.dispatch, record)
        except Exception as e:
            logger.debug("Dispatch failed: %s", e)

    def handle_line(self, line: str) -> asyncio.Task[None] | None:
        """Parse ``line`` now and schedule its dispatch. Needs a running loop."""
        record = self.parse_line(line)
        if record is None:
            return None

        task = asyncio.create_task(self._dispatch(record))
        self._inflight.add(task)
        task.add_done_callback(self._inflight.discard)
        return task

    async def consume(self, lines: AsyncIterable[str]) -> None:
        """Handle every line of ``lines`` in order."""
        async for line in lines:
            self.handle_line(line)


async def run(config: StalkerConfig, sink: Sink) -> None:
    """Provision partitions and ship ``config.log_filename`` until cancelled."""
    parser = resolve_parser(config.parser_type)
    dispatcher = StreamDispatcher(sink, service_name=config.service_name)
    log_path = Path(config.log_filename)
    if not log_path.is_file():
        raise FileNotFoundError(f"Log file not found: {log_path}")

    shipper = LogShipper(parser, dispatcher, host=config.host)
    provisioner = PartitionProvisioner(
        sink,
        days=config.provision_days,
        interval=config.provision_interval,
    )

    lines = follow(log_path, poll_interval=config.poll_interval)
    provision_task = asyncio.create_task(provisioner.run())
    logger.info(
        "Shipping %s (parser=%s, host=%s) to %s.%s",
        config.log_filename,
        config.parser_type,
        config.host,
        config.project_id,
        config.dataset_id,
    )
    try:
        await shipper.consume(lines)
    finally:
        provision_task.cancel()
