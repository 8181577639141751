"""Follow a log file as it grows."""

from __future__ import annotations

import asyncio
import os
from collections.abc import AsyncIterator
from pathlib import Path

import aiofiles


async def follow(
    log_path: str | Path,
    *,
    from_end: bool = True,
    poll_interval: float = 0.25,
    encoding: str = "utf-8",
    decode_errors: str = "replace",
) -> AsyncIterator[str]:
    """Yield lines appended to ``log_path``, forever.

    Starts at end of file unless ``from_end`` is False. Lines are yielded
    without their trailing newline; a partially written line is held back
    until its newline arrives.
    """
    path = Path(log_path)
    if not path.is_file():
        raise FileNotFoundError(f"Log file not found: {path}")
    if poll_interval <= 0:
        raise ValueError("poll_interval must be > 0")

    async with aiofiles.open(path, encoding=encoding, errors=decode_errors) as f:
        if from_end:
            await f.seek(0, os.SEEK_END)

        pending = ""
        while True:
            chunk = await f.readline()
            if not chunk:
                await asyncio.sleep(poll_interval)
                continue

            pending += chunk
            if not pending.endswith("\n"):
                continue

            line, pending = pending.rstrip("\r\n"), ""
            yield line
