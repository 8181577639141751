"""Command-line entrypoint.

Run:
    logstalker --log-filename /var/log/nginx/access.log --credentials-file jwt.json
        --project-id my-project --dataset-id logs
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys
from collections.abc import Sequence

from logstalker.core.config import load_config
from logstalker.core.errors import ConfigurationError
from logstalker.core.formats import DEFAULT_PARSER_TYPE, PARSER_TYPES
from logstalker.core.shipper import run
from logstalker.sinks.bigquery import BigQuerySink

LOGGER = logging.getLogger(__name__)


def _configure_logging() -> None:
    level_name = os.getenv("LOGSTALKER_LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="logstalker",
        description="Tail a log file and stream parsed entries into daily BigQuery tables.",
    )
    p.add_argument("--log-filename", default=None, help="Full path to the log file")
    p.add_argument(
        "--credentials-file", default=None, help="Full path to the service-account jwt.json file"
    )
    p.add_argument(
        "--service",
        dest="service_name",
        default=None,
        help="Name of the service generating the logs (nginx, rails, nginx-backend, user-service, ...)",
    )
    p.add_argument(
        "--parser",
        dest="parser_type",
        choices=PARSER_TYPES,
        default=None,
        help=f"Log file parser (default: {DEFAULT_PARSER_TYPE})",
    )
    p.add_argument("--project-id", default=None, help="Google Cloud project id")
    p.add_argument("--dataset-id", default=None, help="BigQuery dataset id")
    p.add_argument("--host", default=None, help="Host name stamped on records (default: hostname)")
    p.add_argument("--poll-interval", type=float, default=None, help="Seconds between tail polls")
    return p


def main(argv: Sequence[str] | None = None) -> None:
    args = build_arg_parser().parse_args(argv)
    _configure_logging()

    try:
        config = load_config(**vars(args))
        sink = BigQuerySink.from_config(config)
        asyncio.run(run(config, sink))
    except (ConfigurationError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        raise SystemExit(2)
    except KeyboardInterrupt:
        LOGGER.info("Interrupted, exiting")


if __name__ == "__main__":
    main()
