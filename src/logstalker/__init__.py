"""logstalker: tail application logs into day-partitioned BigQuery tables."""

__version__ = "0.1.0"
