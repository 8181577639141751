"""BigQuery day-table sink.

Each partition is a table ``<project>.<dataset>.logs_YYYYMMDD``; records are
streamed with the dedup id as BigQuery's insert id.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from google.cloud import bigquery
from google.oauth2 import service_account

from ..core.config import StalkerConfig
from ..core.errors import ConfigurationError
from ..core.models import Record, SchemaColumn

logger = logging.getLogger(__name__)

BIGQUERY_SCOPES = ("https://www.googleapis.com/auth/bigquery",)


class BigQuerySink:
    """Sink backed by the BigQuery streaming API."""

    def __init__(self, client: bigquery.Client, *, project_id: str, dataset_id: str) -> None:
        self._client = client
        self._project_id = project_id
        self._dataset_id = dataset_id

    @classmethod
    def from_config(cls, config: StalkerConfig) -> BigQuerySink:
        """Connect with the service-account key named in ``config``."""
        path = Path(config.credentials_file)
        if not path.is_file():
            raise ConfigurationError(f"Credentials file not found: {path}")

        credentials = service_account.Credentials.from_service_account_file(
            str(path), scopes=BIGQUERY_SCOPES
        )
        client = bigquery.Client(project=config.project_id, credentials=credentials)
        return cls(client, project_id=config.project_id, dataset_id=config.dataset_id)

    def table_id(self, partition_id: str) -> str:
        return f"{self._project_id}.{self._dataset_id}.{partition_id}"

    def create_partition(self, partition_id: str, schema: Sequence[SchemaColumn]) -> None:
        """Create the day table; an existing table is left as is."""
        table = bigquery.Table(
            self.table_id(partition_id),
            schema=[bigquery.SchemaField(col.name, col.type.value) for col in schema],
        )
        self._client.create_table(table, exists_ok=True)

    def insert_record(self, partition_id: str, dedup_id: str, record: Record) -> None:
        """Stream one row; row-level errors are logged, not raised."""
        errors = self._client.insert_rows_json(
            self.table_id(partition_id), [record], row_ids=[dedup_id]
        )
        if errors:
            logger.debug("Insert into %s rejected: %s", partition_id, errors)
