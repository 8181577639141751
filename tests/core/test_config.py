from __future__ import annotations

from datetime import timedelta

import pytest

from logstalker.core.config import load_config
from logstalker.core.errors import ConfigurationError

REQUIRED = {
    "log_filename": "/var/log/nginx/access.log",
    "credentials_file": "/etc/logstalker/jwt.json",
    "project_id": "proj",
    "dataset_id": "logs",
}


def test_load_config_defaults() -> None:
    config = load_config(environ={}, **REQUIRED)
    assert config.parser_type == "nginx-access"
    assert config.service_name == ""
    assert config.host
    assert config.provision_days == 5
    assert config.provision_interval == timedelta(hours=24)


def test_load_config_missing_required() -> None:
    values = dict(REQUIRED, project_id=None)
    with pytest.raises(ConfigurationError, match="project_id is required"):
        load_config(environ={}, **values)


def test_load_config_rejects_empty_required() -> None:
    with pytest.raises(ConfigurationError, match="dataset_id"):
        load_config(environ={}, **dict(REQUIRED, dataset_id=""))


def test_load_config_unknown_parser() -> None:
    with pytest.raises(ConfigurationError, match="apache"):
        load_config(environ={}, parser_type="apache", **REQUIRED)


def test_load_config_reads_environment() -> None:
    environ = {
        "LOGSTALKER_LOG_FILENAME": "/srv/app/log/production.log",
        "LOGSTALKER_CREDENTIALS_FILE": "jwt.json",
        "LOGSTALKER_PROJECT_ID": "env-proj",
        "LOGSTALKER_DATASET_ID": "env-logs",
        "LOGSTALKER_PARSER_TYPE": "rails",
        "LOGSTALKER_POLL_INTERVAL": "0.5",
    }
    config = load_config(environ=environ, project_id="cli-proj")
    assert config.project_id == "cli-proj"
    assert config.dataset_id == "env-logs"
    assert config.parser_type == "rails"
    assert config.poll_interval == 0.5


def test_load_config_rejects_bad_interval() -> None:
    with pytest.raises(ConfigurationError, match="poll_interval"):
        load_config(environ={}, poll_interval=0, **REQUIRED)
