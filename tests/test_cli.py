from __future__ import annotations

import pytest

from logstalker import cli
from logstalker.core.config import ENV_PREFIX, StalkerConfig


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in StalkerConfig.model_fields:
        monkeypatch.delenv(ENV_PREFIX + name.upper(), raising=False)


def test_cli_missing_required_option_exits(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc:
        cli.main(["--log-filename", "/tmp/app.log", "--credentials-file", "jwt.json"])
    assert exc.value.code == 2
    assert "project_id is required" in capsys.readouterr().err


def test_cli_rejects_unknown_parser() -> None:
    with pytest.raises(SystemExit) as exc:
        cli.main(["--parser", "apache"])
    assert exc.value.code == 2


def test_cli_missing_credentials_file(tmp_path, capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc:
        cli.main(
            [
                "--log-filename",
                str(tmp_path / "app.log"),
                "--credentials-file",
                str(tmp_path / "jwt.json"),
                "--project-id",
                "proj",
                "--dataset-id",
                "logs",
            ]
        )
    assert exc.value.code == 2
    assert "Credentials file not found" in capsys.readouterr().err


def test_arg_parser_maps_to_config_fields() -> None:
    args = cli.build_arg_parser().parse_args(["--service", "nginx", "--parser", "nginx-error"])
    assert set(vars(args)) <= set(StalkerConfig.model_fields)
    assert args.service_name == "nginx"
    assert args.parser_type == "nginx-error"
