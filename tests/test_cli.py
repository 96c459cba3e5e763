from __future__ import annotations

import pytest
import yaml
from typer.testing import CliRunner

from hotseq.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def _quiet_logging(monkeypatch) -> None:
    monkeypatch.setattr("hotseq.logs.setup_logging", lambda level="INFO", name="hotseq": None)


def test_demo_command_prints_multicast_run(tmp_path) -> None:
    result = runner.invoke(app, ["demo", "--config", str(tmp_path / "none.yaml")])

    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert "1st subscribe: 1" in lines
    assert "2nd subscribe: 1" not in lines
    assert "2nd subscribe: 2" in lines
    assert "2nd subscribe: 10" in lines
    assert "2nd sequence finished." in lines


def test_demo_command_unicast_with_late_override(tmp_path) -> None:
    result = runner.invoke(
        app,
        ["demo", "--mode", "unicast", "--late-at", "3", "--config", str(tmp_path / "none.yaml")],
    )

    assert result.exit_code == 0, result.output
    assert "2nd subscribe: 1" in result.output.splitlines()


def test_demo_command_rejects_unknown_mode(tmp_path) -> None:
    result = runner.invoke(app, ["demo", "--mode", "broadcast", "--config", str(tmp_path / "x.yaml")])
    assert result.exit_code != 0


def test_show_config_reports_invalid_file(tmp_path) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text(yaml.safe_dump({"sequence": {"delay_seconds": -1}}), encoding="utf-8")

    result = runner.invoke(app, ["show-config", "--config", str(path)])
    assert result.exit_code != 0


def test_show_config_prints_yaml(tmp_path) -> None:
    result = runner.invoke(app, ["show-config", "--config", str(tmp_path / "none.yaml")])

    assert result.exit_code == 0
    assert yaml.safe_load(result.output)["sequence"]["delay_seconds"] == 1.0
