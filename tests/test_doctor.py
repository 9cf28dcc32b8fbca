from __future__ import annotations

import subprocess

from pydantic import ValidationError
from typer.testing import CliRunner

from cli.doctor import app

runner = CliRunner()


def test_doctor_reports_missing_executable(monkeypatch) -> None:
    monkeypatch.setattr("cli.doctor.shutil.which", lambda name: None)

    result = runner.invoke(app, ["run"])

    assert result.exit_code == 1
    assert "FAIL" in result.output


def test_doctor_reports_version(monkeypatch) -> None:
    monkeypatch.setattr("cli.doctor.shutil.which", lambda name: "/usr/bin/ollama")

    def fake_run(argv, **kwargs):
        assert argv == ["ollama", "--version"]
        return subprocess.CompletedProcess(argv, 0, stdout="ollama version is 0.5.7\n")

    monkeypatch.setattr("adapters.ollama_cli.subprocess.run", fake_run)

    result = runner.invoke(app, ["run"])

    assert result.exit_code == 0, result.output
    assert "0.5.7" in result.output
    assert "FAIL" not in result.output


def test_setup_writes_user_env(tmp_path, monkeypatch) -> None:
    env_path = tmp_path / "user" / ".env"
    monkeypatch.setattr("core.config.get_user_env_file", lambda: env_path)

    result = runner.invoke(app, ["setup"], input="/opt/ollama\n30\n")

    assert result.exit_code == 0, result.output
    content = env_path.read_text(encoding="utf-8")
    assert "MODEL_COMPARE_OLLAMA_EXECUTABLE=/opt/ollama" in content
    assert "MODEL_COMPARE_COMMAND_TIMEOUT_SECONDS=30" in content


def test_setup_rejects_bad_timeout(tmp_path, monkeypatch) -> None:
    env_path = tmp_path / "user" / ".env"
    monkeypatch.setattr("core.config.get_user_env_file", lambda: env_path)

    result = runner.invoke(app, ["setup"], input="ollama\nsoon\n")

    assert result.exit_code != 0
    assert not env_path.exists()


def test_doctor_commands_report_invalid_configuration(monkeypatch) -> None:
    monkeypatch.setenv("MODEL_COMPARE_COMMAND_TIMEOUT_SECONDS", "-1")

    for command in (["run"], ["setup"]):
        result = runner.invoke(app, command)

        assert result.exit_code == 1
        assert "Error: invalid configuration." in result.output
        assert not isinstance(result.exception, ValidationError)
