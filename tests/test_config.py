from __future__ import annotations

import pytest
from pydantic import ValidationError

from core.config import AppSettings, write_user_env_vars


def test_defaults() -> None:
    settings = AppSettings()

    assert settings.ollama_executable == "ollama"
    assert settings.show_args == ["show", "--verbose"]
    assert settings.command_timeout_seconds is None
    assert settings.show_banner is True


def test_environment_overrides(monkeypatch) -> None:
    monkeypatch.setenv("MODEL_COMPARE_OLLAMA_EXECUTABLE", "/opt/ollama")
    monkeypatch.setenv("MODEL_COMPARE_SHOW_ARGS", '["show"]')
    monkeypatch.setenv("model_compare_command_timeout_seconds", "12.5")

    settings = AppSettings()

    assert settings.ollama_executable == "/opt/ollama"
    assert settings.show_args == ["show"]
    assert settings.command_timeout_seconds == 12.5


def test_project_env_file_is_read(tmp_path) -> None:
    # Tests run from tmp_path (see conftest), so this is the project .env.
    (tmp_path / ".env").write_text("MODEL_COMPARE_LOG_LEVEL=DEBUG\n", encoding="utf-8")

    assert AppSettings().log_level == "DEBUG"


@pytest.mark.parametrize("value", [0, -3])
def test_timeout_must_be_positive(value: float) -> None:
    with pytest.raises(ValidationError):
        AppSettings(command_timeout_seconds=value)


def test_write_user_env_vars_merges_and_removes(tmp_path) -> None:
    env_path = tmp_path / "cfg" / ".env"
    env_path.parent.mkdir()
    env_path.write_text(
        "# comment\nMODEL_COMPARE_LOG_LEVEL=INFO\nMODEL_COMPARE_COMMAND_TIMEOUT_SECONDS=5\n",
        encoding="utf-8",
    )

    write_user_env_vars(
        {
            "MODEL_COMPARE_OLLAMA_EXECUTABLE": "/opt/ollama",
            "MODEL_COMPARE_COMMAND_TIMEOUT_SECONDS": "",
            "MODEL_COMPARE_SHOW_BANNER": None,
        },
        env_path=env_path,
    )

    lines = env_path.read_text(encoding="utf-8").splitlines()
    assert lines == [
        "# model-compare user config (.env)",
        "MODEL_COMPARE_LOG_LEVEL=INFO",
        "MODEL_COMPARE_OLLAMA_EXECUTABLE=/opt/ollama",
    ]
