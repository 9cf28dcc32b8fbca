"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que el colector (proceso externo) lea config de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "model-compare"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "model-compare"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "model-compare"
    return Path.home() / ".config" / "model-compare"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str | None], env_path: Path | None = None) -> Path:
    """Escribe/actualiza variables en el .env global del usuario.

    Los valores `None` se ignoran; un string vacío elimina la variable.
    """

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    for key, value in values.items():
        if value is None:
            continue
        if value == "":
            existing.pop(key, None)
        else:
            existing[key] = value

    lines = ["# model-compare user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="MODEL_COMPARE_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    ollama_executable: str = Field(
        default="ollama",
        min_length=1,
        description="Ejecutable de gestión de modelos (se resuelve vía PATH).",
    )
    show_args: list[str] = Field(
        default_factory=lambda: ["show", "--verbose"],
        description="Argumentos que preceden al nombre del modelo.",
    )
    command_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Timeout por invocación (segundos). None = esperar indefinidamente.",
    )

    log_level: str = Field(
        default="WARNING",
        min_length=1,
        description="Nivel de logging para la consola (DEBUG, INFO, WARNING...).",
    )
    show_banner: bool = Field(
        default=True,
        description="Mostrar el banner al iniciar la comparación.",
    )
