"""Carga de settings compartida por todos los comandos.

Por qué aquí y no en `cli.main`:
- `doctor` también la necesita y `cli.main` ya importa `doctor`.
- El error va a stderr: stdout queda reservado al reporte (y al `--json`).
"""

from __future__ import annotations

import typer
from pydantic import ValidationError
from rich.console import Console

from cli.ui_components import print_error
from core.config import AppSettings

EXIT_INVALID_INPUT = 1

_err_console = Console(stderr=True, highlight=False)


def load_settings(**overrides: object) -> AppSettings:
    """Settings desde env/.env con overrides de la CLI (ignora los `None`)."""

    values = {key: value for key, value in overrides.items() if value is not None}
    try:
        return AppSettings(**values)
    except ValidationError as exc:
        print_error(_err_console, f"Error: invalid configuration.\n{exc}")
        raise typer.Exit(code=EXIT_INVALID_INPUT) from exc
