"""CLI principal (Typer).

Por qué Typer:
- Argumentos/opciones tipados con ayuda autogenerada.
- Los prompts (`typer.prompt`) cubren el flujo interactivo original: sin
  argumentos, la herramienta pide los dos nombres de modelo.
"""

from __future__ import annotations

import logging
from typing import Optional

import typer
from rich.console import Console

from adapters.json_exporter import export_comparison_json
from adapters.ollama_cli import OllamaCliSource
from cli import doctor
from cli.settings_loader import EXIT_INVALID_INPUT, load_settings
from cli.ui_components import print_banner, print_error, print_line, render_comparison
from core.config import AppSettings
from core.log import configure_logging
from core.services.comparison import ComparisonHooks, compare_models

app = typer.Typer()
app.add_typer(doctor.app, name="doctor")

_console = Console(highlight=False)
_err_console = Console(stderr=True, highlight=False)

EXIT_DIFFERENCES = 2


def _ask_model_name(label: str, *, err: bool = False) -> str:
    # default="" evita que click repita el prompt ante una entrada vacía;
    # EOF en stdin cuenta como nombre vacío.
    try:
        return typer.prompt(label, default="", show_default=False, err=err)
    except typer.Abort:
        return ""


def run_comparison(
    left: str | None,
    right: str | None,
    *,
    settings: AppSettings,
    as_json: bool = False,
    show_banner: bool = True,
    fail_on_diff: bool = False,
) -> None:
    if show_banner and not as_json:
        print_banner(_console)

    if left is None:
        left = _ask_model_name("Enter first model name", err=as_json)
    if right is None:
        right = _ask_model_name("Enter second model name", err=as_json)

    left = left.strip()
    right = right.strip()
    if not left or not right:
        print_error(_console, "Error: Model names cannot be empty.")
        raise typer.Exit(code=EXIT_INVALID_INPUT)

    hooks = ComparisonHooks()
    if as_json:
        hooks.warning = lambda message: print_error(_err_console, message)
    else:
        print_line(_console, f"\nComparing models {left} and {right}...")
        hooks.warning = lambda message: print_error(_console, message)

    result = compare_models(left, right, source=OllamaCliSource(settings), hooks=hooks)

    if as_json:
        # typer.echo: Rich partiría líneas largas del JSON.
        typer.echo(export_comparison_json(result))
    else:
        render_comparison(_console, result)

    if fail_on_diff and result.summary.has_differences:
        raise typer.Exit(code=EXIT_DIFFERENCES)


@app.callback(
    invoke_without_command=True,
    help="Compare the metadata of two local Ollama models.",
)
def main(ctx: typer.Context) -> None:
    """Sin subcomando: comparación interactiva con la configuración por defecto."""

    if ctx.invoked_subcommand is not None:
        return

    settings = load_settings()
    configure_logging(settings.log_level)
    run_comparison(None, None, settings=settings, show_banner=settings.show_banner)


@app.command()
def compare(
    model1: Optional[str] = typer.Argument(None, help="First model (prompted when omitted)."),
    model2: Optional[str] = typer.Argument(None, help="Second model (prompted when omitted)."),
    ollama_bin: Optional[str] = typer.Option(
        None,
        "--ollama-bin",
        help="Model-management executable (default: ollama, from PATH).",
    ),
    timeout: Optional[float] = typer.Option(
        None,
        "--timeout",
        help="Seconds to wait for each `show` invocation (default: no limit).",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the comparison as JSON."),
    no_banner: bool = typer.Option(False, "--no-banner", help="Skip the welcome banner."),
    fail_on_diff: bool = typer.Option(
        False,
        "--fail-on-diff",
        help=f"Exit with status {EXIT_DIFFERENCES} when differences are found.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Compare `ollama show --verbose` metadata of two models."""

    settings = load_settings(ollama_executable=ollama_bin, command_timeout_seconds=timeout)
    configure_logging(logging.DEBUG if verbose else settings.log_level)

    run_comparison(
        model1,
        model2,
        settings=settings,
        as_json=as_json,
        show_banner=settings.show_banner and not no_banner,
        fail_on_diff=fail_on_diff,
    )


def run() -> None:
    app()
