"""Doctor command for environment diagnostics."""

from __future__ import annotations

import shutil
import subprocess

import typer
from rich.console import Console
from rich.table import Table

from adapters.ollama_cli import run_command
from cli.settings_loader import load_settings
from core.config import get_user_env_file, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_executable(executable: str) -> tuple[bool, str]:
    path = shutil.which(executable)
    if path is None:
        return False, f"'{executable}' not found on PATH"
    return True, path


def _check_version(executable: str, timeout: float | None) -> tuple[bool, str]:
    """Run `<executable> --version` to confirm the binary actually starts."""

    try:
        output = run_command([executable, "--version"], timeout=timeout or 10.0)
    except subprocess.CalledProcessError as exc:
        return False, f"exit status {exc.returncode}"
    except subprocess.TimeoutExpired:
        return False, "timed out"
    except OSError as exc:
        return False, str(exc)
    lines = [line.strip() for line in output.splitlines() if line.strip()]
    return True, lines[-1] if lines else "OK"


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = load_settings()

    table = Table(title="Model Compare Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    table.add_row("Show command", "OK", " ".join([settings.ollama_executable, *settings.show_args, "<model>"]))
    if settings.command_timeout_seconds is None:
        table.add_row("Timeout", "OPTIONAL", "No timeout -> a hung command blocks forever")
    else:
        table.add_row("Timeout", "OK", f"{settings.command_timeout_seconds:g}s")
    table.add_row("User config", "OK", str(get_user_env_file()))

    # Executable
    ok_bin, detail_bin = _check_executable(settings.ollama_executable)
    table.add_row("Executable", "OK" if ok_bin else "FAIL", detail_bin)

    ok_version = False
    if ok_bin:
        ok_version, detail_version = _check_version(
            settings.ollama_executable, settings.command_timeout_seconds
        )
        table.add_row("Version", "OK" if ok_version else "FAIL", detail_version)

    _console.print(table)

    if not ok_bin:
        _console.print(
            "\n[yellow]Note:[/yellow] Install Ollama or point `MODEL_COMPARE_OLLAMA_EXECUTABLE` "
            "at the binary (`doctor setup`)."
        )
        raise typer.Exit(code=1)
    if not ok_version:
        raise typer.Exit(code=1)


@app.command()
def setup() -> None:
    """Interactive setup (stores config in the user config .env)."""

    settings = load_settings()

    executable = typer.prompt(
        "Ollama executable",
        default=settings.ollama_executable,
        show_default=True,
    ).strip()
    timeout_raw = typer.prompt(
        "Timeout per command in seconds (empty = no timeout)",
        default="",
        show_default=False,
    ).strip()

    if not executable:
        raise typer.BadParameter("executable is required")

    if timeout_raw:
        try:
            timeout = float(timeout_raw)
        except ValueError as exc:
            raise typer.BadParameter(f"invalid timeout: {timeout_raw!r}") from exc
        if timeout <= 0:
            raise typer.BadParameter("timeout must be greater than 0")
        timeout_value = f"{timeout:g}"
    else:
        timeout_value = ""

    env_path = write_user_env_vars(
        {
            "MODEL_COMPARE_OLLAMA_EXECUTABLE": executable,
            "MODEL_COMPARE_COMMAND_TIMEOUT_SECONDS": timeout_value,
        }
    )

    _console.print(f"[green]Saved config to:[/green] {env_path}")
