"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comparación con detalles visuales.
- El Core devuelve diferencias estructuradas; aquí solo se decide cómo se ven.

Claves y valores se imprimen como `Text` literal: los metadatos de modelos
contienen corchetes (`[INST]`) que Rich interpretaría como markup.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from core.domain.models import DiffEntry, DiffSummary, MissingInLeft, MissingInRight
from core.services.comparison import ComparisonResult

ADDED_STYLE = "green"
REMOVED_STYLE = "red"
CHANGED_STYLE = "yellow"
CLEAN_STYLE = "blue"

RULE = "----------------------------"


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida.

    Se puede desactivar (`--no-banner`) en modos no interactivos.
    """

    title = Text("Ollama Model Comparison Tool", style="bold cyan")
    subtitle = Text("ollama show --verbose • diff de metadatos", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def print_line(console: Console, message: str, style: str | None = None) -> None:
    console.print(Text(message, style=style or ""), highlight=False, soft_wrap=True)


def print_error(console: Console, message: str) -> None:
    print_line(console, message, REMOVED_STYLE)


def render_entry(console: Console, entry: DiffEntry, *, left_name: str, right_name: str) -> None:
    """Imprime una diferencia con el formato `- / + / *`."""

    if isinstance(entry, MissingInLeft):
        print_line(console, f"- {entry.key}: missing in {left_name}", REMOVED_STYLE)
        print_line(console, f"+ {entry.key}: {entry.right_value}", ADDED_STYLE)
    elif isinstance(entry, MissingInRight):
        print_line(console, f"+ {entry.key}: {entry.left_value}", ADDED_STYLE)
        print_line(console, f"- {entry.key}: missing in {right_name}", REMOVED_STYLE)
    else:
        print_line(console, f"* {entry.key} differs:", CHANGED_STYLE)
        print_line(console, f"- {left_name}: {entry.left_value}", REMOVED_STYLE)
        print_line(console, f"+ {right_name}: {entry.right_value}", ADDED_STYLE)
    console.print()


def render_summary(
    console: Console,
    summary: DiffSummary,
    *,
    left_name: str,
    right_name: str,
) -> None:
    print_line(console, RULE)
    print_line(console, "Comparison Summary:")

    if summary.has_differences:
        print_line(console, "Differences detected!", CHANGED_STYLE)
        print_line(console, f"- Keys missing in {left_name}: {summary.missing_in_left}")
        print_line(console, f"- Keys missing in {right_name}: {summary.missing_in_right}")
        print_line(console, f"- Keys with different values: {summary.values_differ}")
        print_line(console, f"- Total differences: {summary.total}")
    else:
        print_line(console, "No differences found between the models.", CLEAN_STYLE)


def render_comparison(console: Console, result: ComparisonResult) -> None:
    """Reporte completo: diferencias, resumen y fallos de recolección por modelo."""

    left_name = result.left.model_name
    right_name = result.right.model_name

    print_line(console, f"\nComparison Results: {left_name} vs {right_name}")
    print_line(console, RULE)

    for entry in result.entries:
        render_entry(console, entry, left_name=left_name, right_name=right_name)

    render_summary(console, result.summary, left_name=left_name, right_name=right_name)

    for failed in result.failed_models:
        print_error(console, f"! Could not collect {failed.model_name}: {failed.error}")
