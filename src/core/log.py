"""Console logging setup.

Diagnostics go to stderr so the comparison report on stdout stays clean
(and `--json` output stays parseable).
"""

from __future__ import annotations

import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

_HANDLER_NAME = "model-compare"


def resolve_level(level: str | int) -> int:
    """Translate a level name (case-insensitive) or number into a logging level."""

    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if isinstance(resolved, int):
        return resolved
    return logging.WARNING


def configure_logging(level: str | int = logging.WARNING) -> None:
    """Install a single Rich-backed handler on the root logger.

    When stderr is not a TTY a plain `StreamHandler` is used instead so that
    redirected logs stay greppable. Calling this again replaces the handler
    (stderr may have been swapped in between), never duplicates it.
    """

    root = logging.getLogger()
    root.setLevel(resolve_level(level))

    for existing in [h for h in root.handlers if h.get_name() == _HANDLER_NAME]:
        root.removeHandler(existing)

    if sys.stderr.isatty():
        handler: logging.Handler = RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            markup=False,
            show_path=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))

    handler.set_name(_HANDLER_NAME)
    root.addHandler(handler)
