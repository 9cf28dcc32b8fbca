"""Parsing of `ollama show --verbose` style output into flat records.

The external tool prints semi-tabular text: unindented section headers
followed by indented `key<2+ spaces>value` lines, e.g.::

    Model
        architecture        llama
        parameters          8.0B
    Parameters
        stop    "<|start_header_id|>"
        stop    "<|eot_id|>"

which flattens to ``Model.architecture``, ``Model.parameters``,
``Parameters.stop`` and ``Parameters.stop_1``. The format is treated as
opaque text; there is no schema.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from core.domain.record import ModelRecord, ModelRecordBuilder

_LINE_BREAKS = re.compile(r"[\r\n]+")
_COLUMN_GAP = re.compile(r"\s{2,}")


@dataclass(frozen=True)
class ParsedLine:
    """A key/value line before section prefixing and de-duplication."""

    key: str
    value: str


def split_lines(text: str) -> list[str]:
    """Split on any CR/LF run and drop blank lines."""

    return [line for line in _LINE_BREAKS.split(text) if line.strip()]


def is_section_header(line: str) -> bool:
    """Unindented lines without a double-space gap open a new section."""

    if line.startswith((" ", "\t")):
        return False
    return "  " not in line.strip()


def parse_key_value(line: str) -> ParsedLine | None:
    """Split a line on its first column gap.

    Returns None when the line has no gap (fewer than two columns); such
    lines are dropped.
    """

    parts = _COLUMN_GAP.split(line.strip())
    if len(parts) < 2:
        return None
    key = parts[0].strip()
    value = " ".join(parts[1:]).strip()
    return ParsedLine(key=key, value=value)


def parse_show_output(text: str) -> ModelRecord:
    """Build a `ModelRecord` from the captured stdout of the external tool."""

    builder = ModelRecordBuilder()
    if not text:
        return builder.build()

    section = ""
    for line in split_lines(text):
        if is_section_header(line):
            section = line.strip()
            continue

        parsed = parse_key_value(line)
        if parsed is None:
            continue

        key = f"{section}.{parsed.key}" if section else parsed.key
        builder.add(key, parsed.value)

    return builder.build()
