"""Set comparison between two model records.

Pure functions only: rendering (colors, wording) lives in the CLI layer and
consumes the structured entries produced here.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from core.domain.models import (
    DiffEntry,
    DiffSummary,
    MissingInLeft,
    MissingInRight,
    ValueMismatch,
)
from core.domain.record import ModelRecord, fold_key


def union_keys(left: ModelRecord, right: ModelRecord) -> Iterator[str]:
    """Left keys in record order, then right-only keys; case-insensitive, no repeats."""

    seen: set[str] = set()
    for key in (*left, *right):
        folded = fold_key(key)
        if folded in seen:
            continue
        seen.add(folded)
        yield key


def summarize(entries: Iterable[DiffEntry]) -> DiffSummary:
    missing_in_left = 0
    missing_in_right = 0
    values_differ = 0
    for entry in entries:
        if isinstance(entry, MissingInLeft):
            missing_in_left += 1
        elif isinstance(entry, MissingInRight):
            missing_in_right += 1
        else:
            values_differ += 1
    return DiffSummary(
        missing_in_left=missing_in_left,
        missing_in_right=missing_in_right,
        values_differ=values_differ,
    )


def diff_records(left: ModelRecord, right: ModelRecord) -> tuple[list[DiffEntry], DiffSummary]:
    """Classify every key of the union into at most one `DiffEntry`.

    Values are trimmed before comparison; the comparison itself is ordinal
    and case-sensitive. Keys present in both records with equal trimmed
    values produce no entry.
    """

    entries: list[DiffEntry] = []
    for key in union_keys(left, right):
        in_left = key in left
        in_right = key in right

        if not in_left:
            entries.append(MissingInLeft(key=key, right_value=right[key].strip()))
        elif not in_right:
            entries.append(MissingInRight(key=key, left_value=left[key].strip()))
        else:
            left_value = left[key].strip()
            right_value = right[key].strip()
            if left_value != right_value:
                entries.append(
                    ValueMismatch(key=key, left_value=left_value, right_value=right_value)
                )

    return entries, summarize(entries)
