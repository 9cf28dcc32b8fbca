"""Model comparison orchestration.

The CLI delegates the collect -> collect -> diff flow to this module so that
side-effects (printing, prompts) stay out of the core logic. Collection is
strictly sequential: the right model is only queried once the left one has
been fully collected.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable

from core.domain.models import DiffEntry, DiffSummary
from core.domain.record import CollectionResult
from core.interfaces.metadata_source import MetadataSource
from core.services.differ import diff_records

logger = logging.getLogger(__name__)


@dataclass
class ComparisonHooks:
    """Optional callbacks for UI layers (progress, warnings)."""

    warning: Callable[[str], None] | None = None
    collecting: Callable[[str], None] | None = None


@dataclass
class ComparisonResult:
    """Output of a comparison run."""

    left: CollectionResult
    right: CollectionResult
    entries: list[DiffEntry]
    summary: DiffSummary
    warnings: list[str] = field(default_factory=list)

    @property
    def failed_models(self) -> list[CollectionResult]:
        return [result for result in (self.left, self.right) if not result.ok]


def compare_models(
    left_name: str,
    right_name: str,
    *,
    source: MetadataSource,
    hooks: ComparisonHooks | None = None,
) -> ComparisonResult:
    hooks = hooks or ComparisonHooks()
    warnings: list[str] = []

    def collect(model_name: str) -> CollectionResult:
        if hooks.collecting:
            hooks.collecting(model_name)
        result = source.collect(model_name)
        if result.error:
            message = f"Error running command for model {model_name}: {result.error}"
            warnings.append(message)
            if hooks.warning:
                hooks.warning(message)
        else:
            logger.debug("Collected %d keys for %s", len(result.record), model_name)
        return result

    left = collect(left_name)
    right = collect(right_name)

    entries, summary = diff_records(left.record, right.record)
    return ComparisonResult(
        left=left,
        right=right,
        entries=entries,
        summary=summary,
        warnings=warnings,
    )
