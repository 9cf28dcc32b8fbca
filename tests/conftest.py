"""Shared fixtures: isolate settings from the developer's environment."""

from __future__ import annotations

import logging
import os

import pytest

from core.domain.record import CollectionResult, ModelRecord

SAMPLE_SHOW_OUTPUT = """\
Model
    architecture        llama
    parameters          8.0B
    context length      131072
    quantization        Q4_K_M

Parameters
    stop           "<|start_header_id|>"
    stop           "<|end_header_id|>"
    stop           "<|eot_id|>"
    temperature    0.6

License
    LLAMA 3.1 COMMUNITY LICENSE AGREEMENT
    Llama 3.1 Version Release Date: July 23, 2024
"""


@pytest.fixture(autouse=True)
def _isolated_settings(tmp_path, monkeypatch):
    """Run every test from an empty directory with no MODEL_COMPARE_* variables."""

    for name in list(os.environ):
        if name.upper().startswith("MODEL_COMPARE_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """CLI runs install a handler bound to CliRunner's temporary stderr."""

    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class FakeSource:
    """In-memory `MetadataSource` that records the order of calls."""

    def __init__(self, results: dict[str, CollectionResult | dict[str, str]]) -> None:
        self._results = results
        self.calls: list[str] = []

    def collect(self, model_name: str) -> CollectionResult:
        self.calls.append(model_name)
        value = self._results.get(model_name, {})
        if isinstance(value, CollectionResult):
            return value
        return CollectionResult(model_name=model_name, record=ModelRecord(value))


@pytest.fixture
def sample_show_output() -> str:
    return SAMPLE_SHOW_OUTPUT


@pytest.fixture
def fake_source() -> type[FakeSource]:
    return FakeSource
