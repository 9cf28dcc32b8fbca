from __future__ import annotations

import logging

import pytest

from core.log import configure_logging, resolve_level


def test_configure_logging_installs_one_handler() -> None:
    root = logging.getLogger()

    configure_logging("info")
    configure_logging("debug")

    ours = [h for h in root.handlers if h.get_name() == "model-compare"]
    assert len(ours) == 1
    assert root.level == logging.DEBUG


@pytest.mark.parametrize(
    ("value", "expected"),
    [("debug", logging.DEBUG), (" Info ", logging.INFO), ("bogus", logging.WARNING), (15, 15)],
)
def test_resolve_level(value, expected) -> None:
    assert resolve_level(value) == expected
