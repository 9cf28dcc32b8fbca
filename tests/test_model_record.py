from __future__ import annotations

import pytest

from core.domain.record import CollectionResult, ModelRecord, ModelRecordBuilder


def test_lookup_is_case_insensitive() -> None:
    record = ModelRecord({"Model.Architecture": "llama"})

    assert record["model.architecture"] == "llama"
    assert "MODEL.ARCHITECTURE" in record
    assert record.canonical_key("model.architecture") == "Model.Architecture"
    assert record.canonical_key("missing") is None


def test_missing_and_non_string_keys() -> None:
    record = ModelRecord({"a": "1"})

    with pytest.raises(KeyError):
        record["b"]
    assert 1 not in record
    assert record.get("b") is None


def test_keys_differing_only_in_case_are_rejected() -> None:
    with pytest.raises(ValueError, match="Duplicate key"):
        ModelRecord([("stop", "a"), ("STOP", "b")])


def test_record_is_immutable() -> None:
    record = ModelRecord({"a": "1"})

    with pytest.raises(TypeError):
        record["a"] = "2"  # type: ignore[index]


def test_iteration_keeps_insertion_order_and_equality() -> None:
    record = ModelRecord([("b", "2"), ("a", "1")])

    assert list(record) == ["b", "a"]
    assert record == {"a": "1", "b": "2"}
    assert record.to_dict() == {"b": "2", "a": "1"}


def test_builder_never_overwrites() -> None:
    builder = ModelRecordBuilder()

    assert builder.add("stop", "a") == "stop"
    assert builder.add("Stop", "b") == "Stop_1"
    assert builder.add("stop", "c") == "stop_2"

    record = builder.build()
    assert dict(record) == {"stop": "a", "Stop_1": "b", "stop_2": "c"}


def test_collection_result_ok_flag() -> None:
    assert CollectionResult(model_name="m").ok
    failed = CollectionResult(model_name="m", error="boom")
    assert not failed.ok
    assert len(failed.record) == 0
