import json

import pytest

from src.dayflow.dayflow.storage.record_store import RecordStore


def test_read_absent_collection_returns_none(store):
    assert store.read("accounts") is None


def test_write_then_read_keeps_records(store, backend):
    store.write("leave-requests", [{"id": "a", "days": 1}, {"id": "b", "days": 2}])

    assert json.loads(backend.get_item("leave-requests")) == {
        "a": {"id": "a", "days": 1},
        "b": {"id": "b", "days": 2},
    }
    assert sorted(r["id"] for r in store.read("leave-requests")) == ["a", "b"]


def test_malformed_json_is_treated_as_absent(store, backend):
    backend.set_item("accounts", "{not json")
    assert store.read("accounts") is None


def test_non_object_payload_is_treated_as_absent(store, backend):
    backend.set_item("accounts", "42")
    assert store.read("accounts") is None


def test_legacy_array_payload_is_accepted(store, backend):
    backend.set_item("accounts", json.dumps([{"id": "1"}]))
    assert store.read("accounts") == [{"id": "1"}]


def test_load_seeds_only_on_first_run(store):
    calls = []

    def seed():
        calls.append(1)
        return [{"id": "1"}]

    assert store.load("accounts", seed) == [{"id": "1"}]
    store.write("accounts", [])
    assert store.load("accounts", seed) == []
    assert len(calls) == 1


def test_merge_updates_one_record_and_keeps_id(store):
    store.write("leave-requests", [{"id": "a", "status": "pending"}])

    merged = store.merge("leave-requests", "a", {"status": "approved", "id": "other"})

    assert merged == {"id": "a", "status": "approved"}
    assert store.get("leave-requests", "a")["status"] == "approved"
    assert store.merge("leave-requests", "missing", {"status": "x"}) is None


def test_record_without_id_is_rejected(store):
    with pytest.raises(ValueError):
        store.write("accounts", [{"email": "x@y.z"}])


def test_single_values_round_trip_and_delete(backend):
    store = RecordStore(backend)
    store.write_value("session-pointer", {"userId": "1", "token": "session-1"})
    assert store.read_value("session-pointer") == {"userId": "1", "token": "session-1"}

    store.delete("session-pointer")
    assert store.read_value("session-pointer") is None
