from __future__ import annotations

from datetime import date, datetime

import pytest

from src.dayflow.dayflow.container import build_container
from src.dayflow.dayflow.storage.kv import MemoryKeyValueStore
from src.dayflow.dayflow.storage.record_store import RecordStore


@pytest.fixture
def backend():
    return MemoryKeyValueStore()


@pytest.fixture
def store(backend):
    return RecordStore(backend)


@pytest.fixture
def container(backend):
    """Services over an in-memory store seeded with the demo data."""
    return build_container(backend=backend, auth_delay_seconds=0)


@pytest.fixture
def sessions(container):
    return container.session_manager(MemoryKeyValueStore())


@pytest.fixture
def monday():
    return date(2024, 1, 8)


@pytest.fixture
def fixed_now():
    return datetime(2024, 1, 8, 9, 0)
