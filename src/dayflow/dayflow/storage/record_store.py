from __future__ import annotations

import json
import logging
from typing import Any, Callable, Dict, List, Optional, Sequence

from .kv import KeyValueStore

logger = logging.getLogger(__name__)

Record = Dict[str, Any]


class RecordStore:
    """Named collections of records on top of a text key-value backend.

    Each collection is stored under its own key as a JSON object mapping
    record id -> record. Every write replaces the whole collection; there are
    no partial writes and no transactions across collections.
    """

    def __init__(self, backend: KeyValueStore, *, id_field: str = "id"):
        self._backend = backend
        self._id_field = id_field

    @property
    def backend(self) -> KeyValueStore:
        return self._backend

    def read(self, collection: str) -> Optional[List[Record]]:
        """Return the records of a collection, or None when absent or unreadable."""
        raw = self._backend.get_item(collection)
        if raw is None:
            return None
        try:
            data = json.loads(raw)
        except ValueError:
            logger.warning("Collection %r holds malformed JSON; treating as absent", collection)
            return None

        # Older payloads were plain arrays of records.
        if isinstance(data, list):
            records = data
        elif isinstance(data, dict):
            records = list(data.values())
        else:
            logger.warning("Collection %r holds a %s, expected an object", collection, type(data).__name__)
            return None

        if not all(isinstance(r, dict) for r in records):
            logger.warning("Collection %r contains non-object records; treating as absent", collection)
            return None
        return records

    def write(self, collection: str, records: Sequence[Record]) -> None:
        mapping: Dict[str, Record] = {}
        for record in records:
            record_id = record.get(self._id_field)
            if record_id is None:
                raise ValueError(f"Record in {collection!r} has no {self._id_field!r}")
            mapping[str(record_id)] = record
        self._backend.set_item(collection, json.dumps(mapping, ensure_ascii=False))

    def load(self, collection: str, seed: Optional[Callable[[], Sequence[Record]]] = None) -> List[Record]:
        """Read a collection, falling back to (and persisting) the seed on first run."""
        records = self.read(collection)
        if records is not None:
            return records
        if seed is None:
            return []
        seeded = list(seed())
        self.write(collection, seeded)
        return seeded

    def get(self, collection: str, record_id: str) -> Optional[Record]:
        for record in self.read(collection) or []:
            if str(record.get(self._id_field)) == str(record_id):
                return record
        return None

    def merge(self, collection: str, record_id: str, fields: Record) -> Optional[Record]:
        """Shallow-merge fields into one record and rewrite the collection."""
        records = self.read(collection) or []
        for i, record in enumerate(records):
            if str(record.get(self._id_field)) == str(record_id):
                merged = {**record, **fields, self._id_field: record[self._id_field]}
                records[i] = merged
                self.write(collection, records)
                return merged
        return None

    # Single-value keys (session pointer)
    def read_value(self, key: str) -> Optional[Any]:
        raw = self._backend.get_item(key)
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except ValueError:
            logger.warning("Key %r holds malformed JSON", key)
            return None

    def write_value(self, key: str, value: Any) -> None:
        self._backend.set_item(key, json.dumps(value, ensure_ascii=False))

    def delete(self, key: str) -> None:
        self._backend.remove_item(key)
