from __future__ import annotations

from typing import List, Optional

from ..core.constants import LEAVES_KEY
from ..storage.record_store import RecordStore
from .model import LeaveRequest
from .repository import LeaveRepository


class StoreLeaveRepository(LeaveRepository):
    def __init__(self, store: RecordStore):
        self._store = store

    def list_all(self) -> List[LeaveRequest]:
        return [LeaveRequest.from_record(r) for r in self._store.read(LEAVES_KEY) or []]

    def get(self, request_id: str) -> Optional[LeaveRequest]:
        r = self._store.get(LEAVES_KEY, request_id)
        return LeaveRequest.from_record(r) if r else None

    def add(self, request: LeaveRequest) -> None:
        raw = self._store.read(LEAVES_KEY) or []
        raw.append(request.to_record())
        self._store.write(LEAVES_KEY, raw)

    def replace(self, request: LeaveRequest) -> bool:
        fields = request.to_record()
        return self._store.merge(LEAVES_KEY, request.request_id, fields) is not None
