from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import LeaveRequest


class LeaveRepository(Protocol):
    def list_all(self) -> Sequence[LeaveRequest]:
        raise NotImplementedError

    def get(self, request_id: str) -> Optional[LeaveRequest]:
        raise NotImplementedError

    def add(self, request: LeaveRequest) -> None:
        raise NotImplementedError

    def replace(self, request: LeaveRequest) -> bool:
        raise NotImplementedError
