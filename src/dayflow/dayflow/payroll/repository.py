from __future__ import annotations

from typing import Protocol, Sequence

from .model import PayrollRecord


class PayrollRepository(Protocol):
    def list_all(self) -> Sequence[PayrollRecord]:
        raise NotImplementedError

    def add_many(self, records: Sequence[PayrollRecord]) -> None:
        raise NotImplementedError

    def save_all(self, records: Sequence[PayrollRecord]) -> None:
        """Replace the whole collection."""

        raise NotImplementedError
