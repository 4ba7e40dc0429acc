from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Account


class AccountRepository(Protocol):
    """Repository interface for accounts.

    Note (DIP): the service layer depends on this interface, not on a concrete store.
    """

    def list_all(self) -> Sequence[Account]:
        raise NotImplementedError

    def get_by_id(self, account_id: str) -> Optional[Account]:
        raise NotImplementedError

    def save_all(self, accounts: Sequence[Account]) -> None:
        """Replace the whole collection."""

        raise NotImplementedError
