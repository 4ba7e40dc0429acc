from __future__ import annotations

from typing import Callable, List, Optional, Sequence

from ..core.constants import ACCOUNTS_KEY
from ..storage.record_store import Record, RecordStore
from .model import Account
from .repository import AccountRepository


class StoreAccountRepository(AccountRepository):
    def __init__(self, store: RecordStore, *, seed: Optional[Callable[[], Sequence[Record]]] = None):
        self._store = store
        self._seed = seed

    def list_all(self) -> List[Account]:
        return [Account.from_record(r) for r in self._store.load(ACCOUNTS_KEY, self._seed)]

    def get_by_id(self, account_id: str) -> Optional[Account]:
        for account in self.list_all():
            if account.id == str(account_id):
                return account
        return None

    def save_all(self, accounts: Sequence[Account]) -> None:
        self._store.write(ACCOUNTS_KEY, [a.to_record() for a in accounts])
