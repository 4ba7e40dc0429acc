from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, Generic, Iterable, List, Tuple, TypeVar

from ..users.model import Account

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class JoinResult(Generic[T]):
    """Ledger rows paired with their account, plus the rows whose account is gone."""

    rows: List[Tuple[T, Account]] = field(default_factory=list)
    dangling: List[T] = field(default_factory=list)


def join_accounts(
    records: Iterable[T],
    accounts: Iterable[Account],
    *,
    key: Callable[[T], str],
    ledger: str,
) -> JoinResult[T]:
    """Lazy join of ledger records to accounts by employee id (case-insensitive)."""
    by_employee_id: Dict[str, Account] = {a.employee_id.lower(): a for a in accounts}
    result: JoinResult[T] = JoinResult()
    for record in records:
        account = by_employee_id.get(key(record).lower())
        if account is None:
            result.dangling.append(record)
            continue
        result.rows.append((record, account))

    if result.dangling:
        logger.warning(
            "Skipped %d %s record(s) pointing to missing accounts: %s",
            len(result.dangling),
            ledger,
            sorted({key(r) for r in result.dangling}),
        )
    return result
