from __future__ import annotations

from typing import Iterable, Optional

from flask import session

from ..storage.kv import KeyValueStore


class FlaskSessionStore(KeyValueStore):
    """Key-value view over the signed Flask cookie session.

    Gives every browser its own session pointer, the way each browser profile
    had its own local storage.
    """

    prefix = "dayflow:"

    def get_item(self, key: str) -> Optional[str]:
        return session.get(self.prefix + key)

    def set_item(self, key: str, value: str) -> None:
        session[self.prefix + key] = value

    def remove_item(self, key: str) -> None:
        session.pop(self.prefix + key, None)

    def keys(self) -> Iterable[str]:
        return [k[len(self.prefix):] for k in session.keys() if k.startswith(self.prefix)]
