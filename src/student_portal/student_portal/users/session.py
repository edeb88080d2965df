from __future__ import annotations

import logging
from typing import MutableMapping, Optional

from ..core.constants import SESSION_USER_KEY
from .model import AuthUser

logger = logging.getLogger(__name__)


class SessionStore:
    """Owns the signed-in user snapshot kept in the durable session slot.

    Lifecycle: `load()` when a request starts, `establish()` after sign-in or
    sign-up, `clear()` on logout. Nothing else writes the slot.
    """

    def __init__(self, storage: MutableMapping, *, key: str = SESSION_USER_KEY):
        self._storage = storage
        self._key = key

    def load(self) -> Optional[AuthUser]:
        raw = self._storage.get(self._key)
        if not raw:
            return None
        try:
            return AuthUser.from_snapshot(raw)
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("Discarding unreadable session user: %s", e)
            self._storage.pop(self._key, None)
            return None

    def establish(self, user: AuthUser) -> None:
        self._storage[self._key] = user.to_snapshot()

    def clear(self) -> None:
        self._storage.pop(self._key, None)
