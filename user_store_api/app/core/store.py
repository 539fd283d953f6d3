"""
In‑memory record store for users.

``UserStore`` owns a mapping from integer id to ``User`` and guards it
with a readers–writer lock: lookups share the lock, inserts and deletes
take it exclusively for a single dictionary update.  The mapping never
leaves the store; callers only see ``User`` values, which are
immutable.

Two id assignment strategies are supported:

* ``sequence``: a counter kept next to the mapping, bumped once per
  insert and never reused, even after deletions.
* ``count``: ``len(entries) + 1`` at insertion time.  After a deletion
  this can produce an id that is still in use, in which case the
  existing entry is overwritten.  Collisions are logged as warnings.

The store raises no domain errors.  Absent ids are reported as ``None``
from ``get`` and ``False`` from ``delete``.
"""

import logging
from typing import Dict, Optional

from fastapi import Request

from ..schemas.user import User
from .rwlock import ReadWriteLock

logger = logging.getLogger(__name__)

ID_STRATEGIES = ("sequence", "count")


class UserStore:
    """Concurrency‑safe mapping of integer ids to users."""

    def __init__(self, id_strategy: str = "sequence") -> None:
        if id_strategy not in ID_STRATEGIES:
            raise ValueError(
                f"Unknown id strategy {id_strategy!r}; expected one of {', '.join(ID_STRATEGIES)}"
            )
        self._id_strategy = id_strategy
        self._entries: Dict[int, User] = {}
        self._last_id = 0
        self._lock = ReadWriteLock()

    @property
    def id_strategy(self) -> str:
        return self._id_strategy

    def _next_id(self) -> int:
        # Caller holds the write lock.
        if self._id_strategy == "count":
            return len(self._entries) + 1
        self._last_id += 1
        return self._last_id

    def insert(self, user: User) -> int:
        """Store ``user`` under a freshly assigned id and return the id."""
        with self._lock.write_locked():
            user_id = self._next_id()
            if user_id in self._entries:
                logger.warning("Id %s already in use, overwriting existing user", user_id)
            self._entries[user_id] = user
        return user_id

    def get(self, user_id: int) -> Optional[User]:
        with self._lock.read_locked():
            return self._entries.get(user_id)

    def delete(self, user_id: int) -> bool:
        """Remove the entry for ``user_id`` if present.

        Returns ``True`` when an entry was removed.  The membership check
        and the removal happen under one exclusive hold, so two concurrent
        deletes of the same id cannot both succeed.
        """
        with self._lock.write_locked():
            return self._entries.pop(user_id, None) is not None

    def count(self) -> int:
        with self._lock.read_locked():
            return len(self._entries)

    def __len__(self) -> int:
        return self.count()

    def __contains__(self, user_id: object) -> bool:
        with self._lock.read_locked():
            return user_id in self._entries


def get_store(request: Request) -> UserStore:
    """FastAPI dependency returning the application's store."""
    return request.app.state.store
