"""
In-memory user repository.

``UserStore`` owns the list of user records and the identifier counter.
Both live behind a single ``threading.Lock`` and are only ever changed
together, so two concurrent creates can never be handed the same id and
readers never see a record list that disagrees with the counter.

Identifiers start at ``0`` and are never reused, even after the record
that held one has been deleted.  No operation awaits or performs I/O
while holding the lock, which keeps the store usable both from ``async``
route handlers and from code running in a worker thread.
"""

import logging
import threading
from dataclasses import dataclass
from typing import List


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class User:
    """A single directory entry.  Records are immutable once stored."""

    id: int
    name: str
    age: int


class UserStore:
    """Thread-safe store of :class:`User` records."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._records: List[User] = []
        self._next_id = 0

    def create(self, name: str, age: int) -> User:
        """Add a user under the next free id and return it."""
        with self._lock:
            user = User(id=self._next_id, name=name, age=age)
            self._records.append(user)
            self._next_id += 1
            total = len(self._records)
        logger.info("New user added. Total users: %d", total)
        return user

    def list_users(self) -> List[User]:
        """Return a snapshot of all users in creation order."""
        with self._lock:
            return list(self._records)

    # ``list`` is the contract name; ``list_users`` avoids shadowing the
    # builtin inside this class body.
    list = list_users

    def delete(self, user_id: int) -> bool:
        """Remove the user with ``user_id``.

        Returns ``True`` if a record was removed and ``False`` if no
        record had that id, in which case the store is left untouched.
        """
        with self._lock:
            for index, user in enumerate(self._records):
                if user.id == user_id:
                    del self._records[index]
                    return True
            return False

    @property
    def next_id(self) -> int:
        """The id the next ``create`` call will assign."""
        with self._lock:
            return self._next_id

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
