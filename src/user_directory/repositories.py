"""
user_directory.repositories
~~~~~~~~~~~~~~~~~~~~~~~~~~~
The record store: the authoritative, read-only set of user records.

``UserRepository`` is the capability every store provides. The service layer
depends on it, never on a concrete class, so a test double or an alternative
store can be swapped in at composition time::

    from user_directory.repositories import InMemoryUserRepository
    from user_directory.services import UserService

    svc = UserService(InMemoryUserRepository([
        {"id": 1, "name": "Test", "email": "test@example.com"},
    ]))
    svc.get_all()
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from typing import Any

from user_directory.schemas import UserOut

logger = logging.getLogger("user_directory.repositories")


DEFAULT_USERS: tuple[UserOut, ...] = (
    UserOut(id=1, name="Alice", email="alice@example.com"),
    UserOut(id=2, name="Bob",   email="bob@example.com"),
)


class UserRepository(ABC):
    """Read-only source of user records."""

    @abstractmethod
    def list_all(self) -> list[UserOut]:
        """Return every record in insertion order."""

    def __repr__(self) -> str:
        return f"<{type(self).__name__}>"


class InMemoryUserRepository(UserRepository):
    """
    Store backed by a tuple fixed at construction.

    ``records`` defaults to ``DEFAULT_USERS``. Mappings are parsed into
    ``UserOut``. Every ``list_all()`` call returns a new list, so callers can
    sort or slice the result without touching the store.
    """

    def __init__(self, records: Iterable[UserOut | Mapping[str, Any]] | None = None):
        if records is None:
            records = DEFAULT_USERS
        self._records: tuple[UserOut, ...] = tuple(_coerce(r) for r in records)

        seen: set[int] = set()
        for record in self._records:
            if record.id in seen:
                raise ValueError(f"Duplicate user id {record.id} in record store")
            seen.add(record.id)

        logger.debug("Record store initialised with %d records", len(self._records))

    def list_all(self) -> list[UserOut]:
        return list(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"<InMemoryUserRepository [{len(self._records)} records]>"


def _coerce(record: UserOut | Mapping[str, Any]) -> UserOut:
    if isinstance(record, UserOut):
        return record
    return UserOut(**record)
