"""
Business logic for users.

``UserService`` implements list/create/get/update/delete on top of
``core.storage``.  Every mutation runs inside a store transaction, so
the read of the collection, the in‑memory change and the write back
happen under one lock.  Lookups that miss return ``None`` (or ``False``
for deletion); mapping that to HTTP errors is left to the endpoints.
"""

import logging
import uuid
from typing import Any, Dict, List, Optional

from ..core.storage import get_store
from ..schemas.user import UserCreate, UserRead, UserUpdate

logger = logging.getLogger(__name__)


class _UserMissing(Exception):
    """Aborts a store transaction when the user does not exist."""


class UserService:
    """Operations on the user collection kept in the JSON store."""

    @classmethod
    async def list_users(cls) -> List[UserRead]:
        """Return every user in insertion order."""
        return [UserRead.model_validate(user) for user in get_store().read_all()]

    @classmethod
    async def create_user(cls, data: UserCreate) -> UserRead:
        """Append a new user with a server‑generated UUID v4 and return it."""
        with get_store().transaction() as users:
            taken = {user.get("id") for user in users}
            user_id = str(uuid.uuid4())
            while user_id in taken:
                user_id = str(uuid.uuid4())
            user = UserRead(id=user_id, **data.model_dump())
            users.append(user.model_dump())
        logger.info("Created user %s", user_id)
        return user

    @classmethod
    async def get_user(cls, user_id: str) -> Optional[UserRead]:
        """Retrieve a single user by ID, or ``None`` if there is none."""
        users = get_store().read_all()
        index = cls._index_of(users, user_id)
        if index is None:
            return None
        return UserRead.model_validate(users[index])

    @classmethod
    async def update_user(cls, user_id: str, data: UserUpdate) -> Optional[UserRead]:
        """Overwrite the supplied fields of an existing user.

        Fields absent from ``data`` keep their stored values.  Returns the
        updated user, or ``None`` if the record does not exist, in which
        case the file is not rewritten.
        """
        changes = data.changes()
        try:
            with get_store().transaction() as users:
                index = cls._index_of(users, user_id)
                if index is None:
                    raise _UserMissing(user_id)
                users[index].update(changes)
                user = UserRead.model_validate(users[index])
        except _UserMissing:
            return None
        logger.info("Updated user %s: %s", user_id, ", ".join(sorted(changes)))
        return user

    @classmethod
    async def delete_user(cls, user_id: str) -> bool:
        """Remove a user by ID.

        Returns ``True`` if a record was deleted, ``False`` otherwise.
        """
        try:
            with get_store().transaction() as users:
                index = cls._index_of(users, user_id)
                if index is None:
                    raise _UserMissing(user_id)
                del users[index]
        except _UserMissing:
            return False
        logger.info("Deleted user %s", user_id)
        return True

    @staticmethod
    def _index_of(users: List[Dict[str, Any]], user_id: str) -> Optional[int]:
        for index, user in enumerate(users):
            if user.get("id") == user_id:
                return index
        return None
