"""
Business logic for users.

``UserService`` binds the endpoints to a ``UserStore``.  Every method
performs exactly one store operation, so the service never holds the
store's lock across calls.
"""

import logging
from typing import Optional

from fastapi import Depends

from ..core.store import UserStore, get_store
from ..schemas.user import User, UserCreate

logger = logging.getLogger(__name__)


class UserService:
    """Service for creating, reading and deleting users."""

    def __init__(self, store: UserStore) -> None:
        self.store = store

    def create_user(self, data: UserCreate) -> int:
        """Store a new user and return the assigned id.

        The name is expected to be validated by the caller; the store
        accepts whatever it is given.
        """
        user_id = self.store.insert(User(name=data.name))
        logger.info("User %s created", user_id)
        return user_id

    def get_user(self, user_id: int) -> Optional[User]:
        return self.store.get(user_id)

    def delete_user(self, user_id: int) -> bool:
        deleted = self.store.delete(user_id)
        if deleted:
            logger.info("User %s deleted", user_id)
        return deleted


def get_user_service(store: UserStore = Depends(get_store)) -> UserService:
    """FastAPI dependency returning a service bound to the application's store."""
    return UserService(store)
