# bookstore/storage.py
import logging
from typing import Any, Iterable, List, Optional

from .errors import DuplicateUser, MissingField
from .models import User


logger = logging.getLogger(__name__)

REGISTERED_MESSAGE = "User successfully registered. Please login."


class UserStore:
    """In-memory list of registered customers.

    Passwords are kept exactly as submitted. Each application owns its
    own store, so tests never see each other's users.
    """

    def __init__(self, users: Optional[Iterable[User]] = None) -> None:
        self._users: List[User] = list(users or [])

    def exists(self, username: str) -> bool:
        return any(u.username == username for u in self._users)

    def register(self, username: Optional[Any], password: Optional[Any]) -> str:
        if not username or not password:
            raise MissingField("Missing username or password")
        username, password = str(username), str(password)
        if self.exists(username):
            raise DuplicateUser("user already exists.")

        self._users.append(User(username=username, password=password))
        logger.info("Registered user %s", username)
        return REGISTERED_MESSAGE

    def list_users(self) -> List[User]:
        return list(self._users)
