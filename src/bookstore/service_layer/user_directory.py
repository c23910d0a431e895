"""User directory service.

`UserDirectory` is a façade over a single mapping from username to `User`.
The mapping is passed in through the constructor so callers (tests included)
can substitute any `MutableMapping` implementation.

`None` users are programming errors and raise `NullArgumentError`; every other
unmet precondition is reported through a `False` or `None` result.
"""

from __future__ import annotations

import logging
from collections.abc import MutableMapping
from typing import TYPE_CHECKING

from bookstore.domain.errors import NullArgumentError

if TYPE_CHECKING:
    from bookstore.domain.models import User

logger = logging.getLogger(__name__)


class UserDirectory:
    """In-memory directory of users keyed by username.

    Args:
        users: Backing mapping of username to user. When omitted a fresh empty
            dict is created and owned by the directory.
    """

    def __init__(self, users: MutableMapping[str, User] | None = None) -> None:
        self._users: MutableMapping[str, User] = users if users is not None else {}

    def __len__(self) -> int:
        return len(self._users)

    def __contains__(self, username: object) -> bool:
        return username in self._users

    def get_user(self, username: str) -> User | None:
        """Return the user stored under `username`, or None."""
        return self._users.get(username)

    def register_user(self, user: User) -> bool:
        """Register a new user.

        Args:
            user: The user to register. Blank fields are accepted.

        Returns:
            True if the user was stored, False if the username is taken (the
            stored record is left untouched).

        Raises:
            NullArgumentError: If `user` is None.
        """
        if user is None:
            raise NullArgumentError("register_user", "user")
        if user.username in self._users:
            logger.debug("Rejected registration: username %r taken", user.username)
            return False
        self._users[user.username] = user
        logger.info("Registered user %r", user.username)
        return True

    def login_user(self, username: str | None, password: str | None) -> User | None:
        """Return the user matching the given credentials.

        The password comparison is exact and case-sensitive.

        Returns:
            The stored user on a match; None if either credential is missing
            or empty, the username is unknown, or the password differs.
        """
        if not username or not password:
            return None
        user = self._users.get(username)
        if user is None or user.password != password:
            logger.debug("Failed login for %r", username)
            return None
        logger.info("User %r logged in", username)
        return user

    def update_user_profile(
        self, user: User, new_username: str, new_password: str, new_email: str
    ) -> bool:
        """Overwrite a user's username, password and email in place.

        Usernames stay unique: renaming onto a username held by another entry
        fails. On a successful rename the directory is re-keyed so the user is
        found under its new username.

        Returns:
            True if the profile was updated, False if `new_username` is taken.

        Raises:
            NullArgumentError: If `user` is None.
        """
        if user is None:
            raise NullArgumentError("update_user_profile", "user")

        old_username = user.username
        renamed = new_username != old_username
        if renamed and new_username in self._users:
            logger.debug(
                "Rejected profile update for %r: username %r taken",
                old_username,
                new_username,
            )
            return False

        user.username = new_username
        user.password = new_password
        user.email = new_email

        # only re-key entries this directory actually holds
        if renamed and self._users.get(old_username) is user:
            del self._users[old_username]
            self._users[new_username] = user
            logger.info("Renamed user %r to %r", old_username, new_username)
        logger.info("Updated profile for %r", new_username)
        return True
