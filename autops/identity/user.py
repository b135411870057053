"""User accounts of the platform."""

from __future__ import annotations

import re
from typing import Iterable

from autops.common.entity import TimestampedEntity, current_timestamp
from autops.common.identifier import Identifier, build_user_identifier
from autops.identity.errors import InvalidEmailError, InvalidUsernameError
from autops.identity.restricted_entity import RestrictedEntity
from autops.policy.policy import Policy

_EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+\-]+@[a-zA-Z0-9.\-]+\.[a-zA-Z]{2,}")
_USERNAME_PATTERN = re.compile(r"[a-zA-Z0-9_]+")
_USERNAME_MIN_LENGTH = 3
_USERNAME_MAX_LENGTH = 30


class User(TimestampedEntity, RestrictedEntity):
    """A user account with an email, a verification flag, a username and policies."""

    def __init__(
        self,
        identifier: str | Identifier,
        email: str,
        verified: bool,
        username: str,
        attached_policies: Iterable[Policy] | None,
        created_at: str,
        updated_at: str,
    ) -> None:
        TimestampedEntity.__init__(self, identifier, created_at, updated_at)
        RestrictedEntity.__init__(self, attached_policies)
        self._verified = False
        self.email = email
        self.username = username
        self._verified = bool(verified)

    @classmethod
    def create(cls, email: str, username: str) -> User:
        """A new, unverified user with a fresh identifier."""
        date = current_timestamp()
        return cls(build_user_identifier(), email, False, username, [], date, date)

    @property
    def email(self) -> str:
        return self._email

    @email.setter
    def email(self, value: str) -> None:
        value = value.strip()
        if _EMAIL_PATTERN.fullmatch(value) is None:
            raise InvalidEmailError()
        self._email = value
        self._verified = False

    @property
    def username(self) -> str:
        return self._username

    @username.setter
    def username(self, value: str) -> None:
        value = value.strip()
        if (
            not _USERNAME_MIN_LENGTH <= len(value) <= _USERNAME_MAX_LENGTH
            or _USERNAME_PATTERN.fullmatch(value) is None
        ):
            raise InvalidUsernameError()
        self._username = value

    @property
    def verified(self) -> bool:
        return self._verified

    def verify_email(self) -> None:
        """Mark the email address as verified."""
        self._verified = True

    def __repr__(self) -> str:
        return f"User({str(self.identifier)!r}, username={self._username!r})"