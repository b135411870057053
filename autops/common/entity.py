"""Base entities: identified, timestamped and named."""

from __future__ import annotations

import re
from datetime import datetime, timedelta

from autops.common.errors import InvalidDescriptionError, InvalidNameError
from autops.common.identifier import Identifier

_NAME_PATTERN = re.compile(r"[a-zA-Z0-9_-]{1,128}")
_NAME_MIN_LENGTH = 1
_NAME_MAX_LENGTH = 128
_DESCRIPTION_MAX_LENGTH = 512


def current_timestamp() -> str:
    """The current local time as an RFC 3339 string with second precision."""
    now = datetime.now().astimezone().replace(microsecond=0)
    if now.utcoffset() == timedelta(0):
        return now.replace(tzinfo=None).isoformat() + "Z"
    return now.isoformat()


def _as_identifier(identifier: str | Identifier) -> Identifier:
    if isinstance(identifier, Identifier):
        return identifier
    return Identifier(identifier)


class TimestampedEntity:
    """An identified object with creation and update timestamps."""

    def __init__(self, identifier: str | Identifier, created_at: str, updated_at: str) -> None:
        self._identifier = _as_identifier(identifier)
        self._created_at = created_at
        self._updated_at = updated_at

    @classmethod
    def create(cls, identifier: str | Identifier) -> TimestampedEntity:
        """Build an entity whose timestamps are both the current time."""
        date = current_timestamp()
        return cls(identifier, date, date)

    @property
    def identifier(self) -> Identifier:
        return self._identifier

    @property
    def created_at(self) -> str:
        return self._created_at

    @property
    def updated_at(self) -> str:
        return self._updated_at

    def update_modification_date(self) -> None:
        """Set the update timestamp to the current time."""
        self._updated_at = current_timestamp()


class NamedEntity(TimestampedEntity):
    """A timestamped entity with a validated name and description."""

    def __init__(
        self,
        identifier: str | Identifier,
        name: str,
        description: str,
        created_at: str,
        updated_at: str,
    ) -> None:
        super().__init__(identifier, created_at, updated_at)
        self.name = name
        self.description = description

    @classmethod
    def create(cls, identifier: str | Identifier, name: str, description: str) -> NamedEntity:
        """Build a named entity stamped with the current time."""
        date = current_timestamp()
        return cls(identifier, name, description, date, date)

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        if (
            not _NAME_MIN_LENGTH <= len(value) <= _NAME_MAX_LENGTH
            or _NAME_PATTERN.fullmatch(value) is None
        ):
            raise InvalidNameError()
        self._name = value

    @property
    def description(self) -> str:
        return self._description

    @description.setter
    def description(self, value: str) -> None:
        value = value.strip()
        if len(value.encode("utf-8")) > _DESCRIPTION_MAX_LENGTH:
            raise InvalidDescriptionError()
        self._description = value