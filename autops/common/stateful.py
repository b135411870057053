"""Execution status, execution logs and entities that carry them."""

from __future__ import annotations

import posixpath
import re
from enum import Enum
from urllib.parse import urlsplit

from autops.common.entity import NamedEntity, current_timestamp
from autops.common.errors import InvalidPathOrUrlError, StatusParseError
from autops.common.identifier import Identifier
from autops.common.tag import TaggedEntity

_SAFE_PATH_PATTERN = re.compile(r"[a-zA-Z0-9._/\-:\\]+")


class Status(Enum):
    """The execution status of a stateful entity."""

    PENDING = 0
    RUNNING = 1
    SUCCESS = 2
    FAILURE = 3

    def __str__(self) -> str:
        return self.name.lower()


def parse_status(text: str) -> Status:
    """Parse a status name, ignoring case."""
    try:
        return Status[text.upper()]
    except KeyError:
        raise StatusParseError() from None


def is_syntactically_safe_path(path: str) -> bool:
    """Whether ``path`` contains only allowed characters."""
    return _SAFE_PATH_PATTERN.fullmatch(path) is not None


def is_plausible_local_path(path: str) -> bool:
    """Whether ``path`` looks like a usable local file path."""
    cleaned = posixpath.normpath(path) if path else "."
    return cleaned != "" and "\0" not in cleaned


def is_valid_url(path: str) -> bool:
    """Whether ``path`` is an absolute URL with a scheme and a host."""
    try:
        parts = urlsplit(path)
    except ValueError:
        return False
    host = parts.netloc.rpartition("@")[2]
    return bool(parts.scheme) and bool(host)


class ExecutionLog:
    """A reference to an execution log, either a local path or a URL."""

    __slots__ = ("_log_path",)

    def __init__(self, log_path: str) -> None:
        if not is_syntactically_safe_path(log_path) or not (
            is_valid_url(log_path) or is_plausible_local_path(log_path)
        ):
            raise InvalidPathOrUrlError()
        self._log_path = log_path

    @property
    def log_path(self) -> str:
        return self._log_path

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ExecutionLog):
            return NotImplemented
        return self._log_path == other._log_path

    def __hash__(self) -> int:
        return hash(self._log_path)

    def __repr__(self) -> str:
        return f"ExecutionLog({self._log_path!r})"


class StatefulNamedEntity(NamedEntity, TaggedEntity):
    """A named, tagged entity with a status and an optional execution log."""

    def __init__(
        self,
        identifier: str | Identifier,
        name: str,
        description: str,
        status: Status,
    ) -> None:
        date = current_timestamp()
        NamedEntity.__init__(self, identifier, name, description, date, date)
        TaggedEntity.__init__(self)
        self._status = status
        self._execution_log: ExecutionLog | None = None

    @property
    def status(self) -> Status:
        return self._status

    @status.setter
    def status(self, value: Status) -> None:
        self._status = value

    @property
    def execution_log(self) -> ExecutionLog | None:
        return self._execution_log

    @execution_log.setter
    def execution_log(self, value: ExecutionLog | None) -> None:
        self._execution_log = value