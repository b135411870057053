"""A source location paired with a version number."""

from __future__ import annotations

from autops.common.errors import InvalidPathOrUrlError
from autops.common.stateful import (
    is_plausible_local_path,
    is_syntactically_safe_path,
    is_valid_url,
)


class VersionedSource:
    """A source path (local file or URL) and its version."""

    def __init__(self, source_path: str, version: int) -> None:
        self.source_path = source_path
        self._version = version

    @property
    def source_path(self) -> str:
        return self._source_path

    @source_path.setter
    def source_path(self, path: str) -> None:
        if not is_syntactically_safe_path(path) or not (
            is_valid_url(path) or is_plausible_local_path(path)
        ):
            raise InvalidPathOrUrlError()
        self._source_path = path

    @property
    def version(self) -> int:
        return self._version

    def fork_with_new_version(self, new_source_path: str) -> VersionedSource:
        """A new source at ``new_source_path`` with the version incremented."""
        return VersionedSource(new_source_path, self._version + 1)