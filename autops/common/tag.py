"""Key-value tags and entities that carry a set of uniquely keyed tags."""

from __future__ import annotations

from dataclasses import dataclass

from autops.common.collection import ComparatorList


@dataclass
class Tag:
    """A key-value pair used to annotate objects."""

    key: str
    value: str


def _compare_tags(a: Tag, b: Tag) -> int:
    return (a.key > b.key) - (a.key < b.key)


class TaggedEntity:
    """An object holding tags, at most one per key."""

    def __init__(self) -> None:
        self._tags: ComparatorList[Tag] = ComparatorList(_compare_tags)

    def add_tag(self, tag: Tag) -> None:
        """Attach ``tag``, replacing any tag that has the same key."""
        if tag in self._tags:
            self.remove_tag(tag.key)
        self._tags.append(tag)

    def remove_tag(self, key: str) -> None:
        """Remove the tag with ``key``, if there is one."""
        self._tags.remove(Tag(key, ""))

    def has_tag(self, key: str) -> bool:
        return Tag(key, "") in self._tags

    def get_tag(self, key: str) -> Tag | None:
        """The tag with ``key``, or None."""
        found = self._tags.find(Tag(key, ""))
        return None if found is None else found[1]

    def list_tags(self) -> list[Tag]:
        return self._tags.items()