"""Kinds of resources managed by the platform."""

from __future__ import annotations

from enum import IntEnum

from autops.common.errors import InvalidResourceTypeError


class ResourceType(IntEnum):
    """A type of resource in the system."""

    USER = 0
    PROJECT = 1
    WORKFLOW = 2
    TEMPLATE = 3
    POLICY = 4

    def __str__(self) -> str:
        return self.name.lower()


def parse_resource_type(text: str) -> ResourceType:
    """Parse a resource type name, ignoring case."""
    try:
        return ResourceType[text.upper()]
    except KeyError:
        raise InvalidResourceTypeError() from None