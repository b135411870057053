"""Errors raised by the shared domain types."""

from __future__ import annotations


class DomainError(Exception):
    """Base class of every error raised by the domain layer."""

    default_message = "domain error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class InvalidNameError(DomainError, ValueError):
    default_message = (
        "name must be non-empty, with at most 128 characters, and exclusively "
        "composed of letters, numbers, hyphens (-) and underscores (_)"
    )


class InvalidDescriptionError(DomainError, ValueError):
    default_message = "description must be less than 512 characters"


class ListIndexOutOfRangeError(DomainError, IndexError):
    default_message = "index out of bound"


class ListNilComparatorError(DomainError, TypeError):
    default_message = "comparator is nil"


class StatusParseError(DomainError, ValueError):
    default_message = "the string cannot be converted to a status"


class InvalidPathOrUrlError(DomainError, ValueError):
    default_message = "the provided string does not correspond to a path or a url"


class InvalidResourceTypeError(DomainError, ValueError):
    default_message = "invalid resource type"


class InvalidIdentifierFormatError(DomainError, ValueError):
    default_message = (
        "identifier must match the following format: "
        "'autops::project:<project-id>[:<resource-type>:<resource-id>]'"
    )