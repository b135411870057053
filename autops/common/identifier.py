"""Structured resource identifiers and helpers to build them."""

from __future__ import annotations

import re
import secrets
import string
from functools import total_ordering

from autops.common.errors import InvalidIdentifierFormatError
from autops.common.resource_type import (
    ResourceType,
    parse_resource_type,
)
from autops.common.errors import InvalidResourceTypeError

AUTOPS_ID_PREFIX = "autops::"
NANO_ID_LENGTH = 10

_NANO_ID_ALPHABET = "_-" + string.digits + string.ascii_letters
_NANO_ID_PATTERN = re.compile(r"[a-zA-Z0-9_-]+")


def _is_valid_nano_id(text: str) -> bool:
    return len(text) == NANO_ID_LENGTH and _NANO_ID_PATTERN.fullmatch(text) is not None


def validate_identifier(text: str) -> None:
    """Raise if ``text`` is not a well-formed identifier."""
    if not text.startswith(AUTOPS_ID_PREFIX):
        raise InvalidIdentifierFormatError()
    segments = text[len(AUTOPS_ID_PREFIX):].split(":")
    if len(segments) not in (2, 4, 6):
        raise InvalidIdentifierFormatError()

    prefix = parse_resource_type(segments[0])
    if prefix not in (ResourceType.PROJECT, ResourceType.USER) and len(segments) > 2:
        raise InvalidIdentifierFormatError()

    if len(segments) == 4:
        resource_type = parse_resource_type(segments[2])
        if resource_type in (ResourceType.PROJECT, ResourceType.USER):
            raise InvalidIdentifierFormatError()

    if not all(_is_valid_nano_id(segment) for segment in segments[1::2]):
        raise InvalidIdentifierFormatError()


@total_ordering
class Identifier:
    """A validated identifier of a domain resource."""

    __slots__ = ("_value",)

    def __init__(self, value: str) -> None:
        validate_identifier(value)
        self._value = value

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"Identifier({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Identifier):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other: Identifier) -> bool:
        if not isinstance(other, Identifier):
            return NotImplemented
        return self._value < other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def segments(self) -> list[str]:
        """The identifier split on every colon."""
        return self._value.split(":")

    def resource_type(self) -> ResourceType | None:
        """The type named by the last type segment, or None if it is not a known type."""
        try:
            return parse_resource_type(self.segments()[-2])
        except InvalidResourceTypeError:
            return None


def generate_nano_id() -> str:
    """Return a random identifier segment of fixed length."""
    return "".join(secrets.choice(_NANO_ID_ALPHABET) for _ in range(NANO_ID_LENGTH))


def build_identifier(prefix: str, type_name: str) -> Identifier:
    """Build ``<prefix>:<type_name>:<nano-id>`` with a fresh nano id."""
    return Identifier(f"{prefix}:{type_name}:{generate_nano_id()}")


def build_user_identifier() -> Identifier:
    return build_identifier("autops:", "user")


def build_project_identifier() -> Identifier:
    return build_identifier("autops:", "project")


def build_template_identifier(project_id: str) -> Identifier:
    return build_identifier(project_id, "template")


def build_workflow_identifier(project_id: str) -> Identifier:
    return build_identifier(project_id, "workflow")


def build_policy_identifier(project_id: str) -> Identifier:
    return build_identifier(project_id, "policy")


def build_attribute_identifier(parent_id: str, attribute_type: str) -> Identifier:
    return build_identifier(parent_id, attribute_type)