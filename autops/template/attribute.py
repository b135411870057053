"""Typed, user-defined parameters of a template."""

from __future__ import annotations

import json
import math
import re
from enum import Enum
from typing import Any

from autops.common.entity import NamedEntity, current_timestamp
from autops.common.identifier import Identifier, build_attribute_identifier
from autops.template.errors import (
    EmptyItemInListError,
    InvalidAttributeTypeError,
    InvalidListFormatError,
    UnsupportedAttributeTypeError,
)

_DECIMAL_PATTERN = re.compile(r"(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")
_BOOL_LITERALS = frozenset(
    {"1", "t", "T", "TRUE", "true", "True", "0", "f", "F", "FALSE", "false", "False"}
)


class AttributeType(Enum):
    """The kind of value a template attribute holds."""

    STRING = 0
    NUMBER = 1
    BOOL = 2
    LIST = 3
    OBJECT = 4

    def __str__(self) -> str:
        return self.name[0]


def _check_number(text: str) -> None:
    """Raise ValueError unless ``text`` is a finite or explicitly infinite float literal."""
    body = text[1:] if text[:1] in ("+", "-") else text
    lowered = body.lower()
    if lowered in ("inf", "infinity"):
        return
    if lowered == "nan" and body == text:
        return
    if lowered.startswith("0x"):
        if "p" not in lowered:
            raise ValueError(f"invalid number: {text!r}")
        try:
            value = float.fromhex(body)
        except (ValueError, OverflowError):
            raise ValueError(f"invalid number: {text!r}") from None
    else:
        if _DECIMAL_PATTERN.fullmatch(body) is None:
            raise ValueError(f"invalid number: {text!r}")
        value = float(body)
    if math.isinf(value):
        raise ValueError(f"number out of range: {text!r}")


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON value: {name}")


def _finite_float(text: str) -> float:
    value = float(text)
    if math.isinf(value):
        raise ValueError(f"number out of range: {text}")
    return value


def _finite_int(text: str) -> int:
    if math.isinf(float(text)):
        raise ValueError(f"number out of range: {text}")
    return int(text)


def _decode_json(text: str) -> Any:
    return json.loads(
        text,
        parse_constant=_reject_constant,
        parse_float=_finite_float,
        parse_int=_finite_int,
    )


def validate_default_value(attribute_type: Any, value: str) -> None:
    """Raise if ``value`` is not a valid default for ``attribute_type``."""
    if attribute_type is AttributeType.STRING:
        return
    if attribute_type is AttributeType.NUMBER:
        _check_number(value)
    elif attribute_type is AttributeType.BOOL:
        if value not in _BOOL_LITERALS:
            raise ValueError(f"invalid boolean: {value!r}")
    elif attribute_type is AttributeType.OBJECT:
        decoded = _decode_json(value)
        if decoded is not None and not isinstance(decoded, dict):
            raise ValueError("JSON value is not an object")
    elif attribute_type is AttributeType.LIST:
        try:
            decoded = _decode_json(value)
        except (ValueError, RecursionError):
            raise InvalidListFormatError() from None
        if decoded is not None and not isinstance(decoded, list):
            raise InvalidListFormatError()
        if any(item is None for item in decoded or ()):
            raise EmptyItemInListError()
    else:
        raise UnsupportedAttributeTypeError()


class TemplateAttribute(NamedEntity):
    """A named template parameter with a type and a validated default value."""

    def __init__(
        self,
        identifier: str | Identifier,
        name: str,
        description: str,
        attribute_type: AttributeType,
        default_value: str,
    ) -> None:
        date = current_timestamp()
        super().__init__(identifier, name, description, date, date)
        self._attribute_type = attribute_type
        self._default_value = ""
        self.default_value = default_value

    @classmethod
    def create(
        cls,
        template_id: str | Identifier,
        name: str,
        description: str,
        attribute_type: AttributeType,
        default_value: str,
    ) -> TemplateAttribute:
        """Build an attribute with a fresh identifier under ``template_id``."""
        try:
            attribute_type = AttributeType(attribute_type)
        except ValueError:
            raise InvalidAttributeTypeError() from None
        identifier = build_attribute_identifier(str(template_id), str(attribute_type))
        return cls(identifier, name, description, attribute_type, default_value)

    @property
    def attribute_type(self) -> AttributeType:
        return self._attribute_type

    @property
    def default_value(self) -> str:
        return self._default_value

    @default_value.setter
    def default_value(self, value: str) -> None:
        """Validate and store ``value``; a blank value leaves the current default unchanged."""
        value = value.strip()
        if not value:
            return
        validate_default_value(self._attribute_type, value)
        self._default_value = value

    def __repr__(self) -> str:
        return (
            f"TemplateAttribute({str(self.identifier)!r}, name={self.name!r}, "
            f"type={self._attribute_type.name})"
        )


def compare_template_attributes(a: TemplateAttribute, b: TemplateAttribute) -> int:
    """Order two attributes by identifier: negative, zero or positive."""
    a_text, b_text = str(a.identifier), str(b.identifier)
    return (a_text > b_text) - (a_text < b_text)