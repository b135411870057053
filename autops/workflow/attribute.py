"""Typed, user-defined parameters of a workflow."""

from __future__ import annotations

from enum import Enum

from autops.common.entity import NamedEntity, current_timestamp
from autops.common.identifier import Identifier, build_attribute_identifier
from autops.template import errors as template_errors
from autops.template.attribute import AttributeType, validate_default_value
from autops.workflow.errors import (
    EmptyItemInListError,
    InvalidListFormatError,
    UnsupportedAttributeTypeError,
    UnsupportedWorkflowAttributeTypeError,
)


class WorkflowAttributeType(Enum):
    """The kind of value a workflow attribute holds."""

    STRING = 0
    NUMBER = 1
    LIST = 2
    BOOL = 3
    OBJECT = 4

    def __str__(self) -> str:
        return self.name.lower()


_TYPES_BY_NAME = {str(member): member for member in WorkflowAttributeType}


def parse_workflow_attribute_type(text: str) -> WorkflowAttributeType:
    """Parse an attribute type name, ignoring case."""
    try:
        return _TYPES_BY_NAME[text.lower()]
    except KeyError:
        raise UnsupportedWorkflowAttributeTypeError() from None


def _validate(attribute_type: WorkflowAttributeType, value: str) -> None:
    try:
        value_kind = AttributeType[attribute_type.name]
    except (KeyError, AttributeError):
        raise UnsupportedAttributeTypeError() from None
    try:
        validate_default_value(value_kind, value)
    except template_errors.InvalidListFormatError:
        raise InvalidListFormatError() from None
    except template_errors.EmptyItemInListError:
        raise EmptyItemInListError() from None


class WorkflowAttribute(NamedEntity):
    """A named workflow parameter with a type and a validated default value."""

    def __init__(
        self,
        identifier: str | Identifier,
        name: str,
        description: str,
        attribute_type: WorkflowAttributeType,
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
        workflow_id: str | Identifier,
        name: str,
        description: str,
        attribute_type: WorkflowAttributeType,
        default_value: str,
    ) -> WorkflowAttribute:
        """Build an attribute with a fresh identifier under ``workflow_id``."""
        identifier = build_attribute_identifier(str(workflow_id), str(attribute_type))
        return cls(identifier, name, description, attribute_type, default_value)

    @property
    def attribute_type(self) -> WorkflowAttributeType:
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
        _validate(self._attribute_type, value)
        self._default_value = value

    def __repr__(self) -> str:
        return (
            f"WorkflowAttribute({str(self.identifier)!r}, name={self.name!r}, "
            f"type={self._attribute_type})"
        )


def compare_workflow_attributes(a: WorkflowAttribute, b: WorkflowAttribute) -> int:
    """Order two attributes by identifier: negative, zero or positive."""
    a_text, b_text = str(a.identifier), str(b.identifier)
    return (a_text > b_text) - (a_text < b_text)