"""Infrastructure and configuration templates."""

from __future__ import annotations

from enum import Enum

from autops.common.collection import ComparatorList
from autops.common.identifier import Identifier, build_template_identifier
from autops.common.stateful import StatefulNamedEntity, Status
from autops.common.versioned_source import VersionedSource
from autops.template.attribute import TemplateAttribute, compare_template_attributes
from autops.template.errors import (
    InvalidTemplateTypeError,
    TemplateInputAlreadyPresentError,
    TemplateInputNotFoundError,
    TemplateOutputAlreadyPresentError,
    TemplateOutputNotFoundError,
)


class TemplateType(Enum):
    """The automation tool a template is written for."""

    TERRAFORM = 0
    ANSIBLE = 1
    PACKER = 2
    OPENTOFU = 3

    def __str__(self) -> str:
        return self.name.lower()


def parse_template_type(text: str) -> TemplateType:
    """Parse a template type name, ignoring case."""
    try:
        return TemplateType[text.upper()]
    except KeyError:
        raise InvalidTemplateTypeError() from None


class Template(StatefulNamedEntity, VersionedSource):
    """A versioned template with a type, a source location, inputs and outputs."""

    def __init__(
        self,
        identifier: str | Identifier,
        name: str,
        description: str,
        status: Status,
        template_type: TemplateType,
        source_path: str,
        version: int,
    ) -> None:
        StatefulNamedEntity.__init__(self, identifier, name, description, status)
        VersionedSource.__init__(self, source_path, version)
        self._template_type = template_type
        self._inputs: ComparatorList[TemplateAttribute] = ComparatorList(
            compare_template_attributes
        )
        self._outputs: ComparatorList[TemplateAttribute] = ComparatorList(
            compare_template_attributes
        )

    @classmethod
    def create(
        cls,
        project_identifier: str | Identifier,
        name: str,
        description: str,
        status: Status,
        template_type: TemplateType,
        source_path: str,
    ) -> Template:
        """Build a template at version 1 with a fresh identifier under the project."""
        identifier = build_template_identifier(str(project_identifier))
        return cls(identifier, name, description, status, template_type, source_path, 1)

    @property
    def template_type(self) -> TemplateType:
        return self._template_type

    def add_input(self, attribute: TemplateAttribute) -> None:
        """Add an input; raise if one with the same identifier is present."""
        if attribute in self._inputs:
            raise TemplateInputAlreadyPresentError()
        self._inputs.append(attribute)

    def remove_input(self, input_identifier: str | Identifier) -> None:
        """Remove the input with the given identifier; raise if absent."""
        wanted = str(input_identifier)
        attribute = self._inputs.select_one(lambda item: str(item.identifier) == wanted)
        if attribute is None:
            raise TemplateInputNotFoundError()
        self._inputs.remove(attribute)

    def list_inputs(self) -> list[TemplateAttribute]:
        return self._inputs.items()

    def add_output(self, attribute: TemplateAttribute) -> None:
        """Add an output; raise if one with the same identifier is present."""
        if attribute in self._outputs:
            raise TemplateOutputAlreadyPresentError()
        self._outputs.append(attribute)

    def remove_output(self, output_identifier: str | Identifier) -> None:
        """Remove the output with the given identifier; raise if absent."""
        wanted = str(output_identifier)
        attribute = self._outputs.select_one(lambda item: str(item.identifier) == wanted)
        if attribute is None:
            raise TemplateOutputNotFoundError()
        self._outputs.remove(attribute)

    def list_outputs(self) -> list[TemplateAttribute]:
        return self._outputs.items()

    def __repr__(self) -> str:
        return (
            f"Template({str(self.identifier)!r}, name={self.name!r}, "
            f"type={self._template_type}, version={self.version})"
        )