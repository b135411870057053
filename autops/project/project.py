"""Projects: named groups of templates, workflows and policies."""

from __future__ import annotations

from typing import Iterable, Protocol, TypeVar

from autops.common.collection import ComparatorList
from autops.common.entity import NamedEntity, current_timestamp
from autops.common.identifier import Identifier, build_project_identifier
from autops.common.tag import TaggedEntity
from autops.policy.policy import Policy
from autops.project.errors import (
    PolicyNotFoundError,
    TemplateNotFoundError,
    WorkflowNotFoundError,
)
from autops.template.template import Template
from autops.workflow.workflow import Workflow


class _Identified(Protocol):
    @property
    def identifier(self) -> Identifier: ...


E = TypeVar("E", bound=_Identified)


def _compare_by_identifier(a: _Identified, b: _Identified) -> int:
    a_text, b_text = str(a.identifier), str(b.identifier)
    return (a_text > b_text) - (a_text < b_text)


def _select_by_identifier(items: ComparatorList[E], identifier: Identifier | str) -> E | None:
    wanted = str(identifier)
    return items.select_one(lambda item: str(item.identifier) == wanted)


class Project(NamedEntity, TaggedEntity):
    """A project grouping templates, workflows and policies."""

    def __init__(
        self,
        identifier: str | Identifier,
        name: str,
        description: str,
        created_at: str,
        updated_at: str,
        templates: Iterable[Template] | None = None,
        workflows: Iterable[Workflow] | None = None,
        policies: Iterable[Policy] | None = None,
    ) -> None:
        NamedEntity.__init__(self, identifier, name, description, created_at, updated_at)
        TaggedEntity.__init__(self)
        self._templates: ComparatorList[Template] = ComparatorList(
            _compare_by_identifier, templates or ()
        )
        self._workflows: ComparatorList[Workflow] = ComparatorList(
            _compare_by_identifier, workflows or ()
        )
        self._policies: ComparatorList[Policy] = ComparatorList(
            _compare_by_identifier, policies or ()
        )

    @classmethod
    def create(cls, name: str, description: str) -> Project:
        """An empty project with a fresh identifier, stamped with the current time."""
        identifier = build_project_identifier()
        date = current_timestamp()
        return cls(identifier, name, description, date, date)

    def list_templates(self) -> list[Template]:
        return self._templates.items()

    def get_template(self, identifier: Identifier | str) -> Template | None:
        """The template with ``identifier``, or None."""
        return _select_by_identifier(self._templates, identifier)

    def add_template(self, template: Template) -> None:
        self._templates.append(template)

    def remove_template(self, identifier: Identifier | str) -> None:
        """Remove the template with ``identifier``; raise if absent."""
        template = self.get_template(identifier)
        if template is None:
            raise TemplateNotFoundError()
        self._templates.remove(template)

    def list_workflows(self) -> list[Workflow]:
        return self._workflows.items()

    def get_workflow(self, identifier: Identifier | str) -> Workflow | None:
        """The workflow with ``identifier``, or None."""
        return _select_by_identifier(self._workflows, identifier)

    def add_workflow(self, workflow: Workflow) -> None:
        self._workflows.append(workflow)

    def remove_workflow(self, identifier: Identifier | str) -> None:
        """Remove the workflow with ``identifier``; raise if absent."""
        workflow = self.get_workflow(identifier)
        if workflow is None:
            raise WorkflowNotFoundError()
        self._workflows.remove(workflow)

    def list_policies(self) -> list[Policy]:
        return self._policies.items()

    def get_policy(self, identifier: Identifier | str) -> Policy | None:
        """The policy with ``identifier``, or None."""
        return _select_by_identifier(self._policies, identifier)

    def add_policy(self, policy: Policy) -> None:
        self._policies.append(policy)

    def remove_policy(self, identifier: Identifier | str) -> None:
        """Remove the policy with ``identifier``; raise if absent."""
        policy = self.get_policy(identifier)
        if policy is None:
            raise PolicyNotFoundError()
        self._policies.remove(policy)

    def __repr__(self) -> str:
        return f"Project({str(self.identifier)!r}, name={self.name!r})"