"""Actions that policies grant or deny on resources."""

from __future__ import annotations

from enum import Enum
from typing import Protocol, runtime_checkable

from autops.common.errors import InvalidResourceTypeError
from autops.common.resource_type import ResourceType
from autops.policy.errors import InvalidPolicyActionError


@runtime_checkable
class PolicyAction(Protocol):
    """An action on a resource type; ``str()`` gives the action name."""

    def __str__(self) -> str: ...

    @property
    def resource_type(self) -> ResourceType: ...


class ProjectPolicyAction(Enum):
    """Actions that can be performed on a project."""

    READ = "Read"
    UPDATE = "Update"
    DELETE = "Delete"
    LIST_WORKFLOWS = "ListWorkflows"
    LIST_TEMPLATES = "ListTemplates"

    def __str__(self) -> str:
        return self.value

    @property
    def resource_type(self) -> ResourceType:
        return ResourceType.PROJECT


class WorkflowPolicyAction(Enum):
    """Actions that can be performed on a workflow."""

    READ = "Read"
    UPDATE = "Update"
    DELETE = "Delete"
    RUN = "Run"

    def __str__(self) -> str:
        return self.value

    @property
    def resource_type(self) -> ResourceType:
        return ResourceType.WORKFLOW


def full_name(action: PolicyAction) -> str:
    """The action as ``<action>:<resource type>``."""
    try:
        resource_type = ResourceType(action.resource_type)
    except ValueError:
        raise InvalidResourceTypeError() from None
    return f"{action}:{resource_type}"


def parse_project_policy_action(text: str) -> ProjectPolicyAction:
    try:
        return ProjectPolicyAction(text)
    except ValueError:
        raise InvalidPolicyActionError() from None


def parse_workflow_policy_action(text: str) -> WorkflowPolicyAction:
    try:
        return WorkflowPolicyAction(text)
    except ValueError:
        raise InvalidPolicyActionError() from None


def parse_policy_action(text: str) -> PolicyAction:
    """Parse ``<resource type>:<action>`` into the matching action."""
    resource, sep, action = text.partition(":")
    if not sep:
        raise InvalidPolicyActionError(f"invalid action format: {text}")
    if resource == "project":
        return parse_project_policy_action(action)
    if resource == "workflow":
        return parse_workflow_policy_action(action)
    raise InvalidResourceTypeError(f"unknown resource type: {resource}")