"""Errors raised by projects."""

from __future__ import annotations

from autops.common.errors import DomainError


class PolicyNotFoundError(DomainError, LookupError):
    default_message = "cannot find a policy with the provided id in the current project"


class TemplateNotFoundError(DomainError, LookupError):
    default_message = "cannot find a template with the provided id in the current project"


class WorkflowNotFoundError(DomainError, LookupError):
    default_message = "cannot find a template with the provided id i, the current project"