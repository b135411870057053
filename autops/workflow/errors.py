"""Errors raised by workflows and their parts."""

from __future__ import annotations

from autops.common.errors import DomainError


class UnsupportedAttributeTypeError(DomainError, ValueError):
    default_message = "unsupported attribute type"


class InvalidListFormatError(DomainError, ValueError):
    default_message = "invalid LIST format: expected format like [a, b, c]"


class EmptyItemInListError(DomainError, ValueError):
    default_message = "invalid LIST format: empty item"


class UnsupportedWorkflowAttributeTypeError(DomainError, ValueError):
    default_message = "unsupported attribute type"


class WorkflowInputAlreadyPresentError(DomainError, ValueError):
    default_message = "a workflow input with the same identifier is already attached"


class WorkflowOutputAlreadyPresentError(DomainError, ValueError):
    default_message = "a workflow output with the same identifier is already attached"


class WorkflowRunAlreadyPresentError(DomainError, ValueError):
    default_message = "a workflow run with the same date is already attached"


class WorkflowInputNotFoundError(DomainError, LookupError):
    default_message = "cannot find a workflow input with the specified identifier"


class WorkflowOutputNotFoundError(DomainError, LookupError):
    default_message = "cannot find a workflow output with the specified identifier"


class WorkflowStepNotFoundError(DomainError, LookupError):
    default_message = "cannot find a workflow step with the specified step number"