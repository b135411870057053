"""Errors raised by templates and their attributes."""

from __future__ import annotations

from autops.common.errors import DomainError


class UnsupportedAttributeTypeError(DomainError, ValueError):
    default_message = "unsupported attribute type"


class InvalidListFormatError(DomainError, ValueError):
    default_message = "invalid LIST format: expected format like [a, b, c]"


class EmptyItemInListError(DomainError, ValueError):
    default_message = "invalid LIST format: empty item"


class TemplateInputAlreadyPresentError(DomainError, ValueError):
    default_message = "an input with the same identifier is already present in the template"


class TemplateOutputAlreadyPresentError(DomainError, ValueError):
    default_message = "an output with the same identifier is already present in the template"


class InvalidTemplateTypeError(DomainError, ValueError):
    default_message = "cannot parse the string into a TemplateType"


class TemplateOutputNotFoundError(DomainError, LookupError):
    default_message = "cannot find an output with the specified identifier"


class TemplateInputNotFoundError(DomainError, LookupError):
    default_message = "cannot find an input with the specified identifier"


class InvalidAttributeTypeError(DomainError, ValueError):
    default_message = "invalid attribute type"