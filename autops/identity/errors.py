"""Errors raised by identities and access-controlled entities."""

from __future__ import annotations

from autops.common.errors import DomainError


class AttachedPolicyNotFoundError(DomainError, LookupError):
    default_message = (
        "cannot find a policy with the provided identifer attached to the "
        "current restricted entity"
    )


class InvalidEmailError(DomainError, ValueError):
    default_message = "the provided string does not match a valid email address"


class InvalidUsernameError(DomainError, ValueError):
    default_message = (
        "username length must be 3-30 characters, and only composed of letters, "
        "number and underscores '_'"
    )