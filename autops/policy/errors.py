"""Errors raised by policies and their statements."""

from __future__ import annotations

from autops.common.errors import DomainError


class InvalidPolicyActionError(DomainError, ValueError):
    default_message = "invalid action name for the specified resource type"


class InvalidPolicyEffectError(DomainError, ValueError):
    default_message = "invalid policy effect : correct values are 'ALLOW' or 'DENY'"