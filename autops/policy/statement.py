"""Policy statements: an effect applied to actions on resources."""

from __future__ import annotations

from enum import Enum
from typing import Iterable

from autops.common.collection import ComparatorList
from autops.common.identifier import Identifier
from autops.policy.action import PolicyAction
from autops.policy.errors import InvalidPolicyEffectError


class PolicyEffect(Enum):
    """The effect of a policy: allow, deny or unspecified."""

    ALLOW = 0
    DENY = 1
    UNSPECIFIED = 2

    def __str__(self) -> str:
        if self is PolicyEffect.ALLOW:
            return "Allow"
        if self is PolicyEffect.DENY:
            return "Deny"
        raise InvalidPolicyEffectError()


def parse_policy_effect(text: str) -> PolicyEffect:
    """Parse ``allow`` or ``deny``, ignoring case."""
    lowered = text.lower()
    if lowered == "allow":
        return PolicyEffect.ALLOW
    if lowered == "deny":
        return PolicyEffect.DENY
    raise InvalidPolicyEffectError()


def _compare_text(a: str, b: str) -> int:
    return (a > b) - (a < b)


def _compare_identifiers(a: Identifier, b: Identifier) -> int:
    return _compare_text(str(a), str(b))


def _compare_actions(a: PolicyAction, b: PolicyAction) -> int:
    return _compare_text(str(a), str(b))


class PolicyStatement:
    """Binds resource identifiers and actions to an allow or deny effect."""

    def __init__(
        self,
        effect: PolicyEffect,
        resources: Iterable[Identifier] | None,
        actions: Iterable[PolicyAction] | None,
    ) -> None:
        try:
            effect = PolicyEffect(effect)
        except ValueError:
            raise InvalidPolicyEffectError() from None
        str(effect)
        self._effect = effect
        self._resources: ComparatorList[Identifier] = ComparatorList(
            _compare_identifiers, resources or ()
        )
        self._actions: ComparatorList[PolicyAction] = ComparatorList(
            _compare_actions, actions or ()
        )

    @property
    def effect(self) -> PolicyEffect:
        return self._effect

    def list_resources(self) -> list[Identifier]:
        return self._resources.items()

    def list_actions(self) -> list[PolicyAction]:
        return self._actions.items()

    def get_permission(
        self, resource_identifier: Identifier, action: PolicyAction
    ) -> PolicyEffect:
        """The effect for ``action`` on the resource, or UNSPECIFIED if not covered."""
        if resource_identifier not in self._resources or action not in self._actions:
            return PolicyEffect.UNSPECIFIED
        return self._effect