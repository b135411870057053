"""Entities to which security policies can be attached."""

from __future__ import annotations

from typing import Iterable

from autops.common.collection import ComparatorList
from autops.common.identifier import Identifier
from autops.identity.errors import AttachedPolicyNotFoundError
from autops.policy.policy import Policy


def _compare_policies(a: Policy, b: Policy) -> int:
    a_text, b_text = str(a.identifier), str(b.identifier)
    return (a_text > b_text) - (a_text < b_text)


class RestrictedEntity:
    """An entity that can have security policies attached or detached."""

    def __init__(self, attached_policies: Iterable[Policy] | None = None) -> None:
        self._attached_policies: ComparatorList[Policy] = ComparatorList(
            _compare_policies, attached_policies or ()
        )

    def list_attached_policies(self) -> list[Policy]:
        return self._attached_policies.items()

    def get_attached_policy(self, identifier: Identifier) -> Policy | None:
        """The attached policy with ``identifier``, or None."""
        wanted = str(identifier)
        return self._attached_policies.select_one(
            lambda policy: str(policy.identifier) == wanted
        )

    def detach_policy(self, identifier: Identifier) -> None:
        """Detach the policy with ``identifier``; raise if it is not attached."""
        policy = self.get_attached_policy(identifier)
        if policy is None:
            raise AttachedPolicyNotFoundError()
        self._attached_policies.remove(policy)

    def attach_policy(self, policy: Policy) -> None:
        self._attached_policies.append(policy)