"""Security policies: named sets of statements over resources."""

from __future__ import annotations

from typing import Iterable

from autops.common.collection import ComparatorList
from autops.common.entity import NamedEntity, current_timestamp
from autops.common.identifier import Identifier, build_policy_identifier
from autops.common.tag import TaggedEntity
from autops.policy.action import PolicyAction
from autops.policy.statement import PolicyEffect, PolicyStatement


def _compare_statements(a: PolicyStatement, b: PolicyStatement) -> int:
    a_text, b_text = str(a.effect), str(b.effect)
    return (a_text > b_text) - (a_text < b_text)


class Policy(NamedEntity, TaggedEntity):
    """A security policy defining permissions over resources."""

    def __init__(
        self,
        identifier: str | Identifier,
        name: str,
        description: str,
        created_at: str,
        updated_at: str,
        statements: Iterable[PolicyStatement] | None = None,
    ) -> None:
        NamedEntity.__init__(self, identifier, name, description, created_at, updated_at)
        TaggedEntity.__init__(self)
        self._statements: ComparatorList[PolicyStatement] = ComparatorList(
            _compare_statements, statements or ()
        )

    @classmethod
    def create(
        cls,
        project_identifier: str,
        name: str,
        description: str,
        statements: Iterable[PolicyStatement] | None = None,
    ) -> Policy:
        """Build a policy with a fresh identifier under the given project."""
        date = current_timestamp()
        identifier = build_policy_identifier(str(project_identifier))
        return cls(identifier, name, description, date, date, statements)

    def list_statements(self) -> list[PolicyStatement]:
        return self._statements.items()

    def add_statement(self, statement: PolicyStatement) -> None:
        self._statements.append(statement)

    def remove_statement(self, statement: PolicyStatement) -> None:
        """Remove the first statement that compares equal to ``statement``."""
        self._statements.remove(statement)

    def get_permission(
        self, resource_identifier: Identifier, action: PolicyAction
    ) -> PolicyEffect:
        """The effect for ``action`` on the resource; DENY takes precedence over ALLOW."""
        allowed = False
        for statement in self._statements:
            effect = statement.get_permission(resource_identifier, action)
            if effect is PolicyEffect.DENY:
                return PolicyEffect.DENY
            if effect is PolicyEffect.ALLOW:
                allowed = True
        return PolicyEffect.ALLOW if allowed else PolicyEffect.UNSPECIFIED

    def __repr__(self) -> str:
        return f"Policy({str(self.identifier)!r}, name={self.name!r})"