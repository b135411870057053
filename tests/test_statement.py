import pytest

from autops.common.identifier import Identifier
from autops.common.resource_type import ResourceType
from autops.policy.action import ProjectPolicyAction
from autops.policy.errors import InvalidPolicyEffectError
from autops.policy.statement import PolicyEffect, PolicyStatement, parse_policy_effect


class _MockAction:
    def __init__(self, name, resource_type=ResourceType.PROJECT):
        self._name = name
        self._resource_type = resource_type

    def __str__(self):
        return self._name

    @property
    def resource_type(self):
        return self._resource_type


def test_policy_effect_to_string():
    assert str(parse_policy_effect("allow")) == "Allow"
    assert str(parse_policy_effect("DENY")) == "Deny"
    with pytest.raises(InvalidPolicyEffectError):
        PolicyEffect.UNSPECIFIED.__str__()


def test_parse_policy_effect():
    assert parse_policy_effect("Allow") is PolicyEffect.ALLOW
    assert parse_policy_effect("Deny") is PolicyEffect.DENY
    with pytest.raises(InvalidPolicyEffectError):
        parse_policy_effect("SomethingElse")


def test_new_policy_statement():
    id1 = Identifier("autops::project:ABCDEFGHIJ")
    id2 = Identifier("autops::project:1234567890")
    statement = PolicyStatement(PolicyEffect.ALLOW, [id1, id2], [])
    assert statement.effect is PolicyEffect.ALLOW

    with pytest.raises(InvalidPolicyEffectError):
        PolicyStatement(999, [id1, id2], [])


def test_new_policy_statement_rejects_unspecified():
    with pytest.raises(InvalidPolicyEffectError):
        PolicyStatement(PolicyEffect.UNSPECIFIED, [], [])


def test_list_resources():
    res1 = Identifier("autops::project:1234567890")
    res2 = Identifier("autops::project:AZERTYUIOP")
    statement = PolicyStatement(PolicyEffect.ALLOW, [res1, res2], None)
    got = statement.list_resources()
    assert len(got) == 2
    assert got[0] is res1 and got[1] is res2


def test_list_actions():
    act1 = _MockAction("Read")
    act2 = _MockAction("Update")
    statement = PolicyStatement(PolicyEffect.ALLOW, None, [act1, act2])
    got = statement.list_actions()
    assert len(got) == 2
    assert got[0] is act1 and got[1] is act2


def test_get_permission():
    resource = Identifier("autops::project:1234567890")
    other = Identifier("autops::project:AZERTYUIOP")
    deny = PolicyStatement(PolicyEffect.DENY, [resource], [ProjectPolicyAction.READ])

    assert deny.get_permission(resource, ProjectPolicyAction.READ) is PolicyEffect.DENY
    assert deny.get_permission(other, ProjectPolicyAction.READ) is PolicyEffect.UNSPECIFIED
    assert (
        deny.get_permission(resource, ProjectPolicyAction.UPDATE)
        is PolicyEffect.UNSPECIFIED
    )


def test_get_permission_matches_by_value():
    statement = PolicyStatement(
        PolicyEffect.ALLOW,
        [Identifier("autops::project:1234567890")],
        [_MockAction("Read")],
    )
    effect = statement.get_permission(
        Identifier("autops::project:1234567890"), _MockAction("Read")
    )
    assert effect is PolicyEffect.ALLOW