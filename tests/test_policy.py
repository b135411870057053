import pytest

from autops.common.errors import InvalidNameError
from autops.common.identifier import Identifier
from autops.common.resource_type import ResourceType
from autops.policy.action import ProjectPolicyAction
from autops.policy.policy import Policy
from autops.policy.statement import PolicyEffect, PolicyStatement


def test_list_statements():
    identifier = Identifier("autops::project:1234567890")
    statement = PolicyStatement(
        PolicyEffect.ALLOW, [identifier], [ProjectPolicyAction.READ]
    )
    policy = Policy.create("autops::project:1234567890", "TestPolicy", "desc", [statement])
    statements = policy.list_statements()
    assert len(statements) == 1
    assert statements[0] is statement


def test_get_permission():
    action = ProjectPolicyAction.READ
    identifier = Identifier("autops::project:1234567890")
    allow = PolicyStatement(PolicyEffect.ALLOW, [identifier], [action])
    deny = PolicyStatement(PolicyEffect.DENY, [identifier], [action])

    policy = Policy.create("autops::project:1234567890", "test", "test", [])
    assert policy.get_permission(identifier, action) is PolicyEffect.UNSPECIFIED

    policy.add_statement(allow)
    assert policy.get_permission(identifier, action) is PolicyEffect.ALLOW

    policy.add_statement(deny)
    assert policy.get_permission(identifier, action) is PolicyEffect.DENY

    policy.remove_statement(allow)
    assert policy.get_permission(identifier, action) is PolicyEffect.DENY
    assert policy.list_statements() == [deny]


def test_permission_unspecified_for_other_resource():
    action = ProjectPolicyAction.READ
    covered = Identifier("autops::project:1234567890")
    other = Identifier("autops::project:ABCDEFGHIJ")
    statement = PolicyStatement(PolicyEffect.ALLOW, [covered], [action])
    policy = Policy.create("autops::project:1234567890", "test", "test", [statement])
    assert policy.get_permission(other, action) is PolicyEffect.UNSPECIFIED
    assert policy.get_permission(covered, ProjectPolicyAction.DELETE) is PolicyEffect.UNSPECIFIED


def test_create_builds_policy_identifier():
    policy = Policy.create("autops::project:1234567890", "test", "test")
    assert str(policy.identifier).startswith("autops::project:1234567890:policy:")
    assert policy.identifier.resource_type() is ResourceType.POLICY
    assert policy.created_at == policy.updated_at


def test_existing_policy_keeps_timestamps():
    policy = Policy(
        "autops::project:1234567890:policy:abcdefghij",
        "name",
        "desc",
        "1976-01-01 00:00:00+02:00:00",
        "2002-01-01 00:00:00+02:00:00",
        [],
    )
    assert str(policy.identifier) == "autops::project:1234567890:policy:abcdefghij"
    assert policy.created_at == "1976-01-01 00:00:00+02:00:00"
    assert policy.updated_at == "2002-01-01 00:00:00+02:00:00"


def test_invalid_name_rejected():
    with pytest.raises(InvalidNameError):
        Policy.create("autops::project:1234567890", "invalid name", "desc")