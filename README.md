# autops

`autops` is the domain layer of an automation platform. It models projects
that group infrastructure **templates** (Terraform, Ansible, Packer,
OpenTofu), **workflows** made of numbered steps, **users**, and the
**policies** that decide which actions are allowed on which resources.

Each object checks its own input when it is set: names, descriptions,
identifiers, source paths, e-mail addresses, usernames and attribute default
values. Bad input raises an exception. Every exception the package raises for
bad domain input derives from `autops.common.errors.DomainError`, and also
from `ValueError`, `LookupError`, `IndexError` or `TypeError` as fits.

The package has no third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Identifiers

Every resource carries a structured identifier:

```
autops::<project|user>:<id>[:<resource-type>:<id>[:<resource-type>:<id>]]
```

Each `<id>` is 10 characters from letters, digits, `_` and `-`. The resource
types are `user`, `project`, `workflow`, `template` and `policy`
(`autops.common.resource_type.ResourceType`).

```python
from autops.common.identifier import (
    Identifier,
    build_project_identifier,
    build_template_identifier,
    validate_identifier,
)

project_id = build_project_identifier()
template_id = build_template_identifier(str(project_id))

ident = Identifier("autops::project:abcDEF1234:template:XYZxyz7890")
ident.segments()        # the identifier split on ':'
ident.resource_type()   # ResourceType.TEMPLATE

validate_identifier("autops::project:short")   # raises InvalidIdentifierFormatError
```

## Names, descriptions and tags

Named entities (`autops.common.entity.NamedEntity` and everything built on
it) accept a name of 1 to 128 letters, digits, hyphens and underscores, and a
description of at most 512 bytes after surrounding whitespace is stripped.
Timestamps are RFC 3339 strings.

Projects, policies, templates and workflows carry tags
(`autops.common.tag.Tag`), at most one per key; adding a tag with a key that
is already present replaces it.

## Projects, templates and workflows

```python
from autops.common.stateful import parse_status
from autops.project.project import Project
from autops.template.template import Template, parse_template_type
from autops.workflow.workflow import Workflow

project = Project.create("infra", "Shared infrastructure")
project_id = str(project.identifier)

template = Template.create(
    project_id,
    "network",
    "VPC and subnets",
    parse_status("pending"),
    parse_template_type("terraform"),
    "/templates/network.zip",
)
project.add_template(template)

workflow = Workflow.create(project_id, "deploy", "Full deployment", "/workflows/deploy.yml")
project.add_workflow(workflow)
```

Templates and workflows have a source path (a local path or a URL) and a
version; `fork_with_new_version(path)` gives a new `VersionedSource` with the
version incremented. They also have a `status` and an optional
`execution_log`.

Template inputs and outputs are `TemplateAttribute` objects, workflow inputs
and outputs are `WorkflowAttribute` objects. An attribute's default value is
checked against its type: any text for strings, a float literal for numbers,
a boolean literal for booleans, a JSON object for objects, and a JSON array
without `null` items for lists.

A workflow keeps its steps numbered. Adding a step moves every step at or
after its number one place later; removing a step moves the later ones back.

## Policies

A policy holds statements. Each statement allows or denies a set of actions
on a set of resources. When several statements apply, a deny wins over an
allow; when none applies, the result is `PolicyEffect.UNSPECIFIED`.

```python
from autops.policy.action import parse_policy_action
from autops.policy.policy import Policy
from autops.policy.statement import PolicyStatement, parse_policy_effect

read = parse_policy_action("project:Read")
statement = PolicyStatement(parse_policy_effect("allow"), [project.identifier], [read])

policy = Policy.create(project_id, "readers", "Read-only access", [statement])
policy.get_permission(project.identifier, read)   # PolicyEffect.ALLOW
```

Actions are `ProjectPolicyAction` (`Read`, `Update`, `Delete`,
`ListWorkflows`, `ListTemplates`) and `WorkflowPolicyAction` (`Read`,
`Update`, `Delete`, `Run`); `full_name(action)` gives `Read:project` and the
like.

## Users

```python
from autops.identity.user import User

user = User.create("someone@example.com", "some_user")
user.verify_email()
user.attach_policy(policy)
```

A username has 3 to 30 characters: letters, digits and underscores. Changing
a user's e-mail address clears its verified flag. Attached policies are
looked up and detached by identifier.

## Transfer objects

`autops.dto` holds `PolicyDTO`, `PolicyStatementDTO` and `TagDTO`
dataclasses with `to_dict()` and `from_dict()` using the API's JSON field
names (`id`, `created_at`, `updated_at`, ...).

## HTTP server

```
autops-server [--host HOST] [--port PORT]
```

starts a WSGI server on port 8080 by default. `autops.server.create_app()`
returns the application it serves.

## What the package does not do

- The HTTP server registers no routes yet: it answers every request with
  `404 page not found`.
- `autops.repositories` only declares abstract storage interfaces for users,
  policies, projects, templates and workflows. The package has no
  implementation of them, so nothing is stored between runs.