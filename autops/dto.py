"""Data transfer objects exchanged through the API, with their JSON field names."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass
class TagDTO:
    """A key-value tag."""

    key: str = ""
    value: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"key": self.key, "value": self.value}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TagDTO:
        return cls(key=data.get("key") or "", value=data.get("value") or "")


@dataclass
class PolicyStatementDTO:
    """One statement of a policy: an effect, actions and resources."""

    effect: str = ""
    actions: list[str] = field(default_factory=list)
    resources: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "effect": self.effect,
            "actions": list(self.actions),
            "resources": list(self.resources),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PolicyStatementDTO:
        return cls(
            effect=data.get("effect") or "",
            actions=list(data.get("actions") or ()),
            resources=list(data.get("resources") or ()),
        )


@dataclass
class PolicyDTO:
    """A policy as seen by API clients."""

    identifier: str = ""
    name: str = ""
    description: str = ""
    tags: list[TagDTO] = field(default_factory=list)
    statements: list[PolicyStatementDTO] = field(default_factory=list)
    created_at: str | None = None
    updated_at: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.identifier,
            "name": self.name,
            "description": self.description,
            "tags": [tag.to_dict() for tag in self.tags],
            "statements": [statement.to_dict() for statement in self.statements],
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PolicyDTO:
        return cls(
            identifier=data.get("id") or "",
            name=data.get("name") or "",
            description=data.get("description") or "",
            tags=[TagDTO.from_dict(tag) for tag in data.get("tags") or ()],
            statements=[
                PolicyStatementDTO.from_dict(statement)
                for statement in data.get("statements") or ()
            ],
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )