"""Single executions of a workflow."""

from __future__ import annotations

from autops.common.entity import NamedEntity, current_timestamp
from autops.common.identifier import Identifier, build_attribute_identifier


class WorkflowRun(NamedEntity):
    """One execution instance of a workflow."""

    def __init__(self, identifier: str | Identifier, name: str, description: str) -> None:
        date = current_timestamp()
        super().__init__(identifier, name, description, date, date)

    @classmethod
    def create(cls, workflow_id: str | Identifier, name: str, description: str) -> WorkflowRun:
        """Build a run with a fresh identifier under ``workflow_id``."""
        identifier = build_attribute_identifier(str(workflow_id), "run")
        return cls(identifier, name, description)

    def __repr__(self) -> str:
        return f"WorkflowRun({str(self.identifier)!r}, name={self.name!r})"