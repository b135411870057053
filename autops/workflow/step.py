"""Single steps of a workflow."""

from __future__ import annotations

from autops.common.entity import NamedEntity, current_timestamp
from autops.common.identifier import Identifier, build_attribute_identifier
from autops.template.template import Template


class WorkflowStep(NamedEntity):
    """A numbered workflow step that runs a template."""

    def __init__(
        self,
        identifier: str | Identifier,
        name: str,
        description: str,
        step_number: int,
        task: Template | None,
    ) -> None:
        date = current_timestamp()
        super().__init__(identifier, name, description, date, date)
        self._step_number = step_number
        self._task = task

    @classmethod
    def create(
        cls,
        workflow_id: str | Identifier,
        name: str,
        description: str,
        step_number: int,
        task: Template | None,
    ) -> WorkflowStep:
        """Build a step with a fresh identifier under ``workflow_id``."""
        identifier = build_attribute_identifier(str(workflow_id), "step")
        return cls(identifier, name, description, step_number, task)

    @property
    def step_number(self) -> int:
        return self._step_number

    @step_number.setter
    def step_number(self, value: int) -> None:
        self._step_number = value

    @property
    def task(self) -> Template | None:
        return self._task

    def __repr__(self) -> str:
        return f"WorkflowStep({self._step_number}, name={self.name!r})"


def compare_workflow_steps(a: WorkflowStep, b: WorkflowStep) -> int:
    """Order two steps by step number: -1, 0 or 1."""
    return (a.step_number > b.step_number) - (a.step_number < b.step_number)