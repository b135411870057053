"""Workflows: versioned sequences of steps with inputs, outputs and runs."""

from __future__ import annotations

from typing import Iterable

from autops.common.collection import ComparatorList
from autops.common.identifier import Identifier, build_workflow_identifier
from autops.common.stateful import StatefulNamedEntity, Status
from autops.common.versioned_source import VersionedSource
from autops.workflow.attribute import WorkflowAttribute, compare_workflow_attributes
from autops.workflow.errors import (
    WorkflowInputAlreadyPresentError,
    WorkflowInputNotFoundError,
    WorkflowOutputAlreadyPresentError,
    WorkflowOutputNotFoundError,
    WorkflowRunAlreadyPresentError,
    WorkflowStepNotFoundError,
)
from autops.workflow.run import WorkflowRun
from autops.workflow.step import WorkflowStep, compare_workflow_steps


def _compare_runs(a: WorkflowRun, b: WorkflowRun) -> int:
    a_text, b_text = str(a.identifier), str(b.identifier)
    return (a_text > b_text) - (a_text < b_text)


class Workflow(StatefulNamedEntity, VersionedSource):
    """A versioned workflow composed of inputs, outputs, steps and runs."""

    def __init__(
        self,
        identifier: str | Identifier,
        name: str,
        description: str,
        status: Status,
        source_path: str,
        version: int,
        inputs: Iterable[WorkflowAttribute] | None = None,
        outputs: Iterable[WorkflowAttribute] | None = None,
        steps: Iterable[WorkflowStep] | None = None,
        runs: Iterable[WorkflowRun] | None = None,
    ) -> None:
        StatefulNamedEntity.__init__(self, identifier, name, description, status)
        VersionedSource.__init__(self, source_path, version)
        self._inputs: ComparatorList[WorkflowAttribute] = ComparatorList(
            compare_workflow_attributes, inputs or ()
        )
        self._outputs: ComparatorList[WorkflowAttribute] = ComparatorList(
            compare_workflow_attributes, outputs or ()
        )
        self._steps: ComparatorList[WorkflowStep] = ComparatorList(
            compare_workflow_steps, steps or ()
        )
        self._runs: ComparatorList[WorkflowRun] = ComparatorList(_compare_runs, runs or ())

    @classmethod
    def create(
        cls,
        project_identifier: str | Identifier,
        name: str,
        description: str,
        source_path: str,
    ) -> Workflow:
        """A pending workflow at version 1 with a fresh identifier under the project."""
        identifier = build_workflow_identifier(str(project_identifier))
        return cls(identifier, name, description, Status.PENDING, source_path, 1)

    def list_inputs(self) -> list[WorkflowAttribute]:
        return self._inputs.items()

    def list_outputs(self) -> list[WorkflowAttribute]:
        return self._outputs.items()

    def list_steps(self) -> list[WorkflowStep]:
        return self._steps.items()

    def list_runs(self) -> list[WorkflowRun]:
        return self._runs.items()

    def add_input(self, attribute: WorkflowAttribute) -> None:
        """Add an input; raise if one with the same identifier is present."""
        if attribute in self._inputs:
            raise WorkflowInputAlreadyPresentError()
        self._inputs.append(attribute)

    def add_output(self, attribute: WorkflowAttribute) -> None:
        """Add an output; raise if one with the same identifier is present."""
        if attribute in self._outputs:
            raise WorkflowOutputAlreadyPresentError()
        self._outputs.append(attribute)

    def add_step(self, step: WorkflowStep) -> None:
        """Insert a step, moving every step at or after its number one place later."""
        self._shift_steps_from(step.step_number, 1)
        self._steps.append(step)

    def add_run(self, run: WorkflowRun) -> None:
        """Record a run; raise if one with the same identifier is present."""
        if run in self._runs:
            raise WorkflowRunAlreadyPresentError()
        self._runs.append(run)

    def remove_input(self, input_identifier: str | Identifier) -> None:
        """Remove the input with the given identifier; raise if absent."""
        wanted = str(input_identifier)
        attribute = self._inputs.select_one(lambda item: str(item.identifier) == wanted)
        if attribute is None:
            raise WorkflowInputNotFoundError()
        self._inputs.remove(attribute)

    def remove_output(self, output_identifier: str | Identifier) -> None:
        """Remove the output with the given identifier; raise if absent."""
        wanted = str(output_identifier)
        attribute = self._outputs.select_one(lambda item: str(item.identifier) == wanted)
        if attribute is None:
            raise WorkflowOutputNotFoundError()
        self._outputs.remove(attribute)

    def remove_step(self, step_number: int) -> None:
        """Remove the step with ``step_number`` and move later steps one place earlier."""
        step = self._steps.select_one(lambda item: item.step_number == step_number)
        if step is None:
            raise WorkflowStepNotFoundError()
        self._steps.remove(step)
        self._shift_steps_from(step_number, -1)

    def _shift_steps_from(self, step_number: int, shift: int) -> None:
        for step in self._steps.select_all(lambda item: item.step_number >= step_number):
            step.step_number += shift

    def __repr__(self) -> str:
        return (
            f"Workflow({str(self.identifier)!r}, name={self.name!r}, "
            f"version={self.version})"
        )