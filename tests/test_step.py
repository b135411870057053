import pytest

from autops.common.errors import InvalidNameError
from autops.common.stateful import Status
from autops.template.template import Template, TemplateType
from autops.workflow.step import WorkflowStep, compare_workflow_steps

WORKFLOW_ID = "autops::project:ABCDEFGHIJ:workflow:1234567890"


@pytest.fixture
def task():
    return Template.create(
        "autops::project:ABCDEFGHIJ:template:1234567890",
        "my-template",
        "",
        Status.SUCCESS,
        TemplateType.TERRAFORM,
        "path/to/file.zip",
    )


def test_invalid_name(task):
    with pytest.raises(InvalidNameError):
        WorkflowStep.create(WORKFLOW_ID, "invalid name", "some description", 456, task)


def test_create_step(task):
    step = WorkflowStep.create(WORKFLOW_ID, "valid-name", "some description", 456, task)
    assert step.step_number == 456
    assert step.task is task
    assert step.name == "valid-name"
    assert str(step.identifier).startswith(WORKFLOW_ID + ":step:")


def test_compare_steps(task):
    step_a = WorkflowStep.create(WORKFLOW_ID, "valid-name", "", 2, task)
    step_b = WorkflowStep.create(WORKFLOW_ID, "valid-name", "", 1, task)
    assert compare_workflow_steps(step_a, step_b) == 1
    assert compare_workflow_steps(step_b, step_a) == -1
    assert compare_workflow_steps(step_a, step_a) == 0


def test_step_number_can_change(task):
    step = WorkflowStep.create(WORKFLOW_ID, "valid-name", "", 3, task)
    step.step_number = 7
    assert step.step_number == 7