import pytest

from autops.common.errors import InvalidNameError
from autops.workflow.attribute import (
    WorkflowAttribute,
    WorkflowAttributeType,
    compare_workflow_attributes,
    parse_workflow_attribute_type,
)
from autops.workflow.errors import (
    EmptyItemInListError,
    InvalidListFormatError,
    UnsupportedWorkflowAttributeTypeError,
)

WORKFLOW_ID = "autops::project:ABCDEFGHIJ:workflow:1234567890"


@pytest.mark.parametrize(
    "attribute_type, expected",
    [
        (WorkflowAttributeType.STRING, "string"),
        (WorkflowAttributeType.NUMBER, "number"),
        (WorkflowAttributeType.LIST, "list"),
        (WorkflowAttributeType.OBJECT, "object"),
        (WorkflowAttributeType.BOOL, "bool"),
    ],
)
def test_type_to_string(attribute_type, expected):
    assert str(attribute_type) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("string", WorkflowAttributeType.STRING),
        ("number", WorkflowAttributeType.NUMBER),
        ("bool", WorkflowAttributeType.BOOL),
        ("list", WorkflowAttributeType.LIST),
        ("object", WorkflowAttributeType.OBJECT),
        ("OBJECT", WorkflowAttributeType.OBJECT),
    ],
)
def test_parse_type(text, expected):
    assert parse_workflow_attribute_type(text) is expected


def test_parse_type_unknown():
    with pytest.raises(UnsupportedWorkflowAttributeTypeError):
        parse_workflow_attribute_type("none")


def test_create_attribute():
    attribute = WorkflowAttribute.create(
        WORKFLOW_ID, "name", "desc", WorkflowAttributeType.NUMBER, "13.4"
    )
    assert str(attribute.identifier).startswith(WORKFLOW_ID + ":number:")
    assert attribute.name == "name"
    assert attribute.description == "desc"
    assert attribute.attribute_type is WorkflowAttributeType.NUMBER
    assert attribute.default_value == "13.4"


def test_existing_attribute():
    attribute = WorkflowAttribute(
        WORKFLOW_ID, "name", "desc", WorkflowAttributeType.NUMBER, "13.4"
    )
    assert str(attribute.identifier) == WORKFLOW_ID


def test_existing_attribute_invalid_name():
    with pytest.raises(InvalidNameError):
        WorkflowAttribute(
            WORKFLOW_ID, "invalid name", "desc", WorkflowAttributeType.NUMBER, "13.4"
        )


def test_number_default_value():
    attribute = WorkflowAttribute.create(
        WORKFLOW_ID, "name", "desc", WorkflowAttributeType.NUMBER, "13.4"
    )
    with pytest.raises(ValueError):
        attribute.default_value = "abcd"
    assert attribute.default_value == "13.4"
    attribute.default_value = "-123.18780"
    assert attribute.default_value == "-123.18780"


def test_blank_default_keeps_previous():
    attribute = WorkflowAttribute.create(
        WORKFLOW_ID, "name", "desc", WorkflowAttributeType.NUMBER, "13.4"
    )
    attribute.default_value = "   "
    assert attribute.default_value == "13.4"


def test_list_default_value():
    attribute = WorkflowAttribute.create(
        WORKFLOW_ID, "name", "desc", WorkflowAttributeType.LIST, "[1, 2, 3]"
    )
    assert attribute.default_value == "[1, 2, 3]"

    with pytest.raises(InvalidListFormatError):
        attribute.default_value = "[1, , 3]"

    attribute.default_value = '[{"a": "b"}, {"c": "d"}]'
    assert attribute.default_value == '[{"a": "b"}, {"c": "d"}]'

    with pytest.raises(InvalidListFormatError):
        attribute.default_value = "12"
    with pytest.raises(InvalidListFormatError):
        attribute.default_value = "string"


def test_list_with_null_item():
    attribute = WorkflowAttribute.create(
        WORKFLOW_ID, "name", "desc", WorkflowAttributeType.LIST, ""
    )
    with pytest.raises(EmptyItemInListError):
        attribute.default_value = "[1, null]"
    assert attribute.default_value == ""


def test_object_and_list_of_objects():
    obj = WorkflowAttribute.create(
        WORKFLOW_ID, "name", "desc", WorkflowAttributeType.OBJECT, '{"a": "b", "c": "d"}'
    )
    assert obj.default_value == '{"a": "b", "c": "d"}'

    listed = WorkflowAttribute.create(
        WORKFLOW_ID,
        "name",
        "desc",
        WorkflowAttributeType.LIST,
        '[{"a": "b", "c": "d"}, {"a": "b", "c": "d"}]',
    )
    assert listed.attribute_type is WorkflowAttributeType.LIST

    with pytest.raises(InvalidListFormatError):
        WorkflowAttribute.create(
            WORKFLOW_ID,
            "name",
            "desc",
            WorkflowAttributeType.LIST,
            '[{"a": "b", "c": "d"}, {"a": "b" "c": "d"}]',
        )


def test_object_rejects_array():
    with pytest.raises(ValueError):
        WorkflowAttribute.create(
            WORKFLOW_ID, "name", "desc", WorkflowAttributeType.OBJECT, "[1]"
        )


def test_bool_default_value():
    attribute = WorkflowAttribute.create(
        WORKFLOW_ID, "name", "desc", WorkflowAttributeType.BOOL, "true"
    )
    assert attribute.default_value == "true"
    with pytest.raises(ValueError):
        attribute.default_value = "maybe"


def test_compare():
    a = WorkflowAttribute(
        "autops::project:ABCDEFGHIJ:workflow:AAAAAAAAAA",
        "name", "desc", WorkflowAttributeType.NUMBER, "13.4",
    )
    b = WorkflowAttribute(
        "autops::project:ABCDEFGHIJ:workflow:BBBBBBBBBB",
        "name", "desc", WorkflowAttributeType.NUMBER, "13.4",
    )
    c = WorkflowAttribute(
        "autops::project:ABCDEFGHIJ:workflow:AAAAAAAAAA",
        "name", "desc", WorkflowAttributeType.NUMBER, "13.4",
    )
    assert compare_workflow_attributes(a, b) == -1
    assert compare_workflow_attributes(b, a) == 1
    assert compare_workflow_attributes(c, a) == 0