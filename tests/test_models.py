from dataclasses import FrozenInstanceError

import pytest

from uiinspector.models import ElementAttributes


def test_from_mapping_accepts_camel_case_keys() -> None:
    record = ElementAttributes.from_mapping(
        {
            "id": " login-btn ",
            "tagName": "BUTTON",
            "className": "btn  primary",
            "automationId": "LoginButton",
            "parentTagName": "form",
            "childOrdinalIndex": "2",
            "innerText": "Log in",
            "ariaLabel": "Log in",
            "inputType": "submit",
            "dataAttributes": {"data-testid": "login"},
        }
    )
    assert record.id == "login-btn"
    assert record.tag_name == "BUTTON"
    assert record.automation_id == "LoginButton"
    assert record.child_ordinal_index == 2
    assert record.input_type == "submit"
    assert record.data_attributes == (("data-testid", "login"),)
    assert record.class_tokens() == ["btn", "primary"]


def test_from_mapping_accepts_snake_case_keys() -> None:
    record = ElementAttributes.from_mapping({"tag_name": "div", "aria_label": "Menu", "child_ordinal_index": 0})
    assert record.tag_name == "div"
    assert record.aria_label == "Menu"
    assert record.child_ordinal_index == 0


def test_from_mapping_drops_blank_and_invalid_values() -> None:
    record = ElementAttributes.from_mapping(
        {
            "id": "   ",
            "className": "",
            "childOrdinalIndex": -1,
            "dataAttributes": {"data-empty": " ", "": "x", "data-ok": "1"},
        }
    )
    assert record.id is None
    assert record.class_name is None
    assert record.child_ordinal_index is None
    assert record.data_attributes == (("data-ok", "1"),)

    assert ElementAttributes.from_mapping({"childOrdinalIndex": "first"}).child_ordinal_index is None
    assert ElementAttributes.from_mapping({"childOrdinalIndex": True}).child_ordinal_index is None


def test_data_attributes_keep_supplied_order() -> None:
    record = ElementAttributes.from_mapping(
        {"dataAttributes": [("data-z", "1"), ("data-a", "2"), ("data-m", "3")]}
    )
    assert [key for key, _ in record.data_attributes] == ["data-z", "data-a", "data-m"]


def test_class_tokens_skip_empty_tokens() -> None:
    record = ElementAttributes(class_name="  btn \t card  primary\n")
    assert record.class_tokens() == ["btn", "card", "primary"]
    assert ElementAttributes().class_tokens() == []


def test_parent_tag_prefers_tag_name() -> None:
    assert ElementAttributes(parent_tag_name="ul", parent_name="menu").parent_tag() == "ul"
    assert ElementAttributes(parent_name="tr").parent_tag() == "tr"
    assert ElementAttributes().parent_tag() is None


def test_record_is_immutable() -> None:
    record = ElementAttributes(id="a")
    with pytest.raises(FrozenInstanceError):
        record.id = "b"  # type: ignore[misc]


def test_blank_alias_does_not_hide_later_alias() -> None:
    assert ElementAttributes.from_mapping({"tagName": "", "tag": "div"}).tag_name == "div"
    assert ElementAttributes.from_mapping({"className": "  ", "class": "card"}).class_name == "card"


def test_unusable_ordinal_falls_through_to_next_alias() -> None:
    assert ElementAttributes.from_mapping({"childOrdinalIndex": None, "childIndex": 2}).child_ordinal_index == 2
    assert ElementAttributes.from_mapping({"childOrdinalIndex": "x", "child_ordinal_index": 1}).child_ordinal_index == 1
    assert ElementAttributes.from_mapping({"dataAttributes": {}, "data_attributes": {"data-a": "1"}}).data_attributes == (
        ("data-a", "1"),
    )
