from otui_preview.otui_parser import parse_otui
from otui_preview.preview import INITIAL_OTUI
from otui_preview.widget_builder import (
    EMPTY_TEXT_PLACEHOLDER,
    VisualNode,
    WidgetKind,
    build_widget,
    display_value,
)


def test_sample_layout_builds_window_with_label():
    tree = parse_otui(INITIAL_OTUI)
    root = build_widget("MainWindow", tree["MainWindow"])

    assert root.classes == ["widget", "MainWindow"]
    assert root.kind == "MainWindow"
    assert root.style == {"width": "300px", "height": "100px"}
    assert len(root.children) == 1

    label = root.children[0]
    assert label.kind == "Label"
    assert label.style["margin-top"] == "10px"
    assert label.style["margin-left"] == "20px"
    assert label.text == "Hello"


def test_zero_margin_is_treated_as_unset():
    node = build_widget("Panel", {"margin-top": 0.0, "margin-bottom": ""})
    assert "margin-top" not in node.style
    assert "margin-bottom" not in node.style


def test_nonzero_margins_set_offsets():
    node = build_widget("Panel", {"margin-top": 5.0, "margin-right": 7.5})
    assert node.style == {"margin-top": "5px", "margin-right": "7.5px"}


def test_size_needs_two_elements():
    assert build_widget("Panel", {"size": [10]}).style == {}
    assert build_widget("Panel", {"size": "big"}).style == {}


def test_item_is_absolutely_positioned():
    node = build_widget("UIItem", {"margin-left": 12.0, "margin-top": 3.0})
    assert node.style["position"] == "absolute"
    assert node.style["left"] == "12px"
    assert node.style["top"] == "3px"
    assert node.style["margin-left"] == "12px"


def test_item_without_margins_has_no_offsets():
    node = build_widget("UIItem", {})
    assert node.style == {"position": "absolute"}


def test_label_and_button_placeholder_text():
    assert build_widget("Label", {}).text == EMPTY_TEXT_PLACEHOLDER
    assert build_widget("Button", {"text": ""}).text == EMPTY_TEXT_PLACEHOLDER
    assert build_widget("Button", {"text": "OK"}).text == "OK"
    assert build_widget("Label", {"text": 42.0}).text == "42"


def test_text_edit_gets_single_textarea():
    node = build_widget("TextEdit", {"text": "type here"})
    assert node.text is None
    assert len(node.children) == 1
    textarea = node.children[0]
    assert textarea.tag == "textarea"
    assert textarea.value == "type here"

    empty = build_widget("TextEdit", {})
    assert empty.children[0].value == ""


def test_repeated_declarations_build_in_source_order():
    tree = parse_otui(
        """MainWindow
  Label
    text: "one"
  Button
    text: "go"
  Label
    text: "two"
"""
    )
    root = build_widget("MainWindow", tree["MainWindow"])
    # Children follow attribute insertion order; repeated Labels stay grouped
    assert [(child.kind, child.text) for child in root.children] == [
        ("Label", "one"),
        ("Label", "two"),
        ("Button", "go"),
    ]


def test_nested_containers_recurse():
    tree = parse_otui(
        """MainWindow
  Panel
    MiniWindow
      UICreature
        size: [32, 32]
      TextEdit
        text: "note"
"""
    )
    root = build_widget("MainWindow", tree["MainWindow"])
    panel = root.children[0]
    mini = panel.children[0]
    assert panel.kind == "Panel"
    assert mini.kind == "MiniWindow"
    assert [child.kind for child in mini.children] == ["UICreature", "TextEdit"]
    assert mini.children[0].style == {"width": "32px", "height": "32px"}


def test_nested_main_window_is_a_widget():
    root = build_widget("MainWindow", {"MainWindow": {"id": "inner"}})
    assert [child.kind for child in root.children] == ["MainWindow"]


def test_unknown_keys_are_not_traversed():
    root = build_widget("MainWindow", {"Custom": {"Label": {"text": "hidden"}}, "id": "x"})
    assert root.children == []


def test_unknown_kind_renders_plain_container():
    node = build_widget("ScrollBar", {"text": "ignored", "Label": {"text": "shown"}})
    assert node.kind == "ScrollBar"
    assert node.text is None
    assert [child.text for child in node.children] == ["shown"]


def test_widget_key_with_scalar_value_is_ignored():
    root = build_widget("Panel", {"Label": "just a string"})
    assert root.children == []


def test_non_mapping_list_items_build_empty_widgets():
    root = build_widget("Panel", {"Label": [1, 2]})
    assert [child.text for child in root.children] == [EMPTY_TEXT_PLACEHOLDER, EMPTY_TEXT_PLACEHOLDER]


def test_widget_kind_lookup():
    assert WidgetKind.from_name("UIItem") is WidgetKind.UI_ITEM
    assert WidgetKind.from_name("label") is None


def test_display_value():
    assert display_value(10.0) == "10"
    assert display_value(2.5) == "2.5"
    assert display_value([1, "a"]) == "1,a"
    assert display_value("x") == "x"


def test_to_dict_includes_children():
    node = VisualNode(classes=["widget", "Panel"])
    node.append_child(VisualNode(tag="textarea", value=""))
    assert node.to_dict() == {
        "tag": "div",
        "classes": ["widget", "Panel"],
        "style": {},
        "children": [{"tag": "textarea", "classes": [], "style": {}, "value": "", "children": []}],
    }


def test_non_finite_margin_from_source_is_plain_text():
    tree = parse_otui("Panel\n  margin-top: inf")
    node = build_widget("Panel", tree["Panel"])
    assert tree["Panel"]["margin-top"] == "inf"
    assert node.style == {"margin-top": "infpx"}
