# otui_preview/widget_builder.py
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

logger = logging.getLogger(__name__)

EMPTY_TEXT_PLACEHOLDER = "(empty)"
MARGIN_DIRECTIONS = ("top", "left", "bottom", "right")


class WidgetKind(str, Enum):
    MAIN_WINDOW = "MainWindow"
    LABEL = "Label"
    BUTTON = "Button"
    TEXT_EDIT = "TextEdit"
    PANEL = "Panel"
    MINI_WINDOW = "MiniWindow"
    UI_CREATURE = "UICreature"
    UI_ITEM = "UIItem"

    @classmethod
    def from_name(cls, name: str) -> Optional["WidgetKind"]:
        try:
            return cls(name)
        except ValueError:
            return None


WIDGET_KIND_NAMES = frozenset(kind.value for kind in WidgetKind)


@dataclass
class VisualNode:
    """One rendered element of the preview: a tag, CSS classes, inline style and children."""

    tag: str = "div"
    classes: List[str] = field(default_factory=list)
    style: Dict[str, str] = field(default_factory=dict)
    text: Optional[str] = None
    value: Optional[str] = None
    children: List["VisualNode"] = field(default_factory=list)

    @property
    def kind(self) -> Optional[str]:
        """Widget kind label, i.e. the class following the generic ``widget`` class."""
        names = [name for name in self.classes if name != "widget"]
        return names[0] if names else None

    def set_style(self, prop: str, value: str) -> None:
        self.style[prop] = value

    def append_child(self, child: "VisualNode") -> "VisualNode":
        self.children.append(child)
        return child

    def clear_children(self) -> None:
        self.children = []

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"tag": self.tag, "classes": list(self.classes), "style": dict(self.style)}
        if self.text is not None:
            data["text"] = self.text
        if self.value is not None:
            data["value"] = self.value
        data["children"] = [child.to_dict() for child in self.children]
        return data


def display_value(value: Any) -> str:
    """String form of a coerced value as it appears in the preview (``10.0`` shows as ``10``)."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, list):
        return ",".join("" if item is None else display_value(item) for item in value)
    if value is None:
        return ""
    return str(value)


def _px(value: Any) -> str:
    return display_value(value) + "px"


def _apply_absolute_position(node: VisualNode, attributes: Dict[str, Any]) -> None:
    node.set_style("position", "absolute")
    if attributes.get("margin-left"):
        node.set_style("left", _px(attributes["margin-left"]))
    if attributes.get("margin-top"):
        node.set_style("top", _px(attributes["margin-top"]))


def _apply_text_content(node: VisualNode, attributes: Dict[str, Any]) -> None:
    text = attributes.get("text")
    node.text = display_value(text) if text else EMPTY_TEXT_PLACEHOLDER


def _apply_text_input(node: VisualNode, attributes: Dict[str, Any]) -> None:
    text = attributes.get("text")
    textarea = VisualNode(tag="textarea", value=display_value(text) if text else "")
    node.append_child(textarea)


def _apply_container(node: VisualNode, attributes: Dict[str, Any]) -> None:
    pass


KIND_RULES: Dict[WidgetKind, Callable[[VisualNode, Dict[str, Any]], None]] = {
    WidgetKind.MAIN_WINDOW: _apply_container,
    WidgetKind.LABEL: _apply_text_content,
    WidgetKind.BUTTON: _apply_text_content,
    WidgetKind.TEXT_EDIT: _apply_text_input,
    WidgetKind.PANEL: _apply_container,
    WidgetKind.MINI_WINDOW: _apply_container,
    WidgetKind.UI_CREATURE: _apply_container,
    WidgetKind.UI_ITEM: _apply_absolute_position,
}


def build_widget(kind_name: str, attributes: Any) -> VisualNode:
    """
    Builds the visual node for one declaration and, recursively, its child widgets.

    Args:
        kind_name: Declaration name, e.g. "MainWindow" or "Label"
        attributes: Attribute map of the declaration as produced by parse_otui.
            Anything that is not a mapping is rendered as a widget without attributes.

    Returns:
        The VisualNode for this declaration with all children appended in source order
    """
    if not isinstance(attributes, dict):
        attributes = {}

    node = VisualNode(classes=["widget", kind_name])

    size = attributes.get("size")
    if isinstance(size, list) and len(size) == 2:
        width, height = size
        node.set_style("width", _px(width))
        node.set_style("height", _px(height))

    for direction in MARGIN_DIRECTIONS:
        margin = attributes.get(f"margin-{direction}")
        if margin:  # 0 and "" count as unset
            node.set_style(f"margin-{direction}", _px(margin))

    kind = WidgetKind.from_name(kind_name)
    if kind is None:
        logger.debug("[BUILD] '%s' is not a known widget kind, rendering a plain container", kind_name)
    else:
        KIND_RULES[kind](node, attributes)

    for key, value in attributes.items():
        if key not in WIDGET_KIND_NAMES or not isinstance(value, (dict, list)):
            continue
        if isinstance(value, list):
            for child_attributes in value:
                node.append_child(build_widget(key, child_attributes))
        else:
            node.append_child(build_widget(key, value))

    return node
