# otui_preview/preview.py
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from .base_surface import BasePreviewSurface, create_error_node
from .exceptions import StructuralError
from .otui_parser import parse_otui
from .widget_builder import VisualNode, build_widget

logger = logging.getLogger(__name__)

INITIAL_OTUI = """MainWindow
  id: "main"
  size: [300, 100]

  Label
    id: "label"
    text: "Hello"
    margin-top: 10
    margin-left: 20"""


@dataclass
class PreviewResult:
    """Outcome of one render: what was parsed and what got mounted."""

    status: str
    node: VisualNode
    tree: Dict[str, Any] = field(default_factory=dict)
    root_kind: Optional[str] = None
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == "rendered"


def select_root(tree: Any) -> Tuple[str, Any]:
    """
    Picks the declaration to render: the first top-level key of the parsed tree.
    Further top-level declarations are parsed but never rendered.

    Raises:
        StructuralError: if there is no top-level key or its value is not a widget block
    """
    if not isinstance(tree, dict):
        raise StructuralError("Invalid parsed structure")
    if not tree:
        raise StructuralError("No top-level widget declaration found")

    root_kind = next(iter(tree))
    attributes = tree[root_kind]
    if not isinstance(attributes, (dict, list)):
        raise StructuralError(f"Top-level '{root_kind}' is not a widget declaration")
    return root_kind, attributes


def render_otui(code: str, surface: BasePreviewSurface) -> PreviewResult:
    """
    Parses OTUI text, builds the widget tree and mounts it on the surface.

    The surface is cleared first. Any failure is caught here and shown on the
    surface as an error node carrying the failure message.
    """
    surface.clear()
    tree: Dict[str, Any] = {}
    try:
        logger.debug("[RENDER] Parsing %d characters of OTUI", len(code))
        tree = parse_otui(code)
        root_kind, attributes = select_root(tree)
        root = build_widget(root_kind, attributes)
        surface.replace_children(root)
        logger.info("[RENDER] Rendered '%s' with %d direct child widget(s)", root_kind, len(root.children))
        return PreviewResult(status="rendered", node=root, tree=tree, root_kind=root_kind)
    except Exception as e:
        logger.exception("[RENDER] OTUI rendering failed")
        error_node = create_error_node(str(e))
        surface.replace_children(error_node)
        return PreviewResult(status="error", node=error_node, tree=tree, message=str(e))
