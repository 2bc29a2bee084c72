# otui_preview/base_surface.py
from abc import ABC, abstractmethod
from typing import Any, Dict, List

from .widget_builder import VisualNode

ERROR_STYLE = {"color": "red"}


class BasePreviewSurface(ABC):
    """
    Abstract base class for the container a preview is mounted into.
    The orchestrator only ever replaces the whole content of a surface; each
    surface decides how the mounted VisualNode tree is presented (HTML, JSON, ...).
    """

    def __init__(self, name: str):
        self.name = name.lower()
        self.children: List[VisualNode] = []
        self.status = "empty"

    def clear(self) -> None:
        """Removes everything currently shown."""
        self.children = []
        self.status = "empty"

    def replace_children(self, node: VisualNode) -> None:
        """
        Replaces the content of the surface with a single node.

        Args:
            node: Root of the freshly built preview, or an error node
        """
        self.children = [node]
        self.status = "error" if is_error_node(node) else "rendered"

    @abstractmethod
    def render(self) -> str:
        """
        Returns the current content in the surface's output format.
        """
        pass

    def get_status(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "status": self.status,
            "mounted": [child.kind or child.tag for child in self.children],
        }

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(name='{self.name}', status='{self.status}')>"


def create_error_node(message: str) -> VisualNode:
    """Pre-formatted red block showing a failure message."""
    return VisualNode(tag="pre", style=dict(ERROR_STYLE), text=message)


def is_error_node(node: VisualNode) -> bool:
    return node.tag == "pre" and node.style == ERROR_STYLE
