# otui_preview/surfaces/html_surface.py
import html
import logging
from typing import Any, Dict

from ..base_surface import BasePreviewSurface
from ..widget_builder import VisualNode

logger = logging.getLogger(__name__)

PAGE_CSS = """
#preview { position: relative; font-family: Verdana, sans-serif; font-size: 11px; }
.widget { position: relative; box-sizing: border-box; }
.widget.MainWindow, .widget.MiniWindow { border: 1px solid #555; background: #2b2b2b; color: #dfdfdf; }
.widget.Panel { border: 1px dashed #777; }
.widget.Button { border: 1px solid #888; background: #444; text-align: center; }
.widget.UIItem, .widget.UICreature { width: 32px; height: 32px; border: 1px solid #666; }
"""

RENDERED_TAGS = {"div", "pre", "textarea"}


def _style_attr(style: Dict[str, str]) -> str:
    return "; ".join(f"{prop}: {value}" for prop, value in style.items()) + ";"


def node_to_html(node: VisualNode) -> str:
    """Serializes a VisualNode tree to an HTML fragment."""
    tag = node.tag if node.tag in RENDERED_TAGS else "div"
    attrs = []
    if node.classes:
        attrs.append(f'class="{html.escape(" ".join(node.classes))}"')
    if node.style:
        attrs.append(f'style="{html.escape(_style_attr(node.style))}"')
    open_tag = f"<{tag} {' '.join(attrs)}>" if attrs else f"<{tag}>"

    if tag == "textarea":
        return f"{open_tag}{html.escape(node.value or '')}</{tag}>"

    inner = html.escape(node.text) if node.text is not None else ""
    inner += "".join(node_to_html(child) for child in node.children)
    return f"{open_tag}{inner}</{tag}>"


class HTMLPreviewSurface(BasePreviewSurface):
    """
    Preview container rendered as HTML, the way a browser preview pane shows it.
    """

    def __init__(self, container_id: str = "preview"):
        super().__init__(name="html")
        self.container_id = container_id

    def render(self) -> str:
        """Returns the preview container element with the mounted children."""
        inner = "".join(node_to_html(child) for child in self.children)
        return f'<div id="{html.escape(self.container_id)}">{inner}</div>'

    def render_page(self, title: str = "OTUI Preview") -> str:
        """Returns a standalone HTML document wrapping the preview container."""
        return (
            "<!DOCTYPE html>\n"
            '<html lang="en">\n<head>\n<meta charset="UTF-8">\n'
            f"<title>{html.escape(title)}</title>\n"
            f"<style>{PAGE_CSS}</style>\n"
            "</head>\n<body>\n"
            f"{self.render()}\n"
            "</body>\n</html>\n"
        )

    def get_status(self) -> Dict[str, Any]:
        status = super().get_status()
        status["container_id"] = self.container_id
        return status
