from .html_surface import HTMLPreviewSurface, node_to_html

__all__ = ["HTMLPreviewSurface", "node_to_html"]
