from .exceptions import OTUIPreviewError, StructuralError
from .otui_parser import DeclarationList, coerce_value, parse_otui, prettify_otui, to_otui, validate_otui
from .preview import PreviewResult, render_otui
from .widget_builder import VisualNode, WidgetKind, build_widget

__all__ = [
    "DeclarationList",
    "OTUIPreviewError",
    "PreviewResult",
    "StructuralError",
    "VisualNode",
    "WidgetKind",
    "build_widget",
    "coerce_value",
    "parse_otui",
    "prettify_otui",
    "render_otui",
    "to_otui",
    "validate_otui",
]
