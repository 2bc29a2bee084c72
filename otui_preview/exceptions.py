# otui_preview/exceptions.py


class OTUIPreviewError(Exception):
    """Base class for errors raised while producing a preview."""


class StructuralError(OTUIPreviewError):
    """The parsed tree has no top-level widget the builder can walk."""
