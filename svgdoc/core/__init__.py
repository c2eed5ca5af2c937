"""Core data structures for svgdoc documents."""

from .geometry import Point
from .context import RenderContext, escape_xml, format_number
from .shapes import Shape, Circle, Polyline, Text
from .document import Document, DEFAULT_INDENT_STEP

__all__ = [
    "Point",
    "RenderContext",
    "escape_xml",
    "format_number",
    "Shape",
    "Circle",
    "Polyline",
    "Text",
    "Document",
    "DEFAULT_INDENT_STEP",
]
