"""
svgdoc - A small Python library for building SVG documents.

Main APIs:
- Document: Ordered container of shapes, renders a complete SVG file
- Circle, Polyline, Text: Shapes with chainable setters
- Point: 2D coordinate

Rendering:
- Document.render(out): Write to any text sink
- Document.to_svg(): Return the SVG as a string
- Document.save(path): Write a UTF-8 .svg file
"""

from svgdoc.core.geometry import Point
from svgdoc.core.context import RenderContext
from svgdoc.core.shapes import Shape, Circle, Polyline, Text
from svgdoc.core.document import Document

__all__ = [
    # Geometry
    "Point",
    # Rendering
    "RenderContext",
    # Shapes
    "Shape",
    "Circle",
    "Polyline",
    "Text",
    # Container
    "Document",
]
