"""
Shape primitives that make up an SVG document.

Every shape writes exactly one SVG element. Setters return the shape itself
so configuration can be chained:

    >>> Circle().set_center(Point(20, 30)).set_radius(15)
"""

import copy
from typing import List, Optional

from svgdoc.core.context import RenderContext, escape_xml, format_number
from svgdoc.core.geometry import Point


__all__ = ["Shape", "Circle", "Polyline", "Text"]


class Shape:
    """Base class for all SVG shapes."""

    # Document holding this instance, set when it is added
    _owner = None

    def render(self, context: RenderContext) -> None:
        """Write the element on its own line at the context's indentation."""
        context.render_indent()
        self.render_element(context)
        context.write("\n")

    def render_element(self, context: RenderContext) -> None:
        """Write the SVG element without indentation or trailing newline."""
        raise NotImplementedError(f"{self.__class__.__name__} does not implement render_element()")

    def copy(self) -> "Shape":
        """Return an independent, unowned copy of the shape."""
        state = {name: value for name, value in vars(self).items() if name != "_owner"}
        clone = self.__class__.__new__(self.__class__)
        clone.__dict__.update(copy.deepcopy(state))
        return clone


class Circle(Shape):
    """
    The <circle> element.
    https://developer.mozilla.org/en-US/docs/Web/SVG/Element/circle
    """

    def __init__(self):
        self.center = Point(0.0, 0.0)
        self.radius = 1.0

    def set_center(self, center: Point) -> "Circle":
        self.center = center
        return self

    def set_radius(self, radius: float) -> "Circle":
        self.radius = radius
        return self

    def render_element(self, context: RenderContext) -> None:
        context.write(
            f'<circle cx="{format_number(self.center.x)}" cy="{format_number(self.center.y)}" '
            f'r="{format_number(self.radius)}"/>'
        )

    def __repr__(self):
        return f"<Circle center=({self.center.x}, {self.center.y}) r={self.radius}>"


class Polyline(Shape):
    """
    The <polyline> element, an open sequence of connected line segments.
    https://developer.mozilla.org/en-US/docs/Web/SVG/Element/polyline
    """

    def __init__(self):
        self.points: List[Point] = []

    def add_point(self, point: Point) -> "Polyline":
        """Append a vertex to the line."""
        self.points.append(point)
        return self

    def render_element(self, context: RenderContext) -> None:
        # Every vertex keeps its trailing separator, including the last one
        coords = "".join(f"{format_number(p.x)},{format_number(p.y)} " for p in self.points)
        context.write(f'<polyline points="{coords}"/>')

    def __repr__(self):
        return f"<Polyline points={len(self.points)}>"


class Text(Shape):
    """
    The <text> element.
    https://developer.mozilla.org/en-US/docs/Web/SVG/Element/text
    """

    def __init__(self):
        self.position = Point(0.0, 0.0)
        self.offset = Point(0.0, 0.0)
        self.font_size = 1
        self.font_family: Optional[str] = None
        self.font_weight: Optional[str] = None
        self.data = ""

    def set_position(self, position: Point) -> "Text":
        """Anchor point (x and y attributes)."""
        self.position = position
        return self

    def set_offset(self, offset: Point) -> "Text":
        """Shift relative to the anchor point (dx and dy attributes)."""
        self.offset = offset
        return self

    def set_font_size(self, size: int) -> "Text":
        self.font_size = size
        return self

    def set_font_family(self, font_family: str) -> "Text":
        self.font_family = font_family
        return self

    def set_font_weight(self, font_weight: str) -> "Text":
        self.font_weight = font_weight
        return self

    def set_data(self, data: str) -> "Text":
        """Text content shown inside the element."""
        self.data = data
        return self

    def render_element(self, context: RenderContext) -> None:
        parts = [
            f'<text x="{format_number(self.position.x)}" y="{format_number(self.position.y)}"',
            f' dx="{format_number(self.offset.x)}" dy="{format_number(self.offset.y)}"',
            f' font-size="{int(self.font_size)}"',
        ]
        if self.font_family is not None:
            parts.append(f' font-family="{escape_xml(self.font_family)}"')
        if self.font_weight is not None:
            parts.append(f' font-weight="{escape_xml(self.font_weight)}"')
        parts.append(f'>{escape_xml(self.data)}</text>')
        context.write("".join(parts))

    def __repr__(self):
        return f"<Text at=({self.position.x}, {self.position.y}) data='{self.data}'>"
