"""
Rendering context shared by shapes while they write SVG text.

A RenderContext is a short-lived borrow of the output sink. It carries the
current indentation so nested writers can produce aligned lines without
knowing where they sit in the document.
"""

import math
from decimal import Decimal
from typing import Any, Union


Number = Union[int, float]


def format_number(value: Number) -> str:
    """
    Format a number for an SVG attribute.

    Floats use the shortest digits that round-trip, written in positional
    notation without an exponent and without trailing zeros. Integral values
    have no decimal point. The output never depends on the locale.
    """
    if isinstance(value, int):
        return str(int(value))
    value = float(value)
    if not math.isfinite(value):
        return repr(value)
    if value == 0:
        return "0"
    return format(Decimal(repr(value)).normalize(), "f")


def escape_xml(text: str) -> str:
    """Escape the five XML special characters for text and attribute values."""
    return (
        text.replace('&', '&amp;')
        .replace('<', '&lt;')
        .replace('>', '&gt;')
        .replace('"', '&quot;')
        .replace("'", '&apos;')
    )


class RenderContext:
    """
    Output sink plus indentation state.

    Args:
        out: Anything with a ``write(str)`` method (a text file, ``io.StringIO``...)
        indent_step: Number of spaces added by each call to ``indented()``
        indent: Current number of leading spaces
    """

    def __init__(self, out: Any, indent_step: int = 0, indent: int = 0):
        if indent_step < 0 or indent < 0:
            raise ValueError(f"Indentation must be non-negative (step={indent_step}, indent={indent}).")
        if indent_step > 0 and indent % indent_step:
            raise ValueError(f"Indent {indent} is not a multiple of step {indent_step}.")
        self.out = out
        self.indent_step = indent_step
        self.indent = indent

    def indented(self) -> "RenderContext":
        """Return a child context one indentation level deeper."""
        return RenderContext(self.out, self.indent_step, self.indent + self.indent_step)

    def render_indent(self) -> None:
        self.out.write(' ' * self.indent)

    def write(self, text: str) -> None:
        self.out.write(text)

    def __repr__(self):
        return f"<RenderContext indent={self.indent} step={self.indent_step}>"
