"""
The SVG document container.

Example:
    >>> from svgdoc import Document, Circle, Point
    >>>
    >>> doc = Document()
    >>> circle = doc.add(Circle().set_center(Point(20, 30)).set_radius(15))
    >>> print(doc.to_svg(), end="")
    <?xml version="1.0" encoding="UTF-8" ?>
    <svg xmlns="http://www.w3.org/2000/svg" version="1.1">
      <circle cx="20" cy="30" r="15"/>
    </svg>
"""

import io
import logging
from pathlib import Path
from typing import Any, Iterator, List, Tuple, Union

from svgdoc.core.context import RenderContext
from svgdoc.core.shapes import Shape


__all__ = ["Document", "DEFAULT_INDENT_STEP"]

logger = logging.getLogger(__name__)

DEFAULT_INDENT_STEP = 2

XML_PROLOGUE = '<?xml version="1.0" encoding="UTF-8" ?>\n'
SVG_OPEN = '<svg xmlns="http://www.w3.org/2000/svg" version="1.1">\n'
SVG_CLOSE = '</svg>\n'


class Document:
    """An ordered collection of shapes rendered as a single <svg> root."""

    def __init__(self):
        self._shapes: List[Shape] = []

    @staticmethod
    def _check_shape(shape: Any) -> None:
        if not isinstance(shape, Shape):
            raise TypeError(f"Expected a Shape, got {type(shape).__name__}.")

    def add(self, shape: Shape) -> Shape:
        """
        Add a copy of a shape to the document.

        The caller keeps its own object and may reuse or change it without
        affecting what has already been added.

        Returns:
            The copy now owned by the document
        """
        self._check_shape(shape)
        owned = shape.copy()
        owned._owner = self
        self._shapes.append(owned)
        return owned

    def add_owned(self, shape: Shape) -> Shape:
        """
        Add a shape without copying it; the document takes over the instance.

        Raises:
            ValueError: If the shape already belongs to a document
        """
        self._check_shape(shape)
        if shape._owner is not None:
            raise ValueError(f"{shape!r} already belongs to a document.")
        shape._owner = self
        self._shapes.append(shape)
        return shape

    @property
    def shapes(self) -> Tuple[Shape, ...]:
        return tuple(self._shapes)

    def __len__(self):
        return len(self._shapes)

    def __iter__(self) -> Iterator[Shape]:
        return iter(self._shapes)

    def render(self, out: Any, indent_step: int = DEFAULT_INDENT_STEP) -> None:
        """
        Write the complete SVG document to a text sink.

        Args:
            out: Anything with a ``write(str)`` method
            indent_step: Spaces before each child element

        Raises:
            Whatever the sink raises. Output written before the failure is
            left in the sink.
        """
        logger.debug("Rendering %d shape(s) with indent step %d", len(self._shapes), indent_step)
        context = RenderContext(out, indent_step)
        out.write(XML_PROLOGUE)
        out.write(SVG_OPEN)

        child_context = context.indented()
        for shape in self._shapes:
            shape.render(child_context)

        out.write(SVG_CLOSE)

    def to_svg(self, indent_step: int = DEFAULT_INDENT_STEP) -> str:
        """Return the document as an SVG string."""
        buffer = io.StringIO()
        self.render(buffer, indent_step=indent_step)
        return buffer.getvalue()

    def save(self, filename: Union[str, Path], indent_step: int = DEFAULT_INDENT_STEP) -> Path:
        """
        Write the document to a UTF-8 encoded file.

        Returns:
            Path of the written file
        """
        path = Path(filename)
        with path.open("w", encoding="utf-8", newline="\n") as f:
            self.render(f, indent_step=indent_step)
        logger.info("Saved SVG document with %d shape(s) to %s", len(self._shapes), path)
        return path

    def __repr__(self):
        return f"<Document shapes={len(self._shapes)}>"
