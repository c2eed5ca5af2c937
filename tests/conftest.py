import sys
import os
import pytest
sys.path.append(os.path.dirname(__file__))

from svgdoc import Circle, Document, Point, Polyline, Text


@pytest.fixture
def mixed_document():
    """Create a document with one shape of each kind."""
    doc = Document()
    doc.add(Circle().set_center(Point(20, 30)).set_radius(15))
    doc.add(Polyline().add_point(Point(0, 0)).add_point(Point(10, 10)).add_point(Point(20, 0)))
    doc.add(
        Text()
        .set_position(Point(10, 20))
        .set_offset(Point(0, 5))
        .set_font_size(14)
        .set_font_family("Verdana")
        .set_font_weight("bold")
        .set_data('Hello, "world" & <svg>')
    )
    return doc
