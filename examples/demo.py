"""Demo building a small SVG picture.

Prints the document to stdout, or writes it to the file given as the first
argument:

    python examples/demo.py
    python examples/demo.py build/demo.svg
"""

import math
import sys

from svgdoc import Circle, Document, Point, Polyline, Text


def build_document() -> Document:
    doc = Document()

    # Sun
    doc.add(Circle().set_center(Point(50, 50)).set_radius(20))

    # Sine wave
    wave = Polyline()
    for i in range(21):
        x = i * 10
        wave.add_point(Point(x, round(120 + 20 * math.sin(x / 30), 2)))
    doc.add(wave)

    # Caption
    doc.add(
        Text()
        .set_position(Point(10, 180))
        .set_offset(Point(0, 6))
        .set_font_size(12)
        .set_font_family("Verdana")
        .set_font_weight("bold")
        .set_data("Sun & waves <demo>")
    )
    return doc


if __name__ == "__main__":
    doc = build_document()
    if len(sys.argv) > 1:
        path = doc.save(sys.argv[1])
        print(f"SVG exported to: {path}")
    else:
        doc.render(sys.stdout)
