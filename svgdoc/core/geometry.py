"""Plain 2D coordinates used by all shapes."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A point in the SVG user coordinate system."""
    x: float = 0.0
    y: float = 0.0
