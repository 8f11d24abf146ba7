"""Shared type definitions for the polar chart primitives."""
from typing import Literal, NamedTuple

Point = tuple[float, float]

# ("M", x, y) | ("L", x, y) | ("Z",)
PathCmd = tuple

class Circle(NamedTuple):
    center: Point; radius: float; style: str

class Line(NamedTuple):
    start: Point; end: Point; style: str

class Path(NamedTuple):
    commands: list[PathCmd]; style: str

class TextLine(NamedTuple):
    text: str; x: float; y: float

class Text(NamedTuple):
    anchor: Point
    align: Literal["start", "middle", "end"]
    lines: list[TextLine]
    style: str

Primitive = Circle | Line | Path | Text
