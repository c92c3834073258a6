"""Points, boxes, line segments and curves of a network layout."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass
class Point:
    """A position in the layout plane."""

    x: float = 0.0
    y: float = 0.0

    def move_by(self, offset: "Point") -> None:
        """Shift this point in place by the given offset."""
        self.x += offset.x
        self.y += offset.y

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


@dataclass
class Dimensions:
    """Width and height of a box."""

    width: float = 0.0
    height: float = 0.0


@dataclass
class BoundingBox:
    """An axis-aligned box given by its corner and its dimensions."""

    position: Point = field(default_factory=Point)
    dimensions: Dimensions = field(default_factory=Dimensions)


@dataclass
class LineSegment:
    """A straight segment, or a cubic Bezier when both base points are set."""

    start: Point = field(default_factory=Point)
    end: Point = field(default_factory=Point)
    base1: Point | None = None
    base2: Point | None = None

    def __post_init__(self) -> None:
        if (self.base1 is None) != (self.base2 is None):
            raise ValueError("a Bezier segment needs both base points")

    @property
    def is_bezier(self) -> bool:
        return self.base1 is not None

    def points(self) -> list[Point]:
        """Start, end and, for a Bezier, both base points."""
        result = [self.start, self.end]
        if self.base1 is not None and self.base2 is not None:
            result += [self.base1, self.base2]
        return result

    def move_by(self, offset: Point) -> None:
        """Shift every point of the segment in place."""
        for point in self.points():
            point.move_by(offset)

    def __str__(self) -> str:
        text = f"[{self.start}->{self.end}]"
        if self.is_bezier:
            text += f"  {self.base1}, {self.base2}"
        return text


@dataclass
class Curve:
    """An ordered sequence of line segments."""

    segments: list[LineSegment] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self) -> Iterator[LineSegment]:
        return iter(self.segments)

    def add_segment(self, segment: LineSegment | None) -> None:
        """Append a segment; ``None`` is ignored."""
        if segment is not None:
            self.segments.append(segment)

    def clear(self) -> None:
        self.segments.clear()

    def is_continuous(self) -> bool:
        """True when every segment starts where the previous one ends."""
        return all(
            prev.end == nxt.start
            for prev, nxt in zip(self.segments, self.segments[1:])
        )

    def points(self) -> list[Point]:
        """The vertices of a continuous curve; empty if it is broken or empty."""
        if not self.segments or not self.is_continuous():
            return []
        return [seg.start for seg in self.segments] + [self.segments[-1].end]

    def move_by(self, offset: Point) -> None:
        """Shift every segment in place."""
        for segment in self.segments:
            segment.move_by(offset)

    def bounding_box(self) -> BoundingBox:
        """The box holding all segment points, Bezier base points included."""
        pts = [p for seg in self.segments for p in seg.points()]
        big = sys.float_info.max
        x_min = min((p.x for p in pts), default=big)
        y_min = min((p.y for p in pts), default=big)
        x_max = max((p.x for p in pts), default=-big)
        y_max = max((p.y for p in pts), default=-big)
        return BoundingBox(
            Point(x_min, y_min), Dimensions(x_max - x_min, y_max - y_min)
        )

    def __str__(self) -> str:
        if not self.segments:
            return ""
        lines = "".join(f"        {seg}\n" for seg in self.segments)
        return "      Curve:\n" + lines