"""Text labels and graph nodes drawn on a network diagram."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from netlayout.geometry import BoundingBox, Dimensions, Point


@dataclass
class Label:
    """A text glyph that remembers its original box so it can be rescaled.

    The text is either set explicitly or looked up from the model object
    the label refers to.
    """

    bounding_box: BoundingBox = field(default_factory=BoundingBox)
    text: str | None = None
    model_object_key: str = ""
    _original: BoundingBox = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self._original = BoundingBox(
            Point(self.x, self.y), Dimensions(self.width, self.height)
        )

    @property
    def x(self) -> float:
        return self.bounding_box.position.x

    @property
    def y(self) -> float:
        return self.bounding_box.position.y

    @property
    def width(self) -> float:
        return self.bounding_box.dimensions.width

    @property
    def height(self) -> float:
        return self.bounding_box.dimensions.height

    @property
    def original_box(self) -> BoundingBox:
        """A copy of the box the label had when it was created."""
        orig = self._original
        return BoundingBox(
            Point(orig.position.x, orig.position.y),
            Dimensions(orig.dimensions.width, orig.dimensions.height),
        )

    def scale(self, factor: float) -> None:
        """Set position and size to the original values times ``factor``."""
        orig = self._original
        self.bounding_box = BoundingBox(
            Point(orig.position.x * factor, orig.position.y * factor),
            Dimensions(
                orig.dimensions.width * factor, orig.dimensions.height * factor
            ),
        )

    def adapt_to_height(self, height: float) -> None:
        """Give the box a new height, scaling its width to keep the ratio."""
        dims = self.bounding_box.dimensions
        factor = height / dims.height
        self.bounding_box.dimensions = Dimensions(dims.width * factor, height)

    def scale_position(self, factor: float) -> None:
        """Multiply the current position by ``factor``; the size is kept."""
        position = self.bounding_box.position
        position.x *= factor
        position.y *= factor

    def display_text(self, names: Mapping[str, str]) -> str:
        """The label text, or the name of the referenced object.

        ``names`` maps model object keys to object names. A label with
        neither explicit text nor a known object reads ``"unset"``.
        """
        if self.text is not None:
            return self.text
        return names.get(self.model_object_key, "unset")


@dataclass
class GraphNode:
    """A species node of the animated network graph."""

    size: float
    original_key: str = ""
    object_key: str = ""
    bounding_box: BoundingBox = field(default_factory=BoundingBox)
    label_text: str = ""

    def __str__(self) -> str:
        box = self.bounding_box
        return (
            f"node key: {self.original_key}  size: {self.size}\n"
            f"object key: {self.object_key}\n"
            f"bounding box: {box.position} {box.dimensions.width}x"
            f"{box.dimensions.height}\n"
            f"label: {self.label_text}\n"
        )