"""Scrolling and zooming a view onto a network diagram."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from netlayout.geometry import Point


@dataclass
class ScrollbarState:
    """State of one scrollbar: visibility, range and current value."""

    visible: bool = False
    value: int = 0
    page_step: int = 0
    maximum: int = 0


def compute_scrollbar(graph_extent: float, viewport_extent: float) -> ScrollbarState:
    """Scrollbar settings for a graph of ``graph_extent`` in a view.

    A graph smaller than the view needs no scrollbar; it is hidden and
    reset to zero. Otherwise one page is the view's extent and the range
    runs from zero to the part of the graph that does not fit.
    """
    if graph_extent < viewport_extent:
        return ScrollbarState(visible=False, value=0)
    return ScrollbarState(
        visible=True,
        value=0,
        page_step=int(viewport_extent),
        maximum=int(graph_extent - viewport_extent),
    )


@dataclass
class Viewport:
    """A view of ``width`` x ``height`` pixels onto a zoomable graph."""

    width: float
    height: float
    graph_min: Point = field(default_factory=Point)
    graph_max: Point = field(default_factory=Point)
    zoom: float = 1.0
    position: Point = field(default_factory=Point)
    vertical: ScrollbarState = field(default_factory=ScrollbarState)
    horizontal: ScrollbarState = field(default_factory=ScrollbarState)
    on_redraw: Callable[[], None] | None = None

    def _redraw(self) -> None:
        if self.on_redraw is not None:
            self.on_redraw()

    def _apply(
        self,
        old: ScrollbarState,
        new: ScrollbarState,
        value_changed: Callable[[int], None],
    ) -> ScrollbarState:
        if new.visible:
            new.value = min(max(old.value, 0), new.maximum)
        if new.value != old.value:
            value_changed(new.value)
        if new.visible:
            self._redraw()
        return new

    def update_scrollbars(self) -> None:
        """Recompute both scrollbars for the current zoom and view size."""
        graph_width = (self.graph_max.x - self.graph_min.x) * self.zoom
        graph_height = (self.graph_max.y - self.graph_min.y) * self.zoom
        self.vertical = self._apply(
            self.vertical,
            compute_scrollbar(graph_height, self.height),
            self.vertical_value_changed,
        )
        self.horizontal = self._apply(
            self.horizontal,
            compute_scrollbar(graph_width, self.width),
            self.horizontal_value_changed,
        )

    def set_zoom_factor(self, zoom: float) -> None:
        """Change the zoom, refit the scrollbars and redraw."""
        self.zoom = zoom
        self.update_scrollbars()
        self._redraw()

    def vertical_value_changed(self, value: int) -> None:
        """Scroll vertically so the view starts ``value`` pixels down."""
        self.vertical.value = value
        self.position.y = self.graph_min.y + value / self.zoom
        self._redraw()

    def horizontal_value_changed(self, value: int) -> None:
        """Scroll horizontally so the view starts ``value`` pixels across."""
        self.horizontal.value = value
        self.position.x = self.graph_min.x + value / self.zoom
        self._redraw()