"""Zoom history of a plot, with horizontal limits and scrolling."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum, IntEnum
from typing import Callable


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle in plot coordinates.

    ``top`` is the smaller and ``bottom`` the larger Y value of a
    normalized rectangle.
    """

    left: float
    top: float
    right: float
    bottom: float

    def width(self) -> float:
        return self.right - self.left

    def height(self) -> float:
        return self.bottom - self.top

    def moved_to(self, left: float, top: float) -> Rect:
        """Same size, with its top-left corner at ``(left, top)``."""
        return Rect(left, top, left + self.width(), top + self.height())


def _normalized(rect: Rect) -> Rect:
    return Rect(
        min(rect.left, rect.right),
        min(rect.top, rect.bottom),
        max(rect.left, rect.right),
        max(rect.top, rect.bottom),
    )


class Axis(IntEnum):
    """Plot axes."""

    Y_LEFT = 0
    Y_RIGHT = 1
    X_BOTTOM = 2
    X_TOP = 3


class ScrollBarPolicy(Enum):
    """When a scroll bar is shown."""

    AS_NEEDED = "as_needed"
    ALWAYS_OFF = "always_off"
    ALWAYS_ON = "always_on"


_OPPOSITE = {
    Axis.X_BOTTOM: Axis.X_TOP,
    Axis.X_TOP: Axis.X_BOTTOM,
    Axis.Y_LEFT: Axis.Y_RIGHT,
    Axis.Y_RIGHT: Axis.Y_LEFT,
}


def opposite_axis(axis: Axis) -> Axis:
    """The axis on the other side of the plot."""
    return _OPPOSITE[Axis(axis)]


def pick_horizontal(first: float, last: float, y_range: tuple[float, float]) -> Rect:
    """Zoom rectangle for a range picked on the X scale.

    The picked span sets the X extent; the Y extent is the whole of
    ``y_range``, the current Y scale.
    """
    low, high = y_range
    return _normalized(Rect(min(first, last), low, max(first, last), high))


def pick_vertical(first: float, last: float, x_range: tuple[float, float]) -> Rect:
    """Zoom rectangle for a range picked on the Y scale.

    The picked span sets the Y extent; the X extent is the whole of
    ``x_range``, the current X scale.
    """
    low, high = x_range
    return _normalized(Rect(low, min(first, last), high, max(first, last)))


ZoomListener = Callable[[Rect], None]


class ZoomStack:
    """Stack of zoom rectangles; the first one is the zoom base.

    The base spans at most ``h_view_size`` wide, ending at the X limit
    ``x_max``. Moving a zoomed view keeps it inside the X limits and the
    base's Y extent.
    """

    def __init__(self, base: Rect) -> None:
        base = _normalized(base)
        self._stack: list[Rect] = [base]
        self._index = 0
        self._x_min = base.left
        self._x_max = base.right
        self._h_view_size = base.width()
        self.zoomed: list[ZoomListener] = []
        self.unzoomed: list[Callable[[], None]] = []

    @property
    def index(self) -> int:
        """Position of the current rectangle in the stack."""
        return self._index

    @property
    def base(self) -> Rect:
        return self._stack[0]

    @property
    def stack(self) -> tuple[Rect, ...]:
        return tuple(self._stack)

    @property
    def x_limits(self) -> tuple[float, float]:
        return self._x_min, self._x_max

    @property
    def h_view_size(self) -> float:
        return self._h_view_size

    def current(self) -> Rect:
        """The rectangle currently shown."""
        return self._stack[self._index]

    def set_x_limits(self, low: float, high: float) -> None:
        """Set the X range data can be scrolled over; resets the zoom."""
        self._x_min = low
        self._x_max = high
        self.set_zoom_base()

    def set_h_view_size(self, size: float) -> None:
        """Set the width of the unzoomed view; resets the zoom."""
        self._h_view_size = size
        self.set_zoom_base()

    def set_zoom_base(self, rect: Rect | None = None) -> None:
        """Reset the stack to a single base taken from ``rect`` or the current view.

        The base's X extent is fitted to the limits and the view size.
        """
        source = _normalized(rect) if rect is not None else self.current()
        if (self._x_max - self._x_min) < self._h_view_size:
            left = self._x_min
        else:
            left = self._x_max - self._h_view_size
        self._stack = [Rect(left, source.top, self._x_max, source.bottom)]
        self._index = 0

    def _notify_zoomed(self) -> None:
        rect = self.current()
        for listener in list(self.zoomed):
            listener(rect)

    def zoom(self, rect: Rect) -> bool:
        """Zoom into ``rect``; returns False if it is already the current view.

        Zooming in from the base first refreshes the base. Rectangles above
        the current one are dropped.
        """
        if self._index == 0:
            self.set_zoom_base()
        target = _normalized(rect)
        if target == self.current():
            return False
        del self._stack[self._index + 1 :]
        self._stack.append(target)
        self._index += 1
        self._notify_zoomed()
        return True

    def zoom_level(self, offset: int) -> int:
        """Move through the stack by ``offset``; 0 goes back to the base.

        Returns the new index.
        """
        if offset == 0:
            new_index = 0
        else:
            new_index = min(max(self._index + offset, 0), len(self._stack) - 1)
        if new_index != self._index:
            self._index = new_index
            self._notify_zoomed()
        if self._index == 0:
            for listener in list(self.unzoomed):
                listener()
        return self._index

    def move_to(self, x: float, y: float) -> bool:
        """Move the current view's top-left corner, kept within the limits.

        Returns True if the view moved.
        """
        current = self.current()
        base = self.base

        x = max(x, self._x_min)
        if x > self._x_max - current.width():
            x = self._x_max - current.width()

        y = max(y, base.top)
        if y > base.bottom - current.height():
            y = base.bottom - current.height()

        if x == current.left and y == current.top:
            return False
        self._stack[self._index] = current.moved_to(x, y)
        return True

    def move_by(self, dx: float, dy: float) -> bool:
        """Shift the current view; see ``move_to``."""
        current = self.current()
        return self.move_to(current.left + dx, current.top + dy)

    def need_scroll_bar(
        self, horizontal: bool, policy: ScrollBarPolicy = ScrollBarPolicy.AS_NEEDED
    ) -> bool:
        """Whether a scroll bar should be shown for the given direction."""
        if policy is ScrollBarPolicy.ALWAYS_ON:
            return True
        if policy is ScrollBarPolicy.ALWAYS_OFF:
            return False
        current = self.current()
        if horizontal:
            base_min, base_max = self._x_min, self._x_max
            zoom_min, zoom_max = current.left, current.right
        else:
            base_min, base_max = self.base.top, self.base.bottom
            zoom_min, zoom_max = current.top, current.bottom
        return base_min < zoom_min or base_max > zoom_max


__all__ = [
    "Rect",
    "Axis",
    "ScrollBarPolicy",
    "ZoomStack",
    "opposite_axis",
    "pick_horizontal",
    "pick_vertical",
]