"""Placement of channel value labels next to the tracker line."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

VALUE_LABEL_HEIGHT = 12.0


@dataclass
class ChannelValue:
    """A value label for one channel, positioned at screen coordinate ``y``."""

    channel: Any
    value: float
    y: float
    height: float = VALUE_LABEL_HEIGHT

    def top(self) -> float:
        return self.y

    def bottom(self) -> float:
        return self.y + self.height


class _Group:
    """Labels stacked together, touching each other."""

    def __init__(self, item: ChannelValue) -> None:
        self.items = [item]

    def top(self) -> float:
        return self.items[0].top()

    def bottom(self) -> float:
        return self.items[-1].bottom()

    def overlap(self, other: _Group) -> float:
        a = self.bottom() - other.top()
        b = other.bottom() - self.top()
        if a > 0 and b > 0:
            return min(a, b)
        return 0.0

    def move_by(self, dy: float) -> None:
        for item in self.items:
            item.y += dy

    def join(self, other: _Group) -> None:
        """Merge ``other``, which lies below and overlaps this group."""
        overlap = self.overlap(other)
        # Groups with more labels move less.
        ratio = len(self.items) / (len(self.items) + len(other.items))
        self_off = overlap * (1.0 - ratio)
        final_top = self.top() - self_off
        if final_top < 0:
            self_off += final_top
        self.move_by(-self_off)
        other.move_by(overlap - self_off)
        self.items.extend(other.items)
        other.items = []


def layout_values(values: list[ChannelValue], label_height: float | None = None) -> None:
    """Shift labels vertically, in place, so that none of them overlap.

    Overlapping labels are pushed apart around their common position and
    kept from going above the top of the screen (``y = 0``).
    """
    if label_height is not None:
        for value in values:
            value.height = label_height

    groups = sorted((_Group(v) for v in values), key=_Group.top)

    something_overlaps = True
    while something_overlaps and len(groups) > 1:
        something_overlaps = False
        for pos, (a, b) in enumerate(zip(groups, groups[1:])):
            if a.top() < 0:
                a.move_by(-a.top())
            if a.overlap(b):
                something_overlaps = True
                a.join(b)
                del groups[pos + 1]
                break


def selection_size_text(width: float, height: float) -> str:
    """Suffix describing a selection's size, as shown in the tracker text."""
    return f" [{width:.4g}, {height:.4g}]"