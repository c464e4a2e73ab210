"""A scroll bar model that maps a floating point range onto integer ticks."""

from __future__ import annotations

import math
from typing import Callable

BASE_TICKS = 1_000_000

ValueListener = Callable[[bool, float, float], None]


def _round(value: float) -> int:
    """Round half away from zero, as the toolkit's integer rounding does."""
    return int(value + 0.5) if value >= 0.0 else int(value - 0.5)


def _half(ticks: int) -> int:
    """Integer half of ``ticks``, truncated toward zero."""
    return int(ticks / 2)


class ScrollBar:
    """Scroll bar whose slider covers a sub-range of a base range.

    The base range ``[min_base, max_base]`` is mapped onto ``BASE_TICKS``
    integer ticks. The slider's page step is the width of the visible part.
    Vertical scroll bars start out inverted.
    """

    def __init__(
        self,
        vertical: bool = False,
        min_base: float | None = None,
        max_base: float | None = None,
    ) -> None:
        self.vertical = vertical
        self._inverted = vertical
        self._base_ticks = BASE_TICKS
        self._min_base = 0.0
        self._max_base = 1.0
        self.minimum = 0
        self.maximum = 0
        self.single_step = 1
        self.page_step = 0
        self.value = 0
        self.value_changed: list[ValueListener] = []
        self.move_slider(self._min_base, self._max_base)

        if min_base is not None or max_base is not None:
            low = self._min_base if min_base is None else min_base
            high = self._max_base if max_base is None else max_base
            self.set_base(low, high)
            self.move_slider(low, high)

    @property
    def inverted(self) -> bool:
        return self._inverted

    @property
    def min_base(self) -> float:
        return self._min_base

    @property
    def max_base(self) -> float:
        return self._max_base

    def set_inverted(self, inverted: bool) -> None:
        if self._inverted != inverted:
            self._inverted = inverted
            self.move_slider(self.min_slider_value(), self.max_slider_value())

    def set_base(self, min_base: float, max_base: float) -> None:
        """Change the full range the scroll bar spans."""
        if min_base == max_base:
            raise ValueError("scroll bar base range must not be empty")
        if min_base != self._min_base or max_base != self._max_base:
            self._min_base = min_base
            self._max_base = max_base
            self.move_slider(self.min_slider_value(), self.max_slider_value())

    def _set_range(self, minimum: int, maximum: int) -> None:
        self.minimum = minimum
        self.maximum = max(minimum, maximum)
        self.value = self._clamp(self.value)

    def _clamp(self, value: int) -> int:
        return min(max(value, self.minimum), self.maximum)

    def move_slider(self, low: float, high: float) -> None:
        """Place the slider over ``[low, high]`` without notifying listeners."""
        slider_ticks = _round(
            (high - low) / (self._max_base - self._min_base) * self._base_ticks
        )
        self._set_range(_half(slider_ticks), self._base_ticks - _half(slider_ticks))
        steps = int(slider_ticks / 200)
        self.single_step = steps if steps > 0 else 1
        self.page_step = slider_ticks

        tick = self.map_to_tick(low + (high - low) / 2)
        if self._inverted:
            tick = self._base_ticks - tick
        self.value = self._clamp(tick)

    def set_value(self, value: int) -> None:
        """Move the slider to tick ``value`` and notify listeners if it moved."""
        value = self._clamp(value)
        if value == self.value:
            return
        self.value = value
        low, high = self.slider_range(value)
        for listener in list(self.value_changed):
            listener(self.vertical, low, high)

    def slider_range(self, value: int) -> tuple[float, float]:
        """The base range covered by the slider when positioned at ``value``."""
        if self._inverted:
            value = self._base_ticks - value
        visible = self.page_step
        return (
            self.map_from_tick(value - _half(visible)),
            self.map_from_tick(value + _half(visible)),
        )

    def min_slider_value(self) -> float:
        return self.slider_range(self.value)[0]

    def max_slider_value(self) -> float:
        return self.slider_range(self.value)[1]

    def map_to_tick(self, value: float) -> int:
        pos = (value - self._min_base) / (self._max_base - self._min_base) * self._base_ticks
        if math.isnan(pos):
            raise ValueError("value can't be mapped to a tick")
        return int(pos)

    def map_from_tick(self, tick: int) -> float:
        return self._min_base + (self._max_base - self._min_base) * tick / self._base_ticks