import pytest

from plotkit.scrollbar import BASE_TICKS, ScrollBar


def test_default_covers_whole_unit_range():
    sb = ScrollBar()
    assert sb.min_slider_value() == pytest.approx(0.0)
    assert sb.max_slider_value() == pytest.approx(1.0)


def test_vertical_starts_inverted():
    assert ScrollBar(vertical=True).inverted is True
    assert ScrollBar(vertical=False).inverted is False


@pytest.mark.parametrize("vertical", [False, True])
def test_move_slider_round_trip(vertical):
    sb = ScrollBar(vertical, 0.0, 100.0)
    sb.move_slider(20.0, 40.0)
    assert sb.min_slider_value() == pytest.approx(20.0)
    assert sb.max_slider_value() == pytest.approx(40.0)


def test_constructor_sets_base():
    sb = ScrollBar(False, -10.0, 10.0)
    assert sb.min_base == -10.0
    assert sb.max_base == 10.0
    assert sb.min_slider_value() == pytest.approx(-10.0)
    assert sb.max_slider_value() == pytest.approx(10.0)


def test_full_range_pins_range_limits():
    sb = ScrollBar(False, 0.0, 100.0)
    sb.move_slider(0.0, 100.0)
    assert sb.minimum == sb.maximum == BASE_TICKS // 2
    assert sb.page_step == BASE_TICKS


def test_tiny_range_single_step_is_one():
    sb = ScrollBar(False, 0.0, 100.0)
    sb.move_slider(10.0, 10.001)
    assert sb.single_step == 1


def test_slider_clamped_to_start():
    sb = ScrollBar(False, 0.0, 100.0)
    sb.move_slider(-50.0, -30.0)
    assert sb.min_slider_value() == pytest.approx(0.0)
    assert sb.value == sb.minimum


def test_map_tick_round_trip():
    sb = ScrollBar(False, 5.0, 25.0)
    assert sb.map_from_tick(sb.map_to_tick(5.0)) == pytest.approx(5.0)
    assert sb.map_from_tick(sb.map_to_tick(25.0)) == pytest.approx(25.0)
    assert sb.map_to_tick(25.0) == BASE_TICKS


def test_set_value_notifies_listeners():
    sb = ScrollBar(False, 0.0, 100.0)
    sb.move_slider(0.0, 20.0)
    seen = []
    sb.value_changed.append(lambda vertical, low, high: seen.append((vertical, low, high)))
    sb.set_value(sb.map_to_tick(50.0))
    assert len(seen) == 1
    vertical, low, high = seen[0]
    assert vertical is False
    assert low == pytest.approx(40.0)
    assert high == pytest.approx(60.0)


def test_set_value_same_value_is_silent():
    sb = ScrollBar(False, 0.0, 100.0)
    sb.move_slider(0.0, 20.0)
    seen = []
    sb.value_changed.append(lambda *args: seen.append(args))
    sb.set_value(sb.value)
    assert seen == []


def test_set_value_clamps():
    sb = ScrollBar(False, 0.0, 100.0)
    sb.move_slider(0.0, 20.0)
    sb.set_value(BASE_TICKS * 2)
    assert sb.value == sb.maximum
    assert sb.max_slider_value() == pytest.approx(100.0)


def test_move_slider_does_not_notify():
    sb = ScrollBar(False, 0.0, 100.0)
    seen = []
    sb.value_changed.append(lambda *args: seen.append(args))
    sb.move_slider(30.0, 60.0)
    assert seen == []


def test_set_inverted_keeps_width():
    sb = ScrollBar(False, 0.0, 100.0)
    sb.move_slider(20.0, 40.0)
    sb.set_inverted(True)
    assert sb.inverted is True
    width = sb.max_slider_value() - sb.min_slider_value()
    assert width == pytest.approx(20.0)


def test_empty_base_rejected():
    sb = ScrollBar()
    with pytest.raises(ValueError):
        sb.set_base(3.0, 3.0)