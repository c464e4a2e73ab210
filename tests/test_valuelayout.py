import itertools
import random

import pytest

from plotkit.valuelayout import VALUE_LABEL_HEIGHT, ChannelValue, layout_values, selection_size_text


def _overlaps(a, b, eps=1e-6):
    return a.bottom() - b.top() > eps and b.bottom() - a.top() > eps


def test_top_and_bottom():
    v = ChannelValue("ch", 1.5, 30.0)
    assert v.top() == 30.0
    assert v.bottom() == 30.0 + VALUE_LABEL_HEIGHT


def test_separate_labels_untouched():
    values = [ChannelValue(0, 1.0, 10.0), ChannelValue(1, 2.0, 100.0)]
    layout_values(values)
    assert [v.y for v in values] == [10.0, 100.0]


def test_label_height_override():
    values = [ChannelValue(0, 1.0, 10.0), ChannelValue(1, 2.0, 15.0)]
    layout_values(values, label_height=3.0)
    assert all(v.height == 3.0 for v in values)
    assert [v.y for v in values] == [10.0, 15.0]


def test_two_overlapping_labels_split_evenly():
    a = ChannelValue(0, 1.0, 100.0)
    b = ChannelValue(1, 2.0, 100.0)
    layout_values([a, b])
    upper, lower = sorted([a, b], key=lambda v: v.y)
    assert lower.top() == pytest.approx(upper.bottom())
    assert a.y + b.y == pytest.approx(200.0)


def test_label_above_screen_moved_down():
    a = ChannelValue(0, 1.0, -5.0)
    b = ChannelValue(1, 2.0, 50.0)
    layout_values([a, b])
    assert a.y == 0.0
    assert b.y == 50.0


def test_join_near_top_stays_on_screen():
    values = [ChannelValue(0, 1.0, 2.0), ChannelValue(1, 2.0, 4.0)]
    layout_values(values)
    assert min(v.top() for v in values) >= 0.0
    assert not _overlaps(*values)


def test_empty_and_single():
    layout_values([])
    single = [ChannelValue(0, 1.0, 42.0)]
    layout_values(single)
    assert single[0].y == 42.0


@pytest.mark.parametrize("seed", range(20))
def test_random_layouts_have_no_overlap(seed):
    rng = random.Random(seed)
    values = [ChannelValue(i, float(i), rng.uniform(0, 100)) for i in range(6)]
    layout_values(values)
    for a, b in itertools.combinations(values, 2):
        assert not _overlaps(a, b)
    assert all(v.top() >= -1e-9 for v in values)


def test_selection_size_text():
    assert selection_size_text(2.0, 0.5) == " [2, 0.5]"
    assert selection_size_text(123456.0, 1.0) == " [1.235e+05, 1]"
    assert selection_size_text(3.14159, 10.0) == " [3.142, 10]"