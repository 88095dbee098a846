"""Tests for drawables and text measurement."""

import pytest

from gridfacet import (AxisGrob, GTree, NullGrob, RectGrob, StripGrob,
                       TextGrob, Theme, measure, text_extent)


def test_longer_text_is_wider():
    w0, h0 = text_extent('ab')
    w1, h1 = text_extent('abcdef')
    assert w1 > w0 > 0
    assert h0 > 0


def test_rotation_swaps_extent():
    w, h = text_extent('label')
    assert text_extent('label', rotation=-90) == (h, w)


def test_empty_text_has_no_size():
    assert text_extent('') == (0., 0.)
    assert measure(TextGrob('')) == (0., 0.)


def test_bigger_font_is_bigger():
    assert text_extent('x', fontsize=20)[1] > text_extent('x', fontsize=8)[1]


def test_gtree_keeps_order_and_measures_max():
    a, b = TextGrob('x'), TextGrob('longer text')
    tree = GTree([RectGrob(), a, b, NullGrob()])

    assert tree.children[1] is a
    assert tree.width_cm() == pytest.approx(b.width_cm())


def test_strip_padding(theme):
    strip = StripGrob('4', horizontal=True, theme=theme)
    assert strip.height_cm() > strip.text.height_cm()
    assert strip.label == '4'


def test_vertical_strip_is_rotated(theme):
    strip = StripGrob('a long row label', horizontal=False, theme=theme)
    assert strip.height_cm() > strip.width_cm()


def test_axis_measured_across_axis():
    theme = Theme()
    bottom = AxisGrob('bottom', [0, 10, 20], theme=theme)
    left = AxisGrob('left', [0, 1000], theme=theme)

    assert bottom.width_cm() == 0.
    assert bottom.height_cm() > 0.
    assert left.height_cm() == 0.
    assert left.width_cm() > 0.
    assert bottom.labels == ['0', '10', '20']
