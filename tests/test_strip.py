"""Tests for strip building."""

import pandas as pd

from gridfacet import (FacetSpec, Unit, build_strip, facet_strips,
                       label_both, label_value, layout_grid, null_units)


def test_top_strip_one_band(theme):
    labels = pd.DataFrame({'g': ['a', 'b', 'c']})
    strip = build_strip(labels, label_value, theme, side='top')

    # 3 columns plus 2 spaces
    assert strip.shape == (1, 5)
    assert [c.grob.label for c in strip.cells] == ['a', 'b', 'c']
    assert [c.l for c in strip.cells] == [0, 2, 4]
    assert strip.heights[0].unit == 'cm'
    assert strip.heights[0].value > 0


def test_top_strip_stacks_variables(theme):
    labels = pd.DataFrame({'vs': [0, 1], 'am': [0, 0]})
    strip = build_strip(labels, label_both, theme, side='top')

    assert strip.shape == (2, 3)
    assert strip.get_cell('strip-t-1-2').grob.label == 'vs: 1'
    assert strip.get_cell('strip-t-2-1').grob.label == 'am: 0'


def test_right_strip_uses_given_heights(theme):
    labels = pd.DataFrame({'cyl': [4, 6, 8]})
    heights = [Unit(1), Unit(2), Unit(3)]
    strip = build_strip(labels, label_value, theme, side='right', sizes=heights)

    assert strip.shape == (5, 1)
    assert strip.heights[0::2] == tuple(heights)
    assert strip.heights[1] == theme.panel_margin
    assert strip.widths[0].unit == 'cm'


def test_empty_side_gives_zero_sized_placeholder(theme):
    labels = pd.DataFrame(index=range(3))
    strip = build_strip(labels, label_value, theme, side='right', ntrack=3)

    assert strip.ncol == 0
    assert strip.nrow == 5
    assert strip.cells == ()

    strip = build_strip(labels, label_value, theme, side='top',
                        sizes=null_units(3))
    assert strip.nrow == 0
    assert strip.ncol == 5


def test_facet_strips_match_layout(cars, theme):
    spec = FacetSpec(cols='vs', margins=True)
    layout = layout_grid(cars, cols=['vs'], margins=True)
    strips = facet_strips(spec, layout, theme)

    assert set(strips) == {'t', 'r'}
    assert [c.grob.label for c in strips['t'].cells] == ['0', '1', '(all)']
    assert strips['r'].ncol == 0
    assert strips['r'].nrow == layout.nrow


def test_left_row_strip(cars, theme):
    spec = FacetSpec(rows='cyl', row_strip='left')
    layout = layout_grid(cars, rows=['cyl'])
    strips = facet_strips(spec, layout, theme)

    assert set(strips) == {'t', 'l'}
    assert strips['l'].name == 'strip-l'
