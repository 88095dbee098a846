"""Tests for panel size allocation and aspect ratio resolution."""

import pytest

from gridfacet import (SPAN_EPS, CoordCartesian, CoordFixed, FacetSpec,
                       PanelRange, Theme, Unit, allocate_sizes,
                       resolve_aspect, span_of, train_layout, train_ranges)


def test_fixed_space_sizes_are_equal(grid_layout):
    widths, heights = allocate_sizes(grid_layout, {1: (0, 1)}, {1: (0, 100)})

    assert widths == [Unit(1)] * 2
    assert heights == [Unit(1)] * 3


def test_fixed_space_heights_scaled_by_aspect(grid_layout):
    widths, heights = allocate_sizes(grid_layout, {1: (0, 1)}, {1: (0, 1)},
                                     aspect_ratio=2.)
    assert widths == [Unit(1)] * 2
    assert heights == [Unit(2)] * 3


def test_free_space_proportional_to_span(cars):
    layout = train_layout(FacetSpec(rows='cyl', cols='vs', scales='free', space='free'), cars)
    x_ranges = {1: (0., 10.), 2: (0., 5.)}
    y_ranges = {1: (0., 1.), 2: (0., 2.), 3: (0., 3.)}

    widths, heights = allocate_sizes(layout, x_ranges, y_ranges, space_free=True)

    assert [u.value for u in widths] == [10., 5.]
    assert [u.value for u in heights] == [1., 2., 3.]
    assert all([u.is_null() for u in widths + heights])


def test_free_space_ratios_invariant_to_scaling(cars):
    layout = train_layout(FacetSpec(rows='cyl', cols='vs', scales='free_x', space='free'), cars)
    x_ranges = {1: (0., 4.), 2: (1., 2.)}
    scaled = {k: (lo * 7, hi * 7) for k, (lo, hi) in x_ranges.items()}

    w0, _ = allocate_sizes(layout, x_ranges, {1: (0, 1)}, space_free=True)
    w1, _ = allocate_sizes(layout, scaled, {1: (0, 1)}, space_free=True)

    assert w0[0].value / w0[1].value == pytest.approx(w1[0].value / w1[1].value)


def test_zero_span_clamped():
    assert span_of((3., 3.)) == SPAN_EPS
    assert span_of((5., 1.)) == SPAN_EPS
    assert span_of((1., 5.)) == 4.


def test_degenerate_group_not_zero_sized(cars):
    layout = train_layout(FacetSpec(cols='vs', scales='free_x', space='free'), cars)
    widths, _ = allocate_sizes(layout, {1: (2., 2.), 2: (0., 1.)}, {1: (0, 1)},
                               space_free=True)
    assert widths[0].value > 0


def test_aspect_from_theme():
    theme = Theme(aspect_ratio=0.5)
    assert resolve_aspect(theme, None, {'x': True, 'y': False}) == (0.5, True)


def test_aspect_from_coord_when_scales_fixed():
    r = PanelRange((0., 10.), (0., 5.))
    fixed = {'x': False, 'y': False}

    assert resolve_aspect(Theme(), CoordFixed(2.), fixed, r) == (1., True)
    assert resolve_aspect(Theme(), CoordCartesian(), fixed, r) == (1., False)


def test_no_aspect_from_coord_with_free_scales():
    r = PanelRange((0., 10.), (0., 5.))
    free = {'x': True, 'y': False}
    assert resolve_aspect(Theme(), CoordFixed(), free, r) == (1., False)


def test_trained_ranges_drive_free_space(cars):
    layout = train_layout(FacetSpec(cols='vs', scales='free_x', space='free'), cars)
    info = train_ranges(layout, cars, x='mpg', expand=False)
    widths, _ = allocate_sizes(layout, info.x_ranges, info.y_ranges, space_free=True)

    assert [u.value for u in widths] == [16., 6.]
