"""Tests for per scale group range training."""

import pandas as pd
import pytest

from gridfacet import (ConfigurationError, FacetSpec, PanelInfo,
                       train_layout, train_ranges)


def test_fixed_scale_range_from_all_data(cars, grid_layout):
    info = train_ranges(grid_layout, cars, x='mpg', y='wt', expand=False)

    assert info.x_ranges == {1: (14., 30.)}
    assert info.y_ranges == {1: (2., 4.)}
    assert info.panel_range(3).x == (14., 30.)


def test_continuous_range_expanded(cars, grid_layout):
    info = train_ranges(grid_layout, cars, x='mpg')

    lo, hi = info.x_ranges[1]
    assert lo == pytest.approx(14. - 0.8)
    assert hi == pytest.approx(30. + 0.8)
    assert info.y_ranges[1] == (0., 1.)


def test_free_ranges_per_column(cars):
    layout = train_layout(FacetSpec(rows='cyl', cols='vs', scales='free_x'), cars)
    info = train_ranges(layout, cars, x='mpg', expand=False)

    # vs == 0: 30, 21, 15, 14; vs == 1: 25, 19
    assert info.x_ranges == {1: (14., 30.), 2: (19., 25.)}
    assert info.panel_range(2).x == (19., 25.)


def test_discrete_range(groups3):
    layout = train_layout(FacetSpec(cols='g'), groups3)
    info = train_ranges(layout, groups3, x='g')

    assert info.x_ranges[1] == pytest.approx((1 - 0.6, 3 + 0.6))


def test_limits_override_free_scales(cars):
    layout = train_layout(FacetSpec(rows='cyl', cols='vs', scales='free'), cars)
    info = train_ranges(layout, cars, x='mpg', y='wt', xlim=(10, 40), expand=False)

    assert info.x_ranges == {1: (10., 40.), 2: (10., 40.)}
    assert len(set(info.y_ranges.values())) == 3


def test_group_without_data_uses_default(cars):
    layout = train_layout(FacetSpec(rows='cyl', cols='vs', scales='free_y'), cars)
    data = cars[cars['cyl'] != 8]
    info = train_ranges(layout, data, y='wt')

    assert info.y_ranges[3] == (0., 1.)


def test_missing_column_fails(cars, grid_layout):
    with pytest.raises(ConfigurationError):
        train_ranges(grid_layout, cars, x='hp')


def test_panel_info_from_external_ranges(grid_layout):
    info = PanelInfo(grid_layout, x_ranges={1: (0, 5)})

    assert info.ranges[0].x == (0., 5.)
    assert len(info.ranges) == len(grid_layout)
