import matplotlib
matplotlib.use('Agg')

import pandas as pd
import pytest

from gridfacet import Theme, FacetSpec, train_layout


@pytest.fixture
def cars():
    """Small mtcars-like dataset: cyl in rows, vs in cols, (8, 1) never observed."""
    return pd.DataFrame({
        'cyl': [4, 4, 6, 6, 8, 8],
        'vs': [0, 1, 0, 1, 0, 0],
        'mpg': [30., 25., 21., 19., 15., 14.],
        'wt': [2., 2.5, 3., 3.2, 3.5, 4.],
    })


@pytest.fixture
def groups3():
    """One categorical variable with three observed values."""
    return pd.DataFrame({
        'g': ['a', 'b', 'c', 'a', 'b', 'c'],
        'x': [1., 2., 3., 4., 5., 6.],
        'y': [1., 1., 2., 2., 3., 3.],
    })


@pytest.fixture
def theme():
    return Theme()


@pytest.fixture
def grid_layout(cars):
    """cyl ~ vs layout with fixed scales."""
    return train_layout(FacetSpec(rows='cyl', cols='vs'), cars)
