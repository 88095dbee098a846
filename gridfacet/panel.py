#!/usr/bin/env python3

'''
    ranges of panels

    each scale group has a range along x and y
    a panel takes ranges of its scale groups

    ranges are trained from located data,
        or given directly for external scales
'''

import collections
import numbers

import numpy as np
import pandas as pd

from .errors import ConfigurationError
from .locate import locate_grid
from ._tools_facet import check_axis
from ._log import get_logger

__all__=['PanelRange', 'PanelInfo', 'train_ranges']

logger=get_logger(__name__)

PanelRange=collections.namedtuple('PanelRange', 'x y')

# default range for scale without data
DEFAULT_RANGE=(0., 1.)

# expansion: multiplicative for continuous, additive for discrete
EXPAND_CONTINUOUS=0.05
EXPAND_DISCRETE=0.6

class PanelInfo:
    '''
        layout and ranges of scale groups
    '''
    def __init__(self, layout, x_ranges=None, y_ranges=None):
        '''
            Parameters:
                layout: LayoutTable

                x_ranges, y_ranges: dict or None
                    scale group id ==> (min, max)

                    groups not given use (0, 1)
        '''
        self._layout=layout
        self._ranges=dict(
            x=self._norm_ranges(x_ranges, layout.scale_x),
            y=self._norm_ranges(y_ranges, layout.scale_y))

    @staticmethod
    def _norm_ranges(ranges, groups):
        if ranges is None:
            ranges={}

        result={}
        for g in sorted(set(groups.tolist())):
            lo, hi=ranges.get(g, DEFAULT_RANGE)
            result[g]=(float(lo), float(hi))
        return result

    @property
    def layout(self):
        return self._layout

    def scale_ranges(self, axis):
        '''
            dict of scale group ==> range
        '''
        check_axis(axis)
        return dict(self._ranges[axis])

    x_ranges=property(lambda self: self.scale_ranges('x'))
    y_ranges=property(lambda self: self.scale_ranges('y'))

    def panel_range(self, panel):
        '''
            `PanelRange` of a panel id
        '''
        row=self._layout.get_panel(panel)
        return PanelRange(self._ranges['x'][row.scale_x],
                          self._ranges['y'][row.scale_y])

    @property
    def ranges(self):
        '''
            list of `PanelRange`, in order of panel id
        '''
        return [self.panel_range(p) for p in self._layout.panels.tolist()]

    def __repr__(self):
        return '%s(%s, x=%s, y=%s)' % (type(self).__name__, repr(self._layout),
                    self._ranges['x'], self._ranges['y'])

# train
def _is_discrete(s):
    if isinstance(s.dtype, pd.CategoricalDtype):
        return True
    return not (pd.api.types.is_numeric_dtype(s) and not pd.api.types.is_bool_dtype(s))

def _expand(lo, hi, discrete):
    if discrete:
        return lo-EXPAND_DISCRETE, hi+EXPAND_DISCRETE

    d=(hi-lo)*EXPAND_CONTINUOUS
    return lo-d, hi+d

def _train_axis(located, layout, axis, col, lim=None, expand=True):
    '''
        ranges of scale groups along one axis
    '''
    groups=layout.scale_groups(axis)
    ids=sorted(set(groups.values()))

    if lim is not None:
        lo, hi=lim
        assert isinstance(lo, numbers.Real) and isinstance(hi, numbers.Real), \
            'only allow real numbers for limits'
        if len(ids)>1:
            logger.info('limits of %s override free scales', axis)
        r=_expand(lo, hi, False) if expand else (lo, hi)
        return {g: r for g in ids}

    if col is None:
        return {g: DEFAULT_RANGE for g in ids}

    if col not in located.columns:
        raise ConfigurationError('column %s not found in data' % repr(col))

    s=located[col]
    discrete=_is_discrete(s)
    scale=located['PANEL'].map(groups)

    result={}
    for g in ids:
        v=s[(scale==g).to_numpy()].dropna()
        if len(v)==0:
            result[g]=DEFAULT_RANGE
            continue

        if discrete:
            lo, hi=1, v.nunique()
        else:
            lo, hi=float(np.min(v)), float(np.max(v))

        result[g]=_expand(lo, hi, discrete) if expand else (lo, hi)

    return result

def train_ranges(layout, data, x=None, y=None, xlim=None, ylim=None, expand=True):
    '''
        train ranges of scale groups from data

        Parameters:
            layout: LayoutTable
                with scale groups resolved

            data: pd.DataFrame
                if no column 'PANEL', locate it in layout first

            x, y: None or str
                columns mapped to x and y
                if None, use range (0, 1)

            xlim, ylim: None or (float, float)
                explicit limits
                    override ranges of all groups along that axis,
                    so free scales no longer vary

            expand: bool, default True
                expand continuous range by 5% each side,
                    discrete range (1, n) by 0.6
    '''
    if 'PANEL' not in data.columns:
        data=locate_grid(data, layout)

    x_ranges=_train_axis(data, layout, 'x', x, lim=xlim, expand=expand)
    y_ranges=_train_axis(data, layout, 'y', y, lim=ylim, expand=expand)

    return PanelInfo(layout, x_ranges, y_ranges)
