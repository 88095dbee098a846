#!/usr/bin/env python3

'''
    coordinate systems used to render panels

    facet asks a coordinate system for
        axes: render_axis_h, render_axis_v
        background/foreground of panel: render_bg, render_fg
        preferred aspect ratio: aspect
    all given range of a panel, see `PanelRange`
'''

from matplotlib.ticker import MaxNLocator

from .grobs import NullGrob, RectGrob, AxisGrob
from .sizing import span_of

__all__=['Coord', 'CoordCartesian', 'CoordFixed']

class Coord:
    '''
        base class of coordinate system

        subclass should overwrite
            render_axis_h(panel_range, theme) ==> grob
            render_axis_v(panel_range, theme) ==> grob
            render_bg(panel_range, theme) ==> grob
            render_fg(panel_range, theme) ==> grob
            aspect(panel_range) ==> float or None
    '''
    def render_axis_h(self, panel_range, theme):
        raise NotImplementedError

    def render_axis_v(self, panel_range, theme):
        raise NotImplementedError

    def render_bg(self, panel_range, theme):
        raise NotImplementedError

    def render_fg(self, panel_range, theme):
        return NullGrob()

    def aspect(self, panel_range):
        return None

class CoordCartesian(Coord):
    '''
        cartesian coordinate

        breaks of axis from `matplotlib.ticker.MaxNLocator`
    '''
    def __init__(self, nbins='auto'):
        self._locator=MaxNLocator(nbins=nbins)

    def breaks(self, r):
        '''
            breaks inside range `r`
        '''
        lo, hi=r
        ticks=self._locator.tick_values(lo, hi)
        return [t for t in ticks if lo<=t<=hi]

    def render_axis_h(self, panel_range, theme):
        return AxisGrob('bottom', self.breaks(panel_range.x), theme=theme,
                        name='axis-b')

    def render_axis_v(self, panel_range, theme):
        return AxisGrob('left', self.breaks(panel_range.y), theme=theme,
                        name='axis-l')

    def render_bg(self, panel_range, theme):
        return RectGrob(fill=theme.panel_background, name='panel-bg')

class CoordFixed(CoordCartesian):
    '''
        cartesian coordinate with fixed ratio between units of y and x

        aspect of panel = ratio * span(y) / span(x)
    '''
    def __init__(self, ratio=1., nbins='auto'):
        super().__init__(nbins=nbins)
        self.ratio=ratio

    def aspect(self, panel_range):
        return self.ratio*span_of(panel_range.y)/span_of(panel_range.x)
