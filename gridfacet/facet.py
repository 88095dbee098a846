#!/usr/bin/env python3

'''
    facet: split data into panels and render them

    a facet follows the protocol
        train_layout(datas) ==> LayoutTable
        map_layout(data, layout) ==> data with column 'PANEL'
        train_ranges(layout, data, x, y) ==> PanelInfo
        render(panel_info, coord, theme, geom_grobs) ==> GrobTable

    only grid facet is implemented:
        panels in rows and cols by two sets of variables
'''

from .spec import FacetSpec, parse_facets
from .layout import train_layout
from .locate import locate_grid
from .panel import train_ranges
from .render import facet_render
from .theme import Theme

__all__=['Facet', 'FacetGrid', 'facet_grid', 'draw_facets']

class Facet:
    '''
        base class of facet
    '''
    def train_layout(self, datas):
        raise NotImplementedError

    def map_layout(self, data, layout):
        raise NotImplementedError

    def train_ranges(self, layout, data, **kwargs):
        return train_ranges(layout, data, **kwargs)

    def render(self, panel_info, coord, theme=None, geom_grobs=None):
        raise NotImplementedError

class FacetGrid(Facet):
    '''
        lay out panels in a grid
    '''
    def __init__(self, spec):
        assert isinstance(spec, FacetSpec), \
            'only allow `FacetSpec`, but got %s' % type(spec).__name__
        self._spec=spec

    @property
    def spec(self):
        return self._spec

    def train_layout(self, datas):
        '''
            layout table from data of layers
                with scale groups resolved
        '''
        return train_layout(self._spec, datas)

    def map_layout(self, data, layout):
        '''
            data with column 'PANEL'
        '''
        return locate_grid(data, layout)

    def render(self, panel_info, coord, theme=None, geom_grobs=None):
        '''
            render to `GrobTable`
        '''
        if theme is None:
            theme=Theme()
        return facet_render(self._spec, panel_info, coord, theme, geom_grobs)

    def __repr__(self):
        return '%s(%s)' % (type(self).__name__, repr(self._spec))

def facet_grid(facets, margins=False, scales='fixed', space='fixed',
                       labeller='label_value', as_table=True,
                       drop=True, row_strip='right'):
    '''
        grid facet

        Parameters:
            facets: str, pair or mapping
                'rows ~ cols', like 'cyl ~ .', '. ~ vs + am'
                or (rows, cols), or dict(rows=..., cols=...)

            margins: bool, default False
                whether to add margin row and col

            scales: 'fixed', 'free_x', 'free_y', 'free'
                whether scales shared by all panels,
                    or vary across cols (x) and rows (y)

            space: 'fixed', 'free'
                if 'free', sizes of panels proportional to span of scales

            labeller: str or callable
                see `get_labeller`

            as_table: bool, default True
                if True, first level at top
                otherwise at bottom

            drop: bool, default True
                if False, show all combinations of levels

            row_strip: 'right' or 'left'
                side of strips for rows
    '''
    rows, cols=parse_facets(facets)
    spec=FacetSpec(rows, cols, margins=margins, scales=scales, space=space,
                   labeller=labeller, as_table=as_table, drop=drop,
                   row_strip=row_strip)
    return FacetGrid(spec)

def draw_facets(facet, data, coord, theme=None, geom_grobs=None,
                       x=None, y=None, xlim=None, ylim=None):
    '''
        run whole pipeline for one dataset

        train layout, locate data, train ranges and render

        return (GrobTable, PanelInfo)
    '''
    layout=facet.train_layout(data)
    located=facet.map_layout(data, layout)
    panel_info=facet.train_ranges(layout, located, x=x, y=y, xlim=xlim, ylim=ylim)
    table=facet.render(panel_info, coord, theme=theme, geom_grobs=geom_grobs)
    return table, panel_info
