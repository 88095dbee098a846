#!/usr/bin/env python3

'''
    table of grobs: grid of tracks with grobs placed on cells

    Hierarchy in this module:
        - GrobTable: tracks and placed cells
            widths, heights: sizes of column/row tracks, in `Unit`
            cells: flat list of `Cell`, each occupying
                rows t..b, cols l..r (0-based, inclusive)

        - Cell: a grob placed in table
            block: name of the sub-block it belongs to,
                like 'panel', 'strip-t', 'axis-l'

    A table is never modified in place
        all methods return a new table
'''

import collections
import numbers

import numpy as np

from .size import Unit, null_units
from .grobs import NullGrob
from ._tools_facet import unique_in_order

__all__=['Cell', 'GrobTable',
         'layout_matrix', 'layout_row', 'layout_col',
         'layout_empty_row', 'layout_empty_col']

Cell=collections.namedtuple('Cell', 'block name grob t l b r z')

class GrobTable:
    '''
        immutable table of grobs
    '''
    def __init__(self, widths=(), heights=(), cells=(), respect=False, name='layout'):
        '''
            init of table

            Parameters:
                widths, heights: list of `Unit`
                    sizes of column and row tracks

                cells: list of `Cell`
                    placed grobs

                respect: bool
                    whether relative sizes of both axes
                        share the same scale when resolved

                name: str
                    name of table
        '''
        widths=tuple(widths)
        heights=tuple(heights)
        for u in widths+heights:
            assert isinstance(u, Unit), \
                'only allow `Unit` for track size, ' \
                'but got %s' % (type(u).__name__)

        cells=tuple(cells)
        nr, nc=len(heights), len(widths)
        for c in cells:
            assert 0<=c.t<=c.b<nr and 0<=c.l<=c.r<nc, \
                'cell %s out of table (%i, %i)' % (repr(c.name), nr, nc)

        self._widths=widths
        self._heights=heights
        self._cells=cells
        self._respect=bool(respect)
        self._name=name

    def _new(self, **kwargs):
        '''
            new table with some attrs replaced
        '''
        kws=dict(widths=self._widths, heights=self._heights,
                 cells=self._cells, respect=self._respect, name=self._name)
        kws.update(kwargs)
        return type(self)(**kws)

    # getter
    widths =property(lambda self: self._widths)
    heights=property(lambda self: self._heights)
    cells  =property(lambda self: self._cells)
    respect=property(lambda self: self._respect)
    name   =property(lambda self: self._name)

    nrow=property(lambda self: len(self._heights))
    ncol=property(lambda self: len(self._widths))

    @property
    def shape(self):
        return self.nrow, self.ncol

    def with_respect(self, respect):
        return self._new(respect=respect)

    def with_name(self, name):
        return self._new(name=name)

    # query
    def blocks(self):
        '''
            names of sub-blocks, in order of placement
        '''
        return unique_in_order([c.block for c in self._cells])

    def cells_in(self, block):
        '''
            cells of a sub-block
        '''
        return [c for c in self._cells if c.block==block]

    def block_extent(self, block):
        '''
            (t, l, b, r) covered by a sub-block

            None if no such block
        '''
        cells=self.cells_in(block)
        if not cells:
            return None
        return (min([c.t for c in cells]), min([c.l for c in cells]),
                max([c.b for c in cells]), max([c.r for c in cells]))

    def get_cell(self, name):
        for c in self._cells:
            if c.name==name:
                return c
        raise KeyError(name)

    # add tracks
    @staticmethod
    def _norm_pos(pos, n):
        '''
            insertion point: number of tracks before inserted ones

            -1 for end
        '''
        assert isinstance(pos, numbers.Integral)
        if pos<0:
            pos=n+1+pos
        assert 0<=pos<=n, 'position %i out of range [0, %i]' % (pos, n)
        return pos

    @staticmethod
    def _shift_cells(cells, axis, pos, k):
        '''
            shift cells after insertion of `k` tracks at `pos`

            cells spanning over `pos` are extended
        '''
        i0, i1=('t', 'b') if axis=='y' else ('l', 'r')

        result=[]
        for c in cells:
            a, b=getattr(c, i0), getattr(c, i1)
            if a>=pos:
                a+=k
            if b>=pos:
                b+=k
            result.append(c._replace(**{i0: a, i1: b}))
        return result

    def add_rows(self, heights, pos=-1):
        '''
            insert rows with `heights`

            Parameters:
                pos: int
                    number of rows before the inserted ones
                    0 for top, -1 for bottom
        '''
        heights=list(heights)
        pos=self._norm_pos(pos, self.nrow)
        k=len(heights)

        hs=[*self._heights[:pos], *heights, *self._heights[pos:]]
        cells=self._shift_cells(self._cells, 'y', pos, k)
        return self._new(heights=hs, cells=cells)

    def add_cols(self, widths, pos=-1):
        '''
            insert columns with `widths`

            Parameters:
                pos: int
                    number of columns before the inserted ones
                    0 for left, -1 for right
        '''
        widths=list(widths)
        pos=self._norm_pos(pos, self.ncol)
        k=len(widths)

        ws=[*self._widths[:pos], *widths, *self._widths[pos:]]
        cells=self._shift_cells(self._cells, 'x', pos, k)
        return self._new(widths=ws, cells=cells)

    ## space between tracks
    def add_row_space(self, height):
        '''
            insert a row with `height` between each pair of rows
                not on border
        '''
        t=self
        for i in range(self.nrow-1, 0, -1):
            t=t.add_rows([height], pos=i)
        return t

    def add_col_space(self, width):
        '''
            insert a column with `width` between each pair of columns
                not on border
        '''
        t=self
        for i in range(self.ncol-1, 0, -1):
            t=t.add_cols([width], pos=i)
        return t

    # combine
    def cbind(self, other):
        '''
            put `other` at right side

            must have same num of rows
            heights of self are kept
        '''
        assert self.nrow==other.nrow, \
            'cannot cbind tables with %i and %i rows' % (self.nrow, other.nrow)

        n=self.ncol
        cells=[c._replace(l=c.l+n, r=c.r+n) for c in other._cells]
        return self._new(widths=self._widths+other._widths,
                         cells=self._cells+tuple(cells))

    def rbind(self, other, pos=-1):
        '''
            put `other` at bottom (`pos`=-1) or top (`pos`=0)

            must have same num of columns
            widths of self are kept
        '''
        assert self.ncol==other.ncol, \
            'cannot rbind tables with %i and %i cols' % (self.ncol, other.ncol)
        assert pos in [0, -1], 'only allow 0 or -1 for `pos`'

        if pos==0:
            n=other.nrow
            mine=[c._replace(t=c.t+n, b=c.b+n) for c in self._cells]
            return self._new(heights=other._heights+self._heights,
                             cells=tuple(other._cells)+tuple(mine))

        n=self.nrow
        cells=[c._replace(t=c.t+n, b=c.b+n) for c in other._cells]
        return self._new(heights=self._heights+other._heights,
                         cells=self._cells+tuple(cells))

    # resolve to concrete sizes
    @staticmethod
    def _split_units(units):
        absolute=np.array([0. if u.is_null() else u.to_cm() for u in units])
        rel=np.array([u.value if u.is_null() else 0. for u in units])
        return absolute, rel

    def resolve(self, width, height):
        '''
            concrete sizes of tracks in a viewport (width, height) in cm

            absolute tracks take their sizes
            relative ('null') tracks share the space left
                with `respect`, same scale for both axes

            return dict
                widths, heights: np.ndarray, in cm
                cells: dict name ==> (x0, y0, x1, y1)
                    in cm, from top-left corner
        '''
        aw, rw=self._split_units(self._widths)
        ah, rh=self._split_units(self._heights)

        left_w=max(width-aw.sum(), 0.)
        left_h=max(height-ah.sum(), 0.)

        sw=left_w/rw.sum() if rw.sum()>0 else 0.
        sh=left_h/rh.sum() if rh.sum()>0 else 0.
        if self._respect:
            scales=[s for s, r in [(sw, rw), (sh, rh)] if r.sum()>0]
            if scales:
                sw=sh=min(scales)

        widths=aw+rw*sw
        heights=ah+rh*sh

        # center if not filled
        x0=max(width-widths.sum(), 0.)/2
        y0=max(height-heights.sum(), 0.)/2
        xs=x0+np.concatenate([[0.], np.cumsum(widths)])
        ys=y0+np.concatenate([[0.], np.cumsum(heights)])

        cells={}
        for c in self._cells:
            cells[c.name]=(xs[c.l], ys[c.t], xs[c.r+1], ys[c.b+1])

        return dict(widths=widths, heights=heights, cells=cells)

    def __repr__(self):
        return '%s(%s, %i x %i, blocks=%s)' % (type(self).__name__,
                    repr(self._name), self.nrow, self.ncol, self.blocks())

# constructors
def _as_grob_matrix(grobs):
    '''
        2d object array of grobs

        None is replaced by `NullGrob`
    '''
    rows=[list(r) for r in grobs]
    nr=len(rows)
    nc=len(rows[0]) if nr else 0
    assert all([len(r)==nc for r in rows]), 'ragged matrix of grobs'

    mat=np.empty((nr, nc), dtype=object)
    for i, r in enumerate(rows):
        for j, g in enumerate(r):
            mat[i, j]=NullGrob() if g is None else g
    return mat

def layout_matrix(name, grobs, widths, heights, z=1):
    '''
        table with a grob in each cell

        Parameters:
            name: str
                block name, cells named as '{name}-{row}-{col}'
                    count from 1

            grobs: 2d array-like of grobs
                (nrow, ncol)

            widths, heights: list of `Unit`
    '''
    mat=_as_grob_matrix(grobs)
    nr, nc=mat.shape
    assert len(widths)==nc and len(heights)==nr, \
        'sizes (%i, %i) mismatch grobs (%i, %i)' % (len(heights), len(widths), nr, nc)

    cells=[]
    for i in range(nr):
        for j in range(nc):
            cells.append(Cell(name, '%s-%i-%i' % (name, i+1, j+1),
                              mat[i, j], i, j, i, j, z))

    return GrobTable(widths, heights, cells, name=name)

def layout_row(name, grobs, widths=None, height=None):
    '''
        one row of grobs

        height: `Unit` or None
            if None, max height of grobs in cm
    '''
    grobs=list(grobs)
    if widths is None:
        widths=null_units(len(grobs))
    if height is None:
        height=Unit(max([g.height_cm() for g in grobs], default=0.), 'cm')
    return layout_matrix(name, [grobs], widths, [height])

def layout_col(name, grobs, heights=None, width=None):
    '''
        one column of grobs

        width: `Unit` or None
            if None, max width of grobs in cm
    '''
    grobs=list(grobs)
    if heights is None:
        heights=null_units(len(grobs))
    if width is None:
        width=Unit(max([g.width_cm() for g in grobs], default=0.), 'cm')
    return layout_matrix(name, [[g] for g in grobs], [width], heights)

def layout_empty_row(widths, name='empty'):
    '''
        table without rows, only column tracks
    '''
    return GrobTable(widths=widths, heights=(), name=name)

def layout_empty_col(heights, name='empty'):
    '''
        table without columns, only row tracks
    '''
    return GrobTable(widths=(), heights=heights, name=name)
