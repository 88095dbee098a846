#!/usr/bin/env python3

'''
    layout table of grid facet

    A layout table has one row for each panel, with columns
        PANEL: panel id, 1..N
        ROW, COL: position in grid, count from 1
        variables of rows and cols: levels of the panel
        SCALE_X, SCALE_Y: id of scale group the panel uses

    Levels of variables are those observed in data
        ordered by categories for categorical column
            or sorted otherwise

    With margins, an extra level '(all)' is appended
        to rows and to cols, for all variables in that side
'''

import collections
import itertools

import numpy as np
import pandas as pd

from .errors import ConfigurationError
from ._log import get_logger

__all__=['MARGIN_LEVEL', 'LayoutTable', 'LayoutRow',
         'layout_grid', 'resolve_scale_groups', 'train_layout']

logger=get_logger(__name__)

MARGIN_LEVEL='(all)'

LayoutRow=collections.namedtuple('LayoutRow',
                'panel row col values scale_x scale_y')

class LayoutTable:
    '''
        read-only table of panels

        the frame is copied at init
            and only copies are handed out
    '''
    def __init__(self, frame, rows=(), cols=(), margins=False):
        '''
            init of layout table

            Parameters:
                frame: pd.DataFrame
                    with columns PANEL, ROW, COL, variables,
                        and optional SCALE_X, SCALE_Y (default 1)

                rows, cols: tuple of str
                    variables in rows and cols

                margins: bool
                    whether margin panels included
        '''
        frame=frame.copy()
        for k in ['SCALE_X', 'SCALE_Y']:
            if k not in frame.columns:
                frame[k]=1

        cols_frame=['PANEL', 'ROW', 'COL', *rows, *cols, 'SCALE_X', 'SCALE_Y']
        frame=frame[cols_frame].sort_values('PANEL').reset_index(drop=True)

        # invariants
        n=len(frame)
        assert np.array_equal(frame['PANEL'].to_numpy(), np.arange(1, n+1)), \
                'panel ids must be dense 1..N'
        assert not frame.duplicated(['ROW', 'COL']).any(), \
                'duplicated grid position in layout'

        super().__setattr__('_frame', frame)
        super().__setattr__('_rows', tuple(rows))
        super().__setattr__('_cols', tuple(cols))
        super().__setattr__('_margins', bool(margins))

    def __setattr__(self, prop, val):
        raise AttributeError('LayoutTable is read-only')

    # getter
    rows=property(lambda self: self._rows)
    cols=property(lambda self: self._cols)
    margins=property(lambda self: self._margins)

    @property
    def frame(self):
        '''
            copy of the layout as DataFrame
        '''
        return self._frame.copy()

    @property
    def variables(self):
        return self._rows+self._cols

    def __len__(self):
        return len(self._frame)

    @property
    def npanel(self):
        return len(self._frame)

    @property
    def nrow(self):
        return int(self._frame['ROW'].max())

    @property
    def ncol(self):
        return int(self._frame['COL'].max())

    @property
    def shape(self):
        return self.nrow, self.ncol

    def _column(self, k):
        a=self._frame[k].to_numpy().copy()
        a.flags.writeable=False
        return a

    panels =property(lambda self: self._column('PANEL'))
    row_pos=property(lambda self: self._column('ROW'))
    col_pos=property(lambda self: self._column('COL'))
    scale_x=property(lambda self: self._column('SCALE_X'))
    scale_y=property(lambda self: self._column('SCALE_Y'))

    # iterate
    def _to_layout_row(self, rec):
        values={k: rec[k] for k in self.variables}
        return LayoutRow(int(rec['PANEL']), int(rec['ROW']), int(rec['COL']),
                         values, int(rec['SCALE_X']), int(rec['SCALE_Y']))

    def __iter__(self):
        for _, rec in self._frame.iterrows():
            yield self._to_layout_row(rec)

    def get_panel(self, panel):
        '''
            LayoutRow of a panel id
        '''
        assert 1<=panel<=len(self), 'panel %s not in layout' % repr(panel)
        return self._to_layout_row(self._frame.iloc[panel-1])

    def panel_at(self, row, col):
        '''
            panel id at grid position (row, col)

            return None if no panel there
        '''
        m=(self._frame['ROW']==row) & (self._frame['COL']==col)
        if not m.any():
            return None
        return int(self._frame.loc[m, 'PANEL'].iloc[0])

    ## panels along edge
    def first_row_panels(self):
        '''
            panels in first grid row, ordered by COL
                one for each grid column
        '''
        f=self._frame
        return f.loc[f['ROW']==1].sort_values('COL')['PANEL'].tolist()

    def first_col_panels(self):
        '''
            panels in first grid column, ordered by ROW
        '''
        f=self._frame
        return f.loc[f['COL']==1].sort_values('ROW')['PANEL'].tolist()

    ## scale groups
    def scale_groups(self, axis):
        '''
            mapping panel id ==> scale group id along `axis`
        '''
        k='SCALE_%s' % axis.upper()
        return dict(zip(self._frame['PANEL'].tolist(), self._frame[k].tolist()))

    def with_scale_groups(self, scale_x, scale_y):
        '''
            new layout with given scale groups
        '''
        frame=self._frame.copy()
        frame['SCALE_X']=np.asarray(scale_x, dtype=int)
        frame['SCALE_Y']=np.asarray(scale_y, dtype=int)
        return type(self)(frame, self._rows, self._cols, self._margins)

    ## levels for strips
    def side_values(self, side):
        '''
            distinct values of variables in one side

            Parameters:
                side: 'rows' or 'cols'

            return DataFrame
                one row for each grid row (or col), ordered by position
                columns are variables in the side
                    maybe no column
        '''
        if side=='rows':
            pos, names='ROW', list(self._rows)
        elif side=='cols':
            pos, names='COL', list(self._cols)
        else:
            raise ValueError('only allow side in [\'rows\', \'cols\']')

        f=self._frame[[pos, *names]].drop_duplicates(pos).sort_values(pos)
        return f[names].reset_index(drop=True)

    def __repr__(self):
        return '%s(npanel=%i, shape=%s, rows=%s, cols=%s)' % \
                (type(self).__name__, len(self), self.shape,
                 self._rows, self._cols)

# levels of variable
def _levels_of(s):
    '''
        ordered levels observed in a Series

        categorical: order of categories
        otherwise: sorted,
            or order of appearance if not sortable
        missing value goes last
    '''
    has_na=s.isna().any()
    s=s.dropna()

    if isinstance(s.dtype, pd.CategoricalDtype):
        observed=set(s.unique().tolist())
        levels=[c for c in s.cat.categories if c in observed]
    else:
        levels=pd.unique(s).tolist()
        try:
            levels=sorted(levels)
        except TypeError:
            pass

    if has_na:
        levels.append(np.nan)
    return levels

def _level_codes(s, levels):
    '''
        map value to index in `levels`, missing value to last
    '''
    non_na=[t for t in levels if not pd.isna(t)]
    codes=pd.Categorical(s, categories=non_na).codes.astype(int)
    codes[codes<0]=len(non_na)
    return codes

def _sort_by_levels(df, levels):
    '''
        sort rows of df lexicographically by order of levels
    '''
    names=list(df.columns)
    if not names or len(df)==0:
        return df.reset_index(drop=True)

    keys=pd.DataFrame({k: _level_codes(df[k], levels[k]) for k in names},
                      index=df.index)
    order=keys.sort_values(names, kind='mergesort').index
    return df.loc[order].reset_index(drop=True)

# base combinations
def _norm_datas(datas):
    if isinstance(datas, pd.DataFrame):
        return [datas]
    return list(datas)

def _layout_base(datas, names, drop=True):
    '''
        combinations of variables `names` observed in datas

        return DataFrame with columns `names`, sorted by levels

        layers with all variables give the combinations
        layers with part of variables add their values
            crossed with levels of the missing variables
    '''
    names=list(names)
    if not names:
        return pd.DataFrame(index=[0])

    full=[d[names] for d in datas if all([k in d.columns for k in names])]
    if not full:
        raise ConfigurationError(
            'at least one dataset must contain all facet variables %s' % names)

    base=pd.concat(full, ignore_index=True)
    levels={k: _levels_of(base[k]) for k in names}

    ## layers with part of variables
    extra=[]
    for d in datas:
        has=[k for k in names if k in d.columns]
        if not has or len(has)==len(names):
            continue

        missing=[k for k in names if k not in has]
        part=d[has].drop_duplicates()
        rest=base[missing].drop_duplicates()
        extra.append(part.merge(rest, how='cross')[names])

    if extra:
        base=pd.concat([base, *extra], ignore_index=True)
        levels={k: _levels_of(base[k]) for k in names}

    if base.empty:
        raise ConfigurationError(
            'no observed levels for facet variables %s' % names)

    if drop:
        base=base.drop_duplicates()
    else:
        base=pd.DataFrame(list(itertools.product(*[levels[k] for k in names])),
                          columns=names)

    # object dtype, to hold margin level
    base=base.astype(object)
    return _sort_by_levels(base, levels)

def layout_grid(datas, rows=(), cols=(), margins=False, drop=True, as_table=True):
    '''
        build layout table for a grid of panels

        Parameters:
            datas: pd.DataFrame or list of pd.DataFrame
                data of layers

            rows, cols: tuple of str
                variables to facet in rows and cols

            margins: bool
                if True, add a margin row (for all levels of rows)
                    and a margin column,
                    plus a grand margin panel

            drop: bool
                if False, use full cross-product of levels in each side

            as_table: bool
                if True, first level of rows at top (ROW=1)
                otherwise, at bottom
    '''
    rows, cols=tuple(rows), tuple(cols)
    if len(rows)+len(cols)==0:
        raise ConfigurationError('Must specify at least one variable to facet by')

    datas=_norm_datas(datas)

    base_rows=_layout_base(datas, rows, drop=drop)
    base_cols=_layout_base(datas, cols, drop=drop)
    nr, nc=len(base_rows), len(base_cols)

    # grid position of real levels
    row_pos=np.arange(1, nr+1)
    if not as_table:
        row_pos=row_pos[::-1]
    col_pos=np.arange(1, nc+1)

    # panels in order: real cross-product, margin col, margin row, grand
    entries=[]
    for i, j in itertools.product(range(nr), range(nc)):
        entries.append((i, j, row_pos[i], col_pos[j]))

    margin_rows=margins and len(rows)>0
    margin_cols=margins and len(cols)>0
    if margin_cols:
        for i in range(nr):
            entries.append((i, None, row_pos[i], nc+1))
    if margin_rows:
        for j in range(nc):
            entries.append((None, j, nr+1, col_pos[j]))
    if margin_rows and margin_cols:
        entries.append((None, None, nr+1, nc+1))

    records=[]
    for k, (i, j, r, c) in enumerate(entries):
        rec=dict(PANEL=k+1, ROW=int(r), COL=int(c))
        for names, base, ind in [(rows, base_rows, i), (cols, base_cols, j)]:
            for name in names:
                rec[name]=MARGIN_LEVEL if ind is None else base[name].iloc[ind]
        records.append(rec)

    frame=pd.DataFrame.from_records(records,
                columns=['PANEL', 'ROW', 'COL', *rows, *cols])
    for name in rows+cols:
        frame[name]=frame[name].astype(object)

    layout=LayoutTable(frame, rows, cols, margins=margins)
    logger.debug('layout trained: %i panels in grid %s, margins=%s',
                    len(layout), layout.shape, margins)
    return layout

# scale groups
def resolve_scale_groups(layout, free_x=False, free_y=False):
    '''
        assign scale groups to panels

        x scale is shared along a column:
            SCALE_X = COL if `free_x` else 1
        y scale is shared along a row:
            SCALE_Y = ROW if `free_y` else 1
    '''
    n=len(layout)
    scale_x=layout.col_pos if free_x else np.ones(n, dtype=int)
    scale_y=layout.row_pos if free_y else np.ones(n, dtype=int)
    return layout.with_scale_groups(scale_x, scale_y)

def train_layout(spec, datas):
    '''
        layout table for a `FacetSpec`, with scale groups resolved
    '''
    layout=layout_grid(datas, spec.rows, spec.cols,
                       margins=spec.margins, drop=spec.drop,
                       as_table=spec.as_table)
    free=spec.free
    return resolve_scale_groups(layout, free_x=free['x'], free_y=free['y'])
