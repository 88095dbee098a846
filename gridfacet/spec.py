#!/usr/bin/env python3

'''
    specification of grid facet

    parse user arguments:
        facets: 'rows ~ cols' expression, pair (rows, cols) or mapping
        scales: 'fixed', 'free_x', 'free_y', 'free'
        space: 'fixed', 'free'
    to an immutable `FacetSpec`
'''

import enum
from collections import abc

from .errors import ConfigurationError
from .labeller import get_labeller
from ._tools_facet import squeeze_nested, confirm_arg_in

__all__=['Scales', 'Space', 'FacetSpec', 'parse_facets']

# closed enumerations
class Scales(enum.Enum):
    FIXED='fixed'
    FREE_X='free_x'
    FREE_Y='free_y'
    FREE='free'

    @property
    def free_x(self):
        return self in (Scales.FREE_X, Scales.FREE)

    @property
    def free_y(self):
        return self in (Scales.FREE_Y, Scales.FREE)

class Space(enum.Enum):
    FIXED='fixed'
    FREE='free'

def _to_enum(cls, val, name):
    '''
        convert str (or enum member) to member of enum `cls`
    '''
    if isinstance(val, cls):
        return val

    valids=[m.value for m in cls]
    confirm_arg_in(val, valids, name, exc=ConfigurationError)
    return cls(val)

# facets expression
NO_VAR='.'

def _parse_side(side):
    '''
        parse one side of facets to tuple of variable names

        accept None, str like 'a + b', or (nested) list of str
    '''
    if side is None:
        return ()

    names=[]
    for t in squeeze_nested(side):
        if not isinstance(t, str):
            raise ConfigurationError(
                'only allow str for facet variable, but got %s' % repr(t))
        names.extend([s.strip() for s in t.split('+')])

    names=[s for s in names if s and s!=NO_VAR]
    if len(set(names))!=len(names):
        raise ConfigurationError('duplicated facet variable in %s' % repr(side))

    return tuple(names)

def parse_facets(facets):
    '''
        parse facets to pair (rows, cols)

        Parameters:
            facets: str, pair, or mapping
                str: 'rows ~ cols', like 'a + b ~ c', '. ~ c'
                    '.' for no variable in that side

                pair: (rows, cols)
                    each could be None, str, or list of str

                mapping: with keys 'rows', 'cols'
    '''
    if isinstance(facets, str):
        parts=facets.split('~')
        if len(parts)!=2:
            raise ConfigurationError(
                'facets expression must be like \'rows ~ cols\', '
                'but got %s' % repr(facets))
        rows, cols=parts
    elif isinstance(facets, abc.Mapping):
        unknown=set(facets.keys())-{'rows', 'cols'}
        if unknown:
            raise ConfigurationError(
                'only allow keys \'rows\', \'cols\' in facets, '
                'but got %s' % str(sorted(unknown)))
        rows, cols=facets.get('rows'), facets.get('cols')
    elif isinstance(facets, abc.Sequence) and len(facets)==2:
        rows, cols=facets
    else:
        raise ConfigurationError(
            'unexpected facets: %s' % repr(facets))

    rows=_parse_side(rows)
    cols=_parse_side(cols)

    common=set(rows) & set(cols)
    if common:
        raise ConfigurationError(
            'variables used in both rows and cols: %s' % str(sorted(common)))

    return rows, cols

# spec
class FacetSpec:
    '''
        immutable specification of a grid facet
    '''
    _ROW_STRIP_SIDES=['right', 'left']

    def __init__(self, rows=(), cols=(), margins=False,
                       scales='fixed', space='fixed',
                       labeller='label_value', as_table=True,
                       drop=True, row_strip='right'):
        '''
            init of spec

            Parameters:
                rows, cols: tuple of str
                    variables to facet in rows/cols
                    at least one must be non-empty

                margins: bool
                    whether to add margin row/col

                scales: str or `Scales`
                    'fixed', 'free_x', 'free_y', 'free'

                space: str or `Space`
                    'fixed', 'free'

                labeller: str or callable
                    see `get_labeller`

                as_table: bool, default True
                    if True, first level at top, like table
                    otherwise, first level at bottom, like plot

                drop: bool, default True
                    if True, only observed combinations of levels
                    otherwise, full cross-product of levels in each side

                row_strip: 'right' or 'left'
                    side to place strips of rows
        '''
        rows=_parse_side(rows)
        cols=_parse_side(cols)
        if len(rows)+len(cols)==0:
            raise ConfigurationError('Must specify at least one variable to facet by')

        scales=_to_enum(Scales, scales, 'scales')
        space=_to_enum(Space, space, 'space')
        confirm_arg_in(row_strip, self._ROW_STRIP_SIDES, 'row_strip',
                        exc=ConfigurationError)

        params=dict(rows=rows, cols=cols, margins=bool(margins),
                    scales=scales, space=space,
                    labeller=get_labeller(labeller),
                    as_table=bool(as_table), drop=bool(drop),
                    row_strip=row_strip)
        for k, v in params.items():
            super().__setattr__('_'+k, v)

    def __setattr__(self, prop, val):
        raise AttributeError('FacetSpec is immutable')

    # getter
    rows=property(lambda self: self._rows)
    cols=property(lambda self: self._cols)
    margins=property(lambda self: self._margins)
    scales=property(lambda self: self._scales)
    space=property(lambda self: self._space)
    labeller=property(lambda self: self._labeller)
    as_table=property(lambda self: self._as_table)
    drop=property(lambda self: self._drop)
    row_strip=property(lambda self: self._row_strip)

    @property
    def free(self):
        '''
            dict of free flags for x, y
        '''
        return dict(x=self._scales.free_x, y=self._scales.free_y)

    @property
    def space_is_free(self):
        return self._space is Space.FREE

    @property
    def variables(self):
        return self._rows+self._cols

    def __repr__(self):
        return '%s(rows=%s, cols=%s, margins=%s, scales=%s, space=%s)' % \
                    (type(self).__name__, self._rows, self._cols,
                     self._margins, self._scales.value, self._space.value)
