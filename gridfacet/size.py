#!/usr/bin/env python3

'''
    Unit of size used in facet layout

    frequently used: inch, points (pt), mm
        - An inch is 25.4 mm.
        - For TeX, 1 pt is 1/72.27 in, which is 0.351459804 mm.
        - For most other softwares, 1 pt is 1/72 in, which is 0.352777778 mm.
          Also called Postscript Point, in TeX this is called a big point (bp)

    Besides absolute units, a track of table could be given in
        'null': relative unit
            share the space left after absolute tracks
        'lines': multiple of line height of default fontsize
'''

import numbers

import matplotlib.pyplot as plt
from matplotlib import font_manager

from .errors import ConfigurationError

__all__=['Unit', 'unit', 'null_units', 'zero_units',
         'convert_unit', 'fontsize_in_pts']

# Unit to inch
Units=dict(
    inches=1.,      # 25.4 mm
    pt_tex=1/72.27, # For TeX, 1 pt is 1/72.27 inches
    points=1/72,    # In typography, a point is 1/72 inches.
                    #    In TeX this is called a big point (bp)
    cm=1/2.54,
    )
Units['mm']=0.1*Units['cm']

## some alias
Units['pts']=Units['points']
Units['inch']=Units['inches']

# line height relative to fontsize
LINE_HEIGHT=1.2

# function

## convert between units
def _unit_in_inch(u):
    if u=='lines':
        return LINE_HEIGHT*fontsize_in_pts()*Units['points']

    if u not in Units:
        raise ConfigurationError(
            'only support units %s, but got %s' % (str(['lines', *Units.keys()]), repr(u)))
    return Units[u]

def convert_unit(src, dest='inch'):
    '''
        convert src unit to another ('inch' by default)
    '''
    d=_unit_in_inch(src)
    if dest[:4]!='inch':
        d=d/_unit_in_inch(dest)

    return d

## fontsize
def fontsize_in_pts(size=None):
    '''
        convert fontsize to value in unit points

        Parameters:
            size: float, None, or str
                font size

                if float,
                    absolute value of fontsize in unit points

                if str,
                    'xx-small', 'x-small', 'small', 'medium', 'large',
                    'x-large', 'xx-large', 'larger', 'smaller'
                see `matplotlib.font_manager.font_scalings`
                    for details
    '''
    if isinstance(size, numbers.Number):
        return size

    fontsize=plt.rcParams['font.size']
    if size is None:
        return fontsize

    if not isinstance(size, str):
        raise ConfigurationError(
            'only support float, str or None for fontsize, '
            'but got %s' % (type(size).__name__))

    font_scalings=font_manager.font_scalings
    if size not in font_scalings:
        raise ConfigurationError(
            'only allow fontsize in %s, '
            'but got \'%s\'' % (str(list(font_scalings.keys())), size))
    s=font_scalings[size]
    return s*fontsize

# unit object
class Unit:
    '''
        size of a track in table

        either absolute, like (0.5, 'cm'),
            or relative, (1, 'null')
    '''
    def __init__(self, value, unit='null'):
        assert isinstance(value, numbers.Real), \
            'only allow real number for value, ' \
            'but got %s' % (type(value).__name__)

        if unit!='null':
            _unit_in_inch(unit)  # check

        self._value=float(value)
        self._unit=unit

    @property
    def value(self):
        return self._value

    @property
    def unit(self):
        return self._unit

    def is_null(self):
        '''
            whether a relative unit
        '''
        return self._unit=='null'

    def to(self, dest='cm'):
        '''
            value in another absolute unit

            raise ValueError for relative unit
        '''
        if self.is_null():
            raise ValueError('cannot convert relative unit to %s' % dest)
        return self._value*convert_unit(self._unit, dest)

    def to_cm(self):
        return self.to('cm')

    # arithmetic
    def __mul__(self, k):
        assert isinstance(k, numbers.Real)
        return Unit(self._value*k, self._unit)

    __rmul__=__mul__

    # compare
    def __eq__(self, other):
        if not isinstance(other, Unit):
            return NotImplemented
        return self._value==other._value and self._unit==other._unit

    def __hash__(self):
        return hash((self._value, self._unit))

    def __repr__(self):
        return '%s(%g, %s)' % (type(self).__name__, self._value, repr(self._unit))

## frequently used constructors
def unit(values, u='null'):
    '''
        list of units from values

        Parameters:
            values: float, or list of float

            u: str
                unit for all values
    '''
    if isinstance(values, numbers.Real):
        values=[values]
    return [Unit(v, u) for v in values]

def null_units(n, value=1):
    '''
        `n` relative units with same value
    '''
    return [Unit(value, 'null')]*n

def zero_units(n):
    '''
        `n` relative units with zero size
    '''
    return null_units(n, value=0)
