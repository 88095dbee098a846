#!/usr/bin/env python3

'''
    theme: explicit configuration of facet rendering

    a `Theme` is passed to every builder,
        instead of looking up global options

    it could be loaded from a YAML file, like
        panel_margin: [0.25, lines]
        strip_text_size: small
        aspect_ratio: null
'''

import numbers

import yaml

from .errors import ConfigurationError
from .size import Unit

__all__=['Theme', 'load_theme']

class Theme:
    '''
        immutable collection of rendering parameters

        fields:
            panel_margin: Unit
                space between adjacent panels

            strip_text_size, axis_text_size: float or str
                fontsize, see `fontsize_in_pts`

            strip_pad: float
                padding around strip text, in points

            axis_tick_length, axis_tick_pad: float
                in points

            aspect_ratio: None or float
                height/width of panel
                if None, ask coordinate system

            panel_background, strip_background, strip_text_colour: str
                colours, passed to drawables as they are
    '''
    _DEFAULTS=dict(
        panel_margin=Unit(0.25, 'lines'),
        strip_text_size='small',
        strip_pad=4.,
        axis_text_size='small',
        axis_tick_length=4.,
        axis_tick_pad=2.,
        aspect_ratio=None,
        panel_background='grey90',
        strip_background='grey80',
        strip_text_colour='grey10',
    )

    def __init__(self, **kwargs):
        '''
            init of theme

            fields not given use default
            unknown field raises ConfigurationError
        '''
        params=dict(self._DEFAULTS)
        for k, v in kwargs.items():
            if k not in params:
                raise ConfigurationError(
                    'unknown theme field: %s, only allow %s'
                        % (repr(k), str(list(self._DEFAULTS.keys()))))
            params[k]=self._norm_field(k, v)

        super().__setattr__('_params', params)

    @staticmethod
    def _norm_field(k, v):
        if k=='panel_margin':
            return _norm_unit(v)

        if k=='aspect_ratio':
            if v is None:
                return v
            if not isinstance(v, numbers.Real) or v<=0:
                raise ConfigurationError(
                    'only allow positive number or None for `aspect_ratio`')
            return float(v)

        return v

    # getter
    def __getattr__(self, prop):
        params=self.__dict__.get('_params', {})
        if prop in params:
            return params[prop]
        raise AttributeError(prop)

    def __setattr__(self, prop, val):
        raise AttributeError('Theme is immutable, use `replace` instead')

    def to_dict(self):
        return dict(self._params)

    def replace(self, **kwargs):
        '''
            return a new theme with some fields changed
        '''
        params=self.to_dict()
        params.update(kwargs)
        return type(self)(**params)

    @classmethod
    def from_dict(cls, d):
        '''
            theme from a mapping

            None means an empty mapping
        '''
        if d is None:
            d={}
        if not isinstance(d, dict):
            raise ConfigurationError(
                'only allow mapping for theme, but got %s' % type(d).__name__)
        return cls(**d)

    def __eq__(self, other):
        if not isinstance(other, Theme):
            return NotImplemented
        return self._params==other._params

    def __repr__(self):
        s=', '.join(['%s=%s' % (k, repr(v)) for k, v in self._params.items()])
        return '%s(%s)' % (type(self).__name__, s)

def _norm_unit(v):
    '''
        normalize value to `Unit`

        accept:
            Unit
            float: in cm
            (value, unit)
    '''
    if isinstance(v, Unit):
        return v

    if isinstance(v, numbers.Real):
        return Unit(v, 'cm')

    if isinstance(v, (list, tuple)) and len(v)==2:
        val, u=v
        if u=='null':
            raise ConfigurationError('only allow absolute unit for margin')
        return Unit(val, u)

    raise ConfigurationError('unexpected value for unit: %s' % repr(v))

# load from file
def load_theme(fileobj):
    '''
        load theme from YAML file

        Parameters
            fileobj: str, path object or file-like object
                specify input file

                str or path object: refer to location of the file

                file-like object: like file handle or `StringIO`
    '''
    if not hasattr(fileobj, 'read'):
        with open(fileobj) as f:
            return load_theme(f)

    return Theme.from_dict(yaml.safe_load(fileobj))
