#!/usr/bin/env python3

'''
    relative sizes of panel rows and columns

    fixed space: all columns with same width, rows with same height
        heights scaled by aspect ratio
    free space: width of column proportional to span of its x scale,
        height of row to span of its y scale
'''

from .size import Unit, null_units
from ._log import get_logger

__all__=['SPAN_EPS', 'span_of', 'resolve_aspect', 'allocate_sizes']

logger=get_logger(__name__)

# min span, to avoid track with zero size
SPAN_EPS=1e-8

def span_of(r):
    '''
        span of range (min, max)
            clamped to `SPAN_EPS` if not positive
    '''
    lo, hi=r
    d=hi-lo
    if not d>0:
        logger.debug('degenerate range %r, span clamped', r)
        return SPAN_EPS
    return d

def resolve_aspect(theme, coord, free, panel_range=None):
    '''
        aspect ratio of panels and whether to respect it

        ratio from theme first,
            or from coordinate system if both scales fixed

        return (aspect_ratio, respect)
            (1, False) if no ratio found
    '''
    aspect_ratio=theme.aspect_ratio
    if aspect_ratio is None and not free['x'] and not free['y'] \
       and coord is not None and panel_range is not None:
        aspect_ratio=coord.aspect(panel_range)

    if aspect_ratio is None:
        return 1., False
    return aspect_ratio, True

def allocate_sizes(layout, x_ranges, y_ranges, space_free=False, aspect_ratio=1.):
    '''
        widths of grid columns and heights of grid rows

        Parameters:
            layout: LayoutTable

            x_ranges, y_ranges: dict
                scale group ==> (min, max)

            space_free: bool
                if True, size proportional to span of scale

            aspect_ratio: float
                height/width of panel, used only for fixed space

        return (widths, heights): lists of `Unit` in 'null'
    '''
    if not space_free:
        widths=null_units(layout.ncol)
        heights=null_units(layout.nrow, aspect_ratio)
        return widths, heights

    sx=layout.scale_groups('x')
    sy=layout.scale_groups('y')

    widths=[Unit(span_of(x_ranges[sx[p]])) for p in layout.first_row_panels()]
    heights=[Unit(span_of(y_ranges[sy[p]])) for p in layout.first_col_panels()]
    return widths, heights
