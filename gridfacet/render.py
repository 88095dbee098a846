#!/usr/bin/env python3

'''
    combine strips, axes and panels into one table

    with row strips on right:
        +--------+--------+---------+
        |        | strip-t|         |
        +--------+--------+---------+
        | axis-l | panel  | strip-r |
        +--------+--------+---------+
        |        | axis-b |         |
        +--------+--------+---------+
    on left, strip-l goes before axis-l
'''

from .sizing import resolve_aspect, allocate_sizes
from .strip import facet_strips
from .axis import facet_axes
from .panels import facet_panels
from ._log import get_logger

__all__=['combine_components', 'facet_render']

logger=get_logger(__name__)

def combine_components(strips, axes, panels):
    '''
        stitch components

        Parameters:
            strips: dict
                't' and one of 'r', 'l'

            axes: dict
                'b', 'l'

            panels: GrobTable
    '''
    axis_l, axis_b=axes['l'], axes['b']
    strip_t=strips['t']

    if 'r' in strips:
        strip_r=strips['r']
        centre=axis_l.cbind(panels).cbind(strip_r)
        left, right=axis_l.widths, strip_r.widths
    else:
        strip_l=strips['l']
        centre=strip_l.cbind(axis_l).cbind(panels)
        left, right=strip_l.widths+axis_l.widths, ()

    top=strip_t.add_cols(right).add_cols(left, pos=0)
    bottom=axis_b.add_cols(right).add_cols(left, pos=0)

    complete=centre.rbind(top, pos=0).rbind(bottom)
    return complete.with_respect(panels.respect).with_name('layout')

def facet_render(spec, panel_info, coord, theme, geom_grobs=None):
    '''
        render grid facet to a `GrobTable`

        Parameters:
            spec: FacetSpec

            panel_info: PanelInfo
                layout and trained ranges

            coord: Coord

            theme: Theme

            geom_grobs: None or list of layers
                see `facet_panels`
    '''
    layout=panel_info.layout

    aspect_ratio, respect=resolve_aspect(theme, coord, spec.free,
                                         panel_info.panel_range(1))
    widths, heights=allocate_sizes(layout,
                        panel_info.x_ranges, panel_info.y_ranges,
                        space_free=spec.space_is_free,
                        aspect_ratio=aspect_ratio)

    axes=facet_axes(panel_info, coord, theme, widths=widths, heights=heights)
    strips=facet_strips(spec, layout, theme, widths=widths, heights=heights)
    panels=facet_panels(panel_info, coord, theme, geom_grobs,
                        widths=widths, heights=heights, respect=respect)

    complete=combine_components(strips, axes, panels)
    logger.debug('facet rendered: table %s, respect=%s', complete.shape, respect)
    return complete
