#!/usr/bin/env python3

'''
    axes at left and bottom edges of panel grid

    one axis for each grid column (bottom) and each grid row (left)
        x scale is shared along a column, y scale along a row,
        so the first panel of each is enough
'''

from .table import layout_row, layout_col

__all__=['facet_axes']

def facet_axes(panel_info, coord, theme, widths=None, heights=None):
    '''
        build axes

        Parameters:
            panel_info: PanelInfo
                layout and ranges

            coord: Coord
                render axes by
                    `render_axis_h`, `render_axis_v`

            theme: Theme

            widths, heights: None or list of `Unit`
                sizes of panel columns/rows

        return dict
            'b': row of bottom axes
            'l': column of left axes
    '''
    layout=panel_info.layout
    margin=theme.panel_margin

    # horizontal axes
    grobs=[coord.render_axis_h(panel_info.panel_range(p), theme)
                for p in layout.first_row_panels()]
    axis_b=layout_row('axis-b', grobs, widths=widths).add_col_space(margin)

    # vertical axes
    grobs=[coord.render_axis_v(panel_info.panel_range(p), theme)
                for p in layout.first_col_panels()]
    axis_l=layout_col('axis-l', grobs, heights=heights).add_row_space(margin)

    return dict(b=axis_b, l=axis_l)
