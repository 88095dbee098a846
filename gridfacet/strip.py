#!/usr/bin/env python3

'''
    strips: labels of facet variables around panels

    one strip cell for each (grid position, variable)
    several variables in one side are stacked,
        one band for each variable
'''

import numpy as np

from .grobs import StripGrob
from .size import unit, null_units, zero_units
from .table import layout_matrix, layout_empty_row, layout_empty_col
from ._tools_facet import is_horizontal_side

__all__=['build_strip', 'facet_strips']

_SIDE_ABBR=dict(top='t', bottom='b', left='l', right='r')

def build_strip(label_df, labeller, theme, side='top', sizes=None, ntrack=None):
    '''
        build strip for one side

        Parameters:
            label_df: pd.DataFrame
                one row for each grid position (col for 'top', row for 'right')
                one column for each variable

            labeller: callable
                labeller(variable, value) ==> str

            theme: Theme

            side: 'top', 'bottom', 'left', 'right'

            sizes: None or list of `Unit`
                sizes along the side, same as panels
                if None, 1 'null' each

            ntrack: None or int
                num of grid positions,
                    used only when no variable in `label_df`
                if None, use len of `sizes`
    '''
    horizontal=is_horizontal_side(side)
    name='strip-%s' % _SIDE_ABBR[side]
    margin=theme.panel_margin

    # no variable: empty row/col with tracks along the side
    if label_df.shape[1]==0:
        if sizes is None:
            sizes=zero_units(ntrack)
        if horizontal:
            return layout_empty_row(sizes, name=name).add_col_space(margin)
        return layout_empty_col(sizes, name=name).add_row_space(margin)

    n, nvar=label_df.shape
    if sizes is None:
        sizes=null_units(n)
    assert len(sizes)==n, \
        'mismatch between sizes (%i) and labels (%i)' % (len(sizes), n)

    # matrix of labels: (n, nvar)
    grobs=np.empty((n, nvar), dtype=object)
    for j, var in enumerate(label_df.columns):
        for i, v in enumerate(label_df[var].tolist()):
            label=labeller(var, v)
            grobs[i, j]=StripGrob(label, horizontal=horizontal, theme=theme)

    if horizontal:
        grobs=grobs.T

        # each band as high as the highest, as wide as panels
        heights=unit([max([g.height_cm() for g in r]) for r in grobs], 'cm')
        strips=layout_matrix(name, grobs, sizes, heights)
        return strips.add_col_space(margin)

    # each band as wide as the widest, as high as panels
    widths=unit([max([g.width_cm() for g in c]) for c in grobs.T], 'cm')
    strips=layout_matrix(name, grobs, widths, sizes)
    return strips.add_row_space(margin)

def facet_strips(spec, layout, theme, widths=None, heights=None):
    '''
        strips of rows and cols

        return dict
            't': strip on top for cols
            'r' or 'l': strip for rows, side by `spec.row_strip`
    '''
    row_side=spec.row_strip
    return {
        't': build_strip(layout.side_values('cols'), spec.labeller, theme, 'top',
                         sizes=widths, ntrack=layout.ncol),
        _SIDE_ABBR[row_side]: build_strip(layout.side_values('rows'), spec.labeller,
                         theme, row_side, sizes=heights, ntrack=layout.nrow),
    }
