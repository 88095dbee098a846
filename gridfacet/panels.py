#!/usr/bin/env python3

'''
    assemble panels: background, content layers and foreground
        stacked in one grob for each panel,
        placed in grid by ROW and COL of layout
'''

from collections import abc

from .grobs import NullGrob, GTree
from .size import null_units
from .table import layout_matrix

__all__=['panel_layer_grobs', 'facet_panels']

def _norm_layer(layer, panels):
    '''
        dict panel id ==> grob for one content layer

        layer could be
            mapping: panel id ==> grob, panels missing are empty
            sequence: grob of panel i at position i-1
    '''
    if isinstance(layer, abc.Mapping):
        unknown=set(layer.keys())-set(panels)
        assert not unknown, \
            'panels %s in content layer not found in layout' % sorted(unknown)
        return dict(layer)

    layer=list(layer)
    assert len(layer)==len(panels), \
        'content layer with %i grobs for %i panels' % (len(layer), len(panels))
    return dict(zip(panels, layer))

def panel_layer_grobs(geom_grobs, panels):
    '''
        list of dict for layers, see `_norm_layer`
    '''
    if geom_grobs is None:
        return []
    return [_norm_layer(layer, panels) for layer in geom_grobs]

def facet_panels(panel_info, coord, theme, geom_grobs=None,
                        widths=None, heights=None, respect=False):
    '''
        table of panels

        Parameters:
            panel_info: PanelInfo

            coord: Coord
                render background and foreground by
                    `render_bg`, `render_fg`

            theme: Theme

            geom_grobs: None or list of layers
                each layer is a mapping (panel id ==> grob)
                    or sequence in order of panel id

            widths, heights: None or list of `Unit`
                sizes of grid columns/rows
                if None, 1 'null' each

            respect: bool
                whether to keep aspect ratio
    '''
    layout=panel_info.layout
    panels=layout.panels.tolist()
    layers=panel_layer_grobs(geom_grobs, panels)

    nrow, ncol=layout.shape
    if widths is None:
        widths=null_units(ncol)
    if heights is None:
        heights=null_units(nrow)

    # empty cell is a null grob
    mat=[[NullGrob() for _ in range(ncol)] for _ in range(nrow)]
    for row in layout:
        p=row.panel
        r=panel_info.panel_range(p)

        bg=coord.render_bg(r, theme)
        fg=coord.render_fg(r, theme)
        content=[layer.get(p, NullGrob()) for layer in layers]

        mat[row.row-1][row.col-1]=GTree([bg, *content, fg], name='panel-%i' % p)

    margin=theme.panel_margin
    panels=layout_matrix('panel', mat, widths, heights).with_respect(respect)
    return panels.add_col_space(margin).add_row_space(margin)
