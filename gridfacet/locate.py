#!/usr/bin/env python3

'''
    locate data records in panels of a layout

    a record goes to the panel with same levels of facet variables
    with margins, it also goes to
        margin row panel: rows variables as '(all)'
        margin col panel: cols variables as '(all)'
        grand margin panel

    records with levels not in layout are dropped silently,
        that is, an empty contribution to panels

    variables missing in data are not used to match,
        then records are repeated across all their levels
'''

import numpy as np
import pandas as pd

from .layout import MARGIN_LEVEL
from ._log import get_logger

__all__=['locate_pairs', 'locate_grid', 'assign_panels']

logger=get_logger(__name__)

_ROWID='.rowid'

def _margin_variants(keys, layout, present):
    '''
        copies of key frame with margin levels

        a copy for a side is made only if data has variables of that side
    '''
    rows=[k for k in layout.rows if k in present]
    cols=[k for k in layout.cols if k in present]

    variants=[keys]
    if not layout.margins:
        return variants

    sides=[]
    if rows:
        sides.append(rows)
    if cols:
        sides.append(cols)
    if len(sides)==2:
        sides.append(rows+cols)

    for names in sides:
        k=keys.copy()
        for name in names:
            k[name]=MARGIN_LEVEL
        variants.append(k)

    return variants

def locate_pairs(data, layout):
    '''
        pairs of (position of record, panel id)

        return DataFrame with columns '.rowid', 'PANEL'
            sorted by record position and then panel id
    '''
    present=[k for k in layout.variables if k in data.columns]

    keys=pd.DataFrame({k: data[k].astype(object).to_numpy() for k in present})
    keys[_ROWID]=np.arange(len(data))

    lay=layout.frame[['PANEL', *present]]

    variants=_margin_variants(keys, layout, present)
    if present:
        pairs=[v.merge(lay, on=present, how='inner') for v in variants]
    else:
        pairs=[keys.merge(lay, how='cross')]

    pairs=pd.concat(pairs, ignore_index=True)[[_ROWID, 'PANEL']]
    pairs=pairs.drop_duplicates()
    pairs=pairs.sort_values([_ROWID, 'PANEL'], kind='mergesort')\
               .reset_index(drop=True)

    ndrop=len(data)-pairs[_ROWID].nunique()
    if ndrop>0:
        logger.debug('%i records not in any panel, dropped', ndrop)

    return pairs

def locate_grid(data, layout):
    '''
        data with a column 'PANEL'

        records are repeated if in several panels (margins)
            index of data is kept
    '''
    pairs=locate_pairs(data, layout)

    result=data.iloc[pairs[_ROWID].to_numpy()].copy()
    result['PANEL']=pairs['PANEL'].to_numpy()
    return result

def assign_panels(data, layout):
    '''
        list of panel ids for each record, in order of data

        empty list for record not in any panel
    '''
    pairs=locate_pairs(data, layout)

    result=[[] for _ in range(len(data))]
    for i, p in zip(pairs[_ROWID].tolist(), pairs['PANEL'].tolist()):
        result[i].append(p)
    return result
