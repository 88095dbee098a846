#!/usr/bin/env python3

'''
    useful tools for facet task
'''

from collections import abc

# check function
def check_axis(axis):
    '''
        check axis
    '''
    axs=list('xy')
    if axis not in axs:
        raise ValueError('only allow x, y for axis')

def is_horizontal_side(side):
    '''
        whether a side is along x-axis

        strips or axes on 'top'/'bottom' are horizontal
    '''
    sides=['top', 'bottom', 'left', 'right']
    confirm_arg_in(side, sides, 'side')
    return side in ['top', 'bottom']

# nested collection
def is_scalar_default(v):
    '''
        return True if not `collections.abc.Collection`
            str is also treated as scalar
    '''
    if isinstance(v, str):
        return True
    return not isinstance(v, abc.Collection)

## squeeze to 1d array
def squeeze_nested(elements, is_scalar=is_scalar_default):
    '''
        squeeze nested collection to list
    '''
    if is_scalar(elements):
        return [elements]

    result=[]
    for v in elements:
        if is_scalar(v):
            result.append(v)
            continue

        result.extend(squeeze_nested(v, is_scalar))

    return result

def unique_in_order(elements):
    '''
        drop duplicates, keeping order of first appearance
    '''
    result=[]
    for v in elements:
        if v not in result:
            result.append(v)
    return result

# argument check
def confirm_arg_in(arg, valids, name=None, exc=ValueError):
    '''
        confirm `arg` in a valid list
        otherwise raise `exc`

        :param name: str, optional
            name of the argument

        :param exc: Exception subclass, default ValueError
            type of error to raise
    '''
    if name is None:
        name='arg'
    else:
        name='`%s`' % name

    if arg not in valids:
        raise exc(
            'only allow %s in %s, but got %s' % (name, repr(list(valids)), repr(arg)))
