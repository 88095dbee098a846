#!/usr/bin/env python3

'''
    labellers: functions to make strip labels

    a labeller is called for each level of a facet variable
        labeller(variable, value) ==> str
'''

from .errors import ConfigurationError

__all__=['label_value', 'label_both', 'label_parsed',
         'get_labeller']

def label_value(variable, value):
    '''
        just the value
    '''
    return str(value)

def label_both(variable, value):
    '''
        variable name and value, like 'cyl: 4'
    '''
    return '%s: %s' % (variable, value)

def label_parsed(variable, value):
    '''
        value as mathtext of matplotlib, like '$\\alpha$'
    '''
    return '$%s$' % value

# named labeller
_labellers=dict(
    label_value=label_value,
    label_both=label_both,
    label_parsed=label_parsed,
)

def get_labeller(labeller):
    '''
        return labeller function

        Parameters:
            labeller: str or callable
                if str, name of builtin labeller,
                    'label_value', 'label_both', 'label_parsed'
                    the prefix 'label_' could be omitted
    '''
    if callable(labeller):
        return labeller

    if isinstance(labeller, str):
        name=labeller
        if name not in _labellers:
            name='label_'+name

        if name in _labellers:
            return _labellers[name]

    raise ConfigurationError(
        'only allow callable or labeller in %s, but got %s'
            % (str(list(_labellers.keys())), repr(labeller)))
