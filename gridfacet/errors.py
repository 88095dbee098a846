#!/usr/bin/env python3

'''
    errors raised by facet

    user-facing mistakes (bad facet expression, unknown `scales`, ...)
        raise `ConfigurationError`
    broken internal invariants are left to `assert`
'''

__all__=['FacetError', 'ConfigurationError']

class FacetError(Exception):
    '''
        base class of errors in facet
    '''
    pass

class ConfigurationError(FacetError, ValueError):
    '''
        invalid configuration of facet

        subclass of ValueError,
            such that old code catching ValueError still works
    '''
    pass
