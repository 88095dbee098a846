#!/usr/bin/env python3

'''
    logging utilities for gridfacet

    library modules only get a logger:
        from ._log import get_logger
        logger=get_logger(__name__)

    scripts or applications could turn on output by
        from gridfacet import configure_logging
        configure_logging('DEBUG')

    nothing is attached to the root logger
'''

import logging
import os
import sys

__all__=['get_logger', 'configure_logging']

ROOT_NAME='gridfacet'

DEFAULT_FMT='%(asctime)s [%(levelname)s] %(name)s:%(lineno)d:%(funcName)s: %(message)s'
DEFAULT_DATEFMT='%Y-%m-%d %H:%M:%S'

def get_logger(name=None):
    '''
        get a logger by name

        if None, return the package logger
    '''
    if name is None:
        name=ROOT_NAME
    return logging.getLogger(name)

def configure_logging(level=None, fmt=None, datefmt=None, force=False):
    '''
        configure output of the package logger (never root)

        Parameters:
            level: None, str or int
                logging level

                if None, use env `GRIDFACET_LOG_LEVEL`,
                    or 'INFO' if unset

            fmt, datefmt: None or str
                format of message and date

            force: bool, default False
                if True, remove existed handlers before adding new one
                otherwise, skip if a stderr handler already exists
    '''
    if level is None:
        level=os.environ.get('GRIDFACET_LOG_LEVEL', 'INFO')
    if isinstance(level, str):
        level=getattr(logging, level.upper(), logging.INFO)

    logger=logging.getLogger(ROOT_NAME)
    logger.setLevel(level)

    if fmt is None:
        fmt=DEFAULT_FMT
    if datefmt is None:
        datefmt=DEFAULT_DATEFMT

    if force:
        for h in logger.handlers[:]:
            h.close()
            logger.removeHandler(h)
    else:
        for h in logger.handlers:
            if isinstance(h, logging.StreamHandler) and h.stream is sys.stderr:
                return

    console=logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(logging.Formatter(fmt=fmt, datefmt=datefmt))
    logger.addHandler(console)
