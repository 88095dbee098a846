"""Tests for the package logger setup."""

import logging
import sys

from gridfacet import configure_logging, get_logger, layout_grid


def _stderr_handlers(logger):
    return [h for h in logger.handlers
            if isinstance(h, logging.StreamHandler) and h.stream is sys.stderr]


def test_module_loggers_under_package():
    assert get_logger().name == 'gridfacet'
    assert get_logger('gridfacet.layout').parent is get_logger()


def test_configure_from_env(monkeypatch):
    monkeypatch.setenv('GRIDFACET_LOG_LEVEL', 'debug')
    logger = get_logger()
    saved = logger.handlers[:], logger.level
    try:
        configure_logging(force=True)
        assert logger.level == logging.DEBUG
        assert len(_stderr_handlers(logger)) == 1

        # second call does not stack handlers
        configure_logging('WARNING')
        assert len(_stderr_handlers(logger)) == 1
        assert logger.level == logging.WARNING
    finally:
        logger.handlers[:] = saved[0]
        logger.setLevel(saved[1])


def test_messages_formatted_lazily(caplog, groups3):
    caplog.set_level(logging.DEBUG, logger='gridfacet')
    layout_grid(groups3, cols=['g'])

    records = [r for r in caplog.records if r.msg.startswith('layout trained')]
    assert len(records) == 1
    assert records[0].args == (3, (1, 3), False)
    assert records[0].getMessage() == \
        'layout trained: 3 panels in grid (1, 3), margins=False'
