import logging
import unittest

import pytest

from pyalign.core.exceptions import ConfigError
from pyalign.logger import (
    ColoredFormatter,
    LogContext,
    LoggerConfig,
    LogLevel,
    get_logger,
    setup_logger,
)


class TestSetupLogger(unittest.TestCase):

    def setUp(self):
        self.name = "pyalign.tests.logger"

    def tearDown(self):
        logger = logging.getLogger(self.name)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        logger.setLevel(logging.NOTSET)
        logger.propagate = True

    def test_console_handler(self):
        logger = setup_logger(self.name, "DEBUG")
        self.assertEqual(logger.level, logging.DEBUG)
        self.assertEqual(len(logger.handlers), 1)
        self.assertIsInstance(logger.handlers[0].formatter, ColoredFormatter)

    def test_repeat_setup_replaces_handlers(self):
        setup_logger(self.name, "INFO")
        logger = setup_logger(self.name, "WARNING")
        self.assertEqual(len(logger.handlers), 1)
        self.assertEqual(logger.level, logging.WARNING)

    def test_no_console(self):
        logger = setup_logger(self.name, "INFO", console=False)
        self.assertEqual(logger.handlers, [])

    def test_unknown_level(self):
        with self.assertRaises(ConfigError):
            setup_logger(self.name, "LOUD")

    def test_get_logger(self):
        self.assertIs(get_logger(self.name), logging.getLogger(self.name))

    def test_trace_level(self):
        logger = setup_logger(self.name, "TRACE", console=False)
        self.assertEqual(logging.getLevelName(LogLevel.TRACE.value), "TRACE")
        with self.assertLogs(self.name, level=LogLevel.TRACE.value) as logs:
            logger.trace("raw heading %.1f", 12.0)
        self.assertIn("raw heading 12.0", logs.output[0])

    def test_log_context(self):
        logger = setup_logger(self.name, "INFO", console=False)
        with LogContext(logger, "ERROR"):
            self.assertEqual(logger.level, logging.ERROR)
        self.assertEqual(logger.level, logging.INFO)


def test_log_file(tmp_path):
    name = "pyalign.tests.logfile"
    log_file = tmp_path / "alignment.log"
    logger = setup_logger(name, "INFO", log_file=str(log_file), console=False)
    try:
        logger.info("target selected")
        logger.debug("hidden")
        for handler in logger.handlers:
            handler.flush()
        text = log_file.read_text()
        assert "target selected" in text
        assert "hidden" not in text
        # file output carries no color codes
        assert "\033[" not in text
    finally:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()


def test_colored_formatter_leaves_record_untouched():
    record = logging.LogRecord("pyalign", logging.WARNING, __file__, 1, "stale fix", None, None)
    text = ColoredFormatter('%(levelname)s - %(message)s').format(record)
    assert "\033[33m" in text
    assert record.levelname == "WARNING"


def test_logger_config_from_dict():
    config = LoggerConfig()
    config.configure_from_dict({
        'default_level': 'WARNING',
        'console': False,
        'module_levels': {'pyalign.tests.module': 'DEBUG'},
    })
    assert config.default_level == 'WARNING'
    assert config.console is False
    assert config.get_level_for_module('pyalign.tests.module') == 'DEBUG'
    assert config.get_level_for_module('pyalign.other') == 'WARNING'


def test_logger_config_unknown_level():
    with pytest.raises(ConfigError):
        LoggerConfig().set_module_level('pyalign.tests.module', 'VERBOSE')
