#!/usr/bin/env python3
"""
Unit tests for automatic logger injection functionality.
"""

import logging
import unittest

from stubs import LoggingServiceStub, ServiceStub

from switchboard import AutoLoggerManager, Container


class TestAutoLoggerManager(unittest.TestCase):
    """Test automatic logger management."""

    def test_should_auto_inject_logger(self):
        """Test logger auto-injection detection."""
        self.assertTrue(AutoLoggerManager.should_auto_inject_logger(logging.Logger))
        self.assertFalse(AutoLoggerManager.should_auto_inject_logger(str))
        self.assertFalse(AutoLoggerManager.should_auto_inject_logger(None))

    def test_logger_name_for(self):
        """Test logger names derived from owners."""
        self.assertEqual(AutoLoggerManager.logger_name_for(LoggingServiceStub), "stubs.LoggingServiceStub")
        self.assertEqual(AutoLoggerManager.logger_name_for(None), "__unknown__")

    def test_logger_for(self):
        """Test that the logger comes from the logging module registry."""
        logger = AutoLoggerManager.logger_for(LoggingServiceStub)

        self.assertIsInstance(logger, logging.Logger)
        self.assertIs(logger, logging.getLogger("stubs.LoggingServiceStub"))


class TestLoggerInjection(unittest.TestCase):
    """Test loggers injected into constructors and callables."""

    def setUp(self):
        self.container = Container()

    def test_constructor_gets_class_logger(self):
        """Test that a constructor receives a logger named after its class."""
        instance = self.container.make(LoggingServiceStub)

        self.assertEqual(instance.logger.name, "stubs.LoggingServiceStub")
        self.assertIsInstance(instance.service, ServiceStub)

    def test_function_gets_function_logger(self):
        """Test that a function receives a logger named after itself."""

        def handler(logger: logging.Logger) -> logging.Logger:
            return logger

        logger = self.container.call(handler)

        self.assertEqual(logger.name, f"{__name__}.{handler.__qualname__}")

    def test_named_entry_wins(self):
        """Test that an entry named 'logger' is preferred."""
        custom = logging.getLogger("custom")
        self.container.set("logger", custom)

        self.assertIs(self.container.make(LoggingServiceStub).logger, custom)

    def test_type_entry_wins(self):
        """Test that an entry keyed by logging.Logger is preferred."""
        shared = logging.getLogger("shared")
        self.container.instance(logging.Logger, shared)

        self.assertIs(self.container.make(LoggingServiceStub).logger, shared)

    def test_override_wins(self):
        """Test that an explicit logger is passed through."""
        explicit = logging.getLogger("explicit")

        self.assertIs(self.container.make(LoggingServiceStub, {"logger": explicit}).logger, explicit)


if __name__ == "__main__":
    unittest.main()
