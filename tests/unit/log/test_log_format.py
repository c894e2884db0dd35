"""Tests for console logging setup and level markers."""

from __future__ import annotations

import io
import logging
import unittest

from sitenav.log import LOGGER_NAME, SUCCESS, configure_logging, log_success


class ConfigureLoggingTests(unittest.TestCase):
    def tearDown(self) -> None:
        logger = logging.getLogger(LOGGER_NAME)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)
        logger.propagate = True

    def test_info_is_plain_and_errors_are_marked(self) -> None:
        stream = io.StringIO()
        configure_logging(logging.INFO, stream=stream)
        child = logging.getLogger(f"{LOGGER_NAME}.nav_tree.fs")

        child.info("Found %d files", 2)
        child.error("Error reading %s", "/tmp/x")
        log_success(child, "Success! %s generated", "navigation.json")

        lines = stream.getvalue().splitlines()
        self.assertEqual(lines[0], "Found 2 files")
        self.assertEqual(lines[1], "❌ Error reading /tmp/x")
        self.assertEqual(lines[2], "✅ Success! navigation.json generated")

    def test_reconfigure_replaces_handler_and_respects_level(self) -> None:
        first = io.StringIO()
        second = io.StringIO()
        configure_logging(logging.INFO, stream=first)
        logger = configure_logging(logging.WARNING, stream=second)

        logger.info("quiet")
        logger.warning("loud")

        self.assertEqual(len(logger.handlers), 1)
        self.assertEqual(first.getvalue(), "")
        self.assertIn("loud", second.getvalue())
        self.assertNotIn("quiet", second.getvalue())

    def test_success_level_is_between_info_and_warning(self) -> None:
        self.assertGreater(SUCCESS, logging.INFO)
        self.assertLess(SUCCESS, logging.WARNING)
        self.assertEqual(logging.getLevelName(SUCCESS), "SUCCESS")


if __name__ == "__main__":
    unittest.main()
