# File: tests/integration/test_main.py
"""
Main entry point tests: logging setup, demo session and CLI arguments.
"""

import io
import logging
import os
import shutil
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest.mock import Mock, patch

from storeypark.application.responses import STATUS_HEADER
from storeypark.config import StoreyConfig
from storeypark.main import create_service, main, run_demo, setup_logging


class TestSetupLogging(unittest.TestCase):
    """Logging configuration"""

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()
        self.root = logging.getLogger()
        self.saved_handlers = self.root.handlers[:]
        self.saved_level = self.root.level

    def tearDown(self):
        for handler in self.root.handlers[:]:
            handler.close()
            self.root.removeHandler(handler)
        for handler in self.saved_handlers:
            self.root.addHandler(handler)
        self.root.setLevel(self.saved_level)
        shutil.rmtree(self.temp_dir)

    def test_file_handler_created(self):
        log_file = os.path.join(self.temp_dir, "logs", "storey.log")
        config = StoreyConfig(log_level="DEBUG", log_file=log_file)

        with redirect_stdout(io.StringIO()):
            setup_logging(config)
            logging.getLogger("StoreyService").info("hello from test")

        for handler in self.root.handlers:
            handler.flush()

        self.assertEqual(self.root.level, logging.DEBUG)
        with open(log_file) as f:
            content = f.read()
        self.assertIn("StoreyService - INFO - hello from test", content)

    def test_stream_only_without_log_file(self):
        out = io.StringIO()
        with redirect_stdout(out):
            setup_logging(StoreyConfig(log_level="WARNING"))
        self.assertEqual(len(self.root.handlers), 1)
        self.assertIs(self.root.handlers[0].stream, out)
        self.assertEqual(self.root.level, logging.WARNING)


class TestDemo(unittest.TestCase):
    """Scripted demo session"""

    def test_run_demo_output(self):
        lines = run_demo(create_service(StoreyConfig(capacity=6)))

        self.assertEqual(lines[:6], [
            "",
            "Allocated slot number: 1",
            "Allocated slot number: 2",
            "Allocated slot number: 3",
            "Slot number 2 is free",
            "Allocated slot number: 2",
        ])
        status = lines[6].splitlines()
        self.assertEqual(status[0], STATUS_HEADER)
        self.assertEqual(len(status), 4)
        self.assertIn("KA-01-HH-7777", status[2])
        self.assertEqual(lines[7:], ["KA-01-HH-1234", "1", "2", "Not found"])

    def test_run_demo_on_tiny_level(self):
        lines = run_demo(create_service(StoreyConfig(capacity=1)))
        self.assertEqual(lines[1], "Allocated slot number: 1")
        self.assertEqual(lines[2], "Sorry, parking lot is full")
        self.assertEqual(lines[4], "Not found")


class TestMain(unittest.TestCase):
    """Command-line entry point"""

    @patch('storeypark.main.setup_logging', return_value=Mock())
    @patch('storeypark.main.StoreyConfig.from_env', return_value=StoreyConfig())
    def test_main_runs_demo(self, mock_from_env, mock_setup_logging):
        out = io.StringIO()
        with redirect_stdout(out):
            code = main(["--capacity", "4", "--strategy", "free_heap"])

        self.assertEqual(code, 0)
        mock_setup_logging.assert_called_once()
        config = mock_setup_logging.call_args[0][0]
        self.assertEqual(config.capacity, 4)
        self.assertEqual(config.strategy, "free_heap")
        printed = out.getvalue().splitlines()
        self.assertEqual(printed[0], "Allocated slot number: 1")

    @patch('storeypark.main.setup_logging')
    @patch('storeypark.main.StoreyConfig.from_env', return_value=StoreyConfig())
    def test_main_rejects_bad_capacity(self, mock_from_env, mock_setup_logging):
        err = io.StringIO()
        with redirect_stderr(err):
            code = main(["--capacity", "0"])

        self.assertEqual(code, 2)
        self.assertIn("Invalid configuration", err.getvalue())
        mock_setup_logging.assert_not_called()


if __name__ == "__main__":
    unittest.main(verbosity=2)
