# File: tests/unit/test_config.py
"""
Configuration Unit Tests
"""

import logging
import os
import unittest
from unittest.mock import patch

from storeypark.config import StoreyConfig


class TestStoreyConfig(unittest.TestCase):
    """Unit tests for StoreyConfig validation"""

    def test_defaults(self):
        config = StoreyConfig()
        self.assertEqual(config.capacity, 6)
        self.assertTrue(config.unique_plates)
        self.assertEqual(config.strategy, "gap_scan")
        self.assertEqual(config.numeric_log_level, logging.INFO)
        self.assertIsNone(config.log_file)

    def test_log_level_is_normalized(self):
        config = StoreyConfig(log_level="debug")
        self.assertEqual(config.log_level, "DEBUG")
        self.assertEqual(config.numeric_log_level, logging.DEBUG)

    def test_invalid_values(self):
        invalid = [
            {"capacity": 0},
            {"capacity": -1},
            {"capacity": True},
            {"strategy": "nearest"},
            {"log_level": "LOUD"},
        ]
        for kwargs in invalid:
            with self.subTest(**kwargs):
                with self.assertRaises(ValueError):
                    StoreyConfig(**kwargs)


class TestConfigFromEnv(unittest.TestCase):
    """Unit tests for reading STOREYPARK_* variables"""

    def test_empty_environment_gives_defaults(self):
        self.assertEqual(StoreyConfig.from_env({}), StoreyConfig())

    def test_all_variables(self):
        config = StoreyConfig.from_env({
            "STOREYPARK_CAPACITY": "12",
            "STOREYPARK_UNIQUE_PLATES": "off",
            "STOREYPARK_STRATEGY": "free_heap",
            "STOREYPARK_LOG_LEVEL": "warning",
            "STOREYPARK_LOG_FILE": "logs/storey.log",
        })
        self.assertEqual(config.capacity, 12)
        self.assertFalse(config.unique_plates)
        self.assertEqual(config.strategy, "free_heap")
        self.assertEqual(config.log_level, "WARNING")
        self.assertEqual(config.log_file, "logs/storey.log")

    def test_reads_process_environment(self):
        with patch.dict(os.environ, {"STOREYPARK_CAPACITY": "3"}):
            self.assertEqual(StoreyConfig.from_env().capacity, 3)

    def test_invalid_capacity(self):
        with self.assertRaises(ValueError) as ctx:
            StoreyConfig.from_env({"STOREYPARK_CAPACITY": "many"})
        self.assertIn("STOREYPARK_CAPACITY", str(ctx.exception))

    def test_invalid_boolean(self):
        with self.assertRaises(ValueError):
            StoreyConfig.from_env({"STOREYPARK_UNIQUE_PLATES": "maybe"})

    def test_blank_values_are_ignored(self):
        config = StoreyConfig.from_env({"STOREYPARK_STRATEGY": "", "STOREYPARK_LOG_FILE": ""})
        self.assertEqual(config.strategy, "gap_scan")
        self.assertIsNone(config.log_file)


if __name__ == "__main__":
    unittest.main(verbosity=2)
