"""Tests for config persistence and input sanitization."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lazynav.runtime import config


class ConfigBehaviorTests(unittest.TestCase):
    def test_show_hidden_round_trip(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "nested" / "config.json"
            with mock.patch("lazynav.runtime.config.CONFIG_PATH", config_path):
                self.assertFalse(config.load_show_hidden())
                config.save_show_hidden(True)
                self.assertTrue(config.load_show_hidden())
                self.assertTrue(config_path.exists())

    def test_theme_name_is_trimmed_and_blank_ignored(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("lazynav.runtime.config.CONFIG_PATH", config_path):
                config.save_theme_name("  ocean ")
                config.save_theme_name("   ")
                self.assertEqual(config.load_theme_name(), "ocean")

    def test_saving_one_key_keeps_others(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("lazynav.runtime.config.CONFIG_PATH", config_path):
                config.save_theme_name("ocean")
                config.save_show_hidden(True)
                self.assertEqual(config.load_config(), {"theme": "ocean", "show_hidden": True})

    def test_malformed_config_falls_back_to_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text("{not json", encoding="utf-8")
            with mock.patch("lazynav.runtime.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})
                self.assertFalse(config.load_show_hidden())
                self.assertIsNone(config.load_theme_name())

    def test_non_object_and_wrong_types_are_ignored(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("lazynav.runtime.config.CONFIG_PATH", config_path):
                config_path.write_text("[1, 2]", encoding="utf-8")
                self.assertEqual(config.load_config(), {})

                config.save_config({"show_hidden": "yes", "theme": 3})
                self.assertFalse(config.load_show_hidden())
                self.assertIsNone(config.load_theme_name())


if __name__ == "__main__":
    unittest.main()
