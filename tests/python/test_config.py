"""Unit tests for configuration loading."""

import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock
from shellwords.config import CONFIG_ENV_VAR, Config, get_config_path, load_config
from shellwords.errors import ConfigError


class TestConfig(unittest.TestCase):
    """Test configuration loading."""

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmpdir.cleanup)

    def write_config(self, content: str) -> Path:
        """Write a configuration file and return its path."""
        path = Path(self.tmpdir.name) / "shellwords.toml"
        path.write_text(content, encoding="utf-8")
        return path

    def test_missing_file_gives_defaults(self):
        """Test that a missing file gives the default configuration."""
        config = load_config(Path(self.tmpdir.name) / "missing.toml")
        self.assertEqual(Config(), config)
        self.assertEqual("lines", config.split_format)
        self.assertTrue(config.skip_comments)

    def test_load_values(self):
        """Test reading every supported key."""
        path = self.write_config(
            '[split]\nformat = "json"\n\n[check]\nskip_comments = false\n'
        )
        config = load_config(path)
        self.assertEqual("json", config.split_format)
        self.assertFalse(config.skip_comments)

    def test_partial_file(self):
        """Test that unset keys keep their defaults."""
        path = self.write_config('[split]\nformat = "null"\n')
        config = load_config(path)
        self.assertEqual("null", config.split_format)
        self.assertTrue(config.skip_comments)

    def test_invalid_format(self):
        """Test that an unknown output format is rejected."""
        path = self.write_config('[split]\nformat = "yaml"\n')
        with self.assertRaises(ConfigError):
            load_config(path)

    def test_invalid_skip_comments(self):
        """Test that a non-boolean skip_comments is rejected."""
        path = self.write_config('[check]\nskip_comments = "yes"\n')
        with self.assertRaises(ConfigError):
            load_config(path)

    def test_section_not_a_table(self):
        """Test that a section given as a plain value is rejected."""
        path = self.write_config("split = 3\n")
        with self.assertRaises(ConfigError):
            load_config(path)

    def test_malformed_toml(self):
        """Test that unparsable TOML is rejected."""
        path = self.write_config("[split\nformat = \n")
        with self.assertRaises(ConfigError):
            load_config(path)

    def test_env_var_overrides_path(self):
        """Test that SHELLWORDS_CONFIG names the configuration file."""
        path = self.write_config('[split]\nformat = "json"\n')
        with mock.patch.dict(os.environ, {CONFIG_ENV_VAR: str(path)}):
            self.assertEqual(path, get_config_path())
            self.assertEqual("json", load_config().split_format)

    def test_default_path(self):
        """Test that the default file lives in the user config directory."""
        with mock.patch.dict(os.environ, {CONFIG_ENV_VAR: ""}):
            self.assertEqual("shellwords.toml", get_config_path().name)


if __name__ == "__main__":
    unittest.main()
