"""Unit tests for configuration loading.

Tests cover:
- Loading a complete YAML file into AppConfig
- Defaults for missing sections and empty files
- ConfigError for missing or unparsable files
- InvalidConfigError for wrongly shaped values
- Building the tracking set and site context from the config
"""

import tempfile
import unittest
from pathlib import Path

from linkscrub.core.config import AppConfig, get_config_dir, load_config
from linkscrub.core.exceptions import ConfigError, InvalidConfigError, LinkScrubError
from linkscrub.url.site import StaticSite


class TestLoadConfig(unittest.TestCase):
    """Test load_config with files on disk."""

    def setUp(self):
        """Create temporary directory for each test."""
        self.temp_dir = tempfile.TemporaryDirectory()
        self.config_dir = Path(self.temp_dir.name)

    def tearDown(self):
        """Clean up temporary directory."""
        self.temp_dir.cleanup()

    def write(self, text: str) -> Path:
        path = self.config_dir / "linkscrub.yaml"
        path.write_text(text)
        return path

    def test_load_full_config(self):
        """Test that every section is read."""
        path = self.write(
            "site:\n"
            "  url: https://mysite.com/blog\n"
            "tracking:\n"
            "  extra: [session, ref2]\n"
            "  keep: [page]\n"
            "checker:\n"
            "  timeout: 3.5\n"
            "  max_redirects: 2\n"
            "  user_agent: test-agent/1.0\n"
        )

        config = load_config(path)

        self.assertEqual(config.site_url, "https://mysite.com/blog")
        self.assertEqual(config.tracking_extra, ["session", "ref2"])
        self.assertEqual(config.tracking_keep, ["page"])
        self.assertEqual(config.checker_timeout, 3.5)
        self.assertEqual(config.checker_max_redirects, 2)
        self.assertEqual(config.user_agent, "test-agent/1.0")
        self.assertEqual(config.source, path)

    def test_load_accepts_string_path(self):
        path = self.write("site:\n  url: https://mysite.com\n")
        self.assertEqual(load_config(str(path)).site_url, "https://mysite.com")

    def test_empty_file_uses_defaults(self):
        config = load_config(self.write(""))

        self.assertEqual(config.site_url, "")
        self.assertEqual(config.tracking_extra, [])
        self.assertEqual(config.checker_timeout, 10)
        self.assertEqual(config.checker_max_redirects, 5)

    def test_missing_file_raises(self):
        with self.assertRaises(ConfigError):
            load_config(self.config_dir / "missing.yaml")

    def test_invalid_yaml_raises(self):
        path = self.write("site: [unclosed\n")
        with self.assertRaises(ConfigError) as ctx:
            load_config(path)
        self.assertIn("YAML", str(ctx.exception))

    def test_top_level_must_be_mapping(self):
        with self.assertRaises(InvalidConfigError):
            load_config(self.write("- a\n- b\n"))

    def test_section_must_be_mapping(self):
        with self.assertRaises(InvalidConfigError):
            load_config(self.write("tracking: [a, b]\n"))

    def test_tracking_lists_must_hold_strings(self):
        with self.assertRaises(InvalidConfigError):
            load_config(self.write("tracking:\n  extra: [1, 2]\n"))
        with self.assertRaises(InvalidConfigError):
            load_config(self.write("tracking:\n  keep: page\n"))

    def test_timeout_must_be_positive(self):
        for value in ["0", "-1", "fast", "true"]:
            with self.subTest(value=value):
                with self.assertRaises(InvalidConfigError):
                    load_config(self.write(f"checker:\n  timeout: {value}\n"))

    def test_max_redirects_must_be_non_negative_int(self):
        self.assertEqual(load_config(self.write("checker:\n  max_redirects: 0\n")).checker_max_redirects, 0)
        for value in ["-1", "2.5", "many"]:
            with self.subTest(value=value):
                with self.assertRaises(InvalidConfigError):
                    load_config(self.write(f"checker:\n  max_redirects: {value}\n"))

    def test_user_agent_must_be_non_empty(self):
        with self.assertRaises(InvalidConfigError):
            load_config(self.write('checker:\n  user_agent: ""\n'))

    def test_errors_share_base_class(self):
        self.assertTrue(issubclass(InvalidConfigError, ConfigError))
        self.assertTrue(issubclass(ConfigError, LinkScrubError))


class TestAppConfig(unittest.TestCase):
    """Test AppConfig helpers."""

    def test_build_tracking_params(self):
        """Test that tracking.extra extends the built-in set."""
        params = AppConfig(tracking_extra=["session"]).build_tracking_params()

        self.assertIn("session", params)
        self.assertIn("fbclid", params)

    def test_build_tracking_params_is_fresh(self):
        config = AppConfig(tracking_extra=["session"])
        self.assertIsNot(config.build_tracking_params(), config.build_tracking_params())
        self.assertNotIn("session", AppConfig().build_tracking_params())

    def test_site_context(self):
        site = AppConfig(site_url="https://mysite.com").site_context()

        self.assertIsInstance(site, StaticSite)
        self.assertEqual(site.current_site_host(), "mysite.com")
        self.assertIsNone(AppConfig().site_context())

    def test_config_dir(self):
        self.assertEqual(get_config_dir().name, "configs")


if __name__ == "__main__":
    unittest.main()
