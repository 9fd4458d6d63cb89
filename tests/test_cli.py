"""Tests for the linkscrub command line interface."""

import tempfile
import unittest
from pathlib import Path

from typer.testing import CliRunner

from linkscrub import __version__
from linkscrub.cli import app


class TestCLI(unittest.TestCase):
    """Test CLI commands through typer's CliRunner."""

    def setUp(self):
        """Create a config file for each test."""
        self.runner = CliRunner()
        self.temp_dir = tempfile.TemporaryDirectory()
        self.config = Path(self.temp_dir.name) / "linkscrub.yaml"
        self.config.write_text(
            "site:\n"
            "  url: https://mysite.com\n"
            "tracking:\n"
            "  extra: [session]\n"
            "  keep: [ref]\n"
        )

    def tearDown(self):
        """Clean up temporary directory."""
        self.temp_dir.cleanup()

    def invoke(self, *args: str, input: str = None):
        return self.runner.invoke(app, ["--config", str(self.config), *args], input=input)

    def lines(self, result) -> list[str]:
        return [line for line in result.stdout.splitlines() if line]

    def test_strip(self):
        result = self.invoke(
            "strip",
            "https://example.com/page?utm_source=fb&product_id=789",
            "invalid-url",
        )

        self.assertEqual(result.exit_code, 0)
        self.assertEqual(self.lines(result), ["https://example.com/page?product_id=789", "invalid-url"])

    def test_strip_uses_config_extra_and_keep(self):
        """Test that tracking.extra is removed and tracking.keep retained."""
        result = self.invoke("strip", "https://example.com/?session=1&ref=abc&fbclid=2")

        self.assertEqual(result.exit_code, 0)
        self.assertEqual(self.lines(result), ["https://example.com/?ref=abc"])

    def test_strip_custom_and_keep_options(self):
        result = self.invoke(
            "strip",
            "https://example.com/?color=red&fbclid=2",
            "--custom", "color",
            "--keep", "fbclid",
        )

        self.assertEqual(self.lines(result), ["https://example.com/?fbclid=2"])

    def test_sanitize_from_stdin(self):
        stdin = (
            "https://example.com?utm_source=test&fbclid=123\n"
            "invalid-url\n"
            "https://example.com\n"
            "https://shop.com?gclid=456&category=shoes\n"
        )
        result = self.invoke("sanitize", input=stdin)

        self.assertEqual(result.exit_code, 0)
        self.assertEqual(self.lines(result), ["https://example.com", "https://shop.com?category=shoes"])

    def test_extract_from_file(self):
        text_file = Path(self.temp_dir.name) / "post.txt"
        text_file.write_text("Read https://a.com/x?utm_source=nl and https://a.com/x then https://b.com/ today\n")

        raw = self.invoke("extract", str(text_file))
        clean = self.invoke("extract", str(text_file), "--sanitize")

        self.assertEqual(self.lines(raw), ["https://a.com/x?utm_source=nl", "https://a.com/x", "https://b.com/"])
        self.assertEqual(self.lines(clean), ["https://a.com/x", "https://b.com/"])

    def test_extract_missing_file(self):
        result = self.invoke("extract", str(Path(self.temp_dir.name) / "nope.txt"))
        self.assertEqual(result.exit_code, 1)

    def test_domains(self):
        result = self.invoke("domains", input="https://a.com/1\nhttps://b.com/2\nhttps://a.com/3\n")
        self.assertEqual(sorted(self.lines(result)), ["a.com", "b.com"])

    def test_filter(self):
        stdin = "https://mysite.com/a.png\nhttps://other.com/b.png\nhttps://other.com/page\n"

        external = self.invoke("filter", "--location", "external", input=stdin)
        images = self.invoke("filter", "--location", "external", "--type", "image", input=stdin)
        unknown = self.invoke("filter", "--type", "document", input=stdin)

        self.assertEqual(self.lines(external), ["https://other.com/b.png", "https://other.com/page"])
        self.assertEqual(self.lines(images), ["https://other.com/b.png"])
        self.assertEqual(self.lines(unknown), [])

    def test_relative(self):
        result = self.invoke("relative", "https://mysite.com/page?x=1", "https://other.com/page")
        self.assertEqual(self.lines(result), ["/page?x=1", "https://other.com/page"])

    def test_relative_site_option(self):
        result = self.invoke("relative", "https://other.com/page", "--site", "https://other.com")
        self.assertEqual(self.lines(result), ["/page"])

    def test_check(self):
        result = self.invoke("check", "https://youtube.com/watch?v=abc&utm_source=x")

        self.assertEqual(result.exit_code, 0)
        self.assertIn("utm_source", result.stdout)
        self.assertIn("video_platform", result.stdout)

    def test_params_search(self):
        result = self.invoke("params", "--search", "UTM")
        names = self.lines(result)

        self.assertIn("utm_source", names)
        self.assertTrue(all("utm" in name.lower() for name in names))

    def test_params_include_config_extra(self):
        self.assertIn("session", self.lines(self.invoke("params")))

    def test_version(self):
        result = self.invoke("version")

        self.assertEqual(result.exit_code, 0)
        self.assertIn(__version__, result.stdout)

    def test_missing_config_fails(self):
        result = self.runner.invoke(app, ["--config", "/nonexistent/linkscrub.yaml", "params"])
        self.assertEqual(result.exit_code, 1)

    def test_invalid_config_fails(self):
        self.config.write_text("checker:\n  timeout: -5\n")
        result = self.invoke("strip", "https://example.com/")
        self.assertEqual(result.exit_code, 1)

    def test_version_ignores_broken_config(self):
        """Test that version works even when the config cannot be loaded."""
        self.config.write_text("checker:\n  timeout: -5\n")

        broken = self.invoke("version")
        missing = self.runner.invoke(app, ["--config", "/nonexistent/linkscrub.yaml", "version"])

        self.assertEqual(broken.exit_code, 0)
        self.assertIn(__version__, broken.stdout)
        self.assertEqual(missing.exit_code, 0)


if __name__ == "__main__":
    unittest.main()
