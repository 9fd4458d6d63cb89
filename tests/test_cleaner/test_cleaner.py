"""Unit tests for tracking parameter removal.

Tests for URLCleaner including the removal policy (custom/keep), order
preservation, idempotence and the strip_multiple/sanitize asymmetry.
"""

import sys
import unittest
from pathlib import Path

# Add src to path for imports
src_path = Path(__file__).parent.parent.parent / "src"
sys.path.insert(0, str(src_path))

from linkscrub.cleaner.cleaner import URLCleaner
from linkscrub.cleaner.tracking import TrackingParameterSet


class TestStrip(unittest.TestCase):
    """Test suite for URLCleaner.strip."""

    def setUp(self):
        """Set up test fixtures."""
        self.cleaner = URLCleaner()

    def test_strip_removes_tracking(self):
        """Test that tracking parameters are removed and functional ones kept."""
        url = "https://example.com/page?utm_source=facebook&fbclid=abc123&gclid=def456&product_id=789"
        self.assertEqual(self.cleaner.strip(url), "https://example.com/page?product_id=789")

    def test_strip_all_params_drops_question_mark(self):
        url = "https://example.com/page?utm_source=x&utm_medium=y"
        self.assertEqual(self.cleaner.strip(url), "https://example.com/page")

    def test_strip_keeps_fragment(self):
        url = "https://example.com/page?utm_campaign=spring&color=red#reviews"
        self.assertEqual(self.cleaner.strip(url), "https://example.com/page?color=red#reviews")

    def test_strip_preserves_order(self):
        """Test that retained pairs keep their relative order."""
        url = "https://example.com/?size=m&utm_source=a&color=red&fbclid=1&page=2&size=l"
        self.assertEqual(
            self.cleaner.strip(url),
            "https://example.com/?size=m&color=red&page=2&size=l",
        )

    def test_strip_is_idempotent(self):
        """Test that stripping twice equals stripping once."""
        for url in [
            "https://example.com/page?utm_source=facebook&product_id=789",
            "https://example.com/?a=1&&fbclid=2&flag",
            "https://example.com/",
            "https://shop.com?gclid=456&category=shoes",
        ]:
            with self.subTest(url=url):
                once = self.cleaner.strip(url, ["category"], ["fbclid"])
                self.assertEqual(self.cleaner.strip(once, ["category"], ["fbclid"]), once)

    def test_strip_unchanged_when_nothing_tracked(self):
        """Test that URLs without tracking parameters come back byte-identical."""
        url = "https://example.com/search?q=a%20b&&page=2&flag"
        self.assertEqual(self.cleaner.strip(url), url)

    def test_strip_invalid_passes_through(self):
        for url in ["invalid-url", "", "/relative?utm_source=x"]:
            with self.subTest(url=url):
                self.assertEqual(self.cleaner.strip(url), url)

    def test_strip_keeps_hostless_urls_intact(self):
        """Test that scheme, path and fragment of host-less URLs keep their shape."""
        cases = {
            "file:relative/doc.txt?utm_source=x&a=1": "file:relative/doc.txt?a=1",
            "file:///srv/doc.txt?utm_source=x#part": "file:///srv/doc.txt#part",
            "mailto:me@example.com?subject=Hi&utm_source=news": "mailto:me@example.com?subject=Hi",
        }
        for url, expected in cases.items():
            with self.subTest(url=url):
                self.assertEqual(self.cleaner.strip(url), expected)

    def test_strip_encoded_key(self):
        """Test that percent-encoded tracking keys are recognized."""
        url = "https://example.com/?utm%5Fsource=x&id=1"
        self.assertEqual(self.cleaner.strip(url), "https://example.com/?id=1")

    def test_strip_preserves_encoding_of_kept_pairs(self):
        url = "https://example.com/?q=caf%C3%A9+au+lait&utm_term=x"
        self.assertEqual(self.cleaner.strip(url), "https://example.com/?q=caf%C3%A9+au+lait")

    def test_custom_adds_to_removal(self):
        url = "https://example.com/?product_id=789&session=abc"
        self.assertEqual(
            self.cleaner.strip(url, custom=["session"]),
            "https://example.com/?product_id=789",
        )

    def test_custom_is_per_call(self):
        """Test that custom names do not leak into later calls."""
        url = "https://example.com/?session=abc"
        self.cleaner.strip(url, custom=["session"])
        self.assertEqual(self.cleaner.strip(url), url)
        self.assertNotIn("session", self.cleaner.get_params())

    def test_keep_dominates(self):
        """Test that kept names survive even if tracked or listed in custom."""
        url = "https://example.com/?fbclid=1&utm_source=2&session=3"
        result = self.cleaner.strip(url, custom=["session"], keep=["fbclid", "session"])
        self.assertEqual(result, "https://example.com/?fbclid=1&session=3")

    def test_keep_overrides_global_list(self):
        """Test that keep wins regardless of what the global list contains."""
        params = TrackingParameterSet()
        params.extend(["page", "category", "search"])
        cleaner = URLCleaner(params)

        url = "https://example.com/?page=2&utm_source=x&category=a&search=q&fbclid=1"
        self.assertEqual(
            cleaner.strip(url, [], ["page", "category", "search"]),
            "https://example.com/?page=2&category=a&search=q",
        )
        self.assertEqual(cleaner.strip(url), "https://example.com/")


class TestBulk(unittest.TestCase):
    """Test suite for strip_multiple and sanitize."""

    def setUp(self):
        """Set up test fixtures."""
        self.cleaner = URLCleaner()

    def test_sanitize(self):
        """Test that invalid entries are dropped and post-strip duplicates collapse."""
        urls = [
            "https://example.com?utm_source=test&fbclid=123",
            "invalid-url",
            "https://example.com",
            "https://shop.com?gclid=456&category=shoes",
        ]
        self.assertEqual(
            self.cleaner.sanitize(urls),
            ["https://example.com", "https://shop.com?category=shoes"],
        )

    def test_sanitize_trims(self):
        self.assertEqual(
            self.cleaner.sanitize(["  https://example.com/a?utm_source=x \n"]),
            ["https://example.com/a"],
        )

    def test_strip_multiple_keeps_invalid(self):
        """Test that strip_multiple passes invalid URLs through, unlike sanitize."""
        urls = ["https://example.com/?utm_source=x", "invalid-url", "https://example.com/?utm_source=x"]

        stripped = self.cleaner.strip_multiple(urls)
        self.assertEqual(stripped, ["https://example.com/", "invalid-url", "https://example.com/"])

        sanitized = self.cleaner.sanitize(urls)
        self.assertEqual(sanitized, ["https://example.com/"])

    def test_strip_multiple_applies_policy(self):
        urls = ["https://example.com/?session=1&fbclid=2", "https://example.com/?fbclid=3"]
        self.assertEqual(
            self.cleaner.strip_multiple(urls, custom=["session"], keep=["fbclid"]),
            ["https://example.com/?fbclid=2", "https://example.com/?fbclid=3"],
        )

    def test_empty_input(self):
        self.assertEqual(self.cleaner.strip_multiple([]), [])
        self.assertEqual(self.cleaner.sanitize([]), [])


class TestTrackingQueries(unittest.TestCase):
    """Test suite for has_tracking/extend/get_params."""

    def setUp(self):
        """Set up test fixtures."""
        self.cleaner = URLCleaner(TrackingParameterSet())

    def test_has_tracking(self):
        self.assertTrue(self.cleaner.has_tracking("https://example.com/?gclid=1"))
        self.assertFalse(self.cleaner.has_tracking("https://example.com/?product_id=1"))
        self.assertFalse(self.cleaner.has_tracking("invalid-url"))

    def test_has_tracking_ignores_call_policy(self):
        """Test that has_tracking consults only the shared set.

        strip removes a name passed in custom, but has_tracking still
        answers for the default policy.
        """
        url = "https://example.com/?session=1"

        self.assertEqual(self.cleaner.strip(url, custom=["session"]), "https://example.com/")
        self.assertFalse(self.cleaner.has_tracking(url))

    def test_tracking_params_in(self):
        url = "https://example.com/?fbclid=1&page=2&utm_source=3"
        self.assertEqual(self.cleaner.tracking_params_in(url), ["fbclid", "utm_source"])

    def test_extend_affects_shared_set(self):
        """Test that extend is visible to every cleaner sharing the set."""
        params = TrackingParameterSet()
        first = URLCleaner(params)
        second = URLCleaner(params)

        self.assertEqual(first.extend(["session"]), 1)

        self.assertTrue(second.has_tracking("https://example.com/?session=1"))
        self.assertIn("session", second.get_params())

    def test_separate_sets_are_isolated(self):
        other = URLCleaner(TrackingParameterSet())
        self.cleaner.extend(["session"])
        self.assertFalse(other.has_tracking("https://example.com/?session=1"))

    def test_get_params_is_snapshot(self):
        """Test that get_params returns a copy, not a live view."""
        snapshot = self.cleaner.get_params()
        snapshot.append("not_tracked")
        self.assertNotIn("not_tracked", self.cleaner.get_params())
        self.assertIn("fbclid", snapshot)


if __name__ == "__main__":
    unittest.main()
