"""Tracking parameter removal.

This module strips analytics and attribution parameters from URLs while
leaving functional parameters alone. Stripping is a projection: running
it twice with the same policy gives the same result as running it once.
"""

import logging
from collections.abc import Iterable
from typing import Optional

from linkscrub.bulk.deduper import URLDeduper
from linkscrub.cleaner.tracking import RemovalPolicy, TrackingParameterSet
from linkscrub.url.parser import is_valid, key_in, parse


logger = logging.getLogger(__name__)


class URLCleaner:
    """Remove tracking parameters from URLs.

    The effective removal set of every call is
    ``(tracking set | custom) - keep``: custom names are removed for that
    call only, keep names are never removed for that call.
    """

    def __init__(
        self,
        params: Optional[TrackingParameterSet] = None,
        *,
        deduper: Optional[URLDeduper] = None,
    ):
        """Initialize URLCleaner.

        Args:
            params: Shared tracking set (creates one from the built-in table if None)
            deduper: URLDeduper instance used by sanitize (creates default if None)
        """
        self.params = params if params is not None else TrackingParameterSet()
        self.deduper = deduper or URLDeduper()

    def strip(
        self,
        url: str,
        custom: Iterable[str] = (),
        keep: Iterable[str] = (),
    ) -> str:
        """Strip tracking parameters from a URL.

        Args:
            url: URL to clean
            custom: Extra names to remove for this call
            keep: Names to keep for this call, even if tracked or in custom

        Returns:
            Cleaned URL; invalid URLs and URLs with nothing to remove are
            returned unchanged
        """
        parsed = parse(url)
        if parsed is None or not parsed.query:
            return url

        removal = RemovalPolicy.of(custom, keep).effective(self.params)
        kept = [pair for pair in parsed.query if not key_in(pair[0], removal)]
        if len(kept) == len(parsed.query):
            return url

        return parsed.with_query(kept).geturl()

    def strip_multiple(
        self,
        urls: Iterable[str],
        custom: Iterable[str] = (),
        keep: Iterable[str] = (),
    ) -> list[str]:
        """Strip every URL; same length and order, invalid URLs pass through."""
        custom, keep = tuple(custom), tuple(keep)
        return [self.strip(url, custom, keep) for url in urls]

    def sanitize(
        self,
        urls: Iterable[str],
        custom: Iterable[str] = (),
        keep: Iterable[str] = (),
    ) -> list[str]:
        """Validate, strip and deduplicate URLs.

        Unlike strip_multiple, invalid URLs are dropped here.

        Args:
            urls: URLs to sanitize
            custom: Extra names to remove
            keep: Names to keep

        Returns:
            Valid, cleaned URLs without duplicates, in first-occurrence order
        """
        valid = [url.strip() for url in urls if is_valid(url.strip())]
        cleaned = self.strip_multiple(valid, custom, keep)
        result = self.deduper.remove_duplicates(cleaned)
        logger.debug(f"Sanitized {len(valid)} valid URLs into {len(result)} unique URLs")
        return result

    def has_tracking(self, url: str) -> bool:
        """Check if URL carries parameters from the tracking set.

        Only the shared tracking set is consulted, never a per-call policy.
        """
        return bool(self.tracking_params_in(url))

    def tracking_params_in(self, url: str) -> list[str]:
        """Query keys of a URL that belong to the tracking set, in order."""
        parsed = parse(url)
        if parsed is None or not parsed.query:
            return []
        lookup = self.params.lookup()
        return [key for key, _ in parsed.query if key_in(key, lookup)]

    def extend(self, names: Iterable[str]) -> int:
        """Add names to the shared tracking set."""
        return self.params.extend(names)

    def get_params(self) -> list[str]:
        """Snapshot of the shared tracking set."""
        return self.params.names()
