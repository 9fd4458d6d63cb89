"""Bulk filters and projections over URL collections.

Filters return the subsequence of their input that satisfies a predicate,
in input order. Unrecognized selectors select nothing rather than raise.
"""

import logging
from collections.abc import Iterable
from typing import Optional

from linkscrub.classifier.classifier import URLClassifier
from linkscrub.core.constants import FileType, Location
from linkscrub.url.normalizer import SiteLike, URLNormalizer
from linkscrub.url.parser import get_scheme, is_valid, parse


logger = logging.getLogger(__name__)


class URLFilter:
    """Filter and project collections of URLs."""

    def __init__(
        self,
        *,
        normalizer: Optional[URLNormalizer] = None,
        classifier: Optional[URLClassifier] = None,
    ):
        """Initialize URLFilter.

        Args:
            normalizer: URLNormalizer carrying the reference site (creates default if None)
            classifier: URLClassifier for type filters (creates default if None)
        """
        self.normalizer = normalizer or URLNormalizer()
        self.classifier = classifier or URLClassifier()

    # ------------------------------------------------------------------
    # Validity
    # ------------------------------------------------------------------

    def validate(self, urls: Iterable[str]) -> dict[str, bool]:
        """Map each trimmed URL to its validity."""
        return {url.strip(): is_valid(url.strip()) for url in urls}

    def filter_valid(self, urls: Iterable[str]) -> list[str]:
        """Trimmed URLs that pass validation."""
        return [url for url, valid in self._trimmed_validity(urls) if valid]

    def filter_invalid(self, urls: Iterable[str]) -> list[str]:
        """Trimmed URLs that fail validation."""
        return [url for url, valid in self._trimmed_validity(urls) if not valid]

    def _trimmed_validity(self, urls: Iterable[str]) -> list[tuple[str, bool]]:
        return [(url.strip(), is_valid(url.strip())) for url in urls]

    # ------------------------------------------------------------------
    # Selectors
    # ------------------------------------------------------------------

    def filter_by_location(
        self,
        urls: Iterable[str],
        location: str,
        site_host: Optional[str] = None,
    ) -> list[str]:
        """Filter URLs by external/internal status.

        Args:
            urls: URLs to filter
            location: "external" or "internal" (case-insensitive)
            site_host: Reference host (defaults to the normalizer's site)

        Returns:
            Matching URLs; empty for an unrecognized location
        """
        selector = location.lower()
        if selector == Location.EXTERNAL.value:
            return [url for url in urls if self.normalizer.is_external(url, site_host)]
        if selector == Location.INTERNAL.value:
            return [url for url in urls if self.normalizer.is_same_domain(url, site_host)]

        logger.debug(f"Unknown location selector '{location}'")
        return []

    def filter_by_protocol(self, urls: Iterable[str], protocol: str) -> list[str]:
        """URLs whose scheme equals protocol (case-insensitive)."""
        wanted = protocol.lower()
        return [url for url in urls if get_scheme(url) == wanted]

    def filter_by_type(self, urls: Iterable[str], file_type: str) -> list[str]:
        """Filter URLs by file type.

        Args:
            urls: URLs to filter
            file_type: "image", "video" or "audio" (case-insensitive)

        Returns:
            Matching URLs; empty for an unrecognized type
        """
        checks = {
            FileType.IMAGE.value: self.classifier.is_image,
            FileType.VIDEO.value: self.classifier.is_video,
            FileType.AUDIO.value: self.classifier.is_audio,
        }
        check = checks.get(file_type.lower())
        if check is None:
            logger.debug(f"Unknown file type selector '{file_type}'")
            return []

        return [url for url in urls if check(url)]

    # ------------------------------------------------------------------
    # Projections
    # ------------------------------------------------------------------

    def get_domains(self, urls: Iterable[str]) -> list[str]:
        """Unique hosts of the valid URLs, empties dropped.

        The result has set semantics; callers must not rely on its order.
        """
        parsed = (parse(url.strip()) for url in urls)
        return list(dict.fromkeys(p.host for p in parsed if p is not None and p.host))

    def to_https(self, urls: Iterable[str]) -> list[str]:
        return [self.normalizer.to_https(url) for url in urls]

    def to_http(self, urls: Iterable[str]) -> list[str]:
        return [self.normalizer.to_http(url) for url in urls]

    def make_relative(self, urls: Iterable[str], site: SiteLike = None) -> list[str]:
        return [self.normalizer.make_relative(url, site) for url in urls]
