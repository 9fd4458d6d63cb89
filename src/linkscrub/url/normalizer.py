"""Scheme and domain normalization.

This module rewrites URLs relative to a reference site. It handles:
- Scheme replacement (http/https) and scheme-less inputs
- External vs. same-site detection
- Relative/absolute conversion against the site base path
- Order-preserving query parameter insertion and removal
"""

import logging
import re
from collections.abc import Iterable, Mapping
from typing import Optional, Union
from urllib.parse import quote_plus, urlsplit

from linkscrub.core.constants import WEB_SCHEMES
from linkscrub.url.parser import (
    get_scheme,
    is_valid,
    join_query,
    key_in,
    parse,
    replace_query,
    split_query,
)
from linkscrub.url.site import SiteContext, StaticSite


logger = logging.getLogger(__name__)

_WEB_SCHEME_RE = re.compile(r"^https?:", re.IGNORECASE)
_WEB_PREFIX_RE = re.compile(r"^https?://", re.IGNORECASE)

SiteLike = Union[SiteContext, str, None]
ParamPairs = Union[Mapping[str, object], Iterable[tuple[str, object]]]


def _as_site(site: SiteLike) -> Optional[SiteContext]:
    if site is None or isinstance(site, SiteContext):
        return site
    return StaticSite(url=site)


def _base_path(site: Optional[SiteContext]) -> str:
    # Only contexts that know their home URL can have a base path
    return getattr(site, "base_path", "") if site is not None else ""


class URLNormalizer:
    """Normalize URLs against a reference site.

    The reference site is a SiteContext (or a plain site URL). Every method
    that needs it also accepts an explicit override, so the normalizer can
    be used without one.
    """

    def __init__(self, site: SiteLike = None):
        """Initialize URLNormalizer.

        Args:
            site: SiteContext or site URL used for external/relative checks
        """
        self.site = _as_site(site)

    @property
    def site_host(self) -> str:
        return self.site.current_site_host().lower() if self.site else ""

    # ------------------------------------------------------------------
    # Scheme handling
    # ------------------------------------------------------------------

    def add_scheme(self, url: str, scheme: str = "https") -> str:
        """Add or replace the scheme of a URL.

        Only http and https are accepted; any other requested scheme
        falls back to https.

        Args:
            url: URL or bare domain (``example.com``)
            scheme: Target scheme

        Returns:
            URL carrying the requested scheme
        """
        if scheme not in WEB_SCHEMES:
            logger.debug(f"Unsupported scheme '{scheme}', falling back to https")
            scheme = "https"

        if _WEB_PREFIX_RE.match(url):
            return _WEB_SCHEME_RE.sub(f"{scheme}:", url, count=1)

        if url.startswith("//"):
            return f"{scheme}:{url}"

        return f"{scheme}://{url}"

    def to_https(self, url: str) -> str:
        return self.add_scheme(url, "https")

    def to_http(self, url: str) -> str:
        return self.add_scheme(url, "http")

    def remove_scheme(self, url: str) -> str:
        """Strip http(s): leaving a protocol-relative URL."""
        return _WEB_SCHEME_RE.sub("", url, count=1)

    def is_https(self, url: str) -> bool:
        return get_scheme(url) == "https"

    # ------------------------------------------------------------------
    # Site relationship
    # ------------------------------------------------------------------

    def is_external(self, url: str, site_host: Optional[str] = None) -> bool:
        """Check if a URL points away from the reference site.

        Invalid and relative URLs are never external; they count as
        same-site.

        Args:
            url: URL to check
            site_host: Reference host (defaults to the configured site)

        Returns:
            True if URL has a host different from the reference host
        """
        parsed = parse(url)
        if parsed is None or not parsed.host:
            return False

        reference = self.site_host if site_host is None else site_host.lower()
        return parsed.host != reference

    def is_same_domain(self, url: str, site_host: Optional[str] = None) -> bool:
        return not self.is_external(url, site_host)

    def make_relative(self, url: str, site: SiteLike = None) -> str:
        """Make a same-site URL relative.

        Scheme, host and the site's base path are dropped; query and
        fragment are kept. External URLs pass through unchanged.

        Args:
            url: URL to relativize
            site: Reference site (defaults to the configured site)

        Returns:
            Path-absolute URL starting with ``/``, or the original URL
        """
        context = _as_site(site) if site is not None else self.site
        site_host = context.current_site_host() if context else ""

        if self.is_external(url, site_host):
            return url

        try:
            parts = urlsplit(url)
        except ValueError:
            return url

        relative = parts.path
        home_path = _base_path(context)
        if home_path and (relative == home_path or relative.startswith(home_path + "/")):
            relative = relative[len(home_path):]

        if parts.query:
            relative += f"?{parts.query}"
        if parts.fragment:
            relative += f"#{parts.fragment}"

        return "/" + relative.lstrip("/")

    def to_absolute(self, url: str, base_url: Optional[str] = None) -> str:
        """Resolve a relative URL against the site (or given base) URL."""
        if is_valid(url):
            return url

        if not base_url and isinstance(self.site, StaticSite):
            base_url = self.site.url
        elif not base_url and self.site is not None:
            base_url = self.add_scheme(self.site_host)

        if not base_url:
            return url

        return base_url.rstrip("/") + "/" + url.lstrip("/")

    def current_clean(self) -> str:
        """Current page URL without its query string."""
        if self.site is None:
            return ""
        return self.site.current_page_url().split("?", 1)[0]

    # ------------------------------------------------------------------
    # Query parameters
    # ------------------------------------------------------------------

    def add_params(self, url: str, pairs: ParamPairs) -> str:
        """Append query parameters, keeping existing ones and their order.

        Keys already present are not replaced; both instances are kept.

        Args:
            url: URL (absolute or relative)
            pairs: Mapping or ordered (key, value) pairs; a None value
                appends a bare key

        Returns:
            URL with parameters appended
        """
        items = pairs.items() if isinstance(pairs, Mapping) else pairs
        added = [
            (quote_plus(str(key)), None if value is None else quote_plus(str(value)))
            for key, value in items
        ]
        if not added:
            return url

        try:
            parts = urlsplit(url)
        except ValueError:
            return url

        query = join_query(split_query(parts.query) + added)
        return replace_query(url, query)

    def remove_params(self, url: str, names: Union[str, Iterable[str]]) -> str:
        """Remove every query pair whose key is in names.

        Returns the input untouched when no pair matches.
        """
        targets = {names} if isinstance(names, str) else set(names)
        if not targets:
            return url

        try:
            parts = urlsplit(url)
        except ValueError:
            return url

        pairs = split_query(parts.query)
        kept = [pair for pair in pairs if not key_in(pair[0], targets)]
        if len(kept) == len(pairs):
            return url

        return replace_query(url, join_query(kept))

    def add_utm(
        self,
        url: str,
        *,
        source: str = "",
        medium: str = "",
        campaign: str = "",
        content: str = "",
        term: str = "",
    ) -> str:
        """Append non-empty utm_* parameters in canonical order."""
        utm = {
            "utm_source": source,
            "utm_medium": medium,
            "utm_campaign": campaign,
            "utm_content": content,
            "utm_term": term,
        }
        return self.add_params(url, [(key, value) for key, value in utm.items() if value])
