"""Host identity of the site URLs are judged against.

The normalizer never asks the environment who "we" are; it is handed a
SiteContext. StaticSite covers the common case of a fixed site URL taken
from configuration.
"""

from dataclasses import dataclass
from typing import Protocol, runtime_checkable
from urllib.parse import urlsplit


@runtime_checkable
class SiteContext(Protocol):
    """Host-identity collaborator."""

    def current_site_host(self) -> str:
        ...

    def current_page_url(self) -> str:
        ...


@dataclass
class StaticSite:
    """Site context backed by a fixed site URL.

    Attributes:
        url: Site home URL, e.g. ``https://example.com/blog``
        page_url: URL of the page currently being rendered (optional)
    """
    url: str
    page_url: str = ""

    def current_site_host(self) -> str:
        return (urlsplit(self.url).hostname or "") if self.url else ""

    def current_page_url(self) -> str:
        return self.page_url or self.url

    @property
    def base_path(self) -> str:
        """Path the site is hosted under, without trailing slash."""
        return urlsplit(self.url).path.rstrip("/") if self.url else ""
