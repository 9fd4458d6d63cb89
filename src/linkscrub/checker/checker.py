"""URL reachability checks over HTTP.

This is the only part of linkscrub that touches the network. It sits
behind a narrow contract, ``probe(url, timeout) -> ReachabilityInfo``;
transport failures are reported in ReachabilityInfo.error and never raised.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

import httpx

from linkscrub.core.constants import DEFAULTS, WEB_CONTENT_TYPES
from linkscrub.core.models import ReachabilityInfo
from linkscrub.url.parser import is_valid


logger = logging.getLogger(__name__)

INVALID_URL_ERROR = "invalid url"


class URLChecker:
    """Probe URLs with HEAD requests.

    Redirects are followed up to max_redirects hops. A URL is reachable
    when the final response has a 2xx status.
    """

    def __init__(
        self,
        *,
        timeout: float = DEFAULTS["timeout"],
        max_redirects: int = DEFAULTS["max_redirects"],
        user_agent: str = DEFAULTS["user_agent"],
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        """Initialize URLChecker.

        Args:
            timeout: Default request timeout in seconds (minimum 1)
            max_redirects: Maximum redirect hops to follow
            user_agent: User-Agent header sent with every request
            transport: Custom httpx transport (used by tests)
        """
        self.timeout = timeout
        self.max_redirects = max_redirects
        self.user_agent = user_agent
        self.transport = transport

    @property
    def timeout(self) -> float:
        return self._timeout

    @timeout.setter
    def timeout(self, value: float) -> None:
        self._timeout = max(DEFAULTS["min_timeout"], value)

    def _client_options(self, timeout: Optional[float]) -> dict:
        options = {
            "timeout": timeout if timeout else self.timeout,
            "follow_redirects": True,
            "max_redirects": self.max_redirects,
            "headers": {"User-Agent": self.user_agent},
        }
        if self.transport is not None:
            options["transport"] = self.transport
        return options

    def _head(self, url: str, timeout: Optional[float]) -> tuple[Optional[httpx.Response], Optional[str]]:
        try:
            with httpx.Client(**self._client_options(timeout)) as client:
                return client.head(url), None
        except httpx.TimeoutException as e:
            logger.warning(f"Timed out probing {url}: {e}")
            return None, "timeout"
        except httpx.HTTPError as e:
            logger.warning(f"Failed to probe {url}: {e}")
            return None, str(e) or type(e).__name__

    @staticmethod
    def _to_info(response: Optional[httpx.Response], error: Optional[str]) -> ReachabilityInfo:
        if response is None:
            return ReachabilityInfo(reachable=False, error=error)

        return ReachabilityInfo(
            reachable=200 <= response.status_code < 300,
            status_code=response.status_code,
            final_url=str(response.url),
            content_type=response.headers.get("content-type"),
        )

    def probe(self, url: str, timeout: Optional[float] = None) -> ReachabilityInfo:
        """Probe a single URL.

        Args:
            url: URL to probe
            timeout: Request timeout in seconds (defaults to self.timeout)

        Returns:
            ReachabilityInfo; error is set when the request itself failed
        """
        if not is_valid(url):
            return ReachabilityInfo(reachable=False, error=INVALID_URL_ERROR)

        return self._to_info(*self._head(url, timeout))

    def is_reachable(self, url: str, timeout: Optional[float] = None) -> bool:
        return self.probe(url, timeout).reachable

    def get_status_code(self, url: str, timeout: Optional[float] = None) -> Optional[int]:
        return self.probe(url, timeout).status_code

    def get_final_url(self, url: str, timeout: Optional[float] = None) -> Optional[str]:
        """URL after following redirects, None if the probe failed."""
        return self.probe(url, timeout).final_url

    def is_downloadable(self, url: str, timeout: Optional[float] = None) -> bool:
        """Check if a URL serves a download rather than a web page.

        A URL is downloadable when the response marks itself as an
        attachment, or declares a content type that is not HTML, XML or
        plain text.
        """
        if not is_valid(url):
            return False

        response, _ = self._head(url, timeout)
        if response is None:
            return False

        if "attachment" in response.headers.get("content-disposition", ""):
            return True

        content_type = response.headers.get("content-type", "")
        if not content_type:
            return False

        media_type = content_type.split(";", 1)[0].strip().lower()
        return media_type not in WEB_CONTENT_TYPES

    def check_multiple(self, urls: list[str], timeout: Optional[float] = None) -> dict[str, bool]:
        """Map each URL to its reachability."""
        return {url: self.is_reachable(url, timeout) for url in urls}

    def filter_reachable(self, urls: list[str], timeout: Optional[float] = None) -> list[str]:
        return [url for url in urls if self.is_reachable(url, timeout)]

    async def probe_many(
        self,
        urls: list[str],
        *,
        concurrency: int = DEFAULTS["concurrency"],
        timeout: Optional[float] = None,
    ) -> list[ReachabilityInfo]:
        """Probe URLs concurrently.

        Args:
            urls: URLs to probe
            concurrency: Maximum requests in flight
            timeout: Per-request timeout in seconds

        Returns:
            One ReachabilityInfo per input URL, in input order
        """
        semaphore = asyncio.Semaphore(max(1, concurrency))

        async with httpx.AsyncClient(**self._client_options(timeout)) as client:

            async def probe_one(url: str) -> ReachabilityInfo:
                if not is_valid(url):
                    return ReachabilityInfo(reachable=False, error=INVALID_URL_ERROR)
                async with semaphore:
                    try:
                        response = await client.head(url)
                    except httpx.TimeoutException as e:
                        logger.warning(f"Timed out probing {url}: {e}")
                        return ReachabilityInfo(reachable=False, error="timeout")
                    except httpx.HTTPError as e:
                        logger.warning(f"Failed to probe {url}: {e}")
                        return ReachabilityInfo(reachable=False, error=str(e) or type(e).__name__)
                return self._to_info(response, None)

            return list(await asyncio.gather(*(probe_one(url) for url in urls)))
