"""URL parsing and validation.

This module decomposes URL strings into ParsedURL values and provides the
loose "is this plausibly a URL" check used everywhere else in linkscrub.
Nothing here raises on bad input: invalid URLs yield None, projections
yield an empty string.
"""

import ipaddress
import re
from typing import Iterable, Optional
from urllib.parse import SplitResult, unquote_plus, urlsplit

from linkscrub.core.constants import HOSTLESS_SCHEMES, Scheme
from linkscrub.core.models import ParsedURL, QueryPair


_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")
_LABEL = r"[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?"
_HOSTNAME_RE = re.compile(rf"^{_LABEL}(?:\.{_LABEL})*\.?$")
_FORBIDDEN_CHARS_RE = re.compile(r"[\s\x00-\x1f\x7f]")


def _split(url: str) -> Optional[SplitResult]:
    try:
        return urlsplit(url)
    except ValueError:
        return None


def _is_valid_host(host: str) -> bool:
    if not host:
        return False
    if ":" in host:
        try:
            ipaddress.IPv6Address(host.split("%", 1)[0])
        except ValueError:
            return False
        return True
    return bool(_HOSTNAME_RE.match(host))


def _scheme_of(name: str) -> Scheme:
    lowered = name.lower()
    if lowered == "http":
        return Scheme.HTTP
    if lowered == "https":
        return Scheme.HTTPS
    return Scheme.OTHER if lowered else Scheme.NONE


# ============================================================================
# Query Codec
# ============================================================================

def split_query(query: str) -> list[QueryPair]:
    """Split a raw query string into ordered (key, value) pairs.

    Keys and values are kept percent-encoded. Empty segments (``a=1&&b=2``)
    are dropped; a segment without ``=`` gets a value of None.
    """
    pairs: list[QueryPair] = []
    if not query:
        return pairs
    for segment in query.split("&"):
        if not segment:
            continue
        key, sep, value = segment.partition("=")
        pairs.append((key, value if sep else None))
    return pairs


def join_query(pairs: Iterable[QueryPair]) -> str:
    """Inverse of split_query."""
    return "&".join(key if value is None else f"{key}={value}" for key, value in pairs)


def replace_query(url: str, query: str) -> str:
    """Swap the query of a URL, leaving every other character as written.

    Splits on the first ``#`` and then the first ``?``, the same way
    urlsplit does. An empty query drops the ``?``.
    """
    head, hash_mark, fragment = url.partition("#")
    base = head.partition("?")[0]
    return base + (f"?{query}" if query else "") + hash_mark + fragment


def param_key(key: str) -> str:
    """Decoded form of a raw query key, used for name matching."""
    return unquote_plus(key)


def key_in(key: str, names: frozenset[str] | set[str]) -> bool:
    """Check a raw query key against a set of parameter names.

    Both the raw and the decoded key are tried, so ``%24deep_link`` and
    ``$deep_link`` style entries both match.
    """
    return key in names or param_key(key) in names


# ============================================================================
# Parsing & Validation
# ============================================================================

def parse(raw: str) -> Optional[ParsedURL]:
    """Parse a URL string.

    Args:
        raw: URL to parse

    Returns:
        ParsedURL for a valid URL, None otherwise
    """
    if not raw or not isinstance(raw, str):
        return None

    if _FORBIDDEN_CHARS_RE.search(raw):
        return None

    parts = _split(raw)
    if parts is None:
        return None

    scheme_name = parts.scheme
    if not scheme_name or not _SCHEME_RE.match(scheme_name):
        return None

    try:
        host = parts.hostname or ""
        parts.port  # raises ValueError on a non-numeric port
    except ValueError:
        return None

    if scheme_name.lower() in HOSTLESS_SCHEMES:
        if not parts.netloc and not parts.path:
            return None
    elif not parts.netloc or not _is_valid_host(host):
        return None

    return ParsedURL(
        scheme=_scheme_of(scheme_name),
        host=host,
        path=parts.path,
        query=tuple(split_query(parts.query)),
        fragment=parts.fragment or None,
        scheme_name=scheme_name,
        netloc=parts.netloc,
        slashes=raw[len(scheme_name) + 1:].startswith("//"),
    )


def is_valid(url: str) -> bool:
    """Check if a URL is valid.

    Loose validation rather than a full RFC 3986 grammar: a scheme is
    required, and every scheme except mailto/news/file also needs a
    well-formed host.
    """
    return parse(url) is not None


# ============================================================================
# Projections
# ============================================================================

def get_scheme(url: str) -> str:
    """Lower-cased scheme or empty string."""
    parts = _split(url) if url else None
    return parts.scheme if parts else ""


def get_domain(url: str) -> str:
    """Host of a URL (lower-cased) or empty string."""
    parts = _split(url) if url else None
    if parts is None:
        return ""
    try:
        return parts.hostname or ""
    except ValueError:
        return ""


def get_path(url: str) -> str:
    parts = _split(url) if url else None
    return parts.path if parts else ""


def get_query(url: str) -> str:
    parts = _split(url) if url else None
    return parts.query if parts else ""


def get_fragment(url: str) -> str:
    parts = _split(url) if url else None
    return parts.fragment if parts else ""


def get_extension(url: str) -> str:
    """File extension of the last path segment, lower-cased.

    The query string is never consulted, so ``/img.php?f=a.png`` yields
    ``php``.
    """
    basename = get_path(url).rsplit("/", 1)[-1]
    if "." not in basename:
        return ""
    return basename.rsplit(".", 1)[1].lower()
