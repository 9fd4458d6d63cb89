"""URL parsing, validation and normalization.

This package provides the structural core of linkscrub:
- parse/is_valid and the component projections (get_domain, get_path, ...)
- URLNormalizer: scheme rewriting, external detection, relativization
- SiteContext/StaticSite: the reference site URLs are judged against
"""

from linkscrub.url.parser import (
    get_domain,
    get_extension,
    get_path,
    get_query,
    is_valid,
    parse,
)
from linkscrub.url.normalizer import URLNormalizer
from linkscrub.url.site import SiteContext, StaticSite

__all__ = [
    "parse",
    "is_valid",
    "get_domain",
    "get_path",
    "get_query",
    "get_extension",
    "URLNormalizer",
    "SiteContext",
    "StaticSite",
]
