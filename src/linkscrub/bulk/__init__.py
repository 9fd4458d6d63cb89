"""Bulk operations over URL collections.

This package provides:
- extract: pull valid http(s) URLs out of free text
- URLDeduper: exact-string deduplication
- URLFilter: validity, location, protocol and type filters plus projections
"""

from linkscrub.bulk.deduper import URLDeduper
from linkscrub.bulk.extractor import extract
from linkscrub.bulk.filters import URLFilter

__all__ = [
    "extract",
    "URLDeduper",
    "URLFilter",
]
