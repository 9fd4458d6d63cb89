"""Tracking parameter stripping.

This package provides the cleaning half of linkscrub:
- URLCleaner: strip, has_tracking, strip_multiple, sanitize
- TrackingParameterSet: the shared, grow-only set of tracked names
- RemovalPolicy: per-call custom/keep adjustments
- TRACKING_PARAMS: the built-in table
"""

from linkscrub.cleaner.cleaner import URLCleaner
from linkscrub.cleaner.params import TRACKING_PARAMS
from linkscrub.cleaner.tracking import RemovalPolicy, TrackingParameterSet

__all__ = [
    "URLCleaner",
    "TrackingParameterSet",
    "RemovalPolicy",
    "TRACKING_PARAMS",
]
