"""Reachability probing.

This package provides the network-facing collaborator of linkscrub:
- URLChecker: probe(url, timeout) -> ReachabilityInfo, plus bulk helpers
"""

from linkscrub.checker.checker import URLChecker

__all__ = [
    "URLChecker",
]
