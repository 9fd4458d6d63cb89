"""URL type and platform classification.

This package provides structural URL classification:
- URLClassifier: file type (image/video/audio) and platform checks
- PlatformRule: one (category, pattern) signature of the platform tables
"""

from linkscrub.classifier.classifier import PlatformRule, URLClassifier, build_rules

__all__ = [
    "URLClassifier",
    "PlatformRule",
    "build_rules",
]
