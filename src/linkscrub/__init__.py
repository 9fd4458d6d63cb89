"""linkscrub - URL normalization, classification and tracking parameter removal."""

__version__ = "0.1.0"
