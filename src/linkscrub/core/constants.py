"""Constants used throughout linkscrub.

This module contains enums, default extension sets, and static defaults
to ensure consistency across the application.
"""

from enum import Enum


class Scheme(Enum):
    """URL scheme classes recognized by the parser."""
    HTTP = "http"
    HTTPS = "https"
    OTHER = "other"
    NONE = "none"


class Location(Enum):
    """Location of a URL relative to the reference site."""
    EXTERNAL = "external"
    INTERNAL = "internal"


class FileType(Enum):
    """File type categories derived from the path extension."""
    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"


class PlatformCategory(Enum):
    """Platform classification axes."""
    VIDEO = "video_platform"
    AUDIO = "audio_platform"
    SOCIAL = "social_platform"


# Schemes that are valid without a host
HOSTLESS_SCHEMES = frozenset({"mailto", "news", "file"})

# Target schemes accepted by add_scheme, anything else falls back to https
WEB_SCHEMES = ("http", "https")


IMAGE_EXTENSIONS = frozenset({
    'jpg', 'jpeg', 'png', 'gif', 'webp', 'svg', 'bmp', 'tiff', 'tif', 'ico',
    'psd', 'ai', 'eps', 'raw', 'cr2', 'nef', 'orf', 'sr2',
    'avif', 'heic', 'heif', 'jfif', 'pjpeg', 'pjp',
})

VIDEO_EXTENSIONS = frozenset({
    'mp4', 'avi', 'mov', 'wmv', 'flv', 'webm', 'mkv', 'm4v', 'mpg', 'mpeg',
    'mpe', 'mp2', '3gp', '3g2', 'f4v', 'asf', 'rm', 'rmvb', 'vob', 'ogv',
    'drc', 'mng', 'qt', 'yuv', 'viv', 'amv', 'divx',
})

AUDIO_EXTENSIONS = frozenset({
    'mp3', 'wav', 'ogg', 'flac', 'aac', 'm4a', 'wma', 'aiff', 'au', 'ra',
    'ape', 'opus', 'gsm', 'dts', 'amr', 'awb', 'dvf', 'dss', 'msv', 'nmf',
    'sln', 'mp2', 'mpc', 'aif', 'aifc', '3ga',
})

DEFAULT_EXTENSIONS = {
    FileType.IMAGE: IMAGE_EXTENSIONS,
    FileType.VIDEO: VIDEO_EXTENSIONS,
    FileType.AUDIO: AUDIO_EXTENSIONS,
}

# Content types the checker treats as web pages rather than downloads
WEB_CONTENT_TYPES = frozenset({
    'text/html',
    'text/xml',
    'application/xml',
    'application/xhtml+xml',
    'text/plain',
})


# Application-wide defaults
DEFAULTS = {
    "timeout": 10,
    "min_timeout": 1,
    "max_redirects": 5,
    "concurrency": 10,
    "user_agent": "linkscrub/0.1.0",
}
