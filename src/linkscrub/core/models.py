"""Core data models for linkscrub.

This module defines the value types shared by the parser, classifier,
cleaner and the reachability checker.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from linkscrub.core.constants import FileType, PlatformCategory, Scheme


# ============================================================================
# Parsed URL Model
# ============================================================================

QueryPair = tuple[str, Optional[str]]


@dataclass(frozen=True)
class ParsedURL:
    """Immutable decomposition of a valid URL.

    Query pairs keep their raw, still percent-encoded text so that pairs
    nobody touched serialize back exactly as they came in. A value of None
    means the key appeared without an ``=``.
    """
    scheme: Scheme
    host: str                               # Lower-cased hostname
    path: str = ""
    query: tuple[QueryPair, ...] = ()
    fragment: Optional[str] = None
    scheme_name: str = ""                   # Literal scheme, e.g. "ftp"
    netloc: str = ""                        # Literal authority incl. userinfo/port
    slashes: bool = True                    # Written with "//" (file:///x), even if netloc is empty

    @property
    def is_web(self) -> bool:
        """Check if URL uses http or https."""
        return self.scheme in (Scheme.HTTP, Scheme.HTTPS)

    @property
    def query_string(self) -> str:
        return "&".join(key if value is None else f"{key}={value}" for key, value in self.query)

    def param_names(self) -> list[str]:
        """Query keys in order of appearance (duplicates included)."""
        return [key for key, _ in self.query]

    def with_query(self, pairs: list[QueryPair] | tuple[QueryPair, ...]) -> "ParsedURL":
        """Return a copy carrying a different query."""
        return ParsedURL(
            scheme=self.scheme,
            host=self.host,
            path=self.path,
            query=tuple(pairs),
            fragment=self.fragment,
            scheme_name=self.scheme_name,
            netloc=self.netloc,
            slashes=self.slashes,
        )

    def geturl(self) -> str:
        """Serialize back into a URL string.

        Scheme, authority and path are written as they were parsed, so
        host-less forms such as ``file:doc.txt`` or ``mailto:a@b.c`` keep
        their shape.
        """
        url = f"{self.scheme_name}:"
        if self.netloc or self.slashes:
            url += f"//{self.netloc}"
        url += self.path
        if self.query:
            url += f"?{self.query_string}"
        if self.fragment:
            url += f"#{self.fragment}"
        return url


# ============================================================================
# Classification Models
# ============================================================================

@dataclass
class ClassificationResult:
    """Result of URL type and platform classification."""
    url: str
    file_type: Optional[FileType] = None
    platforms: list[str] = field(default_factory=list)   # PlatformCategory values

    @property
    def is_media(self) -> bool:
        """Check if URL points at an image, video or audio file."""
        return self.file_type is not None

    @property
    def is_video_platform(self) -> bool:
        return PlatformCategory.VIDEO.value in self.platforms

    @property
    def is_audio_platform(self) -> bool:
        return PlatformCategory.AUDIO.value in self.platforms

    @property
    def is_social_platform(self) -> bool:
        return PlatformCategory.SOCIAL.value in self.platforms

    @property
    def is_video(self) -> bool:
        """Video file or video platform; the two checks are OR-ed, never exclusive."""
        return self.file_type == FileType.VIDEO or self.is_video_platform

    @property
    def is_audio(self) -> bool:
        return self.file_type == FileType.AUDIO or self.is_audio_platform


# ============================================================================
# Reachability Model
# ============================================================================

@dataclass
class ReachabilityInfo:
    """Outcome of probing a URL over the network."""
    reachable: bool
    status_code: Optional[int] = None
    final_url: Optional[str] = None
    content_type: Optional[str] = None
    error: Optional[str] = None

    @property
    def failed(self) -> bool:
        """Check if the probe itself failed (as opposed to a non-2xx answer)."""
        return self.error is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "reachable": self.reachable,
            "status_code": self.status_code,
            "final_url": self.final_url,
            "content_type": self.content_type,
            "error": self.error,
        }
