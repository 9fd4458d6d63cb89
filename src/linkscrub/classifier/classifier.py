"""URL classification by file type and platform.

This module provides structural URL classification: the file type
category comes from the path extension, the platform categories
(video, audio, social) from ordered tables of regex signatures. Nothing
here touches the network or inspects content.
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Optional

from linkscrub.classifier.platforms import (
    AUDIO_PLATFORMS,
    SOCIAL_PLATFORMS,
    VIDEO_PLATFORMS,
)
from linkscrub.core.constants import DEFAULT_EXTENSIONS, FileType, PlatformCategory
from linkscrub.core.models import ClassificationResult
from linkscrub.url.parser import get_extension


@dataclass
class PlatformRule:
    """Signature identifying URLs of a named external platform.

    Patterns are compiled case-sensitively and searched in the full URL
    text, so they may anchor on host and path (and query, e.g. ``watch?v=``).
    """
    name: str
    category: PlatformCategory
    pattern: str
    description: str = ""
    compiled: re.Pattern = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Compile regex pattern after initialization."""
        self.compiled = re.compile(self.pattern)

    def matches(self, url: str) -> bool:
        return self.compiled.search(url) is not None


def build_rules(category: PlatformCategory, table: Iterable[tuple[str, str]]) -> list[PlatformRule]:
    """Turn a (name, pattern) table into PlatformRule objects, keeping order."""
    return [PlatformRule(name=name, category=category, pattern=pattern) for name, pattern in table]


def _extension_set(extensions: Optional[Iterable[str]], default: frozenset[str]) -> frozenset[str]:
    if not extensions:
        return default
    return frozenset(ext.lower().lstrip(".") for ext in extensions)


class URLClassifier:
    """Classify URLs by file type and platform.

    File types:
    - image, video, audio: from the last path segment's extension

    Platform categories (independent axes, a URL can match several):
    - video_platform: YouTube, Vimeo, TikTok, Twitch, ...
    - audio_platform: Spotify, SoundCloud, Bandcamp, podcast hosts, ...
    - social_platform: Facebook, X, Reddit, Mastodon, ...
    """

    def __init__(
        self,
        *,
        custom_rules: Optional[list[PlatformRule]] = None,
        image_extensions: Optional[Iterable[str]] = None,
        video_extensions: Optional[Iterable[str]] = None,
        audio_extensions: Optional[Iterable[str]] = None,
    ):
        """Initialize URLClassifier.

        Args:
            custom_rules: Extra platform rules, appended after the built-in ones
            image_extensions: Replaces the default image extension set
            video_extensions: Replaces the default video extension set
            audio_extensions: Replaces the default audio extension set
        """
        self.extensions = {
            FileType.IMAGE: _extension_set(image_extensions, DEFAULT_EXTENSIONS[FileType.IMAGE]),
            FileType.VIDEO: _extension_set(video_extensions, DEFAULT_EXTENSIONS[FileType.VIDEO]),
            FileType.AUDIO: _extension_set(audio_extensions, DEFAULT_EXTENSIONS[FileType.AUDIO]),
        }
        self.rules = self._create_default_rules()

        for rule in custom_rules or []:
            self.add_rule(rule)

    def _create_default_rules(self) -> dict[PlatformCategory, list[PlatformRule]]:
        return {
            PlatformCategory.VIDEO: build_rules(PlatformCategory.VIDEO, VIDEO_PLATFORMS),
            PlatformCategory.AUDIO: build_rules(PlatformCategory.AUDIO, AUDIO_PLATFORMS),
            PlatformCategory.SOCIAL: build_rules(PlatformCategory.SOCIAL, SOCIAL_PLATFORMS),
        }

    def add_rule(self, rule: PlatformRule) -> None:
        """Append a rule to the end of its category's table."""
        self.rules[rule.category].append(rule)

    # ------------------------------------------------------------------
    # File types
    # ------------------------------------------------------------------

    def _has_extension(self, url: str, file_type: FileType, extensions: Optional[Iterable[str]]) -> bool:
        extension = get_extension(url)
        if not extension:
            return False
        return extension in _extension_set(extensions, self.extensions[file_type])

    def is_image(self, url: str, extensions: Optional[Iterable[str]] = None) -> bool:
        """Check if URL points at an image file.

        Args:
            url: URL to check
            extensions: Replaces (never extends) the default extension set

        Returns:
            True if the path extension is a recognized image extension
        """
        return self._has_extension(url, FileType.IMAGE, extensions)

    def is_video(self, url: str, extensions: Optional[Iterable[str]] = None) -> bool:
        return self._has_extension(url, FileType.VIDEO, extensions)

    def is_audio(self, url: str, extensions: Optional[Iterable[str]] = None) -> bool:
        return self._has_extension(url, FileType.AUDIO, extensions)

    def file_type(self, url: str) -> Optional[FileType]:
        """First of image, video, audio whose extension set matches."""
        extension = get_extension(url)
        if not extension:
            return None
        for file_type, extensions in self.extensions.items():
            if extension in extensions:
                return file_type
        return None

    # ------------------------------------------------------------------
    # Platforms
    # ------------------------------------------------------------------

    def matching_rule(self, url: str, category: PlatformCategory) -> Optional[PlatformRule]:
        """First rule of a category matching the URL, in table order."""
        if not url:
            return None
        for rule in self.rules[category]:
            if rule.matches(url):
                return rule
        return None

    def is_video_platform(self, url: str) -> bool:
        return self.matching_rule(url, PlatformCategory.VIDEO) is not None

    def is_audio_platform(self, url: str) -> bool:
        return self.matching_rule(url, PlatformCategory.AUDIO) is not None

    def is_social_platform(self, url: str) -> bool:
        return self.matching_rule(url, PlatformCategory.SOCIAL) is not None

    # ------------------------------------------------------------------
    # Combined
    # ------------------------------------------------------------------

    def classify(self, url: str) -> ClassificationResult:
        """Classify a single URL on every axis.

        Args:
            url: URL to classify

        Returns:
            ClassificationResult with file type and matched platform categories
        """
        platforms = [
            category.value
            for category in PlatformCategory
            if self.matching_rule(url, category) is not None
        ]
        return ClassificationResult(url=url, file_type=self.file_type(url), platforms=platforms)

    def classify_batch(self, urls: list[str]) -> list[ClassificationResult]:
        return [self.classify(url) for url in urls]
